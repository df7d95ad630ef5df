"""Tests for share card data models."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from sharecard.models import (
    PRIVACY_TOGGLES,
    PrivacyFlag,
    PrivacyPreset,
    PrivacySettings,
    Profile,
    RelationshipCategory,
)


class TestEnums:

    def test_relationship_spellings(self):
        assert [r.value for r in RelationshipCategory] == [
            "Friend", "Family", "Work", "Dating", "Other",
        ]

    def test_preset_spellings(self):
        assert [p.value for p in PrivacyPreset] == ["Public", "Semi", "Private"]


class TestProfile:

    def test_accepts_camel_case_keys(self):
        profile = Profile.model_validate({
            "id": "p1",
            "firstName": "Alex",
            "lastName": "Smith",
            "avatarUrl": "file://a.jpg",
            "relationship": "Friend",
            "tags": ["b", "a"],
            "kidsCount": 0,
            "createdAt": "2024-05-01T12:00:00.000Z",
        })
        assert profile.first_name == "Alex"
        assert profile.avatar_url == "file://a.jpg"
        assert profile.relationship is RelationshipCategory.FRIEND
        assert profile.tags == ["b", "a"]
        assert profile.kids_count == 0
        assert profile.created_at == datetime(2024, 5, 1, 12, tzinfo=timezone.utc)

    def test_dumps_shared_keys(self, full_profile):
        data = full_profile.model_dump(by_alias=True)
        assert set(data) == {
            "id", "firstName", "lastName", "avatarUrl", "relationship", "tags",
            "notes", "phone", "company", "title", "kidsCount", "createdAt",
        }

    def test_optional_fields_default_to_none(self, sparse_profile):
        assert sparse_profile.avatar_url is None
        assert sparse_profile.notes is None
        assert sparse_profile.phone is None
        assert sparse_profile.company is None
        assert sparse_profile.title is None
        assert sparse_profile.kids_count is None
        assert sparse_profile.tags == []

    @pytest.mark.parametrize("missing", ["id", "relationship", "created_at"])
    def test_required_fields(self, missing):
        data = {
            "id": "p1",
            "relationship": "Work",
            "created_at": "2024-05-01T12:00:00Z",
        }
        del data[missing]
        with pytest.raises(ValidationError):
            Profile(**data)

    def test_unknown_relationship_rejected(self):
        with pytest.raises(ValidationError):
            Profile(id="p1", relationship="Coworker", created_at="2024-05-01T12:00:00Z")

    def test_naive_created_at_assumed_utc(self):
        profile = Profile(
            id="p1", relationship="Friend", created_at=datetime(2024, 5, 1, 12),
        )
        assert profile.created_at.tzinfo is timezone.utc
        assert profile.created_at == datetime(2024, 5, 1, 12, tzinfo=timezone.utc)

    def test_offset_created_at_kept(self):
        profile = Profile(
            id="p1", relationship="Friend", created_at="2024-05-01T14:00:00+02:00",
        )
        assert profile.created_at == datetime(2024, 5, 1, 12, tzinfo=timezone.utc)

    def test_negative_kids_count_rejected(self):
        with pytest.raises(ValidationError):
            Profile(
                id="p1", relationship="Family", kids_count=-1,
                created_at="2024-05-01T12:00:00Z",
            )

    def test_frozen(self, full_profile):
        with pytest.raises(ValidationError):
            full_profile.phone = "123"

    def test_display_name(self, full_profile, sparse_profile):
        assert full_profile.display_name == "Alex Smith"
        assert sparse_profile.display_name == ""


class TestPrivacySettings:

    def test_defaults_hide_everything(self):
        assert PrivacySettings() == PrivacySettings.fully_hidden()

    def test_value_semantics(self):
        a = PrivacySettings(show_photos=True)
        b = PrivacySettings(show_photos=True)
        assert a == b
        assert hash(a) == hash(b)
        assert a != PrivacySettings()

    def test_camel_case_round_trip(self):
        settings = PrivacySettings.model_validate({
            "showNames": True,
            "showPhotos": False,
            "showNotes": True,
            "showPhone": False,
            "showCompanyTitle": True,
            "showKidsPets": False,
        })
        assert settings.show_company_title is True
        assert settings.model_dump(by_alias=True) == {
            "showNames": True,
            "showPhotos": False,
            "showNotes": True,
            "showPhone": False,
            "showCompanyTitle": True,
            "showKidsPets": False,
        }

    def test_with_flag_returns_new_value(self):
        base = PrivacySettings()
        changed = base.with_flag(PrivacyFlag.PHONE, True)
        assert changed.show_phone is True
        assert base.show_phone is False
        assert changed.model_dump(exclude={"show_phone"}) == base.model_dump(exclude={"show_phone"})

    def test_with_flag_reads_string_booleans(self):
        settings = PrivacySettings.fully_visible().with_flag(PrivacyFlag.NAMES, "false")
        assert settings.show_names is False

    def test_with_flag_rejects_non_boolean(self):
        with pytest.raises(ValidationError):
            PrivacySettings().with_flag(PrivacyFlag.NAMES, "sometimes")

    def test_with_flag_accepts_flag_name(self):
        assert PrivacySettings().with_flag("show_notes", True).show_notes is True

    def test_is_enabled(self):
        settings = PrivacySettings.fully_visible()
        assert all(settings.is_enabled(flag) for flag in PrivacyFlag)

    def test_frozen(self):
        with pytest.raises(ValidationError):
            PrivacySettings().show_names = True


class TestPrivacyToggles:

    def test_one_toggle_per_flag_in_order(self):
        assert [flag for flag, _ in PRIVACY_TOGGLES] == list(PrivacyFlag)

    def test_labels(self):
        assert dict(PRIVACY_TOGGLES)[PrivacyFlag.COMPANY_TITLE] == "Show Company & Title"
        assert dict(PRIVACY_TOGGLES)[PrivacyFlag.PHONE] == "Show Phone Numbers"

    def test_flags_name_settings_fields(self):
        assert [flag.value for flag in PrivacyFlag] == list(PrivacySettings.model_fields)
