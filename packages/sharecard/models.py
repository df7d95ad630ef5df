"""
Pydantic models for share cards.

These models define the data contract the privacy engine works on:
- Profile: one entry of the user's contact roster
- PrivacySettings: the six field-group visibility flags
- PrivacyPreset: named bundles of flag defaults

Attribute names are snake_case; the camelCase aliases are the shape the
roster store and the settings editor exchange, so both spellings are accepted
and `model_dump(by_alias=True)` reproduces the shared keys exactly.
"""

from datetime import datetime, timezone
from typing import Optional, List, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from enum import Enum


class RelationshipCategory(str, Enum):
    """How a roster entry relates to the user."""
    FRIEND = "Friend"
    FAMILY = "Family"
    WORK = "Work"
    DATING = "Dating"
    OTHER = "Other"


class PrivacyPreset(str, Enum):
    """Named privacy presets offered in the share screen."""
    PUBLIC = "Public"
    SEMI = "Semi"
    PRIVATE = "Private"


class PrivacyFlag(str, Enum):
    """The six redactable field groups, one per PrivacySettings flag."""
    NAMES = "show_names"
    PHOTOS = "show_photos"
    NOTES = "show_notes"
    PHONE = "show_phone"
    COMPANY_TITLE = "show_company_title"   # company and title go together
    KIDS_PETS = "show_kids_pets"


class Profile(BaseModel):
    """
    A roster entry as handed to share card templates.

    `id`, `relationship` and `created_at` are always present. Every other
    optional field uses None for "not set", which is also what redaction
    produces.
    """
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    id: str
    first_name: str = ""
    last_name: str = ""
    avatar_url: Optional[str] = None
    relationship: RelationshipCategory

    # Display order matters, duplicates are allowed
    tags: List[str] = Field(default_factory=list)

    notes: Optional[str] = None
    phone: Optional[str] = None
    company: Optional[str] = None
    title: Optional[str] = None
    kids_count: Optional[int] = Field(default=None, ge=0)

    # Only used for recency ordering
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # Stored timestamps without an offset are UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @property
    def display_name(self) -> str:
        """First and last name joined for display."""
        if self.last_name:
            return f"{self.first_name} {self.last_name}"
        return self.first_name


class PrivacySettings(BaseModel):
    """
    Visibility flags for one render session.

    This is a value type: frozen, hashable and compared by value. Use
    `with_flag` to derive a customized copy.
    """
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    show_names: bool = False
    show_photos: bool = False
    show_notes: bool = False
    show_phone: bool = False
    show_company_title: bool = False
    show_kids_pets: bool = False

    @classmethod
    def fully_visible(cls) -> "PrivacySettings":
        """Settings that let every field through unchanged."""
        return cls(**{flag.value: True for flag in PrivacyFlag})

    @classmethod
    def fully_hidden(cls) -> "PrivacySettings":
        """Settings that redact every field group."""
        return cls(**{flag.value: False for flag in PrivacyFlag})

    def is_enabled(self, flag: PrivacyFlag) -> bool:
        return getattr(self, PrivacyFlag(flag).value)

    def with_flag(self, flag: PrivacyFlag, value: bool) -> "PrivacySettings":
        """Return a copy with a single flag overridden.

        The value is validated like any other field: "false" means False and
        values that cannot be read as a boolean raise ValidationError.
        """
        data = self.model_dump()
        data[PrivacyFlag(flag).value] = value
        return type(self).model_validate(data)


# Toggles shown by the advanced privacy editor, in display order
PRIVACY_TOGGLES: List[Tuple[PrivacyFlag, str]] = [
    (PrivacyFlag.NAMES, "Show Names"),
    (PrivacyFlag.PHOTOS, "Show Photos"),
    (PrivacyFlag.NOTES, "Show Notes"),
    (PrivacyFlag.PHONE, "Show Phone Numbers"),
    (PrivacyFlag.COMPANY_TITLE, "Show Company & Title"),
    (PrivacyFlag.KIDS_PETS, "Show Kids & Pets"),
]
