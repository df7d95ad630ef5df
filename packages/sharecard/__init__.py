"""
Share Card Package

This package owns the privacy side of the share card feature: a user picks
a privacy preset (optionally tweaking individual flags) and every profile
in their roster is redacted before a template draws it.

Key pieces:
- PresetResolver: preset name -> PrivacySettings (Public, Semi, Private)
- PrivacyTransformer: applies PrivacySettings to a Profile, returning a copy
- Roster helpers: map roster store records to Profiles, recency ordering

Rendering, image capture and export live outside this package and only
consume the redacted profiles.

Usage:
    from sharecard import resolve_preset, apply_privacy_settings, customize

    settings = customize(resolve_preset("Semi"), show_names=True)
    card_profiles = [apply_privacy_settings(p, settings) for p in roster]
"""

from .models import (
    Profile,
    PrivacySettings,
    PrivacyPreset,
    PrivacyFlag,
    RelationshipCategory,
    PRIVACY_TOGGLES,
)
from .presets import PresetResolver, get_resolver, resolve_preset
from .privacy import (
    PrivacyTransformer,
    get_transformer,
    apply_privacy_settings,
    customize,
    redacted_fields,
)
from .roster import profile_from_contact, map_relationship, most_recent
from .sample_roster import generate_sample_roster
from .config import ShareCardConfig, get_config
from .logging_utils import setup_logging

__all__ = [
    "Profile",
    "PrivacySettings",
    "PrivacyPreset",
    "PrivacyFlag",
    "RelationshipCategory",
    "PRIVACY_TOGGLES",
    "PresetResolver",
    "get_resolver",
    "resolve_preset",
    "PrivacyTransformer",
    "get_transformer",
    "apply_privacy_settings",
    "customize",
    "redacted_fields",
    "profile_from_contact",
    "map_relationship",
    "most_recent",
    "generate_sample_roster",
    "ShareCardConfig",
    "get_config",
    "setup_logging",
]
