"""
PresetResolver - maps a named privacy preset to concrete settings.

Public and Private deliberately resolve to the same all-hidden settings.
Semi lets photos through; templates are expected to blur them.
"""

import logging
from typing import Dict, List, Optional, Union

from .config import get_config
from .models import PrivacyPreset, PrivacySettings

logger = logging.getLogger(__name__)


PRESET_TABLE: Dict[PrivacyPreset, PrivacySettings] = {
    PrivacyPreset.PUBLIC: PrivacySettings(
        show_names=False,
        show_photos=False,
        show_notes=False,
        show_phone=False,
        show_company_title=False,
        show_kids_pets=False,
    ),
    PrivacyPreset.SEMI: PrivacySettings(
        show_names=False,
        show_photos=True,
        show_notes=False,
        show_phone=False,
        show_company_title=True,
        show_kids_pets=True,
    ),
    PrivacyPreset.PRIVATE: PrivacySettings(
        show_names=False,
        show_photos=False,
        show_notes=False,
        show_phone=False,
        show_company_title=False,
        show_kids_pets=False,
    ),
}

FALLBACK_PRESET = PrivacyPreset.PRIVATE


class PresetResolver:
    """
    Deterministic preset -> PrivacySettings lookup.

    Accepts a PrivacyPreset or its string spelling ("Public", "Semi",
    "Private"). Anything else resolves as Private; resolution never fails.
    """

    def resolve(self, preset: Union[PrivacyPreset, str]) -> PrivacySettings:
        """Get the settings for a preset."""
        try:
            key = PrivacyPreset(preset)
        except ValueError:
            logger.warning(
                "Unknown privacy preset %r, falling back to %s",
                preset, FALLBACK_PRESET.value,
            )
            key = FALLBACK_PRESET
        # Settings are frozen, so handing out the table entry is safe
        return PRESET_TABLE[key]

    def presets(self) -> List[PrivacyPreset]:
        """All presets in display order."""
        return [PrivacyPreset.PUBLIC, PrivacyPreset.SEMI, PrivacyPreset.PRIVATE]

    def default_settings(self) -> PrivacySettings:
        """Settings for the configured default preset."""
        return self.resolve(get_config().default_preset)


# Singleton instance for easy access
_resolver: Optional[PresetResolver] = None


def get_resolver() -> PresetResolver:
    """Get or create the singleton resolver instance."""
    global _resolver
    if _resolver is None:
        _resolver = PresetResolver()
    return _resolver


def resolve_preset(preset: Union[PrivacyPreset, str]) -> PrivacySettings:
    """Shortcut for `get_resolver().resolve(preset)`."""
    return get_resolver().resolve(preset)
