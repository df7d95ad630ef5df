"""
PrivacyTransformer - redacts profile fields according to PrivacySettings.

Every share card template runs its roster through this before drawing, so
the same settings always hide the same fields regardless of template.
The transform is a projection: applying it to its own output changes nothing.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .models import PrivacyFlag, PrivacySettings, Profile

logger = logging.getLogger(__name__)


# Fields cleared to None when the flag is off. Names are handled separately
# since they are shortened to initials instead of cleared.
CLEARED_FIELDS: Dict[PrivacyFlag, Tuple[str, ...]] = {
    PrivacyFlag.PHOTOS: ("avatar_url",),
    PrivacyFlag.NOTES: ("notes",),
    PrivacyFlag.PHONE: ("phone",),
    PrivacyFlag.COMPANY_TITLE: ("company", "title"),
    PrivacyFlag.KIDS_PETS: ("kids_count",),
}

NAME_FIELDS: Tuple[str, ...] = ("first_name", "last_name")


def initial(name: str) -> str:
    """Shorten a name to its first character plus a period ("" -> ".").

    An empty name that was already shortened stays "." on later passes.
    """
    if name == ".":
        return name
    return name[:1] + "."


def redacted_fields(flag: PrivacyFlag) -> Tuple[str, ...]:
    """Profile fields controlled by a flag."""
    flag = PrivacyFlag(flag)
    if flag is PrivacyFlag.NAMES:
        return NAME_FIELDS
    return CLEARED_FIELDS[flag]


class PrivacyTransformer:
    """
    Applies PrivacySettings to profiles.

    Stateless; the input profile is never modified and the result shares no
    mutable state with it.
    """

    def apply(self, profile: Profile, settings: PrivacySettings) -> Profile:
        """Return a redacted copy of a single profile."""
        update: Dict[str, Any] = {}

        if not settings.show_names:
            update["first_name"] = initial(profile.first_name)
            update["last_name"] = initial(profile.last_name)

        for flag, fields in CLEARED_FIELDS.items():
            if not settings.is_enabled(flag):
                for name in fields:
                    update[name] = None

        return profile.model_copy(update=update, deep=True)

    def apply_to_roster(
        self,
        profiles: Iterable[Profile],
        settings: PrivacySettings
    ) -> List[Profile]:
        """Run one transform pass over a roster, keeping its order."""
        redacted = [self.apply(profile, settings) for profile in profiles]
        logger.debug(
            "Transform pass over %d profiles (%s)",
            len(redacted),
            ", ".join(f"{k}={v}" for k, v in settings.model_dump().items()),
        )
        return redacted


def customize(settings: PrivacySettings, **overrides: bool) -> PrivacySettings:
    """
    Derive custom settings from a base value.

    Keyword names are PrivacyFlag values, e.g.
    `customize(resolve_preset("Semi"), show_names=True)`.
    Unknown names raise ValueError.
    """
    result = settings
    for name, value in overrides.items():
        result = result.with_flag(PrivacyFlag(name), value)
    return result


# Singleton instance for easy access
_transformer: Optional[PrivacyTransformer] = None


def get_transformer() -> PrivacyTransformer:
    """Get or create the singleton transformer instance."""
    global _transformer
    if _transformer is None:
        _transformer = PrivacyTransformer()
    return _transformer


def apply_privacy_settings(profile: Profile, settings: PrivacySettings) -> Profile:
    """Shortcut for `get_transformer().apply(profile, settings)`."""
    return get_transformer().apply(profile, settings)
