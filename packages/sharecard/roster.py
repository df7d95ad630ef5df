"""
Roster helpers - turn roster store records into share card profiles.

The roster store keeps contacts in its own shape (a single `name`, free-form
relationship strings, tags as strings or dicts, a list of kids). Mapping
happens here, once, before any privacy transform runs. Records missing a
required field fail with pydantic's ValidationError.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from .models import Profile, RelationshipCategory


_RELATIONSHIP_MAP: Dict[str, RelationshipCategory] = {
    "family": RelationshipCategory.FAMILY,
    "friend": RelationshipCategory.FRIEND,
    "coworker": RelationshipCategory.WORK,
    "partner": RelationshipCategory.DATING,
}


def map_relationship(raw: Optional[str]) -> RelationshipCategory:
    """Map a stored relationship string to a category (default Other)."""
    if not raw:
        return RelationshipCategory.OTHER
    return _RELATIONSHIP_MAP.get(raw.lower(), RelationshipCategory.OTHER)


def _split_name(name: str) -> tuple:
    parts = name.split()
    if not parts:
        return name, ""
    return parts[0], " ".join(parts[1:])


def _tag_text(tag: Any) -> Optional[str]:
    if isinstance(tag, dict):
        return tag.get("text")
    return str(tag)


def _tag_list(tags: Any) -> List[str]:
    # Dict tags without text are dropped rather than shown blank
    if not isinstance(tags, list):
        return []
    texts = (_tag_text(t) for t in tags)
    return [text for text in texts if text is not None]


def _or_none(value: Any) -> Any:
    # The store writes empty strings for unset text fields
    return value if value else None


def profile_from_contact(record: Dict[str, Any]) -> Profile:
    """
    Convert a roster store record to a Profile.

    Args:
        record: Store record with `id`, `name`, `photoUri`, `relationship`,
            `tags`, `notes`, `phone`, `job`, `kids` and `createdAt` keys.

    Returns:
        The share card profile.
    """
    first_name, last_name = _split_name(record.get("name") or "")

    kids = record.get("kids")
    record_id = record.get("id")

    return Profile(
        id=str(record_id) if record_id is not None else None,
        first_name=first_name,
        last_name=last_name,
        avatar_url=_or_none(record.get("photoUri")),
        relationship=map_relationship(record.get("relationship")),
        tags=_tag_list(record.get("tags")),
        notes=_or_none(record.get("notes")),
        phone=_or_none(record.get("phone")),
        company=None,  # not kept by the roster store
        title=_or_none(record.get("job")),
        kids_count=len(kids) if isinstance(kids, list) else None,
        created_at=record.get("createdAt") or datetime.now(timezone.utc),
    )


def most_recent(
    profiles: Iterable[Profile],
    limit: Optional[int] = None
) -> List[Profile]:
    """Newest profiles first, optionally truncated to `limit`."""
    ordered = sorted(profiles, key=lambda p: p.created_at, reverse=True)
    if limit is not None:
        return ordered[:limit]
    return ordered
