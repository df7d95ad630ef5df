import os
from datetime import datetime, timezone

import pytest

# Keep local .env files and shell exports out of the tests
for _key in list(os.environ):
    if _key.startswith("SHARECARD_"):
        del os.environ[_key]

from sharecard.config import get_config
from sharecard.models import Profile, RelationshipCategory


@pytest.fixture(autouse=True)
def _fresh_config():
    """Drop the cached config so monkeypatched env vars take effect."""
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def full_profile():
    """A profile with every optional field set."""
    return Profile(
        id="profile-1",
        first_name="Alex",
        last_name="Smith",
        avatar_url="x",
        relationship=RelationshipCategory.WORK,
        tags=["tech", "foodie", "tech"],
        notes="n",
        phone="555",
        company="Acme",
        title="Eng",
        kids_count=2,
        created_at=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def sparse_profile():
    """A profile with only the required fields."""
    return Profile(
        id="profile-2",
        relationship=RelationshipCategory.OTHER,
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )
