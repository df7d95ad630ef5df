"""
Sample roster setup.

Builds a demo roster for previews when the roster store is empty or
unavailable. Pass a seed to get the same roster every time.
"""

import logging
import random
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from .config import get_config
from .models import Profile, RelationshipCategory

logger = logging.getLogger(__name__)

FIRST_NAMES = [
    "Alex", "Sarah", "Mike", "Emma", "David", "Lisa", "John", "Maria",
    "Chris", "Anna", "Ryan", "Sophie", "Jake", "Olivia", "Matt",
]
LAST_NAMES = [
    "Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller",
    "Davis", "Rodriguez", "Martinez", "Hernandez", "Lopez", "Gonzalez",
    "Wilson", "Anderson",
]
RELATIONSHIPS = [
    RelationshipCategory.FRIEND,
    RelationshipCategory.FAMILY,
    RelationshipCategory.WORK,
    RelationshipCategory.DATING,
    RelationshipCategory.OTHER,
]
COMPANIES = [
    "Google", "Apple", "Microsoft", "Amazon", "Meta",
    "Netflix", "Spotify", "Uber", "Airbnb", "Tesla",
]
TITLES = [
    "Software Engineer", "Product Manager", "Designer", "Data Scientist",
    "Marketing Manager", "Sales Director", "Consultant", "Analyst",
    "Developer", "Coordinator",
]
TAGS = [
    "tech", "creative", "outdoorsy", "foodie", "traveler", "fitness",
    "music", "art", "sports", "books", "gaming", "photography",
]

MAX_AGE_DAYS = 180


def generate_sample_roster(
    count: Optional[int] = None,
    seed: Optional[int] = None,
    now: Optional[datetime] = None,
) -> List[Profile]:
    """
    Create `count` demo profiles (default: configured sample_roster_size).

    Names and relationships cycle through fixed lists; Work contacts get a
    company and title. Notes, phone numbers, kid counts and creation times
    (within the last 180 days) come from a `random.Random(seed)`.
    """
    if count is None:
        count = get_config().sample_roster_size
    rng = random.Random(seed)
    now = now or datetime.now(timezone.utc)

    profiles = []
    for i in range(count):
        relationship = RELATIONSHIPS[i % len(RELATIONSHIPS)]
        is_work = relationship is RelationshipCategory.WORK
        start = i % 3
        photo_id = 1000000 + i

        profiles.append(Profile(
            id=f"profile-{i + 1}",
            first_name=FIRST_NAMES[i % len(FIRST_NAMES)],
            last_name=LAST_NAMES[i % len(LAST_NAMES)],
            avatar_url=(
                f"https://images.pexels.com/photos/{photo_id}/"
                f"pexels-photo-{photo_id}.jpeg?auto=compress&cs=tinysrgb&w=150&h=150&dpr=2"
            ),
            relationship=relationship,
            tags=TAGS[start:start + 2 + rng.randint(0, 1)],
            notes=(
                f"Great person to know. Met through {relationship.value.lower()} connections."
                if rng.random() > 0.5 else None
            ),
            phone=(
                f"+1{rng.randint(1000000000, 9999999999)}"
                if rng.random() > 0.6 else None
            ),
            company=COMPANIES[i % len(COMPANIES)] if is_work else None,
            title=TITLES[i % len(TITLES)] if is_work else None,
            kids_count=rng.randint(1, 3) if rng.random() > 0.7 else None,
            created_at=now - timedelta(days=rng.randrange(MAX_AGE_DAYS)),
        ))

    logger.debug("Generated sample roster with %d profiles", len(profiles))
    return profiles
