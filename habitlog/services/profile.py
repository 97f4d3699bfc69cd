"""
Profile provider.

There is one profile per deployment. Read paths use `get_profile` and must
cope with None; write paths that attribute a new entry call `ensure_profile`
first, which creates and commits a zero-valued profile when none exists yet.

Lifecycle: absent → present(default) via ensure_profile
                  → present(user-supplied) via update_profile.
Nothing deletes a profile.
"""
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from habitlog.models.profile import Profile

logger = logging.getLogger(__name__)


def get_profile(db: Session) -> Optional[Profile]:
    return db.query(Profile).order_by(Profile.id).first()


def _default_profile() -> Profile:
    return Profile(
        weight=Decimal("0"),
        height=Decimal("0"),
        age=0,
        sleep_quality=0,
        sleep_hours=Decimal("0"),
    )


def ensure_profile(db: Session) -> Profile:
    """Return the profile, creating and committing a default one if absent."""
    profile = get_profile(db)
    if profile is not None:
        return profile

    profile = _default_profile()
    db.add(profile)
    db.commit()
    db.refresh(profile)
    logger.info("Created default profile id=%s", profile.id)
    return profile


def update_profile(
    db: Session,
    *,
    weight: Decimal,
    height: Decimal,
    age: int,
    sleep_quality: int,
    sleep_hours: Decimal,
) -> Profile:
    """Overwrite every scalar field at once. Creates the profile if needed."""
    profile = get_profile(db)
    if profile is None:
        profile = _default_profile()
        db.add(profile)

    profile.weight = weight
    profile.height = height
    profile.age = age
    profile.sleep_quality = sleep_quality
    profile.sleep_hours = sleep_hours

    db.commit()
    db.refresh(profile)
    logger.info("Updated profile id=%s", profile.id)
    return profile
