"""
Profile router.

GET /profile
PUT /profile
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from habitlog.db.base import get_db
from habitlog.schemas.profile import ProfileOut, ProfileUpdate
from habitlog.services.profile import get_profile, update_profile

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get(
    "",
    response_model=Optional[ProfileOut],
    summary="Current profile",
    responses={200: {"description": "The profile, or null if none exists yet."}},
)
def read_profile(db: Session = Depends(get_db)):
    profile = get_profile(db)
    if profile is None:
        return None
    return ProfileOut.model_validate(profile)


@router.put(
    "",
    response_model=ProfileOut,
    summary="Replace the profile",
)
def replace_profile(payload: ProfileUpdate, db: Session = Depends(get_db)):
    """
    Full replacement of weight, height, age and today's sleep stats.
    Creates the profile if it does not exist yet.
    """
    profile = update_profile(
        db,
        weight=payload.weight,
        height=payload.height,
        age=payload.age,
        sleep_quality=payload.sleep_quality,
        sleep_hours=payload.sleep_hours,
    )
    return ProfileOut.model_validate(profile)
