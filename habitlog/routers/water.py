"""
Water router.

GET    /water/today
GET    /water/week
POST   /water
PUT    /water/{entry_id}
DELETE /water/{entry_id}
"""
from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from habitlog.core.clock import Clock, get_clock
from habitlog.core.errors import EntryNotFoundError
from habitlog.db.base import get_db
from habitlog.routers.params import EntryId
from habitlog.schemas.common import ErrorResponse
from habitlog.schemas.habits import WaterIntakeIn, WaterIntakeOut, WaterToday
from habitlog.services.domains import water
from habitlog.services.week import resolve_week_start

router = APIRouter(prefix="/water", tags=["water"])


@router.get(
    "/today",
    response_model=WaterToday,
    summary="Today's water intake",
)
def water_today(db: Session = Depends(get_db), clock: Clock = Depends(get_clock)):
    """All of today's entries, the total in mL and the recommended daily amount."""
    today = clock.today()
    return WaterToday(
        date=today,
        total_ml=water.daily_total(db, today),
        recommended_ml=water.recommended(db),
        entries=[WaterIntakeOut.model_validate(e) for e in water.entries_for_day(db, today)],
    )


@router.get(
    "/week",
    response_model=dict[date, int],
    summary="Daily water totals for a week",
)
def water_week(
    week_start: Optional[date] = Query(
        default=None,
        description="First day of the 7-day window. Defaults to this week's Monday.",
        examples=["2026-10-12"],
    ),
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    """Total mL per day; days without entries report 0."""
    return water.weekly(db, resolve_week_start(week_start, clock.today()))


@router.post(
    "",
    response_model=WaterIntakeOut,
    status_code=status.HTTP_201_CREATED,
    summary="Log water intake for today",
)
def add_water(
    payload: WaterIntakeIn,
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    entry = water.add(db, clock.today(), amount_ml=payload.amount_ml)
    return WaterIntakeOut.model_validate(entry)


@router.put(
    "/{entry_id}",
    response_model=WaterIntakeOut,
    summary="Change the amount of a water entry",
    responses={404: {"model": ErrorResponse, "description": "No such entry."}},
)
def update_water(entry_id: EntryId, payload: WaterIntakeIn, db: Session = Depends(get_db)):
    entry = water.update(db, entry_id, amount_ml=payload.amount_ml)
    if entry is None:
        raise EntryNotFoundError(domain=water.name, entry_id=entry_id)
    return WaterIntakeOut.model_validate(entry)


@router.delete(
    "/{entry_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a water entry",
    responses={404: {"model": ErrorResponse, "description": "No such entry."}},
)
def delete_water(entry_id: EntryId, db: Session = Depends(get_db)):
    if not water.delete(db, entry_id):
        raise EntryNotFoundError(domain=water.name, entry_id=entry_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
