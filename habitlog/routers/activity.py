"""
Physical activity router.

GET    /physical-activity/today
GET    /physical-activity/week
POST   /physical-activity
PUT    /physical-activity/{entry_id}
DELETE /physical-activity/{entry_id}
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
from habitlog.schemas.habits import ActivityToday, PhysicalActivityIn, PhysicalActivityOut
from habitlog.services.domains import activity
from habitlog.services.week import resolve_week_start

router = APIRouter(prefix="/physical-activity", tags=["physical-activity"])


@router.get("/today", response_model=ActivityToday, summary="Today's workouts")
def activity_today(db: Session = Depends(get_db), clock: Clock = Depends(get_clock)):
    today = clock.today()
    entries = activity.entries_for_day(db, today)
    return ActivityToday(
        date=today,
        total_minutes=sum(e.duration_minutes for e in entries),
        entries=[PhysicalActivityOut.model_validate(e) for e in entries],
    )


@router.get(
    "/week",
    response_model=dict[date, list[PhysicalActivityOut]],
    summary="Workouts grouped by day of a week",
)
def activity_week(
    week_start: Optional[date] = Query(
        default=None,
        description="First day of the 7-day window. Defaults to this week's Monday.",
    ),
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    """Every day of the window is present; rest days map to an empty list."""
    week = activity.weekly(db, resolve_week_start(week_start, clock.today()))
    return {
        day: [PhysicalActivityOut.model_validate(a) for a in sessions]
        for day, sessions in week.items()
    }


@router.post(
    "",
    response_model=PhysicalActivityOut,
    status_code=status.HTTP_201_CREATED,
    summary="Log a workout for today",
)
def add_activity(
    payload: PhysicalActivityIn,
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    entry = activity.add(
        db,
        clock.today(),
        modality=payload.modality,
        duration_minutes=payload.duration_minutes,
    )
    return PhysicalActivityOut.model_validate(entry)


@router.put(
    "/{entry_id}",
    response_model=PhysicalActivityOut,
    responses={404: {"model": ErrorResponse, "description": "No such entry."}},
)
def update_activity(entry_id: EntryId, payload: PhysicalActivityIn, db: Session = Depends(get_db)):
    entry = activity.update(
        db,
        entry_id,
        modality=payload.modality,
        duration_minutes=payload.duration_minutes,
    )
    if entry is None:
        raise EntryNotFoundError(domain=activity.name, entry_id=entry_id)
    return PhysicalActivityOut.model_validate(entry)


@router.delete(
    "/{entry_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorResponse, "description": "No such entry."}},
)
def delete_activity(entry_id: EntryId, db: Session = Depends(get_db)):
    if not activity.delete(db, entry_id):
        raise EntryNotFoundError(domain=activity.name, entry_id=entry_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
