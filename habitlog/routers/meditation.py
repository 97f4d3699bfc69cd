"""
Meditation router.

GET    /meditation/today
GET    /meditation/week
POST   /meditation
PUT    /meditation/{entry_id}
DELETE /meditation/{entry_id}
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
from habitlog.schemas.habits import MinutesSessionIn, MinutesSessionOut, MinutesToday
from habitlog.services.domains import meditation
from habitlog.services.week import resolve_week_start

router = APIRouter(prefix="/meditation", tags=["meditation"])


@router.get("/today", response_model=MinutesToday, summary="Today's meditation")
def meditation_today(db: Session = Depends(get_db), clock: Clock = Depends(get_clock)):
    """Sessions logged today, their total and the daily target (5 minutes)."""
    today = clock.today()
    return MinutesToday(
        date=today,
        total_minutes=meditation.daily_total(db, today),
        recommended_minutes=meditation.recommended(db),
        entries=[
            MinutesSessionOut.model_validate(e)
            for e in meditation.entries_for_day(db, today)
        ],
    )


@router.get("/week", response_model=dict[date, int], summary="Meditation minutes per day")
def meditation_week(
    week_start: Optional[date] = Query(
        default=None,
        description="First day of the 7-day window. Defaults to this week's Monday.",
    ),
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    return meditation.weekly(db, resolve_week_start(week_start, clock.today()))


@router.post(
    "",
    response_model=MinutesSessionOut,
    status_code=status.HTTP_201_CREATED,
    summary="Log a meditation session for today",
)
def add_meditation(
    payload: MinutesSessionIn,
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    entry = meditation.add(db, clock.today(), minutes=payload.minutes)
    return MinutesSessionOut.model_validate(entry)


@router.put(
    "/{entry_id}",
    response_model=MinutesSessionOut,
    responses={404: {"model": ErrorResponse, "description": "No such entry."}},
)
def update_meditation(entry_id: EntryId, payload: MinutesSessionIn, db: Session = Depends(get_db)):
    entry = meditation.update(db, entry_id, minutes=payload.minutes)
    if entry is None:
        raise EntryNotFoundError(domain=meditation.name, entry_id=entry_id)
    return MinutesSessionOut.model_validate(entry)


@router.delete(
    "/{entry_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorResponse, "description": "No such entry."}},
)
def delete_meditation(entry_id: EntryId, db: Session = Depends(get_db)):
    if not meditation.delete(db, entry_id):
        raise EntryNotFoundError(domain=meditation.name, entry_id=entry_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
