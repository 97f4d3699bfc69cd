"""
Sleep router.

GET    /sleep/today
GET    /sleep/week
POST   /sleep
PUT    /sleep/{entry_id}
DELETE /sleep/{entry_id}

One record per night is expected. When a day has several, the most recently
created one is reported, both here and in the weekly view.
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
from habitlog.schemas.habits import SleepRecordIn, SleepRecordOut, SleepToday
from habitlog.services.domains import sleep
from habitlog.services.week import resolve_week_start

router = APIRouter(prefix="/sleep", tags=["sleep"])


@router.get("/today", response_model=SleepToday, summary="Last night's sleep")
def sleep_today(db: Session = Depends(get_db), clock: Clock = Depends(get_clock)):
    """Today's record, or `record: null` when nothing was logged yet."""
    today = clock.today()
    record = sleep.latest_for_day(db, today)
    return SleepToday(
        date=today,
        record=SleepRecordOut.model_validate(record) if record is not None else None,
    )


@router.get(
    "/week",
    response_model=dict[date, Optional[SleepRecordOut]],
    summary="Sleep record per day of a week",
)
def sleep_week(
    week_start: Optional[date] = Query(
        default=None,
        description="First day of the 7-day window. Defaults to this week's Monday.",
    ),
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    """Days without a record map to null."""
    week = sleep.weekly(db, resolve_week_start(week_start, clock.today()))
    return {
        day: SleepRecordOut.model_validate(record) if record is not None else None
        for day, record in week.items()
    }


@router.post(
    "",
    response_model=SleepRecordOut,
    status_code=status.HTTP_201_CREATED,
    summary="Log last night's sleep",
)
def add_sleep(
    payload: SleepRecordIn,
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    record = sleep.add(db, clock.today(), hours=payload.hours, quality=payload.quality)
    return SleepRecordOut.model_validate(record)


@router.put(
    "/{entry_id}",
    response_model=SleepRecordOut,
    responses={404: {"model": ErrorResponse, "description": "No such record."}},
)
def update_sleep(entry_id: EntryId, payload: SleepRecordIn, db: Session = Depends(get_db)):
    record = sleep.update(db, entry_id, hours=payload.hours, quality=payload.quality)
    if record is None:
        raise EntryNotFoundError(domain=sleep.name, entry_id=entry_id)
    return SleepRecordOut.model_validate(record)


@router.delete(
    "/{entry_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorResponse, "description": "No such record."}},
)
def delete_sleep(entry_id: EntryId, db: Session = Depends(get_db)):
    if not sleep.delete(db, entry_id):
        raise EntryNotFoundError(domain=sleep.name, entry_id=entry_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
