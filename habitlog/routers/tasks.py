"""
Tasks router.

GET    /tasks/today
GET    /tasks
POST   /tasks
PUT    /tasks/{entry_id}
DELETE /tasks/{entry_id}

Unlike the habit domains, the task date comes from the caller and can be
moved later.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from habitlog.core.clock import Clock, get_clock
from habitlog.core.errors import EntryNotFoundError
from habitlog.db.base import get_db
from habitlog.routers.params import EntryId
from habitlog.schemas.common import ErrorResponse
from habitlog.schemas.task import TaskCreate, TaskOut, TaskUpdate
from habitlog.services.domains import tasks

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("/today", response_model=list[TaskOut], summary="Tasks for today")
def tasks_today(db: Session = Depends(get_db), clock: Clock = Depends(get_clock)):
    return [TaskOut.model_validate(t) for t in tasks.entries_for_day(db, clock.today())]


@router.get("", response_model=list[TaskOut], summary="All tasks")
def list_tasks(db: Session = Depends(get_db)):
    """Every task, oldest date first."""
    return [TaskOut.model_validate(t) for t in tasks.all_entries(db)]


@router.post(
    "",
    response_model=TaskOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create a task",
)
def add_task(payload: TaskCreate, db: Session = Depends(get_db)):
    task = tasks.add(
        db,
        payload.date,
        title=payload.title,
        description=payload.description,
        priority=payload.priority,
    )
    return TaskOut.model_validate(task)


@router.put(
    "/{entry_id}",
    response_model=TaskOut,
    summary="Replace a task",
    responses={404: {"model": ErrorResponse, "description": "No such task."}},
)
def update_task(entry_id: EntryId, payload: TaskUpdate, db: Session = Depends(get_db)):
    """Overwrites title, description, date, completion and priority."""
    task = tasks.update(
        db,
        entry_id,
        title=payload.title,
        description=payload.description,
        day=payload.date,
        is_complete=payload.is_complete,
        priority=payload.priority,
    )
    if task is None:
        raise EntryNotFoundError(domain=tasks.name, entry_id=entry_id)
    return TaskOut.model_validate(task)


@router.delete(
    "/{entry_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorResponse, "description": "No such task."}},
)
def delete_task(entry_id: EntryId, db: Session = Depends(get_db)):
    if not tasks.delete(db, entry_id):
        raise EntryNotFoundError(domain=tasks.name, entry_id=entry_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
