from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import AliasChoices, Field, field_validator

from habitlog.models.task import PRIORITY_MAX, PRIORITY_MIN
from habitlog.schemas.common import CamelModel


class TaskCreate(CamelModel):
    title: str = Field(min_length=1, max_length=256, examples=["Book dentist"])
    description: Optional[str] = Field(default=None, max_length=10_000)
    date: dt.date = Field(description="Day the task belongs to.", examples=["2026-10-19"])
    priority: Optional[int] = Field(
        default=None,
        ge=PRIORITY_MIN,
        le=PRIORITY_MAX,
        description="0 to 5, higher is more important.",
        examples=[3],
    )

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return v.strip() if isinstance(v, str) else v


class TaskUpdate(TaskCreate):
    is_complete: bool = False


class TaskOut(CamelModel):
    id: int
    title: str
    description: Optional[str] = None
    date: dt.date = Field(validation_alias=AliasChoices("day", "date"))
    is_complete: bool
    priority: Optional[int] = None
