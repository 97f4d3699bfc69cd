"""
Request / response schemas for the habit domains.

POST and PUT share one input model per domain; the entry date is never part
of the body (it is stamped from the server clock on create and immutable).
"""
from __future__ import annotations

import datetime as dt
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import AliasChoices, Field, field_validator

from habitlog.schemas.common import CamelModel, PositiveInt32

# ORM rows carry `day`; the wire calls it `date`.
EntryDate = Annotated[dt.date, Field(validation_alias=AliasChoices("day", "date"))]


# ---------------------------------------------------------------------------
# Water
# ---------------------------------------------------------------------------

class WaterIntakeIn(CamelModel):
    amount_ml: PositiveInt32 = Field(description="Millilitres drunk.", examples=[250])


class WaterIntakeOut(CamelModel):
    id: int
    date: EntryDate
    amount_ml: int


class WaterToday(CamelModel):
    date: dt.date
    total_ml: int
    recommended_ml: int
    entries: list[WaterIntakeOut]


# ---------------------------------------------------------------------------
# Sunlight / meditation (same shape: minutes per session)
# ---------------------------------------------------------------------------

class MinutesSessionIn(CamelModel):
    minutes: PositiveInt32 = Field(description="Session length in minutes.", examples=[15])


class MinutesSessionOut(CamelModel):
    id: int
    date: EntryDate
    minutes: int


class MinutesToday(CamelModel):
    date: dt.date
    total_minutes: int
    recommended_minutes: int
    entries: list[MinutesSessionOut]


# ---------------------------------------------------------------------------
# Sleep
# ---------------------------------------------------------------------------

class SleepRecordIn(CamelModel):
    hours: Decimal = Field(ge=0, le=24, examples=[7.5])
    quality: int = Field(ge=0, le=100, examples=[85])


class SleepRecordOut(CamelModel):
    id: int
    date: EntryDate
    # Sent as a JSON number; pydantic would serialize Decimal as a string.
    hours: float
    quality: int


class SleepToday(CamelModel):
    date: dt.date
    record: Optional[SleepRecordOut] = None


# ---------------------------------------------------------------------------
# Physical activity
# ---------------------------------------------------------------------------

class PhysicalActivityIn(CamelModel):
    modality: str = Field(min_length=1, max_length=128, examples=["running"])
    duration_minutes: PositiveInt32 = Field(examples=[30])

    @field_validator("modality", mode="before")
    @classmethod
    def strip_modality(cls, v: str) -> str:
        return v.strip() if isinstance(v, str) else v


class PhysicalActivityOut(CamelModel):
    id: int
    date: EntryDate
    modality: str
    duration_minutes: int


class ActivityToday(CamelModel):
    date: dt.date
    total_minutes: int
    entries: list[PhysicalActivityOut]
