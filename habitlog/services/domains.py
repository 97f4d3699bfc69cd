"""
One HabitService per habit domain.

  water       SUM of amount_ml, target = weight × 35 mL
  sunlight    SUM of minutes,   target = 10 min
  meditation  SUM of minutes,   target = 5 min
  sleep       REPLACE (one record per day, last wins), no target
  activity    APPEND (all sessions of the day), no target
  tasks       no weekly view, no target; `day` is rewritable
"""
from __future__ import annotations

from sqlalchemy.orm import Session

from habitlog.models import (
    MeditationSession,
    PhysicalActivity,
    SleepRecord,
    SunlightSession,
    TaskItem,
    WaterIntake,
)
from habitlog.services import recommendations
from habitlog.services.aggregator import APPEND, REPLACE, SUM
from habitlog.services.habits import HabitService
from habitlog.services.profile import get_profile


def _water_target(db: Session) -> int:
    return recommendations.water_ml(get_profile(db))


def _sunlight_target(db: Session) -> int:
    return recommendations.sunlight_minutes()


def _meditation_target(db: Session) -> int:
    return recommendations.meditation_minutes()


water = HabitService(
    "water",
    WaterIntake,
    fields=("amount_ml",),
    merge=SUM,
    value_field="amount_ml",
    recommend=_water_target,
)

sunlight = HabitService(
    "sunlight",
    SunlightSession,
    fields=("minutes",),
    merge=SUM,
    value_field="minutes",
    recommend=_sunlight_target,
)

meditation = HabitService(
    "meditation",
    MeditationSession,
    fields=("minutes",),
    merge=SUM,
    value_field="minutes",
    recommend=_meditation_target,
)

sleep = HabitService(
    "sleep",
    SleepRecord,
    fields=("hours", "quality"),
    merge=REPLACE,
)

activity = HabitService(
    "physical-activity",
    PhysicalActivity,
    fields=("modality", "duration_minutes"),
    merge=APPEND,
)

tasks = HabitService(
    "task",
    TaskItem,
    fields=("title", "description", "priority"),
    updatable=("title", "description", "priority", "is_complete", "day"),
)
