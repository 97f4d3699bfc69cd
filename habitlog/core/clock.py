"""
Source of "today".

Every add/today endpoint depends on `get_clock` instead of reading the wall
clock directly, so tests can pin the date with `app.dependency_overrides`.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo

from habitlog.core.config import settings


class Clock:
    """Wall clock. Uses settings.TIMEZONE when set, server local time otherwise."""

    def __init__(self, tz_name: Optional[str] = None):
        self._tz = ZoneInfo(tz_name) if tz_name else None

    def today(self) -> date:
        return datetime.now(tz=self._tz).date()


@dataclass
class FixedClock(Clock):
    """Clock that always answers the same date."""
    day: date

    def today(self) -> date:
        return self.day


_system_clock = Clock(settings.TIMEZONE or None)


def get_clock() -> Clock:
    return _system_clock
