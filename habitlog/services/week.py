"""
Calendar-week arithmetic shared by every weekly view.

Weeks start on Monday (ISO). The window for a week is the half-open range
[week_start, week_start + 7 days).
"""
from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

WEEK_LENGTH = 7


def sunday_based_weekday(day: date) -> int:
    """Weekday number with Sunday=0 … Saturday=6."""
    return (day.weekday() + 1) % 7


def week_start_for(today: date) -> date:
    """Return the Monday that starts the week containing `today`."""
    diff = (sunday_based_weekday(today) + 6) % 7
    return today - timedelta(days=diff)


def week_end(week_start: date) -> date:
    """Exclusive upper bound of the window."""
    return week_start + timedelta(days=WEEK_LENGTH)


def week_days(week_start: date) -> list[date]:
    return [week_start + timedelta(days=i) for i in range(WEEK_LENGTH)]


def resolve_week_start(requested: Optional[date], today: date) -> date:
    """An explicitly requested start is used as-is; otherwise this week's Monday."""
    return requested if requested is not None else week_start_for(today)
