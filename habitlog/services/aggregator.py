"""
Weekly aggregator: folds sparse dated rows into a calendar-complete week.

Every one of the 7 days is present in the output, in calendar order, before
any row is looked at. Rows are then merged into their day's slot with one of
three strategies:

  SUM      integer sum of the values; empty day → 0
  REPLACE  last row scanned wins; empty day → None
  APPEND   all rows in scan order; empty day → []

Rows dated outside [week_start, week_start + 7) are ignored.
Pure function over an already-fetched snapshot; no DB access here.
"""
from __future__ import annotations

import operator
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Iterable

from habitlog.services.week import week_days


@dataclass(frozen=True)
class Merge:
    name: str
    empty: Callable[[], Any]
    combine: Callable[[Any, Any], Any]


def _replace(_current: Any, new: Any) -> Any:
    return new


def _append(current: list, new: Any) -> list:
    current.append(new)
    return current


SUM     = Merge("sum", int, operator.add)
REPLACE = Merge("replace", lambda: None, _replace)
APPEND  = Merge("append", list, _append)


def _identity(row: Any) -> Any:
    return row


def aggregate_week(
    week_start: date,
    rows: Iterable[Any],
    merge: Merge,
    value_of: Callable[[Any], Any] = _identity,
    day_of: Callable[[Any], date] = operator.attrgetter("day"),
) -> dict[date, Any]:
    """Return an ordered {day: aggregate} mapping with exactly 7 keys."""
    week = {day: merge.empty() for day in week_days(week_start)}
    for row in rows:
        day = day_of(row)
        if day not in week:
            continue
        week[day] = merge.combine(week[day], value_of(row))
    return week
