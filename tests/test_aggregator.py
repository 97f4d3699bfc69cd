"""
Tests for the weekly aggregator (pure fold, no DB).
"""
from __future__ import annotations

import operator
from datetime import date, timedelta
from types import SimpleNamespace

import pytest

from habitlog.services.aggregator import APPEND, REPLACE, SUM, aggregate_week

_START = date(2026, 3, 2)  # Monday


def _row(day: date, value: int = 0, **extra) -> SimpleNamespace:
    return SimpleNamespace(day=day, value=value, **extra)


def _day(i: int) -> date:
    return _START + timedelta(days=i)


_value = operator.attrgetter("value")


class TestCalendarComplete:
    @pytest.mark.parametrize("merge", [SUM, REPLACE, APPEND], ids=lambda m: m.name)
    def test_seven_keys_with_no_rows(self, merge):
        week = aggregate_week(_START, [], merge)
        assert list(week) == [_day(i) for i in range(7)]

    @pytest.mark.parametrize("start", [date(2026, 2, 26), date(2028, 2, 26), date(2026, 12, 29)])
    def test_keys_follow_any_start(self, start):
        week = aggregate_week(start, [], SUM)
        assert list(week) == [start + timedelta(days=i) for i in range(7)]

    def test_empty_values_per_strategy(self):
        assert set(aggregate_week(_START, [], SUM).values()) == {0}
        assert set(aggregate_week(_START, [], REPLACE).values()) == {None}
        assert all(v == [] for v in aggregate_week(_START, [], APPEND).values())

    def test_append_empty_lists_are_distinct(self):
        week = aggregate_week(_START, [], APPEND)
        week[_day(0)].append("x")
        assert week[_day(1)] == []


class TestSum:
    def test_same_day_values_are_added(self):
        rows = [_row(_day(0), 250), _row(_day(0), 500), _row(_day(3), 100)]
        week = aggregate_week(_START, rows, SUM, value_of=_value)
        assert week[_day(0)] == 750
        assert week[_day(3)] == 100
        assert week[_day(1)] == 0

    def test_rows_outside_window_are_ignored(self):
        rows = [
            _row(_START - timedelta(days=1), 1000),
            _row(_day(6), 10),
            _row(_START + timedelta(days=7), 1000),
        ]
        week = aggregate_week(_START, rows, SUM, value_of=_value)
        assert sum(week.values()) == 10
        assert len(week) == 7


class TestReplace:
    def test_single_record(self):
        rec = _row(_day(2))
        week = aggregate_week(_START, [rec], REPLACE)
        assert week[_day(2)] is rec
        assert week[_day(1)] is None

    def test_last_row_scanned_wins(self):
        first, second = _row(_day(4), tag="first"), _row(_day(4), tag="second")
        week = aggregate_week(_START, [first, second], REPLACE)
        assert week[_day(4)].tag == "second"


class TestAppend:
    def test_keeps_scan_order(self):
        rows = [_row(_day(1), tag=t) for t in ("run", "yoga", "swim")]
        week = aggregate_week(_START, rows, APPEND)
        assert [r.tag for r in week[_day(1)]] == ["run", "yoga", "swim"]
        assert week[_day(0)] == []


class TestCustomDayAccessor:
    def test_day_of(self):
        rows = [{"on": _day(5), "n": 3}, {"on": _day(5), "n": 4}]
        week = aggregate_week(
            _START,
            rows,
            SUM,
            value_of=operator.itemgetter("n"),
            day_of=operator.itemgetter("on"),
        )
        assert week[_day(5)] == 7
