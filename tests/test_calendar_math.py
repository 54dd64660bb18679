"""Tests for calendar arithmetic helpers."""

from __future__ import annotations

from datetime import datetime

import pytest

from rangeparser.calendar_math import (
    day_of_week,
    end_of_day,
    month_end,
    one_second_before,
    quarter_index,
    quarter_start,
    shift,
    shift_months,
    shift_to_weekday,
    start_of_day,
    through_end_of_day,
)


@pytest.mark.parametrize(
    ("moment", "expected"),
    [
        (datetime(2024, 3, 10), 0),
        (datetime(2024, 3, 11), 1),
        (datetime(2024, 3, 15), 5),
        (datetime(2024, 3, 16), 6),
    ],
)
def test_day_of_week_is_sunday_based(moment: datetime, expected: int) -> None:
    assert day_of_week(moment) == expected


def test_start_and_end_of_day() -> None:
    moment = datetime(2024, 3, 15, 10, 30, 15, 123)
    assert start_of_day(moment) == datetime(2024, 3, 15, 0, 0, 0)
    assert end_of_day(moment) == datetime(2024, 3, 15, 23, 59, 59)


def test_whole_day_helpers() -> None:
    begin = datetime(2024, 2, 29)
    assert through_end_of_day(begin) == datetime(2024, 2, 29, 23, 59, 59)
    assert one_second_before(datetime(2024, 3, 1)) == datetime(2024, 2, 29, 23, 59, 59)


@pytest.mark.parametrize(
    ("moment", "months", "expected"),
    [
        (datetime(2024, 1, 31), 1, datetime(2024, 2, 29)),
        (datetime(2023, 1, 31), 1, datetime(2023, 2, 28)),
        (datetime(2024, 3, 31), -1, datetime(2024, 2, 29)),
        (datetime(2024, 2, 29), 1, datetime(2024, 3, 29)),
        (datetime(2024, 11, 15), 3, datetime(2025, 2, 15)),
    ],
)
def test_shift_months_clamps_day(moment: datetime, months: int, expected: datetime) -> None:
    assert shift_months(moment, months) == expected


def test_shift_months_preserves_month_end() -> None:
    assert shift_months(datetime(2024, 2, 29), 1, preserve_end=True) == datetime(2024, 3, 31)
    assert shift_months(datetime(2024, 4, 30), -1, preserve_end=True) == datetime(2024, 3, 31)
    # Not a month end: plain clamping.
    assert shift_months(datetime(2024, 3, 30), -1, preserve_end=True) == datetime(2024, 2, 29)


@pytest.mark.parametrize(
    ("unit", "count", "expected"),
    [
        ("seconds", -1, datetime(2024, 3, 15, 9, 59, 59)),
        ("minutes", 30, datetime(2024, 3, 15, 10, 30)),
        ("hours", -3, datetime(2024, 3, 15, 7, 0)),
        ("days", 20, datetime(2024, 4, 4, 10, 0)),
        ("weeks", -2, datetime(2024, 3, 1, 10, 0)),
        ("months", -1, datetime(2024, 2, 15, 10, 0)),
        ("quarters", 1, datetime(2024, 6, 15, 10, 0)),
        ("years", -1, datetime(2023, 3, 15, 10, 0)),
    ],
)
def test_shift_units(unit: str, count: int, expected: datetime) -> None:
    assert shift(datetime(2024, 3, 15, 10, 0), unit, count) == expected  # type: ignore[arg-type]


def test_shift_years_from_leap_day() -> None:
    assert shift(datetime(2024, 2, 29), "years", 1) == datetime(2025, 2, 28)


def test_shift_returns_a_new_moment() -> None:
    moment = datetime(2024, 3, 15, 10, 0)
    shift(moment, "days", 1)
    assert moment == datetime(2024, 3, 15, 10, 0)


def test_quarter_index() -> None:
    assert [quarter_index(datetime(2024, m, 1)) for m in range(1, 13)] == [
        0, 0, 0, 1, 1, 1, 2, 2, 2, 3, 3, 3,
    ]


def test_quarter_start_from_day_missing_in_first_month() -> None:
    # April has no 31st; the day must be reset together with the month.
    assert quarter_start(datetime(2024, 5, 31, 10, 0)) == datetime(2024, 4, 1)
    assert quarter_start(datetime(2024, 12, 31, 23, 59, 59)) == datetime(2024, 10, 1)


def test_month_end() -> None:
    assert month_end(datetime(2024, 2, 10, 23, 59, 59)) == datetime(2024, 2, 29, 23, 59, 59)
    assert month_end(datetime(2024, 3, 31), year=2023, month=2) == datetime(2023, 2, 28)
    assert month_end(datetime(2024, 1, 5), month=6) == datetime(2024, 6, 30)


def test_shift_to_weekday_stays_within_week() -> None:
    friday = datetime(2024, 3, 15)
    assert shift_to_weekday(friday, 0) == datetime(2024, 3, 10)
    assert shift_to_weekday(friday, 1) == datetime(2024, 3, 11)
    assert shift_to_weekday(friday, 6) == datetime(2024, 3, 16)
