"""Calendar arithmetic over moments (``datetime`` values).

All helpers are pure: they never mutate their input and always return a new moment, so a value
derived from the anchor can be shifted freely without affecting any other computation.

Month, quarter and year shifts clamp an out-of-range day to the last day of the target month
(Jan 31 + 1 month -> Feb 29 in a leap year). With ``preserve_end=True`` a month-end source also
stays on month-end (Feb 29 + 1 month -> Mar 31).
"""

from __future__ import annotations

import calendar
from datetime import datetime, timedelta
from typing import Literal

from dateutil.relativedelta import relativedelta

Unit = Literal["seconds", "minutes", "hours", "days", "weeks", "months", "quarters", "years"]

_ONE_SECOND = timedelta(seconds=1)


def day_of_week(moment: datetime) -> int:
    """Return the day of week with Sunday=0 ... Saturday=6."""

    # isoweekday(): Monday=1 ... Sunday=7
    return moment.isoweekday() % 7


def start_of_day(moment: datetime) -> datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(moment: datetime) -> datetime:
    return moment.replace(hour=23, minute=59, second=59, microsecond=0)


def one_second_before(moment: datetime) -> datetime:
    return moment - _ONE_SECOND


def through_end_of_day(begin: datetime) -> datetime:
    """Return the last second of the day that starts at ``begin``."""

    return begin + timedelta(days=1) - _ONE_SECOND


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def is_last_day_of_month(moment: datetime) -> bool:
    return moment.day == days_in_month(moment.year, moment.month)


def month_end(moment: datetime, year: int | None = None, month: int | None = None) -> datetime:
    """Move the moment to the last day of its month (or of the given year/month)."""

    year = moment.year if year is None else year
    month = moment.month if month is None else month
    return moment.replace(year=year, month=month, day=days_in_month(year, month))


def shift_months(moment: datetime, months: int, *, preserve_end: bool = False) -> datetime:
    """Add a signed number of months, clamping the day to the target month's length."""

    if preserve_end and is_last_day_of_month(moment):
        # relativedelta clamps day=31 to the last day of the resulting month.
        return moment + relativedelta(months=months, day=31)
    return moment + relativedelta(months=months)


def shift(moment: datetime, unit: Unit, count: int, *, preserve_end: bool = False) -> datetime:
    """Add a signed count of a duration unit to a moment.

    Quarters are three months. Month-based units clamp the day (see `shift_months`).
    """

    if unit == "quarters":
        return shift_months(moment, 3 * count, preserve_end=preserve_end)
    if unit == "years":
        return shift_months(moment, 12 * count, preserve_end=preserve_end)
    if unit == "months":
        return shift_months(moment, count, preserve_end=preserve_end)
    return moment + relativedelta(**{unit: count})


def quarter_index(moment: datetime) -> int:
    """Zero-based quarter of the year: 0 for Jan-Mar ... 3 for Oct-Dec."""

    return (moment.month - 1) // 3


def quarter_first_month(index: int) -> int:
    return 3 * index + 1


def quarter_last_month(index: int) -> int:
    return 3 * index + 3


def quarter_start(moment: datetime) -> datetime:
    """Return 00:00:00 on the first day of the moment's quarter."""

    first_month = quarter_first_month(quarter_index(moment))
    return start_of_day(moment).replace(month=first_month, day=1)


def shift_to_weekday(moment: datetime, weekday: int) -> datetime:
    """Move within the moment's Sunday-Saturday week to the given weekday."""

    return moment + timedelta(days=weekday - day_of_week(moment))
