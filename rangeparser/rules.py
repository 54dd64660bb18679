"""Ordered phrase rules (pattern -> date arithmetic).

Rules are tried in declaration order against a normalized phrase; the first full match wins.
Several patterns overlap ("next week" vs "next 3 weeks", "past friday" vs "past 2 fridays"), so
the order of `RULES` is part of the contract.

Every handler receives the regex match and an `AnchorProvider` pinned to one reading of "now",
and returns an inclusive `(begin, end)` pair.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from rangeparser.anchor import AnchorProvider
from rangeparser.calendar_math import (
    day_of_week,
    end_of_day,
    month_end,
    one_second_before,
    quarter_index,
    quarter_last_month,
    quarter_start,
    shift,
    shift_to_weekday,
    through_end_of_day,
)
from rangeparser.dictionaries import MONTH_PATTERN, WEEKDAY_PATTERN, month_from_name, weekday_from_name

Bounds = tuple[datetime, datetime]
Handler = Callable[[re.Match[str], AnchorProvider], Bounds]

_ANY_COUNT = r"(?P<count>\d+)"
_OPTIONAL_ANY_COUNT = rf"(?:{_ANY_COUNT}\s*)?"
# A zero count would put begin after end for these rules; "past 0 days" goes to the fallback.
_COUNT = r"(?P<count>\d*[1-9]\d*)"
_OPTIONAL_COUNT = rf"(?:{_COUNT}\s*)?"
_WEEKDAY = rf"(?P<weekday>{WEEKDAY_PATTERN})"
_DAY_OF_MONTH = r"(?:(?P<day>\d+)(?:st|nd|rd|th)?|end)"


@dataclass(frozen=True)
class Rule:
    """A named phrase pattern and the handler computing its range."""

    name: str
    pattern: re.Pattern[str]
    handler: Handler

    def apply(self, phrase: str, anchor: AnchorProvider) -> Bounds | None:
        match = self.pattern.fullmatch(phrase)
        if match is None:
            return None
        return self.handler(match, anchor)


@dataclass(frozen=True)
class RuleMatch:
    """The rule that recognized a phrase plus the computed bounds."""

    rule: str
    begin: datetime
    end: datetime


def _count(match: re.Match[str], default: int = 1) -> int:
    raw = match.group("count")
    return default if raw is None else int(raw)


def _weekday(match: re.Match[str]) -> int:
    return weekday_from_name(match.group("weekday"))


def _whole_day(begin: datetime) -> Bounds:
    return begin, through_end_of_day(begin)


def _weekday_offset(anchor: AnchorProvider, match: re.Match[str]) -> int:
    """Days from today to the named weekday inside the current Sunday-Saturday week."""

    return _weekday(match) - day_of_week(anchor.now())


# "This thing" and "current thing"


def _today(match: re.Match[str], anchor: AnchorProvider) -> Bounds:
    return anchor.beginning_of_day(), anchor.end_of_day()


def _this_week(match: re.Match[str], anchor: AnchorProvider) -> Bounds:
    dow = day_of_week(anchor.now())
    begin = shift(anchor.beginning_of_day(), "days", -dow)
    end = shift(anchor.end_of_day(), "days", 6 - dow)
    return begin, end


def _this_month(match: re.Match[str], anchor: AnchorProvider) -> Bounds:
    return anchor.beginning_of_day().replace(day=1), month_end(anchor.end_of_day())


def _this_quarter(match: re.Match[str], anchor: AnchorProvider) -> Bounds:
    last_month = quarter_last_month(quarter_index(anchor.now()))
    return quarter_start(anchor.now()), month_end(anchor.end_of_day(), month=last_month)


def _this_year(match: re.Match[str], anchor: AnchorProvider) -> Bounds:
    begin = anchor.beginning_of_day().replace(month=1, day=1)
    end = anchor.end_of_day().replace(month=12, day=31)
    return begin, end


def _this_weekday(match: re.Match[str], anchor: AnchorProvider) -> Bounds:
    return _whole_day(shift_to_weekday(anchor.beginning_of_day(), _weekday(match)))


# "Last N things" and "past N things" (current unit included)


def _past_hours(match: re.Match[str], anchor: AnchorProvider) -> Bounds:
    now = anchor.now()
    return shift(now, "hours", -_count(match)), now


def _past_days(match: re.Match[str], anchor: AnchorProvider) -> Bounds:
    begin = shift(anchor.beginning_of_day(), "days", -(_count(match) - 1))
    return begin, anchor.end_of_day()


def _past_weeks(match: re.Match[str], anchor: AnchorProvider) -> Bounds:
    dow = day_of_week(anchor.now())
    sunday = shift(anchor.beginning_of_day(), "days", -dow)
    begin = shift(sunday, "weeks", -(_count(match) - 1))
    end = shift(anchor.end_of_day(), "days", 6 - dow)
    return begin, end


def _past_months(match: re.Match[str], anchor: AnchorProvider) -> Bounds:
    first = anchor.beginning_of_day().replace(day=1)
    return shift(first, "months", -(_count(match) - 1)), month_end(anchor.end_of_day())


def _past_years(match: re.Match[str], anchor: AnchorProvider) -> Bounds:
    january_first = anchor.beginning_of_day().replace(month=1, day=1)
    begin = shift(january_first, "years", -(_count(match) - 1))
    return begin, anchor.end_of_day().replace(month=12, day=31)


def _past_quarters(match: re.Match[str], anchor: AnchorProvider) -> Bounds:
    # Whole quarters before the current one.
    current = quarter_start(anchor.now())
    return shift(current, "quarters", -_count(match)), one_second_before(current)


def _units_ago(match: re.Match[str], anchor: AnchorProvider) -> Bounds:
    unit = match.group("unit") + "s"
    begin = shift(anchor.beginning_of_day(), unit, -_count(match))  # type: ignore[arg-type]
    return begin, end_of_day(begin)


def _past_weekdays(match: re.Match[str], anchor: AnchorProvider) -> Bounds:
    # "past 2 fridays", i.e. "2 fridays ago"; today never counts.
    offset = _weekday_offset(anchor, match)
    if offset >= 0:
        offset -= 7
    offset -= 7 * (_count(match) - 1)
    return _whole_day(shift(anchor.beginning_of_day(), "days", offset))


# "Last thing" and "previous thing"


def _yesterday(match: re.Match[str], anchor: AnchorProvider) -> Bounds:
    begin = shift(anchor.beginning_of_day(), "days", -1)
    return begin, end_of_day(begin)


def _previous_week(match: re.Match[str], anchor: AnchorProvider) -> Bounds:
    dow = day_of_week(anchor.now())
    begin = shift(anchor.beginning_of_day(), "days", -(7 + dow))
    end = shift(anchor.end_of_day(), "days", -(1 + dow))
    return begin, end


def _previous_month(match: re.Match[str], anchor: AnchorProvider) -> Bounds:
    first = anchor.beginning_of_day().replace(day=1)
    return shift(first, "months", -1), one_second_before(first)


def _previous_quarter(match: re.Match[str], anchor: AnchorProvider) -> Bounds:
    current = quarter_start(anchor.now())
    return shift(current, "quarters", -1), one_second_before(current)


def _previous_year(match: re.Match[str], anchor: AnchorProvider) -> Bounds:
    january_first = anchor.beginning_of_day().replace(month=1, day=1)
    return shift(january_first, "years", -1), one_second_before(january_first)


def _previous_weekday(match: re.Match[str], anchor: AnchorProvider) -> Bounds:
    # The named day of last week.
    offset = _weekday_offset(anchor, match) - 7
    return _whole_day(shift(anchor.beginning_of_day(), "days", offset))


def _past_weekday(match: re.Match[str], anchor: AnchorProvider) -> Bounds:
    offset = _weekday_offset(anchor, match)
    if offset >= 0:
        offset -= 7
    return _whole_day(shift(anchor.beginning_of_day(), "days", offset))


def _coming_weekday(match: re.Match[str], anchor: AnchorProvider) -> Bounds:
    offset = _weekday_offset(anchor, match)
    if offset <= 0:
        offset += 7
    return _whole_day(shift(anchor.beginning_of_day(), "days", offset))


# "Next thing" and "next N things" (current unit excluded)


def _next_hours(match: re.Match[str], anchor: AnchorProvider) -> Bounds:
    now = anchor.now()
    return now, shift(now, "hours", _count(match))


def _next_days(match: re.Match[str], anchor: AnchorProvider) -> Bounds:
    begin = shift(anchor.beginning_of_day(), "days", 1)
    return begin, one_second_before(shift(begin, "days", _count(match)))


def _next_weeks(match: re.Match[str], anchor: AnchorProvider) -> Bounds:
    dow = day_of_week(anchor.now())
    begin = shift(anchor.beginning_of_day(), "days", 7 - dow)
    end = shift(anchor.end_of_day(), "days", 6 + 7 * _count(match) - dow)
    return begin, end


def _next_months(match: re.Match[str], anchor: AnchorProvider) -> Bounds:
    begin = shift(anchor.beginning_of_day(), "months", 1, preserve_end=True).replace(day=1)
    last = shift(anchor.end_of_day(), "months", _count(match), preserve_end=True)
    return begin, month_end(last)


def _next_quarters(match: re.Match[str], anchor: AnchorProvider) -> Bounds:
    begin = shift(quarter_start(anchor.now()), "quarters", 1, preserve_end=True)
    end = one_second_before(shift(begin, "quarters", _count(match), preserve_end=True))
    return begin, end


def _next_years(match: re.Match[str], anchor: AnchorProvider) -> Bounds:
    begin = shift(anchor.beginning_of_day().replace(month=1, day=1), "years", 1)
    end = shift(anchor.end_of_day().replace(month=12, day=31), "years", _count(match))
    return begin, end


def _next_weekdays(match: re.Match[str], anchor: AnchorProvider) -> Bounds:
    # Both "next sunday" and "3 sundays from now"; today never counts.
    offset = _weekday_offset(anchor, match)
    if offset <= 0:
        offset += 7
    offset += 7 * (_count(match) - 1)
    return _whole_day(shift(anchor.beginning_of_day(), "days", offset))


# "The Nth/end of some month"


def _day_in_current_month(match: re.Match[str], anchor: AnchorProvider) -> datetime:
    day = match.group("day")
    if day is None:
        return month_end(anchor.beginning_of_day())
    # Days missing from the current month raise ValueError from datetime.
    return anchor.beginning_of_day().replace(day=int(day))


def _day_of_relative_month(match: re.Match[str], anchor: AnchorProvider) -> Bounds:
    begin = _day_in_current_month(match, anchor)
    months = {"this": 0, "last": -1, "next": 1}[match.group("which")]
    return _whole_day(shift(begin, "months", months, preserve_end=True))


def _day_of_months_offset(match: re.Match[str], anchor: AnchorProvider) -> Bounds:
    begin = _day_in_current_month(match, anchor)
    months = int(match.group("months"))
    if match.group("direction") == "ago":
        months = -months
    return _whole_day(shift(begin, "months", months, preserve_end=True))


def _month_name(match: re.Match[str], anchor: AnchorProvider) -> Bounds:
    year = anchor.now().year + {None: 0, "this": 0, "last": -1, "next": 1}[match.group("which")]
    month = month_from_name(match.group("month"))
    begin = anchor.beginning_of_day().replace(year=year, month=month, day=1)
    return begin, month_end(anchor.end_of_day(), year=year, month=month)


def _rule(name: str, pattern: str, handler: Handler) -> Rule:
    return Rule(name=name, pattern=re.compile(pattern), handler=handler)


RULES: tuple[Rule, ...] = (
    _rule("today", r"today|(?:this|current) day", _today),
    _rule("this_week", r"(?:this|current) week", _this_week),
    _rule("this_month", r"(?:this|current) month", _this_month),
    _rule("this_quarter", r"(?:this|current) quarter", _this_quarter),
    _rule("this_year", r"(?:this|current) year", _this_year),
    _rule("this_weekday", rf"this {_WEEKDAY}", _this_weekday),
    _rule("past_hours", rf"(?:last|past) {_ANY_COUNT} hours?", _past_hours),
    _rule("past_days", rf"(?:last|past) {_COUNT} days?", _past_days),
    _rule("past_weeks", rf"(?:last|past) {_COUNT} weeks?", _past_weeks),
    _rule("past_months", rf"(?:last|past) {_COUNT} months?", _past_months),
    _rule("past_years", rf"(?:last|past) {_COUNT} years?", _past_years),
    _rule("past_quarters", rf"(?:last|past) {_COUNT} quarters?", _past_quarters),
    _rule("units_ago", rf"{_ANY_COUNT} (?P<unit>day|week|month|quarter|year)s? ago", _units_ago),
    _rule("past_weekdays", rf"past {_COUNT} {_WEEKDAY}s?", _past_weekdays),
    _rule("yesterday", r"yesterday", _yesterday),
    _rule("previous_week", r"(?:last|previous) week", _previous_week),
    _rule("previous_month", r"(?:last|previous) month", _previous_month),
    _rule("previous_quarter", r"(?:last|previous) quarter", _previous_quarter),
    _rule("previous_year", r"(?:last|previous) year", _previous_year),
    _rule("previous_weekday", rf"(?:last|previous) {_WEEKDAY}", _previous_weekday),
    _rule("past_weekday", rf"(?:this )?past {_WEEKDAY}", _past_weekday),
    _rule("coming_weekday", rf"(?:this )?coming {_WEEKDAY}", _coming_weekday),
    _rule("next_hours", rf"next {_OPTIONAL_ANY_COUNT}hours?", _next_hours),
    _rule("next_days", rf"next {_OPTIONAL_COUNT}days?|tomorrow", _next_days),
    _rule("next_weeks", rf"next {_OPTIONAL_COUNT}weeks?", _next_weeks),
    _rule("next_months", rf"next {_OPTIONAL_COUNT}months?", _next_months),
    _rule("next_quarters", rf"next {_OPTIONAL_COUNT}quarters?", _next_quarters),
    _rule("next_years", rf"next {_OPTIONAL_COUNT}years?", _next_years),
    _rule("next_weekdays", rf"next {_OPTIONAL_COUNT}{_WEEKDAY}s?", _next_weekdays),
    _rule(
        "day_of_relative_month",
        rf"{_DAY_OF_MONTH} of (?P<which>this|last|next) month",
        _day_of_relative_month,
    ),
    _rule(
        "day_of_months_offset",
        rf"{_DAY_OF_MONTH} of (?P<months>\d+) months? (?P<direction>ago|from now|hence)",
        _day_of_months_offset,
    ),
    _rule("month_name", rf"(?:(?P<which>this|last|next) )?(?P<month>{MONTH_PATTERN})", _month_name),
)


def match_rule(phrase: str, anchor: AnchorProvider) -> RuleMatch | None:
    """Apply the first rule whose pattern fully matches the normalized phrase."""

    for rule in RULES:
        bounds = rule.apply(phrase, anchor)
        if bounds is not None:
            begin, end = bounds
            return RuleMatch(rule=rule.name, begin=begin, end=end)
    return None
