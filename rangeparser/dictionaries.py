"""English dictionaries for weekdays, ordinals and month names.

These tables are used by the normalizer and the rule dispatcher and must remain small and
deterministic. Every table is an ordered tuple, longest phrase first, so that overlapping entries
(e.g. "twenty-first" vs "first", "september" vs "sep") always resolve the same way.
"""

from __future__ import annotations

import re
from enum import IntEnum


class Weekday(IntEnum):
    """Day-of-week index, Sunday first."""

    sunday = 0
    monday = 1
    tuesday = 2
    wednesday = 3
    thursday = 4
    friday = 5
    saturday = 6


WEEKDAY_PATTERN = r"(?:mon|tues|wednes|thurs|fri|satur|sun)day"

_UNITS: tuple[str, ...] = (
    "first",
    "second",
    "third",
    "fourth",
    "fifth",
    "sixth",
    "seventh",
    "eighth",
    "ninth",
)

_TEENS: tuple[str, ...] = (
    "tenth",
    "eleventh",
    "twelfth",
    "thirteenth",
    "fourteenth",
    "fifteenth",
    "sixteenth",
    "seventeenth",
    "eighteenth",
    "nineteenth",
)


def _suffix(value: int) -> str:
    if value in {11, 12, 13}:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(value % 10, "th")


def _ordinal_entries() -> list[tuple[str, int]]:
    entries: list[tuple[str, int]] = []
    entries.extend((word, idx + 1) for idx, word in enumerate(_UNITS))
    entries.extend((word, idx + 10) for idx, word in enumerate(_TEENS))
    entries.append(("twentieth", 20))
    entries.extend((rf"twenty[- ]?{word}", idx + 21) for idx, word in enumerate(_UNITS))
    entries.append(("thirtieth", 30))
    entries.append((r"thirty[- ]?first", 31))
    return entries


# (pattern, numeral) pairs, most specific first. Compound ordinals may be written
# "twenty-first", "twenty first" or "twentyfirst".
ORDINALS: tuple[tuple[str, str], ...] = tuple(
    (pattern, f"{value}{_suffix(value)}")
    for pattern, value in sorted(_ordinal_entries(), key=lambda e: (-len(e[0]), e[0]))
)

_ORDINAL_RE = re.compile(
    r"\b(?:" + "|".join(f"(?P<o{idx}>{pattern})" for idx, (pattern, _) in enumerate(ORDINALS)) + r")\b"
)

_MONTH_NAMES: tuple[str, ...] = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)

# (name, month number) pairs, most specific first.
MONTHS: tuple[tuple[str, int], ...] = tuple(
    sorted(
        {
            **{name: idx + 1 for idx, name in enumerate(_MONTH_NAMES)},
            **{name[:3]: idx + 1 for idx, name in enumerate(_MONTH_NAMES)},
            "sept": 9,
        }.items(),
        key=lambda e: (-len(e[0]), e[0]),
    )
)
MONTH_PATTERN = "|".join(name for name, _ in MONTHS)
_MONTH_NUMBERS: dict[str, int] = dict(MONTHS)


def weekday_from_name(name: str) -> Weekday:
    """Return the weekday for a full English day name ("tuesday")."""

    return Weekday[name]


def month_from_name(name: str) -> int:
    """Return the month number 1-12 for a month name or abbreviation."""

    return _MONTH_NUMBERS[name]


def replace_ordinals(text: str) -> str:
    """Replace spelled-out ordinals ("twenty-first") with numerals ("21st")."""

    def _sub(match: re.Match[str]) -> str:
        # Exactly one named group matched; its index points into ORDINALS.
        group = match.lastgroup or ""
        return ORDINALS[int(group[1:])][1]

    return _ORDINAL_RE.sub(_sub, text)
