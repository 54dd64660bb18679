"""Range result type returned by the parser."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

FALLBACK_RULE = "fallback"


@dataclass(frozen=True)
class DateTimeRange:
    """An inclusive `[begin, end]` pair of moments.

    `end` is the last covered second (23:59:59 of its day), never an exclusive boundary. The only
    exceptions are the hour-granular rules ("next 3 hours", "past 2 hours"), which keep the
    anchor's time of day.
    """

    begin: datetime
    end: datetime
    rule: str
    phrase: str

    def __post_init__(self) -> None:
        if self.begin > self.end:
            raise ValueError("begin must be <= end")

    @property
    def from_fallback(self) -> bool:
        """Whether the range came from free-form date parsing rather than a phrase rule."""

        return self.rule == FALLBACK_RULE

    def as_tuple(self) -> tuple[datetime, datetime]:
        return self.begin, self.end
