"""Anchor ("current moment") provider.

Every rule computes relative to `now()`, `beginning_of_day()` or `end_of_day()`. A parse call
takes one `snapshot()` first, so all three derive from a single reading of the clock.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from rangeparser.calendar_math import end_of_day, start_of_day

MomentFactory = Callable[..., datetime]
NowProvider = Callable[[], datetime]


def system_now(factory: MomentFactory) -> datetime:
    """Read the system clock and rebuild the reading through the moment factory."""

    clock = datetime.now()
    return factory(
        year=clock.year,
        month=clock.month,
        day=clock.day,
        hour=clock.hour,
        minute=clock.minute,
        second=clock.second,
    )


@dataclass(frozen=True)
class AnchorProvider:
    """Supplies the current moment from an injected callback or the system clock."""

    factory: MomentFactory = datetime
    now_provider: NowProvider | None = None

    def now(self) -> datetime:
        if self.now_provider is not None:
            return self.now_provider()
        return system_now(self.factory)

    def beginning_of_day(self) -> datetime:
        return start_of_day(self.now())

    def end_of_day(self) -> datetime:
        return end_of_day(self.now())

    def snapshot(self) -> AnchorProvider:
        """Return a provider pinned to a single reading of `now()`."""

        moment = self.now()
        return AnchorProvider(factory=self.factory, now_provider=lambda: moment)
