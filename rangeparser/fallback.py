"""Last-resort free-form date resolution (English, via dateparser).

Used only when no phrase rule matches. A successful parse is a single calendar day; any failure
inside dateparser is absorbed and reported as `None`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

import dateparser
from dateparser.conf import Settings as DateparserSettings

from rangeparser.anchor import MomentFactory

logger = logging.getLogger(__name__)

DateOrder = Literal["MDY", "DMY", "YMD"]

_DATEPARSER_SETTINGS = DateparserSettings().replace(
    PREFER_DATES_FROM="current_period",
    PREFER_LOCALE_DATE_ORDER=False,
    RETURN_AS_TIMEZONE_AWARE=False,
)


@dataclass(frozen=True)
class FallbackResolver:
    """Wraps `dateparser.parse` behind a never-raising boundary."""

    date_order: DateOrder = "MDY"
    languages: tuple[str, ...] = field(default=("en",))

    def resolve(self, phrase: str, *, anchor: datetime, factory: MomentFactory) -> datetime | None:
        """Parse `phrase` relative to `anchor`.

        Returns:
            The parsed moment rebuilt through `factory`, or `None` if it cannot be parsed.
        """

        if not phrase:
            return None

        # noinspection PyBroadException
        try:
            settings = _DATEPARSER_SETTINGS.replace(
                DATE_ORDER=self.date_order,
                RELATIVE_BASE=anchor.replace(tzinfo=None, microsecond=0),
            )
            parsed = dateparser.parse(phrase, languages=list(self.languages), settings=settings)
            if parsed is None:
                return None
            return factory(
                year=parsed.year,
                month=parsed.month,
                day=parsed.day,
                hour=parsed.hour,
                minute=parsed.minute,
                second=parsed.second,
            )
        except Exception:  # noqa: BLE001 - foreign parser faults mean "could not resolve"
            logger.debug("fallback failed phrase=%r", phrase, exc_info=True)
            return None
