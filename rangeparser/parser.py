"""Range parser orchestration (phrase rules first; free-form fallback last)."""

from __future__ import annotations

import logging
from datetime import datetime

from rangeparser.anchor import AnchorProvider, MomentFactory, NowProvider
from rangeparser.calendar_math import end_of_day, start_of_day
from rangeparser.fallback import FallbackResolver
from rangeparser.normalize import normalize_phrase
from rangeparser.rules import match_rule
from rangeparser.schema import FALLBACK_RULE, DateTimeRange

logger = logging.getLogger(__name__)


class RangeParser:
    """Parses plain-English date range phrases ("this week", "past 2 months").

    Args:
        moment_factory: Callable accepting `year, month, day, hour, minute, second` keyword
            arguments and returning a `datetime` (or subclass). Defaults to `datetime`.
        now_provider: Zero-argument callable returning the current moment. Defaults to the
            system clock rebuilt through `moment_factory`.
        fallback: Free-form resolver used when no phrase rule matches. Pass `None` to use the
            default English resolver; use `enable_fallback=False` to disable it.

    Note:
        Rule results keep the tzinfo of `now_provider`'s moment, while fallback results are built
        by `moment_factory`. With a tz-aware `now_provider`, pass a matching factory (e.g.
        `functools.partial(datetime, tzinfo=zone)`); with the default factory, fallback ranges are
        naive and cannot be compared with rule ranges.
    """

    def __init__(
            self,
            moment_factory: MomentFactory | None = None,
            now_provider: NowProvider | None = None,
            *,
            fallback: FallbackResolver | None = None,
            enable_fallback: bool = True,
    ) -> None:
        self._anchor = AnchorProvider(factory=moment_factory or datetime, now_provider=now_provider)
        self._fallback = (fallback or FallbackResolver()) if enable_fallback else None

    def parse_range(self, phrase: str) -> DateTimeRange | None:
        """Parse a phrase into an inclusive range.

        Strategy:
            1) Normalize the phrase and try every phrase rule in order.
            2) If none matches, ask the fallback resolver for a single calendar day.
            3) If that fails too, return `None`.
        """

        normalized = normalize_phrase(phrase)
        if not normalized:
            return None

        anchor = self._anchor.snapshot()

        matched = match_rule(normalized, anchor)
        if matched is not None:
            logger.debug("matched rule=%s phrase=%r", matched.rule, normalized)
            return DateTimeRange(
                begin=matched.begin,
                end=matched.end,
                rule=matched.rule,
                phrase=normalized,
            )

        if self._fallback is None:
            logger.debug("unrecognized phrase=%r", normalized)
            return None

        moment = self._fallback.resolve(normalized, anchor=anchor.now(), factory=anchor.factory)
        if moment is None:
            logger.debug("unrecognized phrase=%r", normalized)
            return None

        logger.debug("fallback phrase=%r moment=%s", normalized, moment.isoformat())
        return DateTimeRange(
            begin=start_of_day(moment),
            end=end_of_day(moment),
            rule=FALLBACK_RULE,
            phrase=normalized,
        )


_default_parser = RangeParser()


def parse_range(phrase: str) -> DateTimeRange | None:
    """Parse a phrase against the system clock (convenience wrapper)."""

    return _default_parser.parse_range(phrase)
