"""Parser composition root.

This module wires environment settings into a ready-to-use `RangeParser`.
"""

from __future__ import annotations

from rangeparser.anchor import MomentFactory, NowProvider
from rangeparser.config.settings import Settings, load_settings
from rangeparser.fallback import FallbackResolver
from rangeparser.parser import RangeParser


def create_parser(
        settings: Settings | None = None,
        *,
        moment_factory: MomentFactory | None = None,
        now_provider: NowProvider | None = None,
) -> RangeParser:
    """Create a parser configured from `settings` (loaded from the environment if omitted)."""

    settings = settings or load_settings()
    return RangeParser(
        moment_factory=moment_factory,
        now_provider=now_provider,
        fallback=FallbackResolver(date_order=settings.date_order),
        enable_fallback=settings.fallback_enabled,
    )
