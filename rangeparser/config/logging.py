"""Logging configuration for applications embedding the parser."""

from __future__ import annotations

import logging

from rangeparser.config.settings import Settings, load_settings


def configure_logging(level: str | None = None, *, settings: Settings | None = None) -> None:
    """Configure Python logging for the process.

    The level is `level` if given, otherwise `Settings.log_level` (the `LOG_LEVEL` env var, loaded
    from the environment when `settings` is omitted).

    The library itself only emits DEBUG records through module loggers and never installs handlers;
    call this from an application entrypoint (or a REPL) to see them.
    """

    log_level = (level or (settings or load_settings()).log_level).upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    # Reduce noisy third-party logs by default.
    logging.getLogger("dateparser").setLevel(logging.WARNING)
