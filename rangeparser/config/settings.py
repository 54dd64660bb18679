"""Environment configuration and validation.

This module defines strongly-typed parser settings loaded from environment variables (optionally
via a local `.env` file).
"""

from __future__ import annotations

import logging

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rangeparser.fallback import DateOrder


class Settings(BaseSettings):
    """Parser settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    fallback_enabled: bool = Field(default=True, alias="RANGEPARSER_FALLBACK_ENABLED")
    date_order: DateOrder = Field(default="MDY", alias="RANGEPARSER_DATE_ORDER")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("date_order", mode="before")
    @classmethod
    def normalize_date_order(cls, value: object) -> object:
        """Accept lowercase date orders ("dmy")."""

        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that the log level is one of the standard `logging` level names."""

        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value}")
        return level


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Raises:
        RuntimeError: If the environment configuration is invalid.
    """

    try:
        return Settings()
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc
