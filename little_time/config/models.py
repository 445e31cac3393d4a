"""Typed settings models.

Settings are validated by pydantic so that YAML values such as ``"ms"`` or
``"sunday"`` reach the rest of the library as proper enum members.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from little_time.core.enums import PrecisionLevel, Weekday


class LoggingConfig(BaseModel):
    """Logging switches consumed by :func:`configure_logging`."""

    level: str = Field("INFO")
    log_dir: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if not isinstance(logging.getLevelName(normalized), int):
            raise ValueError(f"Unknown log level: {value}")
        return normalized


class TimeSettings(BaseModel):
    """Library-wide defaults.

    ``default_precision`` is what callers pass to the "end of" helpers when
    they have no better idea; ``first_day_of_week`` anchors the week helpers.
    """

    default_precision: PrecisionLevel = PrecisionLevel.NANOSECONDS
    first_day_of_week: Weekday = Weekday.MONDAY
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(frozen=True)

    @field_validator("default_precision", mode="before")
    @classmethod
    def _parse_precision(cls, value: Any) -> PrecisionLevel:
        return PrecisionLevel.parse(value)

    @field_validator("first_day_of_week", mode="before")
    @classmethod
    def _parse_weekday(cls, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        key = value.strip()
        if key.isdigit():
            return int(key)
        try:
            return Weekday[key.upper()]
        except KeyError as exc:
            raise ValueError(f"Unknown weekday: {value}") from exc


__all__ = ["LoggingConfig", "TimeSettings"]
