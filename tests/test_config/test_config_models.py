from __future__ import annotations

import pytest
from pydantic import ValidationError

from little_time.config.models import LoggingConfig, TimeSettings
from little_time.core.enums import PrecisionLevel, Weekday


def test_time_settings_should_apply_defaults() -> None:
    settings = TimeSettings()
    assert settings.default_precision is PrecisionLevel.NANOSECONDS
    assert settings.first_day_of_week is Weekday.MONDAY
    assert settings.logging.level == "INFO"
    assert settings.logging.log_dir is None


def test_time_settings_should_parse_precision_symbols() -> None:
    assert TimeSettings(default_precision="ms").default_precision is PrecisionLevel.MILLISECONDS
    assert TimeSettings(default_precision="Seconds").default_precision is PrecisionLevel.SECONDS
    assert TimeSettings(default_precision=PrecisionLevel.HOURS).default_precision is PrecisionLevel.HOURS


def test_time_settings_should_reject_unknown_precision() -> None:
    with pytest.raises(ValidationError):
        TimeSettings(default_precision="fortnights")


def test_time_settings_should_accept_weekday_names_and_numbers() -> None:
    assert TimeSettings(first_day_of_week="sunday").first_day_of_week is Weekday.SUNDAY
    assert TimeSettings(first_day_of_week=6).first_day_of_week is Weekday.SUNDAY
    assert TimeSettings(first_day_of_week="2").first_day_of_week is Weekday.WEDNESDAY
    with pytest.raises(ValidationError):
        TimeSettings(first_day_of_week="someday")
    with pytest.raises(ValidationError):
        TimeSettings(first_day_of_week=7)


def test_logging_config_should_normalize_level() -> None:
    assert LoggingConfig(level=" debug ").level == "DEBUG"
    with pytest.raises(ValidationError):
        LoggingConfig(level="chatty")


def test_time_settings_should_be_frozen() -> None:
    settings = TimeSettings()
    with pytest.raises(ValidationError):
        settings.default_precision = PrecisionLevel.HOURS  # type: ignore[misc]
