"""YAML loader for library settings.

The file is optional in spirit: an empty document yields the defaults of
:class:`TimeSettings`. A missing file or a malformed one is an error.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping

import yaml
from pydantic import ValidationError

from little_time.core.errors import ConfigurationError

from .models import TimeSettings

logger = logging.getLogger("little_time.config")

_DEFAULT_CONFIG_DIR = Path("config")


def _read_yaml(path: Path) -> Mapping:
    """Read a YAML file and return a mapping (empty dict if file is blank)."""

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}
    if not isinstance(data, Mapping):
        raise ValueError(f"YAML root must be a mapping in {path}")
    return data


def load_settings(path: Path | str = _DEFAULT_CONFIG_DIR / "little_time.yml") -> TimeSettings:
    """Load and validate ``little_time.yml``.

    Recognized keys: ``default_precision`` (level name or unit symbol),
    ``first_day_of_week`` (weekday name or 0..6) and a ``logging`` section with
    ``level`` and ``log_dir``.
    """

    path = Path(path)
    data = _read_yaml(path)
    try:
        settings = TimeSettings.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid settings in {path}: {exc}") from exc
    logger.debug(
        "Loaded settings",
        extra={
            "settings_path": str(path),
            "default_precision": settings.default_precision.value,
            "first_day_of_week": settings.first_day_of_week.name,
        },
    )
    return settings


__all__ = ["load_settings"]
