"""Settings loading and validation package."""

from .loader import load_settings
from .models import LoggingConfig, TimeSettings

__all__ = [
    "LoggingConfig",
    "TimeSettings",
    "load_settings",
]
