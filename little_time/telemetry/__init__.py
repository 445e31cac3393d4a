"""Logging helpers for applications embedding the library."""

from .logging_setup import JsonFormatter, configure_from_settings, configure_logging

__all__ = ["JsonFormatter", "configure_from_settings", "configure_logging"]
