"""Error hierarchy shared by the library.

The core operations (precision ordering, limits, comparators) are total and
never raise. Errors only appear at the edges: turning a name into a precision
level, or loading settings from disk.
"""
from __future__ import annotations


class LittleTimeError(Exception):
    """Base class for all custom exceptions in the library."""


class ConfigurationError(LittleTimeError):
    """Raised when settings files are missing or invalid."""


class PrecisionError(LittleTimeError, ValueError):
    """Raised when a name does not denote a known precision level."""
