"""Precision levels and explicit orderings for ``datetime`` values.

The public surface is re-exported here: :class:`PrecisionLevel` with its
``compare``/``limit`` operations, the four ordering constants, the
:class:`YearMonth` value type and the start/end-of-period helpers.
"""

from .core.enums import FRACTIONAL_SECONDS, PrecisionLevel, Weekday, compare, is_fractional_seconds
from .core.errors import ConfigurationError, LittleTimeError, PrecisionError
from .core.ordering import (
    LOCAL_DATE_ORDERING,
    LOCAL_DATE_TIME_ORDERING,
    LOCAL_TIME_ORDERING,
    YEAR_MONTH_ORDERING,
    Ordering,
)
from .core.types import YearMonth

__all__ = [
    "ConfigurationError",
    "FRACTIONAL_SECONDS",
    "LOCAL_DATE_ORDERING",
    "LOCAL_DATE_TIME_ORDERING",
    "LOCAL_TIME_ORDERING",
    "LittleTimeError",
    "Ordering",
    "PrecisionError",
    "PrecisionLevel",
    "Weekday",
    "YEAR_MONTH_ORDERING",
    "YearMonth",
    "compare",
    "is_fractional_seconds",
]
