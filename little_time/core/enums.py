"""Enumerations shared across the library.

:class:`PrecisionLevel` is the granularity model: six levels ordered from the
coarsest (hours) to the finest (nanoseconds), each with a ``limit`` giving the
latest time of day still expressible at that level. :class:`Weekday` names the
days as numbered by :meth:`datetime.date.weekday`.
"""
from __future__ import annotations

from datetime import time
from enum import Enum, IntEnum
from typing import FrozenSet

from .errors import PrecisionError

NANOS_PER_MICROSECOND = 1_000
NANOS_PER_MILLISECOND = 1_000_000
NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MINUTE = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY = 24 * NANOS_PER_HOUR


class PrecisionLevel(str, Enum):
    """Granularity at which a time-of-day value is significant.

    Members are declared in order of increasing granularity, and that order is
    the one exposed by :func:`compare` and the rich comparison operators (the
    inherited ``str`` ordering is overridden). ``MILLISECONDS``,
    ``MICROSECONDS`` and ``NANOSECONDS`` form the fractional-seconds family,
    see :attr:`is_fractional`.
    """

    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"
    MICROSECONDS = "microseconds"
    NANOSECONDS = "nanoseconds"

    @property
    def rank(self) -> int:
        """Position in the coarse-to-fine order, starting at 0 for hours."""

        return _ORDER.index(self)

    @property
    def unit_nanos(self) -> int:
        """Length of one unit at this level, in nanoseconds."""

        return _UNIT_NANOS[self]

    @property
    def limit_nanos(self) -> int:
        """Latest time of day at this level, as nanoseconds since midnight."""

        return NANOS_PER_DAY - NANOS_PER_HOUR + _SUB_HOUR_LIMIT_NANOS[self]

    @property
    def limit(self) -> time:
        """Latest time of day at this level.

        ``datetime.time`` stops at microseconds, so the nanosecond limit is
        clamped to ``23:59:59.999999``; use :attr:`limit_nanos` for the exact
        value.
        """

        return _nanos_to_time(self.limit_nanos)

    @property
    def is_fractional(self) -> bool:
        return self in FRACTIONAL_SECONDS

    def compare(self, other: "PrecisionLevel") -> int:
        return compare(self, other)

    def __lt__(self, other: object) -> bool:
        return self.rank < _rank_of(other)

    def __le__(self, other: object) -> bool:
        return self.rank <= _rank_of(other)

    def __gt__(self, other: object) -> bool:
        return self.rank > _rank_of(other)

    def __ge__(self, other: object) -> bool:
        return self.rank >= _rank_of(other)

    @classmethod
    def parse(cls, name: "str | PrecisionLevel") -> "PrecisionLevel":
        """Return the level for a value, member name or short unit symbol.

        >>> PrecisionLevel.parse("ms")
        <PrecisionLevel.MILLISECONDS: 'milliseconds'>
        """

        if isinstance(name, PrecisionLevel):
            return name
        key = str(name).strip().lower()
        try:
            return cls(key)
        except ValueError:
            pass
        level = _ALIASES.get(key)
        if level is None:
            raise PrecisionError(f"Unknown precision level: {name!r}")
        return level


class Weekday(IntEnum):
    """Days of the week, numbered as in :meth:`datetime.date.weekday`."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


_ORDER = tuple(PrecisionLevel)

_UNIT_NANOS = {
    PrecisionLevel.HOURS: NANOS_PER_HOUR,
    PrecisionLevel.MINUTES: NANOS_PER_MINUTE,
    PrecisionLevel.SECONDS: NANOS_PER_SECOND,
    PrecisionLevel.MILLISECONDS: NANOS_PER_MILLISECOND,
    PrecisionLevel.MICROSECONDS: NANOS_PER_MICROSECOND,
    PrecisionLevel.NANOSECONDS: 1,
}

# Latest offset inside the final hour (23:xx) that each level can express.
_SUB_HOUR_LIMIT_NANOS = {
    level: (NANOS_PER_HOUR - 1) // unit * unit for level, unit in _UNIT_NANOS.items()
}

_ALIASES = {
    "h": PrecisionLevel.HOURS,
    "hour": PrecisionLevel.HOURS,
    "m": PrecisionLevel.MINUTES,
    "min": PrecisionLevel.MINUTES,
    "minute": PrecisionLevel.MINUTES,
    "s": PrecisionLevel.SECONDS,
    "sec": PrecisionLevel.SECONDS,
    "second": PrecisionLevel.SECONDS,
    "ms": PrecisionLevel.MILLISECONDS,
    "millis": PrecisionLevel.MILLISECONDS,
    "millisecond": PrecisionLevel.MILLISECONDS,
    "us": PrecisionLevel.MICROSECONDS,
    "micros": PrecisionLevel.MICROSECONDS,
    "microsecond": PrecisionLevel.MICROSECONDS,
    "ns": PrecisionLevel.NANOSECONDS,
    "nanos": PrecisionLevel.NANOSECONDS,
    "nanosecond": PrecisionLevel.NANOSECONDS,
}

FRACTIONAL_SECONDS: FrozenSet[PrecisionLevel] = frozenset(
    {
        PrecisionLevel.MILLISECONDS,
        PrecisionLevel.MICROSECONDS,
        PrecisionLevel.NANOSECONDS,
    }
)


def compare(a: PrecisionLevel, b: PrecisionLevel) -> int:
    """Return -1 if ``a`` is coarser than ``b``, 0 if equal, 1 if finer."""

    diff = a.rank - b.rank
    return (diff > 0) - (diff < 0)


def _rank_of(other: object) -> int:
    # str operands must not reach the inherited str ordering.
    if not isinstance(other, PrecisionLevel):
        raise TypeError(f"Cannot order PrecisionLevel against {type(other).__name__}")
    return other.rank


def is_fractional_seconds(level: PrecisionLevel) -> bool:
    """True for the sub-second levels (milliseconds and finer)."""

    return level in FRACTIONAL_SECONDS


def _nanos_to_time(nanos: int) -> time:
    hours, rest = divmod(nanos, NANOS_PER_HOUR)
    minutes, rest = divmod(rest, NANOS_PER_MINUTE)
    seconds, rest = divmod(rest, NANOS_PER_SECOND)
    return time(hours, minutes, seconds, rest // NANOS_PER_MICROSECOND)


__all__ = [
    "FRACTIONAL_SECONDS",
    "NANOS_PER_DAY",
    "NANOS_PER_HOUR",
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_SECOND",
    "PrecisionLevel",
    "Weekday",
    "compare",
    "is_fractional_seconds",
]
