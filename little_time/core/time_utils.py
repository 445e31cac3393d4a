"""Convenience helpers layered on the precision model and orderings.

Start/end-of-period helpers, truncation and inclusive iteration. "End of"
helpers take a :class:`PrecisionLevel` and fill the fields below the period
with those of ``precision.limit``, so ``at_end_of_day(d, MILLISECONDS)``
yields ``23:59:59.999`` on ``d``.
"""
from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Iterator, TypeVar

from .enums import NANOS_PER_MICROSECOND, PrecisionLevel, Weekday
from .ordering import LOCAL_DATE_ORDERING, YEAR_MONTH_ORDERING, Ordering
from .types import TimeLike, YearMonth

T = TypeVar("T")

# Wall-clock fields of time/datetime, coarsest first, with the level they belong to.
_FIELDS = (
    (PrecisionLevel.MINUTES, "minute"),
    (PrecisionLevel.SECONDS, "second"),
    (PrecisionLevel.MILLISECONDS, "microsecond"),
)


def truncate(value: TimeLike, precision: PrecisionLevel) -> TimeLike:
    """Zero every field of ``value`` finer than ``precision``."""

    if precision.is_fractional:
        unit_micros = max(precision.unit_nanos // NANOS_PER_MICROSECOND, 1)
        return value.replace(microsecond=value.microsecond // unit_micros * unit_micros)
    changes = {name: 0 for level, name in _FIELDS if level > precision}
    return value.replace(**changes)


def _end_of(value: TimeLike, unit: PrecisionLevel, precision: PrecisionLevel) -> TimeLike:
    # Limit fields finer than the precision are zero, so coarse precisions
    # collapse to the start of the unit.
    limit = precision.limit
    changes = {name: getattr(limit, name) for level, name in _FIELDS if level > unit}
    return value.replace(**changes)


def at_start_of_hour(value: TimeLike) -> TimeLike:
    return truncate(value, PrecisionLevel.HOURS)


def at_start_of_minute(value: TimeLike) -> TimeLike:
    return truncate(value, PrecisionLevel.MINUTES)


def at_start_of_second(value: TimeLike) -> TimeLike:
    return truncate(value, PrecisionLevel.SECONDS)


def at_end_of_hour(value: TimeLike, precision: PrecisionLevel = PrecisionLevel.NANOSECONDS) -> TimeLike:
    return _end_of(value, PrecisionLevel.HOURS, precision)


def at_end_of_minute(value: TimeLike, precision: PrecisionLevel = PrecisionLevel.NANOSECONDS) -> TimeLike:
    return _end_of(value, PrecisionLevel.MINUTES, precision)


def at_end_of_second(value: TimeLike, precision: PrecisionLevel = PrecisionLevel.NANOSECONDS) -> TimeLike:
    return _end_of(value, PrecisionLevel.SECONDS, precision)


def at_start_of_day(value: date) -> datetime:
    return datetime.combine(_as_date(value), time.min)


def at_end_of_day(value: date, precision: PrecisionLevel = PrecisionLevel.NANOSECONDS) -> datetime:
    """Last moment of the day at ``precision``, e.g. 23:59:00 for minutes."""

    return datetime.combine(_as_date(value), precision.limit)


def at_start_of_month(value: date) -> date:
    return YearMonth.from_date(value).at_start_of_month()


def at_end_of_month(value: date) -> date:
    return YearMonth.from_date(value).at_end_of_month()


def at_start_of_year(value: date) -> date:
    return date(value.year, 1, 1)


def at_end_of_year(value: date) -> date:
    return date(value.year, 12, 31)


def at_start_of_week(value: date, first_day: Weekday = Weekday.MONDAY) -> date:
    """Closest ``first_day`` on or before ``value``."""

    day = _as_date(value)
    return day - timedelta(days=(day.weekday() - first_day) % 7)


def at_end_of_week(value: date, first_day: Weekday = Weekday.MONDAY) -> date:
    return at_start_of_week(value, first_day) + timedelta(days=6)


def is_before(a: T, b: T, ordering: Ordering[T]) -> bool:
    return ordering.lt(a, b)


def is_after(a: T, b: T, ordering: Ordering[T]) -> bool:
    return ordering.gt(a, b)


def is_between(value: T, lower: T, upper: T, ordering: Ordering[T]) -> bool:
    return ordering.between(value, lower, upper)


def iterate_dates(start: date, end: date, step_days: int = 1) -> Iterator[date]:
    """Yield dates from ``start`` to ``end`` inclusive, ``step_days`` apart."""

    if step_days < 1:
        raise ValueError(f"step_days must be positive, got {step_days}")
    step = timedelta(days=step_days)
    current = _as_date(start)
    stop = _as_date(end)
    while LOCAL_DATE_ORDERING.lteq(current, stop):
        yield current
        if stop - current < step:
            return
        current += step


def iterate_months(start: YearMonth, end: YearMonth, step: int = 1) -> Iterator[YearMonth]:
    """Yield months from ``start`` to ``end`` inclusive, ``step`` months apart."""

    if step < 1:
        raise ValueError(f"step must be positive, got {step}")
    current = start
    while YEAR_MONTH_ORDERING.lteq(current, end):
        yield current
        if _month_index(end) - _month_index(current) < step:
            return
        current = current.plus_months(step)


def _as_date(value: date) -> date:
    return value.date() if isinstance(value, datetime) else value


def _month_index(value: YearMonth) -> int:
    return value.year * 12 + value.month - 1


__all__ = [
    "at_end_of_day",
    "at_end_of_hour",
    "at_end_of_minute",
    "at_end_of_month",
    "at_end_of_second",
    "at_end_of_week",
    "at_end_of_year",
    "at_start_of_day",
    "at_start_of_hour",
    "at_start_of_minute",
    "at_start_of_month",
    "at_start_of_second",
    "at_start_of_week",
    "at_start_of_year",
    "is_after",
    "is_before",
    "is_between",
    "iterate_dates",
    "iterate_months",
    "truncate",
]
