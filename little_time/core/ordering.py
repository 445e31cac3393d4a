"""Standalone total orders for the temporal value types.

Each :class:`Ordering` compares two values of one type by a tuple of their
fields, earliest first. The four shared instances below can be passed
wherever an explicit order is wanted (``sorted(key=...)``, ``bisect``,
min/max reductions, range checks) without relying on the value type's own
comparison operators.

Orderings do not check the types of their arguments; mixing types is a
caller bug.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from functools import cmp_to_key
from typing import Any, Callable, Generic, Iterable, TypeVar

from .types import YearMonth

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ordering(Generic[T]):
    """Total order over ``T`` derived from a field-key function."""

    name: str
    key: Callable[[T], Any]
    descending: bool = False

    def compare(self, a: T, b: T) -> int:
        """Return -1, 0 or 1 as ``a`` sorts before, with, or after ``b``."""

        ka, kb = self.key(a), self.key(b)
        result = (ka > kb) - (ka < kb)
        return -result if self.descending else result

    def lt(self, a: T, b: T) -> bool:
        return self.compare(a, b) < 0

    def lteq(self, a: T, b: T) -> bool:
        return self.compare(a, b) <= 0

    def gt(self, a: T, b: T) -> bool:
        return self.compare(a, b) > 0

    def gteq(self, a: T, b: T) -> bool:
        return self.compare(a, b) >= 0

    def equiv(self, a: T, b: T) -> bool:
        return self.compare(a, b) == 0

    def min(self, first: T, *rest: T) -> T:
        best = first
        for value in rest:
            if self.compare(value, best) < 0:
                best = value
        return best

    def max(self, first: T, *rest: T) -> T:
        best = first
        for value in rest:
            if self.compare(value, best) > 0:
                best = value
        return best

    def between(self, value: T, lower: T, upper: T) -> bool:
        """Inclusive range check: ``lower <= value <= upper`` in this order."""

        return self.compare(lower, value) <= 0 and self.compare(value, upper) <= 0

    @property
    def sort_key(self) -> Callable[[T], Any]:
        """Key wrapper for ``sorted``/``list.sort``/``bisect``."""

        return cmp_to_key(self.compare)

    def sorted(self, values: Iterable[T], *, reverse: bool = False) -> list[T]:
        return sorted(values, key=self.sort_key, reverse=reverse)

    def reverse(self) -> "Ordering[T]":
        return Ordering(self.name, self.key, not self.descending)


def _local_date_time_key(value: datetime) -> tuple[int, ...]:
    # Wall-clock fields only: tzinfo and fold do not take part.
    return (
        value.year,
        value.month,
        value.day,
        value.hour,
        value.minute,
        value.second,
        value.microsecond,
    )


def _local_time_key(value: time) -> tuple[int, ...]:
    return (value.hour, value.minute, value.second, value.microsecond)


def _local_date_key(value: date) -> tuple[int, ...]:
    return (value.year, value.month, value.day)


def _year_month_key(value: YearMonth) -> tuple[int, ...]:
    return (value.year, value.month)


LOCAL_DATE_TIME_ORDERING: Ordering[datetime] = Ordering("local_date_time", _local_date_time_key)
LOCAL_TIME_ORDERING: Ordering[time] = Ordering("local_time", _local_time_key)
LOCAL_DATE_ORDERING: Ordering[date] = Ordering("local_date", _local_date_key)
YEAR_MONTH_ORDERING: Ordering[YearMonth] = Ordering("year_month", _year_month_key)

__all__ = [
    "LOCAL_DATE_ORDERING",
    "LOCAL_DATE_TIME_ORDERING",
    "LOCAL_TIME_ORDERING",
    "Ordering",
    "YEAR_MONTH_ORDERING",
]
