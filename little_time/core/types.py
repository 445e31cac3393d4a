"""Temporal value types and aliases.

``datetime`` supplies the date-time, time-of-day and date types used across
the library. It has no year-month type, so :class:`YearMonth` fills that gap:
a frozen value with field-based equality and just enough calendar logic to
walk months and find their first and last days.
"""
from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date, datetime, time
from typing import TypeAlias, TypeVar

LocalDateTime: TypeAlias = datetime
LocalTime: TypeAlias = time
LocalDate: TypeAlias = date

TimeLike = TypeVar("TimeLike", time, datetime)


@dataclass(frozen=True, slots=True)
class YearMonth:
    """A month of a specific year, such as ``2021-03``.

    Ordering is deliberately not defined on the type itself; use
    :data:`little_time.core.ordering.YEAR_MONTH_ORDERING`.
    """

    year: int
    month: int

    def __post_init__(self) -> None:
        if not MINYEAR <= self.year <= MAXYEAR:
            raise ValueError(f"year must be in {MINYEAR}..{MAXYEAR}, got {self.year}")
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be in 1..12, got {self.month}")

    @classmethod
    def from_date(cls, value: date) -> "YearMonth":
        return cls(value.year, value.month)

    def length_of_month(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    def at_day(self, day: int) -> date:
        return date(self.year, self.month, day)

    def at_start_of_month(self) -> date:
        return date(self.year, self.month, 1)

    def at_end_of_month(self) -> date:
        return date(self.year, self.month, self.length_of_month())

    def plus_months(self, months: int) -> "YearMonth":
        """Shift by ``months`` (negative moves backwards) across year boundaries."""

        year, month_index = divmod(self.year * 12 + (self.month - 1) + months, 12)
        return YearMonth(year, month_index + 1)

    def minus_months(self, months: int) -> "YearMonth":
        return self.plus_months(-months)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    def __str__(self) -> str:
        return self.isoformat()


__all__ = [
    "LocalDate",
    "LocalDateTime",
    "LocalTime",
    "TimeLike",
    "YearMonth",
]
