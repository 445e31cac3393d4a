from __future__ import annotations

from datetime import date, datetime, time
from pathlib import Path

import pytest

from little_time.core.ordering import (
    LOCAL_DATE_ORDERING,
    LOCAL_DATE_TIME_ORDERING,
    LOCAL_TIME_ORDERING,
    YEAR_MONTH_ORDERING,
)
from little_time.core.types import YearMonth


@pytest.fixture(scope="session")
def sample_date_times() -> list[datetime]:
    return [
        datetime(2020, 1, 1, 10, 0),
        datetime(2020, 1, 1, 9, 0),
        datetime(2019, 12, 31, 23, 59, 59, 999_999),
        datetime(2020, 1, 1, 9, 0, 0, 1),
        datetime(2020, 1, 1, 10, 0),
    ]


@pytest.fixture(scope="session")
def sample_times() -> list[time]:
    return [time(23, 59, 59, 999_999), time(0, 0), time(12, 30), time(12, 29, 59), time(12, 30)]


@pytest.fixture(scope="session")
def sample_dates() -> list[date]:
    return [date(2021, 3, 1), date(2020, 2, 29), date(2021, 2, 28), date(1999, 12, 31), date(2021, 3, 1)]


@pytest.fixture(scope="session")
def sample_year_months() -> list[YearMonth]:
    return [YearMonth(2021, 11), YearMonth(2021, 3), YearMonth(2020, 12), YearMonth(2022, 1), YearMonth(2021, 3)]


@pytest.fixture(
    params=[
        (LOCAL_DATE_TIME_ORDERING, "sample_date_times"),
        (LOCAL_TIME_ORDERING, "sample_times"),
        (LOCAL_DATE_ORDERING, "sample_dates"),
        (YEAR_MONTH_ORDERING, "sample_year_months"),
    ],
    ids=["date_time", "time", "date", "year_month"],
)
def ordering_with_samples(request: pytest.FixtureRequest):
    ordering, fixture_name = request.param
    return ordering, request.getfixturevalue(fixture_name)


@pytest.fixture
def config_tmpdir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    return tmp_path_factory.mktemp("config")
