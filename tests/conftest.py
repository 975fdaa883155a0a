import datetime as dt
from typing import Callable, Iterable, List
from unittest.mock import AsyncMock

import pytest

from seasonal_trends.core.cache import InMemoryCacheStore
from seasonal_trends.models.seasonal import Observation
from seasonal_trends.services.historical_series import SyntheticSeriesSupplier
from seasonal_trends.services.seasonal_trends import SeasonalTrendsService

REFERENCE_MONTHLY_VALUES = [100, 90, 95, 105, 110, 120, 95, 85, 100, 110, 140, 160]


class FixedRandom:
    """Random source whose jitter is always the same factor"""

    def __init__(self, factor: float = 1.0):
        self.factor = factor

    def uniform(self, low, high):
        return self.factor


class FakeClock:
    """Monotonic clock that only moves when told to"""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def build_monthly_series(values: Iterable[float], start: dt.date = dt.date(2024, 1, 1)) -> List[Observation]:
    """One observation per month starting at ``start``"""
    series = []
    year, month = start.year, start.month
    for value in values:
        series.append(Observation.on(dt.date(year, month, 1), value))
        month += 1
        if month > 12:
            year, month = year + 1, 1
    return series


def ticking_clock(start: dt.datetime = dt.datetime(2025, 1, 1, tzinfo=dt.timezone.utc)) -> Callable[[], dt.datetime]:
    """Report clock that advances one minute per call"""
    state = {"now": start}

    def clock():
        current = state["now"]
        state["now"] = current + dt.timedelta(minutes=1)
        return current

    return clock


@pytest.fixture
def fixed_random():
    return FixedRandom(1.0)


@pytest.fixture
def reference_series():
    return build_monthly_series(REFERENCE_MONTHLY_VALUES)


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def memory_cache(fake_clock):
    return InMemoryCacheStore(clock=fake_clock)


@pytest.fixture
def series_supplier(reference_series):
    """Supplier mock returning the reference 12-month series"""
    supplier = AsyncMock()
    supplier.get_series.return_value = reference_series
    return supplier


@pytest.fixture
def seasonal_service(series_supplier, memory_cache, fixed_random):
    return SeasonalTrendsService(
        series_supplier=series_supplier,
        cache=memory_cache,
        cache_ttl=1800,
        rng=fixed_random,
        clock=ticking_clock(),
    )


@pytest.fixture
def synthetic_supplier(fixed_random):
    return SyntheticSeriesSupplier(rng=fixed_random, today=lambda: dt.date(2025, 6, 15))
