"""Unit tests for the seasonal forecast"""
import datetime as dt

import numpy as np
import pytest

from seasonal_trends.core.exceptions import DataError
from seasonal_trends.models.seasonal import SeasonalProfile
from seasonal_trends.services.forecast import forecast
from tests.conftest import FixedRandom, build_monthly_series


def _profile(trend=0.0, seasonal=None):
    return SeasonalProfile(
        trend=trend,
        seasonal=seasonal if seasonal is not None else [0.0] * 12,
        irregular=[],
        seasonal_strength=0.0,
    )


def test_trend_is_scaled_per_thirty_days(fixed_random):
    series = build_monthly_series([80, 90, 100])
    points = forecast(series, 30, _profile(trend=30), rng=fixed_random, today=dt.date(2025, 1, 1))

    assert len(points) == 30
    assert [point.value for point in points] == [100 + i for i in range(1, 31)]
    assert points[0].date == dt.date(2025, 1, 2)
    assert points[-1].date == dt.date(2025, 1, 31)
    assert all(point.is_forecast for point in points)


def test_seasonal_index_follows_target_month(fixed_random):
    seasonal = [0.0] * 12
    seasonal[1] = 50.0
    series = build_monthly_series([100])
    points = forecast(series, 3, _profile(seasonal=seasonal), rng=fixed_random, today=dt.date(2025, 1, 30))

    assert [(p.date, p.month, p.value) for p in points] == [
        (dt.date(2025, 1, 31), 1, 100),
        (dt.date(2025, 2, 1), 2, 150),
        (dt.date(2025, 2, 2), 2, 150),
    ]
    assert points[1].quarter == 1
    assert points[1].year == 2025


def test_forecast_is_floored_at_zero(fixed_random):
    series = build_monthly_series([100, 50, 10])
    profile = _profile(trend=-1000, seasonal=[-500.0] * 12)

    points = forecast(series, 60, profile, rng=fixed_random, today=dt.date(2025, 3, 1))

    assert len(points) == 60
    assert all(point.value == 0 for point in points)


def test_jitter_is_applied_multiplicatively():
    series = build_monthly_series([1000])
    points = forecast(series, 5, _profile(), rng=FixedRandom(1.1), today=dt.date(2025, 1, 1))

    assert [point.value for point in points] == [1100] * 5


def test_jitter_stays_within_ten_percent():
    series = build_monthly_series([1000])
    rng = np.random.default_rng(42)
    points = forecast(series, 200, _profile(), rng=rng, today=dt.date(2025, 1, 1))

    assert all(900 <= point.value <= 1100 for point in points)
    # Real jitter produces more than one distinct value
    assert len({point.value for point in points}) > 1


def test_values_round_half_up(fixed_random):
    series = build_monthly_series([2.5])
    points = forecast(series, 1, _profile(), rng=fixed_random, today=dt.date(2025, 1, 1))

    assert points[0].value == 3


def test_default_random_source_is_used_when_none_given():
    series = build_monthly_series([1000])
    points = forecast(series, 10, _profile(), today=dt.date(2025, 1, 1))

    assert len(points) == 10
    assert all(900 <= point.value <= 1100 for point in points)


def test_empty_series_cannot_be_forecast(fixed_random):
    with pytest.raises(DataError):
        forecast([], 10, _profile(), rng=fixed_random)
