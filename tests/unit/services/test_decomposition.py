"""Unit tests for the seasonal decomposition"""
import pytest

from seasonal_trends.services.decomposition import (
    decompose,
    seasonal_strength,
    trend_anchor,
    trend_window,
)
from tests.conftest import REFERENCE_MONTHLY_VALUES, build_monthly_series


@pytest.mark.parametrize("length", [12, 13, 24, 36])
def test_constant_series_has_no_seasonality(length):
    """A flat series decomposes into a flat trend and zero seasonal index"""
    profile = decompose(build_monthly_series([500] * length))

    assert profile.trend == 500
    assert profile.seasonal == [0.0] * 12
    assert profile.seasonal_strength == 0
    assert len(profile.irregular) == length
    assert all(value == 0 for value in profile.irregular)


def test_reference_series_peaks_in_december(reference_series):
    profile = decompose(reference_series)
    seasonal = profile.seasonal

    assert len(seasonal) == 12
    assert seasonal.index(max(seasonal)) == 11
    assert seasonal[11] > 0
    # February sits with the most negative months
    assert seasonal[1] < 0
    assert sum(1 for value in seasonal if value < seasonal[1]) <= 2


def test_reference_series_trend_is_last_moving_average_point(reference_series):
    """Window is 6 for 12 points; the last window holds Sep-Dec"""
    profile = decompose(reference_series)

    assert profile.trend == pytest.approx((100 + 110 + 140 + 160) / 4)


def test_single_year_residual_is_zero(reference_series):
    """With one observation per month the seasonal index absorbs all detrended variation"""
    profile = decompose(reference_series)

    assert profile.irregular == pytest.approx([0.0] * 12)
    assert 0 < profile.seasonal_strength <= 1


def test_decomposition_is_deterministic(reference_series):
    first = decompose(reference_series)
    second = decompose(reference_series)

    assert first == second


def test_short_series_still_decomposes():
    """Fewer than 12 points gives noisy but well-formed output"""
    series = build_monthly_series([100, 120, 80, 130, 90])
    profile = decompose(series)

    assert len(profile.seasonal) == 12
    assert profile.seasonal[5:] == [0.0] * 7
    assert len(profile.irregular) == 5
    assert 0 <= profile.seasonal_strength <= 1


def test_single_point_series():
    profile = decompose(build_monthly_series([250]))

    assert profile.trend == 250
    assert profile.seasonal == [0.0] * 12
    assert profile.seasonal_strength == 0


def test_empty_series():
    profile = decompose([])

    assert profile.trend == 0
    assert profile.seasonal == [0.0] * 12
    assert profile.irregular == []
    assert profile.seasonal_strength == 0


def test_two_years_average_each_month():
    """Repeated months are averaged into one seasonal slot"""
    values = REFERENCE_MONTHLY_VALUES + REFERENCE_MONTHLY_VALUES
    profile = decompose(build_monthly_series(values))

    assert len(profile.irregular) == 24
    assert profile.seasonal.index(max(profile.seasonal)) == 11


@pytest.mark.parametrize("length,expected", [(0, 1), (1, 1), (5, 2), (12, 6), (24, 12), (60, 12)])
def test_trend_window(length, expected):
    assert trend_window(length) == expected


def test_trend_anchor():
    assert trend_anchor([1.0, 2.0, 3.5]) == 3.5
    assert trend_anchor([]) == 0.0


def test_seasonal_strength_guards():
    assert seasonal_strength([1.0] * 12, [7, 7, 7]) == 0.0
    assert seasonal_strength([0.0] * 12, [1]) == 0.0
    # Ratio above 1 is clamped
    assert seasonal_strength([0, 100] * 6, [10, 11]) == 1.0
