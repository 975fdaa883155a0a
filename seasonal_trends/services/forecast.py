"""
Seasonal Forecast

Projects daily forecast points from the last observed value plus a linearly
scaled trend, the seasonal index of the target month and a random jitter.
"""

import datetime as dt
from typing import List, Optional, Protocol

import numpy as np

from seasonal_trends.core.exceptions import DataError
from seasonal_trends.models.seasonal import ForecastPoint, Observation, SeasonalProfile
from seasonal_trends.utils.stats_utils import round_half_up

JITTER_LOW = 0.9
JITTER_HIGH = 1.1
# The trend anchor is applied as a rate per 30 forecast days
TREND_DAYS = 30


class RandomSource(Protocol):
    def uniform(self, low: float, high: float) -> float:
        ...


def forecast(
    series: List[Observation],
    horizon_days: int,
    profile: SeasonalProfile,
    rng: Optional[RandomSource] = None,
    today: Optional[dt.date] = None,
) -> List[ForecastPoint]:
    """
    Project ``horizon_days`` daily points starting the day after ``today``

    Args:
        series: Historical observations, the last one anchors the forecast
        horizon_days: Number of days to project
        profile: Decomposition of ``series``
        rng: Source of the multiplicative jitter, defaults to a fresh numpy generator
        today: Reference date, defaults to the current date

    Returns:
        One ForecastPoint per day, values floored at 0
    """
    if not series:
        raise DataError("Cannot forecast from an empty series")

    rng = rng if rng is not None else np.random.default_rng()
    today = today or dt.date.today()
    anchor = series[-1].value

    points = []
    for i in range(1, horizon_days + 1):
        target = today + dt.timedelta(days=i)
        slot = target.month - 1
        seasonal_factor = profile.seasonal[slot] if 0 <= slot < len(profile.seasonal) else 0.0
        trend_projection = profile.trend * (i / TREND_DAYS)
        random_factor = float(rng.uniform(JITTER_LOW, JITTER_HIGH))

        value = round_half_up((anchor + trend_projection + seasonal_factor) * random_factor)
        points.append(ForecastPoint.on(target, max(0, value)))

    return points
