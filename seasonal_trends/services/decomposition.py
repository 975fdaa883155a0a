"""
Seasonal Decomposition

Splits a monthly sales series into a trend, a 12-slot additive seasonal index
and an irregular residual using a moving average and per-month averaging of
the detrended values. The forecast and insight services consume its output
as is.
"""

import logging
from typing import List, Sequence

import numpy as np

from seasonal_trends.models.seasonal import SEASONAL_SLOTS, Observation, SeasonalProfile
from seasonal_trends.utils.stats_utils import centered_moving_average, population_variance

logger = logging.getLogger(__name__)

MAX_TREND_WINDOW = 12


def trend_window(length: int) -> int:
    """Moving average window for a series of ``length`` points"""
    return max(1, min(MAX_TREND_WINDOW, length // 2))


def trend_anchor(moving_average: Sequence[float]) -> float:
    """Collapse the trend curve to the scalar handed to the forecast

    Only the last moving average point is kept.
    """
    if len(moving_average) == 0:
        return 0.0
    return float(moving_average[-1])


def seasonal_indices(months: np.ndarray, detrended: np.ndarray) -> np.ndarray:
    """Average detrended value per calendar month, 0 for unseen months"""
    slots = months - 1
    totals = np.bincount(slots, weights=detrended, minlength=SEASONAL_SLOTS)
    counts = np.bincount(slots, minlength=SEASONAL_SLOTS)
    indices = np.zeros(SEASONAL_SLOTS)
    seen = counts > 0
    indices[seen] = totals[seen] / counts[seen]
    return indices


def seasonal_strength(seasonal: Sequence[float], values: Sequence[float]) -> float:
    """Share of the series variance explained by the seasonal index, in [0, 1]"""
    total_variance = population_variance(values)
    if total_variance <= 0:
        return 0.0
    return min(1.0, max(0.0, population_variance(seasonal) / total_variance))


def decompose(series: List[Observation]) -> SeasonalProfile:
    """Decompose a series into trend, seasonal and irregular components

    Args:
        series: Observations in chronological order, one per period

    Returns:
        SeasonalProfile with the trend anchor, 12 seasonal indices, one
        irregular value per observation and the seasonal strength
    """
    if not series:
        return SeasonalProfile(
            trend=0.0,
            seasonal=[0.0] * SEASONAL_SLOTS,
            irregular=[],
            seasonal_strength=0.0,
        )

    if len(series) < MAX_TREND_WINDOW:
        logger.debug(f"Decomposing short series of {len(series)} points; seasonal estimates will be noisy")

    values = np.array([point.value for point in series], dtype=float)
    months = np.array([point.month for point in series], dtype=int)

    moving_average = centered_moving_average(values, trend_window(len(values)))
    detrended = values - moving_average
    seasonal = seasonal_indices(months, detrended)
    irregular = detrended - seasonal[months - 1]

    return SeasonalProfile(
        trend=trend_anchor(moving_average),
        seasonal=seasonal.tolist(),
        irregular=irregular.tolist(),
        seasonal_strength=seasonal_strength(seasonal, values),
    )
