"""Confidence bands around forecast points, widest near the start of the horizon"""

from typing import List

from seasonal_trends.models.seasonal import ConfidenceBand, ForecastPoint, Observation
from seasonal_trends.utils.stats_utils import population_std, round_half_up

Z_95 = 1.96
MIN_CONFIDENCE = 0.5
CONFIDENCE_DECAY = 0.8


def confidence_factor(index: int, horizon: int) -> float:
    """Confidence for the 0-based forecast ``index``, non-increasing in ``index``"""
    return max(MIN_CONFIDENCE, 1 - (index / horizon) * CONFIDENCE_DECAY)


def confidence_intervals(
    forecast_points: List[ForecastPoint],
    historical: List[Observation],
) -> List[ConfidenceBand]:
    std_dev = population_std([point.value for point in historical])
    horizon = len(forecast_points)

    bands = []
    for index, point in enumerate(forecast_points):
        factor = confidence_factor(index, horizon)
        margin = std_dev * factor * Z_95
        bands.append(ConfidenceBand(
            date=point.date,
            lower=max(0, round_half_up(point.value - margin)),
            upper=round_half_up(point.value + margin),
            confidence=factor,
        ))
    return bands
