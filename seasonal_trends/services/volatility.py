"""Volatility of period-over-period returns"""

import logging
from typing import List

import numpy as np

from seasonal_trends.models.seasonal import Observation, VolatilityLevel, VolatilityReport
from seasonal_trends.utils.stats_utils import round_half_up

logger = logging.getLogger(__name__)

HIGH_THRESHOLD = 20
MEDIUM_THRESHOLD = 10

DESCRIPTIONS = {
    VolatilityLevel.LOW: "Stable sales with minimal fluctuations",
    VolatilityLevel.MEDIUM: "Moderate sales fluctuations within normal range",
    VolatilityLevel.HIGH: "High sales volatility requiring attention",
}


def classify(value: float) -> VolatilityLevel:
    if value > HIGH_THRESHOLD:
        return VolatilityLevel.HIGH
    if value > MEDIUM_THRESHOLD:
        return VolatilityLevel.MEDIUM
    return VolatilityLevel.LOW


def _report(value: float) -> VolatilityReport:
    level = classify(value)
    return VolatilityReport(
        value=round_half_up(value * 100) / 100,
        level=level,
        description=DESCRIPTIONS[level],
    )


def volatility(series: List[Observation]) -> VolatilityReport:
    """Standard deviation of relative returns, as a percentage rounded to 2 decimals

    Returns whose previous value is 0 are skipped.
    """
    if len(series) < 2:
        return _report(0.0)

    values = np.array([point.value for point in series], dtype=float)
    previous, current = values[:-1], values[1:]
    valid = previous != 0
    if not valid.all():
        logger.debug(f"Skipping {int((~valid).sum())} returns with a zero previous value")
    returns = (current[valid] - previous[valid]) / previous[valid]
    if returns.size == 0:
        return _report(0.0)

    return _report(float(np.std(returns)) * 100)
