"""
Historical Series Suppliers

The seasonal trends service reads its input through the
``HistoricalSeriesSupplier`` protocol. ``SyntheticSeriesSupplier`` reproduces
the admin dashboard's reference data: one month-start observation per month
from ``months`` ago up to the current month, shaped by a category base value,
a fixed monthly seasonality and a yearly growth rate.
"""

import datetime as dt
import logging
from typing import Callable, Dict, List, Optional, Protocol

import numpy as np
import pandas as pd

from seasonal_trends.models.seasonal import Observation, Period
from seasonal_trends.services.forecast import RandomSource
from seasonal_trends.utils.stats_utils import round_half_up

logger = logging.getLogger(__name__)

CATEGORY_BASE_VALUES: Dict[str, float] = {
    "all": 10000,
    "sneakers": 15000,
    "clothing": 8000,
    "accessories": 5000,
    "bags": 12000,
}

# Holiday boost in Nov/Dec, winter low in Feb, summer dip in Jul/Aug
MONTHLY_FACTORS = [0.8, 0.7, 0.9, 1.0, 1.1, 1.2, 0.9, 0.8, 1.0, 1.1, 1.4, 1.6]

GROWTH_BASE_YEAR = 2020
YEARLY_GROWTH = 0.08
WEEKEND_FACTOR = 0.7


class HistoricalSeriesSupplier(Protocol):
    async def get_series(self, period: Period, category: str) -> List[Observation]:
        ...


class SyntheticSeriesSupplier:
    """Generates monthly sales from the reference seasonality model"""

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        today: Optional[Callable[[], dt.date]] = None,
    ):
        self.rng = rng if rng is not None else np.random.default_rng()
        self.today = today or dt.date.today

    def monthly_value(self, day: dt.date, category: str) -> float:
        base = CATEGORY_BASE_VALUES.get(category, CATEGORY_BASE_VALUES["all"])
        seasonal = MONTHLY_FACTORS[day.month - 1]
        growth = 1 + (day.year - GROWTH_BASE_YEAR) * YEARLY_GROWTH
        noise = float(self.rng.uniform(0.9, 1.1))
        weekend = WEEKEND_FACTOR if day.weekday() >= 5 else 1.0
        return base * seasonal * growth * noise * weekend

    async def get_series(self, period: Period, category: str) -> List[Observation]:
        period = Period(period)
        current_month = pd.Timestamp(self.today()).to_period("M").to_timestamp()
        month_starts = pd.date_range(end=current_month, periods=period.months + 1, freq="MS")

        series = []
        for stamp in month_starts:
            day = stamp.date()
            value = round_half_up(self.monthly_value(day, category))
            series.append(Observation.on(day, max(0, value)))

        logger.debug(f"Generated {len(series)} synthetic observations for period={period.value} category={category}")
        return series
