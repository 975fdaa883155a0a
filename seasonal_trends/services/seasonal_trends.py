"""
Seasonal Trends Service

Builds the seasonal trends report for the admin dashboard: historical series,
decomposition, forecast, optional confidence bands, volatility and insights.
Reports are cached per ``(period, forecast_period, category)`` for a fixed TTL
and regenerated when the entry expires.
"""

import datetime as dt
import logging
from typing import Callable, Optional

from seasonal_trends.core.cache import CacheStore
from seasonal_trends.core.config import settings
from seasonal_trends.core.exceptions import ValidationError
from seasonal_trends.models.seasonal import (
    ForecastSummary,
    ReportMetadata,
    SeasonalInsightsSummary,
    SeasonalTrendsOptions,
    SeasonalTrendsReport,
)
from seasonal_trends.services.confidence import confidence_intervals
from seasonal_trends.services.decomposition import decompose
from seasonal_trends.services.forecast import RandomSource, forecast
from seasonal_trends.services.historical_series import HistoricalSeriesSupplier
from seasonal_trends.services.insights import generate_insights
from seasonal_trends.services.volatility import volatility

CACHE_KEY_PREFIX = "seasonal-trends-"


def _utcnow() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


class SeasonalTrendsService:
    """
    Orchestrates the seasonal trends pipeline behind a cache store.

    The cache store and series supplier are the only awaitable collaborators;
    their failures propagate to the caller unchanged.
    """

    def __init__(
        self,
        series_supplier: HistoricalSeriesSupplier,
        cache: CacheStore,
        cache_ttl: Optional[int] = None,
        rng: Optional[RandomSource] = None,
        clock: Callable[[], dt.datetime] = _utcnow,
    ):
        self.series_supplier = series_supplier
        self.cache = cache
        self.cache_ttl = cache_ttl if cache_ttl is not None else settings.SEASONAL_TRENDS_CACHE_TTL
        self.rng = rng
        self.clock = clock
        self.max_forecast_horizon = settings.MAX_FORECAST_HORIZON
        self.logger = logging.getLogger(__name__)

    async def generate_seasonal_trends(self, options: SeasonalTrendsOptions) -> SeasonalTrendsReport:
        """
        Return the report for ``options``, from cache when a live entry exists

        Args:
            options: Period, forecast horizon, confidence flag and category

        Returns:
            The cached or freshly built report
        """
        if options.forecast_period > self.max_forecast_horizon:
            raise ValidationError(
                f"forecastPeriod must not exceed {self.max_forecast_horizon} days",
                context={"forecast_period": options.forecast_period},
            )

        cache_key = options.cache_key()
        cached = await self.cache.get(cache_key)
        if cached is not None:
            self.logger.debug(f"Seasonal trends cache hit: {cache_key}")
            return SeasonalTrendsReport.model_validate(cached)

        self.logger.info(f"Seasonal trends cache miss, building report: {cache_key}")
        report = await self._build_report(options)
        await self.cache.set(cache_key, report.model_dump(mode="json", by_alias=True), self.cache_ttl)
        return report

    async def _build_report(self, options: SeasonalTrendsOptions) -> SeasonalTrendsReport:
        try:
            historical = await self.series_supplier.get_series(options.period, options.category)
        except Exception as e:
            self.logger.error(
                f"Error loading historical series: {str(e)}",
                extra={"period": options.period.value, "category": options.category},
                exc_info=True
            )
            raise

        generated_at = self.clock()
        profile = decompose(historical)
        forecast_points = forecast(
            historical,
            options.forecast_period,
            profile,
            rng=self.rng,
            today=generated_at.date(),
        )
        confidence = confidence_intervals(forecast_points, historical) if options.show_confidence else None
        volatility_report = volatility(historical)
        insights = generate_insights(profile, forecast_points, volatility_report)

        return SeasonalTrendsReport(
            historical=historical,
            forecast=forecast_points,
            confidence=confidence,
            seasonal_analysis=profile,
            volatility=volatility_report,
            insights=insights,
            metadata=ReportMetadata(
                period=options.period,
                forecast_period=options.forecast_period,
                category=options.category,
                generated_at=generated_at,
                data_points=len(historical) + len(forecast_points),
            ),
        )

    async def get_insights(self, options: SeasonalTrendsOptions) -> SeasonalInsightsSummary:
        """Insights, seasonal analysis and volatility of the report"""
        report = await self.generate_seasonal_trends(options)
        return SeasonalInsightsSummary(
            insights=report.insights,
            seasonal_analysis=report.seasonal_analysis,
            volatility=report.volatility,
        )

    async def get_forecast(self, options: SeasonalTrendsOptions) -> ForecastSummary:
        """Forecast, confidence bands and metadata of the report"""
        report = await self.generate_seasonal_trends(options)
        return ForecastSummary(
            forecast=report.forecast,
            confidence=report.confidence,
            metadata=report.metadata,
        )

    async def clear_cache(self) -> int:
        """Drop every cached seasonal trends report, returning how many were removed"""
        cleared = await self.cache.delete_prefix(CACHE_KEY_PREFIX)
        self.logger.info(f"Cleared {cleared} seasonal trends cache entries")
        return cleared
