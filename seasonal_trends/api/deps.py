"""
Dependencies for the FastAPI application that provide the cache store,
the historical series supplier and the seasonal trends service
"""
from functools import lru_cache

from fastapi import Depends

from seasonal_trends.core.cache import CacheStore, create_cache_store
from seasonal_trends.core.config import settings
from seasonal_trends.services.historical_series import HistoricalSeriesSupplier, SyntheticSeriesSupplier
from seasonal_trends.services.seasonal_trends import SeasonalTrendsService


@lru_cache()
def get_cache_store() -> CacheStore:
    """
    Dependency to inject the process-wide cache store

    The store is created once so every request shares the same cached reports.
    """
    return create_cache_store(settings)


@lru_cache()
def get_series_supplier() -> HistoricalSeriesSupplier:
    return SyntheticSeriesSupplier()


def get_seasonal_trends_service(
    cache: CacheStore = Depends(get_cache_store),
    series_supplier: HistoricalSeriesSupplier = Depends(get_series_supplier),
) -> SeasonalTrendsService:
    return SeasonalTrendsService(series_supplier=series_supplier, cache=cache)
