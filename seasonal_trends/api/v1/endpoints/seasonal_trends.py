"""
Seasonal Trends API Endpoints

This module provides REST API endpoints for the seasonal trends dashboard:
the full report, insights only, forecast only, and cache invalidation.
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Any, Dict
from datetime import datetime, timezone

from seasonal_trends.api.deps import get_seasonal_trends_service
from seasonal_trends.core.config import settings
from seasonal_trends.core.exceptions import ValidationError
from seasonal_trends.core.logging import logger
from seasonal_trends.models.seasonal import (
    ApiResponse,
    ForecastSummary,
    Period,
    SeasonalInsightsSummary,
    SeasonalTrendsOptions,
    SeasonalTrendsReport,
)
from seasonal_trends.services.seasonal_trends import SeasonalTrendsService

# Create router for seasonal trends endpoints
router = APIRouter()

INSIGHTS_FORECAST_PERIOD = 30


def _failure(error: str, e: Exception, options: SeasonalTrendsOptions) -> HTTPException:
    if isinstance(e, ValidationError):
        return e.to_http_exception(status_code=400)
    logger.error(f"{error}: {str(e)}", extra={
        "period": options.period.value,
        "category": options.category,
        "error": str(e)
    }, exc_info=True)
    return HTTPException(status_code=500, detail={"error": error, "message": str(e)})


@router.get("", response_model=ApiResponse[SeasonalTrendsReport])
async def get_seasonal_trends(
    period: Period = Query(Period(settings.DEFAULT_PERIOD), description="Historical window"),
    forecast_period: int = Query(settings.DEFAULT_FORECAST_PERIOD, alias="forecastPeriod", ge=1, description="Forecast horizon in days"),
    show_confidence: bool = Query(True, alias="showConfidence", description="Include confidence bands"),
    category: str = Query(settings.DEFAULT_CATEGORY, min_length=1, description="Product category"),
    service: SeasonalTrendsService = Depends(get_seasonal_trends_service),
):
    """
    Get the seasonal trends analysis with forecasting

    Returns the historical series, forecast, optional confidence bands,
    decomposition, volatility and insights.
    """
    options = SeasonalTrendsOptions(
        period=period,
        forecast_period=forecast_period,
        show_confidence=show_confidence,
        category=category,
    )
    try:
        report = await service.generate_seasonal_trends(options)
    except Exception as e:
        raise _failure("Failed to generate seasonal trends", e, options)
    return ApiResponse[SeasonalTrendsReport](data=report)


@router.get("/insights", response_model=ApiResponse[SeasonalInsightsSummary])
async def get_seasonal_insights(
    period: Period = Query(Period(settings.DEFAULT_PERIOD), description="Historical window"),
    category: str = Query(settings.DEFAULT_CATEGORY, min_length=1, description="Product category"),
    service: SeasonalTrendsService = Depends(get_seasonal_trends_service),
):
    """Get seasonal insights, decomposition and volatility only"""
    options = SeasonalTrendsOptions(
        period=period,
        forecast_period=INSIGHTS_FORECAST_PERIOD,
        show_confidence=False,
        category=category,
    )
    try:
        summary = await service.get_insights(options)
    except Exception as e:
        raise _failure("Failed to generate seasonal insights", e, options)
    return ApiResponse[SeasonalInsightsSummary](data=summary)


@router.get("/forecast", response_model=ApiResponse[ForecastSummary])
async def get_seasonal_forecast(
    period: Period = Query(Period(settings.DEFAULT_PERIOD), description="Historical window"),
    forecast_period: int = Query(settings.DEFAULT_FORECAST_PERIOD, alias="forecastPeriod", ge=1, description="Forecast horizon in days"),
    category: str = Query(settings.DEFAULT_CATEGORY, min_length=1, description="Product category"),
    service: SeasonalTrendsService = Depends(get_seasonal_trends_service),
):
    """Get forecast points, confidence bands and metadata only"""
    options = SeasonalTrendsOptions(
        period=period,
        forecast_period=forecast_period,
        show_confidence=True,
        category=category,
    )
    try:
        summary = await service.get_forecast(options)
    except Exception as e:
        raise _failure("Failed to generate forecast", e, options)
    return ApiResponse[ForecastSummary](data=summary)


@router.post("/clear-cache", response_model=Dict[str, Any])
async def clear_seasonal_trends_cache(
    service: SeasonalTrendsService = Depends(get_seasonal_trends_service),
):
    """Clear every cached seasonal trends report"""
    try:
        cleared = await service.clear_cache()
    except Exception as e:
        logger.error(f"Error clearing seasonal trends cache: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail={"error": "Failed to clear seasonal trends cache", "message": str(e)}
        )
    return {
        "success": True,
        "message": "Seasonal trends cache cleared successfully",
        "cleared": cleared,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
