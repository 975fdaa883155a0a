"""
Seasonal Insights

Turns a decomposition, a forecast and a volatility report into dashboard
insights. Rules are evaluated in a fixed order and every applicable rule
fires; nothing is merged or suppressed.
"""

import calendar
from typing import List

from seasonal_trends.models.seasonal import (
    ForecastPoint,
    Insight,
    InsightLevel,
    InsightType,
    SeasonalProfile,
    VolatilityLevel,
    VolatilityReport,
)


def month_name(slot: int) -> str:
    """Calendar name for a 0-based seasonal slot"""
    return calendar.month_name[slot + 1]


def format_percent(value: float) -> str:
    """Two-decimal fixed notation without trailing zeros, e.g. 35.5 or 5000000"""
    return f"{value:.2f}".rstrip("0").rstrip(".")


def peak_season_insight(profile: SeasonalProfile) -> Insight:
    seasonal = profile.seasonal
    name = month_name(seasonal.index(max(seasonal)))
    return Insight(
        type=InsightType.PEAK_SEASON,
        title=f"Peak Season: {name}",
        description=(
            f"{name} typically shows the highest sales performance. "
            "Consider increasing inventory and marketing efforts during this period."
        ),
        priority=InsightLevel.HIGH,
        impact=InsightLevel.HIGH,
        actionable=True,
    )


def low_season_insight(profile: SeasonalProfile) -> Insight:
    seasonal = profile.seasonal
    name = month_name(seasonal.index(min(seasonal)))
    return Insight(
        type=InsightType.LOW_SEASON,
        title=f"Low Season: {name}",
        description=(
            f"{name} typically shows lower sales. "
            "Consider promotional campaigns or inventory clearance during this period."
        ),
        priority=InsightLevel.MEDIUM,
        impact=InsightLevel.MEDIUM,
        actionable=True,
    )


def volatility_insight(report: VolatilityReport) -> Insight:
    return Insight(
        type=InsightType.VOLATILITY,
        title="High Sales Volatility Detected",
        description=(
            f"Sales show high volatility ({format_percent(report.value)}%). "
            "Consider implementing more stable pricing and inventory strategies."
        ),
        priority=InsightLevel.HIGH,
        impact=InsightLevel.HIGH,
        actionable=True,
    )


def forecast_trend_insight(forecast_points: List[ForecastPoint]) -> Insight:
    first = forecast_points[0].value if forecast_points else 0
    last = forecast_points[-1].value if forecast_points else 0
    direction = "increasing" if last > first else "decreasing"
    return Insight(
        type=InsightType.FORECAST_TREND,
        title=f"Forecast Trend: {direction.capitalize()}",
        description=(
            f"Based on seasonal patterns, sales are forecasted to {direction} "
            f"over the next {len(forecast_points)} days."
        ),
        priority=InsightLevel.MEDIUM,
        impact=InsightLevel.MEDIUM,
        actionable=True,
    )


def generate_insights(
    profile: SeasonalProfile,
    forecast_points: List[ForecastPoint],
    volatility_report: VolatilityReport,
) -> List[Insight]:
    """Peak season, low season, high volatility (if any), then forecast trend"""
    insights = [
        peak_season_insight(profile),
        low_season_insight(profile),
    ]
    if volatility_report.level == VolatilityLevel.HIGH:
        insights.append(volatility_insight(volatility_report))
    insights.append(forecast_trend_insight(forecast_points))
    return insights
