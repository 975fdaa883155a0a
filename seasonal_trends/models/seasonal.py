"""
Seasonal Trends Models

This module defines the data models exchanged between the decomposition,
forecast, confidence, volatility and insight services, and the report
returned to the admin dashboard. Attributes are snake_case in Python and
camelCase on the wire.
"""

import datetime as dt
from enum import Enum
from typing import Generic, List, Literal, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from seasonal_trends.core.config import settings

SEASONAL_SLOTS = 12


class Period(str, Enum):
    """Historical look-back windows"""
    SIX_MONTHS = "6m"
    TWELVE_MONTHS = "12m"
    TWENTY_FOUR_MONTHS = "24m"

    @property
    def months(self) -> int:
        return {"6m": 6, "12m": 12, "24m": 24}[self.value]


class VolatilityLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class InsightLevel(str, Enum):
    """Priority and impact grades of an insight"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class InsightType(str, Enum):
    PEAK_SEASON = "peak_season"
    LOW_SEASON = "low_season"
    VOLATILITY = "volatility"
    FORECAST_TREND = "forecast_trend"


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Observation(CamelModel):
    """One period of aggregate sales"""
    model_config = ConfigDict(frozen=True)

    date: dt.date
    value: float = Field(..., ge=0)
    month: int = Field(..., ge=1, le=12)
    year: int
    quarter: int = Field(..., ge=1, le=4)

    @classmethod
    def on(cls, day: dt.date, value: float) -> "Observation":
        """Build an observation whose calendar fields are derived from ``day``"""
        return cls(
            date=day,
            value=value,
            month=day.month,
            year=day.year,
            quarter=(day.month - 1) // 3 + 1,
        )


class ForecastPoint(Observation):
    is_forecast: Literal[True] = True


class ConfidenceBand(CamelModel):
    model_config = ConfigDict(frozen=True)

    date: dt.date
    lower: float = Field(..., ge=0)
    upper: float
    confidence: float = Field(..., gt=0, le=1)


class SeasonalProfile(CamelModel):
    """Output of the decomposition

    ``trend`` is a single scalar, the last point of the moving average, not
    the whole trend curve.
    """
    model_config = ConfigDict(frozen=True)

    trend: float
    seasonal: List[float]
    irregular: List[float]
    seasonal_strength: float = Field(..., ge=0, le=1)

    @field_validator("seasonal")
    @classmethod
    def check_seasonal_slots(cls, v):
        if len(v) != SEASONAL_SLOTS:
            raise ValueError(f"seasonal must have exactly {SEASONAL_SLOTS} entries")
        return v


class VolatilityReport(CamelModel):
    model_config = ConfigDict(frozen=True)

    value: float = Field(..., ge=0, description="Standard deviation of period returns, in percent")
    level: VolatilityLevel
    description: str


class Insight(CamelModel):
    model_config = ConfigDict(frozen=True)

    type: InsightType
    title: str
    description: str
    priority: InsightLevel
    impact: InsightLevel
    actionable: bool


class SeasonalTrendsOptions(CamelModel):
    """Request options for a seasonal trends report"""
    period: Period = Field(Period(settings.DEFAULT_PERIOD), description="Historical window")
    forecast_period: int = Field(settings.DEFAULT_FORECAST_PERIOD, ge=1, description="Forecast horizon in days")
    show_confidence: bool = Field(True, description="Include confidence bands")
    category: str = Field(settings.DEFAULT_CATEGORY, min_length=1, description="Product category")

    def cache_key(self) -> str:
        # show_confidence is not part of the key
        return f"seasonal-trends-{self.period.value}-{self.forecast_period}-{self.category}"


class ReportMetadata(CamelModel):
    model_config = ConfigDict(frozen=True)

    period: Period
    forecast_period: int
    category: str
    generated_at: dt.datetime
    data_points: int


class SeasonalTrendsReport(CamelModel):
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "metadata": {
                    "period": "12m",
                    "forecastPeriod": 30,
                    "category": "all",
                    "generatedAt": "2025-01-01T00:00:00Z",
                    "dataPoints": 43
                }
            }
        },
    )

    historical: List[Observation]
    forecast: List[ForecastPoint]
    confidence: Optional[List[ConfidenceBand]] = None
    seasonal_analysis: SeasonalProfile
    volatility: VolatilityReport
    insights: List[Insight]
    metadata: ReportMetadata


class SeasonalInsightsSummary(CamelModel):
    insights: List[Insight]
    seasonal_analysis: SeasonalProfile
    volatility: VolatilityReport


class ForecastSummary(CamelModel):
    forecast: List[ForecastPoint]
    confidence: Optional[List[ConfidenceBand]] = None
    metadata: ReportMetadata


DataT = TypeVar("DataT")


class ApiResponse(BaseModel, Generic[DataT]):
    """Envelope returned by the seasonal trends endpoints"""
    success: bool = True
    data: DataT
    timestamp: dt.datetime = Field(default_factory=lambda: dt.datetime.now(dt.timezone.utc))
