"""
Application Schema Definitions

Wire names follow the camelCase keys used by the dashboard and by the model's
JSON output; Python attributes are snake_case. All models are immutable.
"""
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ecopulse.config.constants import SERIES_LENGTH


class HourlyRecord(BaseModel):
    """One hour of campus energy metrics"""
    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        json_schema_extra={
            "example": {
                "hour": 12,
                "solarOutputKW": 612.0,
                "windOutputKW": 245.0,
                "demandKW": 788.0,
                "sunlightFlag": True,
                "windSpeed": 14.0,
            }
        },
    )

    hour: int = Field(..., ge=0, le=23, description="Hour of day")
    solar_output_kw: float = Field(..., ge=0, alias="solarOutputKW", description="Solar generation in kW")
    wind_output_kw: float = Field(..., ge=0, alias="windOutputKW", description="Wind generation in kW")
    demand_kw: float = Field(..., ge=0, alias="demandKW", description="Campus demand in kW")
    sunlight_flag: bool = Field(..., alias="sunlightFlag", description="True inside the daylight window")
    wind_speed: float = Field(..., ge=0, alias="windSpeed", description="Wind speed in m/s")


class SeriesTotals(BaseModel):
    """Aggregate sums over a 24-hour series"""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    total_solar_kw: float = Field(..., alias="totalSolarKW")
    total_wind_kw: float = Field(..., alias="totalWindKW")
    total_demand_kw: float = Field(..., alias="totalDemandKW")


class EnergyBalancePoint(BaseModel):
    """Renewable supply against demand for one hour, as charted by the dashboard"""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    hour: int = Field(..., ge=0, le=23)
    label: str = Field(..., description="Display label, e.g. '13:00'")
    solar_kw: float = Field(..., alias="solarKW")
    wind_kw: float = Field(..., alias="windKW")
    renewables_kw: float = Field(..., alias="renewablesKW")
    demand_kw: float = Field(..., alias="demandKW")
    surplus_kw: float = Field(..., alias="surplusKW", description="Renewables minus demand")


class AnalysisResult(BaseModel):
    """Sustainability analysis returned by the model"""
    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        json_schema_extra={
            "example": {
                "sustainabilityScore": 72,
                "wastageDetected": 140,
                "gridReductionPercent": 31,
                "loadShiftWindows": ["11:00 AM - 1:00 PM", "2:00 PM - 4:00 PM"],
                "recommendations": [
                    "Run laundry and dishwashing loads around midday.",
                    "Pre-cool lecture halls before the afternoon peak.",
                    "Schedule EV fleet charging during high wind hours.",
                ],
                "esgInsights": [
                    "Midday solar surplus supports SDG 7.2 reporting.",
                    "Load shifting evidence can feed ISO 50001 reviews.",
                ],
                "summary": "Renewables cover most of the midday demand.",
            }
        },
    )

    sustainability_score: float = Field(..., ge=0, le=100, alias="sustainabilityScore")
    wastage_detected_kw: float = Field(..., ge=0, alias="wastageDetected")
    grid_reduction_percent: float = Field(..., ge=0, le=100, alias="gridReductionPercent")
    load_shift_windows: List[str] = Field(..., min_length=1, alias="loadShiftWindows")
    recommendations: List[str] = Field(..., min_length=1)
    esg_insights: List[str] = Field(..., min_length=1, alias="esgInsights")
    summary: str = Field(...)


class ForecastRecord(BaseModel):
    """Next-day renewable generation forecast for one hour"""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    hour: int = Field(..., ge=0, le=23)
    solar_forecast_kw: float = Field(..., ge=0, alias="solarForecast")
    wind_forecast_kw: float = Field(..., ge=0, alias="windForecast")


class ForecastEnvelope(BaseModel):
    """Root object of the forecast response: exactly one record per hour"""
    model_config = ConfigDict(frozen=True)

    forecast: List[ForecastRecord]

    @field_validator("forecast")
    @classmethod
    def one_record_per_hour(cls, records: List[ForecastRecord]) -> List[ForecastRecord]:
        hours = sorted(record.hour for record in records)
        if hours != list(range(SERIES_LENGTH)):
            raise ValueError(
                f"expected one forecast per hour 0-{SERIES_LENGTH - 1}, got hours {hours}"
            )
        return sorted(records, key=lambda record: record.hour)


class SeriesRequest(BaseModel):
    """Request body carrying a full 24-hour series"""
    series: List[HourlyRecord] = Field(..., description="Hourly records ordered by hour 0-23")

    @field_validator("series")
    @classmethod
    def full_day_in_order(cls, series: List[HourlyRecord]) -> List[HourlyRecord]:
        if [record.hour for record in series] != list(range(SERIES_LENGTH)):
            raise ValueError(f"series must hold exactly one record per hour 0-{SERIES_LENGTH - 1}, in order")
        return series


class HourlySeriesResponse(BaseModel):
    """Fresh mock series with its derived views"""
    series: List[HourlyRecord]
    totals: SeriesTotals
    balance: List[EnergyBalancePoint]


class RefreshStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class DashboardState(BaseModel):
    """Snapshot of everything the dashboard renders"""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    status: RefreshStatus = Field(RefreshStatus.IDLE)
    series: List[HourlyRecord] = Field(default_factory=list)
    balance: List[EnergyBalancePoint] = Field(
        default_factory=list, description="Renewables vs demand per hour of the series"
    )
    analysis: Optional[AnalysisResult] = Field(None)
    forecast: List[ForecastRecord] = Field(default_factory=list)
    error: Optional[str] = Field(None, description="Generic user-facing error message")
    refresh_id: int = Field(0, alias="refreshId", description="Sequence number of the last started refresh")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt", description="Time the data was last published")
