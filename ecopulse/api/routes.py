"""
API Routes Definition

This module defines the API routes for the EcoPulse dashboard.
"""
from functools import lru_cache
from typing import List
import logging

from fastapi import APIRouter, Depends, HTTPException

from ecopulse.config.constants import ESG_POLICIES, GENERIC_ERROR_MESSAGE, GRID_REDUCTION_TARGET_PERCENT
from ecopulse.config.settings import get_settings
from ecopulse.dashboard.controller import RefreshController
from ecopulse.data.mock_data import energy_balance, generate, summarize
from ecopulse.exceptions import EcoPulseError, RequestTimeoutError
from ecopulse.generator.llm_generator import StructuredGenerator
from ecopulse.schema.models import (
    AnalysisResult,
    DashboardState,
    ForecastRecord,
    HourlySeriesResponse,
    SeriesRequest,
)
from ecopulse.services.analysis import analyze
from ecopulse.services.forecasting import forecast
from ecopulse.services.timeouts import call_with_timeout

# Create router
router = APIRouter(prefix="/api", tags=["API"])

# Configure logging
logger = logging.getLogger(__name__)


# Dependency injection
def get_generator() -> StructuredGenerator:
    """Dependency to get the structured generator"""
    return StructuredGenerator()


@lru_cache(maxsize=1)
def get_controller() -> RefreshController:
    """Dependency to get the process-wide dashboard controller"""
    return RefreshController()


def _raise_for_generation_error(e: EcoPulseError, operation: str):
    logger.error(f"Error during {operation}: {e}")
    if isinstance(e, RequestTimeoutError):
        raise HTTPException(status_code=504, detail=GENERIC_ERROR_MESSAGE) from e
    raise HTTPException(status_code=502, detail=GENERIC_ERROR_MESSAGE) from e


@router.get("/energy/hourly", response_model=HourlySeriesResponse)
async def get_hourly_energy():
    """
    Generate a fresh mock series with totals and the renewables vs demand balance
    """
    series = generate()
    return HourlySeriesResponse(series=series, totals=summarize(series), balance=energy_balance(series))


@router.post("/analysis", response_model=AnalysisResult)
async def analyze_series(
    request: SeriesRequest,
    generator: StructuredGenerator = Depends(get_generator)
):
    """
    Run the sustainability analysis for a 24-hour series
    """
    try:
        return await call_with_timeout(
            analyze(request.series, generator), get_settings().request_timeout, "Analysis"
        )
    except EcoPulseError as e:
        _raise_for_generation_error(e, "analysis")


@router.post("/forecast", response_model=List[ForecastRecord])
async def forecast_series(
    request: SeriesRequest,
    generator: StructuredGenerator = Depends(get_generator)
):
    """
    Forecast next-day solar and wind generation for a 24-hour series
    """
    try:
        return await call_with_timeout(
            forecast(request.series, generator), get_settings().request_timeout, "Forecast"
        )
    except EcoPulseError as e:
        _raise_for_generation_error(e, "forecast")


@router.get("/dashboard", response_model=DashboardState)
async def get_dashboard(controller: RefreshController = Depends(get_controller)):
    """
    Get the current dashboard snapshot
    """
    return controller.state


@router.post("/dashboard/refresh", response_model=DashboardState)
async def refresh_dashboard(controller: RefreshController = Depends(get_controller)):
    """
    Run one refresh cycle. Failures are reported in the snapshot, not as HTTP errors.
    """
    state = await controller.refresh()
    logger.info(f"Dashboard refresh {state.refresh_id} finished with status {state.status.value}")
    return state


@router.get("/policies")
async def get_policies():
    """
    ESG and SDG 7 policy references shown next to the analysis
    """
    return {
        "policies": ESG_POLICIES,
        "grid_reduction_target_percent": GRID_REDUCTION_TARGET_PERCENT,
    }
