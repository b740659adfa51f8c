"""
Prompt builders for the campus energy analysis tasks.
"""
import json
from typing import Sequence

from ecopulse.data.mock_data import summarize
from ecopulse.prompts.generation_forecast import GENERATION_FORECAST_PROMPT
from ecopulse.prompts.sustainability_analysis import SUSTAINABILITY_ANALYSIS_PROMPT
from ecopulse.schema.models import HourlyRecord


def format_kw(value: float) -> str:
    """Format a kW figure without a trailing '.0'."""
    return f"{value:.1f}".rstrip("0").rstrip(".")


def serialize_series(series: Sequence[HourlyRecord]) -> str:
    """Serialize the full series as a JSON array using the dashboard's field names."""
    return json.dumps([record.model_dump(by_alias=True) for record in series])


def build_analysis_prompt(series: Sequence[HourlyRecord]) -> str:
    """
    Build the sustainability analysis prompt for a series.

    Args:
        series: Hourly records for one day

    Returns:
        Formatted prompt string embedding the totals and the full series
    """
    totals = summarize(series)
    return SUSTAINABILITY_ANALYSIS_PROMPT.format(
        total_solar=format_kw(totals.total_solar_kw),
        total_wind=format_kw(totals.total_wind_kw),
        total_demand=format_kw(totals.total_demand_kw),
        series_json=serialize_series(series),
    )


def build_forecast_prompt(series: Sequence[HourlyRecord]) -> str:
    return GENERATION_FORECAST_PROMPT.format(series_json=serialize_series(series))
