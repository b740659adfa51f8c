"""
Prompt templates and builders for the sustainability analyst.
"""

from .builders import build_analysis_prompt, build_forecast_prompt, serialize_series
from .generation_forecast import FORECAST_RESPONSE_SCHEMA
from .sustainability_analysis import ANALYSIS_RESPONSE_SCHEMA

__all__ = [
    'build_analysis_prompt',
    'build_forecast_prompt',
    'serialize_series',
    'ANALYSIS_RESPONSE_SCHEMA',
    'FORECAST_RESPONSE_SCHEMA',
]
