"""
Next-day renewable generation forecast.
"""
from typing import List, Optional, Sequence
import logging

from ecopulse.generator.llm_generator import StructuredGenerator
from ecopulse.prompts.builders import build_forecast_prompt
from ecopulse.prompts.generation_forecast import FORECAST_RESPONSE_SCHEMA
from ecopulse.schema.models import ForecastEnvelope, ForecastRecord, HourlyRecord
from ecopulse.services.parsing import load_json, validate_payload

logger = logging.getLogger(__name__)


async def forecast(
    series: Sequence[HourlyRecord],
    generator: Optional[StructuredGenerator] = None,
) -> List[ForecastRecord]:
    """
    Ask the model for next-day hourly solar and wind generation.

    Args:
        series: Today's hourly records
        generator: Structured generator, a default one is built when omitted

    Returns:
        24 ForecastRecord sorted by hour

    Raises:
        EcoPulseError: on service, parse or validation failure
    """
    generator = generator or StructuredGenerator()
    prompt = build_forecast_prompt(series)

    logger.info(f"Requesting next-day generation forecast for {len(series)} hourly records")
    text = await generator.generate_json(prompt, "generation_forecast", FORECAST_RESPONSE_SCHEMA)
    payload = load_json(text, "Forecast")

    # Accept a bare array as well as the {"forecast": [...]} envelope
    if isinstance(payload, list):
        payload = {"forecast": payload}
    envelope = validate_payload(ForecastEnvelope, payload, "Forecast")

    logger.info(f"Received forecast for {len(envelope.forecast)} hours")
    return envelope.forecast
