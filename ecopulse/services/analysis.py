"""
Sustainability analysis: series in, validated AnalysisResult out.
"""
from typing import Optional, Sequence
import logging

from ecopulse.generator.llm_generator import StructuredGenerator
from ecopulse.prompts.builders import build_analysis_prompt
from ecopulse.prompts.sustainability_analysis import ANALYSIS_RESPONSE_SCHEMA
from ecopulse.schema.models import AnalysisResult, HourlyRecord
from ecopulse.services.parsing import load_json, validate_payload

logger = logging.getLogger(__name__)


async def analyze(
    series: Sequence[HourlyRecord],
    generator: Optional[StructuredGenerator] = None,
) -> AnalysisResult:
    """
    Ask the model for a sustainability analysis of a 24-hour series.

    The call is always issued, even for a degenerate (e.g. all-zero) series.
    There is no retry and no partial result: any failure raises.

    Args:
        series: Hourly records for one day
        generator: Structured generator, a default one is built when omitted

    Returns:
        AnalysisResult exactly as returned by the model

    Raises:
        EcoPulseError: on service, parse or validation failure
    """
    generator = generator or StructuredGenerator()
    prompt = build_analysis_prompt(series)

    logger.info(f"Requesting sustainability analysis for {len(series)} hourly records")
    text = await generator.generate_json(prompt, "sustainability_analysis", ANALYSIS_RESPONSE_SCHEMA)
    payload = load_json(text, "Analysis")
    result = validate_payload(AnalysisResult, payload, "Analysis")

    logger.info(f"Sustainability score {result.sustainability_score:g}, wastage {result.wastage_detected_kw:g}kW")
    return result
