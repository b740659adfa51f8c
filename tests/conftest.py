import json
from types import SimpleNamespace
from typing import List
from unittest.mock import AsyncMock, MagicMock

import numpy as np
import pytest

from ecopulse.data.mock_data import generate
from ecopulse.generator.llm_generator import StructuredGenerator
from ecopulse.schema.models import AnalysisResult, ForecastRecord, HourlyRecord

ANALYSIS_PAYLOAD = {
    "sustainabilityScore": 78,
    "wastageDetected": 215.5,
    "gridReductionPercent": 32,
    "loadShiftWindows": ["11:00 AM - 1:00 PM", "2:00 PM - 4:00 PM"],
    "recommendations": [
        "Run dishwashers in the dining halls around noon.",
        "Pre-cool the library before the afternoon peak.",
        "Charge the campus shuttle fleet during windy evenings.",
    ],
    "esgInsights": [
        "Midday solar surplus supports SDG 7.2 reporting.",
        "Documented load shifting strengthens ISO 50001 reviews.",
    ],
    "summary": "Renewables cover most midday demand; evenings still lean on the grid.",
}


def forecast_payload(hours=range(24)) -> List[dict]:
    return [
        {"hour": hour, "solarForecast": 20.0 * hour, "windForecast": 150.0 + hour}
        for hour in hours
    ]


def make_completion(content):
    """Build an object shaped like an OpenAI chat completion."""
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
        usage=SimpleNamespace(prompt_tokens=100, completion_tokens=50, total_tokens=150),
    )


def make_client(content=None, side_effect=None) -> MagicMock:
    """Fake async OpenAI client whose chat.completions.create returns content."""
    client = MagicMock()
    if side_effect is not None:
        client.chat.completions.create = AsyncMock(side_effect=side_effect)
    else:
        client.chat.completions.create = AsyncMock(return_value=make_completion(content))
    return client


@pytest.fixture
def series() -> List[HourlyRecord]:
    return generate(np.random.default_rng(7))


@pytest.fixture
def zero_series() -> List[HourlyRecord]:
    return [
        HourlyRecord(
            hour=hour,
            solar_output_kw=0,
            wind_output_kw=0,
            demand_kw=0,
            sunlight_flag=6 <= hour <= 18,
            wind_speed=0,
        )
        for hour in range(24)
    ]


@pytest.fixture
def analysis_client() -> MagicMock:
    return make_client(json.dumps(ANALYSIS_PAYLOAD))


@pytest.fixture
def forecast_client() -> MagicMock:
    return make_client(json.dumps({"forecast": forecast_payload()}))


@pytest.fixture
def analysis_result() -> AnalysisResult:
    return AnalysisResult.model_validate(ANALYSIS_PAYLOAD)


@pytest.fixture
def forecast_records() -> List[ForecastRecord]:
    return [ForecastRecord.model_validate(item) for item in forecast_payload()]


@pytest.fixture
def generator_for():
    """Factory: StructuredGenerator wired to a fake client."""
    def _build(client) -> StructuredGenerator:
        return StructuredGenerator({"model_name": "gpt-4o", "temperature": 0.2}, client=client)
    return _build
