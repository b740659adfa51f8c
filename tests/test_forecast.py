"""
Tests for the next-day generation forecast request builder.
"""
import json

import pytest

from ecopulse.exceptions import ResponseParseError, ResponseValidationError
from ecopulse.prompts.generation_forecast import FORECAST_RESPONSE_SCHEMA
from ecopulse.services.forecasting import forecast
from tests.conftest import forecast_payload, make_client


@pytest.mark.asyncio
async def test_forecast_parses_envelope(series, forecast_client, generator_for):
    records = await forecast(series, generator_for(forecast_client))

    assert len(records) == 24
    assert [r.hour for r in records] == list(range(24))
    assert records[10].solar_forecast_kw == 200.0
    assert records[10].wind_forecast_kw == 160.0


@pytest.mark.asyncio
async def test_forecast_requests_strict_schema(series, forecast_client, generator_for):
    await forecast(series, generator_for(forecast_client))

    kwargs = forecast_client.chat.completions.create.await_args.kwargs
    json_schema = kwargs["response_format"]["json_schema"]
    assert json_schema["strict"] is True
    assert json_schema["schema"] == FORECAST_RESPONSE_SCHEMA
    item_schema = FORECAST_RESPONSE_SCHEMA["properties"]["forecast"]["items"]
    assert item_schema["required"] == ["hour", "solarForecast", "windForecast"]


@pytest.mark.asyncio
async def test_forecast_accepts_bare_array(series, generator_for):
    client = make_client(json.dumps(forecast_payload()))

    records = await forecast(series, generator_for(client))

    assert len(records) == 24


@pytest.mark.asyncio
async def test_forecast_is_sorted_by_hour(series, generator_for):
    client = make_client(json.dumps({"forecast": forecast_payload(reversed(range(24)))}))

    records = await forecast(series, generator_for(client))

    assert [r.hour for r in records] == list(range(24))


@pytest.mark.asyncio
async def test_float_hours_are_accepted(series, generator_for):
    payload = [dict(item, hour=float(item["hour"])) for item in forecast_payload()]
    client = make_client(json.dumps({"forecast": payload}))

    records = await forecast(series, generator_for(client))

    assert records[5].hour == 5


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [
    {"forecast": forecast_payload(range(23))},
    {"forecast": forecast_payload(list(range(23)) + [5])},
    {"forecast": forecast_payload(range(1, 25))},
    {"forecast": [{"hour": h, "solarForecast": 1.0} for h in range(24)]},
    {"forecast": [dict(item, windForecast=-3.0) for item in forecast_payload()]},
    {"predictions": forecast_payload()},
])
async def test_nonconforming_forecast_fails(series, generator_for, payload):
    client = make_client(json.dumps(payload))

    with pytest.raises(ResponseValidationError):
        await forecast(series, generator_for(client))


@pytest.mark.asyncio
async def test_malformed_forecast_json_fails(series, generator_for):
    client = make_client('[{"hour": 0, "solarForecast": ')

    with pytest.raises(ResponseParseError):
        await forecast(series, generator_for(client))
