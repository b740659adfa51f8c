"""
Tests for the FastAPI routes.
"""
import asyncio
import json

import httpx
import openai
import pytest
from fastapi.testclient import TestClient

from ecopulse.api.routes import get_controller, get_generator
from ecopulse.config.constants import ESG_POLICIES, GENERIC_ERROR_MESSAGE
from ecopulse.dashboard.controller import RefreshController
from ecopulse.exceptions import GenerationServiceError
from ecopulse.generator.llm_generator import StructuredGenerator
from ecopulse.main import app
from tests.conftest import ANALYSIS_PAYLOAD, forecast_payload, make_client


@pytest.fixture
def api():
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


def use_client(fake_client):
    app.dependency_overrides[get_generator] = lambda: StructuredGenerator(client=fake_client)


def series_body(series):
    return {"series": [record.model_dump(by_alias=True) for record in series]}


def test_health(api):
    response = api.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_hourly_energy(api):
    response = api.get("/api/energy/hourly")

    assert response.status_code == 200
    body = response.json()
    assert [record["hour"] for record in body["series"]] == list(range(24))
    assert body["totals"]["totalSolarKW"] == sum(r["solarOutputKW"] for r in body["series"])
    assert len(body["balance"]) == 24
    assert body["balance"][0]["label"] == "0:00"


def test_policies(api):
    response = api.get("/api/policies")

    assert response.status_code == 200
    assert response.json()["policies"] == ESG_POLICIES


def test_analysis_endpoint(api, series):
    use_client(make_client(json.dumps(ANALYSIS_PAYLOAD)))

    response = api.post("/api/analysis", json=series_body(series))

    assert response.status_code == 200
    assert response.json() == ANALYSIS_PAYLOAD


def test_analysis_rejects_partial_series(api, series):
    use_client(make_client(json.dumps(ANALYSIS_PAYLOAD)))

    response = api.post("/api/analysis", json=series_body(series[:23]))

    assert response.status_code == 422


def test_analysis_rejects_out_of_order_series(api, series):
    body = series_body(list(reversed(series)))

    response = api.post("/api/analysis", json=body)

    assert response.status_code == 422


def test_forecast_endpoint(api, series):
    use_client(make_client(json.dumps({"forecast": forecast_payload()})))

    response = api.post("/api/forecast", json=series_body(series))

    assert response.status_code == 200
    assert response.json() == forecast_payload()


def test_service_failure_maps_to_bad_gateway(api, series):
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    use_client(make_client(side_effect=openai.APIConnectionError(request=request)))

    response = api.post("/api/forecast", json=series_body(series))

    assert response.status_code == 502
    assert response.json()["detail"] == GENERIC_ERROR_MESSAGE


@pytest.mark.parametrize("path", ["/api/analysis", "/api/forecast"])
def test_hung_model_call_maps_to_gateway_timeout(api, series, monkeypatch, path):
    async def _hang(**kwargs):
        await asyncio.sleep(10)

    monkeypatch.setenv("ECOPULSE_REQUEST_TIMEOUT", "0.05")
    use_client(make_client(side_effect=_hang))

    response = api.post(path, json=series_body(series))

    assert response.status_code == 504
    assert response.json()["detail"] == GENERIC_ERROR_MESSAGE


def test_invalid_model_output_maps_to_bad_gateway(api, series):
    use_client(make_client("not json"))

    response = api.post("/api/analysis", json=series_body(series))

    assert response.status_code == 502


def test_dashboard_refresh_cycle(api, analysis_result, forecast_records):
    async def _analyze(series):
        return analysis_result

    async def _forecast(series):
        return forecast_records

    controller = RefreshController(analyzer=_analyze, forecaster=_forecast)
    app.dependency_overrides[get_controller] = lambda: controller

    assert api.get("/api/dashboard").json()["status"] == "idle"

    response = api.post("/api/dashboard/refresh")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ready"
    assert body["refreshId"] == 1
    assert body["analysis"] == ANALYSIS_PAYLOAD
    assert len(body["series"]) == 24
    assert [point["hour"] for point in body["balance"]] == list(range(24))
    assert body["balance"][9]["label"] == "9:00"
    assert api.get("/api/dashboard").json() == body


def test_dashboard_refresh_failure_is_reported_in_state(api):
    async def _fail(series):
        raise GenerationServiceError("invalid api key")

    controller = RefreshController(analyzer=_fail, forecaster=_fail)
    app.dependency_overrides[get_controller] = lambda: controller

    response = api.post("/api/dashboard/refresh")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "failed"
    assert body["error"] == GENERIC_ERROR_MESSAGE
    assert body["analysis"] is None
