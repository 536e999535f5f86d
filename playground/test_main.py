from datetime import datetime

import httpx
from fastapi.testclient import TestClient
from respx import MockRouter

from playground.main import app
from playground.models.health import ServiceStatus

SUNRISE_URL = "https://api.sunrise-sunset.org/json"
PARIS_AND_NEW_YORK = {
    "lat1": "48.864716",
    "lng1": "2.349014",
    "lat2": "40.730610",
    "lng2": "-73.935242",
}


def sunrise_payload(sunrise_at: str) -> dict:
    return {
        "results": {"sunrise": sunrise_at, "sunset": "2026-10-19T17:00:00+00:00"},
        "status": "OK",
    }


class FrozenDatetime(datetime):
    @classmethod
    def now(cls, tz=None):
        return cls(2026, 10, 19, 12, 0)


def test_root():
    client = TestClient(app)
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Hello World"}
    assert response.headers["x-request-id"]


def test_request_id_is_echoed():
    client = TestClient(app)
    response = client.get("/", headers={"x-request-id": "abc-123"})
    assert response.headers["x-request-id"] == "abc-123"


def test_sunrise_presets():
    client = TestClient(app)
    response = client.get("/sunrise/presets")
    assert response.status_code == 200
    data = response.json()
    assert data["paris"]["name"] == "Paris"
    assert data["newyork"]["coordinates"] == {"latitude": 40.73061, "longitude": -73.935242}


def test_compare_sunrise_success(respx_mock: MockRouter):
    client = TestClient(app)
    respx_mock.get(SUNRISE_URL, params__contains={"lat": "48.864716"}).mock(
        return_value=httpx.Response(200, json=sunrise_payload("2026-10-19T06:12:00+00:00"))
    )
    respx_mock.get(SUNRISE_URL, params__contains={"lat": "40.73061"}).mock(
        return_value=httpx.Response(200, json=sunrise_payload("2026-10-19T11:05:00+00:00"))
    )

    response = client.get("/sunrise/compare", params=PARIS_AND_NEW_YORK)

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "succeeded"
    assert data["error"] is None
    assert [city["name"] for city in data["cities"]] == ["Paris", "New York"]
    assert [city["sunrise"] for city in data["cities"]] == ["06:12", "11:05"]


def test_compare_sunrise_invalid_input(respx_mock: MockRouter):
    client = TestClient(app)

    response = client.get("/sunrise/compare", params={**PARIS_AND_NEW_YORK, "lat1": "abc"})

    assert response.status_code == 422
    data = response.json()
    assert data["status"] == "failed"
    assert data["cities"] == []
    assert data["error"]["kind"] == "validation"
    assert data["error"]["message"] == "Please enter valid numeric coordinates for both cities."
    assert len(respx_mock.calls) == 0


def test_compare_sunrise_out_of_range():
    client = TestClient(app)

    response = client.get("/sunrise/compare", params={**PARIS_AND_NEW_YORK, "lng2": "200"})

    assert response.status_code == 422
    assert response.json()["error"]["message"] == (
        "Longitude must be between -180 and 180 degrees."
    )


def test_compare_sunrise_upstream_failure(respx_mock: MockRouter):
    client = TestClient(app)
    respx_mock.get(SUNRISE_URL).mock(return_value=httpx.Response(500))

    response = client.get("/sunrise/compare", params=PARIS_AND_NEW_YORK)

    assert response.status_code == 502
    data = response.json()
    assert data["status"] == "failed"
    assert data["error"]["kind"] == "upstream"
    assert "HTTP Error: 500" in data["error"]["message"]


def test_compare_sunrise_missing_parameter():
    client = TestClient(app)
    response = client.get("/sunrise/compare", params={"lat1": "1", "lng1": "2"})
    assert response.status_code == 422


def test_countdown(monkeypatch):
    client = TestClient(app)
    monkeypatch.setattr("playground.main.datetime", FrozenDatetime)

    response = client.get("/countdown")

    assert response.status_code == 200
    data = response.json()
    assert data["target_year"] == 2027
    assert data["totals"]["days"] == 73
    assert data["formatted"]["simple"] == "73 days and 12:00:00 hours"


def test_health(monkeypatch):
    client = TestClient(app)

    async def fake_is_sunrise_api_available():
        return ServiceStatus.available

    async def fake_is_placeholder_api_available():
        return ServiceStatus.not_available

    monkeypatch.setattr(
        "playground.main.is_sunrise_api_available", fake_is_sunrise_api_available
    )
    monkeypatch.setattr(
        "playground.main.is_placeholder_api_available", fake_is_placeholder_api_available
    )

    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {
        "status": "ok",
        "dependencies": {"sunrise_api": "available", "placeholder_api": "not_available"},
    }


def test_metrics_count_requests():
    client = TestClient(app)
    client.get("/")

    response = client.get("/metrics")

    assert response.status_code == 200
    assert 'http_requests_total{method="GET",path="/",status_code="200"}' in response.text
