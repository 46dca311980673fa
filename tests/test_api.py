import logging

import pytest
from fastapi.testclient import TestClient

from wealth_id.core.config import Settings
from wealth_id.main import create_app
from wealth_id.services.history import ConversionHistory


def convert(client, country_from="US", country_to="UK", score=700):
    return client.post(
        "/api/convert",
        json={"countryFrom": country_from, "countryTo": country_to, "score": score},
    )


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "healthy"
    assert body["timestamp"].endswith("Z")


def test_convert_returns_full_record(client):
    resp = convert(client, "US", "UK", 1000)
    assert resp.status_code == 201
    body = resp.json()
    assert set(body) == {
        "id",
        "timestamp",
        "countryFrom",
        "countryTo",
        "originalScore",
        "convertedScore",
    }
    assert body["countryFrom"] == "US"
    assert body["countryTo"] == "UK"
    assert body["originalScore"] == 1000
    assert body["convertedScore"] == 900.0


def test_convert_india_to_us(client):
    assert convert(client, "India", "US", 800).json()["convertedScore"] == 1000.0


@pytest.mark.parametrize("score", [0, 1000])
def test_score_bounds_inclusive(client, score):
    assert convert(client, score=score).status_code == 201


@pytest.mark.parametrize("score", [-1, 1001])
def test_score_out_of_range(client, score):
    resp = convert(client, score=score)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Score must be between 0 and 1000"}


def test_invalid_country_from(client):
    resp = convert(client, country_from="Mars")
    assert resp.status_code == 400
    assert resp.json() == {
        "error": "Invalid countryFrom. Must be one of: US, UK, India, Canada"
    }


def test_invalid_country_to(client):
    resp = convert(client, country_to="Mars")
    assert resp.status_code == 400
    assert "Invalid countryTo" in resp.json()["error"]


@pytest.mark.parametrize(
    "payload",
    [
        {"countryFrom": "US", "countryTo": "UK"},
        {"countryFrom": "US", "countryTo": "UK", "score": "700"},
        [],
    ],
)
def test_missing_fields(client, payload):
    resp = client.post("/api/convert", json=payload)
    assert resp.status_code == 400
    assert resp.json() == {
        "error": "Missing required fields: countryFrom, countryTo, score"
    }


def test_malformed_json_is_missing_fields(client):
    resp = client.post(
        "/api/convert",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json()["error"].startswith("Missing required fields")


def test_empty_body_is_missing_fields(client):
    resp = client.post("/api/convert")
    assert resp.status_code == 400


def test_rejected_requests_are_not_recorded(client):
    convert(client, country_from="Mars")
    convert(client, score=-1)
    assert client.get("/api/history").json() == []


def test_history_empty_on_fresh_app(client):
    resp = client.get("/api/history")
    assert resp.status_code == 200
    assert resp.json() == []


def test_history_keeps_ten_most_recent_first(client):
    for score in range(12):
        assert convert(client, score=score).status_code == 201
    history = client.get("/api/history").json()
    assert len(history) == 10
    assert [h["originalScore"] for h in history] == list(range(11, 1, -1))
    first = history[0]["timestamp"]
    assert all(first >= h["timestamp"] for h in history)


def test_history_isolated_between_apps(settings):
    first = TestClient(create_app(settings_override=settings))
    second = TestClient(create_app(settings_override=settings))
    convert(first)
    assert len(first.get("/api/history").json()) == 1
    assert second.get("/api/history").json() == []


def test_injected_history_is_used(settings):
    history = ConversionHistory(capacity=3)
    client = TestClient(create_app(settings_override=settings, history=history))
    for _ in range(5):
        convert(client)
    assert len(history) == 3
    assert len(client.get("/api/history").json()) == 3


def test_configured_capacity_and_bounds():
    settings = Settings(history_capacity=2, score_min=300, score_max=850)
    client = TestClient(create_app(settings_override=settings))
    assert convert(client, score=900).json() == {
        "error": "Score must be between 300 and 850"
    }
    for _ in range(3):
        convert(client, score=500)
    assert len(client.get("/api/history").json()) == 2


def test_countries(client):
    resp = client.get("/api/countries")
    assert resp.status_code == 200
    assert resp.json() == [
        {"code": "US", "baseRate": 1.0},
        {"code": "UK", "baseRate": 0.9},
        {"code": "India", "baseRate": 0.8},
        {"code": "Canada", "baseRate": 0.95},
    ]


@pytest.mark.parametrize(
    "method,path",
    [("get", "/nope"), ("get", "/api/convert"), ("delete", "/api/history"), ("get", "/")],
)
def test_unmatched_route(client, method, path):
    resp = getattr(client, method)(path)
    assert resp.status_code == 404
    assert resp.json() == {"error": "Endpoint not found"}


class ExplodingHistory(ConversionHistory):
    def append(self, record):
        raise RuntimeError("database password is hunter2")


def test_internal_error_hides_detail(settings):
    app = create_app(settings_override=settings, history=ExplodingHistory())
    client = TestClient(app, raise_server_exceptions=False)
    resp = convert(client)
    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error"}


def test_request_id_header(client):
    resp = client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert resp.headers["X-Request-ID"] == "abc-123"
    assert client.get("/health").headers["X-Request-ID"]


def test_cors_allows_any_origin(client):
    resp = client.get("/api/history", headers={"Origin": "http://localhost:3000"})
    assert resp.headers["access-control-allow-origin"] == "*"


@pytest.fixture
def failing_client(settings):
    app = create_app(settings_override=settings, history=ExplodingHistory())
    return TestClient(app, raise_server_exceptions=False)


def test_internal_error_keeps_cors_and_request_id(failing_client):
    resp = failing_client.post(
        "/api/convert",
        json={"countryFrom": "US", "countryTo": "UK", "score": 700},
        headers={"Origin": "http://localhost:3000", "X-Request-ID": "rid-1"},
    )
    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error"}
    assert resp.headers["access-control-allow-origin"] == "*"
    assert resp.headers["X-Request-ID"] == "rid-1"


def test_internal_error_logged_with_stack(failing_client, caplog):
    caplog.set_level(logging.INFO)
    resp = failing_client.post(
        "/api/convert",
        json={"countryFrom": "US", "countryTo": "UK", "score": 700},
        headers={"X-Request-ID": "rid-2"},
    )
    assert "hunter2" not in resp.text
    faults = [r for r in caplog.records if r.levelno >= logging.ERROR]
    assert len(faults) == 1
    assert faults[0].exc_info is not None
    assert faults[0].request_id == "rid-2"
    assert "hunter2" in caplog.text


def test_rejections_are_not_logged_as_faults(client, caplog):
    caplog.set_level(logging.INFO)
    assert convert(client, country_from="Mars").status_code == 400
    resp = client.post(
        "/api/convert", content=b"{", headers={"Content-Type": "application/json"}
    )
    assert resp.status_code == 400
    assert not [r for r in caplog.records if r.levelno >= logging.ERROR]
    rejected = [r for r in caplog.records if r.name == "wealth_id.errors"]
    assert [r.levelno for r in rejected] == [logging.INFO, logging.INFO]
