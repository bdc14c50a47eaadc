"""HTTP-level tests for the Stepup service with the mock provider."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from services.stepup_service import main
from shared.motivation import RateLimitExceeded, reset_client


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("LLM_PROVIDER", "mock")
    monkeypatch.setenv("STEP_GOAL_SEED", "3")
    reset_client()
    with TestClient(main.app) as test_client:
        yield test_client
    reset_client()


def test_health(client) -> None:
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "service": "stepup_service"}


def test_metrics_exposes_motivation_counters(client) -> None:
    resp = client.get("/metrics")
    assert resp.status_code == 200
    assert "motivation_requests_total" in resp.text


def test_steps_update_and_today(client) -> None:
    resp = client.post("/steps", json={"steps": 2100})
    assert resp.status_code == 200
    body = resp.json()
    assert body["steps"] == 2100
    assert body["previous"] == 0
    assert body["crossed_thousand"] is True

    today = client.get("/today").json()
    assert today["steps"] == 2100
    assert today["goal"][2:] == "**"
    assert today["goal"][:2] == str(main.tracker.goal.value)[:2]


def test_negative_steps_rejected(client) -> None:
    assert client.post("/steps", json={"steps": -5}).status_code == 422


def test_motivation_endpoint(client) -> None:
    resp = client.post("/motivation", json={"steps": 12000})
    assert resp.status_code == 200
    assert resp.json()["steps"] == 12000
    assert resp.json()["message"]


def test_motivation_errors_map_to_status(client, monkeypatch) -> None:
    async def _fail(steps: int) -> str:
        raise RateLimitExceeded()

    monkeypatch.setattr(main.provider, "generate_motivational_sentence", _fail)
    resp = client.post("/motivation", json={"steps": 10})
    assert resp.status_code == 429
    assert resp.json()["error_type"] == "RateLimitExceeded"
