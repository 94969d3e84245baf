"""Tests for FastAPI application."""

from fastapi.testclient import TestClient

from core.constants import RENT_GENERATION_TASK, RENT_STATUS_TASK


def test_docs_endpoint(client):
    response = client.get("/docs")
    assert response.status_code == 200
    assert "swagger-ui" in response.text


def test_openapi_schema(client):
    response = client.get("/openapi.json")
    assert response.status_code == 200

    schema = response.json()
    assert schema["info"]["title"] == "GestLoc API"
    assert schema["info"]["version"] == "1.0.0"
    assert "/api/scheduler/status" in schema["paths"]
    assert "/api/scheduler/run-task/{task_name}" in schema["paths"]


def test_cors_headers(client):
    response = client.get("/health", headers={"Origin": "http://localhost:3000"})
    assert response.status_code == 200
    assert "access-control-allow-origin" in response.headers


def test_health(client):
    body = client.get("/health").json()
    assert body["status"] == "healthy"
    assert body["version"] == "1.0.0"


def test_lifespan_registers_tasks_without_starting_timers(app, client):
    scheduler = app.state.scheduler

    assert RENT_GENERATION_TASK in scheduler.task_names
    assert scheduler.is_started is False


def test_tasks_registered_before_startup_are_kept(app):
    async def noop() -> None:
        return None

    scheduler = app.state.scheduler
    scheduler.register_task("early", "@manual", noop)

    with TestClient(app) as client:
        assert app.state.scheduler is scheduler
        tasks = client.get("/api/scheduler/status").json()["data"]["tasks"]

    names = [task["name"] for task in tasks]
    assert names == ["early", RENT_GENERATION_TASK, RENT_STATUS_TASK]
