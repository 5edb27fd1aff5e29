from __future__ import annotations

from unittest.mock import AsyncMock, patch

from starlette.testclient import TestClient

from app.core.config import settings
from app.core.database import database
from app.main import app


def test_root_returns_message(client):
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Employee Directory API"


def test_health_returns_status(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] in ("healthy", "degraded")
    assert data["version"] == "0.1.0"
    assert "services" in data


def test_app_starts_without_database():
    with patch.object(database, "initialize", AsyncMock(side_effect=OSError("disk full"))):
        with TestClient(app) as c:
            assert c.get("/api/v1/health/ready").json() == {"ready": False}
            assert c.get("/api/v1/health").json()["status"] == "degraded"
            dashboard = c.get("/api/v1/dashboard")
            assert dashboard.status_code == 200
            assert dashboard.json()["totalEmployees"] == 0
            assert dashboard.json()["recentEmployees"] == []
            assert c.get("/api/v1/employees").status_code == 503


def test_startup_seeds_sample_employees():
    settings.SEED_SAMPLE_DATA = True
    with TestClient(app) as c:
        data = c.get("/api/v1/dashboard").json()

    assert data["totalEmployees"] == 3
    assert {d["department"] for d in data["departmentCounts"]} == {"IT", "Human Resources"}
