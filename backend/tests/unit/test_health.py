from __future__ import annotations

from unittest.mock import AsyncMock, patch

from app.core.database import database


def test_health_returns_status_and_services(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["version"] == "0.1.0"
    assert data["services"] == {"database": "ok"}


def test_health_degraded_when_database_unreachable(client):
    with patch.object(database, "check_connection", AsyncMock(return_value=False)):
        response = client.get("/api/v1/health")

    data = response.json()
    assert data["status"] == "degraded"
    assert data["services"]["database"] == "error"


def test_readiness_probe(client):
    response = client.get("/api/v1/health/ready")
    assert response.status_code == 200
    assert response.json()["ready"] is True


def test_health_protected_requires_auth(client):
    response = client.get("/api/v1/health/protected")
    assert response.status_code == 401


def test_health_protected_with_auth(authenticated_client):
    response = authenticated_client.get("/api/v1/health/protected")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert "user" in data
