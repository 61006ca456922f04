"""Tests for the health endpoints."""

from unittest.mock import patch

from fastapi.testclient import TestClient


def test_liveness(client: TestClient):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "service": "bookstore"}


def test_readiness_memory(client: TestClient):
    response = client.get("/health/ready")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ready"
    assert body["checks"]["storage"] == {"status": "healthy", "type": "memory"}


def test_readiness_database(db_client: TestClient):
    response = db_client.get("/health/ready")

    assert response.status_code == 200
    checks = response.json()["checks"]
    assert checks["database"]["status"] == "healthy"
    assert checks["storage"]["type"] == "database"


def test_readiness_database_down(db_client: TestClient):
    database_service = db_client.app.state.app_dependencies.database_service

    with patch.object(database_service, "health_check", return_value=False):
        response = db_client.get("/health/ready")

    assert response.status_code == 503
    assert response.json()["status"] == "not_ready"
