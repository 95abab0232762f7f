"""Tests for liveness and readiness endpoints."""

from datetime import datetime
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from voltstream.api.app import create_app
from voltstream.api.dependencies import get_database


def _mock_db(healthy: bool = True, raises: bool = False):
    """Create a mock database."""
    db = AsyncMock()
    if raises:
        db.health_check = AsyncMock(side_effect=Exception("Connection refused"))
    else:
        db.health_check = AsyncMock(return_value=healthy)
    return db


@pytest.fixture
def make_client():
    """Build a TestClient whose database mock has the requested health."""
    apps = []

    def _make(**db_kwargs) -> TestClient:
        app = create_app()
        app.dependency_overrides[get_database] = lambda: _mock_db(**db_kwargs)
        apps.append(app)
        return TestClient(app)

    yield _make

    for app in apps:
        app.dependency_overrides.clear()


class TestLiveness:
    """Test /health."""

    def test_health(self):
        client = TestClient(create_app())

        resp = client.get("/health")

        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"
        assert datetime.fromisoformat(data["timestamp"]).tzinfo is not None

    def test_request_id_echoed(self):
        client = TestClient(create_app())

        resp = client.get("/health", headers={"X-Request-ID": "req-123"})

        assert resp.headers["X-Request-ID"] == "req-123"

    def test_request_id_generated(self):
        client = TestClient(create_app())

        resp = client.get("/health")

        assert resp.headers["X-Request-ID"]


class TestReadiness:
    """Test /health/ready with database checks."""

    def test_ready(self, make_client):
        resp = make_client(healthy=True).get("/health/ready")

        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "healthy"
        assert data["components"]["database"]["status"] == "healthy"
        assert data["components"]["database"]["latency_ms"] is not None

    def test_database_unhealthy(self, make_client):
        resp = make_client(healthy=False).get("/health/ready")

        data = resp.json()
        assert data["status"] == "unhealthy"
        assert data["components"]["database"]["status"] == "unhealthy"

    def test_database_check_raises(self, make_client):
        resp = make_client(raises=True).get("/health/ready")

        data = resp.json()
        assert data["status"] == "unhealthy"
        assert data["components"]["database"]["details"] == {"error": "Connection refused"}
