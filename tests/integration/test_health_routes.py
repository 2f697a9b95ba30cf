"""Integration tests for health endpoints."""

from unittest.mock import AsyncMock, patch

import httpx

from usahaku_navigator.dependencies import get_http_client
from usahaku_navigator.main import app


def test_health_endpoint(test_client):
    response = test_client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert "version" in data


def test_liveness_endpoint(test_client):
    response = test_client.get("/health/live")

    assert response.status_code == 200
    assert response.json() == {"status": "alive"}


def test_readiness_healthy(test_client, mock_http_client):
    app.dependency_overrides[get_http_client] = lambda: mock_http_client

    with patch(
        "usahaku_navigator.routers.health_router.supabase_auth_service.check_health", new=AsyncMock()
    ) as mock_check:
        response = test_client.get("/health/ready")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["checks"] == {"http_client": "ok", "supabase": "ok"}
    mock_check.assert_awaited_once()


def test_readiness_supabase_down(test_client, mock_http_client):
    app.dependency_overrides[get_http_client] = lambda: mock_http_client

    with patch(
        "usahaku_navigator.routers.health_router.supabase_auth_service.check_health",
        new=AsyncMock(side_effect=httpx.ConnectError("Connection refused")),
    ):
        response = test_client.get("/health/ready")

    assert response.status_code == 503
    data = response.json()
    assert data["status"] == "unhealthy"
    assert data["checks"]["supabase"].startswith("failed: Connection refused")


def test_readiness_result_is_cached(test_client, mock_http_client):
    app.dependency_overrides[get_http_client] = lambda: mock_http_client

    with patch(
        "usahaku_navigator.routers.health_router.supabase_auth_service.check_health", new=AsyncMock()
    ) as mock_check:
        test_client.get("/health/ready")
        test_client.get("/health/ready")

    assert mock_check.await_count == 1
