"""API v1 health contract tests."""

import pytest


@pytest.mark.unit
def test_api_v1_health_ping_returns_success_envelope(client):
    response = client.get("/api/v1/health/ping")

    assert response.status_code == 200
    payload = response.get_json()
    assert isinstance(payload, dict)
    assert payload["success"] is True
    assert payload["error"] is False
    assert payload["message"] == "健康检查成功"
    assert payload["data"]["status"] == "ok"
    assert "timestamp" in payload


@pytest.mark.unit
def test_api_v1_health_check_reports_database(client):
    response = client.get("/api/v1/health/check")

    assert response.status_code == 200
    data = response.get_json()["data"]
    assert data["status"] == "healthy"
    assert data["database"] == "connected"
    assert {"version", "timestamp"}.issubset(data.keys())


@pytest.mark.unit
def test_api_v1_echoes_or_generates_request_id(client):
    echoed = client.get("/api/v1/health/ping", headers={"X-Request-ID": "req-abc-123"})
    generated = client.get("/api/v1/health/ping", headers={"X-Request-ID": "bad id with spaces"})

    assert echoed.headers["X-Request-ID"] == "req-abc-123"
    assert generated.headers["X-Request-ID"].startswith("req_")


@pytest.mark.unit
def test_api_v1_openapi_json_is_available(client):
    response = client.get("/api/v1/openapi.json")

    assert response.status_code == 200
    paths = response.get_json()["paths"]
    assert "/health/ping" in paths
    assert "/items/{item_type}/{item_slug}/categories/{category_slug}/resources" in paths
    assert "/items/{item_type}/{item_slug}/categories/{category_slug}/filter-tags" in paths


@pytest.mark.unit
def test_api_v1_root_lists_entrypoints(client):
    response = client.get("/api/v1/")

    assert response.status_code == 200
    data = response.get_json()["data"]
    assert data["openapi_url"] == "/api/v1/openapi.json"
    assert data["health_ping_url"] == "/api/v1/health/ping"
    assert data["file_channels_url"] == "/api/v1/file-channels"
    assert response.get_json()["success"] is True
