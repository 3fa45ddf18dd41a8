"""API v1 BaseResource envelope contract tests."""

import pytest
from flask import Response

from pinkstar.api.v1.resources.base import BaseResource


@pytest.mark.unit
def test_base_resource_success_returns_single_response_with_status(app):
    with app.test_request_context("/api/v1/health/ping"):
        response = BaseResource().success({"ok": True}, message="完成", status=201, meta={"source": "unit"})

    assert isinstance(response, Response)
    assert response.status_code == 201
    payload = response.get_json()
    assert payload["success"] is True
    assert payload["message"] == "完成"
    assert payload["data"] == {"ok": True}
    assert payload["meta"] == {"source": "unit"}


@pytest.mark.unit
@pytest.mark.parametrize(
    "url",
    [
        "/api/v1/health/ping",
        "/api/v1/health/check",
        "/api/v1/items",
        "/api/v1/items/game/minecraft/categories/mods/filter-tags",
        "/api/v1/items/game/minecraft/categories/mods/resources",
        "/api/v1/items/game/minecraft/categories/mods/resources/best-match",
        "/api/v1/items/game/minecraft/categories/mods/resources/highlighted",
        "/api/v1/authors/author-1/resources",
        "/api/v1/file-channels",
    ],
)
def test_api_v1_success_routes_return_json_envelope(client, seeded_catalog, url):
    response = client.get(url)

    assert response.status_code == 200
    assert response.mimetype == "application/json"
    payload = response.get_json()
    assert payload["success"] is True
    assert payload["error"] is False
    assert "data" in payload
