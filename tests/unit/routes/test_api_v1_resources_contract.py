"""API v1 resources contract tests."""

import pytest

RESOURCES_URL = "/api/v1/items/game/minecraft/categories/mods/resources"


def _slugs(payload: dict) -> list[str]:
    return [resource["slug"] for resource in payload["data"]["resources"]]


@pytest.mark.unit
def test_api_v1_resources_list_returns_paginated_envelope(client, seeded_catalog):
    response = client.get(RESOURCES_URL)

    assert response.status_code == 200
    payload = response.get_json()
    assert payload["success"] is True
    assert payload["error"] is False
    assert set(payload["data"].keys()) == {"resources", "total", "has_more", "page", "limit"}
    assert payload["data"]["total"] == 3
    assert payload["data"]["has_more"] is False
    assert payload["data"]["page"] == 1
    assert payload["data"]["limit"] == 20
    assert _slugs(payload) == ["light-theme", "forge-essentials", "dark-mode-theme"]


@pytest.mark.unit
def test_api_v1_resources_item_shape(client, seeded_catalog):
    payload = client.get(RESOURCES_URL, query_string={"search": "essentials"}).get_json()

    resource = payload["data"]["resources"][0]
    expected_keys = {
        "id",
        "slug",
        "name",
        "description",
        "item_slug",
        "item_type",
        "category_slug",
        "status",
        "author_id",
        "author_name",
        "downloads",
        "followers",
        "rating",
        "review_count",
        "created_at",
        "updated_at",
        "tags",
        "tag_ids",
        "files",
    }
    assert expected_keys.issubset(resource.keys())
    assert resource["slug"] == "forge-essentials"
    assert resource["author_name"] == "Pink Author"
    assert resource["tag_ids"] == ["forge", "v1-20"]
    assert [tag["id"] for tag in resource["tags"]] == ["forge"]
    assert resource["files"][0]["tag_ids"] == ["v1-20"]


@pytest.mark.unit
@pytest.mark.parametrize(
    "query_string",
    [
        "tags=fabric&tags=forge",
        "tags=fabric,forge",
    ],
)
def test_api_v1_resources_tags_use_and_semantics(client, seeded_catalog, query_string):
    payload = client.get(f"{RESOURCES_URL}?{query_string}").get_json()

    assert payload["data"]["total"] == 1
    assert _slugs(payload) == ["light-theme"]


@pytest.mark.unit
def test_api_v1_resources_file_tags_match(client, seeded_catalog):
    payload = client.get(RESOURCES_URL, query_string={"tags": "v1-20"}).get_json()
    assert _slugs(payload) == ["forge-essentials"]


@pytest.mark.unit
def test_api_v1_resources_pagination(client, seeded_catalog):
    payload = client.get(RESOURCES_URL, query_string={"page": "2", "limit": "2", "sort": "name"}).get_json()

    assert payload["data"]["total"] == 3
    assert payload["data"]["has_more"] is False
    assert payload["data"]["page"] == 2
    assert payload["data"]["limit"] == 2
    assert _slugs(payload) == ["light-theme"]


@pytest.mark.unit
def test_api_v1_resources_invalid_params_fall_back(client, seeded_catalog):
    payload = client.get(RESOURCES_URL, query_string={"page": "0", "limit": "-5", "sort": "???"}).get_json()

    assert payload["success"] is True
    assert payload["data"]["page"] == 1
    assert payload["data"]["limit"] == 20
    assert payload["data"]["total"] == 3


@pytest.mark.unit
def test_api_v1_resources_drafts_require_moderator(client, seeded_catalog):
    anonymous = client.get(RESOURCES_URL, query_string={"include_drafts": "true"}).get_json()
    vip = client.get(
        RESOURCES_URL,
        query_string={"include_drafts": "true"},
        headers={"X-User-Id": "u-1", "X-User-Role": "vip"},
    ).get_json()
    admin = client.get(
        RESOURCES_URL,
        query_string={"include_drafts": "true"},
        headers={"X-User-Id": "u-2", "X-User-Role": "admin"},
    ).get_json()
    admin_without_flag = client.get(RESOURCES_URL, headers={"X-User-Role": "admin"}).get_json()

    assert "secret-draft" not in _slugs(anonymous)
    assert "secret-draft" not in _slugs(vip)
    assert _slugs(admin)[0] == "secret-draft"
    assert admin["data"]["total"] == 4
    assert "secret-draft" not in _slugs(admin_without_flag)


@pytest.mark.unit
@pytest.mark.parametrize(
    "url",
    [
        "/api/v1/items/game/minecraft/categories/textures/resources",
        "/api/v1/items/game/unknown/categories/mods/resources",
        "/api/v1/items/web/minecraft/categories/mods/resources",
    ],
)
def test_api_v1_resources_unknown_scope_returns_empty(client, seeded_catalog, url):
    response = client.get(url)

    assert response.status_code == 200
    data = response.get_json()["data"]
    assert data["resources"] == []
    assert data["total"] == 0
    assert data["has_more"] is False


@pytest.mark.unit
def test_api_v1_resources_best_match(client, seeded_catalog):
    payload = client.get(f"{RESOURCES_URL}/best-match", query_string={"search": "dark"}).get_json()

    assert payload["success"] is True
    assert _slugs(payload) == ["dark-mode-theme", "light-theme"]


@pytest.mark.unit
def test_api_v1_resources_highlighted(client, seeded_catalog):
    payload = client.get(f"{RESOURCES_URL}/highlighted", query_string={"limit": "2"}).get_json()

    assert _slugs(payload) == ["light-theme", "forge-essentials"]


@pytest.mark.unit
def test_api_v1_resources_storage_failure_returns_database_error(client, seeded_catalog, monkeypatch):
    from sqlalchemy.exc import OperationalError

    from pinkstar.repositories.resources_repository import ResourcesRepository

    def _boom(self, **_kwargs):
        raise OperationalError("SELECT 1", {}, Exception("connection lost"))

    monkeypatch.setattr(ResourcesRepository, "list_scoped_candidates", _boom)

    response = client.get(RESOURCES_URL)

    assert response.status_code == 500
    payload = response.get_json()
    assert payload["success"] is False
    assert payload["error"] is True
    assert payload["message_code"] == "DATABASE_QUERY_ERROR"
    assert payload["message"] == "获取资源列表失败"


@pytest.mark.unit
def test_api_v1_resources_use_configured_page_sizes(app, client, seeded_catalog):
    app.config["RESOURCES_DEFAULT_PAGE_SIZE"] = 2
    app.config["RESOURCES_MAX_PAGE_SIZE"] = 2

    default_page = client.get(RESOURCES_URL).get_json()["data"]
    oversized = client.get(RESOURCES_URL, query_string={"limit": "3"}).get_json()["data"]
    second_page = client.get(RESOURCES_URL, query_string={"page": "2"}).get_json()["data"]

    assert default_page["limit"] == 2
    assert len(default_page["resources"]) == 2
    assert default_page["total"] == 3
    assert default_page["has_more"] is True
    assert oversized["limit"] == 2
    assert len(oversized["resources"]) == 2
    assert second_page["limit"] == 2
    assert [resource["slug"] for resource in second_page["resources"]] == ["dark-mode-theme"]
    assert second_page["has_more"] is False
