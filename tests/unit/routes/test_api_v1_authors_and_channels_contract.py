"""API v1 authors / file-channels contract tests."""

import pytest


@pytest.mark.unit
def test_api_v1_author_resources(client, seeded_catalog):
    response = client.get(
        "/api/v1/authors/author-1/resources",
        query_string={"sort": "downloads", "order": "desc"},
    )

    assert response.status_code == 200
    data = response.get_json()["data"]
    assert [resource["slug"] for resource in data["resources"]] == [
        "light-theme",
        "forge-essentials",
        "dark-mode-theme",
    ]
    assert data["total"] == 3


@pytest.mark.unit
def test_api_v1_author_resources_exclude_and_limit(client, seeded_catalog):
    light_id = seeded_catalog["light_id"]
    data = client.get(
        f"/api/v1/authors/author-1/resources?exclude={light_id}&limit=1&sort=created_at&order=asc",
    ).get_json()["data"]

    assert [resource["slug"] for resource in data["resources"]] == ["dark-mode-theme"]


@pytest.mark.unit
def test_api_v1_author_resources_unknown_author_is_empty(client, seeded_catalog):
    data = client.get("/api/v1/authors/nobody/resources").get_json()["data"]
    assert data == {"resources": [], "total": 0}


@pytest.mark.unit
def test_api_v1_file_channels(client):
    response = client.get("/api/v1/file-channels")

    assert response.status_code == 200
    channels = response.get_json()["data"]["channels"]
    assert [channel["id"] for channel in channels] == ["release", "beta", "alpha"]
    assert channels[0]["tag_id"] == "channel-release"
