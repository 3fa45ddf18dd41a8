from datetime import UTC, datetime

import pytest

from pinkstar.constants import ResourceSortMode
from pinkstar.services.resources.resource_query_engine import (
    DEFAULT_PAGE_LIMIT,
    MAX_PAGE_LIMIT,
    apply_search,
    filter_by_tags,
    normalize_limit,
    normalize_page,
    paginate,
    run_query,
    sort_resources,
)
from pinkstar.services.search.search_scorer import score_entity
from pinkstar.types.resources import GetResourcesParams, ResourceListItem


def _resource(resource_id: int, name: str, **kwargs) -> ResourceListItem:
    return ResourceListItem(
        id=resource_id,
        slug=f"r-{resource_id}",
        name=name,
        description=kwargs.pop("description", None),
        item_slug="minecraft",
        item_type="game",
        category_slug="mods",
        status="published",
        tag_ids=frozenset(kwargs.pop("tag_ids", ())),
        **kwargs,
    )


def _params(**kwargs) -> GetResourcesParams:
    return GetResourcesParams(parent_item_slug="minecraft", parent_item_type="game", category_slug="mods", **kwargs)


@pytest.mark.unit
def test_tag_filter_is_conjunctive() -> None:
    r1 = _resource(1, "R1", tag_ids={"A"})
    r2 = _resource(2, "R2", tag_ids={"A", "B"})
    r3 = _resource(3, "R3", tag_ids={"B"})

    assert filter_by_tags([r1, r2, r3], ["A", "B"]) == [r2]
    assert filter_by_tags([r1, r2, r3], ["A"]) == [r1, r2]
    assert filter_by_tags([r1, r2, r3], []) == [r1, r2, r3]
    assert filter_by_tags([r1, r2, r3], [" ", ""]) == [r1, r2, r3]


@pytest.mark.unit
def test_run_query_tag_example_returns_only_resource_with_both_tags() -> None:
    r1 = _resource(1, "R1", tag_ids={"A"})
    r2 = _resource(2, "R2", tag_ids={"A", "B"})
    r3 = _resource(3, "R3", tag_ids={"B"})

    result = run_query([r1, r2, r3], _params(selected_tag_ids=["A", "B"]))

    assert [resource.id for resource in result.resources] == [2]
    assert result.total == 1
    assert result.has_more is False


@pytest.mark.unit
def test_paginate_second_partial_page() -> None:
    resources = [_resource(index, f"R{index}") for index in range(1, 16)]

    result = paginate(resources, page=2, limit=10)

    assert len(result.resources) == 5
    assert result.total == 15
    assert result.has_more is False
    assert [resource.id for resource in result.resources] == [11, 12, 13, 14, 15]


@pytest.mark.unit
@pytest.mark.parametrize(("page", "limit"), [(1, 10), (2, 10), (3, 10), (1, 7), (3, 7), (4, 5)])
def test_paginate_window_size_and_has_more(page: int, limit: int) -> None:
    resources = [_resource(index, f"R{index}") for index in range(1, 16)]

    result = paginate(resources, page=page, limit=limit)

    assert len(result.resources) <= limit
    assert len(result.resources) == max(0, min(limit, 15 - (page - 1) * limit))
    assert result.has_more is (page * limit < 15)
    assert result.total == 15


@pytest.mark.unit
def test_normalize_page_and_limit() -> None:
    assert normalize_page(None) == 1
    assert normalize_page("abc") == 1
    assert normalize_page(0) == 1
    assert normalize_page(-3) == 1
    assert normalize_page(4) == 4

    assert normalize_limit(None) == DEFAULT_PAGE_LIMIT
    assert normalize_limit(0) == DEFAULT_PAGE_LIMIT
    assert normalize_limit(-5) == DEFAULT_PAGE_LIMIT
    assert normalize_limit("x") == DEFAULT_PAGE_LIMIT
    assert normalize_limit(1000) == MAX_PAGE_LIMIT
    assert normalize_limit(30, maximum=25) == 25


@pytest.mark.unit
def test_search_excludes_zero_scores_and_ranks_by_relevance() -> None:
    dark = _resource(1, "Dark Mode Theme", downloads=1)
    light = _resource(2, "Light Theme", description="Mentions dark colors once", downloads=500)
    other = _resource(3, "Skyblock", downloads=900)

    ranked = apply_search([light, other, dark], "dark", ResourceSortMode.RELEVANCE)

    assert ranked == [dark, light]
    scores = [score_entity(resource, "dark") for resource in ranked]
    assert all(score > 0 for score in scores)
    assert all(left >= right for left, right in zip(scores, scores[1:]))


@pytest.mark.unit
def test_search_with_non_relevance_sort_filters_then_sorts() -> None:
    dark = _resource(1, "Dark Mode Theme", downloads=1)
    light = _resource(2, "Light Theme", description="Mentions dark colors once", downloads=500)
    other = _resource(3, "Skyblock", downloads=900)

    ordered = apply_search([dark, light, other], "dark", ResourceSortMode.DOWNLOADS)

    assert ordered == [light, dark]


@pytest.mark.unit
def test_relevance_without_query_falls_back_to_downloads() -> None:
    low = _resource(1, "Low", downloads=1)
    high = _resource(2, "High", downloads=10)

    assert apply_search([low, high], "   ", ResourceSortMode.RELEVANCE) == [high, low]


@pytest.mark.unit
def test_sort_modes_are_deterministic() -> None:
    a = _resource(
        1,
        "beta",
        downloads=5,
        created_at=datetime(2026, 1, 1, tzinfo=UTC),
        updated_at=datetime(2026, 1, 9, tzinfo=UTC),
    )
    b = _resource(
        2,
        "Alpha",
        downloads=5,
        created_at=datetime(2026, 1, 3, tzinfo=UTC),
        updated_at=datetime(2026, 1, 4, tzinfo=UTC),
    )
    c = _resource(3, "gamma", downloads=9, created_at=None, updated_at=None)

    assert sort_resources([a, b, c], ResourceSortMode.DOWNLOADS) == [c, a, b]
    assert sort_resources([a, b, c], ResourceSortMode.UPDATED_AT) == [a, b, c]
    assert sort_resources([a, b, c], ResourceSortMode.CREATED_AT) == [b, a, c]
    assert sort_resources([a, b, c], ResourceSortMode.CREATED_AT_ASC) == [c, a, b]
    assert sort_resources([a, b, c], ResourceSortMode.NAME) == [b, a, c]
    assert sort_resources([a, b, c], "not-a-mode") == [c, a, b]


@pytest.mark.unit
def test_sort_by_name_places_accented_names_with_their_base_letter() -> None:
    zebra = _resource(1, "Zebra")
    eclair = _resource(2, "Éclair")
    apple = _resource(3, "apple")
    ocean = _resource(4, "Ökosystem")

    ordered = sort_resources([zebra, eclair, apple, ocean], ResourceSortMode.NAME)

    assert [resource.name for resource in ordered] == ["apple", "Éclair", "Ökosystem", "Zebra"]


@pytest.mark.unit
def test_run_query_is_idempotent_and_total_reflects_filtered_count() -> None:
    resources = [
        _resource(index, f"Theme {index}", downloads=index % 4, tag_ids={"A"} if index % 2 else {"B"})
        for index in range(1, 30)
    ]
    params = _params(selected_tag_ids=["A"], search_query="theme", sort_by=ResourceSortMode.DOWNLOADS, page=2, limit=5)

    first = run_query(resources, params)
    second = run_query(resources, params)

    assert first.total == 15
    assert [r.id for r in first.resources] == [r.id for r in second.resources]
    assert first.total == second.total
    assert all("A" in r.tag_ids for r in first.resources)


@pytest.mark.unit
def test_page_past_end_is_empty_not_error() -> None:
    resources = [_resource(index, f"R{index}") for index in range(1, 4)]

    result = run_query(resources, _params(page=5, limit=10))

    assert result.resources == []
    assert result.total == 3
    assert result.has_more is False
