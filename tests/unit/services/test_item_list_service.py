import pytest

from pinkstar.constants import ItemSortOption
from pinkstar.services.items.item_list_service import ItemListService
from pinkstar.types.items import ItemListFilters


def _slugs(items) -> list[str]:
    return [item.slug for item in items]


@pytest.mark.unit
def test_list_items_with_stats_and_popularity_order(seeded_catalog) -> None:
    items = ItemListService().list_items(ItemListFilters(item_type="game"))

    assert _slugs(items) == ["minecraft", "terraria"]
    minecraft = items[0]
    assert minecraft.stats.resource_count == 4
    assert minecraft.stats.total_downloads == 650
    assert minecraft.stats.followers == 10
    assert items[1].stats.resource_count == 0
    assert items[1].stats.total_downloads == 0


@pytest.mark.unit
@pytest.mark.parametrize(
    ("sort", "expected"),
    [
        (ItemSortOption.NAME_ASC, ["minecraft", "terraria"]),
        (ItemSortOption.NAME_DESC, ["terraria", "minecraft"]),
        (ItemSortOption.CREATED_DESC, ["terraria", "minecraft"]),
        (ItemSortOption.CREATED_ASC, ["minecraft", "terraria"]),
        (ItemSortOption.UPDATED_DESC, ["terraria", "minecraft"]),
        ("bogus", ["minecraft", "terraria"]),
    ],
)
def test_list_items_sort_options(seeded_catalog, sort: str, expected: list[str]) -> None:
    items = ItemListService().list_items(ItemListFilters(item_type="game", sort=sort))
    assert _slugs(items) == expected


@pytest.mark.unit
def test_list_items_search_drops_non_matching(seeded_catalog) -> None:
    service = ItemListService()

    assert _slugs(service.list_items(ItemListFilters(item_type="game", search="terr"))) == ["terraria"]
    assert _slugs(service.list_items(ItemListFilters(item_type="game", search="sandbox"))) == ["terraria"]
    assert service.list_items(ItemListFilters(item_type="game", search="zzz")) == []


@pytest.mark.unit
def test_list_items_unknown_or_empty_type(seeded_catalog) -> None:
    service = ItemListService()

    assert service.list_items(ItemListFilters(item_type="web")) == []
    assert service.list_items(ItemListFilters(item_type="movie")) == []
