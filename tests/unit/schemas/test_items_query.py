import pytest

from pinkstar.constants import ItemSortOption, ItemType
from pinkstar.schemas.items_query import ItemsListQuery
from pinkstar.schemas.validation import validate_or_raise


@pytest.mark.unit
def test_items_list_query_defaults() -> None:
    filters = validate_or_raise(ItemsListQuery, {}).to_filters()

    assert filters.item_type == ItemType.GAME
    assert filters.search == ""
    assert filters.sort == ItemSortOption.DEFAULT


@pytest.mark.unit
def test_items_list_query_accepts_type_alias_and_normalizes_sort() -> None:
    filters = validate_or_raise(ItemsListQuery, {"type": " WEB ", "q": " blog ", "sort": "nope"}).to_filters()

    assert filters.item_type == ItemType.WEB
    assert filters.search == "blog"
    assert filters.sort == ItemSortOption.DEFAULT
