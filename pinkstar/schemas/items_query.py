"""项目列表 query/filter schema."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, Field, field_validator

from pinkstar.constants import ItemSortOption, ItemType
from pinkstar.schemas.base import QuerySchema
from pinkstar.schemas.query_parsers import parse_text
from pinkstar.types.items import ItemListFilters


class ItemsListQuery(QuerySchema):
    """项目列表 query 参数 schema."""

    item_type: str = Field(default=ItemType.GAME, validation_alias=AliasChoices("item_type", "type"))
    search: str = Field(default="", validation_alias=AliasChoices("search", "q"))
    sort: str = ItemSortOption.DEFAULT

    @field_validator("item_type", mode="before")
    @classmethod
    def _parse_item_type(cls, value: Any) -> str:
        cleaned = parse_text(value).lower()
        return cleaned or ItemType.GAME

    @field_validator("search", mode="before")
    @classmethod
    def _parse_search(cls, value: Any) -> str:
        return parse_text(value)

    @field_validator("sort", mode="before")
    @classmethod
    def _parse_sort(cls, value: Any) -> str:
        cleaned = parse_text(value).lower()
        return cleaned if cleaned in ItemSortOption.ALL else ItemSortOption.DEFAULT

    def to_filters(self) -> ItemListFilters:
        """转换为项目列表 filters 对象."""
        return ItemListFilters(item_type=self.item_type, search=self.search, sort=self.sort)
