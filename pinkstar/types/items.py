"""项目列表相关类型定义."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from pinkstar.constants import ItemSortOption

if TYPE_CHECKING:
    from pinkstar.models.item import Item


@dataclass(slots=True)
class ItemListFilters:
    """项目列表筛选条件."""

    item_type: str
    search: str = ""
    sort: str = ItemSortOption.DEFAULT


@dataclass(slots=True)
class ItemRowProjection:
    """项目列表查询投影结果(Repository 输出)."""

    item: Item
    resource_count: int
    total_downloads: int


@dataclass(slots=True)
class ItemStats:
    """项目统计信息."""

    resource_count: int
    total_downloads: int
    followers: int


@dataclass(slots=True)
class ItemListItem:
    """项目列表单行结构."""

    id: int
    slug: str
    name: str
    item_type: str
    description: str | None
    created_at: datetime | None
    updated_at: datetime | None
    stats: ItemStats
