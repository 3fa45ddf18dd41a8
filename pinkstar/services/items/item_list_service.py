"""项目列表 Service.

职责:
- 读取某类型的已发布项目及统计,按搜索词打分并排序
- 不做 Query 细节、不做序列化/Response、不 commit
"""

from __future__ import annotations

from pinkstar.constants import ItemSortOption, ItemType
from pinkstar.repositories.items_repository import ItemsRepository
from pinkstar.services.search.item_scorer import score_item
from pinkstar.services.search.search_scorer import normalize_query
from pinkstar.types.items import ItemListFilters, ItemListItem, ItemStats
from pinkstar.utils.collation import name_sort_key
from pinkstar.utils.time_utils import time_utils


def _popularity(entry: ItemListItem) -> int:
    # 游戏按资源下载总量,其他类型按关注数
    if entry.item_type == ItemType.GAME:
        return entry.stats.total_downloads
    return entry.stats.followers


def _name_key(entry: ItemListItem) -> tuple[tuple[int, ...], str]:
    return name_sort_key(entry.name)


class ItemListService:
    """项目列表业务编排服务."""

    def __init__(self, repository: ItemsRepository | None = None) -> None:
        """初始化服务并注入项目仓库."""
        self._repository = repository or ItemsRepository()

    def list_items(self, filters: ItemListFilters) -> list[ItemListItem]:
        """列出项目,非法类型返回空列表."""
        if not ItemType.is_valid(filters.item_type):
            return []

        entries = [
            ItemListItem(
                id=row.item.id,
                slug=row.item.slug,
                name=row.item.name,
                item_type=row.item.item_type,
                description=row.item.description,
                created_at=time_utils.to_utc(row.item.created_at),
                updated_at=time_utils.to_utc(row.item.updated_at),
                stats=ItemStats(
                    resource_count=row.resource_count,
                    total_downloads=row.total_downloads,
                    followers=int(row.item.followers_count or 0),
                ),
            )
            for row in self._repository.list_published_items(filters.item_type)
        ]

        has_query = bool(normalize_query(filters.search))
        if has_query:
            scored = [(score_item(entry, filters.search), entry) for entry in entries]
            scored = [pair for pair in scored if pair[0] > 0]
            scored.sort(key=lambda pair: pair[0], reverse=True)
            entries = [entry for _, entry in scored]

        sort = filters.sort if filters.sort in ItemSortOption.ALL else ItemSortOption.DEFAULT
        if sort == ItemSortOption.DEFAULT:
            if has_query:
                return entries
            sort = ItemSortOption.POPULARITY
        return self._sort(entries, sort)

    @staticmethod
    def _sort(entries: list[ItemListItem], sort: str) -> list[ItemListItem]:
        if sort == ItemSortOption.NAME_ASC:
            return sorted(entries, key=_name_key)
        if sort == ItemSortOption.NAME_DESC:
            return sorted(entries, key=_name_key, reverse=True)
        if sort == ItemSortOption.CREATED_DESC:
            return sorted(entries, key=lambda entry: time_utils.sort_key(entry.created_at), reverse=True)
        if sort == ItemSortOption.CREATED_ASC:
            return sorted(entries, key=lambda entry: time_utils.sort_key(entry.created_at))
        if sort == ItemSortOption.UPDATED_DESC:
            return sorted(entries, key=lambda entry: time_utils.sort_key(entry.updated_at), reverse=True)
        return sorted(entries, key=_popularity, reverse=True)
