"""资源列表 Service.

职责:
- 解析父项目/分类范围,按调用方上下文决定可见状态
- 组织 repository 调用并将 ORM 对象转换为稳定 DTO,交给查询引擎
- 不做 Query 细节、不做序列化/Response、不 commit
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from pinkstar.constants import AuthorResourceSort, ItemType, ProjectStatus, ResourceSortMode
from pinkstar.repositories.items_repository import ItemsRepository
from pinkstar.repositories.resources_repository import ResourcesRepository
from pinkstar.services.resources.resource_mapper import build_resource_list_item
from pinkstar.services.resources.resource_query_engine import (
    DEFAULT_PAGE_LIMIT,
    MAX_PAGE_LIMIT,
    normalize_limit,
    normalize_page,
    run_query,
)
from pinkstar.types.context import CallerContext
from pinkstar.types.listing import PaginatedResourcesResponse
from pinkstar.types.resources import AuthorResourcesFilters, GetResourcesParams, ResourceListItem
from pinkstar.utils.structlog_config import log_info

BEST_MATCH_LIMIT = 3
HIGHLIGHTED_LIMIT = 5


class ResourceListService:
    """资源列表业务编排服务."""

    def __init__(
        self,
        repository: ResourcesRepository | None = None,
        items_repository: ItemsRepository | None = None,
        *,
        default_limit: int = DEFAULT_PAGE_LIMIT,
        max_limit: int = MAX_PAGE_LIMIT,
    ) -> None:
        """初始化服务并注入资源/项目仓库."""
        self._repository = repository or ResourcesRepository()
        self._items_repository = items_repository or ItemsRepository()
        self._default_limit = default_limit
        self._max_limit = max_limit

    def normalize_params(self, params: GetResourcesParams) -> GetResourcesParams:
        """按配置的默认/最大分页大小归一化页码、分页大小与排序模式(幂等)."""
        return replace(
            params,
            page=normalize_page(params.page),
            limit=normalize_limit(params.limit, default=self._default_limit, maximum=self._max_limit),
            sort_by=ResourceSortMode.normalize(params.sort_by),
        )

    def get_resources(self, params: GetResourcesParams, context: CallerContext) -> PaginatedResourcesResponse:
        """按查询描述符返回分页资源列表.

        未知父项目/分类、非法项目类型均返回空结果,不抛异常;
        存储层异常原样向上传播.
        """
        if not ItemType.is_valid(params.parent_item_type):
            return PaginatedResourcesResponse.empty()

        item = self._items_repository.get_item(params.parent_item_type, params.parent_item_slug)
        if item is None:
            return PaginatedResourcesResponse.empty()

        category_id: int | None = None
        if params.category_slug is not None:
            category_slug = params.category_slug.strip()
            if not category_slug:
                return PaginatedResourcesResponse.empty()
            category = self._items_repository.get_category(item.id, category_slug)
            if category is None:
                return PaginatedResourcesResponse.empty()
            category_id = category.id

        include_drafts = bool(params.include_drafts) and context.can_view_drafts
        rows = self._repository.list_scoped_candidates(
            item_id=item.id,
            category_id=category_id,
            statuses=ProjectStatus.visible_statuses(include_drafts=include_drafts),
        )
        candidates = [build_resource_list_item(row) for row in rows]

        normalized = self.normalize_params(params)
        result = run_query(candidates, normalized)
        log_info(
            "资源列表查询完成",
            module="resources",
            item_type=params.parent_item_type,
            item_slug=params.parent_item_slug,
            category_slug=params.category_slug,
            tag_count=len(params.selected_tag_ids),
            sort_by=normalized.sort_by,
            page=normalized.page,
            total=result.total,
            returned=len(result.resources),
        )
        return result

    def get_best_match_for_category(
        self,
        parent_slug: str,
        item_type: str,
        category_slug: str,
        query: str,
        context: CallerContext,
        *,
        limit: int = BEST_MATCH_LIMIT,
    ) -> list[ResourceListItem]:
        """按相关性返回分类内与查询最匹配的少量资源."""
        params = GetResourcesParams(
            parent_item_slug=parent_slug,
            parent_item_type=item_type,
            category_slug=category_slug,
            search_query=query,
            sort_by=ResourceSortMode.RELEVANCE,
            page=1,
            limit=limit,
        )
        return self.get_resources(params, context).resources

    def get_highlighted_resources(
        self,
        parent_slug: str,
        item_type: str,
        category_slug: str,
        context: CallerContext,
        *,
        limit: int = HIGHLIGHTED_LIMIT,
    ) -> list[ResourceListItem]:
        """返回分类内下载量最高的资源."""
        params = GetResourcesParams(
            parent_item_slug=parent_slug,
            parent_item_type=item_type,
            category_slug=category_slug,
            sort_by=ResourceSortMode.DOWNLOADS,
            page=1,
            limit=limit,
        )
        return self.get_resources(params, context).resources

    def get_author_published_resources(
        self,
        author_id: str,
        *,
        limit: int | None = None,
        sort_by: str = AuthorResourceSort.DEFAULT,
        order: str = "desc",
        exclude_ids: Iterable[int] = (),
    ) -> list[ResourceListItem]:
        """返回作者跨项目的已发布资源."""
        cleaned_author_id = (author_id or "").strip()
        if not cleaned_author_id:
            return []

        filters = AuthorResourcesFilters(
            author_id=cleaned_author_id,
            sort_by=sort_by if sort_by in AuthorResourceSort.ALL else AuthorResourceSort.DEFAULT,
            order="asc" if (order or "").strip().lower() == "asc" else "desc",
            limit=limit if limit is not None and limit > 0 else None,
            exclude_ids=tuple(exclude_ids),
        )
        rows = self._repository.list_author_published(filters)
        return [build_resource_list_item(row) for row in rows]
