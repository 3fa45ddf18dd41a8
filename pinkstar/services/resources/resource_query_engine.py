"""资源查询引擎.

纯函数实现,对已读取的候选集合依次执行:
标签过滤 -> 搜索过滤/打分 -> 排序 -> 分页.
范围过滤(父项目/分类/可见状态)由 repository 下推到数据库完成.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pinkstar.constants import ResourceSortMode
from pinkstar.services.search.search_scorer import normalize_query, rank_entities, score_entity
from pinkstar.types.listing import PaginatedResourcesResponse
from pinkstar.types.resources import GetResourcesParams, ResourceListItem
from pinkstar.utils.collation import name_sort_key
from pinkstar.utils.time_utils import time_utils

DEFAULT_PAGE = 1
DEFAULT_PAGE_LIMIT = 20
MAX_PAGE_LIMIT = 100


def normalize_page(page: object) -> int:
    """非法或小于 1 的页码回退为 1."""
    try:
        value = int(page)  # type: ignore[call-overload]
    except (TypeError, ValueError):
        return DEFAULT_PAGE
    return value if value >= 1 else DEFAULT_PAGE


def normalize_limit(
    limit: object,
    *,
    default: int = DEFAULT_PAGE_LIMIT,
    maximum: int = MAX_PAGE_LIMIT,
) -> int:
    """非法或非正数的分页大小回退为默认值,并限制上限."""
    try:
        value = int(limit)  # type: ignore[call-overload]
    except (TypeError, ValueError):
        return default
    if value <= 0:
        return default
    return min(value, maximum)


def filter_by_tags(resources: Iterable[ResourceListItem], selected_tag_ids: Iterable[str]) -> list[ResourceListItem]:
    """保留携带全部所选标签的资源(AND 语义)."""
    required = {tag_id.strip() for tag_id in selected_tag_ids if tag_id and tag_id.strip()}
    if not required:
        return list(resources)
    return [resource for resource in resources if required <= resource.tag_ids]


def _name_sort_key(resource: ResourceListItem) -> tuple[tuple[int, ...], str]:
    return name_sort_key(resource.name)


def sort_resources(resources: Iterable[ResourceListItem], sort_by: str) -> list[ResourceListItem]:
    """按确定性字段排序,每次只生效一种模式.

    `relevance` 在此处等价于 `downloads`(无搜索词时的回退顺序).
    """
    mode = ResourceSortMode.normalize(sort_by)
    items = list(resources)
    if mode == ResourceSortMode.UPDATED_AT:
        return sorted(items, key=lambda r: time_utils.sort_key(r.updated_at), reverse=True)
    if mode == ResourceSortMode.CREATED_AT:
        return sorted(items, key=lambda r: time_utils.sort_key(r.created_at), reverse=True)
    if mode == ResourceSortMode.CREATED_AT_ASC:
        return sorted(items, key=lambda r: time_utils.sort_key(r.created_at))
    if mode == ResourceSortMode.NAME:
        return sorted(items, key=_name_sort_key)
    return sorted(
        items,
        key=lambda r: (r.downloads or 0, time_utils.sort_key(r.updated_at)),
        reverse=True,
    )


def apply_search(
    resources: Sequence[ResourceListItem],
    search_query: str | None,
    sort_by: str,
) -> list[ResourceListItem]:
    """执行搜索过滤与排序.

    查询为空时直接按排序模式排序;否则剔除 0 分资源,
    `relevance` 模式按得分降序(同分保持原顺序),其余模式按对应字段排序.
    """
    mode = ResourceSortMode.normalize(sort_by)
    if not normalize_query(search_query):
        return sort_resources(resources, mode)
    if mode == ResourceSortMode.RELEVANCE:
        return rank_entities(resources, search_query)
    matched = [resource for resource in resources if score_entity(resource, search_query) > 0]
    return sort_resources(matched, mode)


def paginate(resources: Sequence[ResourceListItem], *, page: int, limit: int | None) -> PaginatedResourcesResponse:
    """按 1 起始页码切片,越界页返回空列表."""
    safe_page = normalize_page(page)
    safe_limit = limit if isinstance(limit, int) and limit > 0 else DEFAULT_PAGE_LIMIT
    total = len(resources)
    start = (safe_page - 1) * safe_limit
    window = list(resources[start : start + safe_limit])
    return PaginatedResourcesResponse(
        resources=window,
        total=total,
        has_more=safe_page * safe_limit < total,
    )


def run_query(candidates: Sequence[ResourceListItem], params: GetResourcesParams) -> PaginatedResourcesResponse:
    """对范围内候选资源执行标签过滤、搜索、排序与分页."""
    tagged = filter_by_tags(candidates, params.selected_tag_ids)
    ordered = apply_search(tagged, params.search_query, params.sort_by)
    return paginate(ordered, page=params.page, limit=params.limit)
