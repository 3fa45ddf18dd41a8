"""资源查询相关类型定义."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from pinkstar.constants import ResourceSortMode
from pinkstar.types.tags import TagSummary


@dataclass(slots=True)
class GetResourcesParams:
    """资源查询描述符.

    `selected_tag_ids` 之间为 AND 语义; `page` 由 schema 层归一化; `limit` 为空时由 service 使用配置的默认分页大小.
    """

    parent_item_slug: str
    parent_item_type: str
    category_slug: str | None = None
    selected_tag_ids: list[str] = field(default_factory=list)
    search_query: str = ""
    sort_by: str = ResourceSortMode.DEFAULT
    page: int = 1
    limit: int | None = None
    include_drafts: bool = False


@dataclass(slots=True)
class ResourceFileItem:
    """资源文件展示结构."""

    id: int
    name: str
    version_name: str | None
    channel: TagSummary | None
    changelog: str | None
    downloads: int
    created_at: datetime | None
    updated_at: datetime | None
    tag_ids: list[str] = field(default_factory=list)


@dataclass(slots=True)
class ResourceListItem:
    """资源列表单行结构.

    `tags` 为资源级标签; `tag_ids` 为资源及其全部文件携带的标签 ID 并集,
    供标签过滤使用.
    """

    id: int
    slug: str
    name: str
    description: str | None
    item_slug: str
    item_type: str
    category_slug: str
    status: str
    author_id: str | None = None
    author_name: str | None = None
    downloads: int = 0
    followers: int = 0
    rating: float | None = None
    review_count: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
    tags: list[TagSummary] = field(default_factory=list)
    tag_ids: frozenset[str] = field(default_factory=frozenset)
    files: list[ResourceFileItem] = field(default_factory=list)

    @property
    def tag_names(self) -> list[str]:
        return [tag.name for tag in self.tags]


@dataclass(slots=True)
class AuthorResourcesFilters:
    """作者已发布资源查询条件."""

    author_id: str
    sort_by: str
    order: str
    limit: int | None = None
    exclude_ids: tuple[int, ...] = ()
