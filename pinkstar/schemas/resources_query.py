"""资源相关 query/filter schema.

目标:
- 将 API 层的 query 参数规范化/默认值/边界处理下沉到 schema 单入口
- 非法页码、分页大小与排序模式一律归一化为默认值,兼容过期的 query string
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, Field, field_validator

from pinkstar.constants import AuthorResourceSort, ResourceSortMode
from pinkstar.schemas.base import QuerySchema
from pinkstar.schemas.query_parsers import parse_bool, parse_int, parse_int_list, parse_optional_int, parse_tags, parse_text
from pinkstar.services.resources.resource_query_engine import (
    DEFAULT_PAGE,
    MAX_PAGE_LIMIT,
    normalize_limit,
    normalize_page,
)
from pinkstar.types.resources import GetResourcesParams

_BEST_MATCH_DEFAULT_LIMIT = 3
_BEST_MATCH_MAX_LIMIT = 10
_HIGHLIGHTED_DEFAULT_LIMIT = 5
_HIGHLIGHTED_MAX_LIMIT = 20


class ResourcesListQuery(QuerySchema):
    """资源列表 query 参数 schema."""

    page: int = DEFAULT_PAGE
    limit: int | None = None
    sort: str = Field(default=ResourceSortMode.DEFAULT, validation_alias=AliasChoices("sort", "sort_by"))
    search: str = Field(default="", validation_alias=AliasChoices("search", "q"))
    tags: list[str] = Field(default_factory=list)
    include_drafts: bool = False

    @field_validator("page", mode="before")
    @classmethod
    def _parse_page(cls, value: Any) -> int:
        return normalize_page(parse_int(value, default=DEFAULT_PAGE))

    @field_validator("limit", mode="before")
    @classmethod
    def _parse_limit(cls, value: Any) -> int | None:
        # 缺省与上限由 service 按 RESOURCES_DEFAULT_PAGE_SIZE / RESOURCES_MAX_PAGE_SIZE 决定
        parsed = parse_optional_int(value)
        return parsed if parsed is not None and parsed > 0 else None

    @field_validator("sort", mode="before")
    @classmethod
    def _parse_sort(cls, value: Any) -> str:
        return ResourceSortMode.normalize(parse_text(value))

    @field_validator("search", mode="before")
    @classmethod
    def _parse_search(cls, value: Any) -> str:
        return parse_text(value)

    @field_validator("tags", mode="before")
    @classmethod
    def _parse_tags(cls, value: Any) -> list[str]:
        return parse_tags(value)

    @field_validator("include_drafts", mode="before")
    @classmethod
    def _parse_include_drafts(cls, value: Any) -> bool:
        return parse_bool(value, default=False)

    def to_params(self, *, item_type: str, item_slug: str, category_slug: str | None) -> GetResourcesParams:
        """转换为资源查询描述符."""
        return GetResourcesParams(
            parent_item_slug=item_slug,
            parent_item_type=item_type,
            category_slug=category_slug,
            selected_tag_ids=list(self.tags),
            search_query=self.search,
            sort_by=self.sort,
            page=self.page,
            limit=self.limit,
            include_drafts=self.include_drafts,
        )


class BestMatchQuery(QuerySchema):
    """分类最佳匹配 query 参数 schema."""

    search: str = Field(default="", validation_alias=AliasChoices("search", "q"))
    limit: int = _BEST_MATCH_DEFAULT_LIMIT

    @field_validator("search", mode="before")
    @classmethod
    def _parse_search(cls, value: Any) -> str:
        return parse_text(value)

    @field_validator("limit", mode="before")
    @classmethod
    def _parse_limit(cls, value: Any) -> int:
        return normalize_limit(
            parse_int(value, default=_BEST_MATCH_DEFAULT_LIMIT),
            default=_BEST_MATCH_DEFAULT_LIMIT,
            maximum=_BEST_MATCH_MAX_LIMIT,
        )


class HighlightedQuery(QuerySchema):
    """分类热门资源 query 参数 schema."""

    limit: int = _HIGHLIGHTED_DEFAULT_LIMIT

    @field_validator("limit", mode="before")
    @classmethod
    def _parse_limit(cls, value: Any) -> int:
        return normalize_limit(
            parse_int(value, default=_HIGHLIGHTED_DEFAULT_LIMIT),
            default=_HIGHLIGHTED_DEFAULT_LIMIT,
            maximum=_HIGHLIGHTED_MAX_LIMIT,
        )


class AuthorResourcesQuery(QuerySchema):
    """作者已发布资源 query 参数 schema."""

    sort: str = AuthorResourceSort.DEFAULT
    order: str = "desc"
    limit: int | None = None
    exclude: list[int] = Field(default_factory=list)

    @field_validator("sort", mode="before")
    @classmethod
    def _parse_sort(cls, value: Any) -> str:
        cleaned = parse_text(value).lower()
        return cleaned if cleaned in AuthorResourceSort.ALL else AuthorResourceSort.DEFAULT

    @field_validator("order", mode="before")
    @classmethod
    def _parse_order(cls, value: Any) -> str:
        return "asc" if parse_text(value).lower() == "asc" else "desc"

    @field_validator("limit", mode="before")
    @classmethod
    def _parse_limit(cls, value: Any) -> int | None:
        parsed = parse_optional_int(value)
        if parsed is None or parsed <= 0:
            return None
        return min(parsed, MAX_PAGE_LIMIT)

    @field_validator("exclude", mode="before")
    @classmethod
    def _parse_exclude(cls, value: Any) -> list[int]:
        return parse_int_list(value)
