"""列表/分页通用结构类型."""

from __future__ import annotations

from dataclasses import dataclass, field

from pinkstar.types.resources import ResourceListItem


@dataclass(slots=True)
class PaginatedResourcesResponse:
    """资源分页结果结构.

    `total` 为过滤后未分页的数量, `has_more` 等价于 `page * limit < total`.
    """

    resources: list[ResourceListItem] = field(default_factory=list)
    total: int = 0
    has_more: bool = False

    @classmethod
    def empty(cls) -> PaginatedResourcesResponse:
        return cls()
