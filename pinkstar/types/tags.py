"""标签与动态标签组相关类型定义."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from pinkstar.models.tag import Tag


@dataclass(slots=True)
class TagSummary:
    """通用标签展示结构."""

    id: str
    name: str
    tag_type: str
    color: str | None = None
    text_color: str | None = None
    border_color: str | None = None
    hover_bg_color: str | None = None
    hover_text_color: str | None = None
    hover_border_color: str | None = None
    icon_svg: str | None = None

    @classmethod
    def from_model(cls, tag: Tag) -> TagSummary:
        return cls(
            id=tag.id,
            name=tag.name,
            tag_type=tag.tag_type,
            color=tag.color,
            text_color=tag.text_color,
            border_color=tag.border_color,
            hover_bg_color=tag.hover_bg_color,
            hover_text_color=tag.hover_text_color,
            hover_border_color=tag.hover_border_color,
            icon_svg=tag.icon_svg,
        )


@dataclass(slots=True)
class DynamicTagGroup:
    """分类下的单个筛选维度及其可选标签."""

    id: str
    display_name: str
    category_id: int
    tags: list[TagSummary] = field(default_factory=list)
    applies_to_resources: bool = True
    applies_to_files: bool = False


@dataclass(slots=True)
class TagGroupRowProjection:
    """标签组在用标签查询投影(Repository 输出)."""

    group_id: str
    tag: Tag
    member_sort_order: int


DynamicAvailableFilterTags: TypeAlias = list[DynamicTagGroup]
