"""动态筛选标签 Service.

职责:
- 解析 (项目类型, 项目 slug, 分类 slug) 范围
- 将各标签组在范围内实际使用的成员标签组装为 DynamicTagGroup 列表
- 不做 Query 细节、不做序列化/Response、不 commit
"""

from __future__ import annotations

from collections import defaultdict

from pinkstar.constants import ItemType, ProjectStatus
from pinkstar.repositories.items_repository import ItemsRepository
from pinkstar.repositories.tag_groups_repository import TagGroupsRepository
from pinkstar.types.context import CallerContext
from pinkstar.types.tags import DynamicAvailableFilterTags, DynamicTagGroup, TagSummary
from pinkstar.utils.structlog_config import log_debug


class FilterTagsService:
    """动态筛选标签读取服务."""

    def __init__(
        self,
        repository: TagGroupsRepository | None = None,
        items_repository: ItemsRepository | None = None,
    ) -> None:
        """初始化服务并注入标签组/项目仓库."""
        self._repository = repository or TagGroupsRepository()
        self._items_repository = items_repository or ItemsRepository()

    def get_available_filter_tags(
        self,
        parent_slug: str,
        item_type: str,
        category_slug: str,
        context: CallerContext,
    ) -> DynamicAvailableFilterTags:
        """返回分类可用的筛选标签组.

        未知项目/分类视为"未配置筛选",返回空列表;没有可用标签的组不返回.
        """
        cleaned_category_slug = (category_slug or "").strip()
        if not ItemType.is_valid(item_type) or not cleaned_category_slug:
            return []

        item = self._items_repository.get_item(item_type, parent_slug)
        if item is None:
            return []
        category = self._items_repository.get_category(item.id, cleaned_category_slug)
        if category is None:
            return []

        statuses = ProjectStatus.visible_statuses(include_drafts=context.can_view_drafts)
        tags_by_group: dict[str, list[TagSummary]] = defaultdict(list)
        for row in self._repository.list_in_use_member_tags(category.id, statuses):
            tags_by_group[row.group_id].append(TagSummary.from_model(row.tag))

        groups: DynamicAvailableFilterTags = []
        for group in self._repository.list_groups(category.id):
            tags = tags_by_group.get(group.id)
            if not tags:
                continue
            groups.append(
                DynamicTagGroup(
                    id=group.id,
                    display_name=group.display_name,
                    category_id=group.category_id,
                    tags=tags,
                    applies_to_resources=bool(group.applies_to_resources),
                    applies_to_files=bool(group.applies_to_files),
                ),
            )

        log_debug(
            "筛选标签组装完成",
            module="tags",
            category_id=category.id,
            group_count=len(groups),
        )
        return groups
