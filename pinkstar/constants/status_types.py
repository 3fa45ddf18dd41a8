"""状态类型常量.

定义项目与资源的发布状态值,避免魔法字符串.
"""

from typing import ClassVar


class ProjectStatus:
    """项目/资源发布状态常量."""

    PUBLISHED = "published"  # 已发布
    DRAFT = "draft"  # 草稿
    ARCHIVED = "archived"  # 已归档

    ALL: ClassVar[tuple[str, ...]] = (PUBLISHED, DRAFT, ARCHIVED)

    # 对公众可见
    PUBLIC: ClassVar[tuple[str, ...]] = (PUBLISHED,)

    # 具备草稿查看权限时可见
    WITH_DRAFTS: ClassVar[tuple[str, ...]] = (PUBLISHED, DRAFT)

    @classmethod
    def visible_statuses(cls, *, include_drafts: bool) -> tuple[str, ...]:
        """根据是否包含草稿返回可见状态集合."""
        return cls.WITH_DRAFTS if include_drafts else cls.PUBLIC
