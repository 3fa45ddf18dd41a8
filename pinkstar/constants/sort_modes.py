"""排序模式常量.

资源列表、作者资源与项目列表各自有一组互斥的排序模式.
"""

from __future__ import annotations

from typing import ClassVar


class ResourceSortMode:
    """资源列表排序模式.

    每次查询只生效一种模式. `relevance` 仅在存在搜索词时按得分排序,
    无搜索词时回退为 `downloads`.
    """

    RELEVANCE = "relevance"
    DOWNLOADS = "downloads"
    UPDATED_AT = "updated_at"
    CREATED_AT = "created_at"
    CREATED_AT_ASC = "created_at_asc"
    NAME = "name"

    DEFAULT = RELEVANCE

    ALL: ClassVar[tuple[str, ...]] = (RELEVANCE, DOWNLOADS, UPDATED_AT, CREATED_AT, CREATED_AT_ASC, NAME)

    # 兼容前端历史 query string 中的驼峰写法
    ALIASES: ClassVar[dict[str, str]] = {
        "updatedat": UPDATED_AT,
        "createdat": CREATED_AT,
        "createdat_asc": CREATED_AT_ASC,
        "popularity": DOWNLOADS,
    }

    @classmethod
    def normalize(cls, value: str | None) -> str:
        """将任意输入规范化为合法排序模式,非法值回退为默认模式."""
        cleaned = (value or "").strip().lower()
        if cleaned in cls.ALL:
            return cleaned
        return cls.ALIASES.get(cleaned, cls.DEFAULT)


class AuthorResourceSort:
    """作者资源列表排序字段."""

    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    DOWNLOADS = "downloads"
    RATING = "rating"

    DEFAULT = CREATED_AT

    ALL: ClassVar[tuple[str, ...]] = (CREATED_AT, UPDATED_AT, DOWNLOADS, RATING)


class ItemSortOption:
    """项目列表排序选项."""

    DEFAULT = "default"
    POPULARITY = "popularity"
    NAME_ASC = "name_asc"
    NAME_DESC = "name_desc"
    CREATED_DESC = "created_desc"
    CREATED_ASC = "created_asc"
    UPDATED_DESC = "updated_desc"

    ALL: ClassVar[tuple[str, ...]] = (
        DEFAULT,
        POPULARITY,
        NAME_ASC,
        NAME_DESC,
        CREATED_DESC,
        CREATED_ASC,
        UPDATED_DESC,
    )
