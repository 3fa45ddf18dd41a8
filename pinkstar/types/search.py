"""搜索打分协议类型."""

from __future__ import annotations

from typing import Protocol


class Searchable(Protocol):
    """可被搜索打分的实体.

    `tag_names` 与 `author_name` 为可选属性,缺失时按空处理.
    """

    @property
    def name(self) -> str:
        """协议属性: 名称."""
        ...

    @property
    def description(self) -> str | None:
        """协议属性: 描述."""
        ...


__all__ = ["Searchable"]
