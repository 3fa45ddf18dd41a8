"""项目类型常量.

定义 PinkStar 支持的顶层项目类型,避免魔法字符串.
"""

from __future__ import annotations

from typing import ClassVar


class ItemType:
    """项目类型常量.

    每个项目(Item)属于且仅属于一种类型,资源查询时以 (类型, slug) 定位父项目.
    """

    GAME = "game"
    WEB = "web"
    APP = "app"
    ART_MUSIC = "art-music"

    ALL: ClassVar[tuple[str, ...]] = (GAME, WEB, APP, ART_MUSIC)

    DISPLAY_NAMES: ClassVar[dict[str, str]] = {
        GAME: "游戏",
        WEB: "网页项目",
        APP: "应用",
        ART_MUSIC: "美术/音乐",
    }

    @classmethod
    def is_valid(cls, item_type: str | None) -> bool:
        """判断项目类型是否受支持."""
        return item_type in cls.ALL

    @classmethod
    def get_display_name(cls, item_type: str) -> str:
        """获取类型显示名称,未知类型原样返回."""
        return cls.DISPLAY_NAMES.get(item_type, item_type)
