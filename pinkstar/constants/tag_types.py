"""标签语义类型常量."""

from typing import ClassVar


class TagType:
    """标签语义类型.

    标签类型只影响展示与分组语义,不参与筛选逻辑.
    """

    VERSION = "version"
    LOADER = "loader"
    GENRE = "genre"
    PLATFORM = "platform"
    MISC = "misc"
    CHANNEL = "channel"
    FRAMEWORK = "framework"
    LANGUAGE = "language"
    TOOLING = "tooling"
    APP_CATEGORY = "app-category"
    ART_STYLE = "art-style"
    MUSIC_GENRE = "music-genre"
    MEDIUM = "medium"
    SECTION = "section"

    ALL: ClassVar[tuple[str, ...]] = (
        VERSION,
        LOADER,
        GENRE,
        PLATFORM,
        MISC,
        CHANNEL,
        FRAMEWORK,
        LANGUAGE,
        TOOLING,
        APP_CATEGORY,
        ART_STYLE,
        MUSIC_GENRE,
        MEDIUM,
        SECTION,
    )

    @classmethod
    def is_valid(cls, tag_type: str) -> bool:
        """判断标签类型是否合法."""
        return tag_type in cls.ALL
