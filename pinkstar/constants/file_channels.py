"""资源文件发布通道常量.

文件通道是单选标签,固定为 release/beta/alpha 三种.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class FileChannel:
    """发布通道定义."""

    id: str
    name: str
    description: str
    color: str
    text_color: str
    border_color: str

    @property
    def tag_id(self) -> str:
        """通道映射为标签时使用的标签 ID."""
        return f"channel-{self.id}"


FILE_CHANNELS: MappingProxyType[str, FileChannel] = MappingProxyType(
    {
        "release": FileChannel(
            id="release",
            name="Release",
            description="Stable and tested version, recommended for most users.",
            color="hsl(145 63% 42%)",
            text_color="hsl(145 100% 98%)",
            border_color="hsl(145 63% 35%)",
        ),
        "beta": FileChannel(
            id="beta",
            name="Beta",
            description="Potentially unstable, for testing new features.",
            color="hsl(39 92% 55%)",
            text_color="hsl(39 100% 10%)",
            border_color="hsl(39 92% 48%)",
        ),
        "alpha": FileChannel(
            id="alpha",
            name="Alpha",
            description="Highly unstable, early development version.",
            color="hsl(0 72% 51%)",
            text_color="hsl(0 100% 98%)",
            border_color="hsl(0 72% 45%)",
        ),
    },
)

DEFAULT_FILE_CHANNEL = "release"
