"""资源文件发布通道 Service."""

from __future__ import annotations

from pinkstar.constants import FILE_CHANNELS, FileChannel, TagType
from pinkstar.types.tags import TagSummary


def list_file_channels() -> list[FileChannel]:
    """按固定顺序返回全部发布通道."""
    return list(FILE_CHANNELS.values())


def map_file_channel_to_tag(channel_id: str | None) -> TagSummary | None:
    """将发布通道映射为 channel 类型的标签,未知通道返回 None."""
    channel = FILE_CHANNELS.get((channel_id or "").strip().lower())
    if channel is None:
        return None
    return TagSummary(
        id=channel.tag_id,
        name=channel.name,
        tag_type=TagType.CHANNEL,
        color=channel.color,
        text_color=channel.text_color,
        border_color=channel.border_color,
    )
