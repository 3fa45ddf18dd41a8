"""Query 参数解析 helper.

说明:
- 这些函数只做"类型转换 + 去空白 + 默认值"的稳定 canonicalization.
- 资源列表对非法参数采用归一化策略,因此这里的解析失败统一回退默认值而不抛错.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

_TRUTHY = {"true", "1", "yes", "on"}
_FALSY = {"false", "0", "no", "off"}


def parse_int(value: Any, *, default: int) -> int:
    """Parse int with default (strip strings; bool/非法值 -> default)."""
    parsed = parse_optional_int(value)
    return default if parsed is None else parsed


def parse_optional_int(value: Any) -> int | None:
    """Parse optional int (strip strings; blank/非法值 -> None; reject bool)."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return None
        try:
            return int(stripped, 10)
        except ValueError:
            return None
    return None


def parse_text(value: Any) -> str:
    """Parse text as stripped string; None -> ''."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    return str(value).strip()


def parse_bool(value: Any, *, default: bool = False) -> bool:
    """Parse bool, 兼容常见 truthy/falsy 字符串."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value)
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in _TRUTHY:
            return True
        if normalized in _FALSY:
            return False
    return default


def parse_tags(value: Any) -> list[str]:
    """Parse tags as list[str] (支持逗号分隔, 去空白, 去空项, 保序去重)."""
    if value is None:
        return []
    raw_items: Sequence[Any] = [value] if isinstance(value, str) else value
    if not isinstance(raw_items, Sequence):
        return []

    result: list[str] = []
    for item in raw_items:
        if not isinstance(item, str):
            continue
        for segment in item.split(","):
            cleaned = segment.strip()
            if cleaned and cleaned not in result:
                result.append(cleaned)
    return result


def parse_int_list(value: Any) -> list[int]:
    """Parse int list (支持逗号分隔, 非法项忽略)."""
    result: list[int] = []
    for item in parse_tags(value):
        parsed = parse_optional_int(item)
        if parsed is not None and parsed not in result:
            result.append(parsed)
    return result


__all__ = ["parse_bool", "parse_int", "parse_int_list", "parse_optional_int", "parse_tags", "parse_text"]
