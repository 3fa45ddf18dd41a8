"""名称排序的 Unicode 排序规则.

使用 pyuca(Unicode Collation Algorithm, DUCET)生成排序键,不依赖进程 locale,
带重音字母与其基础字母相邻排序(如 "Éclair" 位于 "Apple" 与 "Zebra" 之间).
"""

from __future__ import annotations

from functools import lru_cache

from pyuca import Collator


@lru_cache(maxsize=1)
def get_collator() -> Collator:
    """返回进程内共享的 Collator(首次调用时加载 DUCET 表)."""
    return Collator()


def name_sort_key(name: str | None) -> tuple[tuple[int, ...], str]:
    """名称排序键: 先按 casefold 后的 UCA 排序键,再按原始名称稳定区分."""
    text = name or ""
    return (get_collator().sort_key(text.casefold()), text)


__all__ = ["get_collator", "name_sort_key"]
