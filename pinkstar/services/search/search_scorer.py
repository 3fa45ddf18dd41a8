"""搜索相关性打分.

启发式打分,面向小规模目录: 各信号相互独立、顺序无关,按固定权重累加.
得分为 0 表示不匹配,这类实体必须从搜索结果中剔除,而不是排到末尾.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TypeVar

from pinkstar.types.search import Searchable

EXACT_NAME_WEIGHT = 100
NAME_CONTAINS_WEIGHT = 50
NAME_TOKEN_WEIGHT = 10
DESCRIPTION_CONTAINS_WEIGHT = 5
TAG_EXACT_WEIGHT = 20
AUTHOR_CONTAINS_WEIGHT = 2

T = TypeVar("T", bound=Searchable)


def normalize_query(query: str | None) -> str:
    """去除首尾空白并统一大小写,空查询返回空串."""
    return (query or "").strip().casefold()


def _folded(value: object) -> str:
    if not isinstance(value, str):
        return ""
    return value.casefold()


def _tag_names(entity: Searchable) -> Iterable[str]:
    tag_names = getattr(entity, "tag_names", None)
    if tag_names is None:
        return ()
    return [name for name in tag_names if isinstance(name, str)]


def score_entity(entity: Searchable, query: str | None) -> float:
    """计算查询词对实体的相关性得分.

    Args:
        entity: 至少具备 name / description 的实体,可选 tag_names / author_name.
        query: 原始查询词,首尾空白会被去除.

    Returns:
        非负得分;查询为空或不匹配时为 0.

    """
    needle = normalize_query(query)
    if not needle:
        return 0.0

    name = _folded(getattr(entity, "name", None))
    description = _folded(getattr(entity, "description", None))
    author_name = _folded(getattr(entity, "author_name", None))

    score = 0
    if name:
        if name == needle:
            score += EXACT_NAME_WEIGHT
        if needle in name:
            score += NAME_CONTAINS_WEIGHT
        score += NAME_TOKEN_WEIGHT * sum(1 for token in needle.split() if token in name)
    if description and needle in description:
        score += DESCRIPTION_CONTAINS_WEIGHT
    score += TAG_EXACT_WEIGHT * sum(1 for tag_name in _tag_names(entity) if tag_name.strip().casefold() == needle)
    if author_name and needle in author_name:
        score += AUTHOR_CONTAINS_WEIGHT
    return float(score)


def rank_entities(entities: Sequence[T], query: str | None) -> list[T]:
    """按得分降序排列实体,剔除得分为 0 的实体.

    同分实体保持输入顺序.查询为空时返回空列表,调用方需自行跳过搜索步骤.
    """
    scored = [(score_entity(entity, query), entity) for entity in entities]
    matched = [(score, entity) for score, entity in scored if score > 0]
    matched.sort(key=lambda pair: pair[0], reverse=True)
    return [entity for _, entity in matched]
