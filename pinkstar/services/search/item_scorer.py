"""项目列表搜索打分."""

from __future__ import annotations

from pinkstar.services.search.search_scorer import normalize_query
from pinkstar.types.search import Searchable

NAME_CONTAINS_WEIGHT = 10
NAME_PREFIX_WEIGHT = 5
NAME_EXACT_WEIGHT = 10
DESCRIPTION_CONTAINS_WEIGHT = 3


def score_item(item: Searchable, query: str | None) -> int:
    """计算项目名称/描述与查询词的匹配得分,0 表示不匹配."""
    needle = normalize_query(query)
    if not needle:
        return 0

    name = (item.name or "").casefold()
    description = (item.description or "").casefold()

    score = 0
    if needle in name:
        score += NAME_CONTAINS_WEIGHT
    if name.startswith(needle):
        score += NAME_PREFIX_WEIGHT
    if name == needle:
        score += NAME_EXACT_WEIGHT
    if needle in description:
        score += DESCRIPTION_CONTAINS_WEIGHT
    return score
