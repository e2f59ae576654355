"""
相關度評分與排序

分數是加總制，只用於同一次搜尋內的排序：

| 條件 | 加分 |
| --- | --- |
| 原文（小寫）包含查詢 | +100 |
| 拼音匹配（依目前等級） | HIGH +95 / MEDIUM +85 / LOW +75 |
| 拼音以查詢開頭 | +20 |
| 原文以查詢開頭 | +15 |
| 查詢長度 | +2 × len(query) |
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Sequence, Tuple, TypeVar

from pinyinmatch.core.levels import StrictnessLevel

from .matcher import matches

T = TypeVar("T")

TEXT_CONTAINS_BONUS = 100
ROMANIZED_PREFIX_BONUS = 20
TEXT_PREFIX_BONUS = 15
QUERY_LENGTH_WEIGHT = 2

STRATEGY_BONUS: Dict[StrictnessLevel, int] = {
    StrictnessLevel.HIGH: 95,
    StrictnessLevel.MEDIUM: 85,
    StrictnessLevel.LOW: 75,
}


@dataclass(frozen=True)
class ScoreBreakdown:
    """各項加分明細"""

    text_contains: int = 0
    strategy: int = 0
    romanized_prefix: int = 0
    text_prefix: int = 0
    query_length: int = 0

    @property
    def total(self) -> int:
        return (
            self.text_contains
            + self.strategy
            + self.romanized_prefix
            + self.text_prefix
            + self.query_length
        )


@dataclass(frozen=True)
class ScoredCandidate:
    item_id: object
    score: int


def score_breakdown(
    item_text: str,
    item_romanized: str,
    query: str,
    level: StrictnessLevel,
) -> ScoreBreakdown:
    text_lower = item_text.lower()
    romanized_lower = item_romanized.lower()
    query_lower = query.lower()

    return ScoreBreakdown(
        text_contains=TEXT_CONTAINS_BONUS if query_lower in text_lower else 0,
        strategy=STRATEGY_BONUS[level] if matches(romanized_lower, query_lower, level) else 0,
        romanized_prefix=ROMANIZED_PREFIX_BONUS if romanized_lower.startswith(query_lower) else 0,
        text_prefix=TEXT_PREFIX_BONUS if text_lower.startswith(query_lower) else 0,
        query_length=QUERY_LENGTH_WEIGHT * len(query),
    )


def score(item_text: str, item_romanized: str, query: str, level: StrictnessLevel) -> int:
    """
    計算單一項目的相關度分數

    範例:
        >>> score("马克思主义", "makesizhuyi", "make", StrictnessLevel.MEDIUM)
        113
    """
    return score_breakdown(item_text, item_romanized, query, level).total


def rank(
    items: Iterable[T],
    query: str,
    level: StrictnessLevel,
    *,
    text_of: Callable[[T], str],
    romanized_of: Callable[[T], str],
) -> List[Tuple[T, int]]:
    """
    依分數由高到低排序；同分時保持輸入順序（sorted 為穩定排序）

    Returns:
        List[(item, score)]
    """
    scored = [
        (item, score(text_of(item), romanized_of(item), query, level))
        for item in items
    ]
    return sorted(scored, key=lambda pair: pair[1], reverse=True)


def rank_candidates(candidates: Sequence[ScoredCandidate]) -> List[ScoredCandidate]:
    """已算好分數的候選排序，同分保持原順序"""
    return sorted(candidates, key=lambda c: c.score, reverse=True)
