"""
匹配核心

- matcher: 三種嚴格度的拼音匹配
- scorer: 相關度評分與穩定排序
- similarity: 編輯距離容錯的文字相似度
"""

from .matcher import (
    CONSONANT_STARTS,
    VOWEL_ENDINGS,
    Matcher,
    find_all_match_positions,
    is_at_syllable_boundary,
    match_contains_all_chars,
    match_substring,
    match_syllable_boundary,
    matches,
)
from .scorer import (
    STRATEGY_BONUS,
    ScoreBreakdown,
    ScoredCandidate,
    rank,
    rank_candidates,
    score,
    score_breakdown,
)
from .similarity import is_similar

__all__ = [
    "Matcher",
    "matches",
    "match_contains_all_chars",
    "match_substring",
    "match_syllable_boundary",
    "find_all_match_positions",
    "is_at_syllable_boundary",
    "VOWEL_ENDINGS",
    "CONSONANT_STARTS",
    "ScoreBreakdown",
    "ScoredCandidate",
    "STRATEGY_BONUS",
    "score",
    "score_breakdown",
    "rank",
    "rank_candidates",
    "is_similar",
]
