"""
文字模糊相似度（不分語言，不受嚴格度設定影響）

is_similar(query, corpus) 依序嘗試：
1. 去除標點/空白後的子字串包含（單字查詢也成立）
2. 滑動視窗編輯距離：視窗長度 len(query) ± WINDOW_TOLERANCE，
   任一視窗與查詢的 Levenshtein 距離 <= max(1, len(query) // 4) 即成立
   （僅限長度 >= MIN_EDIT_QUERY_LENGTH 的查詢，"马克思" -> "马克恩" 可匹配）
3. 片段覆蓋率：查詢的 bigram 有 >= BIGRAM_COVERAGE 比例出現在語料中
   （處理「人工智能的核心驱动力」這類由語料中不相鄰片段組成的查詢）

繁體字會先轉為簡體再比較。
"""

from __future__ import annotations

import re
from typing import Set

import Levenshtein

from pinyinmatch.utils.lazy_imports import _get_hanziconv

WINDOW_TOLERANCE = 1
MIN_EDIT_QUERY_LENGTH = 3
MIN_BIGRAM_QUERY_LENGTH = 4
BIGRAM_COVERAGE = 0.75

_STRIP_PATTERN = re.compile(r"[\W_]+")


def normalize(text: str) -> str:
    """去除標點、符號與空白，轉小寫與簡體"""
    if not text:
        return ""
    stripped = _STRIP_PATTERN.sub("", text).lower()
    if not stripped:
        return ""
    return _get_hanziconv().toSimplified(stripped)


def edit_threshold(query_length: int) -> int:
    return max(1, query_length // 4)


def min_window_distance(query: str, corpus: str) -> int:
    """
    查詢與語料中任一視窗的最小編輯距離

    語料比最短視窗還短時，直接以整段語料比較。
    """
    q_len = len(query)
    best = Levenshtein.distance(query, corpus)
    for window in range(max(1, q_len - WINDOW_TOLERANCE), q_len + WINDOW_TOLERANCE + 1):
        if window > len(corpus):
            break
        for start in range(len(corpus) - window + 1):
            distance = Levenshtein.distance(query, corpus[start:start + window])
            if distance < best:
                best = distance
                if best == 0:
                    return 0
    return best


def bigrams(text: str) -> Set[str]:
    return {text[i:i + 2] for i in range(len(text) - 1)}


def bigram_coverage(query: str, corpus: str) -> float:
    """查詢 bigram 中出現在語料的比例"""
    query_grams = bigrams(query)
    if not query_grams:
        return 0.0
    corpus_grams = bigrams(corpus)
    return len(query_grams & corpus_grams) / len(query_grams)


def is_similar(query: str, corpus: str) -> bool:
    """
    判斷查詢是否近似出現在語料中

    範例:
        >>> is_similar("马", "马克思主义理论")
        True
        >>> is_similar("马克恩", "马克思主义理论")
        True
        >>> is_similar("毛泽东思想", "马克思主义理论区别于其他理论的根本特征")
        False
    """
    q = normalize(query)
    c = normalize(corpus)
    if not q or not c:
        return False

    if q in c:
        return True

    if len(q) >= MIN_EDIT_QUERY_LENGTH:
        if min_window_distance(q, c) <= edit_threshold(len(q)):
            return True

    if len(q) >= MIN_BIGRAM_QUERY_LENGTH:
        if bigram_coverage(q, c) >= BIGRAM_COVERAGE:
            return True

    return False
