"""
拼音匹配器

matches(corpus_romanized, query, level) -> bool

三種嚴格度各對應一種策略：
- LOW    (contains_all_chars): 查詢的每個字元都出現在語料中即可，不要求順序與連續
- MEDIUM (substring):          查詢是語料的連續子字串
- HIGH   (syllable_boundary):  先要求子字串匹配，再要求至少一個出現位置落在音節邊界上

長度低於該等級最小長度的查詢一律不匹配。

注意：音節邊界是以字母類別做的啟發式判斷（韻尾字母後接聲母字母），
並非查拼音音節表，會有誤判；此行為是刻意保留的。
"""

from __future__ import annotations

from typing import Callable, Dict, List

from pinyinmatch.core.levels import LEVEL_SPECS, MatchStrategy, StrictnessLevel

VOWEL_ENDINGS = frozenset("aoeiung")
CONSONANT_STARTS = frozenset("bpmfdtnlgkhjqxrzcsyw")


# =============================================================================
# 策略
# =============================================================================

def match_contains_all_chars(corpus: str, query: str) -> bool:
    """
    低嚴格度：查詢的字元集合是語料字元集合的子集

    "masi"、"mayi" 都能匹配 "makesizhuyi"
    """
    return set(query.lower()) <= set(corpus.lower())


def match_substring(corpus: str, query: str) -> bool:
    """中嚴格度：連續子字串"""
    return query.lower() in corpus.lower()


def match_syllable_boundary(corpus: str, query: str) -> bool:
    """高嚴格度：子字串匹配，且至少一個出現位置的起點或終點落在音節邊界"""
    corpus_lower = corpus.lower()
    query_lower = query.lower()

    if query_lower not in corpus_lower:
        return False

    for position in find_all_match_positions(corpus_lower, query_lower):
        if is_at_syllable_boundary(corpus_lower, position, len(query_lower)):
            return True
    return False


_STRATEGIES: Dict[MatchStrategy, Callable[[str, str], bool]] = {
    MatchStrategy.CONTAINS_ALL_CHARS: match_contains_all_chars,
    MatchStrategy.SUBSTRING: match_substring,
    MatchStrategy.SYLLABLE_BOUNDARY: match_syllable_boundary,
}


# =============================================================================
# 音節邊界
# =============================================================================

def find_all_match_positions(text: str, query: str) -> List[int]:
    """
    列出所有出現位置（包含重疊出現）

    找到位置 i 後從 i + 1 繼續搜尋，而不是 i + len(query)。
    """
    positions = []
    if not query:
        return positions

    start = 0
    while start <= len(text) - len(query):
        index = text.find(query, start)
        if index == -1:
            break
        positions.append(index)
        start = index + 1
    return positions


def is_likely_syllable_start(text: str, position: int) -> bool:
    """前一字元是韻尾字母且當前字元是聲母字母"""
    if position == 0:
        return True
    return text[position - 1] in VOWEL_ENDINGS and text[position] in CONSONANT_STARTS


def is_likely_syllable_end(text: str, position: int) -> bool:
    """當前字元是韻尾字母且下一字元是聲母字母"""
    if position == len(text) - 1:
        return True
    return text[position] in VOWEL_ENDINGS and text[position + 1] in CONSONANT_STARTS


def is_at_syllable_boundary(text: str, position: int, match_length: int) -> bool:
    """起點或終點任一落在邊界即成立"""
    is_start_boundary = (
        position == 0
        or not text[position - 1].isalpha()
        or is_likely_syllable_start(text, position)
    )

    end_position = position + match_length
    is_end_boundary = (
        end_position == len(text)
        or not text[end_position].isalpha()
        or is_likely_syllable_end(text, end_position - 1)
    )

    return is_start_boundary or is_end_boundary


# =============================================================================
# 入口
# =============================================================================

def matches(corpus_romanized: str, query: str, level: StrictnessLevel) -> bool:
    """
    判斷查詢是否匹配語料

    Args:
        corpus_romanized: 語料的拼音字串（如 "makesizhuyililun"）
        query: 使用者輸入（已是拉丁字母）
        level: 匹配嚴格度

    Returns:
        bool: 是否匹配；查詢長度不足最小長度時一律為 False
    """
    spec = LEVEL_SPECS[level]
    if len(query) < spec.min_length:
        return False
    return _STRATEGIES[spec.strategy](corpus_romanized, query)


class Matcher:
    """
    綁定 LevelConfig 的匹配器

    每次呼叫時讀取 LevelConfig 的目前等級，等級變更立即生效。
    """

    def __init__(self, level_config):
        self.level_config = level_config

    @property
    def level(self) -> StrictnessLevel:
        return self.level_config.get_level()

    def minimum_length(self) -> int:
        return LEVEL_SPECS[self.level].min_length

    def match(self, corpus_romanized: str, query: str) -> bool:
        return matches(corpus_romanized, query, self.level)
