"""
pinyinmatch - 拼音模糊匹配與題庫搜尋 (Pinyin Fuzzy Matching)

核心概念：
- 題庫文字在匯入時一次轉寫為無聲調拼音字串並快取
- 使用者以拼音片段查詢，依三種嚴格度 (LOW / MEDIUM / HIGH) 判斷是否匹配
- 命中的題目以加總制分數排序（同分保持原順序）
- 另提供不受嚴格度影響、容許編輯距離的文字相似度判斷

官方入口（穩定 API）：
- `pinyinmatch.SearchEngine`
- `pinyinmatch.matches` / `pinyinmatch.score` / `pinyinmatch.is_similar`
- `pinyinmatch.Romanizer`
"""

# =============================================================================
# Engine 層（官方入口）
# =============================================================================
from pinyinmatch.config import DEFAULT_CONFIG, EngineConfig
from pinyinmatch.search import Question, QuestionIndex, QuestionType, SearchEngine, format_answers

# =============================================================================
# 匹配核心
# =============================================================================
from pinyinmatch.core.levels import (
    InMemoryStore,
    JsonFileStore,
    KeyValueStore,
    LevelConfig,
    MatchStrategy,
    StrictnessLevel,
)
from pinyinmatch.matching import ScoreBreakdown, is_similar, matches, rank, score
from pinyinmatch.romanization import RomanizationTable, Romanizer, get_romanizer, romanize

# =============================================================================
# 候選詞
# =============================================================================
from pinyinmatch.candidates import CandidateEngine, CandidateWord

# =============================================================================
# 日誌工具
# =============================================================================
from pinyinmatch.utils.logger import enable_debug_logging, enable_timing_logging, get_logger

# =============================================================================
# 依賴檢查工具
# =============================================================================
from pinyinmatch.utils.lazy_imports import check_chinese_dependencies, is_chinese_available

__all__ = [
    # Engine
    "SearchEngine",
    "EngineConfig",
    "DEFAULT_CONFIG",
    "QuestionIndex",
    "Question",
    "QuestionType",
    "format_answers",
    # Matching core
    "StrictnessLevel",
    "MatchStrategy",
    "LevelConfig",
    "KeyValueStore",
    "InMemoryStore",
    "JsonFileStore",
    "matches",
    "score",
    "rank",
    "ScoreBreakdown",
    "is_similar",
    # Romanization
    "Romanizer",
    "RomanizationTable",
    "get_romanizer",
    "romanize",
    # Candidates
    "CandidateEngine",
    "CandidateWord",
    # Logging
    "get_logger",
    "enable_debug_logging",
    "enable_timing_logging",
    # Dependency checks
    "is_chinese_available",
    "check_chinese_dependencies",
]

__version__ = "0.1.0"
