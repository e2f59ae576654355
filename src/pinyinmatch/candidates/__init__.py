"""
拼音候選詞模組

- CandidateEngine: 拼音 -> 候選詞，依使用頻率排序
- CandidateWord: (詞, 頻率)
"""

from .engine import ASSOCIATIONS, COMMON_WORDS, CandidateEngine, CandidateWord

__all__ = [
    "CandidateEngine",
    "CandidateWord",
    "COMMON_WORDS",
    "ASSOCIATIONS",
]
