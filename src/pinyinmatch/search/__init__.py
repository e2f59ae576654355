"""
題庫搜尋模組

以拼音片段搜尋題庫，依相關度排序。

主要類別:
- SearchEngine: 持有轉寫器與匹配等級，建立索引
- QuestionIndex: 題庫索引與搜尋
- Question / QuestionType: 題目資料模型
"""

from .engine import SearchEngine
from .index import QuestionIndex
from .question import QUESTION_TYPE_LABELS, Question, QuestionType, format_answers

__all__ = [
    "SearchEngine",
    "QuestionIndex",
    "Question",
    "QuestionType",
    "QUESTION_TYPE_LABELS",
    "format_answers",
]
