"""
題庫搜尋索引

建立時為每題計算一次拼音字串，存在索引自己的題目副本上，之後每次搜尋只做匹配與評分。
對照表尚未就緒時加入的題目先記為待補，就緒後第一次搜尋時補上拼音。

搜尋流程:
1. 查詢轉小寫、去頭尾空白；空白或短於目前等級最小長度 -> []
2. 拼音轉寫器尚未就緒 -> []
3. 拼音匹配（依目前等級）或原文包含查詢者入選
4. 依分數由高到低排序，同分保持題庫順序
"""

from __future__ import annotations

import threading
from collections import Counter
from dataclasses import replace
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional

from pinyinmatch.core.levels import LevelConfig
from pinyinmatch.matching.matcher import matches
from pinyinmatch.matching.scorer import rank
from pinyinmatch.utils.logger import get_logger

from .question import Question, QuestionType

if TYPE_CHECKING:
    from pinyinmatch.romanization.romanizer import Romanizer


class QuestionIndex:
    """
    題庫索引

    建立方式:
        使用 SearchEngine.create_index() 建立實例
    """

    def __init__(
        self,
        questions: Iterable[Question],
        romanizer: "Romanizer",
        level_config: LevelConfig,
    ):
        self._logger = get_logger("search.index")
        self._romanizer = romanizer
        self._level_config = level_config
        self._questions: List[Question] = []
        self._pending: List[int] = []
        self._pending_lock = threading.Lock()
        self.add_questions(questions)

    def add_questions(self, questions: Iterable[Question]) -> int:
        """
        加入題目並補上缺少的拼音字串；回傳加入數量

        索引保存題目的副本，不會修改呼叫端傳入的 Question。
        """
        added = 0
        with self._pending_lock:
            for question in questions:
                romanized = question.romanized
                if not romanized and self._romanizer.is_ready:
                    romanized = self._romanizer.romanize(question.text)
                if not romanized:
                    self._pending.append(len(self._questions))
                self._questions.append(replace(question, romanized=romanized))
                added += 1
        self._logger.debug(
            f"加入 {added} 題，題庫共 {len(self._questions)} 題（待補拼音 {len(self._pending)} 題）"
        )
        return added

    def _backfill_pending(self) -> None:
        # 只在對照表就緒後呼叫
        with self._pending_lock:
            if not self._pending:
                return
            for position in self._pending:
                question = self._questions[position]
                self._questions[position] = replace(
                    question, romanized=self._romanizer.romanize(question.text)
                )
            self._logger.debug(f"補上 {len(self._pending)} 題的拼音字串")
            self._pending = []

    @property
    def questions(self) -> List[Question]:
        return list(self._questions)

    @property
    def total_count(self) -> int:
        return len(self._questions)

    def search(self, query: str, question_type: Optional[QuestionType] = None) -> List[Question]:
        """
        以拼音（或原文片段）搜尋題目

        Args:
            query: 使用者輸入
            question_type: 限定題型，None 表示不限

        Returns:
            List[Question]: 依相關度排序的題目
        """
        level = self._level_config.get_level()
        normalized = (query or "").strip().lower()
        if not normalized or len(normalized) < level.min_length:
            return []

        if not self._romanizer.is_ready:
            self._logger.debug("拼音對照表尚未就緒，搜尋回傳空結果")
            return []
        self._backfill_pending()

        candidates = []
        for question in list(self._questions):
            if question_type is not None and question.type is not question_type:
                continue
            romanized = question.romanized.lower()
            if matches(romanized, normalized, level) or normalized in question.text.lower():
                candidates.append(question)

        ranked = rank(
            candidates,
            normalized,
            level,
            text_of=lambda q: q.text,
            romanized_of=lambda q: q.romanized,
        )
        self._logger.debug(f"查詢 '{normalized}' ({level.name}) 命中 {len(ranked)} 題")
        return [question for question, _score in ranked]

    def stats(self) -> Dict[str, int]:
        """各題型題數，key 為中文題型名稱"""
        counts = Counter(question.type for question in self._questions)
        return {qtype.label: counts[qtype] for qtype in QuestionType if counts[qtype]}
