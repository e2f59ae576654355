"""
題庫資料模型

JSON 題目格式:
    {
        "type": "SINGLE_CHOICE",
        "text": "马克思主义理论区别于其他理论的根本特征是",
        "pinyinText": "",
        "options": ["A. ...", "B. ..."],
        "correct": ["A"],
        "explanation": null
    }
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class QuestionType(Enum):
    SINGLE_CHOICE = "SINGLE_CHOICE"
    MULTIPLE_CHOICE = "MULTIPLE_CHOICE"
    TRUE_FALSE = "TRUE_FALSE"

    @property
    def label(self) -> str:
        return QUESTION_TYPE_LABELS[self]


QUESTION_TYPE_LABELS = {
    QuestionType.SINGLE_CHOICE: "单选题",
    QuestionType.MULTIPLE_CHOICE: "多选题",
    QuestionType.TRUE_FALSE: "判断题",
}


@dataclass
class Question:
    type: QuestionType
    text: str
    options: List[str] = field(default_factory=list)
    correct: List[str] = field(default_factory=list)
    explanation: Optional[str] = None
    romanized: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Question":
        """由題庫 JSON 物件建立；pinyinText 欄位對應 romanized"""
        return cls(
            type=QuestionType(data["type"]),
            text=data["text"],
            options=list(data.get("options") or []),
            correct=list(data.get("correct") or []),
            explanation=data.get("explanation"),
            romanized=data.get("pinyinText") or "",
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "text": self.text,
            "pinyinText": self.romanized,
            "options": list(self.options),
            "correct": list(self.correct),
            "explanation": self.explanation,
        }

    @property
    def answer_description(self) -> str:
        """
        答案的顯示文字

        選擇題：以答案字母開頭的選項全文（找不到選項時用字母本身），以 ", " 串接
        判斷題：第一個答案為 "T" 則為 "正确"，否則 "错误"
        """
        if self.type is QuestionType.TRUE_FALSE:
            return "正确" if self.correct and self.correct[0] == "T" else "错误"

        descriptions = []
        for answer in self.correct:
            option = next((o for o in self.options if o.startswith(answer)), None)
            descriptions.append(option or answer)
        return ", ".join(descriptions)


def format_answers(question: Question) -> List[str]:
    """單選/判斷題回傳答案列表；多選題合併為單一排序字串（如 "ABD"）"""
    if question.type is QuestionType.MULTIPLE_CHOICE:
        return ["".join(sorted(question.correct))]
    return list(question.correct)
