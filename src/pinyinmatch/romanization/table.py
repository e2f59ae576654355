"""
拼音對照表 (RomanizationTable)

單一漢字 -> 無聲調 ASCII 拼音（如 "中" -> "zhong"）。
建立後唯讀，可在多執行緒下無鎖讀取。

資料來源:
- from_pypinyin(): pypinyin 內建的 pinyin_dict（每個碼位取第一個讀音）
- from_lines() / from_file(): pinyin-data 格式的文字檔

  U+3400: pàn # 㐀
  U+4E2D: zhōng,zhòng # 中
"""

from __future__ import annotations

import re
import unicodedata
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Union

from pinyinmatch.utils.lazy_imports import _get_pypinyin

_LINE_PATTERN = re.compile(r"^U\+([0-9A-Fa-f]{4,6})\s*:\s*([^#]*?)\s*(?:#\s*(.*))?$")
_ASCII_LETTERS = re.compile(r"[^a-z]")


def flatten_syllable(reading: str) -> str:
    """
    將帶聲調的拼音讀音壓平為小寫 ASCII

    "zhōng" -> "zhong", "lǜ" -> "lv", "ḿ" -> "m"
    """
    pypinyin = _get_pypinyin()
    normal = pypinyin.contrib.tone_convert.to_normal(reading.strip())
    normal = normal.replace("ü", "v").replace("ê", "e")
    # 殘留的組合符號（如 m̄ 的 U+0304）
    normal = unicodedata.normalize("NFKD", normal)
    return _ASCII_LETTERS.sub("", normal.lower())


class RomanizationTable:
    """
    漢字 -> 拼音 的唯讀對照表

    查不到的字元回傳 None，由 Romanizer 決定是否原樣輸出。
    """

    def __init__(self, mapping: Mapping[str, str], source: str = "memory"):
        self._mapping = MappingProxyType(dict(mapping))
        self.source = source

    def __len__(self) -> int:
        return len(self._mapping)

    def __contains__(self, char: object) -> bool:
        return char in self._mapping

    def get(self, char: str, default: Optional[str] = None) -> Optional[str]:
        return self._mapping.get(char, default)

    @property
    def mapping(self) -> Mapping[str, str]:
        return self._mapping

    # ========== 工廠方法 ==========

    @classmethod
    def from_pypinyin(cls) -> "RomanizationTable":
        """以 pypinyin 內建字典建表"""
        pypinyin = _get_pypinyin()
        mapping = {}
        for code_point, readings in pypinyin.pinyin_dict.pinyin_dict.items():
            first = readings.split(",")[0]
            syllable = flatten_syllable(first)
            if syllable:
                mapping[chr(code_point)] = syllable
        return cls(mapping, source="pypinyin")

    @classmethod
    def from_lines(cls, lines: Iterable[str], source: str = "lines") -> "RomanizationTable":
        """
        解析 pinyin-data 格式

        不符合格式的行（註解、空行）直接略過；多讀音取第一個。
        """
        mapping = {}
        for raw in lines:
            line = raw.strip()
            if not line.startswith("U+"):
                continue
            match = _LINE_PATTERN.match(line)
            if not match:
                continue
            code_hex, readings, _comment = match.groups()
            first = readings.split(",")[0]
            if not first:
                continue
            syllable = flatten_syllable(first)
            if syllable:
                mapping[chr(int(code_hex, 16))] = syllable
        return cls(mapping, source=source)

    @classmethod
    def from_file(cls, path: Union[str, Path], encoding: str = "utf-8") -> "RomanizationTable":
        path = Path(path)
        with path.open(encoding=encoding) as f:
            return cls.from_lines(f, source=str(path))
