"""
拼音轉寫模組

- RomanizationTable: 漢字 -> 無聲調拼音 的唯讀對照表
- Romanizer: 以對照表逐字轉寫，未就緒時原樣輸出
"""

from .romanizer import Romanizer, TableLoader, get_romanizer, romanize
from .table import RomanizationTable, flatten_syllable

__all__ = [
    "Romanizer",
    "RomanizationTable",
    "TableLoader",
    "flatten_syllable",
    "get_romanizer",
    "romanize",
]
