"""
匹配嚴格度設定

- StrictnessLevel: LOW / MEDIUM / HIGH 三個預設等級
- LevelSpec: 每個等級的最小查詢長度、策略、說明與範例（固定表）
- LevelConfig: 持有「目前等級」，寫入時委派給 KeyValueStore 持久化

持久化格式：key = "matching_level"，value = 等級名稱字串（"LOW" / "MEDIUM" / "HIGH"）。
"""

from __future__ import annotations

import json
import threading
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Protocol, Union

from pinyinmatch.utils.logger import get_logger

LEVEL_KEY = "matching_level"

logger = get_logger("levels")


class MatchStrategy(Enum):
    """各嚴格度對應的匹配策略"""

    CONTAINS_ALL_CHARS = "contains_all_chars"
    SUBSTRING = "substring"
    SYLLABLE_BOUNDARY = "syllable_boundary"


class StrictnessLevel(Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"

    @classmethod
    def parse(cls, value: Any, default: Optional["StrictnessLevel"] = None) -> "StrictnessLevel":
        """
        將任意值解析為 StrictnessLevel

        無法解析時（損毀的設定值、None、型別錯誤）回傳 default（預設 MEDIUM），不拋例外。
        """
        fallback = default or cls.MEDIUM
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        logger.warning(f"無法解析匹配等級 {value!r}，改用 {fallback.name}")
        return fallback

    @property
    def spec(self) -> "LevelSpec":
        return LEVEL_SPECS[self]

    @property
    def min_length(self) -> int:
        return LEVEL_SPECS[self].min_length

    @property
    def strategy(self) -> MatchStrategy:
        return LEVEL_SPECS[self].strategy


@dataclass(frozen=True)
class LevelSpec:
    min_length: int
    strategy: MatchStrategy
    description: str
    example: str


LEVEL_SPECS: Dict[StrictnessLevel, LevelSpec] = {
    StrictnessLevel.LOW: LevelSpec(
        min_length=2,
        strategy=MatchStrategy.CONTAINS_ALL_CHARS,
        description="低严格度：2字符起，包含所有字符即可匹配（字符可分散）",
        example="例：'masi'、'mayi'等字符分散匹配",
    ),
    StrictnessLevel.MEDIUM: LevelSpec(
        min_length=4,
        strategy=MatchStrategy.SUBSTRING,
        description="中等严格度：4字符起，要求字符连续出现（子串匹配）",
        example="例：'make'、'kesi'、'zhuyi'等连续匹配",
    ),
    StrictnessLevel.HIGH: LevelSpec(
        min_length=6,
        strategy=MatchStrategy.SYLLABLE_BOUNDARY,
        description="高严格度：6字符起，严格音节边界匹配",
        example="例：严格按音节边界匹配",
    ),
}


def minimum_length(level: StrictnessLevel) -> int:
    return LEVEL_SPECS[level].min_length


def description(level: StrictnessLevel) -> str:
    return LEVEL_SPECS[level].description


def example(level: StrictnessLevel) -> str:
    return LEVEL_SPECS[level].example


# =============================================================================
# Key-Value 儲存
# =============================================================================

class KeyValueStore(Protocol):
    """持久化介面，由呼叫端實作（偏好設定檔、資料庫等）"""

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class InMemoryStore:
    """僅存在於記憶體的 store，測試或不需持久化時使用"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._data.get(key, default)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore:
    """
    以單一 JSON 物件檔案持久化的 store

    讀取失敗（檔案不存在、內容損毀）時視為空設定。
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._lock = threading.Lock()

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning(f"讀取設定檔失敗 {self.path}: {exc}")
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        with self._lock:
            value = self._read().get(key, default)
        return value if value is None or isinstance(value, str) else str(value)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            data = self._read()
            data[key] = value
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
            tmp_path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
            tmp_path.replace(self.path)


# =============================================================================
# LevelConfig
# =============================================================================

class LevelConfig:
    """
    目前匹配等級的持有者

    - 建構時從 store 讀取；讀不到或值損毀時退回 default（MEDIUM）
    - set_level() 先更新記憶體，再寫入 store；寫入失敗只記錄日誌
    - 單一寫入者、多讀取者：讀取到的永遠是完整的 StrictnessLevel
    """

    def __init__(
        self,
        store: Optional[KeyValueStore] = None,
        *,
        key: str = LEVEL_KEY,
        default: StrictnessLevel = StrictnessLevel.MEDIUM,
    ):
        self._store = store if store is not None else InMemoryStore()
        self._key = key
        self._write_lock = threading.Lock()

        stored = self._store.get(key, None)
        if stored is None:
            self._level = default
        else:
            self._level = StrictnessLevel.parse(stored, default=default)
        logger.debug(f"LevelConfig 初始等級: {self._level.name}")

    @property
    def level(self) -> StrictnessLevel:
        return self._level

    def get_level(self) -> StrictnessLevel:
        return self._level

    def set_level(self, level: Union[StrictnessLevel, str]) -> StrictnessLevel:
        new_level = StrictnessLevel.parse(level)
        with self._write_lock:
            self._level = new_level
            try:
                self._store.set(self._key, new_level.name)
            except Exception:
                logger.exception(f"持久化匹配等級失敗: {new_level.name}")
        logger.info(f"匹配等級設定為 {new_level.name}")
        return new_level

    def minimum_length(self, level: Optional[StrictnessLevel] = None) -> int:
        return minimum_length(level or self._level)

    def description(self, level: Optional[StrictnessLevel] = None) -> str:
        return description(level or self._level)

    def example(self, level: Optional[StrictnessLevel] = None) -> str:
        return example(level or self._level)
