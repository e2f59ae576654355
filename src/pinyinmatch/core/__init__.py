"""
核心抽象層

定義匹配等級、持久化介面、事件模型與引擎基類。
"""

from .engine_interface import SearchEngineBase
from .events import LoadEvent, LoadEventHandler
from .levels import (
    LEVEL_KEY,
    LEVEL_SPECS,
    InMemoryStore,
    JsonFileStore,
    KeyValueStore,
    LevelConfig,
    LevelSpec,
    MatchStrategy,
    StrictnessLevel,
)

__all__ = [
    "SearchEngineBase",
    "LoadEvent",
    "LoadEventHandler",
    "LEVEL_KEY",
    "LEVEL_SPECS",
    "InMemoryStore",
    "JsonFileStore",
    "KeyValueStore",
    "LevelConfig",
    "LevelSpec",
    "MatchStrategy",
    "StrictnessLevel",
]
