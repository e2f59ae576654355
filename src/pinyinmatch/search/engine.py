"""
題庫搜尋引擎 (SearchEngine)

負責持有共享的拼音轉寫器與匹配等級設定，
並提供工廠方法建立題庫索引。
"""

from typing import Any, Dict, Iterable, Mapping, Optional, Union

from pinyinmatch.config import EngineConfig
from pinyinmatch.core.engine_interface import SearchEngineBase
from pinyinmatch.core.levels import KeyValueStore, LevelConfig, StrictnessLevel
from pinyinmatch.romanization.romanizer import Romanizer, get_romanizer

from .index import QuestionIndex
from .question import Question

QuestionInput = Union[Question, Mapping[str, Any]]


class SearchEngine(SearchEngineBase):
    _engine_name = "search"

    def __init__(
        self,
        store: Optional[KeyValueStore] = None,
        *,
        romanizer: Optional[Romanizer] = None,
        config: Optional[EngineConfig] = None,
    ):
        self._config = config or EngineConfig()
        self._init_logger(verbose=self._config.verbose, on_timing=self._config.on_timing)

        with self._log_timing("SearchEngine.__init__"):
            self._romanizer = romanizer or get_romanizer()
            self._romanizer.initialize(background=self._config.background_init)
            self._level_config = LevelConfig(
                store,
                key=self._config.level_key,
                default=self._config.default_level,
            )
            self._logger.info(
                f"SearchEngine initialized (level={self._level_config.get_level().name}, "
                f"romanizer_ready={self._romanizer.is_ready})"
            )

    @property
    def romanizer(self) -> Romanizer:
        return self._romanizer

    @property
    def level_config(self) -> LevelConfig:
        return self._level_config

    @property
    def config(self) -> EngineConfig:
        return self._config

    def is_initialized(self) -> bool:
        return self._romanizer.is_ready

    def wait_until_ready(self, timeout: Optional[float] = None) -> bool:
        return self._romanizer.wait_until_ready(timeout)

    def get_level(self) -> StrictnessLevel:
        return self._level_config.get_level()

    def set_level(self, level: Union[StrictnessLevel, str]) -> StrictnessLevel:
        return self._level_config.set_level(level)

    def get_stats(self) -> Dict[str, Any]:
        table = self._romanizer.table
        return {
            "romanizer_ready": self._romanizer.is_ready,
            "table_entries": len(table) if table is not None else 0,
            "table_source": table.source if table is not None else None,
            "level": self._level_config.get_level().name,
        }

    def create_index(self, questions: Iterable[QuestionInput], **kwargs) -> QuestionIndex:
        """
        建立題庫索引

        拼音對照表仍在背景載入時，先等待 config.init_timeout 秒；
        逾時則先建立索引，對照表就緒後的第一次搜尋會補上拼音字串。
        """
        with self._log_timing("SearchEngine.create_index"):
            if not self._romanizer.is_ready:
                self._romanizer.wait_until_ready(self._config.init_timeout)

            normalized = [
                q if isinstance(q, Question) else Question.from_dict(q)
                for q in questions
            ]
            self._logger.debug(f"Creating index with {len(normalized)} questions")
            return QuestionIndex(normalized, self._romanizer, self._level_config)
