"""
搜尋引擎抽象基類

定義引擎共用的日誌與計時設定，以及必須實作的介面。
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterable, Optional

from pinyinmatch.utils.logger import TimingContext, get_logger, setup_logger

if TYPE_CHECKING:
    from pinyinmatch.search.index import QuestionIndex


class SearchEngineBase(ABC):
    """
    搜尋引擎抽象基類 (Abstract Base Class)

    職責:
    - 持有共享的拼音轉寫器與匹配等級設定
    - 提供工廠方法建立題庫索引
    - 提供日誌與計時功能

    生命週期:
    - Engine 應在應用程式啟動時建立一次
    - 之後透過 create_index() 建立索引
    """

    _engine_name: str = "base"

    def _init_logger(
        self,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
    ) -> None:
        self._verbose = verbose
        self._timing_callback = on_timing

        if verbose:
            setup_logger(level=logging.DEBUG)

        self._logger = get_logger(f"engine.{self._engine_name}")

    def _log_timing(self, operation: str) -> TimingContext:
        return TimingContext(
            operation=operation,
            logger=self._logger,
            level=logging.DEBUG,
            callback=self._timing_callback,
        )

    @abstractmethod
    def create_index(self, questions: Iterable[Any], **kwargs) -> "QuestionIndex":
        pass

    @abstractmethod
    def is_initialized(self) -> bool:
        pass

    @abstractmethod
    def get_stats(self) -> Dict[str, Any]:
        pass
