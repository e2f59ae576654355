"""
日誌與計時工具

所有 logger 皆位於 `pinyinmatch` 命名空間下。
函式庫本身不設定 root logger，只在需要時（verbose）掛上 stream handler。

使用方式:
    from pinyinmatch.utils.logger import get_logger, TimingContext

    logger = get_logger("romanizer")          # -> pinyinmatch.romanizer
    with TimingContext("load_table", logger):
        ...
"""

from __future__ import annotations

import logging
import time
from functools import wraps
from typing import Callable, Optional

ROOT_LOGGER_NAME = "pinyinmatch"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_root_logger = logging.getLogger(ROOT_LOGGER_NAME)
_root_logger.addHandler(logging.NullHandler())


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    取得 pinyinmatch 命名空間下的 logger

    Args:
        name: 子 logger 名稱（如 "matcher"），None 則回傳套件 logger

    Returns:
        logging.Logger
    """
    if not name:
        return _root_logger
    if name.startswith(ROOT_LOGGER_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger(level: int = logging.INFO, fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """
    為套件 logger 掛上 stream handler（重複呼叫只會掛一次）

    Args:
        level: 日誌等級
        fmt: 輸出格式
    """
    logger = _root_logger
    logger.setLevel(level)

    for handler in logger.handlers:
        if getattr(handler, "_pinyinmatch_handler", False):
            handler.setLevel(level)
            return logger

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    handler._pinyinmatch_handler = True
    logger.addHandler(handler)
    return logger


def enable_debug_logging() -> logging.Logger:
    """開啟 DEBUG 日誌"""
    return setup_logger(level=logging.DEBUG)


def enable_timing_logging() -> logging.Logger:
    """開啟計時日誌（TimingContext 以 DEBUG 等級輸出）"""
    return setup_logger(level=logging.DEBUG)


class TimingContext:
    """
    計時上下文管理器

    離開區塊時記錄耗時，並可選擇性呼叫 callback(operation, elapsed)。
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        callback: Optional[Callable[[str, float], None]] = None,
    ):
        self.operation = operation
        self.logger = logger or get_logger("timing")
        self.level = level
        self.callback = callback
        self.elapsed = 0.0
        self._start = 0.0

    def __enter__(self) -> "TimingContext":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.elapsed = time.perf_counter() - self._start
        self.logger.log(self.level, f"[Timing] {self.operation}: {self.elapsed * 1000:.2f}ms")
        if self.callback is not None:
            try:
                self.callback(self.operation, self.elapsed)
            except Exception:
                self.logger.exception("on_timing 回呼執行失敗")
        return False


def log_timing(operation: Optional[str] = None, level: int = logging.DEBUG):
    """
    計時裝飾器

    範例:
        >>> @log_timing("build_index")
        ... def build(): ...
    """

    def decorator(func: Callable) -> Callable:
        name = operation or func.__qualname__

        @wraps(func)
        def wrapper(*args, **kwargs):
            with TimingContext(name, level=level):
                return func(*args, **kwargs)

        return wrapper

    return decorator
