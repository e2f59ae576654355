"""
拼音轉寫器 (Romanizer)

romanize(text): 逐字查表，查到的漢字換成拼音，其他字元原樣輸出，無分隔符串接。
- ASCII 與標點不查表，直接輸出
- 對照表尚未載入或載入失敗時，整段原樣輸出（pass-through），永不拋例外

對照表的載入是一次性的初始化：所有呼叫端共用同一個 Future，
同時觸發 initialize() 的多個執行緒只會執行一次 loader。
"""

from __future__ import annotations

import threading
import time
import unicodedata
from concurrent.futures import Future
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Callable, Optional

from pinyinmatch.core.events import LoadEvent, LoadEventHandler
from pinyinmatch.utils.logger import get_logger

from .table import RomanizationTable

TableLoader = Callable[[], RomanizationTable]


def _is_passthrough(char: str) -> bool:
    return ord(char) < 128 or unicodedata.category(char).startswith("P")


class Romanizer:
    """
    拼音轉寫器

    生命週期:
    - 建立後呼叫 initialize()（可選背景執行緒）
    - wait_until_ready() 等待載入完成
    - is_ready 為 False 時 romanize() 原樣回傳輸入
    """

    def __init__(
        self,
        loader: Optional[TableLoader] = None,
        *,
        on_event: Optional[LoadEventHandler] = None,
    ):
        self._loader: TableLoader = loader or RomanizationTable.from_pypinyin
        self._on_event = on_event
        self._logger = get_logger("romanizer")
        self._init_lock = threading.Lock()
        self._future: Optional[Future] = None
        self._table: Optional[RomanizationTable] = None
        self._load_error: Optional[BaseException] = None
        self._warned_not_ready = False

    # ========== 初始化 ==========

    def initialize(self, *, background: bool = False, force: bool = False) -> Future:
        """
        觸發對照表載入

        Args:
            background: True 則在 daemon 執行緒中載入，立即回傳 Future；
                False 則阻塞到載入完成（包含等待其他執行緒正在進行的載入）
            force: 已載入（或失敗）後重新載入；預設不會自動重試

        Returns:
            Future: 載入完成時 resolve 為 is_ready 的布林值
        """
        with self._init_lock:
            existing = self._future
            reuse = existing is not None and (not force or not existing.done())
            if not reuse:
                future: Future = Future()
                future.set_running_or_notify_cancel()
                self._future = future

        if reuse:
            if not background:
                existing.result()
            return existing

        if background:
            thread = threading.Thread(
                target=self._load, args=(future,), name="pinyinmatch-romanizer-init", daemon=True
            )
            thread.start()
        else:
            self._load(future)
        return future

    def _load(self, future: Future) -> None:
        self._logger.debug("開始載入拼音對照表...")
        start = time.perf_counter()
        try:
            table = self._loader()
        except Exception as exc:
            self._load_error = exc
            self._logger.exception("拼音對照表載入失敗，改用原樣輸出模式")
            self._emit({
                "type": "degraded",
                "source": getattr(self._loader, "__qualname__", repr(self._loader)),
                "exception_type": type(exc).__name__,
                "exception_message": str(exc),
            })
            future.set_result(False)
            return
        except BaseException as exc:
            # KeyboardInterrupt / SystemExit: 先讓等待中的呼叫端解除阻塞再往外拋
            self._load_error = exc
            future.set_result(False)
            raise

        elapsed = time.perf_counter() - start
        self._table = table
        self._load_error = None
        self._warned_not_ready = False
        self._logger.info(f"拼音對照表載入完成: {len(table)} 字 ({elapsed * 1000:.1f}ms, source={table.source})")
        self._emit({
            "type": "loaded",
            "source": table.source,
            "entries": len(table),
            "elapsed": elapsed,
        })
        future.set_result(True)

    def _emit(self, event: LoadEvent) -> None:
        if self._on_event is None:
            return
        try:
            self._on_event(event)
        except Exception:
            self._logger.exception("on_event 回呼執行失敗")

    def wait_until_ready(self, timeout: Optional[float] = None) -> bool:
        """
        等待初始化完成

        尚未呼叫 initialize() 時直接回傳 False（不會代為觸發）。
        逾時亦回傳 False。
        """
        future = self._future
        if future is None:
            return False
        try:
            return bool(future.result(timeout=timeout))
        except FutureTimeoutError:
            return False

    # ========== 狀態 ==========

    @property
    def is_ready(self) -> bool:
        return self._table is not None

    @property
    def load_error(self) -> Optional[BaseException]:
        return self._load_error

    @property
    def table(self) -> Optional[RomanizationTable]:
        return self._table

    # ========== 轉寫 ==========

    def romanize(self, text: str) -> str:
        """
        將文字轉為無分隔的拼音字串

        範例:
            >>> romanizer.romanize("马克思主义")
            'makesizhuyi'
            >>> romanizer.romanize("C++语言")
            'C++yuyan'
        """
        if not text:
            return ""
        table = self._table
        if table is None:
            if not self._warned_not_ready:
                self._warned_not_ready = True
                self._logger.warning("拼音對照表尚未就緒，romanize() 將原樣回傳輸入")
            return text

        parts = []
        for char in text:
            if _is_passthrough(char):
                parts.append(char)
            else:
                parts.append(table.get(char, char))
        return "".join(parts)

    __call__ = romanize


# =============================================================================
# 共享實例
# =============================================================================

_default_romanizer: Optional[Romanizer] = None
_default_lock = threading.Lock()


def get_romanizer() -> Romanizer:
    """取得行程內共享的 Romanizer（以 pypinyin 對照表為來源，尚未初始化）"""
    global _default_romanizer
    if _default_romanizer is None:
        with _default_lock:
            if _default_romanizer is None:
                _default_romanizer = Romanizer()
    return _default_romanizer


def romanize(text: str) -> str:
    """以共享實例轉寫；第一次呼叫時同步載入對照表"""
    romanizer = get_romanizer()
    romanizer.initialize()
    return romanizer.romanize(text)
