"""
全域配置模組

提供統一的配置類別，控制日誌、計時、初始化方式與匹配等級的預設值。

使用方式:
    from pinyinmatch import SearchEngine, EngineConfig

    # 簡單開啟 verbose 模式
    engine = SearchEngine(config=EngineConfig(verbose=True))

    # 進階: 使用標準 logging 控制
    import logging
    logging.getLogger("pinyinmatch").setLevel(logging.DEBUG)
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .core.levels import LEVEL_KEY, StrictnessLevel
from .utils.logger import setup_logger


def configure_logging(verbose: bool = False) -> None:
    """
    根據 verbose 設定配置 logging

    Args:
        verbose: 是否開啟詳細日誌
    """
    if verbose:
        setup_logger(level=logging.DEBUG)


@dataclass
class EngineConfig:
    """
    引擎配置類別

    屬性:
        verbose: 是否開啟詳細日誌
        on_timing: 計時回呼函數 (operation: str, elapsed: float) -> None
        default_level: store 中沒有（或是損毀的）設定時使用的匹配等級
        level_key: 匹配等級在 KeyValueStore 中的 key
        background_init: 是否在背景執行緒載入拼音對照表
        init_timeout: 建立索引前等待對照表載入的秒數（None 表示無限等待）
    """

    verbose: bool = False
    on_timing: Optional[Callable[[str, float], None]] = None
    default_level: StrictnessLevel = StrictnessLevel.MEDIUM
    level_key: str = LEVEL_KEY
    background_init: bool = False
    init_timeout: Optional[float] = None

    def __post_init__(self):
        """初始化後設定 logger"""
        configure_logging(self.verbose)


# 預設配置實例 (靜默模式)
DEFAULT_CONFIG = EngineConfig(verbose=False)
