"""
延遲導入 (Lazy Import)

pypinyin 的字典載入與 hanziconv 的對照表都有一定成本，
只在實際需要時才導入。缺少依賴時拋出附帶安裝提示的 ImportError。
"""

from __future__ import annotations

import importlib.util

CHINESE_INSTALL_HINT = (
    "缺少中文依賴。請執行:\n"
    "  pip install pypinyin hanziconv\n"
    "或重新安裝本套件:\n"
    "  pip install pinyinmatch"
)

_pypinyin = None
_hanziconv = None


def _get_pypinyin():
    """延遲載入 pypinyin 模組"""
    global _pypinyin

    if _pypinyin is not None:
        return _pypinyin

    try:
        import pypinyin
        from pypinyin import pinyin_dict  # noqa: F401
        from pypinyin.contrib import tone_convert  # noqa: F401
    except ImportError:
        raise ImportError(CHINESE_INSTALL_HINT)

    _pypinyin = pypinyin
    return _pypinyin


def _get_hanziconv():
    """延遲載入 hanziconv.HanziConv"""
    global _hanziconv

    if _hanziconv is not None:
        return _hanziconv

    try:
        from hanziconv import HanziConv
    except ImportError:
        raise ImportError(CHINESE_INSTALL_HINT)

    _hanziconv = HanziConv
    return _hanziconv


def is_chinese_available() -> bool:
    """檢查中文依賴 (pypinyin, hanziconv) 是否可用"""
    return all(
        importlib.util.find_spec(name) is not None
        for name in ("pypinyin", "hanziconv")
    )


def check_chinese_dependencies() -> None:
    """缺少中文依賴時拋出 ImportError"""
    if not is_chinese_available():
        raise ImportError(CHINESE_INSTALL_HINT)
