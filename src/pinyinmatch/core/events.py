"""
事件模型（Event Model）

拼音對照表的載入結果透過事件回呼通知呼叫端，而不是直接輸出到 stdout。

設計原則：
- 允許降級（pass-through 模式），但不允許「默默」降級：失敗一定會發出 degraded 事件。
"""

from __future__ import annotations

from typing import Callable, Literal, TypedDict


class LoadEvent(TypedDict, total=False):
    type: Literal["loaded", "degraded"]
    source: str

    # loaded
    entries: int
    elapsed: float

    # degraded
    exception_type: str
    exception_message: str


LoadEventHandler = Callable[[LoadEvent], None]
