"""Terminal 模块

提供终端表面接口和实现：
- TerminalSurface: 终端表面接口（含 session 生命周期）
- BlessedSurface: 基于 blessed 的实现
- KeyEvent, ResizeEvent, OtherEvent: 输入事件
"""

from .base import Event, KeyEvent, OtherEvent, ResizeEvent, TerminalSurface
from .blessed_surface import BlessedSurface

__all__ = [
    # Interface
    "TerminalSurface",
    # Implementation
    "BlessedSurface",
    # Events
    "Event",
    "KeyEvent",
    "ResizeEvent",
    "OtherEvent",
]
