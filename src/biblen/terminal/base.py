"""Terminal Surface 抽象接口

定义终端表面的统一接口，event loop 只依赖这里的能力：
- 光标定位、清屏、前景色
- alternate screen / raw mode / 光标可见性
- 尺寸查询、带超时的事件轮询

session() 把三项终端资源作为一个作用域资源管理：
进入顺序 alternate screen → raw mode → hide cursor，
退出时逆序释放，任何退出路径（正常、异常、中断）都会执行。
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from ..telemetry import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class KeyEvent:
    """按键事件

    Attributes:
        char: 按下的字符（区分大小写）
    """

    char: str


@dataclass(frozen=True)
class ResizeEvent:
    """终端尺寸变化事件

    Attributes:
        columns: 新的列数
        rows: 新的行数
    """

    columns: int
    rows: int


@dataclass(frozen=True)
class OtherEvent:
    """其他事件（功能键、鼠标等），event loop 忽略

    Attributes:
        name: 后端给出的事件名
    """

    name: str = ""


Event = KeyEvent | ResizeEvent | OtherEvent


class TerminalSurface(ABC):
    """终端表面接口

    所有写操作只写入缓冲，flush() 后才保证到达终端。
    写失败直接抛出（OSError 等），不重试。
    """

    # === 绘制 ===

    @abstractmethod
    def clear(self) -> None:
        """清除整个可见屏幕"""
        ...

    @abstractmethod
    def move_to(self, column: int, row: int) -> None:
        """移动光标到 (column, row)，0 起始"""
        ...

    @abstractmethod
    def write(self, text: str) -> None:
        """在当前光标位置写入文本"""
        ...

    @abstractmethod
    def set_foreground(self, color: str) -> None:
        """设置前景色

        Args:
            color: 颜色名（如 "green"）
        """
        ...

    @abstractmethod
    def reset_color(self) -> None:
        """恢复默认样式"""
        ...

    @abstractmethod
    def flush(self) -> None:
        """把缓冲内容刷到终端"""
        ...

    # === 终端模式 ===

    @abstractmethod
    def enter_alternate_screen(self) -> None: ...

    @abstractmethod
    def leave_alternate_screen(self) -> None: ...

    @abstractmethod
    def enable_raw_mode(self) -> None: ...

    @abstractmethod
    def disable_raw_mode(self) -> None: ...

    @abstractmethod
    def hide_cursor(self) -> None: ...

    @abstractmethod
    def show_cursor(self) -> None: ...

    # === 查询 / 输入 ===

    @abstractmethod
    def size(self) -> tuple[int, int]:
        """查询当前终端尺寸

        Returns:
            (columns, rows)
        """
        ...

    @abstractmethod
    def poll_event(self, timeout: float) -> Event | None:
        """等待输入事件

        Args:
            timeout: 最长等待时间（秒）

        Returns:
            收到的事件；超时返回 None
        """
        ...

    @contextmanager
    def session(self) -> Iterator["TerminalSurface"]:
        """获取终端会话

        每一步获取成功后才登记对应的释放，
        因此后续步骤失败时已获取的资源仍会被释放，且每项只释放一次。
        """
        self.enter_alternate_screen()
        try:
            self.enable_raw_mode()
            try:
                self.hide_cursor()
                try:
                    self.flush()
                    logger.debug("[Session] terminal acquired")
                    yield self
                finally:
                    self.show_cursor()
                    self.flush()
            finally:
                self.disable_raw_mode()
        finally:
            self.leave_alternate_screen()
            self.flush()
            logger.debug("[Session] terminal restored")
