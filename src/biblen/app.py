"""SplashApp - 渲染/输入主循环

单线程同步循环：
1. 带超时等待输入事件
2. q 退出；c 同步调用 StatusProvider 并打印结果；resize 重绘
3. 超时无事件时主动查询尺寸，变化则视为隐式 resize 并重绘

终端模式的获取/释放由调用方通过 TerminalSurface.session() 管理。
"""

from . import config
from .render.screen import draw, draw_status
from .status.provider import StatusProvider
from .telemetry import get_logger, metrics
from .terminal.base import Event, KeyEvent, ResizeEvent, TerminalSurface

logger = get_logger(__name__)


class SplashApp:
    """Splash 屏主循环"""

    def __init__(
        self,
        surface: TerminalSurface,
        provider: StatusProvider,
        poll_timeout: float | None = None,
    ):
        """
        Args:
            surface: 终端表面（应已进入 session）
            provider: 状态提供者
            poll_timeout: 事件等待超时（秒），None 使用 config.POLL_TIMEOUT
        """
        self._surface = surface
        self._provider = provider
        self._poll_timeout = poll_timeout if poll_timeout is not None else config.POLL_TIMEOUT
        self._last_size: tuple[int, int] = (0, 0)
        self._running = False

    @property
    def last_size(self) -> tuple[int, int]:
        """最近一次绘制使用的尺寸"""
        return self._last_size

    def run(self) -> None:
        """绘制初始画面并运行循环，直到按下退出键"""
        self._redraw(self._surface.size())
        self._running = True
        logger.info(f"[App] started at {self._last_size[0]}x{self._last_size[1]}")

        while self._running:
            event = self._surface.poll_event(self._poll_timeout)
            if event is None:
                self._check_implicit_resize()
            else:
                self._dispatch(event)

        logger.info("[App] quit requested")

    def stop(self) -> None:
        """在当前迭代结束后退出循环"""
        self._running = False

    def _dispatch(self, event: Event) -> None:
        if isinstance(event, KeyEvent):
            if event.char == config.QUIT_KEY:
                self.stop()
            elif event.char == config.CHECK_KEY:
                self._show_status()
        elif isinstance(event, ResizeEvent):
            metrics.inc("resize.event")
            self._redraw((event.columns, event.rows))
        # 其他事件忽略

    def _check_implicit_resize(self) -> None:
        # 部分终端后端不会可靠地投递 resize 事件
        size = self._surface.size()
        if size != self._last_size:
            metrics.inc("resize.polled")
            logger.debug(f"[App] size changed without event: {self._last_size} -> {size}")
            self._redraw(size)

    def _redraw(self, size: tuple[int, int]) -> None:
        self._last_size = size
        draw(self._surface, *size)

    def _show_status(self) -> None:
        columns, _ = self._surface.size()
        status = self._provider.check_status()
        draw_status(self._surface, columns, status)
