"""blessed 实现的 Terminal Surface."""

import signal
import threading
from contextlib import ExitStack

from blessed import Terminal

from ..telemetry import get_logger
from .base import Event, KeyEvent, OtherEvent, ResizeEvent, TerminalSurface

logger = get_logger(__name__)


class BlessedSurface(TerminalSurface):
    """Terminal Surface backed by a ``blessed.Terminal``.

    blessed has no resize event of its own, so a SIGWINCH handler (installed
    while raw mode is on) marks a pending resize that the next
    ``poll_event`` reports as a ``ResizeEvent``.
    """

    def __init__(self, term: Terminal | None = None):
        """Initialize BlessedSurface.

        Args:
            term: Optional terminal. If None, binds to the process tty.
        """
        self._term = term or Terminal()
        self._raw = ExitStack()
        self._resize_pending = False
        self._previous_winch = None
        self._winch_installed = False

    def _emit(self, sequence: str) -> None:
        self._term.stream.write(sequence)

    def clear(self) -> None:
        self._emit(self._term.home + self._term.clear)

    def move_to(self, column: int, row: int) -> None:
        self._emit(self._term.move_xy(column, row))

    def write(self, text: str) -> None:
        self._emit(text)

    def set_foreground(self, color: str) -> None:
        # blessed 把颜色名解析为格式化字符串，如 term.green
        self._emit(getattr(self._term, color))

    def reset_color(self) -> None:
        self._emit(self._term.normal)

    def flush(self) -> None:
        self._term.stream.flush()

    def enter_alternate_screen(self) -> None:
        self._emit(self._term.enter_fullscreen)

    def leave_alternate_screen(self) -> None:
        self._emit(self._term.exit_fullscreen)

    def enable_raw_mode(self) -> None:
        self._raw.enter_context(self._term.raw())
        self._install_resize_handler()

    def disable_raw_mode(self) -> None:
        self._restore_resize_handler()
        self._raw.close()

    def hide_cursor(self) -> None:
        self._emit(self._term.hide_cursor)

    def show_cursor(self) -> None:
        self._emit(self._term.normal_cursor)

    def size(self) -> tuple[int, int]:
        return self._term.width, self._term.height

    def poll_event(self, timeout: float) -> Event | None:
        if self._consume_resize():
            return ResizeEvent(*self.size())

        keystroke = self._term.inkey(timeout=timeout)
        if not keystroke:
            # SIGWINCH 可能在等待期间到达
            if self._consume_resize():
                return ResizeEvent(*self.size())
            return None

        if keystroke.is_sequence:
            return OtherEvent(name=keystroke.name or "")
        return KeyEvent(char=str(keystroke))

    def _consume_resize(self) -> bool:
        pending = self._resize_pending
        self._resize_pending = False
        return pending

    def _on_winch(self, signum, frame) -> None:
        self._resize_pending = True

    def _install_resize_handler(self) -> None:
        """Install the SIGWINCH handler (main thread, POSIX only)."""
        if not hasattr(signal, "SIGWINCH"):
            return
        if threading.current_thread() is not threading.main_thread():
            logger.debug("Not on main thread, resize events rely on size polling")
            return
        self._previous_winch = signal.signal(signal.SIGWINCH, self._on_winch)
        self._winch_installed = True

    def _restore_resize_handler(self) -> None:
        if not self._winch_installed:
            return
        # None 表示原 handler 不是由 Python 安装的，恢复为默认行为
        signal.signal(signal.SIGWINCH, self._previous_winch or signal.SIG_DFL)
        self._previous_winch = None
        self._winch_installed = False
