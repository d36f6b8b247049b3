"""Pytest 配置"""

from collections.abc import Callable

import pytest

from biblen.telemetry import metrics
from biblen.terminal.base import Event, KeyEvent, TerminalSurface


class FakeSurface(TerminalSurface):
    """记录所有调用的 TerminalSurface

    events 中的元素依次由 poll_event 返回：
    - Event / None: 直接返回
    - callable: 调用后返回其结果（可在其中修改 size）
    脚本耗尽后返回 KeyEvent("q")，保证循环结束。
    """

    def __init__(self, columns: int = 100, rows: int = 30, events: list | None = None):
        self.columns = columns
        self.rows = rows
        self.events: list[Event | None | Callable[[], Event | None]] = list(events or [])
        self.calls: list[tuple] = []
        self.writes: list[tuple[int, int, str, str | None]] = []
        self.poll_timeouts: list[float] = []
        self._cursor = (0, 0)
        self._color: str | None = None

    def clear(self) -> None:
        self.calls.append(("clear",))

    def move_to(self, column: int, row: int) -> None:
        self.calls.append(("move_to", column, row))
        self._cursor = (column, row)

    def write(self, text: str) -> None:
        self.calls.append(("write", text))
        self.writes.append((self._cursor[0], self._cursor[1], text, self._color))

    def set_foreground(self, color: str) -> None:
        self.calls.append(("set_foreground", color))
        self._color = color

    def reset_color(self) -> None:
        self.calls.append(("reset_color",))
        self._color = None

    def flush(self) -> None:
        self.calls.append(("flush",))

    def enter_alternate_screen(self) -> None:
        self.calls.append(("enter_alternate_screen",))

    def leave_alternate_screen(self) -> None:
        self.calls.append(("leave_alternate_screen",))

    def enable_raw_mode(self) -> None:
        self.calls.append(("enable_raw_mode",))

    def disable_raw_mode(self) -> None:
        self.calls.append(("disable_raw_mode",))

    def hide_cursor(self) -> None:
        self.calls.append(("hide_cursor",))

    def show_cursor(self) -> None:
        self.calls.append(("show_cursor",))

    def size(self) -> tuple[int, int]:
        self.calls.append(("size",))
        return self.columns, self.rows

    def poll_event(self, timeout: float) -> Event | None:
        self.poll_timeouts.append(timeout)
        if not self.events:
            return KeyEvent("q")
        item = self.events.pop(0)
        if callable(item):
            return item()
        return item

    # === 断言辅助 ===

    def count(self, name: str) -> int:
        return sum(1 for call in self.calls if call[0] == name)

    def text_at(self, row: int) -> list[tuple[int, str, str | None]]:
        """返回写在某一行的 (column, text, color)"""
        return [(col, text, color) for col, r, text, color in self.writes if r == row]

    def written_text(self) -> list[str]:
        return [text for _, _, text, _ in self.writes]

    def reset_records(self) -> None:
        self.calls.clear()
        self.writes.clear()


class FakeStatusProvider:
    """固定返回值的 StatusProvider"""

    def __init__(self, status: str = "[info] You are up to date with upstream"):
        self.status = status
        self.calls = 0

    def check_status(self) -> str:
        self.calls += 1
        return self.status


@pytest.fixture
def surface():
    """100x30 的 FakeSurface"""
    return FakeSurface()


@pytest.fixture
def make_surface():
    """FakeSurface 工厂：make_surface(columns, rows, events)"""
    return FakeSurface


@pytest.fixture
def provider():
    return FakeStatusProvider()


@pytest.fixture(autouse=True)
def reset_metrics():
    """每次测试前重置指标"""
    metrics.reset()
    yield
    metrics.reset()
