"""Layout - 纯布局计算

不涉及任何终端 IO，draw 和 event loop 共用这里的定位规则：
- RenderMode 由尺寸推导，不保存状态
- 水平居中按行独立计算，内容比终端宽时 margin 为 0
- 宽度按终端 cell 计（rich.cells.cell_len）
"""

from enum import Enum

from rich.cells import cell_len

from .. import config


class RenderMode(Enum):
    """绘制模式"""

    NORMAL = "normal"
    TOO_SMALL = "too_small"


def render_mode(columns: int, rows: int) -> RenderMode:
    """根据终端尺寸推导绘制模式"""
    if columns < config.MIN_WIDTH or rows < config.MIN_HEIGHT:
        return RenderMode.TOO_SMALL
    return RenderMode.NORMAL


def center_column(columns: int, text: str) -> int:
    """单行水平居中的起始列

    Args:
        columns: 终端列数
        text: 要居中的一行文本

    Returns:
        max(0, columns - width) // 2
    """
    return max(0, columns - cell_len(text)) // 2


def art_lines() -> list[str]:
    """ASCII art 的行（去掉首尾空行）"""
    return config.ASCII_ART.strip("\n").splitlines()


def footer_row() -> int:
    """footer 所在行：art 下方空一行"""
    return config.ART_TOP_ROW + len(art_lines()) + 1


def status_row() -> int:
    """status 所在行：footer 的下一行"""
    return config.ART_TOP_ROW + len(art_lines()) + 2


def too_small_lines(columns: int, rows: int) -> list[str]:
    """窗口过小时显示的三行提示"""
    return [
        "Window too small.",
        f"Minimum: {config.MIN_WIDTH}x{config.MIN_HEIGHT}",
        f"Current: {columns}x{rows}",
    ]


def block_top_row(rows: int, line_count: int) -> int:
    """多行文本块垂直居中的起始行"""
    return max(0, rows // 2 - line_count // 2)
