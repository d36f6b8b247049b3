"""Screen drawing on a TerminalSurface."""

from .. import config
from ..telemetry import get_logger, metrics
from ..terminal.base import TerminalSurface
from .layout import (
    RenderMode,
    art_lines,
    block_top_row,
    center_column,
    footer_row,
    render_mode,
    status_row,
    too_small_lines,
)

logger = get_logger(__name__)


def draw(surface: TerminalSurface, columns: int, rows: int) -> RenderMode:
    """Clear the screen and draw the splash for the given size.

    Below the minimum size only the "too small" message is drawn, never the
    art. Terminal write errors propagate.

    Args:
        surface: Terminal surface to draw on
        columns: Terminal width
        rows: Terminal height

    Returns:
        The mode that was drawn.
    """
    mode = render_mode(columns, rows)
    surface.clear()

    if mode is RenderMode.TOO_SMALL:
        lines = too_small_lines(columns, rows)
        top = block_top_row(rows, len(lines))
        for i, line in enumerate(lines):
            surface.move_to(center_column(columns, line), top + i)
            surface.write(line)
    else:
        for i, line in enumerate(art_lines()):
            surface.move_to(center_column(columns, line), config.ART_TOP_ROW + i)
            surface.write(line)
        _write_highlighted(surface, columns, footer_row(), config.FOOTER)

    surface.flush()
    metrics.inc(f"render.{mode.value}")
    logger.debug(f"Drew {mode.value} at {columns}x{rows}")
    return mode


def draw_status(surface: TerminalSurface, columns: int, status: str) -> None:
    """Write a status line centered just below the footer."""
    _write_highlighted(surface, columns, status_row(), status)
    surface.flush()


def _write_highlighted(surface: TerminalSurface, columns: int, row: int, text: str) -> None:
    surface.move_to(center_column(columns, text), row)
    surface.set_foreground(config.HIGHLIGHT_COLOR)
    surface.write(text)
    surface.reset_color()
