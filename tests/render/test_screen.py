"""Tests for render/screen.py"""

from biblen import config
from biblen.render.layout import RenderMode, art_lines, footer_row, status_row
from biblen.render.screen import draw, draw_status
from biblen.telemetry import metrics


class TestDrawNormal:
    """Tests for draw() at or above the minimum size."""

    def test_clears_first_and_flushes_last(self, surface):
        draw(surface, 100, 30)

        assert surface.calls[0] == ("clear",)
        assert surface.calls[-1] == ("flush",)

    def test_returns_mode(self, surface):
        assert draw(surface, 100, 30) is RenderMode.NORMAL

    def test_art_centered_from_row_two(self, surface):
        draw(surface, 100, 30)

        for i, line in enumerate(art_lines()):
            assert surface.text_at(config.ART_TOP_ROW + i) == [(36, line, None)]

    def test_footer_highlighted_and_reset(self, surface):
        draw(surface, 100, 30)

        col = (100 - len(config.FOOTER)) // 2
        assert surface.text_at(footer_row()) == [(col, config.FOOTER, "green")]
        footer_idx = surface.calls.index(("write", config.FOOTER))
        assert surface.calls[footer_idx - 1] == ("set_foreground", "green")
        assert surface.calls[footer_idx + 1] == ("reset_color",)

    def test_minimum_size_draws_art(self, surface):
        assert draw(surface, 80, 24) is RenderMode.NORMAL
        assert art_lines()[0] in surface.written_text()

    def test_metrics(self, surface):
        draw(surface, 100, 30)
        assert metrics.get_counter("render.normal") == 1


class TestDrawTooSmall:
    """Tests for draw() below the minimum size."""

    def test_message_only(self, surface):
        mode = draw(surface, 79, 24)

        assert mode is RenderMode.TOO_SMALL
        assert surface.written_text() == [
            "Window too small.",
            "Minimum: 80x24",
            "Current: 79x24",
        ]

    def test_message_centered(self, surface):
        draw(surface, 40, 10)

        # rows // 2 - 3 // 2 = 4
        assert surface.text_at(4) == [((40 - 17) // 2, "Window too small.", None)]
        assert surface.text_at(5) == [(13, "Minimum: 80x24", None)]
        assert surface.text_at(6) == [(13, "Current: 40x10", None)]

    def test_no_color_used(self, surface):
        draw(surface, 80, 23)
        assert surface.count("set_foreground") == 0

    def test_tiny_terminal_does_not_underflow(self, surface):
        draw(surface, 5, 1)

        assert all(col == 0 for col, _, _, _ in surface.writes)
        assert [row for _, row, _, _ in surface.writes] == [0, 1, 2]

    def test_metrics(self, surface):
        draw(surface, 10, 10)
        assert metrics.get_counter("render.too_small") == 1
        assert metrics.get_counter("render.normal") == 0


class TestDrawStatus:
    """Tests for draw_status()."""

    def test_centered_below_footer(self, surface):
        status = "[info] You are behind by 5 commit(s)"
        draw_status(surface, 100, status)

        assert surface.text_at(status_row()) == [((100 - len(status)) // 2, status, "green")]
        assert surface.calls[-2:] == [("reset_color",), ("flush",)]

    def test_does_not_clear(self, surface):
        draw_status(surface, 100, "x")
        assert surface.count("clear") == 0

    def test_narrow_terminal(self, surface):
        draw_status(surface, 10, "[info] You are up to date with upstream")
        assert surface.writes[0][0] == 0
