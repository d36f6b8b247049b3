"""Splash screen rendering module."""

from .layout import RenderMode, center_column, render_mode
from .screen import draw, draw_status

__all__ = [
    "RenderMode",
    "render_mode",
    "center_column",
    "draw",
    "draw_status",
]
