"""
Flicker-free frame output.

The screen is only cleared when the terminal grid changed size since the last
frame; otherwise the cursor goes home and the new frame overwrites the old one.
"""
from __future__ import annotations
import logging

from consolecam.models import TerminalGrid

logger = logging.getLogger(__name__)


def render_frame(terminal, text: str, grid: TerminalGrid, previous_grid: TerminalGrid) -> TerminalGrid:
    """Draw ``text`` at the origin, clearing first if the grid was resized.

    Returns the grid to pass as ``previous_grid`` on the next frame.
    """
    if grid != previous_grid:
        logger.debug(f"[renderer] grid {previous_grid.width}x{previous_grid.height} -> "
                     f"{grid.width}x{grid.height}; clearing")
        terminal.clear()
    terminal.move_cursor(0, 0)
    terminal.write(text)
    return grid


def update_status(terminal, status: str) -> None:
    terminal.set_title(status)
