"""
ANSI terminal collaborator: size query, cursor moves, clear, title and raw writes.
"""
from __future__ import annotations
import shutil
import sys
from typing import Optional, TextIO, Tuple

from consolecam.models import TerminalGrid

ESC = "\033"


class AnsiTerminal:
    """Thin wrapper over a text stream that understands VT100/xterm escapes."""
    def __init__(self, stream: Optional[TextIO] = None, fallback: Tuple[int, int] = (80, 24)):
        self.stream = stream if stream is not None else sys.stdout
        self.fallback = fallback

    def size(self) -> TerminalGrid:
        cols, lines = shutil.get_terminal_size(self.fallback)
        return TerminalGrid(width=max(0, cols), height=max(0, lines))

    def move_cursor(self, x: int, y: int) -> None:
        self.stream.write(f"{ESC}[{y + 1};{x + 1}H")

    def clear(self) -> None:
        self.stream.write(f"{ESC}[2J{ESC}[H")

    def write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def set_title(self, title: str) -> None:
        self.stream.write(f"{ESC}]0;{title}\a")
        self.stream.flush()

    def hide_cursor(self) -> None:
        self.stream.write(f"{ESC}[?25l")
        self.stream.flush()

    def show_cursor(self) -> None:
        self.stream.write(f"{ESC}[?25h")
        self.stream.flush()
