import numpy as np
import pytest

from consolecam.models import TerminalGrid


class FakeTerminal:
    """Records terminal operations instead of emitting escape codes."""
    def __init__(self, sizes=((80, 24),)):
        self.sizes = list(sizes)
        self.ops = []
        self.written = []
        self.titles = []

    def size(self):
        w, h = self.sizes[0] if len(self.sizes) == 1 else self.sizes.pop(0)
        return TerminalGrid(width=w, height=h)

    def clear(self): self.ops.append("clear")
    def move_cursor(self, x, y): self.ops.append(("move", x, y))
    def write(self, text):
        self.ops.append("write")
        self.written.append(text)
    def set_title(self, title): self.titles.append(title)
    def hide_cursor(self): self.ops.append("hide")
    def show_cursor(self): self.ops.append("show")


class DummySource:
    def __init__(self, frames):
        self.frames = list(frames)
        self.released = False
    def read(self):
        from consolecam.errors import CaptureUnavailable
        frame = self.frames.pop(0) if self.frames else None
        if frame is None:
            raise CaptureUnavailable("no frame")
        return frame
    def release(self): self.released = True


@pytest.fixture
def white_frame():
    return np.full((50, 100, 3), 255, dtype=np.uint8)

@pytest.fixture
def fake_terminal():
    return FakeTerminal()
