"""
Pydantic data models passed between pipeline stages.
"""
from __future__ import annotations
from typing import Optional

import numpy as np
from pydantic import BaseModel, ConfigDict, Field


class FrameSize(BaseModel):
    width: int = Field(ge=0)
    height: int = Field(ge=0)

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


class TerminalGrid(BaseModel):
    """Character-cell size of the terminal; zero means nothing can be drawn."""
    width: int = Field(default=0, ge=0)
    height: int = Field(default=0, ge=0)


class BrightnessBuffer(BaseModel):
    """Row-major brightness values for the visited pixels plus their stats."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    values: np.ndarray
    min_brightness: int = 0
    max_brightness: int = 0
    average: int = 0
    stride: int = 0
    rows: int = 0

    @property
    def empty(self) -> bool:
        return self.values.size == 0

    def __len__(self) -> int:
        return int(self.values.size)


class PerfSample(BaseModel):
    image_ms: float = 0.0
    pixel_loop_ms: float = 0.0
    ascii_loop_ms: float = 0.0
    write_ms: float = 0.0
    interval_ms: float = 0.0

    @property
    def fps(self) -> float:
        if self.interval_ms <= 0:
            return 0.0
        return 1000.0 / self.interval_ms


class FrameResult(BaseModel):
    text: str
    source: FrameSize
    target: FrameSize
    brightness: BrightnessBuffer


class LoopState(BaseModel):
    """State carried from one iteration to the next."""
    last_grid: TerminalGrid = Field(default_factory=TerminalGrid)
    capture_failures: int = 0
    iterations: int = 0
    frames: int = 0
    last_sample: Optional[PerfSample] = None
