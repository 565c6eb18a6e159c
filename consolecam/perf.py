"""
Per-stage timing and frame-rate reporting.
"""
from __future__ import annotations
import time
from typing import Callable, Dict, Optional

from consolecam.models import FrameSize, PerfSample

STAGES = ("image", "pixel_loop", "ascii_loop", "write")


class PerfMonitor:
    """Two stopwatches: one per stage, one per whole frame. Keeps only the latest sample."""
    def __init__(self, clock: Callable[[], float] = time.perf_counter):
        self._clock = clock
        now = clock()
        self._frame_start = now
        self._stage_start = now
        self._stages: Dict[str, float] = {}
        self.last_sample: Optional[PerfSample] = None

    def lap(self, stage: str) -> float:
        """Record milliseconds since the previous lap under ``stage`` and restart the stage timer."""
        if stage not in STAGES:
            raise ValueError(f"unknown stage {stage!r}")
        now = self._clock()
        elapsed = (now - self._stage_start) * 1000.0
        self._stages[stage] = elapsed
        self._stage_start = now
        return elapsed

    def finish_frame(self) -> PerfSample:
        now = self._clock()
        sample = PerfSample(
            image_ms=self._stages.get("image", 0.0),
            pixel_loop_ms=self._stages.get("pixel_loop", 0.0),
            ascii_loop_ms=self._stages.get("ascii_loop", 0.0),
            write_ms=self._stages.get("write", 0.0),
            interval_ms=(now - self._frame_start) * 1000.0,
        )
        self.last_sample = sample
        self._stages = {}
        self._frame_start = now
        self._stage_start = now
        return sample

    def skip_frame(self) -> None:
        """Drop the partial stage timings of a skipped frame.

        The frame timer keeps running, so the next interval still spans the
        skipped iterations.
        """
        self._stages = {}
        self._stage_start = self._clock()


def format_status(sample: PerfSample, source: FrameSize, target: FrameSize, title: str = "ConsoleCam") -> str:
    return (
        f"{title} - FPS: {sample.fps:.2f} - Input: {source} - Output: {target} - "
        f"Performance: Image: {sample.image_ms:.0f}ms, PixelLoop: {sample.pixel_loop_ms:.0f}ms, "
        f"AsciiLoop: {sample.ascii_loop_ms:.0f}ms, Write: {sample.write_ms:.0f}ms"
    )
