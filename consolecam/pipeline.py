# consolecam/pipeline.py
"""
Per-frame pipeline and the run loop.

One frame is in flight at a time: capture -> plan -> resize -> brightness ->
characters -> render. The only parallel work is inside the character mapper.
"""
from __future__ import annotations
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import Optional
import logging
import threading
import time

import numpy as np

from consolecam.brightness import extract_brightness
from consolecam.capture import FrameSource
from consolecam.config import Settings
from consolecam.dimensions import DEFAULT_CELL_ASPECT, plan_dimensions, resize_frame
from consolecam.errors import CaptureDeviceLost, CaptureUnavailable, PreconditionFailure
from consolecam.mapper import get_ramp, map_brightness
from consolecam.models import FrameResult, FrameSize, LoopState, TerminalGrid
from consolecam.perf import PerfMonitor, format_status
from consolecam.renderer import render_frame, update_status
from consolecam.terminal import AnsiTerminal

logger = logging.getLogger(__name__)


def process_frame(frame: np.ndarray,
                  grid: TerminalGrid,
                  ramp: str,
                  perf: Optional[PerfMonitor] = None,
                  cell_aspect: float = DEFAULT_CELL_ASPECT,
                  workers: int = 1,
                  executor: Optional[Executor] = None) -> FrameResult:
    """
    Turn one captured frame into terminal text sized for ``grid``.

    Raises:
        PreconditionFailure: the grid (or frame) has a zero dimension.
    """
    src_h, src_w = frame.shape[:2]
    target = plan_dimensions(src_w, src_h, grid.width, grid.height, cell_aspect)
    resized = resize_frame(frame, target)
    if perf is not None:
        perf.lap("image")

    buffer = extract_brightness(resized, grid)
    if perf is not None:
        perf.lap("pixel_loop")

    text = map_brightness(buffer, ramp, workers=workers, executor=executor)
    if perf is not None:
        perf.lap("ascii_loop")

    return FrameResult(text=text,
                       source=FrameSize(width=src_w, height=src_h),
                       target=target,
                       brightness=buffer)


def run_iteration(source,
                  terminal,
                  state: LoopState,
                  settings: Settings,
                  ramp: str,
                  perf: PerfMonitor,
                  executor: Optional[Executor] = None) -> LoopState:
    """
    Capture, convert and draw a single frame; return the state for the next call.

    Capture misses and unusable terminal sizes skip the frame. Only
    CaptureDeviceLost escapes.
    """
    grid = terminal.size()
    iterations = state.iterations + 1

    try:
        frame = source.read()
    except CaptureUnavailable as e:
        failures = state.capture_failures + 1
        if failures > settings.MAX_CAPTURE_FAILURES:
            raise CaptureDeviceLost(
                f"no frame after {failures} consecutive attempts"
            ) from e
        logger.warning(f"[pipeline] capture miss {failures}/{settings.MAX_CAPTURE_FAILURES}: {e}")
        perf.skip_frame()
        time.sleep(settings.CAPTURE_RETRY_DELAY)
        return LoopState(last_grid=state.last_grid,
                         capture_failures=failures,
                         iterations=iterations,
                         frames=state.frames,
                         last_sample=state.last_sample)

    try:
        result = process_frame(frame, grid, ramp,
                               perf=perf,
                               cell_aspect=settings.CELL_ASPECT,
                               workers=settings.MAP_WORKERS,
                               executor=executor)
    except PreconditionFailure as e:
        logger.debug(f"[pipeline] skipping frame: {e}")
        perf.skip_frame()
        time.sleep(settings.CAPTURE_RETRY_DELAY)
        # remember the degenerate grid so the next usable frame starts from a clear screen
        return LoopState(last_grid=grid,
                         capture_failures=0,
                         iterations=iterations,
                         frames=state.frames,
                         last_sample=state.last_sample)

    last_grid = render_frame(terminal, result.text, grid, state.last_grid)
    perf.lap("write")

    sample = perf.finish_frame()
    update_status(terminal, format_status(sample, result.source, result.target, settings.TITLE))

    return LoopState(last_grid=last_grid,
                     capture_failures=0,
                     iterations=iterations,
                     frames=state.frames + 1,
                     last_sample=sample)


def run_loop(settings: Settings,
             stop_event: Optional[threading.Event] = None,
             source=None,
             terminal=None,
             max_iterations: Optional[int] = None) -> LoopState:
    """
    Run iterations until ``stop_event`` is set or ``max_iterations`` is reached.

    The stop event is checked between iterations only. A lost capture device is
    logged once and re-raised.
    """
    stop_event = stop_event or threading.Event()
    owns_source = source is None
    if owns_source:
        source = FrameSource(settings.CAMERA_INDEX, settings.CAPTURE_FPS)
    terminal = terminal or AnsiTerminal()

    ramp = get_ramp(settings.RAMP_SCALE)
    workers = max(1, settings.MAP_WORKERS)
    perf = PerfMonitor()
    state = LoopState()
    logger.info(f"[pipeline] loop start ramp_len={len(ramp)} workers={workers}")

    terminal.hide_cursor()
    try:
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="consolecam-map") as executor:
            while not stop_event.is_set():
                state = run_iteration(source, terminal, state, settings, ramp, perf, executor)
                if max_iterations is not None and state.iterations >= max_iterations:
                    break
    except CaptureDeviceLost:
        logger.exception("[pipeline] capture device lost; stopping")
        raise
    finally:
        terminal.show_cursor()
        if owns_source:
            source.release()

    logger.info(f"[pipeline] loop stopped iterations={state.iterations} frames={state.frames}")
    return state
