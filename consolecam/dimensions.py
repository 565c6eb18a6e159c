"""
Target raster sizing and the resize primitive.

The frame is scaled so its width matches the terminal's column count; the
height is divided by an extra cell-aspect factor because a terminal character
is taller than it is wide.
"""
from __future__ import annotations
import logging
import math

import cv2
import numpy as np

from consolecam.errors import PreconditionFailure
from consolecam.models import FrameSize

logger = logging.getLogger(__name__)

DEFAULT_CELL_ASPECT = 2.5


def plan_dimensions(source_width: int,
                    source_height: int,
                    terminal_width: int,
                    terminal_height: int,
                    cell_aspect: float = DEFAULT_CELL_ASPECT) -> FrameSize:
    """Compute the resize target for a source frame on the current terminal.

    Args:
        source_width: Captured frame width in pixels.
        source_height: Captured frame height in pixels.
        terminal_width: Terminal columns.
        terminal_height: Terminal rows.
        cell_aspect: Height/width ratio of one character cell.

    Returns:
        FrameSize whose width equals ``terminal_width``.

    Raises:
        PreconditionFailure: when either terminal dimension (or the source) is
            not positive, since the scale factor would divide by zero.
    """
    if terminal_width <= 0 or terminal_height <= 0:
        raise PreconditionFailure(
            f"terminal grid {terminal_width}x{terminal_height} has no drawable cells"
        )
    if source_width <= 0 or source_height <= 0:
        raise PreconditionFailure(f"source frame {source_width}x{source_height} is empty")

    scale_factor = source_width / terminal_width
    new_width = source_width / scale_factor
    new_height = source_height / (scale_factor * cell_aspect)

    # width is rounded so float error never loses a column
    target = FrameSize(width=max(0, int(round(new_width))),
                       height=max(0, int(math.floor(new_height))))
    logger.debug(f"[dimensions] {source_width}x{source_height} -> {target} scale={scale_factor:.3f}")
    return target


def resize_frame(frame: np.ndarray, target: FrameSize) -> np.ndarray:
    """Nearest-neighbour resize to ``target``; zero-sized targets give an empty raster."""
    if target.width == 0 or target.height == 0:
        channels = frame.shape[2:] if frame.ndim == 3 else ()
        return np.empty((0, 0) + tuple(channels), dtype=frame.dtype)
    return cv2.resize(frame, (target.width, target.height), interpolation=cv2.INTER_NEAREST)
