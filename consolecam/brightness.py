"""
Brightness pass over a resized raster.
"""
from __future__ import annotations
import logging
from typing import Tuple

import numpy as np

from consolecam.errors import EmptyFrameBuffer
from consolecam.models import BrightnessBuffer, TerminalGrid

logger = logging.getLogger(__name__)


def brightness_stats(values: np.ndarray) -> Tuple[int, int, int]:
    """Return (min, max, floored average) of ``values``.

    Raises:
        EmptyFrameBuffer: if ``values`` has no elements.
    """
    if values.size == 0:
        raise EmptyFrameBuffer("no pixels visited")
    total = int(values.sum(dtype=np.int64))
    return int(values.min()), int(values.max()), total // int(values.size)


def extract_brightness(raster: np.ndarray, grid: TerminalGrid) -> BrightnessBuffer:
    """Convert the raster into row-major brightness values bounded by the grid.

    One trailing row and one trailing column of the terminal are left unused,
    so at most ``grid.height - 1`` rows and ``grid.width - 1`` columns are read.
    Brightness is the rounded mean of the three channels, which makes channel
    order (BGR vs RGB) irrelevant.
    """
    if raster.ndim == 2:
        # single-channel frames count as equal r, g and b
        raster = raster[:, :, np.newaxis].repeat(3, axis=2)

    rows = max(0, min(raster.shape[0], grid.height - 1))
    cols = max(0, min(raster.shape[1], grid.width - 1))

    region = raster[:rows, :cols, :3].astype(np.uint16)
    values = ((region.sum(axis=2) + 1) // 3).astype(np.uint8).reshape(-1)

    try:
        lo, hi, avg = brightness_stats(values)
    except EmptyFrameBuffer:
        logger.debug(f"[brightness] empty visit rows={rows} cols={cols} grid={grid.width}x{grid.height}")
        return BrightnessBuffer(values=values, stride=cols, rows=rows)

    return BrightnessBuffer(values=values,
                            min_brightness=lo,
                            max_brightness=hi,
                            average=avg,
                            stride=cols,
                            rows=rows)
