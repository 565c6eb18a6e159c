"""
Brightness to character quantization.

Each buffer index ``i`` owns output slot ``i + i // stride``; the last index of
a row also owns the slot right after it, which receives the line break. No two
indices share a slot, so chunks of the index range can be filled by separate
threads without locking.
"""
from __future__ import annotations
import logging
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import Dict, Optional

import numpy as np

from consolecam.models import BrightnessBuffer

logger = logging.getLogger(__name__)

# darkest -> brightest
RAMPS: Dict[int, str] = {
    2: " #",
    4: " .#@",
    5: " ░▒▓█",
    8: " .:-=#%@",
    16: " .,:-~+=*#%@&$",
    32: " .'`^\",:;Il!i~+_-?][}{1)(|\\/*tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@$",
}
DEFAULT_RAMP = " .:-=+*#%@"


def get_ramp(scale: int) -> str:
    """Look up the ramp for ``scale``, falling back to DEFAULT_RAMP."""
    ramp = RAMPS.get(scale)
    if ramp is None:
        logger.warning(f"[mapper] unsupported ramp scale {scale!r}; using default ramp")
        return DEFAULT_RAMP
    return ramp


def map_pixel(brightness: int, max_brightness: int, ramp: str) -> str:
    """Quantize a single brightness value against the frame maximum."""
    effective_max = max(int(max_brightness), 1)
    return ramp[int(brightness) * (len(ramp) - 1) // effective_max]


def map_brightness(buffer: BrightnessBuffer,
                   ramp: str,
                   workers: int = 1,
                   executor: Optional[Executor] = None) -> str:
    """Map every brightness value to a ramp character, inserting row breaks.

    Args:
        buffer: Output of the brightness pass; ``buffer.stride`` is the row length.
        ramp: Characters ordered darkest to brightest.
        workers: Number of contiguous index chunks to fill.
        executor: Pool to run chunks on; a temporary one is created when
            ``workers > 1`` and none is given.

    Returns:
        The frame text. Identical for any ``workers`` value.
    """
    n = len(buffer)
    stride = buffer.stride
    if n == 0 or stride <= 0:
        return ""

    palette = np.array(list(ramp), dtype="<U1")
    top = len(palette) - 1
    effective_max = max(buffer.max_brightness, 1)
    values = buffer.values

    out = np.full(n + n // stride, "", dtype="<U1")

    def fill(start: int, stop: int) -> None:
        idx = np.arange(start, stop, dtype=np.int64)
        levels = values[start:stop].astype(np.int64) * top // effective_max
        np.minimum(levels, top, out=levels)
        out[idx + idx // stride] = palette[levels]
        row_ends = idx[(idx + 1) % stride == 0]
        out[row_ends + row_ends // stride + 1] = "\n"

    workers = max(1, min(int(workers), n))
    bounds = np.linspace(0, n, workers + 1, dtype=np.int64)
    chunks = [(int(a), int(b)) for a, b in zip(bounds[:-1], bounds[1:]) if b > a]

    if len(chunks) == 1:
        fill(*chunks[0])
    elif executor is not None:
        for fut in [executor.submit(fill, a, b) for a, b in chunks]:
            fut.result()
    else:
        with ThreadPoolExecutor(max_workers=len(chunks)) as pool:
            for fut in [pool.submit(fill, a, b) for a, b in chunks]:
                fut.result()

    # empty slots (unfilled capacity) vanish in the join
    return "".join(out.tolist())
