"""
Camera frame source backed by OpenCV.
"""
from __future__ import annotations
import logging

import cv2
import numpy as np

from consolecam.errors import CaptureDeviceLost, CaptureUnavailable

logger = logging.getLogger(__name__)


class FrameSource:
    """Opens a capture device and hands out BGR frames on demand."""
    def __init__(self, camera_index: int = 0, fps: float = 60.0):
        self.camera_index = camera_index
        self.cap = cv2.VideoCapture(camera_index)
        if not self.cap.isOpened():
            raise CaptureDeviceLost(f"Could not open camera index {camera_index}")
        self.cap.set(cv2.CAP_PROP_FPS, fps)
        logger.info(f"[capture] opened camera {camera_index} requested_fps={fps}")

    def read(self) -> np.ndarray:
        """Block until the device returns a frame.

        Raises:
            CaptureUnavailable: the device returned no frame this time.
        """
        ok, frame = self.cap.read()
        if not ok or frame is None or frame.size == 0:
            raise CaptureUnavailable(f"camera {self.camera_index} returned no frame")
        return frame

    def release(self) -> None:
        self.cap.release()

    def __enter__(self) -> "FrameSource":
        return self

    def __exit__(self, *exc) -> None:
        self.release()
