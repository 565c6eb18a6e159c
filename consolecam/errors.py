"""
Failure taxonomy for a single loop iteration.

Everything except CaptureDeviceLost is handled inside the iteration that
raised it; the frame is skipped and the loop carries on.
"""


class ConsoleCamError(Exception):
    """Base class for all ConsoleCam errors."""


class PreconditionFailure(ConsoleCamError):
    """Terminal (or source) dimensions cannot be scaled against."""


class EmptyFrameBuffer(ConsoleCamError):
    """No pixels were visited, so there are no brightness statistics."""


class CaptureUnavailable(ConsoleCamError):
    """The capture device did not deliver a frame this time."""


class CaptureDeviceLost(ConsoleCamError):
    """The capture device is gone for good; the loop must stop."""
