"""
Configuration for the capture/render loop.
"""
from pydantic import BaseModel
import os


class Settings(BaseModel):
    """
    Runtime settings with environment-variable overrides.
    """
    CAMERA_INDEX: int = int(os.getenv("CAMERA_INDEX", "0"))
    CAPTURE_FPS: float = float(os.getenv("CAPTURE_FPS", "60"))

    RAMP_SCALE: int = int(os.getenv("RAMP_SCALE", "16"))
    # terminal cells are roughly 2.5x taller than wide
    CELL_ASPECT: float = float(os.getenv("CELL_ASPECT", "2.5"))
    MAP_WORKERS: int = int(os.getenv("MAP_WORKERS", str(os.cpu_count() or 4)))

    MAX_CAPTURE_FAILURES: int = int(os.getenv("MAX_CAPTURE_FAILURES", "30"))
    CAPTURE_RETRY_DELAY: float = float(os.getenv("CAPTURE_RETRY_DELAY", "0.01"))

    TITLE: str = os.getenv("TITLE", "ConsoleCam")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING")
    LOG_FILE: str = os.getenv("LOG_FILE", "consolecam.log")
