import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


class ShapescanConfig:
    """
    Central configuration object.

    Detection constants default to the values the classifier thresholds were
    tuned against; override them only for experiments.
    """

    def __init__(
        self,
        threshold: Optional[int] = None,
        min_blob_pixels: Optional[int] = None,
        log_level: Optional[str] = None,
    ):
        # Fallback to env if not provided
        self.threshold = threshold if threshold is not None else _env_int("SHAPESCAN_THRESHOLD", 128)
        self.min_blob_pixels = (
            min_blob_pixels if min_blob_pixels is not None else _env_int("SHAPESCAN_MIN_BLOB_PIXELS", 80)
        )
        self.log_level = (log_level or os.getenv("SHAPESCAN_LOG_LEVEL") or "WARNING").upper()

    def __repr__(self) -> str:
        return (
            f"ShapescanConfig(threshold={self.threshold}, "
            f"min_blob_pixels={self.min_blob_pixels}, log_level={self.log_level!r})"
        )
