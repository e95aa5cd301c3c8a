# shapescan/geometry/binarize.py

import numpy as np

from .primitives import PixelBuffer

# ITU-R BT.601 luma weights; the circularity thresholds were tuned against these.
LUMA_R = 0.299
LUMA_G = 0.587
LUMA_B = 0.114

DEFAULT_THRESHOLD = 128


def to_luminance(pixels: PixelBuffer) -> np.ndarray:
    """Return an (H, W) float64 luminance array; alpha is ignored."""
    rgb = pixels.data[..., :3].astype(np.float64)
    return LUMA_R * rgb[..., 0] + LUMA_G * rgb[..., 1] + LUMA_B * rgb[..., 2]


def binarize(luminance: np.ndarray, threshold: float = DEFAULT_THRESHOLD) -> np.ndarray:
    """Foreground (1) where luminance is strictly above the threshold, else 0."""
    return (luminance > threshold).astype(np.uint8)
