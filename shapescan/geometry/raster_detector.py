# shapescan/geometry/raster_detector.py

import logging
import os
import time
from typing import List, Optional

import cv2  # type: ignore
import numpy as np

from ..config import ShapescanConfig
from ..errors import InvalidInput
from .binarize import binarize, to_luminance
from .classifier import CornerEstimator, classify_blob
from .components import extract_blobs
from .primitives import DetectedShape, DetectionResult, PixelBuffer

logger = logging.getLogger(__name__)


def load_pixel_buffer(image_path: str) -> PixelBuffer:
    """Decode an image file into an RGBA PixelBuffer."""
    img = cv2.imread(image_path, cv2.IMREAD_UNCHANGED)
    if img is None:
        raise InvalidInput(f"Cannot read image: {image_path}")

    if img.dtype != np.uint8:
        # 16-bit PNG/TIFF: keep the high byte
        img = (img >> 8).astype(np.uint8) if img.dtype == np.uint16 else img.astype(np.uint8)

    if img.ndim == 2:
        rgba = cv2.cvtColor(img, cv2.COLOR_GRAY2RGBA)
    elif img.shape[2] == 3:
        rgba = cv2.cvtColor(img, cv2.COLOR_BGR2RGBA)
    elif img.shape[2] == 4:
        rgba = cv2.cvtColor(img, cv2.COLOR_BGRA2RGBA)
    else:
        raise InvalidInput(f"Unsupported channel count {img.shape[2]} in {image_path}")

    logger.debug("loaded %s (%dx%d)", os.path.basename(image_path), rgba.shape[1], rgba.shape[0])
    return PixelBuffer.from_array(rgba)


def detect_shapes(
    pixels: PixelBuffer,
    config: Optional[ShapescanConfig] = None,
    corner_estimator: Optional[CornerEstimator] = None,
) -> DetectionResult:
    """
    Grayscale -> threshold -> connected components -> classification.

    Every invocation owns its own intermediate buffers, so independent calls
    may run concurrently.
    """
    if not isinstance(pixels, PixelBuffer):
        raise InvalidInput(f"expected a PixelBuffer, got {type(pixels).__name__}")

    config = config or ShapescanConfig()
    start = time.perf_counter()

    luminance = to_luminance(pixels)
    bitmap = binarize(luminance, config.threshold)
    del luminance
    logger.debug("foreground pixels: %d of %d", int(bitmap.sum()), bitmap.size)

    shapes: List[DetectedShape] = []
    for blob in extract_blobs(bitmap, config.min_blob_pixels):
        shapes.append(classify_blob(blob, bitmap, corner_estimator))

    elapsed_ms = (time.perf_counter() - start) * 1000.0
    logger.info(
        "detected %d shapes in %dx%d image (%.2f ms)",
        len(shapes),
        pixels.width,
        pixels.height,
        elapsed_ms,
    )
    return DetectionResult(
        shapes=shapes,
        processing_time_ms=elapsed_ms,
        image_width=pixels.width,
        image_height=pixels.height,
    )


def detect_shapes_in_file(
    image_path: str,
    config: Optional[ShapescanConfig] = None,
    corner_estimator: Optional[CornerEstimator] = None,
) -> DetectionResult:
    return detect_shapes(load_pixel_buffer(image_path), config=config, corner_estimator=corner_estimator)
