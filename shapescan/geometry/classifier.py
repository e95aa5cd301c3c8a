# shapescan/geometry/classifier.py

import math
from typing import Optional

import numpy as np

from .components import NEIGHBOR_OFFSETS, Blob
from .primitives import BoundingBox, DetectedShape, Point, ShapeType

CIRCULARITY_EPSILON = 1e-6
CIRCLE_MIN_CIRCULARITY = 0.8
SQUARE_MAX_RATIO = 1.2
RECTANGLE_MAX_RATIO = 1.8
CORNER_SAMPLES = 20
CORNER_MIN_TURN = math.pi / 3


class BlobMetrics:
    """
    Geometric descriptors of one blob.
    """

    def __init__(self, bbox: BoundingBox, center: Point, area: int, border: int):
        self.bbox = bbox
        self.center = center
        self.area = area
        self.border = border  # border-pixel count, a perimeter proxy
        self.circularity = (4 * math.pi * area) / (border * border + CIRCULARITY_EPSILON)
        w, h = bbox.width, bbox.height
        self.ratio = w / h if w / h > 1 else h / w


def _count_border_pixels(blob: Blob, bitmap: np.ndarray) -> int:
    height, width = bitmap.shape
    border = 0
    for x, y in blob:
        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = x + dx, y + dy
            if nx < 0 or ny < 0 or nx >= width or ny >= height or bitmap.item(ny, nx) == 0:
                border += 1
                break
    return border


def measure_blob(blob: Blob, bitmap: np.ndarray) -> BlobMetrics:
    xs = [p[0] for p in blob]
    ys = [p[1] for p in blob]
    min_x, max_x = min(xs), max(xs)
    min_y, max_y = min(ys), max(ys)

    bbox = BoundingBox(min_x, min_y, max_x - min_x + 1, max_y - min_y + 1)
    center = Point((min_x + max_x) / 2, (min_y + max_y) / 2)
    border = _count_border_pixels(blob, bitmap)
    return BlobMetrics(bbox, center, len(blob), border)


class CornerEstimator:
    """
    Strategy for estimating how many corners a blob outline has.
    """

    def count_corners(self, blob: Blob, border: int) -> int:
        raise NotImplementedError("Subclasses must implement count_corners().")


class StrideCornerEstimator(CornerEstimator):
    """
    Samples the blob's pixel list at a fixed stride and counts sharp turns
    between consecutive sample directions.

    The pixel list is in flood-fill order, not outline order, so this is a
    rough heuristic rather than a polygon approximation.
    """

    def __init__(self, samples: int = CORNER_SAMPLES, min_turn: float = CORNER_MIN_TURN):
        self.samples = samples
        self.min_turn = min_turn

    def count_corners(self, blob: Blob, border: int) -> int:
        n = len(blob)
        if n == 0:
            return 0
        step = border // self.samples or 1
        corners = 0
        prev_angle = 0.0
        for k in range(0, n, step):
            x1, y1 = blob[k]
            x2, y2 = blob[(k + step) % n]
            angle = math.atan2(y2 - y1, x2 - x1)
            if abs(angle - prev_angle) > self.min_turn:
                corners += 1
            prev_angle = angle
        return corners


def classify_metrics(metrics: BlobMetrics, corners: Optional[int] = None) -> DetectedShape:
    """
    Map descriptors to a labelled shape. `corners` is only consulted for
    elongated, non-circular blobs.
    """
    shape_type = ShapeType.RECTANGLE
    confidence = 0.5

    if metrics.circularity > CIRCLE_MIN_CIRCULARITY:
        shape_type = ShapeType.CIRCLE
        confidence = metrics.circularity
    elif metrics.ratio < SQUARE_MAX_RATIO:
        shape_type = ShapeType.SQUARE
        confidence = 0.7
    elif metrics.ratio < RECTANGLE_MAX_RATIO:
        shape_type = ShapeType.RECTANGLE
        confidence = 0.7
    elif corners is not None:
        if corners <= 3:
            shape_type = ShapeType.TRIANGLE
            confidence = 0.6
        elif corners == 5:
            shape_type = ShapeType.PENTAGON
            confidence = 0.6
        elif corners >= 7:
            shape_type = ShapeType.STAR
            confidence = 0.6

    return DetectedShape(
        shape_type=shape_type,
        confidence=confidence,
        bbox=metrics.bbox,
        center=metrics.center,
        area=metrics.area,
    )


def classify_blob(
    blob: Blob,
    bitmap: np.ndarray,
    corner_estimator: Optional[CornerEstimator] = None,
) -> DetectedShape:
    metrics = measure_blob(blob, bitmap)
    corners = None
    if metrics.circularity <= CIRCLE_MIN_CIRCULARITY and metrics.ratio >= RECTANGLE_MAX_RATIO:
        estimator = corner_estimator or StrideCornerEstimator()
        corners = estimator.count_corners(blob, metrics.border)
    return classify_metrics(metrics, corners)
