from .config import ShapescanConfig
from .errors import InvalidInput
from .geometry import (
    BoundingBox,
    CornerEstimator,
    DetectedShape,
    DetectionResult,
    PixelBuffer,
    Point,
    ShapeType,
    StrideCornerEstimator,
    detect_shapes,
    detect_shapes_in_file,
    load_pixel_buffer,
)
from .pipeline import ShapeExtractor
from .report import format_result

__all__ = [
    "ShapescanConfig",
    "InvalidInput",
    "BoundingBox",
    "CornerEstimator",
    "DetectedShape",
    "DetectionResult",
    "PixelBuffer",
    "Point",
    "ShapeType",
    "StrideCornerEstimator",
    "detect_shapes",
    "detect_shapes_in_file",
    "load_pixel_buffer",
    "ShapeExtractor",
    "format_result",
]
