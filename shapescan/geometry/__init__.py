from .primitives import BoundingBox, DetectedShape, DetectionResult, PixelBuffer, Point, ShapeType
from .binarize import binarize, to_luminance
from .components import extract_blobs
from .classifier import CornerEstimator, StrideCornerEstimator, classify_blob, measure_blob
from .raster_detector import detect_shapes, detect_shapes_in_file, load_pixel_buffer
from .visualize import draw_shapes

__all__ = [
    "BoundingBox",
    "DetectedShape",
    "DetectionResult",
    "PixelBuffer",
    "Point",
    "ShapeType",
    "binarize",
    "to_luminance",
    "extract_blobs",
    "CornerEstimator",
    "StrideCornerEstimator",
    "classify_blob",
    "measure_blob",
    "detect_shapes",
    "detect_shapes_in_file",
    "load_pixel_buffer",
    "draw_shapes",
]
