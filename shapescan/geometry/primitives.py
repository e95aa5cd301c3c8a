# shapescan/geometry/primitives.py

import numbers
from typing import Any, Dict, List, Sequence, Union

import numpy as np

from ..errors import InvalidInput


class ShapeType:
    CIRCLE = "circle"
    SQUARE = "square"
    RECTANGLE = "rectangle"
    TRIANGLE = "triangle"
    PENTAGON = "pentagon"
    STAR = "star"

    ALL = (CIRCLE, SQUARE, RECTANGLE, TRIANGLE, PENTAGON, STAR)


class PixelBuffer:
    """
    A decoded RGBA image owned by the caller.

    `data` may be an (H, W, 4) array-like or a flat sequence of W*H*4 bytes;
    it is stored as a read-only uint8 array of shape (H, W, 4). Values must
    be integers in 0-255; nothing is clipped or wrapped.
    """

    def __init__(self, width: int, height: int, data: Union[np.ndarray, Sequence[int], bytes]):
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidInput(f"image {name} must be an integer, got {value!r}")
        if width <= 0 or height <= 0:
            raise InvalidInput(f"image dimensions must be positive, got {width}x{height}")

        if isinstance(data, (bytes, bytearray)):
            arr = np.frombuffer(bytes(data), dtype=np.uint8)
        else:
            arr = np.asarray(data)
        expected = width * height * 4
        if arr.size != expected:
            raise InvalidInput(
                f"pixel buffer holds {arr.size} values, expected {expected} for {width}x{height} RGBA"
            )
        if arr.ndim == 3 and arr.shape != (height, width, 4):
            raise InvalidInput(f"pixel array shape {arr.shape} does not match ({height}, {width}, 4)")
        if arr.dtype.kind not in "iu":
            raise InvalidInput(f"pixel values must be integers, got dtype {arr.dtype}")
        if arr.min() < 0 or arr.max() > 255:
            raise InvalidInput(f"pixel values must lie in 0-255, got range {arr.min()}..{arr.max()}")

        self.width = int(width)
        self.height = int(height)
        self.data = arr.astype(np.uint8, copy=True).reshape(height, width, 4)
        self.data.setflags(write=False)

    @classmethod
    def from_array(cls, rgba: np.ndarray) -> "PixelBuffer":
        if rgba.ndim != 3 or rgba.shape[2] != 4:
            raise InvalidInput(f"expected an (H, W, 4) RGBA array, got shape {rgba.shape}")
        height, width = rgba.shape[:2]
        return cls(width, height, rgba)


class BoundingBox:
    def __init__(self, x: int, y: int, width: int, height: int):
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    def to_dict(self) -> Dict[str, int]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundingBox):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"BoundingBox(x={self.x}, y={self.y}, width={self.width}, height={self.height})"


class Point:
    def __init__(self, x: float, y: float):
        self.x = x
        self.y = y

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (self.x, self.y) == (other.x, other.y)

    def __repr__(self) -> str:
        return f"Point(x={self.x}, y={self.y})"


class DetectedShape:
    """
    A single classified blob.
    """

    def __init__(
        self,
        shape_type: str,
        confidence: float,
        bbox: BoundingBox,
        center: Point,
        area: int,
    ):
        self.shape_type = shape_type  # one of ShapeType.ALL
        self.confidence = confidence  # circles carry raw circularity, which may exceed 1.0
        self.bbox = bbox
        self.center = center
        self.area = area  # pixel count of the source blob

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.shape_type,
            "confidence": self.confidence,
            "boundingBox": self.bbox.to_dict(),
            "center": self.center.to_dict(),
            "area": self.area,
        }

    def __repr__(self) -> str:
        return (
            f"DetectedShape({self.shape_type!r}, confidence={self.confidence:.3f}, "
            f"bbox={self.bbox!r}, area={self.area})"
        )


class DetectionResult:
    """
    Output of one pipeline pass. `shapes` follow blob discovery order.
    """

    def __init__(
        self,
        shapes: List[DetectedShape],
        processing_time_ms: float,
        image_width: int,
        image_height: int,
    ):
        self.shapes = shapes
        self.processing_time_ms = processing_time_ms
        self.image_width = image_width
        self.image_height = image_height

    def to_dict(self) -> Dict[str, Any]:
        return {
            "shapes": [s.to_dict() for s in self.shapes],
            "processingTimeMs": self.processing_time_ms,
            "imageWidth": self.image_width,
            "imageHeight": self.image_height,
        }
