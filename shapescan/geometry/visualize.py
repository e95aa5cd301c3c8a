from typing import Tuple
import os
import cv2  # type: ignore
from .primitives import DetectionResult


def _shape_color(shape_type: str) -> Tuple[int, int, int]:
    """
    BGR colors for visibility on most images.
    """
    mapping = {
        "circle": (0, 200, 0),       # green
        "square": (200, 120, 0),     # blue-ish
        "rectangle": (0, 0, 220),    # red
        "triangle": (220, 0, 220),
        "pentagon": (200, 200, 0),
        "star": (0, 140, 255),       # orange
    }
    return mapping.get(shape_type, (0, 220, 220))


def draw_shapes(image_path: str, result: DetectionResult, output_path: str) -> str:
    img = cv2.imread(image_path)
    if img is None:
        raise ValueError(f"Cannot read image: {image_path}")

    for idx, shape in enumerate(result.shapes):
        box = shape.bbox
        x1, y1 = int(box.x), int(box.y)
        x2, y2 = x1 + int(box.width) - 1, y1 + int(box.height) - 1
        color = _shape_color(shape.shape_type)
        cv2.rectangle(img, (x1, y1), (x2, y2), color, 2)
        cv2.circle(img, (int(round(shape.center.x)), int(round(shape.center.y))), 3, color, -1)
        label = f"{idx}:{shape.shape_type} {shape.confidence * 100:.0f}%"
        cv2.putText(
            img,
            label,
            (x1, max(0, y1 - 6)),
            cv2.FONT_HERSHEY_SIMPLEX,
            0.5,
            color,
            1,
            lineType=cv2.LINE_AA,
        )

    os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
    cv2.imwrite(output_path, img)
    return output_path
