from typing import List

from .geometry.primitives import DetectionResult


def format_result(result: DetectionResult) -> str:
    """
    Human-readable summary of a detection pass:
    - processing time and shape count
    - per shape: type, confidence (%), center and area
    """
    lines: List[str] = [
        f"Processing Time: {result.processing_time_ms:.2f}ms",
        f"Shapes Found: {len(result.shapes)}",
    ]
    if not result.shapes:
        lines.append("No shapes detected.")
        return "\n".join(lines)

    lines.append("Detected Shapes:")
    for shape in result.shapes:
        lines.append(f"  {shape.shape_type.capitalize()}")
        lines.append(f"    Confidence: {shape.confidence * 100:.1f}%")
        lines.append(f"    Center: ({shape.center.x:.1f}, {shape.center.y:.1f})")
        lines.append(f"    Area: {float(shape.area):.1f}px²")
    return "\n".join(lines)
