import logging
from typing import Iterable, List, Optional

from ..config import ShapescanConfig
from ..geometry.classifier import CornerEstimator, StrideCornerEstimator
from ..geometry.primitives import DetectionResult, PixelBuffer
from ..geometry.raster_detector import detect_shapes, load_pixel_buffer
from ..geometry.schemas import result_to_json
from ..report import format_result

logger = logging.getLogger(__name__)


class ShapeExtractor:
    def __init__(self, config: Optional[ShapescanConfig] = None, corner_estimator: Optional[CornerEstimator] = None):
        self.config = config or ShapescanConfig()
        self.corner_estimator = corner_estimator or StrideCornerEstimator()

    def detect(self, pixels: PixelBuffer) -> DetectionResult:
        return detect_shapes(pixels, config=self.config, corner_estimator=self.corner_estimator)

    def detect_file(self, image_path: str) -> DetectionResult:
        return self.detect(load_pixel_buffer(image_path))

    def detect_many(self, images: Iterable[PixelBuffer]) -> List[DetectionResult]:
        """Run one independent pass per image, in order."""
        results = [self.detect(pixels) for pixels in images]
        logger.info("processed %d images", len(results))
        return results

    def to_json(self, result: DetectionResult) -> str:
        return result_to_json(result)

    def summarize(self, result: DetectionResult) -> str:
        return format_result(result)
