from .shape_extractor import ShapeExtractor

__all__ = ["ShapeExtractor"]
