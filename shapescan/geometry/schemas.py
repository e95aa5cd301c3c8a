"""Pydantic schemas for validating DetectionResult JSON payloads."""

import json
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .primitives import BoundingBox, DetectedShape, DetectionResult, Point, ShapeType


class BoundingBoxModel(BaseModel):
    x: int
    y: int
    width: int = Field(gt=0)
    height: int = Field(gt=0)


class PointModel(BaseModel):
    x: float
    y: float


class ShapeModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    shape_type: str = Field(alias="type")
    confidence: float = Field(ge=0.0)
    bounding_box: BoundingBoxModel = Field(alias="boundingBox")
    center: PointModel
    area: int = Field(gt=0)

    @field_validator("shape_type")
    @classmethod
    def known_shape_type(cls, value: str) -> str:
        if value not in ShapeType.ALL:
            raise ValueError(f"unknown shape type {value!r}, expected one of {ShapeType.ALL}")
        return value


class DetectionResultModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    shapes: List[ShapeModel]
    processing_time_ms: float = Field(alias="processingTimeMs", ge=0.0)
    image_width: int = Field(alias="imageWidth", gt=0)
    image_height: int = Field(alias="imageHeight", gt=0)

    @field_validator("shapes")
    @classmethod
    def shapes_fit_bbox_area(cls, shapes: List[ShapeModel]) -> List[ShapeModel]:
        for s in shapes:
            box = s.bounding_box
            if s.area > box.width * box.height:
                raise ValueError(f"area {s.area} exceeds bounding box {box.width}x{box.height}")
        return shapes

    def canonical_json(self) -> str:
        return self.model_dump_json(indent=2, by_alias=True)

    def to_result(self) -> DetectionResult:
        shapes = [
            DetectedShape(
                shape_type=s.shape_type,
                confidence=s.confidence,
                bbox=BoundingBox(s.bounding_box.x, s.bounding_box.y, s.bounding_box.width, s.bounding_box.height),
                center=Point(s.center.x, s.center.y),
                area=s.area,
            )
            for s in self.shapes
        ]
        return DetectionResult(
            shapes=shapes,
            processing_time_ms=self.processing_time_ms,
            image_width=self.image_width,
            image_height=self.image_height,
        )


def result_to_json(result: DetectionResult) -> str:
    return DetectionResultModel.model_validate(result.to_dict()).canonical_json()


def result_from_json(payload: Any) -> DetectionResult:
    if isinstance(payload, str):
        data = json.loads(payload)
    else:
        data = payload
    return DetectionResultModel.model_validate(data).to_result()
