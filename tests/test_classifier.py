import math

import numpy as np
import pytest

from shapescan.geometry.classifier import (
    CornerEstimator,
    StrideCornerEstimator,
    classify_blob,
    measure_blob,
)
from shapescan.geometry.components import extract_blobs


class FixedCorners(CornerEstimator):
    def __init__(self, count):
        self.count = count
        self.calls = 0

    def count_corners(self, blob, border):
        self.calls += 1
        return self.count


def _block(width, height, x, y, w, h):
    bm = np.zeros((height, width), dtype=np.uint8)
    bm[y:y + h, x:x + w] = 1
    blob = [(px, py) for py in range(y, y + h) for px in range(x, x + w)]
    return blob, bm


def test_measure_block():
    blob, bm = _block(30, 30, 5, 5, 10, 10)
    m = measure_blob(blob, bm)
    assert m.bbox.to_dict() == {"x": 5, "y": 5, "width": 10, "height": 10}
    assert m.center.to_dict() == {"x": 9.5, "y": 9.5}
    assert m.area == 100
    assert m.border == 36
    assert m.circularity == pytest.approx(4 * math.pi * 100 / 36 ** 2)
    assert m.ratio == 1.0


def test_image_edge_counts_as_border():
    blob, bm = _block(10, 10, 0, 0, 10, 10)
    assert measure_blob(blob, bm).border == 36


def test_compact_block_is_circle_with_raw_circularity():
    blob, bm = _block(30, 30, 5, 5, 10, 10)
    shape = classify_blob(blob, bm)
    assert shape.shape_type == "circle"
    assert shape.confidence == pytest.approx(0.9696, abs=1e-4)


def test_circularity_confidence_is_not_clamped():
    # a 9x9 block: area 81, border 32
    blob, bm = _block(20, 20, 3, 3, 9, 9)
    shape = classify_blob(blob, bm)
    assert shape.shape_type == "circle"
    assert shape.confidence > 0.99
    assert shape.confidence == pytest.approx(4 * math.pi * 81 / 32 ** 2)


def test_large_square():
    blob, bm = _block(130, 130, 5, 5, 120, 120)
    shape = classify_blob(blob, bm)
    assert shape.shape_type == "square"
    assert shape.confidence == 0.7


def test_rectangle_by_aspect_ratio():
    blob, bm = _block(80, 60, 5, 5, 60, 40)
    shape = classify_blob(blob, bm)
    assert shape.shape_type == "rectangle"
    assert shape.confidence == 0.7
    assert shape.bbox.to_dict() == {"x": 5, "y": 5, "width": 60, "height": 40}


@pytest.mark.parametrize(
    "corners, expected",
    [
        (0, ("triangle", 0.6)),
        (3, ("triangle", 0.6)),
        (4, ("rectangle", 0.5)),
        (5, ("pentagon", 0.6)),
        (6, ("rectangle", 0.5)),
        (7, ("star", 0.6)),
        (12, ("star", 0.6)),
    ],
)
def test_elongated_blob_uses_corner_count(corners, expected):
    blob, bm = _block(120, 20, 5, 5, 100, 10)
    estimator = FixedCorners(corners)
    shape = classify_blob(blob, bm, corner_estimator=estimator)
    assert (shape.shape_type, shape.confidence) == expected
    assert estimator.calls == 1


def test_corner_estimator_not_consulted_for_compact_blobs():
    blob, bm = _block(80, 60, 5, 5, 60, 40)
    estimator = FixedCorners(5)
    classify_blob(blob, bm, corner_estimator=estimator)
    assert estimator.calls == 0


def test_single_row_bar_is_triangle():
    bm = np.zeros((11, 110), dtype=np.uint8)
    bm[5, 5:105] = 1
    blobs = list(extract_blobs(bm))
    assert len(blobs) == 1
    shape = classify_blob(blobs[0], bm)
    assert shape.area == 100
    assert shape.bbox.height == 1
    assert (shape.shape_type, shape.confidence) == ("triangle", 0.6)


def test_stride_estimator_on_straight_line():
    line = [(i, 0) for i in range(100)]
    # stride 5; only the wrap-around sample turns back on itself
    assert StrideCornerEstimator().count_corners(line, 100) == 1


def test_stride_estimator_vertical_line():
    line = [(0, i) for i in range(40)]
    # first direction turns 90 degrees from the initial heading, plus the wrap
    assert StrideCornerEstimator().count_corners(line, 40) == 2


def test_stride_estimator_zero_step_is_treated_as_one():
    line = [(0, 0), (1, 0), (2, 0)]
    assert StrideCornerEstimator().count_corners(line, 3) == 1
    assert StrideCornerEstimator().count_corners(line, 0) == 1
