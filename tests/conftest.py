import numpy as np
import pytest

from shapescan.geometry.primitives import PixelBuffer


class Canvas:
    """Black RGBA canvas with white (foreground) drawing helpers."""

    def __init__(self, width, height):
        self.rgba = np.zeros((height, width, 4), dtype=np.uint8)
        self.rgba[..., 3] = 255

    def fill_rect(self, x, y, w, h, color=(255, 255, 255)):
        self.rgba[y:y + h, x:x + w, :3] = color
        return self

    def fill_disk(self, cx, cy, r, color=(255, 255, 255)):
        ys, xs = np.ogrid[: self.rgba.shape[0], : self.rgba.shape[1]]
        mask = (xs - cx) ** 2 + (ys - cy) ** 2 <= r * r
        self.rgba[mask, :3] = color
        return int(mask.sum())

    def set(self, x, y, color=(255, 255, 255)):
        self.rgba[y, x, :3] = color
        return self

    def to_buffer(self):
        return PixelBuffer.from_array(self.rgba)

    def bitmap(self):
        return (self.rgba[..., :3].max(axis=2) > 128).astype(np.uint8)


@pytest.fixture
def canvas():
    return Canvas
