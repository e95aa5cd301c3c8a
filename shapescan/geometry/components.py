# shapescan/geometry/components.py

import logging
from typing import Iterator, List, Tuple

import numpy as np

logger = logging.getLogger(__name__)

Blob = List[Tuple[int, int]]

MIN_BLOB_PIXELS = 80

# Order matters: it fixes the pixel order inside each blob.
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (1, 0),
    (-1, 0),
    (0, 1),
    (0, -1),
    (1, 1),
    (1, -1),
    (-1, 1),
    (-1, -1),
)


def _flood_fill(bits: List[int], visited: bytearray, width: int, height: int, sx: int, sy: int) -> Blob:
    stack = [(sx, sy)]
    visited[sy * width + sx] = 1
    pixels: Blob = []
    while stack:
        cx, cy = stack.pop()
        pixels.append((cx, cy))
        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = cx + dx, cy + dy
            if nx < 0 or ny < 0 or nx >= width or ny >= height:
                continue
            ni = ny * width + nx
            if not visited[ni] and bits[ni] == 1:
                visited[ni] = 1
                stack.append((nx, ny))
    return pixels


def extract_blobs(bitmap: np.ndarray, min_pixels: int = MIN_BLOB_PIXELS) -> Iterator[Blob]:
    """
    Yield 8-connected foreground regions of a 0/1 (H, W) bitmap in row-major
    seed order.

    Seeds are taken from the interior only (the outer 1px frame is skipped),
    but flood fill may extend into that frame. Regions with fewer than
    `min_pixels` pixels are dropped; their pixels stay visited.
    """
    height, width = bitmap.shape
    bits = bitmap.ravel().tolist()
    visited = bytearray(width * height)
    rejected = 0

    for y in range(1, height - 1):
        row = y * width
        for x in range(1, width - 1):
            i = row + x
            if bits[i] != 1 or visited[i]:
                continue
            blob = _flood_fill(bits, visited, width, height, x, y)
            if len(blob) < min_pixels:
                rejected += 1
                continue
            yield blob

    if rejected:
        logger.debug("dropped %d blobs below %d pixels", rejected, min_pixels)
