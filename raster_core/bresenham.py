"""
Integer Bresenham rasterizer.

8-connected stepping with a single integer error term; floats only appear in
the final normalization of each visited pixel.

Algorithm:
1. dx = |x1 - x0|, dy = -|y1 - y0|, err = dx + dy
2. Emit current pixel; stop once it equals the end pixel (inclusive)
3. e2 = 2 * err; step x if e2 >= dy, step y if e2 <= dx (both = diagonal)
"""

from numbers import Integral
from typing import List

from .ndc import normalize_pixel
from .types import Canvas, Pixel, Sample


def bresenham_pixels(x0: int, y0: int, x1: int, y1: int) -> List[Pixel]:
    """
    Walk from (x0, y0) to (x1, y1) and return every visited pixel.

    Args:
        x0, y0: Start pixel
        x1, y1: End pixel

    Returns:
        Pixels in walk order, both endpoints included. A degenerate segment
        returns exactly one pixel.

    Raises:
        ValueError: If any endpoint coordinate is not an integer
    """
    for value in (x0, y0, x1, y1):
        if not isinstance(value, Integral):
            raise ValueError(f"Bresenham endpoints must be integers, got {value!r}")

    x, y = int(x0), int(y0)
    x1, y1 = int(x1), int(y1)

    dx = abs(x1 - x)
    dy = -abs(y1 - y)
    sx = 1 if x < x1 else -1
    sy = 1 if y < y1 else -1
    err = dx + dy

    pixels = []
    while True:
        pixels.append(Pixel(x, y))
        if x == x1 and y == y1:
            break

        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x += sx
        if e2 <= dx:
            err += dx
            y += sy

    return pixels


def rasterize_integer(x0: int, y0: int, x1: int, y1: int,
                      width: int, height: int) -> List[Sample]:
    """
    Rasterize an integer segment into normalized on/off samples.

    Args:
        x0, y0, x1, y1: Integer endpoints in pixel space
        width, height: Canvas dimensions (positive)

    Returns:
        One Sample per visited pixel, first and last being the normalized
        endpoints.

    Raises:
        ValueError: On non-positive dimensions or non-integer endpoints
    """
    canvas = Canvas(width, height)
    return [Sample(*normalize_pixel(p.x, p.y, canvas))
            for p in bresenham_pixels(x0, y0, x1, y1)]
