"""
Animated sine curve sampled once per pixel column.

Unlike the segment rasterizers, the curve is already sampled at every column,
so each point maps directly to one on/off sample and one Wu split pair
(lower pixel floor(y), upper pixel floor(y) + 1).
"""

import math
from typing import List, Sequence, Tuple

from raster_core.ndc import normalize
from raster_core.types import MAGENTA, Canvas, Color, Point, Sample, ShadedSample
from raster_core.xiaolin_wu import fpart


def sine_wave_points(x_start: int, x_end: int, baseline: float, amplitude: float,
                     frequency: float, phase: float) -> List[Point]:
    """
    One point per integer column in [x_start, x_end].

    y = baseline + amplitude * sin(frequency * x + phase)

    Raises:
        ValueError: If x_end < x_start
    """
    if x_end < x_start:
        raise ValueError(f"Empty sine range: x_start={x_start} > x_end={x_end}")

    return [
        Point(float(x), baseline + amplitude * math.sin(frequency * x + phase))
        for x in range(x_start, x_end + 1)
    ]


def sample_curve(points: Sequence[Point], width: int, height: int,
                 color: Color = MAGENTA) -> Tuple[List[Sample], List[ShadedSample]]:
    """
    Turn per-column curve points into both sample kinds.

    Args:
        points: Curve points, one per column
        width, height: Canvas dimensions (positive)
        color: Base color for the shaded samples

    Returns:
        (samples, shaded): one Sample per point at its exact (unrounded)
        position, and two ShadedSamples per point whose coverages sum to 1.
    """
    canvas = Canvas(width, height)
    r, g, b = color

    samples = []
    shaded = []
    for point in points:
        nx = normalize(point.x, canvas.width)
        samples.append(Sample(nx, normalize(point.y, canvas.height)))

        lower = math.floor(point.y)
        frac = fpart(point.y)
        shaded.append(ShadedSample(nx, normalize(lower, canvas.height), r, g, b, 1.0 - frac))
        shaded.append(ShadedSample(nx, normalize(lower + 1, canvas.height), r, g, b, frac))

    return samples, shaded
