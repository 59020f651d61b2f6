"""
Per-frame composition of a pattern into both rasterizers.

A frame is everything a display layer needs for one redraw: the on/off
samples for the Bresenham panels and the shaded samples for the Wu panels.
The active pattern is a plain argument; any toggle state lives with the
caller.

Patterns:
- "sine": animated sine curve, one sample column per pixel
- "radial": fan of segments from the canvas center
"""

import math
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from raster_core.bresenham import rasterize_integer
from raster_core.buffers import pack_samples, pack_shaded
from raster_core.types import MAGENTA, Canvas, Color, Point, Sample, ShadedSample
from raster_core.xiaolin_wu import rasterize_antialiased

from .radial import radial_segments
from .sine_wave import sample_curve, sine_wave_points

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720

SINE_MARGIN = 50
SINE_AMPLITUDE = 200.0  # pixels
SINE_FREQUENCY = 0.01  # radians per pixel

RADIAL_RADIUS = 800
ANGLE_STEP = 15  # degrees

PATTERNS = ("sine", "radial")


@dataclass(frozen=True)
class Frame:
    """Both sample sequences for one pattern on one canvas."""
    pattern: str
    canvas: Canvas
    samples: List[Sample]
    shaded: List[ShadedSample]

    def vertex_arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        """(n, 2) on/off vertices and (m, 6) shaded vertices, float32."""
        return pack_samples(self.samples), pack_shaded(self.shaded)


def round_half_away(value: float) -> int:
    """Round to nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def build_radial_frame(canvas: Canvas, center: Point, radius: float = RADIAL_RADIUS,
                       angle_step: float = ANGLE_STEP, color: Color = MAGENTA) -> Frame:
    """
    Rasterize the radial fan with both algorithms.

    The integer rasterizer needs integer endpoints, so they are rounded; the
    antialiased rasterizer gets the raw float endpoints so its fractional
    coverage stays exact.
    """
    samples: List[Sample] = []
    shaded: List[ShadedSample] = []

    for segment in radial_segments(center.x, center.y, radius, angle_step):
        x0, y0, x1, y1 = segment
        samples.extend(rasterize_integer(
            round_half_away(x0), round_half_away(y0),
            round_half_away(x1), round_half_away(y1),
            canvas.width, canvas.height,
        ))
        shaded.extend(rasterize_antialiased(
            x0, y0, x1, y1, canvas.width, canvas.height, color,
        ))

    return Frame("radial", canvas, samples, shaded)


def build_sine_frame(canvas: Canvas, phase: float = 0.0, color: Color = MAGENTA,
                     margin: int = SINE_MARGIN, amplitude: float = SINE_AMPLITUDE,
                     frequency: float = SINE_FREQUENCY) -> Frame:
    """Sample the sine curve across the canvas, centered vertically."""
    points = sine_wave_points(
        margin, canvas.width - margin, canvas.height / 2, amplitude, frequency, phase,
    )
    samples, shaded = sample_curve(points, canvas.width, canvas.height, color)
    return Frame("sine", canvas, samples, shaded)


def build_frame(pattern: str, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT,
                phase: float = 0.0, color: Color = MAGENTA,
                radius: float = RADIAL_RADIUS, angle_step: float = ANGLE_STEP) -> Frame:
    """
    Build one frame for the named pattern.

    Args:
        pattern: "sine" or "radial"
        width, height: Canvas dimensions (positive)
        phase: Sine animation phase (ignored by "radial")
        color: Base color for shaded samples
        radius, angle_step: Radial fan parameters (ignored by "sine")

    Returns:
        Frame with both sample sequences

    Raises:
        ValueError: Unknown pattern or invalid dimensions/parameters
    """
    canvas = Canvas(width, height)

    if pattern == "sine":
        return build_sine_frame(canvas, phase, color)
    elif pattern == "radial":
        center = Point(float(width // 2), float(height // 2))
        return build_radial_frame(canvas, center, radius, angle_step, color)
    else:
        raise ValueError(f"Unknown pattern: {pattern}")
