"""
Radial fan of segments for stress-testing line orientations.

One segment per angle 0, step, 2*step, ... strictly below 360 degrees, each
running from the center out to the given radius.
"""

import math
from typing import List

from raster_core.types import Point, Segment


def radial_segments(cx: float, cy: float, radius: float,
                    angle_step_degrees: float) -> List[Segment]:
    """
    Build the radial fan around (cx, cy).

    Args:
        cx, cy: Center point in pixel space
        radius: Segment length (positive)
        angle_step_degrees: Angular increment (positive)

    Returns:
        Segments ordered by increasing angle

    Raises:
        ValueError: If radius or angle step is not positive

    Examples:
        >>> [tuple(round(v) for v in s) for s in radial_segments(0, 0, 10, 90)]
        [(0, 0, 10, 0), (0, 0, 0, 10), (0, 0, -10, 0), (0, 0, 0, -10)]
    """
    if angle_step_degrees <= 0:
        raise ValueError(f"Angle step must be positive, got {angle_step_degrees}")
    if radius <= 0:
        raise ValueError(f"Radius must be positive, got {radius}")

    center = Point(cx, cy)
    segments = []
    index = 0
    # Multiply rather than accumulate so float steps do not drift past 360
    while index * angle_step_degrees < 360:
        theta = math.radians(index * angle_step_degrees)
        end = Point(cx + radius * math.cos(theta), cy + radius * math.sin(theta))
        segments.append(Segment(center, end))
        index += 1

    return segments
