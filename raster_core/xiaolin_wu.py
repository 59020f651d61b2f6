"""
Xiaolin Wu antialiased rasterizer.

Every sampled column is split across the two secondary-axis pixels that
straddle the line's exact intersection, weighted by the fractional part of
that intersection.

Algorithm:
1. Orientation: steep iff |dy| > |dx|. The walk happens in (primary,
   secondary) coordinates; AxisFrame transposes once on entry and once on
   exit. Endpoints are ordered so primary0 <= primary1.
2. Gradient = d(secondary) / d(primary), or 1.0 when d(primary) == 0.
3. Endpoints: first column floor(p0), last column ceil(p1). The pair at
   each endpoint is scaled by gap = rfpart(p) of that endpoint.
4. Interior: columns strictly between the endpoint columns, intersection
   starting at the first endpoint's intersection + gradient.

Output order: first endpoint pair, second endpoint pair, interior pairs.
Very short segments can produce overlapping coverage near the endpoints;
that is kept as-is.
"""

import math
from dataclasses import dataclass
from typing import List, Tuple

from .ndc import normalize_pixel
from .types import MAGENTA, Canvas, Color, Coverage, ShadedSample

SplitPair = Tuple[Coverage, Coverage]


def fpart(x: float) -> float:
    """Fractional part via floor (fpart(-0.25) == 0.75)."""
    return x - math.floor(x)


def rfpart(x: float) -> float:
    """1 - fpart(x)."""
    return 1.0 - fpart(x)


@dataclass(frozen=True)
class AxisFrame:
    """
    Maps between pixel (x, y) and working (primary, secondary) coordinates.

    For steep lines the primary axis is y, so the transform is a transpose
    and is its own inverse.
    """
    steep: bool

    @classmethod
    def for_segment(cls, x0: float, y0: float, x1: float, y1: float) -> "AxisFrame":
        return cls(steep=abs(y1 - y0) > abs(x1 - x0))

    def to_working(self, x: float, y: float) -> Tuple[float, float]:
        return (y, x) if self.steep else (x, y)

    def to_pixel(self, primary: int, secondary: int, coverage: float) -> Coverage:
        if self.steep:
            return Coverage(secondary, primary, coverage)
        return Coverage(primary, secondary, coverage)


def split_pair(frame: AxisFrame, column: int, intersection: float,
               gap: float = 1.0) -> SplitPair:
    """
    Split one column's coverage across the two pixels straddling intersection.

    Lower pixel gets rfpart(intersection) * gap, upper gets
    fpart(intersection) * gap, so the pair sums to gap.
    """
    lower = math.floor(intersection)
    return (
        frame.to_pixel(column, lower, rfpart(intersection) * gap),
        frame.to_pixel(column, lower + 1, fpart(intersection) * gap),
    )


def _endpoint(frame: AxisFrame, primary: float, secondary: float,
              column: float, gradient: float) -> Tuple[SplitPair, float]:
    """Split pair for one endpoint snapped to column, plus its intersection."""
    intersection = secondary + gradient * (column - primary)
    gap = rfpart(primary)
    return split_pair(frame, int(column), intersection, gap), intersection


def wu_coverage(x0: float, y0: float, x1: float, y1: float) -> List[Coverage]:
    """
    Compute Xiaolin Wu coverage for a real-valued segment in pixel space.

    Args:
        x0, y0: Start point
        x1, y1: End point

    Returns:
        Coverage entries, two per sampled column. A zero-length segment
        returns four entries (the two endpoint pairs).
    """
    frame = AxisFrame.for_segment(x0, y0, x1, y1)
    p0, s0 = frame.to_working(x0, y0)
    p1, s1 = frame.to_working(x1, y1)
    if p0 > p1:
        p0, s0, p1, s1 = p1, s1, p0, s0

    dp = p1 - p0
    ds = s1 - s0
    gradient = 1.0 if dp == 0.0 else ds / dp

    first_column = math.floor(p0)
    last_column = math.ceil(p1)
    first_pair, intery = _endpoint(frame, p0, s0, first_column, gradient)
    last_pair, _ = _endpoint(frame, p1, s1, last_column, gradient)

    coverage = [*first_pair, *last_pair]

    intery += gradient
    for column in range(int(first_column) + 1, int(last_column)):
        coverage.extend(split_pair(frame, column, intery))
        intery += gradient

    return coverage


def rasterize_antialiased(x0: float, y0: float, x1: float, y1: float,
                          width: int, height: int,
                          color: Color = MAGENTA) -> List[ShadedSample]:
    """
    Rasterize a segment into normalized, colored, coverage-weighted samples.

    Args:
        x0, y0, x1, y1: Endpoints in pixel space (fractional allowed)
        width, height: Canvas dimensions (positive)
        color: Base RGB color copied onto every sample

    Returns:
        ShadedSamples in the order produced by wu_coverage

    Raises:
        ValueError: On non-positive dimensions
    """
    canvas = Canvas(width, height)
    r, g, b = color
    samples = []
    for cov in wu_coverage(x0, y0, x1, y1):
        nx, ny = normalize_pixel(cov.x, cov.y, canvas)
        samples.append(ShadedSample(nx, ny, r, g, b, cov.coverage))
    return samples
