"""
Core type definitions for the line rasterizers.

Pixel-space inputs (Point, Segment), pixel-space results (Pixel, Coverage)
and normalized-device results (Sample, ShadedSample). All types are frozen
and unpack as plain tuples so callers can treat results as
(x, y) / (x, y, r, g, b, coverage) rows.
"""

from dataclasses import dataclass

# RGB triple, each channel in [0, 1]
Color = tuple[float, float, float]

MAGENTA: Color = (1.0, 0.0, 1.0)


@dataclass(frozen=True, order=True)
class Point:
    """Real-valued position in pixel space."""
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = point"""
        return iter((self.x, self.y))


@dataclass(frozen=True)
class Segment:
    """
    Line segment from start to end.

    Unpacks as (x0, y0, x1, y1), the layout the rasterizers take.
    """
    start: Point
    end: Point

    def __iter__(self):
        return iter((self.start.x, self.start.y, self.end.x, self.end.y))

    def reversed(self) -> "Segment":
        return Segment(self.end, self.start)


@dataclass(frozen=True, order=True)
class Pixel:
    """Integer pixel index (x = column, y = row)."""
    x: int
    y: int

    def __iter__(self):
        return iter((self.x, self.y))


@dataclass(frozen=True, order=True)
class Coverage:
    """Pixel index plus the fraction of it covered by the line."""
    x: int
    y: int
    coverage: float

    def __iter__(self):
        return iter((self.x, self.y, self.coverage))


@dataclass(frozen=True)
class Sample:
    """Normalized device coordinate of an on/off pixel."""
    x: float
    y: float

    def __iter__(self):
        return iter((self.x, self.y))


@dataclass(frozen=True)
class ShadedSample:
    """
    Normalized device coordinate with color and coverage.

    Field order matches the interleaved vertex layout:
    position (2) + color (3) + coverage (1).
    """
    x: float
    y: float
    r: float
    g: float
    b: float
    coverage: float

    def __iter__(self):
        return iter((self.x, self.y, self.r, self.g, self.b, self.coverage))

    @property
    def color(self) -> Color:
        return (self.r, self.g, self.b)


@dataclass(frozen=True)
class Canvas:
    """
    Target surface dimensions in pixels.

    Both dimensions must be positive; they are the denominators of the
    normalization mapping.
    """
    width: int
    height: int

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Canvas dimensions must be positive, got {self.width}x{self.height}"
            )
