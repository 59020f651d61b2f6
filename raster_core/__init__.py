"""
raster_core: Pure line-rasterization primitives.

Provides:
- types: Point, Segment, Pixel, Coverage, Sample, ShadedSample, Canvas
- ndc: Pixel-center normalization into [-1, 1]
- bresenham: Integer 8-connected rasterizer
- xiaolin_wu: Antialiased rasterizer with coverage splitting
- buffers: float32 vertex-array packing
- order_hash: Deterministic 64-bit fingerprints
"""

from .bresenham import bresenham_pixels, rasterize_integer
from .ndc import normalize
from .xiaolin_wu import rasterize_antialiased, wu_coverage

__all__ = [
    "bresenham_pixels",
    "normalize",
    "rasterize_antialiased",
    "rasterize_integer",
    "wu_coverage",
]
