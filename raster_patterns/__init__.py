"""
raster_patterns: Line patterns fed through both rasterizers.

Pattern families:
- radial.py: Fan of segments around a center point
- sine_wave.py: Per-column sampled sine curve
- frame.py: One display frame for a named pattern
"""

from .frame import Frame, build_frame
from .radial import radial_segments

__all__ = ["Frame", "build_frame", "radial_segments"]
