"""
Unit tests for raster_core/bresenham.py.

Test Coverage:
1. Known-answer pixel walks (horizontal, vertical, diagonal, shallow)
2. Degenerate segments (exactly one pixel)
3. Mathematical properties: 8-connectivity, pixel count, endpoints
4. Normalized output (rasterize_integer)
5. Contract violations (non-integer endpoints, bad dimensions)

All step decisions are integer-only; no tolerance needed at pixel level.
"""

import numpy as np
import pytest

from raster_core.bresenham import bresenham_pixels, rasterize_integer
from raster_core.ndc import normalize
from raster_core.types import Pixel, Sample

SEGMENTS = [
    (0, 0, 7, 3),
    (0, 0, 3, 7),
    (7, 3, 0, 0),
    (-5, 4, 6, -2),
    (10, 10, 10, -4),
    (-3, -3, -12, -3),
    (2, 9, 9, 2),
    (0, 0, 1, 5),
]


# =============================================================================
# Known-Answer Tests
# =============================================================================

class TestBresenhamKnownAnswers:
    """Pre-computed pixel walks."""

    def test_bres_01_degenerate(self):
        """BRES-01: Identical endpoints give exactly one pixel"""
        assert bresenham_pixels(0, 0, 0, 0) == [Pixel(0, 0)]
        assert bresenham_pixels(-4, 17, -4, 17) == [Pixel(-4, 17)]

    def test_bres_02_horizontal(self):
        """BRES-02: Horizontal line walks along x only"""
        assert bresenham_pixels(0, 0, 3, 0) == [
            Pixel(0, 0), Pixel(1, 0), Pixel(2, 0), Pixel(3, 0),
        ]

    def test_bres_03_vertical_downward(self):
        """BRES-03: Vertical line in the negative direction"""
        assert bresenham_pixels(2, 3, 2, 0) == [
            Pixel(2, 3), Pixel(2, 2), Pixel(2, 1), Pixel(2, 0),
        ]

    def test_bres_04_diagonal(self):
        """BRES-04: 45 degree line steps both axes every iteration"""
        assert bresenham_pixels(0, 0, 3, 3) == [
            Pixel(0, 0), Pixel(1, 1), Pixel(2, 2), Pixel(3, 3),
        ]

    def test_bres_05_shallow(self):
        """BRES-05: Shallow slope 2/5"""
        # err trace: 3 -> 1 -> 4 -> 2 -> 5 -> 3
        assert bresenham_pixels(0, 0, 5, 2) == [
            Pixel(0, 0), Pixel(1, 0), Pixel(2, 1),
            Pixel(3, 1), Pixel(4, 2), Pixel(5, 2),
        ]

    def test_bres_06_shallow_reversed(self):
        """BRES-06: Reversed walk of BRES-05 visits the same pixels backwards"""
        forward = bresenham_pixels(0, 0, 5, 2)
        backward = bresenham_pixels(5, 2, 0, 0)
        assert backward == list(reversed(forward))

    def test_bres_07_unpacking(self):
        """BRES-07: Pixels unpack as (x, y)"""
        x, y = bresenham_pixels(4, 5, 4, 5)[0]
        assert (x, y) == (4, 5)

    def test_bres_08_numpy_integers(self):
        """BRES-08: numpy integer endpoints are accepted"""
        pixels = bresenham_pixels(np.int32(0), np.int64(0), np.int16(2), np.int8(1))
        assert pixels[0] == Pixel(0, 0)
        assert pixels[-1] == Pixel(2, 1)


# =============================================================================
# Mathematical Properties
# =============================================================================

class TestBresenhamMathematical:
    """Invariants that hold for every integer segment."""

    def test_math_01_endpoints(self):
        """MATH-BRES-01: First and last pixels are the endpoints"""
        for x0, y0, x1, y1 in SEGMENTS:
            pixels = bresenham_pixels(x0, y0, x1, y1)
            assert pixels[0] == Pixel(x0, y0)
            assert pixels[-1] == Pixel(x1, y1)

    def test_math_02_eight_connected(self):
        """MATH-BRES-02: Consecutive pixels are distinct 8-neighbors"""
        for segment in SEGMENTS:
            pixels = bresenham_pixels(*segment)
            for a, b in zip(pixels, pixels[1:]):
                assert max(abs(a.x - b.x), abs(a.y - b.y)) == 1, \
                    f"{a} -> {b} is not an 8-neighbor step in {segment}"

    def test_math_03_pixel_count(self):
        """MATH-BRES-03: Exactly max(|dx|, |dy|) + 1 pixels"""
        for x0, y0, x1, y1 in SEGMENTS:
            pixels = bresenham_pixels(x0, y0, x1, y1)
            assert len(pixels) == max(abs(x1 - x0), abs(y1 - y0)) + 1

    def test_math_04_no_duplicates(self):
        """MATH-BRES-04: No pixel is visited twice"""
        for segment in SEGMENTS:
            pixels = bresenham_pixels(*segment)
            assert len(set(pixels)) == len(pixels)

    def test_math_05_monotonic(self):
        """MATH-BRES-05: Each axis moves monotonically toward the end"""
        for x0, y0, x1, y1 in SEGMENTS:
            pixels = bresenham_pixels(x0, y0, x1, y1)
            xs = [p.x for p in pixels]
            ys = [p.y for p in pixels]
            assert xs == sorted(xs, reverse=x1 < x0)
            assert ys == sorted(ys, reverse=y1 < y0)

    def test_math_06_determinism(self):
        """MATH-BRES-06: 100 runs produce identical walks"""
        expected = bresenham_pixels(-5, 4, 6, -2)
        for _ in range(100):
            assert bresenham_pixels(-5, 4, 6, -2) == expected


# =============================================================================
# Normalized Output
# =============================================================================

class TestRasterizeInteger:
    """rasterize_integer: visited pixels mapped to normalized samples."""

    def test_ri_01_degenerate_single_sample(self):
        """RI-01: (0,0,0,0) on 100x100 gives one sample at normalize(0, 100)"""
        samples = rasterize_integer(0, 0, 0, 0, 100, 100)
        assert len(samples) == 1
        assert samples[0] == Sample(normalize(0, 100), normalize(0, 100))

    def test_ri_02_endpoints_normalized(self):
        """RI-02: First/last samples are the normalized input endpoints"""
        for x0, y0, x1, y1 in SEGMENTS:
            samples = rasterize_integer(x0, y0, x1, y1, 64, 48)
            assert samples[0] == Sample(normalize(x0, 64), normalize(y0, 48))
            assert samples[-1] == Sample(normalize(x1, 64), normalize(y1, 48))

    def test_ri_03_one_sample_per_pixel(self):
        """RI-03: Sample count equals visited pixel count"""
        for segment in SEGMENTS:
            assert len(rasterize_integer(*segment, 32, 32)) == len(bresenham_pixels(*segment))

    def test_ri_04_tuple_form(self):
        """RI-04: Samples unpack as (x, y)"""
        x, y = rasterize_integer(9, 9, 9, 9, 10, 10)[0]
        assert abs(x - 0.9) < 1e-12
        assert abs(y - 0.9) < 1e-12

    def test_ri_05_non_integer_rejected(self):
        """RI-05: Float endpoints fail fast (the walk could never terminate)"""
        with pytest.raises(ValueError):
            bresenham_pixels(0.5, 0, 3, 0)
        with pytest.raises(ValueError):
            rasterize_integer(0, 0, 3.0, 1, 10, 10)

    def test_ri_06_bad_dimensions_rejected(self):
        """RI-06: Non-positive dimensions fail before any output"""
        with pytest.raises(ValueError):
            rasterize_integer(0, 0, 3, 3, 0, 10)
        with pytest.raises(ValueError):
            rasterize_integer(0, 0, 3, 3, 10, -1)
