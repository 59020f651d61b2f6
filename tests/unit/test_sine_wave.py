"""
Unit tests for raster_patterns/sine_wave.py.

Covers:
- One point per column, inclusive range
- Known curve values at phase 0 and pi/2
- Per-point Wu split (lower floor(y), upper floor(y) + 1, sums to 1)
- Unrounded on/off samples
"""

import math

import pytest

from raster_core.ndc import normalize
from raster_core.types import Point
from raster_patterns.sine_wave import sample_curve, sine_wave_points


class TestSineWavePoints:

    def test_sine_01_inclusive_range(self):
        """SINE-01: x_start..x_end inclusive, one point per column"""
        points = sine_wave_points(50, 1230, 360.0, 200.0, 0.01, 0.0)
        assert len(points) == 1181
        assert points[0].x == 50.0
        assert points[-1].x == 1230.0

    def test_sine_02_known_values(self):
        """SINE-02: y = baseline + amplitude * sin(frequency * x + phase)"""
        points = sine_wave_points(0, 2, 100.0, 10.0, 0.5, 0.0)
        assert points[0] == Point(0.0, 100.0)
        assert abs(points[2].y - (100.0 + 10.0 * math.sin(1.0))) < 1e-12

    def test_sine_03_phase_shift(self):
        """SINE-03: Phase pi/2 puts the crest at x = 0"""
        points = sine_wave_points(0, 0, 100.0, 10.0, 0.5, math.pi / 2)
        assert abs(points[0].y - 110.0) < 1e-12

    def test_sine_04_single_column(self):
        assert len(sine_wave_points(7, 7, 0.0, 1.0, 1.0, 0.0)) == 1

    def test_sine_05_inverted_range_rejected(self):
        with pytest.raises(ValueError):
            sine_wave_points(10, 9, 0.0, 1.0, 1.0, 0.0)


class TestSampleCurve:

    def test_curve_01_counts(self):
        """CURVE-01: One on/off sample and two shaded samples per point"""
        points = sine_wave_points(0, 99, 50.0, 20.0, 0.1, 0.3)
        samples, shaded = sample_curve(points, 100, 100)
        assert len(samples) == 100
        assert len(shaded) == 200

    def test_curve_02_unrounded_samples(self):
        """CURVE-02: On/off samples keep the exact fractional y"""
        samples, _ = sample_curve([Point(3.0, 4.25)], 10, 10)
        assert samples[0].x == normalize(3.0, 10)
        assert samples[0].y == normalize(4.25, 10)

    def test_curve_03_split(self):
        """CURVE-03: y = 4.25 splits 0.75 onto row 4 and 0.25 onto row 5"""
        _, shaded = sample_curve([Point(3.0, 4.25)], 10, 10, (0.0, 1.0, 0.0))
        lower, upper = shaded
        assert (lower.y, lower.coverage) == (normalize(4, 10), 0.75)
        assert (upper.y, upper.coverage) == (normalize(5, 10), 0.25)
        assert lower.x == upper.x == normalize(3.0, 10)
        assert lower.color == upper.color == (0.0, 1.0, 0.0)

    def test_curve_04_pairs_sum_to_one(self):
        """CURVE-04: Every split pair sums to 1"""
        points = sine_wave_points(0, 199, 60.0, 45.0, 0.037, 1.1)
        _, shaded = sample_curve(points, 200, 120)
        for i in range(0, len(shaded), 2):
            assert abs(shaded[i].coverage + shaded[i + 1].coverage - 1.0) < 1e-9

    def test_curve_05_negative_y(self):
        """CURVE-05: Floor-based split below the canvas origin"""
        _, shaded = sample_curve([Point(0.0, -0.25)], 10, 10)
        assert shaded[0].y == normalize(-1, 10)
        assert shaded[0].coverage == 0.25
        assert shaded[1].y == normalize(0, 10)
        assert shaded[1].coverage == 0.75

    def test_curve_06_bad_dimensions_rejected(self):
        with pytest.raises(ValueError):
            sample_curve([Point(0.0, 0.0)], 0, 10)
