"""
Vertex-array packing for a display consumer.

Samples become contiguous float32 arrays ready for upload:
- pack_samples: (n, 2) rows of x, y
- pack_shaded:  (n, 6) rows of x, y, r, g, b, coverage
"""

from typing import Iterable

import numpy as np

from .types import Sample, ShadedSample

SAMPLE_STRIDE = 2
SHADED_STRIDE = 6


def pack_samples(samples: Iterable[Sample]) -> np.ndarray:
    """Pack on/off samples into an (n, 2) float32 array."""
    rows = [tuple(s) for s in samples]
    if not rows:
        return np.zeros((0, SAMPLE_STRIDE), dtype=np.float32)
    return np.asarray(rows, dtype=np.float32)


def pack_shaded(samples: Iterable[ShadedSample]) -> np.ndarray:
    """Pack shaded samples into an (n, 6) float32 array."""
    rows = [tuple(s) for s in samples]
    if not rows:
        return np.zeros((0, SHADED_STRIDE), dtype=np.float32)
    return np.asarray(rows, dtype=np.float32)
