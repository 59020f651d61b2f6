"""
Deterministic fingerprints for sample sequences.

Provides:
- hash64: SHA-256 over canonical JSON, truncated to a 64-bit int
- samples_digest: hash64 of a sample sequence with floats rounded

Python's built-in hash() is salted per process, so it is never used here.
"""

import hashlib
import json
from typing import Any, Iterable


def hash64(obj: Any) -> int:
    """
    Deterministic 64-bit hash of a JSON-serializable object.

    Serialization is canonical (sorted keys, compact separators), so dict
    ordering does not affect the result.

    Examples:
        >>> hash64([1, 2, 3]) == hash64([1, 2, 3])
        True
        >>> hash64({"a": 1, "b": 2}) == hash64({"b": 2, "a": 1})
        True
    """
    canonical_json = json.dumps(obj, sort_keys=True, separators=(",", ":"))
    digest = hashlib.sha256(canonical_json.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], byteorder="big", signed=False)


def samples_digest(samples: Iterable[Iterable[float]], ndigits: int = 6) -> int:
    """
    Fingerprint a sequence of samples.

    Each sample is unpacked to its tuple form and every component is rounded
    to ndigits, so sub-ulp noise does not change the digest. Order matters.
    """
    rows = [[round(float(v), ndigits) for v in sample] for sample in samples]
    return hash64(rows)
