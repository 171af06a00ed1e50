"""Geometry helpers."""

from __future__ import annotations

import numpy as np

from dutils.cvtypes import vectorize


def _is_vector(m: np.ndarray) -> bool:
    return m.ndim <= 1 or (m.ndim == 2 and (m.shape[0] == 1 or m.shape[1] == 1))


def sq_distance(a, b) -> float:
    """Squared Euclidean distance between two row or column vectors."""
    a = np.asarray(a)
    b = np.asarray(b)
    if not (_is_vector(a) and _is_vector(b)):
        raise ValueError("arguments must be row or column vectors")
    if a.size != b.size:
        raise ValueError(f"vector sizes differ: {a.size} and {b.size}")
    diff = vectorize(a) - vectorize(b)
    return float(np.dot(diff, diff))