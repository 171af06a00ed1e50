"""Matrix helpers."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np


def remove_rows(m, rows: Iterable[int]) -> np.ndarray:
    """Return ``m`` without the given rows, keeping the order of the others.

    Indices outside ``[0, rows)`` are ignored and repeated ones count once.
    """
    m = np.asarray(m)
    valid = sorted({r for r in rows if 0 <= r < m.shape[0]})
    if not valid:
        return m.copy()
    return np.delete(m, valid, axis=0)