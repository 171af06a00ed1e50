"""Image-processing data types and matrix type helpers."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

_TYPE_NAMES = {
    np.dtype(np.uint8): "CV_8U",
    np.dtype(np.int8): "CV_8S",
    np.dtype(np.uint16): "CV_16U",
    np.dtype(np.int16): "CV_16S",
    np.dtype(np.int32): "CV_32S",
    np.dtype(np.float32): "CV_32F",
    np.dtype(np.float64): "CV_64F",
}


@dataclass
class KeyPoint:
    """A detected image feature."""

    x: float
    y: float
    size: float = 0.0
    angle: float = -1.0
    response: float = 0.0
    octave: int = 0
    class_id: int = -1


def _channels(m: np.ndarray) -> int:
    return 1 if m.ndim <= 2 else int(np.prod(m.shape[2:]))


def type_name(m) -> str:
    """Readable element type of a single-channel matrix, or ``""``."""
    m = np.asarray(m)
    if _channels(m) != 1:
        return ""
    return _TYPE_NAMES.get(m.dtype, "")


def vectorize(m) -> np.ndarray:
    """The elements of a vector or 2-D matrix in row-major order, as floats."""
    m = np.asarray(m)
    if not type_name(m):
        raise TypeError(f"unsupported matrix type: {m.dtype} x{_channels(m)}")
    return m.astype(np.float64).ravel()