"""Homogeneous 4x4 transformations: rotations, translations and inverses."""

from __future__ import annotations

import math

import numpy as np


def _homogeneous(rotation, translation, dtype=np.float64) -> np.ndarray:
    result = np.eye(4, dtype=dtype)
    result[:3, :3] = rotation
    result[:3, 3] = translation
    return result


def rotvec(axis, theta: float) -> np.ndarray:
    """Rotation of ``theta`` radians around ``axis`` as a 4x4 transformation."""
    axis = np.asarray(axis, dtype=np.float64).ravel()
    if axis.size != 3:
        raise ValueError(f"axis must have 3 components, got {axis.size}")
    norm = float(np.linalg.norm(axis))
    if norm == 0.0:
        raise ValueError("rotation axis must not be zero")
    x, y, z = axis / norm

    c = math.cos(theta)
    s = math.sin(theta)
    v = 1.0 - c

    rotation = np.array(
        [
            [x * x * v + c, x * y * v - z * s, x * z * v + y * s],
            [x * y * v + z * s, y * y * v + c, y * z * v - x * s],
            [x * z * v - y * s, y * z * v + x * s, z * z * v + c],
        ]
    )
    return _homogeneous(rotation, (0.0, 0.0, 0.0))


def transl(x: float, y: float, z: float) -> np.ndarray:
    """Pure translation as a 4x4 transformation."""
    return _homogeneous(np.eye(3), (x, y, z))


def rotx(theta: float, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> np.ndarray:
    """Rotation around the x axis, optionally followed by a translation."""
    c, s = math.cos(theta), math.sin(theta)
    return _homogeneous([[1, 0, 0], [0, c, -s], [0, s, c]], (x, y, z))


def roty(theta: float, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> np.ndarray:
    """Rotation around the y axis, optionally followed by a translation."""
    c, s = math.cos(theta), math.sin(theta)
    return _homogeneous([[c, 0, s], [0, 1, 0], [-s, 0, c]], (x, y, z))


def rotz(theta: float, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> np.ndarray:
    """Rotation around the z axis, optionally followed by a translation."""
    c, s = math.cos(theta), math.sin(theta)
    return _homogeneous([[c, -s, 0], [s, c, 0], [0, 0, 1]], (x, y, z))


def inv(a_t_b) -> np.ndarray:
    """Inverse of a rigid transformation: ``[R^t | -R^t t]``."""
    a_t_b = np.asarray(a_t_b)
    dtype = np.float32 if a_t_b.dtype == np.float32 else np.float64
    rotation = a_t_b[:3, :3].astype(np.float64)
    translation = a_t_b[:3, 3].astype(np.float64)
    rt = rotation.T
    return _homogeneous(rt, -rt @ translation, dtype=dtype)


def _vector_to_matrix(r: np.ndarray) -> np.ndarray:
    theta = float(np.linalg.norm(r))
    if theta < 1e-15:
        return np.eye(3)
    k = r / theta
    kx = np.array([[0.0, -k[2], k[1]], [k[2], 0.0, -k[0]], [-k[1], k[0], 0.0]])
    return (
        math.cos(theta) * np.eye(3)
        + (1.0 - math.cos(theta)) * np.outer(k, k)
        + math.sin(theta) * kx
    )


def _matrix_to_vector(rotation: np.ndarray) -> np.ndarray:
    diagonal_sum = float(rotation[0, 0] + rotation[1, 1] + rotation[2, 2])
    cos_theta = min(max((diagonal_sum - 1.0) / 2.0, -1.0), 1.0)
    theta = math.acos(cos_theta)
    if theta < 1e-12:
        return np.zeros(3)
    sin_theta = math.sin(theta)
    if sin_theta < 1e-6:
        # theta close to pi: (R + I) / 2 == n n^T
        b = (rotation + np.eye(3)) / 2.0
        i = int(np.argmax(np.diag(b)))
        axis = b[i, :] / math.sqrt(max(b[i, i], 1e-300))
        axis /= np.linalg.norm(axis)
        return axis * theta
    axis = np.array(
        [
            rotation[2, 1] - rotation[1, 2],
            rotation[0, 2] - rotation[2, 0],
            rotation[1, 0] - rotation[0, 1],
        ]
    ) / (2.0 * sin_theta)
    return axis * theta


def rodrigues(r) -> np.ndarray:
    """Convert a rotation vector to a 3x3 matrix, or a 3x3 matrix to a 3x1 vector."""
    r = np.asarray(r)
    dtype = np.float32 if r.dtype == np.float32 else np.float64
    if r.shape == (3, 3):
        return _matrix_to_vector(r.astype(np.float64)).reshape(3, 1).astype(dtype)
    flat = r.astype(np.float64).ravel()
    if flat.size != 3:
        raise ValueError(f"expected a 3x3 matrix or a 3-vector, got shape {r.shape}")
    return _vector_to_matrix(flat).astype(dtype)


def compose_rt(r, t) -> np.ndarray:
    """Build a 4x4 transformation from a rotation and a translation.

    ``r`` is a 3x3 matrix or a rotation vector; ``t`` has 3 components, or 4
    in homogeneous form, in which case it is divided by its last component.
    """
    r = np.asarray(r)
    t = np.asarray(t)
    rotation = r if r.shape == (3, 3) else rodrigues(r)
    dtype = np.float32 if rotation.dtype == np.float32 else np.float64

    flat = t.astype(np.float64).ravel()
    if flat.size not in (3, 4):
        raise ValueError(f"translation must have 3 or 4 components, got {flat.size}")
    translation = flat[:3] / flat[3] if flat.size == 4 else flat
    return _homogeneous(rotation.astype(np.float64), translation, dtype=dtype)


def decompose_rt(transform, homogeneous: bool = True) -> tuple[np.ndarray, np.ndarray]:
    """Split a 4x4 transformation into its 3x3 rotation and its translation.

    The translation is the whole 4x1 last column when ``homogeneous``,
    otherwise its first three rows as a 3x1 vector.
    """
    transform = np.asarray(transform)
    if transform.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {transform.shape}")
    rotation = transform[:3, :3].copy()
    translation = (transform[:, 3:4] if homogeneous else transform[:3, 3:4]).copy()
    return rotation, translation