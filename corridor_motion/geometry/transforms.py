from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from scipy.spatial.transform import Rotation as R

Point2D = np.ndarray
Vector2D = np.ndarray


def _freeze(values: np.ndarray) -> np.ndarray:
    values.flags.writeable = False
    return values


def _rotation_about_z(angle: float) -> R:
    return R.from_rotvec(np.array([0.0, 0.0, float(angle)]))


def _lift(points: np.ndarray) -> np.ndarray:
    # SciPy rotations act on 3-vectors; the plane sits at z = 0.
    return np.hstack([points, np.zeros((points.shape[0], 1), dtype=float)])


def as_point(values: Sequence[float] | np.ndarray) -> Point2D:
    """Return ``values`` as a read-only float array of shape ``(2,)``."""

    point = np.array(values, dtype=float)
    if point.shape != (2,):
        raise ValueError(f"Expected an (x, y) pair, got shape {point.shape}.")
    if not np.all(np.isfinite(point)):
        raise ValueError("Point coordinates must be finite.")
    return _freeze(point)


def rotate(point: Sequence[float] | np.ndarray, angle: float) -> Point2D:
    """Rotate ``point`` counter-clockwise about the origin by ``angle`` radians."""

    xy = np.asarray(point, dtype=float).reshape(1, 2)
    rotated = _rotation_about_z(angle).apply(_lift(xy))
    return _freeze(rotated[0, :2].copy())


def rotate_points(points: Sequence[Sequence[float]] | np.ndarray, angle: float) -> np.ndarray:
    """Rotate every row of an ``(N, 2)`` array about the origin."""

    xy = np.asarray(points, dtype=float).reshape(-1, 2)
    rotated = _rotation_about_z(angle).apply(_lift(xy))
    return _freeze(np.ascontiguousarray(rotated[:, :2]))


def translate(point: Sequence[float] | np.ndarray, vector: Sequence[float] | np.ndarray) -> Point2D:
    return _freeze(np.asarray(point, dtype=float) + np.asarray(vector, dtype=float))


def negate(vector: Sequence[float] | np.ndarray) -> Vector2D:
    return _freeze(-np.asarray(vector, dtype=float))


def norm(point: Sequence[float] | np.ndarray) -> float:
    return float(np.linalg.norm(np.asarray(point, dtype=float)))
