"""Small 3D vector kernel: normalisation, Rodrigues rotation, and alignment.

Plain arithmetic (add, subtract, scale, dot, cross, magnitude) is done
directly with numpy; this module only holds the operations that need a
guard or a closed-form formula.
"""

from __future__ import annotations

import numpy as np

from kekule._constants import GEOMETRY_EPSILON

X_AXIS = np.array([1.0, 0.0, 0.0])
Y_AXIS = np.array([0.0, 1.0, 0.0])
Z_AXIS = np.array([0.0, 0.0, 1.0])


def magnitude(v: np.ndarray) -> float:
    """Euclidean length of *v*."""
    return float(np.linalg.norm(v))


def normalise(v: np.ndarray, fallback: np.ndarray = Y_AXIS) -> np.ndarray:
    """Return *v* scaled to unit length.

    Vectors shorter than ``1e-12`` have no direction; a copy of
    *fallback* is returned instead so callers never see NaN.
    """
    v = np.asarray(v, dtype=float)
    length = np.linalg.norm(v)
    if length < 1e-12:
        return np.array(fallback, dtype=float)
    return v / length


def rotate(
    points: np.ndarray,
    axis: np.ndarray,
    angle: float,
) -> np.ndarray:
    """Rotate one point or an ``(n, 3)`` array of points about *axis*.

    Applies Rodrigues' rotation formula::

        v' = v cos(t) + (k x v) sin(t) + k (k . v)(1 - cos(t))

    Args:
        points: A single point of shape ``(3,)`` or points of shape
            ``(n, 3)``.
        axis: Unit rotation axis *k*.
        angle: Rotation angle *t* in radians (right-hand rule).

    Returns:
        Rotated point(s) with the same shape as *points*.
    """
    pts = np.asarray(points, dtype=float)
    k = np.asarray(axis, dtype=float)
    c = np.cos(angle)
    s = np.sin(angle)
    k_dot_v = pts @ k
    return (
        pts * c
        + np.cross(k, pts) * s
        + np.multiply.outer(k_dot_v, k) * (1.0 - c)
    )


def alignment_rotation(
    direction: np.ndarray,
    reference: np.ndarray = Y_AXIS,
) -> tuple[np.ndarray, float]:
    """Axis and angle that rotate *reference* onto *direction*.

    The axis is ``normalise(reference x direction)`` and the angle is
    ``acos(clamp(reference . direction / |direction|, -1, 1))``.  When
    the two are collinear (cross product with the unit direction
    shorter than :data:`GEOMETRY_EPSILON`) the axis is never computed from the cross
    product: a parallel direction gives angle 0 and an antiparallel one
    gives a half turn about a vector perpendicular to *reference*.
    A zero-length *direction* is treated as parallel.

    Args:
        direction: Target direction (need not be unit length).
        reference: Unit vector to be rotated, the Y axis by default.

    Returns:
        Tuple of ``(axis, angle)`` suitable for :func:`rotate`.
    """
    direction = np.asarray(direction, dtype=float)
    reference = np.asarray(reference, dtype=float)
    length = np.linalg.norm(direction)
    if length < 1e-12:
        return X_AXIS.copy(), 0.0

    cos_angle = float(np.clip(np.dot(reference, direction) / length, -1.0, 1.0))
    cross = np.cross(reference, direction)
    cross_len = np.linalg.norm(cross)
    if cross_len > GEOMETRY_EPSILON * length:
        return cross / cross_len, float(np.arccos(cos_angle))

    if cos_angle < 0:
        return perpendicular(reference), float(np.pi)
    return X_AXIS.copy(), 0.0


def perpendicular(direction: np.ndarray) -> np.ndarray:
    """Unit vector orthogonal to *direction*.

    Built by crossing *direction* with whichever coordinate axis is
    least aligned with it, so the cross product is never degenerate.
    """
    u = normalise(direction)
    least = int(np.argmin(np.abs(u)))
    return normalise(np.cross(u, np.eye(3)[least]))
