"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray


def rotation_matrix(degrees: float) -> NDArray[np.float64]:
    """2x2 rotation matrix for a clockwise-on-screen rotation in degrees."""
    theta = math.radians(degrees % 360.0)
    c, s = math.cos(theta), math.sin(theta)
    return np.array([[c, -s], [s, c]], dtype=np.float64)


def place_points(
    points: NDArray[np.float64],
    rotation_deg: float,
    tx: float,
    ty: float,
) -> NDArray[np.float64]:
    """Rotate local points about the origin, then translate by (tx, ty)."""
    rotated = points @ rotation_matrix(rotation_deg).T
    return rotated + np.array([tx, ty], dtype=np.float64)


def distance(a: tuple[float, float], b: tuple[float, float]) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def dot(a: tuple[float, float], b: tuple[float, float]) -> float:
    return a[0] * b[0] + a[1] * b[1]


def undirected_angle(dx: float, dy: float) -> float:
    """Direction angle of a segment in degrees, folded into [0, 180)."""
    angle = math.degrees(math.atan2(dy, dx))
    return angle % 180.0
