"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math
from typing import NamedTuple

import numpy as np
from numpy.typing import NDArray


class Point(NamedTuple):
    x: float
    y: float


def as_array(points: list[Point]) -> NDArray[np.float64]:
    """Nx2 float array from a point list."""
    if not points:
        return np.empty((0, 2))
    return np.asarray(points, dtype=np.float64)


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def rotate(x: float, y: float, cos_phi: float, sin_phi: float) -> tuple[float, float]:
    """Rotate (x, y) about the origin by the angle whose cos/sin are given."""
    return (cos_phi * x - sin_phi * y, sin_phi * x + cos_phi * y)


def reflect(px: float, py: float, about_x: float, about_y: float) -> Point:
    """Mirror point p about a centre: 2c - p."""
    return Point(2 * about_x - px, 2 * about_y - py)


def same_point(a: Point, b: Point) -> bool:
    return a.x == b.x and a.y == b.y


def vector_angle(ux: float, uy: float, vx: float, vy: float) -> float:
    """Signed angle from u to v in radians, in (-pi, pi]."""
    return math.atan2(ux * vy - uy * vx, ux * vx + uy * vy)
