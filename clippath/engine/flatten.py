"""Curve & arc flattening — fixed-count polyline sampling.

Every flattener samples ``k = 1..segments`` and never returns the start
point: the caller already holds it as the cursor emitted by the previous
command. The last sample is always the segment endpoint, except for an
omitted arc, which yields nothing.
"""

from __future__ import annotations

import logging
import math

import numpy as np
from numpy.typing import NDArray

from clippath.utils.geometry import Point, rotate, same_point, vector_angle

logger = logging.getLogger(__name__)

_TWO_PI = 2 * math.pi


def _sample_params(segments: int) -> NDArray[np.float64]:
    return np.arange(1, segments + 1, dtype=np.float64) / segments


def _to_points(xs: NDArray[np.float64], ys: NDArray[np.float64]) -> list[Point]:
    return [Point(float(x), float(y)) for x, y in zip(xs, ys)]


def cubic_bezier(p0: Point, p1: Point, p2: Point, p3: Point, segments: int) -> list[Point]:
    """B(t) = (1-t)³P0 + 3(1-t)²t·P1 + 3(1-t)t²·P2 + t³P3."""
    t = _sample_params(segments)
    mt = 1.0 - t
    basis = np.stack([mt**3, 3 * mt**2 * t, 3 * mt * t**2, t**3], axis=1)
    ctrl = np.array([p0, p1, p2, p3], dtype=np.float64)
    pts = basis @ ctrl
    return _to_points(pts[:, 0], pts[:, 1])


def quadratic_bezier(p0: Point, p1: Point, p2: Point, segments: int) -> list[Point]:
    """B(t) = (1-t)²P0 + 2(1-t)t·P1 + t²P2."""
    t = _sample_params(segments)
    mt = 1.0 - t
    basis = np.stack([mt**2, 2 * mt * t, t**2], axis=1)
    ctrl = np.array([p0, p1, p2], dtype=np.float64)
    pts = basis @ ctrl
    return _to_points(pts[:, 0], pts[:, 1])


def elliptical_arc(
    start: Point,
    end: Point,
    rx: float,
    ry: float,
    x_axis_rotation: float,
    large_arc: bool,
    sweep: bool,
    segments: int,
) -> list[Point]:
    """Flatten an SVG arc using the endpoint-to-center parameterization.

    Zero radii degrade to a straight line and return the endpoint alone.
    Coincident endpoints omit the arc and return no points. Radii too small
    to span the endpoints are scaled up uniformly until they just fit.
    """
    if rx == 0 or ry == 0:
        logger.debug("Arc with zero radius (rx=%g, ry=%g) treated as line", rx, ry)
        return [end]
    if same_point(start, end):
        logger.debug("Arc with coincident endpoints omitted")
        return []

    rx = abs(rx)
    ry = abs(ry)
    phi = math.radians(x_axis_rotation % 360.0)
    cos_phi = math.cos(phi)
    sin_phi = math.sin(phi)

    # Midpoint difference in the ellipse's local frame (rotate by -phi)
    x1p, y1p = rotate((start.x - end.x) / 2, (start.y - end.y) / 2, cos_phi, -sin_phi)

    # Scale radii up when the endpoints are out of reach; the centre is then the midpoint
    lam = (x1p * x1p) / (rx * rx) + (y1p * y1p) / (ry * ry)
    if lam > 1:
        scale = math.sqrt(lam)
        rx *= scale
        ry *= scale
        coef = 0.0
    else:
        rx2, ry2 = rx * rx, ry * ry
        num = rx2 * ry2 - rx2 * y1p * y1p - ry2 * x1p * x1p
        den = rx2 * y1p * y1p + ry2 * x1p * x1p
        coef = math.sqrt(max(0.0, num / den))
        if large_arc == sweep:
            coef = -coef
    cxp = coef * rx * y1p / ry
    cyp = -coef * ry * x1p / rx

    cx, cy = rotate(cxp, cyp, cos_phi, sin_phi)
    cx += (start.x + end.x) / 2
    cy += (start.y + end.y) / 2

    ux, uy = (x1p - cxp) / rx, (y1p - cyp) / ry
    vx, vy = (-x1p - cxp) / rx, (-y1p - cyp) / ry
    theta1 = vector_angle(1.0, 0.0, ux, uy)
    delta = vector_angle(ux, uy, vx, vy)
    if sweep and delta < 0:
        delta += _TWO_PI
    elif not sweep and delta > 0:
        delta -= _TWO_PI

    theta = theta1 + delta * _sample_params(segments)
    cos_t = np.cos(theta)
    sin_t = np.sin(theta)
    xs = cx + rx * cos_phi * cos_t - ry * sin_phi * sin_t
    ys = cy + rx * sin_phi * cos_t + ry * cos_phi * sin_t

    points = _to_points(xs, ys)
    points[-1] = end
    return points
