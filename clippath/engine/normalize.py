"""Normalizer / polygon emitter — path space → percentage space → text."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from clippath.engine.errors import PolygonError
from clippath.utils.geometry import Point, as_array, bbox

MIN_POLYGON_POINTS = 3

# Coordinate used on an axis with zero extent
_CENTER_PCT = 50.0


def _round_half_up(values: NDArray[np.float64]) -> NDArray[np.float64]:
    return np.floor(values * 100.0 + 0.5) / 100.0


def normalize_points(points: list[Point]) -> list[Point]:
    """Rescale points into the 0–100 box spanned by their bounding box, 2 decimals."""
    arr = as_array(points)
    xmin, ymin, xmax, ymax = bbox(arr)
    width = xmax - xmin
    height = ymax - ymin

    if width > 0:
        xs = (arr[:, 0] - xmin) / width * 100.0
    else:
        xs = np.full(len(arr), _CENTER_PCT)
    if height > 0:
        ys = (arr[:, 1] - ymin) / height * 100.0
    else:
        ys = np.full(len(arr), _CENTER_PCT)

    xs = _round_half_up(xs)
    ys = _round_half_up(ys)
    return [Point(float(x), float(y)) for x, y in zip(xs, ys)]


def format_percent(value: float) -> str:
    """Shortest decimal form: 0, 12.5, 33.33, 100."""
    return f"{value:g}%"


def emit_polygon(points: list[Point]) -> str:
    """Comma-separated ``x% y%`` pairs in traversal order."""
    if len(points) < MIN_POLYGON_POINTS:
        raise PolygonError(len(points))
    normalized = normalize_points(points)
    return ", ".join(f"{format_percent(p.x)} {format_percent(p.y)}" for p in normalized)
