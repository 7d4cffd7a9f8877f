"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp value into [lo, hi]."""
    return max(lo, min(hi, value))


def axis_bounds(dimension: float, margin: float) -> tuple[float, float]:
    """Usable [lo, hi] range along one canvas axis.

    Canvases narrower than two margins collapse to their midpoint instead of
    producing an inverted range.
    """
    if dimension < 2 * margin:
        mid = dimension / 2
        return (mid, mid)
    return (margin, dimension - margin)


def clamp_to_canvas(
    x: float,
    y: float,
    width: float,
    height: float,
    margin: float = 0.0,
) -> tuple[float, float]:
    """Clamp a point into the canvas rectangle, keeping `margin` from every edge."""
    x_lo, x_hi = axis_bounds(width, margin)
    y_lo, y_hi = axis_bounds(height, margin)
    return (clamp(x, x_lo, x_hi), clamp(y, y_lo, y_hi))


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    return math.hypot(x2 - x1, y2 - y1)


def polar_offset(cx: float, cy: float, radius: float, angle_deg: float) -> tuple[float, float]:
    """Point at `radius` from (cx, cy) along `angle_deg` (0° = +x, counter-clockwise)."""
    angle = math.radians(angle_deg)
    return (cx + math.cos(angle) * radius, cy + math.sin(angle) * radius)


def normalize_angle(degrees: float) -> float:
    """Wrap an angle into [0, 360)."""
    wrapped = math.fmod(degrees, 360.0)
    if wrapped < 0:
        wrapped += 360.0
    # fmod(-1e-15, 360) + 360 rounds to exactly 360.0
    if wrapped >= 360.0:
        wrapped = 0.0
    return wrapped


def pairwise_distances(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """NxN matrix of Euclidean distances between Nx2 points."""
    if len(points) == 0:
        return np.empty((0, 0))
    diff = points[:, np.newaxis, :] - points[np.newaxis, :, :]
    return np.sqrt(np.sum(diff**2, axis=-1))
