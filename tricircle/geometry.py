"""Plane geometry helpers: point-in-disc tests and the circle through three points."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass

_GEOMETRIC_EPSILON = 1.0
_DETERMINANT_EPSILON = 1e-6

Point = tuple[float, float]


@dataclass(frozen=True)
class Circle:
    """A circle given by its centre and radius."""

    cx: float
    cy: float
    radius: float


def is_in_circle(x: float, y: float, cx: float, cy: float, radius: float) -> bool:
    """Return True if (x, y) lies strictly inside the circle at (cx, cy)."""
    dx = x - cx
    dy = y - cy
    return dx * dx + dy * dy < radius * radius


def circle_through(p1: Point, p2: Point, p3: Point) -> Circle | None:
    """Return the circle through three points, or None if they are (nearly) collinear."""
    (x1, y1), (x2, y2), (x3, y3) = p1, p2, p3

    area_twice = (x2 - x1) * (y3 - y1) - (x3 - x1) * (y2 - y1)

    d12_sq = (x2 - x1) ** 2 + (y2 - y1) ** 2
    d23_sq = (x3 - x2) ** 2 + (y3 - y2) ** 2
    d31_sq = (x1 - x3) ** 2 + (y1 - y3) ** 2
    max_dist_sq = max(d12_sq, d23_sq, d31_sq)

    if max_dist_sq < sys.float_info.epsilon:
        return None
    if abs(area_twice) < _GEOMETRIC_EPSILON * math.sqrt(max_dist_sq):
        return None

    a = 2 * (x2 - x1)
    b = 2 * (y2 - y1)
    c = x2 * x2 + y2 * y2 - x1 * x1 - y1 * y1
    d = 2 * (x3 - x2)
    e = 2 * (y3 - y2)
    f = x3 * x3 + y3 * y3 - x2 * x2 - y2 * y2

    determinant = a * e - b * d
    if abs(determinant) < _DETERMINANT_EPSILON:
        return None

    cx = (c * e - f * b) / determinant
    cy = (a * f - d * c) / determinant
    return Circle(cx, cy, math.hypot(x1 - cx, y1 - cy))