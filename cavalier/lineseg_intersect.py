"""Intersection of two 2D line segments."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .vector import REAL_THRESHOLD, Vector, fuzzy_equal
from .vector2 import perp_dot


class LineSegIntersectType(Enum):
    """Kind of intersection found between two line segments."""

    NONE = "none"
    """Parallel and not collinear, or otherwise disjoint."""
    TRUE = "true"
    """The segments truly intersect at a point."""
    COINCIDENT = "coincident"
    """The segments overlap along some length."""
    FALSE = "false"
    """The infinite lines intersect, but outside at least one segment."""


@dataclass
class LineSegIntersect:
    """Result of intersecting two line segments.

    For TRUE and FALSE, ``point`` is the intersection point; for non-parallel
    segments ``t0`` and ``t1`` are the parametric values on the first and second
    segment. For COINCIDENT, ``t0`` and ``t1`` bound the overlap on the second
    segment's parametric equation and ``point`` is None.
    """

    intr_type: LineSegIntersectType
    t0: Optional[float] = None
    t1: Optional[float] = None
    point: Optional[Vector] = None


def _in_range(low: float, value: float, high: float) -> bool:
    return low - REAL_THRESHOLD < value < high + REAL_THRESHOLD


def _is_in_segment(pt: Vector, seg_start: Vector, seg_end: Vector) -> bool:
    # assumes pt is aligned with the segment
    if abs(seg_start.x - seg_end.x) < REAL_THRESHOLD:
        low, high = sorted((seg_start.y, seg_end.y))
        return _in_range(low, pt.y, high)
    low, high = sorted((seg_start.x, seg_end.x))
    return _in_range(low, pt.x, high)


def intersect_line_segments(u1: Vector, u2: Vector, v1: Vector, v2: Vector) -> LineSegIntersect:
    """Intersect segment u1->u2 with segment v1->v2."""
    u = u2 - u1
    v = v2 - v1
    d = perp_dot(u, v)
    w = u1 - v1
    eps = REAL_THRESHOLD

    if abs(d) > eps:
        t0 = perp_dot(v, w) / d
        t1 = perp_dot(u, w) / d
        point = v1 + t1 * v
        outside = t0 + eps < 0 or t0 > 1 + eps or t1 + eps < 0 or t1 > 1 + eps
        kind = LineSegIntersectType.FALSE if outside else LineSegIntersectType.TRUE
        return LineSegIntersect(kind, t0, t1, point)

    # parallel or collinear
    a = perp_dot(u, w)
    b = perp_dot(v, w)
    if abs(a) > eps or abs(b) > eps:
        return LineSegIntersect(LineSegIntersectType.NONE)

    u_is_point = fuzzy_equal(u1, u2)
    v_is_point = fuzzy_equal(v1, v2)
    if u_is_point and v_is_point:
        if fuzzy_equal(u1, v1):
            return LineSegIntersect(LineSegIntersectType.TRUE, point=u1)
        return LineSegIntersect(LineSegIntersectType.NONE)
    if u_is_point:
        if _is_in_segment(u1, v1, v2):
            return LineSegIntersect(LineSegIntersectType.TRUE, point=u1)
        return LineSegIntersect(LineSegIntersectType.NONE)
    if v_is_point:
        if _is_in_segment(v1, u1, u2):
            return LineSegIntersect(LineSegIntersectType.TRUE, point=v1)
        return LineSegIntersect(LineSegIntersectType.NONE)

    # neither segment is a point, check for overlap
    w2 = u2 - v1
    if abs(v.x) < eps:
        t0 = w.y / v.y
        t1 = w2.y / v.y
    else:
        t0 = w.x / v.x
        t1 = w2.x / v.x
    if t0 > t1:
        t0, t1 = t1, t0

    # threshold makes the intersect "sticky"
    if t0 > 1 + eps or t1 + eps < 0:
        return LineSegIntersect(LineSegIntersectType.NONE, t0, t1)

    t0 = max(t0, 0.0)
    t1 = min(t1, 1.0)
    if abs(t1 - t0) < eps:
        return LineSegIntersect(LineSegIntersectType.TRUE, t0, t1, v1 + t0 * v)
    return LineSegIntersect(LineSegIntersectType.COINCIDENT, t0, t1)