"""Operations on two-dimensional points and vectors."""

from __future__ import annotations

import math

from .vector import REAL_THRESHOLD, Vector, dot, normalize


def _cross(p0: Vector, p1: Vector, point: Vector) -> float:
    return (p1.x - p0.x) * (point.y - p0.y) - (p1.y - p0.y) * (point.x - p0.x)


def perp(v: Vector) -> Vector:
    """Vector perpendicular to v, rotated counter clockwise."""
    return Vector(-v.y, v.x)


def unit_perp(v: Vector) -> Vector:
    """Normalized vector perpendicular to v, rotated counter clockwise."""
    return normalize(Vector(-v.y, v.x))


def perp_dot(v0: Vector, v1: Vector) -> float:
    """Perpendicular dot product, equal to dot(v0, perp(v1)) up to sign convention."""
    return v0.x * v1.y - v0.y * v1.x


def dist_squared(p0: Vector, p1: Vector) -> float:
    """Squared distance between p0 and p1."""
    d = p1 - p0
    return dot(d, d)


def angle(p0: Vector, p1: Vector) -> float:
    """Counter clockwise angle of the vector going from p0 to p1."""
    return math.atan2(p1.y - p0.y, p1.x - p0.x)


def midpoint(p0: Vector, p1: Vector) -> Vector:
    """Midpoint between p0 and p1."""
    return Vector((p0.x + p1.x) / 2, (p0.y + p1.y) / 2)


def point_on_circle(radius: float, center: Vector, angle: float) -> Vector:
    """Point on the circle with the given radius and center at the polar angle."""
    return Vector(center.x + radius * math.cos(angle), center.y + radius * math.sin(angle))


def point_from_parametric(p0: Vector, p1: Vector, t: float) -> Vector:
    """Point on the segment from p0 to p1 at parametric value t."""
    return p0 + t * (p1 - p0)


def closest_point_on_line_seg(p0: Vector, p1: Vector, point: Vector) -> Vector:
    """Closest point on the line segment p0 to p1 to the point given."""
    v = p1 - p0
    w = point - p0
    c1 = dot(w, v)
    if c1 < REAL_THRESHOLD:
        return p0
    c2 = dot(v, v)
    if c2 < c1 + REAL_THRESHOLD:
        return p1
    return p0 + (c1 / c2) * v


def is_left(p0: Vector, p1: Vector, point: Vector) -> bool:
    """True if point is strictly left of the line directed from p0 to p1."""
    return _cross(p0, p1, point) > 0


def is_left_or_equal(p0: Vector, p1: Vector, point: Vector) -> bool:
    """Like is_left but also true for points exactly on the line."""
    return _cross(p0, p1, point) >= 0


def is_left_or_coincident(
    p0: Vector, p1: Vector, point: Vector, epsilon: float = REAL_THRESHOLD
) -> bool:
    """True if point is left of, or fuzzy on, the line directed from p0 to p1."""
    return _cross(p0, p1, point) > -epsilon


def is_right_or_coincident(
    p0: Vector, p1: Vector, point: Vector, epsilon: float = REAL_THRESHOLD
) -> bool:
    """True if point is right of, or fuzzy on, the line directed from p0 to p1."""
    return _cross(p0, p1, point) < epsilon


def point_within_arc_sweep_angle(
    center: Vector, arc_start: Vector, arc_end: Vector, bulge: float, point: Vector
) -> bool:
    """Test whether point lies in the sweep region of the arc given by its bulge."""
    if abs(bulge) <= REAL_THRESHOLD:
        raise ValueError("expected arc (bulge must be non-zero)")
    if abs(bulge) > 1:
        raise ValueError("bulge should always be between -1 and 1")

    if bulge > 0:
        return is_left_or_coincident(center, arc_start, point) and is_right_or_coincident(
            center, arc_end, point
        )
    return is_right_or_coincident(center, arc_start, point) and is_left_or_coincident(
        center, arc_end, point
    )