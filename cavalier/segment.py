"""Polyline vertexes and geometry of the segment between two vertexes.

A segment runs from one vertex to the next. The bulge of the starting vertex
describes the segment: zero for a straight line, otherwise the tangent of a
quarter of the arc's sweep angle (positive sweeps counter clockwise).
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .vector import REAL_THRESHOLD, Vector, fuzzy_equal, length, normalize
from .vector2 import (
    angle,
    closest_point_on_line_seg,
    dist_squared,
    midpoint,
    point_on_circle,
    point_within_arc_sweep_angle,
)

REAL_PRECISION = 1e-5
"""Tolerance used for bulge and position comparisons on segments."""

_TAU = 2.0 * math.pi


def _normalize_radians(radians: float) -> float:
    if 0.0 <= radians <= _TAU:
        return radians
    return radians - math.floor(radians / _TAU) * _TAU


def _delta_angle(angle1: float, angle2: float) -> float:
    """Shortest signed angle going from angle1 to angle2."""
    diff = _normalize_radians(angle2 - angle1)
    if diff > math.pi:
        diff -= _TAU
    return diff


@dataclass(frozen=True)
class PlineVertex:
    """A polyline vertex: a position and the bulge of the segment it starts."""

    x: float
    y: float
    bulge: float = 0.0

    @classmethod
    def at(cls, position: Vector, bulge: float = 0.0) -> "PlineVertex":
        """Vertex at the given position with the given bulge."""
        return cls(position.x, position.y, bulge)

    @property
    def pos(self) -> Vector:
        return Vector(self.x, self.y)

    def bulge_is_zero(self, epsilon: float = REAL_PRECISION) -> bool:
        """True if the bulge is within epsilon of zero (the segment is a line)."""
        return abs(self.bulge) < epsilon

    def bulge_is_neg(self) -> bool:
        return self.bulge < 0.0

    def bulge_is_pos(self) -> bool:
        return self.bulge > 0.0


@dataclass
class AABB:
    """Axis aligned bounding box."""

    x_min: float
    y_min: float
    x_max: float
    y_max: float

    def expand(self, val: float) -> None:
        """Grow the box by val on every side."""
        self.x_min -= val
        self.y_min -= val
        self.x_max += val
        self.y_max += val


@dataclass(frozen=True)
class ArcRadiusAndCenter:
    """Radius and center of an arc segment."""

    radius: float
    center: Vector


@dataclass(frozen=True)
class SplitResult:
    """Result of splitting a segment at a point."""

    updated_start: PlineVertex
    """The starting vertex with its bulge adjusted to end at the split point."""
    split_vertex: PlineVertex
    """The vertex at the split point, starting the remainder of the segment."""


def arc_radius_and_center(v1: PlineVertex, v2: PlineVertex) -> ArcRadiusAndCenter:
    """Radius and center of the arc segment from v1 to v2."""
    if v1.bulge_is_zero():
        raise ValueError("v1 to v2 must be an arc")
    if fuzzy_equal(v1.pos, v2.pos):
        raise ValueError("v1 must not be on top of v2")

    b = abs(v1.bulge)
    v = v2.pos - v1.pos
    d = length(v)
    r = d * (b * b + 1.0) / (4.0 * b)

    s = b * d / 2.0
    m = r - s
    offs_x = -m * v.y / d
    offs_y = m * v.x / d
    if v1.bulge_is_neg():
        offs_x = -offs_x
        offs_y = -offs_y

    center = Vector(v1.x + v.x / 2.0 + offs_x, v1.y + v.y / 2.0 + offs_y)
    return ArcRadiusAndCenter(r, center)


def split_at_point(v1: PlineVertex, v2: PlineVertex, point: Vector) -> SplitResult:
    """Split the segment from v1 to v2 at a point lying on it."""
    if v1.bulge_is_zero():
        return SplitResult(v1, PlineVertex.at(point, 0.0))

    if fuzzy_equal(v1.pos, v2.pos, REAL_PRECISION) or fuzzy_equal(
        v1.pos, point, REAL_PRECISION
    ):
        return SplitResult(PlineVertex.at(point, 0.0), PlineVertex.at(point, v1.bulge))

    if fuzzy_equal(v2.pos, point, REAL_PRECISION):
        return SplitResult(v1, PlineVertex.at(v2.pos, 0.0))

    arc = arc_radius_and_center(v1, v2)
    point_angle = angle(arc.center, point)
    start_angle = angle(arc.center, v1.pos)
    end_angle = angle(arc.center, v2.pos)
    bulge1 = math.tan(_delta_angle(start_angle, point_angle) / 4.0)
    bulge2 = math.tan(_delta_angle(point_angle, end_angle) / 4.0)
    return SplitResult(PlineVertex.at(v1.pos, bulge1), PlineVertex.at(point, bulge2))


def seg_tangent_vector(v1: PlineVertex, v2: PlineVertex, point_on_seg: Vector) -> Vector:
    """Tangent direction of the segment at a point on it (not normalized)."""
    if v1.bulge_is_zero():
        return v2.pos - v1.pos

    center = arc_radius_and_center(v1, v2).center
    dx = point_on_seg.x - center.x
    dy = point_on_seg.y - center.y
    if v1.bulge_is_pos():
        return Vector(-dy, dx)
    return Vector(dy, -dx)


def closest_point_on_seg(v1: PlineVertex, v2: PlineVertex, point: Vector) -> Vector:
    """Closest point on the segment from v1 to v2 to the point given."""
    if v1.bulge_is_zero():
        return closest_point_on_line_seg(v1.pos, v2.pos, point)

    arc = arc_radius_and_center(v1, v2)
    if fuzzy_equal(point, arc.center):
        # every point on the arc is equally close, use the start
        return v1.pos

    if point_within_arc_sweep_angle(arc.center, v1.pos, v2.pos, v1.bulge, point):
        return arc.radius * normalize(point - arc.center) + arc.center

    if dist_squared(v1.pos, point) < dist_squared(v2.pos, point):
        return v1.pos
    return v2.pos


def fast_approx_bounding_box(v1: PlineVertex, v2: PlineVertex) -> AABB:
    """Bounding box of the segment, possibly larger than the exact one for arcs."""
    x_lo, x_hi = sorted((v1.x, v2.x))
    y_lo, y_hi = sorted((v1.y, v2.y))
    if v1.bulge_is_zero():
        return AABB(x_lo, y_lo, x_hi, y_hi)

    # rectangle formed by extending the chord by the sagitta
    b = v1.bulge
    offs_x = b * (v2.y - v1.y) / 2.0
    offs_y = -b * (v2.x - v1.x) / 2.0
    pt_x_lo, pt_x_hi = sorted((v1.x + offs_x, v2.x + offs_x))
    pt_y_lo, pt_y_hi = sorted((v1.y + offs_y, v2.y + offs_y))
    return AABB(
        min(x_lo, pt_x_lo),
        min(y_lo, pt_y_lo),
        max(x_hi, pt_x_hi),
        max(y_hi, pt_y_hi),
    )


def seg_length(v1: PlineVertex, v2: PlineVertex) -> float:
    """Path length of the segment from v1 to v2."""
    if fuzzy_equal(v1.pos, v2.pos):
        return 0.0
    if v1.bulge_is_zero():
        return math.sqrt(dist_squared(v1.pos, v2.pos))

    arc = arc_radius_and_center(v1, v2)
    start_angle = angle(arc.center, v1.pos)
    end_angle = angle(arc.center, v2.pos)
    return abs(arc.radius * _delta_angle(start_angle, end_angle))


def seg_midpoint(v1: PlineVertex, v2: PlineVertex) -> Vector:
    """Point halfway along the segment's path."""
    if v1.bulge_is_zero():
        return midpoint(v1.pos, v2.pos)

    arc = arc_radius_and_center(v1, v2)
    a1 = angle(arc.center, v1.pos)
    a2 = angle(arc.center, v2.pos)
    offset = abs(_delta_angle(a1, a2) / 2.0)
    # the arc direction decides the sign, which keeps half circles robust
    mid_angle = a1 + offset if v1.bulge_is_pos() else a1 - offset
    return point_on_circle(arc.radius, arc.center, mid_angle)