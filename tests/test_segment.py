import math

import pytest

from cavalier.segment import (
    AABB,
    PlineVertex,
    arc_radius_and_center,
    closest_point_on_seg,
    fast_approx_bounding_box,
    seg_length,
    seg_midpoint,
    seg_tangent_vector,
    split_at_point,
)
from cavalier.vector import Vector, dot, fuzzy_equal, length
from cavalier.vector2 import dist_squared, perp_dot

RADIUS = 10.0
# ccw circle from the source example, split into two half circle arcs
CIRCLE_V0 = PlineVertex(0.0, 0.0, 1.0)
CIRCLE_V1 = PlineVertex(2.0 * RADIUS, 0.0, 1.0)


def test_bulge_predicates():
    assert PlineVertex(1, 2, 0.0).bulge_is_zero()
    assert PlineVertex(1, 2, 1e-6).bulge_is_zero()
    assert not PlineVertex(1, 2, 1e-3).bulge_is_zero()
    assert PlineVertex(1, 2, 1e-3).bulge_is_zero(epsilon=1e-2)
    assert PlineVertex(0, 0, -0.5).bulge_is_neg()
    assert not PlineVertex(0, 0, -0.5).bulge_is_pos()
    assert PlineVertex(0, 0, 0.5).bulge_is_pos()


def test_vertex_pos_round_trip():
    v = PlineVertex.at(Vector(3.5, -2.0), 0.25)
    assert v.pos == Vector(3.5, -2.0)
    assert v.bulge == 0.25


def test_aabb_expand():
    box = AABB(0.0, 1.0, 2.0, 3.0)
    box.expand(0.5)
    assert box == AABB(-0.5, 0.5, 2.5, 3.5)


def test_arc_radius_and_center_half_circle():
    arc = arc_radius_and_center(CIRCLE_V0, CIRCLE_V1)
    assert arc.radius == pytest.approx(RADIUS)
    assert fuzzy_equal(arc.center, Vector(RADIUS, 0.0))


def test_arc_endpoints_lie_on_circle():
    v1 = PlineVertex(1.0, 2.0, 0.374794619217547)
    v2 = PlineVertex(8.0, 9.0, 0.0)
    arc = arc_radius_and_center(v1, v2)
    assert length(v1.pos - arc.center) == pytest.approx(arc.radius)
    assert length(v2.pos - arc.center) == pytest.approx(arc.radius)


def test_arc_radius_and_center_errors():
    with pytest.raises(ValueError):
        arc_radius_and_center(PlineVertex(0, 0, 0), PlineVertex(1, 0, 0))
    with pytest.raises(ValueError):
        arc_radius_and_center(PlineVertex(0, 0, 1), PlineVertex(0, 0, 0))


def test_seg_length_line():
    v1 = PlineVertex(1.0, 1.0, 0.0)
    v2 = PlineVertex(4.0, 5.0, 0.0)
    assert seg_length(v1, v2) == pytest.approx(length(v2.pos - v1.pos))


def test_seg_length_circle():
    total = seg_length(CIRCLE_V0, CIRCLE_V1) + seg_length(CIRCLE_V1, CIRCLE_V0)
    assert total == pytest.approx(2.0 * math.pi * RADIUS)


def test_seg_length_coincident_points_is_zero():
    assert seg_length(PlineVertex(2, 2, 1), PlineVertex(2, 2, 0)) == 0.0


def test_seg_midpoint_line():
    assert seg_midpoint(PlineVertex(0, 0, 0), PlineVertex(4, 2, 0)) == Vector(2, 1)


def test_seg_midpoint_half_circles():
    # ccw from the left goes through the bottom (extents yMin = -radius)
    assert fuzzy_equal(seg_midpoint(CIRCLE_V0, CIRCLE_V1), Vector(RADIUS, -RADIUS))
    assert fuzzy_equal(seg_midpoint(CIRCLE_V1, CIRCLE_V0), Vector(RADIUS, RADIUS))
    cw = PlineVertex(0.0, 0.0, -1.0)
    assert fuzzy_equal(seg_midpoint(cw, CIRCLE_V1), Vector(RADIUS, RADIUS))


def test_split_line_segment():
    v1 = PlineVertex(0, 0, 0)
    v2 = PlineVertex(10, 0, 0)
    result = split_at_point(v1, v2, Vector(4, 0))
    assert result.updated_start == v1
    assert result.split_vertex == PlineVertex(4, 0, 0)


def test_split_arc_at_midpoint():
    mid = seg_midpoint(CIRCLE_V0, CIRCLE_V1)
    result = split_at_point(CIRCLE_V0, CIRCLE_V1, mid)
    right_angle_bulge = math.tan(math.pi / 8)
    assert result.updated_start.pos == CIRCLE_V0.pos
    assert result.updated_start.bulge == pytest.approx(right_angle_bulge)
    assert result.split_vertex.pos == mid
    assert result.split_vertex.bulge == pytest.approx(right_angle_bulge)
    first = seg_length(result.updated_start, result.split_vertex)
    second = seg_length(result.split_vertex, CIRCLE_V1)
    assert first + second == pytest.approx(seg_length(CIRCLE_V0, CIRCLE_V1))


def test_split_arc_at_end_points():
    at_end = split_at_point(CIRCLE_V0, CIRCLE_V1, CIRCLE_V1.pos)
    assert at_end.updated_start == CIRCLE_V0
    assert at_end.split_vertex == PlineVertex.at(CIRCLE_V1.pos, 0.0)

    at_start = split_at_point(CIRCLE_V0, CIRCLE_V1, CIRCLE_V0.pos)
    assert at_start.updated_start == PlineVertex.at(CIRCLE_V0.pos, 0.0)
    assert at_start.split_vertex == PlineVertex.at(CIRCLE_V0.pos, CIRCLE_V0.bulge)


def test_tangent_of_line_is_direction():
    v1 = PlineVertex(1, 1, 0)
    v2 = PlineVertex(3, 4, 0)
    assert seg_tangent_vector(v1, v2, Vector(2, 2.5)) == v2.pos - v1.pos


@pytest.mark.parametrize("start,end", [(CIRCLE_V0, CIRCLE_V1), (CIRCLE_V1, CIRCLE_V0)])
def test_tangent_of_arc_is_perpendicular_and_follows_direction(start, end):
    center = arc_radius_and_center(start, end).center
    point = seg_midpoint(start, end)
    tangent = seg_tangent_vector(start, end, point)
    assert dot(tangent, point - center) == pytest.approx(0.0, abs=1e-9)
    # ccw arc: tangent turns left of the radius vector
    assert perp_dot(point - center, tangent) > 0
    cw_start = PlineVertex(start.x, start.y, -start.bulge)
    cw_tangent = seg_tangent_vector(cw_start, end, point)
    assert fuzzy_equal(cw_tangent, -tangent)


def test_closest_point_on_arc_from_example():
    point = Vector(RADIUS, 10.0 * RADIUS)
    closest = closest_point_on_seg(CIRCLE_V1, CIRCLE_V0, point)
    assert fuzzy_equal(closest, Vector(RADIUS, RADIUS))
    assert math.sqrt(dist_squared(closest, point)) == pytest.approx(9.0 * RADIUS)


def test_closest_point_outside_sweep_is_nearest_end():
    # lower half circle cannot reach points far above it
    closest = closest_point_on_seg(CIRCLE_V0, CIRCLE_V1, Vector(2.0, 50.0))
    assert closest == CIRCLE_V0.pos


def test_closest_point_at_center_is_start():
    closest = closest_point_on_seg(CIRCLE_V0, CIRCLE_V1, Vector(RADIUS, 0.0))
    assert closest == CIRCLE_V0.pos


def test_closest_point_on_line():
    v1 = PlineVertex(0, 0, 0)
    v2 = PlineVertex(10, 0, 0)
    assert closest_point_on_seg(v1, v2, Vector(3, 5)) == Vector(3, 0)
    assert closest_point_on_seg(v1, v2, Vector(-3, 5)) == v1.pos


def test_bounding_box_of_line():
    box = fast_approx_bounding_box(PlineVertex(5, -1, 0), PlineVertex(2, 3, 0))
    assert box == AABB(2, -1, 5, 3)


@pytest.mark.parametrize(
    "v1,v2",
    [
        (CIRCLE_V0, CIRCLE_V1),
        (CIRCLE_V1, CIRCLE_V0),
        (PlineVertex(2, 0, 1.0), PlineVertex(10, 0, -0.5)),
        (PlineVertex(10, 0, -0.5), PlineVertex(8, 9, 0.0)),
    ],
)
def test_bounding_box_of_arc_contains_arc(v1, v2):
    eps = 1e-9
    box = fast_approx_bounding_box(v1, v2)
    assert box.x_min <= box.x_max
    assert box.y_min <= box.y_max
    mid = seg_midpoint(v1, v2)
    quarter = seg_midpoint(split_at_point(v1, v2, mid).updated_start, PlineVertex.at(mid))
    for p in (v1.pos, v2.pos, mid, quarter):
        assert box.x_min - eps <= p.x <= box.x_max + eps
        assert box.y_min - eps <= p.y <= box.y_max + eps