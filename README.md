# cavalier

Geometry building blocks for 2D polylines whose segments are straight lines
or circular arcs. An arc segment is stored as a vertex with a *bulge*: the
tangent of a quarter of the arc's sweep angle (positive means counter
clockwise, negative means clockwise, zero means a straight line).

The package is pure Python and has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `cavalier.vector`

- `Vector(*components)`: an immutable vector of floats with `x`, `y`, `z`
  properties, indexing, iteration, `len()`, hashing and lexicographic
  ordering. Supports `+`, `-`, unary `-`, multiplication by a scalar or
  component-wise by another vector, and division by a scalar or
  component-wise. Dividing by the scalar `0` gives the zero vector. Mixing
  dimensions raises `ValueError`.
- `Vector.zero(dimension)`, `Vector.ones(dimension)`,
  `Vector.unit(dimension, axis)`.
- `dot`, `length`, `normalize` (returns a new unit vector; raises
  `ValueError` for a zero vector), `fuzzy_zero` and `fuzzy_equal` (both take
  an optional `epsilon`, default `REAL_THRESHOLD` = `1e-8`).

### `cavalier.vector2`

2D helpers: `perp`, `unit_perp`, `perp_dot`, `dist_squared`, `angle`,
`midpoint`, `point_on_circle`, `point_from_parametric`,
`closest_point_on_line_seg`, `is_left`, `is_left_or_equal`,
`is_left_or_coincident`, `is_right_or_coincident` and
`point_within_arc_sweep_angle`. The last one raises `ValueError` when the
bulge is zero or its magnitude exceeds 1.

### `cavalier.lineseg_intersect`

`intersect_line_segments(u1, u2, v1, v2)` returns a `LineSegIntersect` with
fields `intr_type`, `t0`, `t1` and `point`. `intr_type` is a
`LineSegIntersectType`:

- `NONE`: parallel and not collinear, or disjoint;
- `TRUE`: the segments meet at `point`;
- `COINCIDENT`: the segments overlap; `t0` and `t1` bound the overlap on the
  second segment;
- `FALSE`: the infinite lines cross at `point`, outside at least one segment.

### `cavalier.spatial_index`

`StaticSpatialIndex(num_items, node_size=16)` is a packed Hilbert R-tree over
axis-aligned boxes. Add exactly `num_items` boxes with `add`, call `finish`,
then query:

- `query(min_x, min_y, max_x, max_y)` returns the indexes of overlapping items;
- `visit_query(..., visitor)` calls `visitor(index)` per overlapping item;
- `visit_bounding_boxes(visitor)` visits every node and item box as
  `visitor(level, min_x, min_y, max_x, max_y)`;
- `visit_item_boxes(visitor)` visits the added boxes as
  `visitor(index, min_x, min_y, max_x, max_y)`.

Visitors stop the walk by returning `False`. The extents are available as
`min_x`, `min_y`, `max_x`, `max_y`, along with `num_items` and `num_levels`.
Adding too many items or finishing with too few raises `ValueError`;
querying before `finish()` raises `RuntimeError`.
`hilbert_xy_to_index(x, y)` maps 16-bit coordinates to a Hilbert curve index.

### `cavalier.segment`

`PlineVertex(x, y, bulge=0.0)` (also `PlineVertex.at(position, bulge)`) with
`pos`, `bulge_is_zero(epsilon=REAL_PRECISION)`, `bulge_is_neg()` and
`bulge_is_pos()`. `REAL_PRECISION` is `1e-5`.

Functions on the segment from `v1` to `v2`:

- `arc_radius_and_center` → `ArcRadiusAndCenter(radius, center)`; raises
  `ValueError` for a line segment or coincident end points;
- `split_at_point` → `SplitResult(updated_start, split_vertex)`;
- `seg_tangent_vector`, `closest_point_on_seg`, `seg_length`, `seg_midpoint`;
- `fast_approx_bounding_box` → `AABB(x_min, y_min, x_max, y_max)`, which may
  be larger than the exact box for arcs. `AABB.expand(val)` grows it on every
  side.

## Examples

Length and midpoint of a half circle segment:

```python
from cavalier.segment import PlineVertex, seg_length, seg_midpoint

start = PlineVertex(0.0, 0.0, 1.0)   # bulge 1 is a half circle, counter clockwise
end = PlineVertex(10.0, 0.0, 0.0)

seg_length(start, end)    # 15.707963... (pi * radius)
seg_midpoint(start, end)  # the point (5, -5)
```

Intersecting two line segments:

```python
from cavalier.vector import Vector
from cavalier.lineseg_intersect import intersect_line_segments, LineSegIntersectType

result = intersect_line_segments(
    Vector(0.0, 0.0), Vector(2.0, 2.0),
    Vector(0.0, 2.0), Vector(2.0, 0.0),
)
assert result.intr_type is LineSegIntersectType.TRUE
result.point  # the point (1, 1)
```

Indexing and querying boxes:

```python
from cavalier.spatial_index import StaticSpatialIndex

index = StaticSpatialIndex(3)
index.add(0, 0, 1, 1)
index.add(5, 5, 6, 6)
index.add(0.5, 0.5, 2, 2)
index.finish()

sorted(index.query(0.8, 0.8, 0.9, 0.9))  # [0, 2]
```

Items are numbered in the order they were added.

## What the package does not do

It works on single segments and vertex pairs only. There is no polyline
container, and no whole-polyline operations such as path length, signed
area, winding number, extents or closest point over a polyline, parallel
offsetting, or boolean combining (union, exclude, intersect, XOR) of closed
polylines. There is also no command-line tool.