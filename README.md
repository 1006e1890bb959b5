# jyamiti

Plane geometry algorithms in pure Python. The package depends on nothing
outside the standard library.

## Modules

- `jyamiti.geometry` holds the basic types and predicates. The types are
  `Vector2`, `Line2d`, `Segment2d`, `Edge2d` and `BoundRectangle`. The
  predicates are `is_equal`, `orientation`, `left`, `left_of_line`, `distance`,
  `intersect_lines`, `intersect_line_segment` and the sort key
  `top_bottom_left_right_key`. `Vector2` is a frozen, ordered dataclass and
  supports `+`, `-`, scalar `*` and `/`, `dot`, `cross`, `perpendicular` and
  `length`.
- `jyamiti.bsp` builds binary space partitions.
  - `PointBSP2D(points)` keeps splitting a point set until each leaf holds at
    most four points. `split_lines()` returns the split lines in pre-order.
  - `SegmentBSP2D(segments)` partitions segments along the segment whose line
    crosses the fewest others. `render()` returns an indented text listing of
    the tree.
  - `classify_segment(segment, line)` returns a `SegmentType` together with
    the positive and negative parts of the segment.
- `jyamiti.triangulation` triangulates polygons.
  - `triangulate_earclipping(points)` returns the diagonals of a simple
    polygon, found by clipping ears.
  - `triangulate_monotone(points)` returns the diagonals of a y-monotone
    polygon. It raises `ValueError` when the polygon is not monotone.
  - `is_diagonal(points, a, b)` tells whether the segment between vertices
    `a` and `b` lies inside the polygon.

  A polygon with repeated vertices or no area raises `ValueError`.
- `jyamiti.voronoi` builds Voronoi diagrams with Fortune's sweep line.
  `fortune_voronoi(points, bounds)` returns `Edge2d` values. Finite edges carry
  the two sites they separate in `fp1` and `fp2`. Unbounded edges are cut off
  at the `BoundRectangle` by `clip_outer_edge`. `compute_arc_y` gives the
  height of a beach-line parabola.
- `jyamiti.samples` provides ready-made polygons and a report on their
  triangulation.
  - `polygon_sample()` returns a fifteen-vertex polygon that is not monotone.
  - `small_polygon_sample()` returns a monotone hexagon.
  - `triangulation_report(points)` returns a dict with the keys `outline`,
    `ear_clipping`, `monotone`, `triangles` and `area`. The value of
    `monotone` is `None` when the polygon is not y-monotone.
- `jyamiti.demo` builds random point clouds with `random_point_cloud(count,
  seed)` and `voronoi_point_cloud(seed)`. It also holds the command-line
  entry point `main`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

```python
from jyamiti.triangulation import triangulate_earclipping
from jyamiti.samples import polygon_sample

diagonals = triangulate_earclipping(polygon_sample())
print(len(diagonals))  # n - 3 diagonals for a simple polygon of n vertices
```

```python
from jyamiti.geometry import BoundRectangle
from jyamiti.voronoi import fortune_voronoi
from jyamiti.demo import voronoi_point_cloud

bounds = BoundRectangle(left_x=-1.0, right_x=1.0, top_y=1.0, bot_y=-1.0)
edges = fortune_voronoi(voronoi_point_cloud(seed=7), bounds)
```

```python
from jyamiti.bsp import PointBSP2D
from jyamiti.demo import random_point_cloud

tree = PointBSP2D(random_point_cloud(16, seed=1))
for line in tree.split_lines():
    print(line)
```

## Command line

```
jyamiti-demo [bsp|voronoi] [--seed N] [--count N]
```

- `voronoi` is the default. It builds a shuffled point cloud and computes its
  Voronoi diagram inside the square from -1 to 1. It prints the construction
  time, the number of edges and each edge.
- `bsp` builds a random cloud of `--count` points (16 by default). It prints
  the split lines of its `PointBSP2D`.
- `--seed` makes the point cloud reproducible.

## Limitations

The package has no graphical display. The command line prints results as
text, and plotting is left to the caller. The command line does not run the
triangulation samples. To see them, call `jyamiti.samples` from Python.