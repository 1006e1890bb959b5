import math

import pytest

from jyamiti.geometry import BoundRectangle, Line2d, Vector2, distance
from jyamiti.voronoi import clip_outer_edge, compute_arc_y, fortune_voronoi

BOUNDS = BoundRectangle(-10.0, 10.0, 10.0, -10.0)
TRIANGLE = [Vector2(1.0, 2.0), Vector2(2.0, 0.1), Vector2(0.0, 0.0)]


def _on_boundary(point, bounds):
    return (
        math.isclose(point.x, bounds.left_x, abs_tol=1e-9)
        or math.isclose(point.x, bounds.right_x, abs_tol=1e-9)
        or math.isclose(point.y, bounds.top_y, abs_tol=1e-9)
        or math.isclose(point.y, bounds.bot_y, abs_tol=1e-9)
    )


@pytest.mark.parametrize(
    "site, point",
    [
        (Vector2(1.0, 2.0), Vector2(0.0, 0.0)),
        (Vector2(-0.5, 0.3), Vector2(0.7, -0.4)),
        (Vector2(0.0, 2.0), Vector2(0.0, 0.0)),
        (Vector2(3.0, 1.0), Vector2(-2.0, -5.0)),
    ],
)
def test_arc_point_is_equidistant_from_focus_and_directrix(site, point):
    y = compute_arc_y(site, point)
    assert distance(Vector2(point.x, y), site) == pytest.approx(y - point.y)


def test_arc_with_focus_on_sweep_line_is_degenerate():
    assert compute_arc_y(Vector2(1.0, 0.5), Vector2(3.0, 0.5)) == 0.0


def test_clip_outside_start_gives_none():
    line = Line2d(Vector2(20.0, 0.0), Vector2(1.0, 1.0))
    assert clip_outer_edge(line, BOUNDS) is None


def test_clip_without_direction_gives_none():
    line = Line2d(Vector2(0.0, 0.0), Vector2(0.0, 0.0))
    assert clip_outer_edge(line, BOUNDS) is None


def test_clip_horizontal_reaches_right_side():
    line = Line2d(Vector2(0.0, 0.0), Vector2(1.0, 0.0))
    edge = clip_outer_edge(line, BOUNDS)
    assert edge.p2 == Vector2(10.0, 0.0)


@pytest.mark.parametrize(
    "direction",
    [
        Vector2(1.0, 2.0),
        Vector2(-3.0, 1.0),
        Vector2(-1.0, -1.0),
        Vector2(2.0, -5.0),
        Vector2(0.0, -1.0),
        Vector2(0.0, 1.0),
    ],
)
def test_clip_ends_on_boundary_along_ray(direction):
    start = Vector2(1.5, -2.0)
    edge = clip_outer_edge(Line2d(start, direction), BOUNDS)
    assert edge.p1 == start
    assert _on_boundary(edge.p2, BOUNDS)
    assert BOUNDS.contains(edge.p2) or _on_boundary(edge.p2, BOUNDS)
    offset = edge.p2 - start
    assert offset.cross(direction) == pytest.approx(0.0, abs=1e-9)
    assert offset.dot(direction) > 0
    assert edge.fp1 is None and edge.fp2 is None


def test_empty_and_single_point_have_no_edges():
    assert fortune_voronoi([], BOUNDS) == []
    assert fortune_voronoi([Vector2(0.0, 0.0)], BOUNDS) == []


def test_two_points_edges_lie_on_bisector():
    a, b = Vector2(0.0, 1.0), Vector2(1.0, 0.0)
    edges = fortune_voronoi([a, b], BOUNDS)
    assert edges
    for edge in edges:
        for p in (edge.p1, edge.p2):
            assert distance(p, a) == pytest.approx(distance(p, b))


def test_duplicates_are_ignored():
    a, b = Vector2(0.0, 1.0), Vector2(1.0, 0.0)
    assert fortune_voronoi([a, b, a], BOUNDS) == fortune_voronoi([a, b], BOUNDS)


def test_triangle_finite_edges_meet_at_circumcenter():
    edges = fortune_voronoi(TRIANGLE, BOUNDS)
    finite = [e for e in edges if e.fp1 is not None]
    assert len(finite) == 2
    vertex = finite[0].p2
    assert finite[1].p2 == vertex
    radii = [distance(vertex, site) for site in TRIANGLE]
    assert radii[0] == pytest.approx(radii[1])
    assert radii[1] == pytest.approx(radii[2])


def test_triangle_edges_separate_their_sites():
    edges = fortune_voronoi(TRIANGLE, BOUNDS)
    for edge in (e for e in edges if e.fp1 is not None):
        for p in (edge.p1, edge.p2):
            near = distance(p, edge.fp1)
            assert near == pytest.approx(distance(p, edge.fp2))
            assert all(distance(p, s) >= near - 1e-9 for s in TRIANGLE)


def test_triangle_outer_edges_reach_bounds():
    edges = fortune_voronoi(TRIANGLE, BOUNDS)
    outer = [e for e in edges if e.fp1 is None]
    assert len(outer) == 3
    for edge in outer:
        assert BOUNDS.contains(edge.p1)
        assert _on_boundary(edge.p2, BOUNDS)
        nearest = sorted(distance(edge.p2, s) for s in TRIANGLE)
        assert nearest[0] == pytest.approx(nearest[1])