import pytest

from jyamiti.geometry import Edge2d, Vector2, orientation
from jyamiti.triangulation import (
    is_diagonal,
    triangulate_earclipping,
    triangulate_monotone,
)

SQUARE = [Vector2(0, 0), Vector2(1, 0), Vector2(1, 1), Vector2(0, 1)]
NOTCHED = [Vector2(0, 0), Vector2(2, 0), Vector2(2, 2), Vector2(1, 1), Vector2(0, 2)]
SMALL = [
    Vector2(0.2, 0.4),
    Vector2(0.6, 0.2),
    Vector2(0.8, 0.5),
    Vector2(0.9, 0.7),
    Vector2(0.5, 0.9),
    Vector2(0.4, 0.6),
]
LARGE = [
    Vector2(0.7, 0.4),
    Vector2(0.4, 0.1),
    Vector2(0.3, 0.8),
    Vector2(0.05, 0.7),
    Vector2(-0.05, 0.8),
    Vector2(-0.5, 0.5),
    Vector2(-0.2, 0.2),
    Vector2(-0.4, 0.05),
    Vector2(-0.6, 0.15),
    Vector2(-0.7, -0.2),
    Vector2(-0.3, -0.5),
    Vector2(-0.1, -0.3),
    Vector2(0.2, -0.8),
    Vector2(0.1, -0.05),
    Vector2(0.5, -0.1),
]


def _all_valid(points, diagonals):
    return all(
        is_diagonal(points, points.index(e.p1), points.index(e.p2)) for e in diagonals
    )


def _properly_cross(e, f):
    o1 = orientation(e.p1, e.p2, f.p1)
    o2 = orientation(e.p1, e.p2, f.p2)
    o3 = orientation(f.p1, f.p2, e.p1)
    o4 = orientation(f.p1, f.p2, e.p2)
    return o1 * o2 < 0 and o3 * o4 < 0


def _none_cross(diagonals):
    return not any(
        _properly_cross(e, f)
        for i, e in enumerate(diagonals)
        for f in diagonals[i + 1:]
        if {e.p1, e.p2}.isdisjoint({f.p1, f.p2})
    )


def test_is_diagonal_rejects_adjacent_vertices():
    assert is_diagonal(SQUARE, 0, 1) is False
    assert is_diagonal(SQUARE, 3, 0) is False


def test_is_diagonal_accepts_convex_opposites():
    assert is_diagonal(SQUARE, 0, 2) is True
    assert is_diagonal(SQUARE, 1, 3) is True


def test_is_diagonal_in_notched_polygon():
    assert is_diagonal(NOTCHED, 2, 4) is False
    assert is_diagonal(NOTCHED, 0, 3) is True
    assert is_diagonal(NOTCHED, 1, 3) is True


def test_is_diagonal_index_out_of_range():
    with pytest.raises(IndexError):
        is_diagonal(SQUARE, 0, 7)


def test_earclipping_square_takes_first_ear():
    assert triangulate_earclipping(SQUARE) == [Edge2d(SQUARE[3], SQUARE[1])]


def test_earclipping_triangle_has_no_diagonals():
    assert triangulate_earclipping(SQUARE[:3]) == []


@pytest.mark.parametrize("points", [SQUARE, NOTCHED, SMALL, LARGE])
def test_earclipping_produces_valid_triangulation(points):
    diagonals = triangulate_earclipping(points)
    assert len(diagonals) == len(points) - 3
    assert _all_valid(points, diagonals)
    assert _none_cross(diagonals)


def test_earclipping_clockwise_input():
    points = list(reversed(LARGE))
    diagonals = triangulate_earclipping(points)
    assert len(diagonals) == len(points) - 3
    assert _all_valid(points, diagonals)


def test_earclipping_rejects_too_few_points():
    with pytest.raises(ValueError):
        triangulate_earclipping(SQUARE[:2])


def test_earclipping_rejects_zero_area():
    bowtie = [Vector2(0, 0), Vector2(1, 1), Vector2(1, 0), Vector2(0, 1)]
    with pytest.raises(ValueError):
        triangulate_earclipping(bowtie)


def test_monotone_triangle_has_no_diagonals():
    assert triangulate_monotone(SQUARE[:3]) == []


@pytest.mark.parametrize("points", [SQUARE, SMALL, list(reversed(SMALL))])
def test_monotone_produces_valid_triangulation(points):
    diagonals = triangulate_monotone(points)
    assert len(diagonals) == len(points) - 3
    assert _all_valid(points, diagonals)
    assert _none_cross(diagonals)


def test_monotone_rejects_non_monotone_polygon():
    with pytest.raises(ValueError):
        triangulate_monotone(NOTCHED)