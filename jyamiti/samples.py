"""Sample polygons and a summary of their triangulations."""

from __future__ import annotations

from typing import Any, Iterable

from jyamiti.geometry import Edge2d, Vector2, orientation
from jyamiti.triangulation import triangulate_earclipping, triangulate_monotone


def polygon_sample() -> list[Vector2]:
    """A simple, non-monotone polygon of fifteen vertices."""
    return [
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


def small_polygon_sample() -> list[Vector2]:
    """A small y-monotone hexagon."""
    return [
        Vector2(0.2, 0.4),
        Vector2(0.6, 0.2),
        Vector2(0.8, 0.5),
        Vector2(0.9, 0.7),
        Vector2(0.5, 0.9),
        Vector2(0.4, 0.6),
    ]


def _triangles(
    points: list[Vector2], diagonals: list[Edge2d]
) -> list[tuple[Vector2, Vector2, Vector2]]:
    # In a triangulated polygon every 3-cycle of the edge graph is a face.
    index = {point: i for i, point in enumerate(points)}
    n = len(points)
    adjacency: list[set[int]] = [set() for _ in range(n)]
    pairs = [(i, (i + 1) % n) for i in range(n)]
    pairs += [(index[e.p1], index[e.p2]) for e in diagonals]
    for u, v in pairs:
        adjacency[u].add(v)
        adjacency[v].add(u)
    return [
        (points[u], points[v], points[w])
        for u in range(n)
        for v in sorted(adjacency[u])
        if v > u
        for w in sorted(adjacency[u] & adjacency[v])
        if w > v
    ]


def triangulation_report(points: Iterable[Vector2]) -> dict[str, Any]:
    """Outline, diagonals and triangles of a simple polygon.

    The keys are ``outline``, ``ear_clipping``, ``monotone`` (None when the
    polygon is not y-monotone), ``triangles`` and ``area``.
    """
    poly = list(points)
    if len(set(poly)) != len(poly):
        raise ValueError("the polygon has repeated vertices")
    outline = [Edge2d(p, q) for p, q in zip(poly, [*poly[1:], poly[0]])]
    ear_clipping = triangulate_earclipping(poly)
    try:
        monotone = triangulate_monotone(poly)
    except ValueError:
        monotone = None
    area = abs(sum(p.cross(q) for p, q in zip(poly, [*poly[1:], poly[0]]))) / 2
    return {
        "outline": outline,
        "ear_clipping": ear_clipping,
        "monotone": monotone,
        "triangles": _triangles(poly, ear_clipping),
        "area": area,
    }


def _triangle_area(triangle: tuple[Vector2, Vector2, Vector2]) -> float:
    return abs(orientation(*triangle)) / 2