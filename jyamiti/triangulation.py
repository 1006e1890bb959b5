"""Triangulation of simple polygons by ear clipping and of y-monotone polygons."""

from __future__ import annotations

from typing import Iterable, Sequence

from jyamiti.geometry import (
    TOLERANCE,
    Edge2d,
    Vector2,
    orientation,
    top_bottom_left_right_key,
)


def _orientation_sign(points: Sequence[Vector2]) -> int:
    """+1 for a counterclockwise polygon, -1 for a clockwise one."""
    if len(points) < 3:
        raise ValueError("a polygon needs at least three vertices")
    doubled_area = sum(p.cross(q) for p, q in zip(points, [*points[1:], points[0]]))
    if abs(doubled_area) <= TOLERANCE:
        raise ValueError("the polygon has no area")
    return 1 if doubled_area > 0 else -1


def _between(a: Vector2, b: Vector2, c: Vector2) -> bool:
    """Whether c lies on the closed segment ab."""
    if abs(orientation(a, b, c)) > TOLERANCE:
        return False
    return (
        min(a.x, b.x) - TOLERANCE <= c.x <= max(a.x, b.x) + TOLERANCE
        and min(a.y, b.y) - TOLERANCE <= c.y <= max(a.y, b.y) + TOLERANCE
    )


def _segments_intersect(a: Vector2, b: Vector2, c: Vector2, d: Vector2) -> bool:
    o1, o2 = orientation(a, b, c), orientation(a, b, d)
    o3, o4 = orientation(c, d, a), orientation(c, d, b)
    straddles_ab = (o1 > TOLERANCE and o2 < -TOLERANCE) or (
        o1 < -TOLERANCE and o2 > TOLERANCE
    )
    straddles_cd = (o3 > TOLERANCE and o4 < -TOLERANCE) or (
        o3 < -TOLERANCE and o4 > TOLERANCE
    )
    if straddles_ab and straddles_cd:
        return True
    return (
        _between(a, b, c)
        or _between(a, b, d)
        or _between(c, d, a)
        or _between(c, d, b)
    )


def _in_cone(poly: Sequence[Vector2], a: int, b: int, sign: int) -> bool:
    n = len(poly)
    before, after = poly[(a - 1) % n], poly[(a + 1) % n]
    pa, pb = poly[a], poly[b]

    def turn(p: Vector2, q: Vector2, r: Vector2) -> float:
        return sign * orientation(p, q, r)

    if turn(pa, after, before) >= -TOLERANCE:
        return turn(pa, pb, before) > TOLERANCE and turn(pb, pa, after) > TOLERANCE
    return not (
        turn(pa, pb, after) >= -TOLERANCE and turn(pb, pa, before) >= -TOLERANCE
    )


def _crosses_no_edge(poly: Sequence[Vector2], a: int, b: int) -> bool:
    n = len(poly)
    for c in range(n):
        c1 = (c + 1) % n
        if c in (a, b) or c1 in (a, b):
            continue
        if _segments_intersect(poly[a], poly[b], poly[c], poly[c1]):
            return False
    return True


def _is_diagonal(poly: Sequence[Vector2], a: int, b: int, sign: int) -> bool:
    n = len(poly)
    if a == b or (a - b) % n in (1, n - 1):
        return False
    return (
        _in_cone(poly, a, b, sign)
        and _in_cone(poly, b, a, sign)
        and _crosses_no_edge(poly, a, b)
    )


def is_diagonal(points: Iterable[Vector2], a: int, b: int) -> bool:
    """Whether the segment between vertices ``a`` and ``b`` lies inside the polygon."""
    poly = list(points)
    sign = _orientation_sign(poly)
    for index in (a, b):
        if not 0 <= index < len(poly):
            raise IndexError(f"vertex index {index} out of range")
    return _is_diagonal(poly, a, b, sign)


def triangulate_earclipping(points: Iterable[Vector2]) -> list[Edge2d]:
    """Diagonals that triangulate a simple polygon, found by clipping ears.

    Ears are clipped in vertex order: the first unclipped ear is always taken.
    """
    poly = list(points)
    sign = _orientation_sign(poly)
    n = len(poly)
    nxt = {i: (i + 1) % n for i in range(n)}
    prv = {i: (i - 1) % n for i in range(n)}

    def ear(vertex: int) -> bool:
        cycle = [vertex]
        current = nxt[vertex]
        while current != vertex:
            cycle.append(current)
            current = nxt[current]
        return _is_diagonal([poly[k] for k in cycle], len(cycle) - 1, 1, sign)

    is_ear = {i: ear(i) for i in range(n)}
    clipped: set[int] = set()
    diagonals: list[Edge2d] = []
    remaining = n
    while remaining > 3:
        tip = next(
            (i for i in range(n) if i not in clipped and is_ear[i]), None
        )
        if tip is None:
            raise ValueError("no ear found; the polygon is not simple")
        before, after = prv[tip], nxt[tip]
        diagonals.append(Edge2d(poly[before], poly[after]))
        clipped.add(tip)
        nxt[before], prv[after] = after, before
        remaining -= 1
        is_ear[before] = ear(before)
        is_ear[after] = ear(after)
    return diagonals


def triangulate_monotone(points: Iterable[Vector2]) -> list[Edge2d]:
    """Diagonals that triangulate a y-monotone polygon.

    Raises ValueError when the polygon is not monotone in y.
    """
    poly = list(points)
    if _orientation_sign(poly) < 0:
        poly.reverse()
    n = len(poly)
    if n == 3:
        return []

    def key(index: int) -> tuple[float, float]:
        return top_bottom_left_right_key(poly[index])

    order = sorted(range(n), key=key)
    top, bottom = order[0], order[-1]

    left_chain: set[int] = set()
    current = top
    while current != bottom:
        following = (current + 1) % n
        if key(following) <= key(current):
            raise ValueError("the polygon is not y-monotone")
        left_chain.add(current)
        current = following
    while current != top:
        following = (current + 1) % n
        if key(following) >= key(current):
            raise ValueError("the polygon is not y-monotone")
        current = following

    diagonals: list[Edge2d] = []

    def add(u: int, v: int) -> None:
        diagonals.append(Edge2d(poly[u], poly[v]))

    stack = [order[0], order[1]]
    for j in range(2, n - 1):
        u = order[j]
        if (u in left_chain) != (stack[-1] in left_chain):
            for v in reversed(stack[1:]):
                add(u, v)
            stack = [order[j - 1], u]
        else:
            last = stack.pop()
            while stack:
                w = stack[-1]
                turn = orientation(poly[w], poly[last], poly[u])
                valid = turn > TOLERANCE if u in left_chain else turn < -TOLERANCE
                if not valid:
                    break
                add(u, w)
                last = stack.pop()
            stack.append(last)
            stack.append(u)

    lowest = order[-1]
    for v in reversed(stack[1:-1]):
        add(lowest, v)
    return diagonals