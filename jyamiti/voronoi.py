"""Voronoi diagrams of 2D point sets with Fortune's sweep-line algorithm."""

from __future__ import annotations

import enum
import heapq
import itertools
import math
from dataclasses import dataclass, field
from typing import Iterable, Optional, Union

from jyamiti.geometry import (
    TOLERANCE,
    BoundRectangle,
    Edge2d,
    Line2d,
    Vector2,
    distance,
    intersect_lines,
    is_equal,
    top_bottom_left_right_key,
)


def compute_arc_y(site: Vector2, point: Vector2) -> float:
    """Height of the parabola with focus ``site`` above ``point.x``.

    The directrix is the horizontal sweep line through ``point``.  A focus
    lying on the sweep line yields 0.0, as the parabola degenerates.
    """
    yf, yd = site.y, point.y
    xf, xd = site.x, point.x
    if is_equal(yf, yd):
        return 0.0
    if is_equal(xf, xd):
        return (yf + yd) / 2
    dp = 2 * (yf - yd)
    a1 = 1 / dp
    b1 = -2 * xf / dp
    c1 = yd + dp / 4 + xf * xf / dp
    return a1 * xd * xd + b1 * xd + c1


def clip_outer_edge(line: Line2d, bounds: BoundRectangle) -> Optional[Edge2d]:
    """Cut an unbounded edge where it leaves the bounding rectangle.

    Returns None when the edge starts outside the rectangle or has no direction.
    """
    start, direction = line.point, line.direction
    if not bounds.contains(start):
        return None
    limits = []
    if direction.x > 0:
        limits.append((bounds.right_x - start.x) / direction.x)
    elif direction.x < 0:
        limits.append((bounds.left_x - start.x) / direction.x)
    if direction.y > 0:
        limits.append((bounds.top_y - start.y) / direction.y)
    elif direction.y < 0:
        limits.append((bounds.bot_y - start.y) / direction.y)
    if not limits:
        return None
    return Edge2d(start, line.point_at(min(limits)))


class _EventKind(enum.Enum):
    SITE = "site"
    CIRCLE = "circle"


@dataclass(eq=False)
class _Edge:
    line: Line2d
    completed: bool = False


@dataclass(eq=False)
class _Arc:
    site: Vector2
    events: list["_Event"] = field(default_factory=list)
    prev_arc: Optional["_Arc"] = None
    next_arc: Optional["_Arc"] = None
    prev_edge: Optional[_Edge] = None
    next_edge: Optional[_Edge] = None


@dataclass(eq=False)
class _Event:
    kind: _EventKind
    site: Vector2
    arc: Optional[_Arc] = None
    vertex: Optional[Vector2] = None
    valid: bool = True


def _invalidate(arc: _Arc) -> None:
    for event in arc.events:
        if event.kind is _EventKind.CIRCLE:
            event.valid = False


def _ahead(line: Line2d, point: Vector2) -> bool:
    return (point - line.point).dot(line.direction) >= -TOLERANCE


class _FortuneSweep:
    def __init__(self, bounds: BoundRectangle) -> None:
        self.bounds = bounds
        self.queue: list[tuple[float, float, int, _Event]] = []
        self.counter = itertools.count()
        self.beach: list[Union[_Arc, _Edge]] = []
        self.edges: list[Edge2d] = []

    def push(self, event: _Event) -> None:
        # Highest y first; on equal y, larger x first.
        heapq.heappush(
            self.queue, (-event.site.y, -event.site.x, next(self.counter), event)
        )

    def run(self, points: Iterable[Vector2]) -> list[Edge2d]:
        unique = dict.fromkeys(sorted(points, key=top_bottom_left_right_key))
        for point in unique:
            self.push(_Event(_EventKind.SITE, point))
        while self.queue:
            event = heapq.heappop(self.queue)[3]
            if not event.valid:
                continue
            if event.kind is _EventKind.SITE:
                self.handle_site(event)
            else:
                self.handle_circle(event)
        for item in self.beach:
            if isinstance(item, _Edge):
                clipped = clip_outer_edge(item.line, self.bounds)
                if clipped is not None:
                    self.edges.append(clipped)
        return self.edges

    def index_of(self, item: Union[_Arc, _Edge]) -> int:
        return next(i for i, other in enumerate(self.beach) if other is item)

    def arc_above(self, point: Vector2) -> int:
        current_index = 0
        current_y = math.inf
        found_greater_x = False
        for index, item in enumerate(self.beach):
            if not isinstance(item, _Arc):
                continue
            arc_y = compute_arc_y(item.site, point)
            if arc_y < current_y or (
                is_equal(arc_y, current_y) and not found_greater_x
            ):
                current_index, current_y = index, arc_y
                found_greater_x = False
            elif item.site.x > point.x:
                found_greater_x = True
        return current_index

    def add_new_arc(self, index: int, site: Vector2) -> _Arc:
        old = self.beach[index]
        left_arc = _Arc(old.site)
        new_arc = _Arc(site)
        right_arc = _Arc(old.site)

        start = Vector2(site.x, compute_arc_y(old.site, site))
        direction = -(site - old.site).perpendicular()
        left_edge = _Edge(Line2d(start, direction))
        right_edge = _Edge(Line2d(start, -direction))

        left_arc.prev_arc, left_arc.next_arc = old.prev_arc, new_arc
        new_arc.prev_arc, new_arc.next_arc = left_arc, right_arc
        right_arc.prev_arc, right_arc.next_arc = new_arc, old.next_arc

        left_arc.prev_edge, left_arc.next_edge = old.prev_edge, left_edge
        new_arc.prev_edge, new_arc.next_edge = left_edge, right_edge
        right_arc.prev_edge, right_arc.next_edge = right_edge, old.next_edge

        if old.prev_arc is not None:
            old.prev_arc.next_arc = left_arc
        if old.next_arc is not None:
            old.next_arc.prev_arc = right_arc

        _invalidate(old)
        self.beach[index:index + 1] = [
            left_arc, left_edge, new_arc, right_edge, right_arc
        ]
        return new_arc

    def add_circle_event(self, arc: Optional[_Arc]) -> None:
        if arc is None or arc.prev_arc is None or arc.next_arc is None:
            return
        first, second = arc.prev_edge.line, arc.next_edge.line
        vertex = intersect_lines(first, second)
        # Pending events of this arc belong to an older arc triple.
        _invalidate(arc)
        if vertex is None or not (_ahead(first, vertex) and _ahead(second, vertex)):
            return
        event_y = vertex.y - distance(vertex, arc.site)
        event = _Event(
            _EventKind.CIRCLE, Vector2(vertex.x, event_y), arc=arc, vertex=vertex
        )
        arc.events.append(event)
        self.push(event)

    def handle_site(self, event: _Event) -> None:
        if not self.beach:
            self.beach.append(_Arc(event.site))
            return
        new_arc = self.add_new_arc(self.arc_above(event.site), event.site)
        self.add_circle_event(new_arc.prev_arc)
        self.add_circle_event(new_arc.next_arc)

    def handle_circle(self, event: _Event) -> None:
        arc = event.arc
        vertex = event.vertex
        left_arc, right_arc = arc.prev_arc, arc.next_arc

        arc.prev_edge.completed = True
        arc.next_edge.completed = True
        self.edges.append(
            Edge2d(arc.prev_edge.line.point, vertex, left_arc.site, arc.site)
        )
        self.edges.append(
            Edge2d(arc.next_edge.line.point, vertex, arc.site, right_arc.site)
        )

        between = right_arc.site - left_arc.site
        new_edge = _Edge(Line2d(vertex, Vector2(between.y, -between.x)))

        left_arc.next_arc, left_arc.next_edge = right_arc, new_edge
        right_arc.prev_arc, right_arc.prev_edge = left_arc, new_edge

        index = self.index_of(arc)
        _invalidate(arc)
        self.beach[index - 1:index + 2] = [new_edge]

        self.add_circle_event(left_arc)
        self.add_circle_event(right_arc)


def fortune_voronoi(
    points: Iterable[Vector2], bounds: BoundRectangle
) -> list[Edge2d]:
    """Voronoi edges of the points, with unbounded edges clipped to ``bounds``.

    Finite edges carry the two sites they separate in ``fp1`` and ``fp2``;
    clipped outer edges carry None there.  Duplicate points are ignored.
    """
    return _FortuneSweep(bounds).run(points)