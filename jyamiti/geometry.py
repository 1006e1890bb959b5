"""Basic 2D geometry: vectors, lines, segments, edges and predicates."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Optional

TOLERANCE = 1e-6


@dataclass(frozen=True, order=True)
class Vector2:
    """A 2D vector or point, ordered lexicographically by x then y."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2":
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vector2":
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def dot(self, other: "Vector2") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector2") -> float:
        """The z component of the 3D cross product."""
        return self.x * other.y - self.y * other.x

    def perpendicular(self) -> "Vector2":
        """The vector rotated a quarter turn counterclockwise."""
        return Vector2(-self.y, self.x)

    def length(self) -> float:
        return math.hypot(self.x, self.y)


Point2d = Vector2


@dataclass(frozen=True)
class Line2d:
    """An infinite line through ``point`` along ``direction``; ``d`` is its plane offset."""

    point: Vector2
    direction: Vector2
    d: float = 0.0

    def normal(self) -> Vector2:
        return self.direction.perpendicular()

    def point_at(self, t: float) -> Vector2:
        return self.point + self.direction * t


@dataclass(frozen=True)
class Segment2d:
    """A line segment between two points."""

    p1: Vector2
    p2: Vector2


@dataclass(frozen=True)
class Edge2d:
    """An edge with optional focus points of the two sites it separates."""

    p1: Vector2
    p2: Vector2
    fp1: Optional[Vector2] = None
    fp2: Optional[Vector2] = None


@dataclass(frozen=True)
class BoundRectangle:
    """An axis-aligned bounding rectangle."""

    left_x: float
    right_x: float
    top_y: float
    bot_y: float

    def contains(self, point: Vector2) -> bool:
        return (
            self.left_x <= point.x <= self.right_x
            and self.bot_y <= point.y <= self.top_y
        )


def is_equal(a: float, b: float) -> bool:
    """Compare two floats within the geometric tolerance."""
    return abs(a - b) < TOLERANCE


def orientation(a: Vector2, b: Vector2, c: Vector2) -> float:
    """Twice the signed area of triangle abc; positive when counterclockwise."""
    return (b - a).cross(c - a)


def left(a: Vector2, b: Vector2, c: Vector2) -> bool:
    """Whether c lies strictly to the left of the directed line a -> b."""
    return orientation(a, b, c) > TOLERANCE


def left_of_line(line: Line2d, point: Vector2) -> bool:
    """Whether the point lies strictly to the left of the directed line."""
    return left(line.point, line.point + line.direction, point)


def distance(a: Vector2, b: Vector2) -> float:
    return (b - a).length()


def intersect_lines(first: Line2d, second: Line2d) -> Optional[Vector2]:
    """The intersection point of two lines, or None when they are parallel."""
    denominator = first.direction.cross(second.direction)
    if is_equal(denominator, 0.0):
        return None
    t = (second.point - first.point).cross(second.direction) / denominator
    return first.point_at(t)


def intersect_line_segment(line: Line2d, segment: Segment2d) -> Optional[Vector2]:
    """Where the line meets the segment, or None when it misses or runs parallel."""
    seg_dir = segment.p2 - segment.p1
    denominator = seg_dir.cross(line.direction)
    if is_equal(denominator, 0.0):
        return None
    s = (line.point - segment.p1).cross(line.direction) / denominator
    if -TOLERANCE <= s <= 1.0 + TOLERANCE:
        return segment.p1 + seg_dir * s
    return None


def top_bottom_left_right_key(point: Vector2) -> tuple[float, float]:
    """Sort key ordering points from top to bottom, then left to right."""
    return (-point.y, point.x)