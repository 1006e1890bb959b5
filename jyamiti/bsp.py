"""Binary space partitioning of 2D point sets and segment sets."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Iterable, Iterator, Optional

from jyamiti.geometry import (
    TOLERANCE,
    Line2d,
    Segment2d,
    Vector2,
    intersect_line_segment,
    orientation,
)

MIN_ELEMENTS_PER_PARTITION = 4


class SegmentType(enum.Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    INTERSECT = "intersect"


@dataclass
class _PointNode:
    points: list[Vector2]
    split_line: Optional[Line2d] = None
    neg: Optional["_PointNode"] = None
    pos: Optional["_PointNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.neg is None and self.pos is None


def _left(line: Line2d, point: Vector2) -> bool:
    return orientation(line.point, line.point + line.direction, point) > TOLERANCE


class PointBSP2D:
    """A BSP tree over points; leaves hold at most a few points each."""

    def __init__(self, points: Iterable[Vector2]) -> None:
        self.root = self._build(list(points), None)

    @staticmethod
    def _split_line(points: list[Vector2], previous: Optional[Line2d]) -> Line2d:
        if previous is None:
            p1 = (points[0] + points[1]) / 2
            p2 = (points[-1] + points[-2]) / 2
            line = Line2d(p1, p2 - p1)
        else:
            count = len(points)
            p1 = Vector2(
                sum(p.x for p in points) / count, sum(p.y for p in points) / count
            )
            p2 = Vector2(-previous.direction.y + 0.2, previous.direction.x + 0.2)
            line = Line2d(p1, p2)
        return replace(line, d=line.normal().dot(p2))

    def _build(self, points: list[Vector2], previous: Optional[Line2d]) -> _PointNode:
        if len(points) <= MIN_ELEMENTS_PER_PARTITION:
            return _PointNode(points)
        points = sorted(points)
        line = self._split_line(points, previous)
        neg = [p for p in points if _left(line, p)]
        pos = [p for p in points if not _left(line, p)]
        if not neg or not pos:
            # The line failed to separate anything; stop instead of recursing forever.
            return _PointNode(points)
        return _PointNode(
            [], line, self._build(neg, line), self._build(pos, line)
        )

    def split_lines(self) -> list[Line2d]:
        """The split lines of all inner nodes, in pre-order."""

        def walk(node: Optional[_PointNode]) -> Iterator[Line2d]:
            if node is None or node.is_leaf:
                return
            yield node.split_line
            yield from walk(node.neg)
            yield from walk(node.pos)

        return list(walk(self.root))


def classify_segment(
    segment: Segment2d, line: Line2d
) -> tuple[SegmentType, Optional[Segment2d], Optional[Segment2d]]:
    """Classify a segment against a line, splitting it where it crosses.

    Returns the type together with the positive (left) and negative parts.
    """
    side1 = orientation(line.point, line.point + line.direction, segment.p1)
    side2 = orientation(line.point, line.point + line.direction, segment.p2)
    crosses = (side1 > TOLERANCE and side2 < -TOLERANCE) or (
        side1 < -TOLERANCE and side2 > TOLERANCE
    )
    if crosses:
        point = intersect_line_segment(line, segment)
        if point is not None:
            if side1 > TOLERANCE:
                return (
                    SegmentType.INTERSECT,
                    Segment2d(segment.p1, point),
                    Segment2d(point, segment.p2),
                )
            return (
                SegmentType.INTERSECT,
                Segment2d(segment.p2, point),
                Segment2d(point, segment.p1),
            )
    if side1 > TOLERANCE or (abs(side1) <= TOLERANCE and side2 > TOLERANCE):
        return SegmentType.POSITIVE, segment, None
    return SegmentType.NEGATIVE, None, segment


@dataclass
class _SegmentNode:
    segment: Segment2d
    split_line: Optional[Line2d] = None
    neg: Optional["_SegmentNode"] = None
    pos: Optional["_SegmentNode"] = None


class SegmentBSP2D:
    """A BSP tree over segments, splitting along the least-crossing segment."""

    def __init__(self, segments: Iterable[Segment2d]) -> None:
        self.root = self._build(list(segments))

    @staticmethod
    def _choose_split(segments: list[Segment2d]) -> tuple[int, Line2d]:
        best_index, best_line, best_count = 0, None, None
        for index, seg in enumerate(segments):
            line = Line2d(seg.p1, seg.p2 - seg.p1)
            count = sum(
                1
                for other_index, other in enumerate(segments)
                if other_index != index
                and intersect_line_segment(line, other) is not None
            )
            if best_count is None or count < best_count:
                best_index, best_line, best_count = index, line, count
        return best_index, best_line

    def _build(self, segments: list[Segment2d]) -> Optional[_SegmentNode]:
        if not segments:
            return None
        if len(segments) == 1:
            seg = segments[0]
            return _SegmentNode(seg, Line2d(seg.p1, seg.p2 - seg.p1))
        split_index, line = self._choose_split(segments)
        positives: list[Segment2d] = []
        negatives: list[Segment2d] = []
        for index, seg in enumerate(segments):
            if index == split_index:
                continue
            _, pos_part, neg_part = classify_segment(seg, line)
            if pos_part is not None:
                positives.append(pos_part)
            if neg_part is not None:
                negatives.append(neg_part)
        return _SegmentNode(
            segments[split_index],
            line,
            neg=self._build(negatives),
            pos=self._build(positives),
        )

    def render(self) -> str:
        """An indented in-order listing: positive side, node, negative side."""

        def fmt(p: Vector2) -> str:
            return f"({p.x:g},{p.y:g})"

        def walk(node: Optional[_SegmentNode], depth: int) -> Iterator[str]:
            if node is None:
                return
            yield from walk(node.pos, depth + 1)
            yield f"{' ' * depth}< {fmt(node.segment.p1)} - {fmt(node.segment.p2)}\n"
            yield from walk(node.neg, depth + 1)

        return "".join(walk(self.root, 0))