"""Command-line demonstrations: BSP split lines and Voronoi diagrams of point clouds."""

from __future__ import annotations

import argparse
import random
import time
from typing import Optional, Sequence

from jyamiti.bsp import PointBSP2D
from jyamiti.geometry import BoundRectangle, Vector2
from jyamiti.voronoi import fortune_voronoi

BSP_POINT_COUNT = 16
VORONOI_BOUNDS = BoundRectangle(left_x=-1.0, right_x=1.0, top_y=1.0, bot_y=-1.0)


def random_point_cloud(count: int, seed: Optional[int] = None) -> list[Vector2]:
    """Random points on a 0.01 grid with coordinates in [-0.99, 0.98]."""
    if count < 0:
        raise ValueError("the point count must not be negative")
    rng = random.Random(seed)
    return [
        Vector2((rng.randrange(198) - 99) / 100, (rng.randrange(198) - 99) / 100)
        for _ in range(count)
    ]


def voronoi_point_cloud(seed: Optional[int] = None) -> list[Vector2]:
    """Points whose x and y values are shuffled copies of one evenly spaced set.

    The result is sorted left to right, then top to bottom, without duplicates.
    """
    if seed is None:
        seed = time.time_ns()
    x_values = [(i - 49) / 50 for i in range(1, 99)]
    random.Random(seed).shuffle(x_values)
    y_values = list(x_values)
    random.Random(seed).shuffle(y_values)
    points = sorted(
        (Vector2(x, y) for x, y in zip(x_values, y_values)),
        key=lambda p: (p.x, -p.y),
    )
    return list(dict.fromkeys(points))


def _fmt(point: Vector2) -> str:
    return f"({point.x:g}, {point.y:g})"


def _run_bsp(count: int, seed: Optional[int]) -> None:
    points = random_point_cloud(count, seed)
    lines = PointBSP2D(points).split_lines()
    print(f"BSP split lines for {len(points)} points: {len(lines)}")
    for line in lines:
        print(f"point {_fmt(line.point)} direction {_fmt(line.direction)}")


def _run_voronoi(seed: Optional[int]) -> None:
    points = voronoi_point_cloud(seed)
    start = time.perf_counter()
    edges = fortune_voronoi(points, VORONOI_BOUNDS)
    elapsed = time.perf_counter() - start
    print(f"Voronoi Diagram 2d construction time - {elapsed}")
    print(f"Voronoi edges for {len(points)} points: {len(edges)}")
    for edge in edges:
        print(f"{_fmt(edge.p1)} - {_fmt(edge.p2)}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one of the demonstrations and print its result."""
    parser = argparse.ArgumentParser(
        prog="jyamiti-demo",
        description="Show BSP split lines or a Voronoi diagram of a point cloud.",
    )
    parser.add_argument(
        "sample", nargs="?", choices=("bsp", "voronoi"), default="voronoi"
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--count", type=int, default=BSP_POINT_COUNT)
    args = parser.parse_args(argv)
    if args.count < 0:
        parser.error("--count must not be negative")
    if args.sample == "bsp":
        _run_bsp(args.count, args.seed)
    else:
        _run_voronoi(args.seed)
    return 0