import pytest

from jyamiti.geometry import Vector2, orientation
from jyamiti.samples import (
    polygon_sample,
    small_polygon_sample,
    triangulation_report,
)


def _area(triangle):
    return abs(orientation(*triangle)) / 2


def test_polygon_sample_points():
    points = polygon_sample()
    assert len(points) == 15
    assert points[0] == Vector2(0.7, 0.4)
    assert points[-1] == Vector2(0.5, -0.1)


def test_small_polygon_sample_points():
    points = small_polygon_sample()
    assert len(points) == 6
    assert points[0] == Vector2(0.2, 0.4)


@pytest.mark.parametrize("points", [polygon_sample(), small_polygon_sample()])
def test_report_outline_closes(points):
    report = triangulation_report(points)
    outline = report["outline"]
    assert len(outline) == len(points)
    assert outline[-1].p2 == outline[0].p1
    assert all(a.p2 == b.p1 for a, b in zip(outline, outline[1:]))


@pytest.mark.parametrize("points", [polygon_sample(), small_polygon_sample()])
def test_report_triangles_cover_the_polygon(points):
    report = triangulation_report(points)
    assert len(report["ear_clipping"]) == len(points) - 3
    assert len(report["triangles"]) == len(points) - 2
    total = sum(_area(t) for t in report["triangles"])
    assert total == pytest.approx(report["area"])


def test_report_large_sample_is_not_monotone():
    assert triangulation_report(polygon_sample())["monotone"] is None


def test_report_small_sample_is_monotone():
    points = small_polygon_sample()
    monotone = triangulation_report(points)["monotone"]
    assert len(monotone) == len(points) - 3


def test_report_rejects_repeated_vertices():
    points = small_polygon_sample()
    with pytest.raises(ValueError):
        triangulation_report(points + [points[0]])