"""Segment-count heuristics and arc point generation."""
from __future__ import annotations

import math
import sys
from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
if str(PACKAGE_ROOT) not in sys.path:
    sys.path.insert(0, str(PACKAGE_ROOT))

import pytest

from motion_geometry.shapes import Rectangle
from motion_geometry.tessellation import (
    arc_points,
    corner_radius,
    default_segment_count,
    default_segment_count_for_range,
    optimal_segment_count,
    optimal_segment_count_for_range,
    ring_points,
    ring_segment_count,
    rounded_corner_segment_count,
    rounded_rectangle_points,
    sector_points,
)
from motion_geometry.vector import Vector2


def test_full_circle_of_radius_ten() -> None:
    # 2*pi*10 / 4 ~= 15.7
    assert optimal_segment_count(10, 360) == 16


def test_zero_angle_has_no_segments() -> None:
    assert optimal_segment_count(10, 0) == 0
    assert optimal_segment_count(10, 1e-20, minimum=5) == 0
    assert default_segment_count(0) == 0


def test_pixel_length_and_scale_are_clamped() -> None:
    assert optimal_segment_count(10, 360, segment_pixel_length=0.5) == optimal_segment_count(
        10, 360, segment_pixel_length=1.0
    )
    assert optimal_segment_count(10, 360, segment_pixel_length=0.5) == 63
    assert optimal_segment_count(10, 360, segment_pixel_length=100) == 4
    assert optimal_segment_count(10, 360, scale=0) == 2
    assert optimal_segment_count(10, 360, scale=-3) == optimal_segment_count(10, 360, scale=0.1)


def test_minimum_and_maximum_bound_the_count() -> None:
    assert optimal_segment_count(1, 10) == 1
    assert optimal_segment_count(1, 10, minimum=3) == 3
    assert optimal_segment_count(10, 360, scale=100) == 100
    assert optimal_segment_count(10, 360, maximum=8) == 8


@pytest.mark.parametrize("angle", [-720, -90, 1, 45, 359, 360, 1080])
def test_optimal_count_is_within_bounds(angle: float) -> None:
    count = optimal_segment_count(25, angle, minimum=2, maximum=40)
    assert 2 <= count <= 40


def test_negative_angles_use_magnitude() -> None:
    assert optimal_segment_count(10, -360) == 16
    assert default_segment_count(-90) == 9


def test_default_count_is_proportional() -> None:
    assert default_segment_count(360) == 36
    assert default_segment_count(90) == 9
    assert default_segment_count(95) == 10
    assert default_segment_count(1) == 1
    assert default_segment_count(360, segments_per_full_circle=12) == 12


def test_range_forms_use_angle_difference() -> None:
    assert optimal_segment_count_for_range(10, 90, -270) == 16
    assert optimal_segment_count_for_range(10, 45, 45) == 0
    assert default_segment_count_for_range(45, 135) == 9
    assert default_segment_count_for_range(135, 45) == 9


def test_ring_uses_larger_radius() -> None:
    assert ring_segment_count(5, 10, 0, 360) == 16
    assert ring_segment_count(10, 5, 0, 360) == 16
    assert ring_segment_count(5, 10, 0, 0) == 0


def test_rounded_corner_counts() -> None:
    rect = Rectangle(0, 0, 100, 40)
    assert corner_radius(rect, 0.5) == pytest.approx(10.0)
    assert corner_radius(rect, 2.0) == pytest.approx(20.0)
    assert corner_radius(Rectangle(0, 0, -30, 60), 1.0) == pytest.approx(15.0)
    # quarter arc of radius 10 ~= 15.7 px
    assert rounded_corner_segment_count(rect, 0.5) == 4
    assert rounded_corner_segment_count(rect, 2.0) == 8
    assert rounded_corner_segment_count(rect, 0.0) == 0
    assert rounded_corner_segment_count(rect, -1.0) == 0


def test_arc_points_cover_the_arc() -> None:
    center = Vector2(5.0, 5.0)
    points = arc_points(center, 10.0, 0.0, 90.0, 2)
    assert len(points) == 3
    assert points[0].x == pytest.approx(15.0) and points[0].y == pytest.approx(5.0)
    assert points[1].x == pytest.approx(5.0 + 10.0 * math.cos(math.pi / 4))
    assert points[2].x == pytest.approx(5.0) and points[2].y == pytest.approx(15.0)
    for p in points:
        assert p.distance_to(center) == pytest.approx(10.0)
    assert arc_points(center, 10.0, 0.0, 90.0, 0) == []


def test_sector_and_ring_outlines() -> None:
    center = Vector2(0.0, 0.0)
    sector = sector_points(center, 4.0, 0.0, 180.0, 6)
    assert len(sector) == 8
    assert sector[0] == center
    assert sector_points(center, 4.0, 0.0, 180.0, 0) == []

    ring = ring_points(center, 2.0, 6.0, 0.0, 90.0, 3)
    assert len(ring) == 8
    assert ring[0].magnitude() == pytest.approx(6.0)
    assert ring[3].magnitude() == pytest.approx(6.0)
    assert ring[4].magnitude() == pytest.approx(2.0)
    # inner arc runs back towards the start angle
    assert ring[-1].x == pytest.approx(2.0) and ring[-1].y == pytest.approx(0.0)


def test_rounded_rectangle_points() -> None:
    rect = Rectangle(0.0, 0.0, 100.0, 40.0)
    square = rounded_rectangle_points(rect, 0.0, 4)
    assert square == [Vector2(0, 0), Vector2(100, 0), Vector2(100, 40), Vector2(0, 40)]
    assert len(rounded_rectangle_points(rect, 0.5, 0)) == 4

    outline = rounded_rectangle_points(rect, 0.5, 4)
    assert len(outline) == 4 * 5
    # top-right corner starts at the top edge
    assert outline[0].x == pytest.approx(90.0)
    assert outline[0].y == pytest.approx(0.0)
    for p in outline:
        assert -1e-9 <= p.x <= 100.0 + 1e-9
        assert -1e-9 <= p.y <= 40.0 + 1e-9


def test_infinite_inputs_saturate() -> None:
    inf = float("inf")
    assert optimal_segment_count(inf, 90) == 100
    assert optimal_segment_count(10, inf, maximum=40) == 40
    assert optimal_segment_count(-inf, 90, minimum=3) == 3
    assert optimal_segment_count_for_range(inf, 0, 45) == 100
    assert ring_segment_count(5, inf, 0, 90) == 100
    assert rounded_corner_segment_count(Rectangle(0, 0, inf, inf), 1.0) == 100
    assert default_segment_count(inf) == 36
    assert default_segment_count(-inf, segments_per_full_circle=12) == 12


def test_nan_inputs_give_no_segments() -> None:
    nan = float("nan")
    assert optimal_segment_count(nan, 90) == 0
    assert optimal_segment_count(10, nan) == 0
    assert default_segment_count(nan) == 0
    # inf - inf is NaN
    assert default_segment_count_for_range(float("inf"), float("inf")) == 0
