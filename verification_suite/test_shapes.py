"""Shape invariants, movement and vector helpers."""
from __future__ import annotations

import math
import sys
from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
if str(PACKAGE_ROOT) not in sys.path:
    sys.path.insert(0, str(PACKAGE_ROOT))

import pytest

from motion_geometry.shapes import Circle, LineSegment, Polygon, Rectangle, RegularPolygon, Triangle
from motion_geometry.vector import Vector2


def test_vector_arithmetic_and_dot() -> None:
    a = Vector2(3.0, 4.0)
    b = Vector2(1.0, -2.0)
    assert a + b == Vector2(4.0, 2.0)
    assert a - b == Vector2(2.0, 6.0)
    assert 2 * a == a * 2 == Vector2(6.0, 8.0)
    assert a / 2 == Vector2(1.5, 2.0)
    assert -a == Vector2(-3.0, -4.0)
    assert a.dot(b) == -5.0
    assert a.cross(b) == -10.0
    assert a.magnitude() == 5.0
    assert a.magnitude_squared() == 25.0
    assert tuple(a) == (3.0, 4.0)


def test_normalizing_zero_vector_returns_zero() -> None:
    assert Vector2(0.0, 0.0).normalized() == Vector2(0.0, 0.0)
    assert Vector2(1e-20, 0.0).normalized() == Vector2(0.0, 0.0)
    unit = Vector2(0.0, -7.0).normalized()
    assert unit == Vector2(0.0, -1.0)


def test_dividing_by_zero_gives_zero_vector() -> None:
    assert Vector2(5.0, 5.0) / 0 == Vector2(0.0, 0.0)


def test_circle_negative_radius_is_clamped() -> None:
    circle = Circle(Vector2(1.0, 1.0), -5.0)
    assert circle.radius == 0.0
    assert circle.resize(-1.0).radius == 0.0
    assert circle.resize(3.0).radius == 3.0
    # resize returns a copy
    assert circle.radius == 0.0


def test_move_returns_translated_copies() -> None:
    offset = Vector2(10.0, -5.0)
    circle = Circle(Vector2(0.0, 0.0), 2.0)
    assert circle.move(offset).center == offset
    assert circle.center == Vector2(0.0, 0.0)

    rect = Rectangle(1.0, 2.0, 3.0, 4.0).move(offset)
    assert rect == Rectangle(11.0, -3.0, 3.0, 4.0)

    tri = Triangle(Vector2(0, 0), Vector2(1, 0), Vector2(0, 1)).move(offset)
    assert tri.vertices() == (Vector2(10, -5), Vector2(11, -5), Vector2(10, -4))

    line = LineSegment(Vector2(0, 0), Vector2(3, 4)).move(offset)
    assert line.start == Vector2(10, -5) and line.end == Vector2(13, -1)
    assert line.length == pytest.approx(5.0)

    poly = Polygon([Vector2(0, 0), Vector2(2, 0), Vector2(2, 2)]).move(offset)
    assert poly.vertices[2] == Vector2(12, -3)


def test_rectangle_helpers() -> None:
    rect = Rectangle.from_top_left(Vector2(2.0, 4.0), 10.0, 6.0)
    assert rect.top_left == Vector2(2.0, 4.0)
    assert rect.center == Vector2(7.0, 7.0)
    assert rect.area() == 60.0


def test_polygon_accepts_any_vertex_count() -> None:
    assert Polygon().count == 0
    assert Polygon([Vector2(0, 0)]).count == 1
    square = Polygon([Vector2(0, 0), Vector2(4, 0), Vector2(4, 4), Vector2(0, 4)])
    assert square.count == 4
    assert square.area() == pytest.approx(16.0)
    assert square.bounding_rectangle() == Rectangle(0, 0, 4, 4)
    assert isinstance(square.vertices, tuple)


def test_regular_polygon_clamps_sides_and_radius() -> None:
    poly = RegularPolygon(Vector2(0, 0), 1, -2.0)
    assert poly.number_of_sides == 3
    assert poly.radius == 0.0
    grown = poly.resize(radius=5.0, number_of_sides=8)
    assert grown.number_of_sides == 8 and grown.radius == 5.0
    shrunk = grown.resize(number_of_sides=2)
    assert shrunk.number_of_sides == 3
    assert shrunk.radius == 5.0


def test_regular_polygon_vertices_are_derived() -> None:
    poly = RegularPolygon(Vector2(10.0, 20.0), 4, 2.0, rotation=math.pi / 2)
    verts = poly.vertices()
    assert len(verts) == 4
    assert verts[0].x == pytest.approx(10.0)
    assert verts[0].y == pytest.approx(22.0)
    assert verts[1].x == pytest.approx(8.0)
    assert verts[1].y == pytest.approx(20.0)
    moved = poly.move(Vector2(1.0, 1.0))
    assert moved.vertices()[0].x == pytest.approx(11.0)
    assert moved.vertices()[0].y == pytest.approx(23.0)
    assert poly.to_polygon().count == 4


def test_bounding_rectangles() -> None:
    assert Circle(Vector2(5, 5), 2).bounding_rectangle() == Rectangle(3, 3, 4, 4)
    tri = Triangle(Vector2(0, 3), Vector2(4, 0), Vector2(2, 5))
    assert tri.bounding_rectangle() == Rectangle(0, 0, 4, 5)
    assert tri.area() == pytest.approx(7.0)
