"""Off-screen drawing through the pygame renderer."""
from __future__ import annotations

import os
import sys
from pathlib import Path

# Allow pygame to initialize without a real display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
if str(PACKAGE_ROOT) not in sys.path:
    sys.path.insert(0, str(PACKAGE_ROOT))

import pygame  # noqa: E402

from motion_geometry.render import NAMED_COLORS, ShapeRenderer, resolve_color  # noqa: E402
from motion_geometry.shapes import Circle, LineSegment, Polygon, Rectangle, RegularPolygon, Triangle  # noqa: E402
from motion_geometry.vector import Vector2  # noqa: E402

BACKGROUND = (0, 0, 0)
INK = (200, 50, 50)


def _surface() -> pygame.Surface:
    surface = pygame.Surface((120, 120))
    surface.fill(BACKGROUND)
    return surface


def _pixel(surface: pygame.Surface, x: int, y: int) -> tuple:
    return tuple(surface.get_at((x, y)))[:3]


def test_resolve_color() -> None:
    assert resolve_color("Red") == NAMED_COLORS["red"]
    assert resolve_color("no-such-color") == (180, 180, 180)
    assert resolve_color((300, -5, 12)) == (255, 0, 12)


def test_segments_for_arc_modes() -> None:
    proportional = ShapeRenderer(_surface())
    assert proportional.segments_for_arc(10, 0, 360) == 36
    assert proportional.segments_for_arc(10, 0, 360, segments=5) == 5
    budget = ShapeRenderer(_surface(), segment_pixel_length=4.0)
    assert budget.segments_for_arc(10, 0, 360) == 16
    assert budget.segments_for_arc(10, 0, 0) == 0


def test_filled_circle_and_outline() -> None:
    surface = _surface()
    renderer = ShapeRenderer(surface)
    assert renderer.draw_circle(Circle(Vector2(60, 60), 20), INK)
    assert _pixel(surface, 60, 60) == INK
    assert _pixel(surface, 5, 5) == BACKGROUND

    surface = _surface()
    renderer = ShapeRenderer(surface)
    assert renderer.draw_circle(Circle(Vector2(60, 60), 20), INK, width=2)
    assert _pixel(surface, 60, 60) == BACKGROUND


def test_zero_sweep_draws_nothing() -> None:
    surface = _surface()
    renderer = ShapeRenderer(surface)
    assert not renderer.draw_circle_sector(Circle(Vector2(60, 60), 20), 30, 30, INK)
    assert not renderer.draw_ring(Vector2(60, 60), 10, 20, 45, 45, INK)
    assert _pixel(surface, 60, 60) == BACKGROUND


def test_sector_fills_only_its_quadrant() -> None:
    surface = _surface()
    renderer = ShapeRenderer(surface, segment_pixel_length=2.0)
    # screen-space angles grow clockwise, so 0..90 is the lower-right quadrant
    assert renderer.draw_circle_sector(Circle(Vector2(60, 60), 40), 0, 90, INK)
    assert _pixel(surface, 75, 75) == INK
    assert _pixel(surface, 45, 45) == BACKGROUND


def test_ring_leaves_center_empty() -> None:
    surface = _surface()
    renderer = ShapeRenderer(surface)
    assert renderer.draw_ring(Vector2(60, 60), 20, 40, 0, 180, INK)
    assert _pixel(surface, 60, 90) == INK
    assert _pixel(surface, 60, 65) == BACKGROUND


def test_rectangles_and_rounded_corners() -> None:
    surface = _surface()
    renderer = ShapeRenderer(surface)
    assert renderer.draw_rectangle(Rectangle(10, 10, 50, 30), INK)
    assert _pixel(surface, 30, 20) == INK
    assert _pixel(surface, 70, 20) == BACKGROUND

    surface = _surface()
    renderer = ShapeRenderer(surface)
    assert renderer.draw_rounded_rectangle(Rectangle(10, 10, 100, 100), 1.0, INK)
    assert _pixel(surface, 60, 60) == INK
    # the corner is cut away by the rounding
    assert _pixel(surface, 11, 11) == BACKGROUND


def test_other_shapes_dispatch() -> None:
    surface = _surface()
    renderer = ShapeRenderer(surface)
    assert renderer.draw_shape(Triangle(Vector2(10, 10), Vector2(100, 10), Vector2(10, 100)), INK)
    assert _pixel(surface, 20, 20) == INK

    surface = _surface()
    renderer = ShapeRenderer(surface)
    assert renderer.draw_shape(LineSegment(Vector2(0, 50), Vector2(119, 50)), INK, 3)
    assert _pixel(surface, 60, 50) == INK

    surface = _surface()
    renderer = ShapeRenderer(surface)
    assert renderer.draw_shape(RegularPolygon(Vector2(60, 60), 6, 30), INK)
    assert _pixel(surface, 60, 60) == INK

    assert not renderer.draw_shape(Polygon([Vector2(1, 1)]), INK)
    assert not renderer.draw_shape("not a shape", INK)
