"""Pygame drawing wrapper that polygonizes curved shapes before drawing."""
from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple, Union

try:  # pragma: no cover - pygame import is environment specific
    import pygame
except ImportError as exc:  # pragma: no cover
    raise ImportError(
        "Pygame is required to use the motion_geometry.render module."
    ) from exc

from . import tessellation
from .shapes import Circle, LineSegment, Polygon, Rectangle, RegularPolygon, Triangle
from .vector import Vector2

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]
ColorLike = Union[Color, Tuple[int, int, int, int], str]

NAMED_COLORS = {
    "black": (10, 10, 10),
    "white": (235, 235, 235),
    "gray": (120, 120, 120),
    "red": (220, 70, 70),
    "green": (80, 200, 80),
    "blue": (70, 120, 220),
    "yellow": (230, 200, 80),
}
DEFAULT_COLOR: Color = (180, 180, 180)


def resolve_color(raw: ColorLike) -> Tuple[int, ...]:
    if isinstance(raw, str):
        return NAMED_COLORS.get(raw.lower(), DEFAULT_COLOR)
    return tuple(int(min(255, max(0, c))) for c in raw)


def _screen(points: Sequence[Vector2]) -> list:
    return [(p.x, p.y) for p in points]


class ShapeRenderer:
    """Draws shapes onto a pygame surface.

    Curved shapes are turned into point lists before drawing. Without a
    ``segment_pixel_length`` the proportional segment count is used; with one,
    the pixel-budget count. A ``width`` of 0 fills the shape, anything larger
    draws the outline with that thickness.
    """

    def __init__(
        self,
        surface: "pygame.Surface",
        *,
        segment_pixel_length: Optional[float] = None,
        scale: float = tessellation.DEFAULT_SCALE,
        minimum: int = tessellation.DEFAULT_MINIMUM_SEGMENTS,
        maximum: int = tessellation.DEFAULT_MAXIMUM_SEGMENTS,
        segments_per_full_circle: int = tessellation.DEFAULT_SEGMENTS_PER_FULL_CIRCLE,
    ) -> None:
        self.surface = surface
        self.segment_pixel_length = segment_pixel_length
        self.scale = scale
        self.minimum = minimum
        self.maximum = maximum
        self.segments_per_full_circle = segments_per_full_circle

    # --- segment counts ---------------------------------------------------

    def segments_for_arc(
        self,
        radius: float,
        start_angle: float,
        end_angle: float,
        segments: Optional[int] = None,
    ) -> int:
        """Explicit ``segments`` win; otherwise use the configured heuristic."""
        if segments is not None:
            return segments
        if self.segment_pixel_length is None:
            return tessellation.default_segment_count_for_range(
                start_angle, end_angle, self.segments_per_full_circle
            )
        return tessellation.optimal_segment_count_for_range(
            radius,
            start_angle,
            end_angle,
            segment_pixel_length=self.segment_pixel_length,
            scale=self.scale,
            minimum=self.minimum,
            maximum=self.maximum,
        )

    # --- primitives -------------------------------------------------------

    def draw_points(self, points: Sequence[Vector2], color: ColorLike, width: int = 0) -> bool:
        if len(points) < 2:
            return False
        if len(points) == 2:
            pygame.draw.line(self.surface, resolve_color(color), *_screen(points), max(1, width))
            return True
        if width > 0:
            pygame.draw.lines(self.surface, resolve_color(color), True, _screen(points), width)
        else:
            pygame.draw.polygon(self.surface, resolve_color(color), _screen(points), 0)
        return True

    def draw_circle(self, circle: Circle, color: ColorLike, width: int = 0, segments: Optional[int] = None) -> bool:
        return self.draw_circle_sector(circle, 0.0, 360.0, color, width=width, segments=segments)

    def draw_circle_sector(
        self,
        circle: Circle,
        start_angle: float,
        end_angle: float,
        color: ColorLike,
        *,
        width: int = 0,
        segments: Optional[int] = None,
    ) -> bool:
        count = self.segments_for_arc(circle.radius, start_angle, end_angle, segments)
        if count <= 0:
            return False
        if abs(end_angle - start_angle) >= 360.0:
            points = tessellation.arc_points(circle.center, circle.radius, start_angle, end_angle, count)[:-1]
        else:
            points = tessellation.sector_points(circle.center, circle.radius, start_angle, end_angle, count)
        return self.draw_points(points, color, width)

    def draw_ring(
        self,
        center: Vector2,
        inner_radius: float,
        outer_radius: float,
        start_angle: float,
        end_angle: float,
        color: ColorLike,
        *,
        width: int = 0,
        segments: Optional[int] = None,
    ) -> bool:
        count = self.segments_for_arc(max(inner_radius, outer_radius), start_angle, end_angle, segments)
        if count <= 0:
            return False
        points = tessellation.ring_points(center, inner_radius, outer_radius, start_angle, end_angle, count)
        return self.draw_points(points, color, width)

    def draw_rectangle(self, rect: Rectangle, color: ColorLike, width: int = 0) -> bool:
        pygame.draw.rect(self.surface, resolve_color(color), pygame.Rect(*rect.as_tuple()), width)
        return True

    def draw_rounded_rectangle(
        self,
        rect: Rectangle,
        roundness: float,
        color: ColorLike,
        *,
        width: int = 0,
        segments: Optional[int] = None,
    ) -> bool:
        if segments is None:
            segments = tessellation.rounded_corner_segment_count(
                rect,
                roundness,
                segment_pixel_length=self.segment_pixel_length or tessellation.DEFAULT_SEGMENT_PIXEL_LENGTH,
                scale=self.scale,
            )
        if segments <= 0:
            return self.draw_rectangle(rect, color, width)
        points = tessellation.rounded_rectangle_points(rect, roundness, segments)
        return self.draw_points(points, color, width)

    def draw_triangle(self, triangle: Triangle, color: ColorLike, width: int = 0) -> bool:
        return self.draw_points(triangle.vertices(), color, width)

    def draw_line(self, line: LineSegment, color: ColorLike, thickness: int = 1) -> bool:
        return self.draw_points((line.start, line.end), color, thickness)

    def draw_polygon(self, polygon: Union[Polygon, RegularPolygon], color: ColorLike, width: int = 0) -> bool:
        if isinstance(polygon, RegularPolygon):
            return self.draw_points(polygon.vertices(), color, width)
        return self.draw_points(polygon.vertices, color, width)

    def draw_shape(self, shape, color: ColorLike, width: int = 0) -> bool:
        if isinstance(shape, Circle):
            return self.draw_circle(shape, color, width)
        if isinstance(shape, Rectangle):
            return self.draw_rectangle(shape, color, width)
        if isinstance(shape, Triangle):
            return self.draw_triangle(shape, color, width)
        if isinstance(shape, LineSegment):
            return self.draw_line(shape, color, max(1, width))
        if isinstance(shape, (Polygon, RegularPolygon)):
            return self.draw_polygon(shape, color, width)
        logger.debug("Skipping unsupported shape %s", type(shape).__name__)
        return False


__all__ = ["ShapeRenderer", "NAMED_COLORS", "resolve_color"]
