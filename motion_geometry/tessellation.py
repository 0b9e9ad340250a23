"""Segment-count heuristics and point generation for curved primitives.

Arcs, rings and rounded-rectangle corners are handed to the renderer as
straight segments. The pixel-budget variant picks a count from the on-screen
arc length; the proportional variant spreads a fixed number of segments over
a full circle. Angles are in degrees, measured clockwise in screen space
(``x = cx + r·cos``, ``y = cy + r·sin``).
"""
from __future__ import annotations

import logging
import math
from typing import List

from .shapes import Rectangle
from .vector import EPSILON, Vector2

logger = logging.getLogger(__name__)

DEFAULT_SEGMENT_PIXEL_LENGTH = 4.0
MIN_SEGMENT_PIXEL_LENGTH = 1.0
MAX_SEGMENT_PIXEL_LENGTH = 20.0
DEFAULT_SCALE = 1.0
MIN_SCALE = 0.1
MAX_SCALE = 10.0
DEFAULT_MINIMUM_SEGMENTS = 1
DEFAULT_MAXIMUM_SEGMENTS = 100
DEFAULT_SEGMENTS_PER_FULL_CIRCLE = 36
CORNER_ARC_ANGLE = 90.0


def _clamp(value: float, low: float, high: float, what: str) -> float:
    clamped = max(low, min(high, value))
    if clamped != value:
        logger.debug("Clamped %s %r into [%s, %s]", what, value, low, high)
    return clamped


def optimal_segment_count(
    radius: float,
    arc_angle: float,
    segment_pixel_length: float = DEFAULT_SEGMENT_PIXEL_LENGTH,
    scale: float = DEFAULT_SCALE,
    minimum: int = DEFAULT_MINIMUM_SEGMENTS,
    maximum: int = DEFAULT_MAXIMUM_SEGMENTS,
) -> int:
    """Number of segments so that each one spans about ``segment_pixel_length`` pixels.

    A near-zero arc has nothing to draw and yields 0. Otherwise the count is
    ``ceil(arc_length / segment_pixel_length)`` kept within
    ``[minimum, maximum]``. An infinite arc length saturates at ``maximum``
    (``minimum`` for a negative one); a NaN radius or angle yields 0.
    """
    if abs(arc_angle) < EPSILON:
        return 0
    pixel_length = _clamp(
        segment_pixel_length,
        MIN_SEGMENT_PIXEL_LENGTH,
        MAX_SEGMENT_PIXEL_LENGTH,
        "segment_pixel_length",
    )
    scale = _clamp(scale, MIN_SCALE, MAX_SCALE, "scale")
    ratio = abs(arc_angle) * math.pi / 180.0 * radius * scale / pixel_length
    if math.isnan(ratio):
        logger.debug("NaN arc (radius=%r, arc_angle=%r), no segments", radius, arc_angle)
        return 0
    if math.isinf(ratio):
        return maximum if ratio > 0 else minimum
    return max(minimum, min(math.ceil(ratio), maximum))


def optimal_segment_count_for_range(
    radius: float,
    start_angle: float,
    end_angle: float,
    segment_pixel_length: float = DEFAULT_SEGMENT_PIXEL_LENGTH,
    scale: float = DEFAULT_SCALE,
    minimum: int = DEFAULT_MINIMUM_SEGMENTS,
    maximum: int = DEFAULT_MAXIMUM_SEGMENTS,
) -> int:
    return optimal_segment_count(
        radius,
        abs(end_angle - start_angle),
        segment_pixel_length=segment_pixel_length,
        scale=scale,
        minimum=minimum,
        maximum=maximum,
    )


def default_segment_count(
    arc_angle: float,
    segments_per_full_circle: int = DEFAULT_SEGMENTS_PER_FULL_CIRCLE,
) -> int:
    """Segments proportional to the arc, ``segments_per_full_circle`` for 360°.

    A NaN angle yields 0. An infinite sweep is drawn as a single full turn,
    so it gets ``segments_per_full_circle``.
    """
    if math.isnan(arc_angle) or abs(arc_angle) < EPSILON:
        return 0
    if math.isinf(arc_angle):
        return max(1, segments_per_full_circle)
    return max(1, math.ceil(abs(arc_angle) / 360.0 * segments_per_full_circle))


def default_segment_count_for_range(
    start_angle: float,
    end_angle: float,
    segments_per_full_circle: int = DEFAULT_SEGMENTS_PER_FULL_CIRCLE,
) -> int:
    return default_segment_count(abs(end_angle - start_angle), segments_per_full_circle)


def ring_segment_count(
    inner_radius: float,
    outer_radius: float,
    start_angle: float,
    end_angle: float,
    segment_pixel_length: float = DEFAULT_SEGMENT_PIXEL_LENGTH,
    scale: float = DEFAULT_SCALE,
    minimum: int = DEFAULT_MINIMUM_SEGMENTS,
    maximum: int = DEFAULT_MAXIMUM_SEGMENTS,
) -> int:
    # the longer of the two edges decides
    return optimal_segment_count_for_range(
        max(inner_radius, outer_radius),
        start_angle,
        end_angle,
        segment_pixel_length=segment_pixel_length,
        scale=scale,
        minimum=minimum,
        maximum=maximum,
    )


def corner_radius(rect: Rectangle, roundness: float) -> float:
    """Corner radius of a rounded rectangle; ``roundness`` is in ``[0, 1]``."""
    roundness = max(0.0, min(1.0, roundness))
    return min(abs(rect.width), abs(rect.height)) * roundness * 0.5


def rounded_corner_segment_count(
    rect: Rectangle,
    roundness: float,
    segment_pixel_length: float = DEFAULT_SEGMENT_PIXEL_LENGTH,
    scale: float = DEFAULT_SCALE,
) -> int:
    """Segments per 90° corner; 0 means the rectangle is drawn square."""
    if roundness < EPSILON:
        return 0
    return optimal_segment_count(
        corner_radius(rect, roundness),
        CORNER_ARC_ANGLE,
        segment_pixel_length=segment_pixel_length,
        scale=scale,
    )


def arc_points(
    center: Vector2,
    radius: float,
    start_angle: float,
    end_angle: float,
    segments: int,
) -> List[Vector2]:
    """``segments + 1`` points along the arc, or none for zero segments."""
    if segments <= 0:
        return []
    step = (end_angle - start_angle) / segments
    points = []
    for i in range(segments + 1):
        angle = math.radians(start_angle + step * i)
        points.append(
            Vector2(center.x + radius * math.cos(angle), center.y + radius * math.sin(angle))
        )
    return points


def sector_points(
    center: Vector2,
    radius: float,
    start_angle: float,
    end_angle: float,
    segments: int,
) -> List[Vector2]:
    """Closed outline of a pie slice: the center followed by the arc."""
    arc = arc_points(center, radius, start_angle, end_angle, segments)
    if not arc:
        return []
    return [center, *arc]


def ring_points(
    center: Vector2,
    inner_radius: float,
    outer_radius: float,
    start_angle: float,
    end_angle: float,
    segments: int,
) -> List[Vector2]:
    """Closed outline of an annulus sector: outer arc, then inner arc reversed."""
    outer = arc_points(center, outer_radius, start_angle, end_angle, segments)
    if not outer:
        return []
    inner = arc_points(center, inner_radius, start_angle, end_angle, segments)
    return outer + inner[::-1]


def rounded_rectangle_points(
    rect: Rectangle,
    roundness: float,
    segments: int,
) -> List[Vector2]:
    """Outline of a rectangle with ``segments`` straight pieces per corner."""
    if segments <= 0 or roundness < EPSILON:
        return [
            Vector2(rect.x, rect.y),
            Vector2(rect.x + rect.width, rect.y),
            Vector2(rect.x + rect.width, rect.y + rect.height),
            Vector2(rect.x, rect.y + rect.height),
        ]
    r = corner_radius(rect, roundness)
    left = rect.x + r
    right = rect.x + rect.width - r
    top = rect.y + r
    bottom = rect.y + rect.height - r
    corners = (
        (Vector2(right, top), 270.0),
        (Vector2(right, bottom), 0.0),
        (Vector2(left, bottom), 90.0),
        (Vector2(left, top), 180.0),
    )
    points: List[Vector2] = []
    for corner_center, start in corners:
        points.extend(arc_points(corner_center, r, start, start + CORNER_ARC_ANGLE, segments))
    return points


__all__ = [
    "optimal_segment_count",
    "optimal_segment_count_for_range",
    "default_segment_count",
    "default_segment_count_for_range",
    "ring_segment_count",
    "rounded_corner_segment_count",
    "corner_radius",
    "arc_points",
    "sector_points",
    "ring_points",
    "rounded_rectangle_points",
]
