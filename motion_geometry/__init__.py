"""2D shapes, collision tests, arc tessellation and easing curves.

The pygame drawing wrapper lives in ``motion_geometry.render`` and is not
imported here, so the math layer stays usable without a display backend.
"""

from .vector import Vector2
from .shapes import Circle, LineSegment, Polygon, Rectangle, RegularPolygon, Triangle
from .progress import Progress
from .collision import (
    circle_overlap,
    rect_overlap,
    circle_rect_overlap,
    rect_circle_overlap,
    circle_line_overlap,
    line_circle_overlap,
    point_in_rect,
    point_in_circle,
    point_in_triangle,
    point_near_line,
    point_in_polygon,
    line_intersection,
    overlap_rectangle,
    circle_polygon_overlap,
    line_polygon_overlap,
    polygon_overlap,
    collides,
    contains,
)
from .tessellation import (
    optimal_segment_count,
    optimal_segment_count_for_range,
    default_segment_count,
    default_segment_count_for_range,
)
from .easing import EASINGS, ease, get_easing

__all__ = [
    "Vector2",
    "Circle",
    "LineSegment",
    "Polygon",
    "Rectangle",
    "RegularPolygon",
    "Triangle",
    "Progress",
    "circle_overlap",
    "rect_overlap",
    "circle_rect_overlap",
    "rect_circle_overlap",
    "circle_line_overlap",
    "line_circle_overlap",
    "point_in_rect",
    "point_in_circle",
    "point_in_triangle",
    "point_near_line",
    "point_in_polygon",
    "line_intersection",
    "overlap_rectangle",
    "circle_polygon_overlap",
    "line_polygon_overlap",
    "polygon_overlap",
    "collides",
    "contains",
    "optimal_segment_count",
    "optimal_segment_count_for_range",
    "default_segment_count",
    "default_segment_count_for_range",
    "EASINGS",
    "ease",
    "get_easing",
]
