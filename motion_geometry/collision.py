"""Pairwise overlap tests, point containment and line intersection."""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Union

from .shapes import Circle, LineSegment, Polygon, Rectangle, RegularPolygon, Triangle
from .vector import EPSILON, Vector2

logger = logging.getLogger(__name__)

Shape = Union[Circle, Rectangle, Triangle, LineSegment, Polygon, RegularPolygon]
Outlined = Union[Rectangle, Triangle, Polygon, RegularPolygon]


def circle_overlap(c1: Circle, c2: Circle) -> bool:
    """Circles overlap when the centers are closer than the radius sum.

    Tangent circles are not reported as overlapping.
    """
    radius_sum = c1.radius + c2.radius
    return (c1.center - c2.center).magnitude_squared() < radius_sum * radius_sum


def rect_overlap(r1: Rectangle, r2: Rectangle) -> bool:
    return (
        r1.x < r2.x + r2.width
        and r1.x + r1.width > r2.x
        and r1.y < r2.y + r2.height
        and r1.y + r1.height > r2.y
    )


def _closest_point_on_rect(point: Vector2, rect: Rectangle) -> Vector2:
    return Vector2(
        max(rect.x, min(point.x, rect.x + rect.width)),
        max(rect.y, min(point.y, rect.y + rect.height)),
    )


def circle_rect_overlap(circle: Circle, rect: Rectangle) -> bool:
    closest = _closest_point_on_rect(circle.center, rect)
    return (circle.center - closest).magnitude_squared() <= circle.radius * circle.radius


def rect_circle_overlap(rect: Rectangle, circle: Circle) -> bool:
    return circle_rect_overlap(circle, rect)


def _distance_point_to_segment(point: Vector2, start: Vector2, end: Vector2) -> float:
    d = end - start
    length_sq = d.magnitude_squared()
    if length_sq == 0:
        return point.distance_to(start)
    t = (point - start).dot(d) / length_sq
    t = max(0.0, min(1.0, t))
    return point.distance_to(start + d * t)


def circle_line_overlap(circle: Circle, line: LineSegment) -> bool:
    return _distance_point_to_segment(circle.center, line.start, line.end) <= circle.radius


def line_circle_overlap(line: LineSegment, circle: Circle) -> bool:
    return circle_line_overlap(circle, line)


def point_in_rect(point: Vector2, rect: Rectangle) -> bool:
    """Half-open bounds: the left/top edges are inside, right/bottom are not."""
    return (
        rect.x <= point.x < rect.x + rect.width
        and rect.y <= point.y < rect.y + rect.height
    )


def point_in_circle(point: Vector2, circle: Circle) -> bool:
    return (point - circle.center).magnitude_squared() <= circle.radius * circle.radius


def point_in_triangle(point: Vector2, triangle: Triangle) -> bool:
    """Barycentric test; points on an edge and degenerate triangles are outside."""
    p1, p2, p3 = triangle.v1, triangle.v2, triangle.v3
    denom = (p2.y - p3.y) * (p1.x - p3.x) + (p3.x - p2.x) * (p1.y - p3.y)
    if abs(denom) < EPSILON:
        return False
    alpha = ((p2.y - p3.y) * (point.x - p3.x) + (p3.x - p2.x) * (point.y - p3.y)) / denom
    beta = ((p3.y - p1.y) * (point.x - p3.x) + (p1.x - p3.x) * (point.y - p3.y)) / denom
    gamma = 1.0 - alpha - beta
    return alpha > 0 and beta > 0 and gamma > 0


def point_near_line(point: Vector2, line: LineSegment, threshold: float = 1.0) -> bool:
    """Within ``threshold`` pixels of the segment (not the infinite line)."""
    return _distance_point_to_segment(point, line.start, line.end) <= threshold


def _point_in_vertices(point: Vector2, vertices: Sequence[Vector2]) -> bool:
    if len(vertices) < 3:
        return False
    inside = False
    j = len(vertices) - 1
    for i in range(len(vertices)):
        vi = vertices[i]
        vj = vertices[j]
        if (vi.y > point.y) != (vj.y > point.y):
            x_cross = (vj.x - vi.x) * (point.y - vi.y) / (vj.y - vi.y) + vi.x
            if point.x < x_cross:
                inside = not inside
        j = i
    return inside


def point_in_polygon(point: Vector2, polygon: Union[Polygon, RegularPolygon]) -> bool:
    """Even-odd ray casting over the ordered vertices."""
    if isinstance(polygon, RegularPolygon):
        return _point_in_vertices(point, polygon.vertices())
    return _point_in_vertices(point, polygon.vertices)


def line_intersection(l1: LineSegment, l2: LineSegment) -> Optional[Vector2]:
    """Intersection point of two segments, or ``None``.

    ``None`` is returned for parallel or collinear segments and when the
    crossing of the supporting lines lies outside either segment.
    """
    r = l1.end - l1.start
    s = l2.end - l2.start
    det = r.cross(s)
    if abs(det) < EPSILON:
        return None
    delta = l2.start - l1.start
    t = delta.cross(s) / det
    u = delta.cross(r) / det
    if not (0.0 <= t <= 1.0 and 0.0 <= u <= 1.0):
        return None
    return l1.start + r * t


def overlap_rectangle(r1: Rectangle, r2: Rectangle) -> Rectangle:
    """Intersection of two rectangles.

    Non-overlapping inputs yield ``Rectangle(0, 0, 0, 0)``; callers that need
    a strict guarantee should check :func:`rect_overlap` first.
    """
    if not rect_overlap(r1, r2):
        return Rectangle(0.0, 0.0, 0.0, 0.0)
    left = max(r1.x, r2.x)
    top = max(r1.y, r2.y)
    right = min(r1.x + r1.width, r2.x + r2.width)
    bottom = min(r1.y + r1.height, r2.y + r2.height)
    return Rectangle(left, top, right - left, bottom - top)


def _outline(shape: object) -> Optional[List[Vector2]]:
    """Ordered vertices of a straight-edged shape, ``None`` for anything else."""
    if isinstance(shape, Rectangle):
        right = shape.x + shape.width
        bottom = shape.y + shape.height
        return [
            Vector2(shape.x, shape.y),
            Vector2(right, shape.y),
            Vector2(right, bottom),
            Vector2(shape.x, bottom),
        ]
    if isinstance(shape, Triangle):
        return list(shape.vertices())
    if isinstance(shape, Polygon):
        return list(shape.vertices)
    if isinstance(shape, RegularPolygon):
        return shape.vertices()
    return None


def _edges(vertices: Sequence[Vector2]) -> List[LineSegment]:
    if len(vertices) < 2:
        return []
    return [LineSegment(vertices[i - 1], vertices[i]) for i in range(len(vertices))]


def circle_polygon_overlap(circle: Circle, polygon: Outlined) -> bool:
    """Center inside the outline, or some edge within ``radius`` of it."""
    vertices = _outline(polygon)
    if _point_in_vertices(circle.center, vertices):
        return True
    return any(
        _distance_point_to_segment(circle.center, edge.start, edge.end) <= circle.radius
        for edge in _edges(vertices)
    )


def line_polygon_overlap(line: LineSegment, polygon: Outlined) -> bool:
    vertices = _outline(polygon)
    if _point_in_vertices(line.start, vertices):
        return True
    return any(line_intersection(line, edge) is not None for edge in _edges(vertices))


def polygon_overlap(a: Outlined, b: Outlined) -> bool:
    """Exact overlap of two outlines, convex or not.

    Either some pair of edges crosses, or one outline lies wholly inside the
    other, in which case its first vertex is inside.
    """
    verts_a = _outline(a)
    verts_b = _outline(b)
    if not verts_a or not verts_b:
        return False
    edges_b = _edges(verts_b)
    for edge_a in _edges(verts_a):
        for edge_b in edges_b:
            if line_intersection(edge_a, edge_b) is not None:
                return True
    return _point_in_vertices(verts_a[0], verts_b) or _point_in_vertices(verts_b[0], verts_a)


def collides(a: Shape, b: Shape) -> bool:
    """Overlap test for any two shapes.

    Objects outside the shape family fall back to bounding-rectangle overlap.
    """
    if isinstance(a, Circle) and isinstance(b, Circle):
        return circle_overlap(a, b)
    if isinstance(a, Rectangle) and isinstance(b, Rectangle):
        return rect_overlap(a, b)
    if isinstance(a, Circle) and isinstance(b, Rectangle):
        return circle_rect_overlap(a, b)
    if isinstance(a, Rectangle) and isinstance(b, Circle):
        return rect_circle_overlap(a, b)
    if isinstance(a, Circle) and isinstance(b, LineSegment):
        return circle_line_overlap(a, b)
    if isinstance(a, LineSegment) and isinstance(b, Circle):
        return line_circle_overlap(a, b)
    if isinstance(a, LineSegment) and isinstance(b, LineSegment):
        return line_intersection(a, b) is not None
    outlined_a = _outline(a) is not None
    outlined_b = _outline(b) is not None
    if isinstance(a, Circle) and outlined_b:
        return circle_polygon_overlap(a, b)
    if isinstance(b, Circle) and outlined_a:
        return circle_polygon_overlap(b, a)
    if isinstance(a, LineSegment) and outlined_b:
        return line_polygon_overlap(a, b)
    if isinstance(b, LineSegment) and outlined_a:
        return line_polygon_overlap(b, a)
    if outlined_a and outlined_b:
        return polygon_overlap(a, b)
    logger.debug(
        "No exact test for %s vs %s, using bounding rectangles",
        type(a).__name__,
        type(b).__name__,
    )
    return rect_overlap(a.bounding_rectangle(), b.bounding_rectangle())


def contains(shape: Shape, point: Vector2, *, threshold: float = 1.0) -> bool:
    """Point containment for any shape; ``threshold`` only applies to segments."""
    if isinstance(shape, Rectangle):
        return point_in_rect(point, shape)
    if isinstance(shape, Circle):
        return point_in_circle(point, shape)
    if isinstance(shape, Triangle):
        return point_in_triangle(point, shape)
    if isinstance(shape, LineSegment):
        return point_near_line(point, shape, threshold)
    if isinstance(shape, (Polygon, RegularPolygon)):
        return point_in_polygon(point, shape)
    return False


__all__ = [
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
]
