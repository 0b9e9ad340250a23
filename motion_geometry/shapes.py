"""Shape primitives with self-enforced invariants.

Every shape is a frozen dataclass. Mutators such as ``move`` and ``resize``
return a new value; out-of-range inputs are clamped into the nearest valid
value instead of raising.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from typing import List, Optional, Sequence, Tuple

from .vector import Vector2

logger = logging.getLogger(__name__)

MIN_POLYGON_SIDES = 3


def _non_negative(value: float, what: str) -> float:
    if value < 0:
        logger.debug("Clamped negative %s %r to 0", what, value)
        return 0.0
    return float(value)


def _valid_sides(value: int) -> int:
    if value < MIN_POLYGON_SIDES:
        logger.debug("Clamped number_of_sides %r to %d", value, MIN_POLYGON_SIDES)
        return MIN_POLYGON_SIDES
    return int(value)


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle given by its top-left corner and extents."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_top_left(cls, top_left: Vector2, width: float, height: float) -> "Rectangle":
        return cls(top_left.x, top_left.y, width, height)

    @property
    def top_left(self) -> Vector2:
        return Vector2(self.x, self.y)

    @property
    def center(self) -> Vector2:
        return Vector2(self.x + self.width * 0.5, self.y + self.height * 0.5)

    def area(self) -> float:
        return self.width * self.height

    def move(self, offset: Vector2) -> "Rectangle":
        return Rectangle(self.x + offset.x, self.y + offset.y, self.width, self.height)

    def bounding_rectangle(self) -> "Rectangle":
        return self

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)


def _bounds_of(points: Sequence[Vector2]) -> Rectangle:
    if not points:
        return Rectangle(0.0, 0.0, 0.0, 0.0)
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return Rectangle(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))


@dataclass(frozen=True)
class Circle:
    center: Vector2
    radius: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "radius", _non_negative(self.radius, "circle radius"))

    def area(self) -> float:
        return math.pi * self.radius**2

    def move(self, offset: Vector2) -> "Circle":
        return Circle(self.center + offset, self.radius)

    def resize(self, radius: float) -> "Circle":
        return Circle(self.center, radius)

    def bounding_rectangle(self) -> Rectangle:
        r = self.radius
        return Rectangle(self.center.x - r, self.center.y - r, 2 * r, 2 * r)


@dataclass(frozen=True)
class Triangle:
    """Three vertices; their order defines the winding but is not validated."""

    v1: Vector2
    v2: Vector2
    v3: Vector2

    def vertices(self) -> Tuple[Vector2, Vector2, Vector2]:
        return (self.v1, self.v2, self.v3)

    def area(self) -> float:
        return abs((self.v2 - self.v1).cross(self.v3 - self.v1)) * 0.5

    def move(self, offset: Vector2) -> "Triangle":
        return Triangle(self.v1 + offset, self.v2 + offset, self.v3 + offset)

    def bounding_rectangle(self) -> Rectangle:
        return _bounds_of(self.vertices())


@dataclass(frozen=True)
class LineSegment:
    start: Vector2
    end: Vector2

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    def move(self, offset: Vector2) -> "LineSegment":
        return LineSegment(self.start + offset, self.end + offset)

    def bounding_rectangle(self) -> Rectangle:
        return _bounds_of((self.start, self.end))


@dataclass(frozen=True)
class Polygon:
    """Arbitrary polygon; vertex order defines the edges.

    The closing edge from the last vertex back to the first is implicit.
    """

    vertices: Tuple[Vector2, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "vertices", tuple(self.vertices))

    @property
    def count(self) -> int:
        return len(self.vertices)

    def area(self) -> float:
        area = 0.0
        pts = self.vertices
        for i in range(len(pts)):
            area += pts[i].cross(pts[(i + 1) % len(pts)])
        return abs(area) * 0.5

    def move(self, offset: Vector2) -> "Polygon":
        return Polygon(tuple(v + offset for v in self.vertices))

    def bounding_rectangle(self) -> Rectangle:
        return _bounds_of(self.vertices)


@dataclass(frozen=True)
class RegularPolygon:
    """Polygon with equal sides whose vertices are derived, not stored."""

    center: Vector2
    number_of_sides: int
    radius: float
    rotation: float = 0.0  # radians

    def __post_init__(self) -> None:
        object.__setattr__(self, "number_of_sides", _valid_sides(self.number_of_sides))
        object.__setattr__(self, "radius", _non_negative(self.radius, "polygon radius"))

    def vertices(self) -> List[Vector2]:
        """Vertices in order, recomputed on every call."""
        step = 2.0 * math.pi / self.number_of_sides
        result = []
        for i in range(self.number_of_sides):
            angle = self.rotation + i * step
            result.append(
                Vector2(
                    self.center.x + self.radius * math.cos(angle),
                    self.center.y + self.radius * math.sin(angle),
                )
            )
        return result

    def to_polygon(self) -> Polygon:
        return Polygon(tuple(self.vertices()))

    def move(self, offset: Vector2) -> "RegularPolygon":
        return RegularPolygon(self.center + offset, self.number_of_sides, self.radius, self.rotation)

    def resize(
        self,
        *,
        radius: Optional[float] = None,
        number_of_sides: Optional[int] = None,
    ) -> "RegularPolygon":
        return RegularPolygon(
            self.center,
            number_of_sides if number_of_sides is not None else self.number_of_sides,
            radius if radius is not None else self.radius,
            self.rotation,
        )

    def bounding_rectangle(self) -> Rectangle:
        return _bounds_of(self.vertices())


__all__ = [
    "Circle",
    "Rectangle",
    "Triangle",
    "LineSegment",
    "Polygon",
    "RegularPolygon",
    "MIN_POLYGON_SIDES",
]
