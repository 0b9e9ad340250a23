"""Immutable 2D vector used by every shape and collision helper."""
from __future__ import annotations

from dataclasses import dataclass
import math
import sys
from typing import Iterator, Tuple

EPSILON = sys.float_info.epsilon


@dataclass(frozen=True)
class Vector2:
    """A point or direction in 2D screen space."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2":
        return Vector2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> "Vector2":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Vector2":
        if scalar == 0:
            return ZERO
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def dot(self, other: "Vector2") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector2") -> float:
        """Z component of the 3D cross product of the two vectors."""
        return self.x * other.y - self.y * other.x

    def magnitude_squared(self) -> float:
        return self.dot(self)

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def normalized(self) -> "Vector2":
        """Unit-length copy, or the zero vector when the length is ~0."""
        length = self.magnitude()
        if length < EPSILON:
            return ZERO
        return Vector2(self.x / length, self.y / length)

    def distance_to(self, other: "Vector2") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, point: Tuple[float, float]) -> "Vector2":
        px, py = point
        return cls(float(px), float(py))


ZERO = Vector2(0.0, 0.0)


__all__ = ["Vector2", "ZERO", "EPSILON"]
