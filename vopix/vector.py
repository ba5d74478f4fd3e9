"""Three-component vectors and the geometric helpers built on them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Vector3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def scaled(self, factor: float) -> Vector3:
        """Return this vector multiplied by a scalar."""
        return Vector3(self.x * factor, self.y * factor, self.z * factor)

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def norm(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vector3:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.norm()
        if length == 0:
            return ZERO
        return self.scaled(1 / length)


ZERO = Vector3(0.0, 0.0, 0.0)
FORWARD = Vector3(1.0, 0.0, 0.0)
UP = Vector3(0.0, 0.0, 1.0)
DOWN = Vector3(0.0, 0.0, -1.0)
LEFT = Vector3(0.0, 1.0, 0.0)


def distance(a: Vector3, b: Vector3) -> float:
    """Euclidean distance between two points."""
    return (a - b).norm()


def projection(a: Vector3, b: Vector3) -> Vector3:
    """Project ``a`` onto the direction of ``b``."""
    unit_b = b.normalized()
    return unit_b.scaled(a.dot(unit_b))


def reflection(v1: Vector3, v2: Vector3) -> Vector3:
    """Reflect ``v1`` about the plane whose normal is ``v2``."""
    return v1 - v2.scaled(2 * v2.dot(v1))


def distance_point_to_line_2d(
    line_start: Vector3, line_end: Vector3, point: Vector3
) -> float:
    """Distance from ``point`` to the infinite line through two points, in the XY plane."""
    numerator = (
        (line_end.y - line_start.y) * point.x
        - (line_end.x - line_start.x) * point.y
        + line_end.x * line_start.y
        - line_end.y * line_start.x
    )
    return abs(numerator) / distance(line_start, line_end)