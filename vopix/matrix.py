"""Rotation matrices, Euler angles and 4x4 projection helpers.

Vectors are treated as rows: a vector is multiplied on the left of a matrix.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

from vopix.vector import Vector3

Matrix4x4 = Tuple[Tuple[float, float, float, float], ...]


@dataclass(frozen=True)
class Matrix3x3:
    """An immutable 3x3 matrix stored as rows."""

    rows: Tuple[Tuple[float, float, float], ...]

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(value) for value in row) for row in self.rows)
        if len(rows) != 3 or any(len(row) != 3 for row in rows):
            raise ValueError("a Matrix3x3 needs three rows of three values")
        object.__setattr__(self, "rows", rows)

    def __getitem__(self, index: int) -> Tuple[float, float, float]:
        return self.rows[index]

    @classmethod
    def identity(cls) -> Matrix3x3:
        return cls(((1, 0, 0), (0, 1, 0), (0, 0, 1)))

    def transpose(self) -> Matrix3x3:
        return Matrix3x3(tuple(zip(*self.rows)))

    def __matmul__(self, other: Matrix3x3) -> Matrix3x3:
        columns = list(zip(*other.rows))
        return Matrix3x3(
            tuple(
                tuple(sum(a * b for a, b in zip(row, column)) for column in columns)
                for row in self.rows
            )
        )

    def rotate(self, vector: Vector3) -> Vector3:
        """Multiply a row vector by this matrix."""
        m = self.rows
        return Vector3(
            vector.x * m[0][0] + vector.y * m[1][0] + vector.z * m[2][0],
            vector.x * m[0][1] + vector.y * m[1][1] + vector.z * m[2][1],
            vector.x * m[0][2] + vector.y * m[1][2] + vector.z * m[2][2],
        )


def euler_to_matrix(rotation: Vector3) -> Matrix3x3:
    """Build a rotation matrix from Euler angles in degrees."""
    rx, ry, rz = (math.radians(angle) for angle in rotation)
    s1, c1 = math.sin(rx), math.cos(rx)
    s2, c2 = math.sin(ry), math.cos(ry)
    s3, c3 = math.sin(rz), math.cos(rz)
    return Matrix3x3(
        (
            (c2 * c3, c2 * s3, -s2),
            (s1 * s2 * c3 - c1 * s3, s1 * s2 * s3 + c1 * c3, s1 * c2),
            (c1 * s2 * c3 + s1 * s3, c1 * s2 * s3 - s1 * c3, c1 * c2),
        )
    )


def matrix_to_euler(matrix: Matrix3x3) -> Vector3:
    """Extract Euler angles in degrees from a rotation matrix."""
    m = matrix.rows
    x = math.atan2(m[1][2], m[2][2])
    c2 = math.hypot(m[0][0], m[0][1])
    y = math.atan2(-m[0][2], c2)
    s1, c1 = math.sin(x), math.cos(x)
    z = math.atan2(s1 * m[2][0] - c1 * m[1][0], c1 * m[1][1] - s1 * m[2][1])
    return Vector3(math.degrees(x), math.degrees(y), math.degrees(z))


def rotate_point(point: Vector3, rotation: Vector3, pivot: Vector3) -> Vector3:
    """Rotate ``point`` by Euler angles in degrees around ``pivot``."""
    return euler_to_matrix(rotation).rotate(point - pivot) + pivot


def identity_4x4() -> Matrix4x4:
    return tuple(tuple(1.0 if i == j else 0.0 for j in range(4)) for i in range(4))


def projection_matrix(
    right: float, left: float, top: float, bottom: float, near: float, far: float
) -> Matrix4x4:
    """Orthographic projection, with the translation in the last row."""
    return (
        (2.0 / (right - left), 0.0, 0.0, 0.0),
        (0.0, 2.0 / (top - bottom), 0.0, 0.0),
        (0.0, 0.0, -2.0 / (far - near), 0.0),
        (
            -(right + left) / (right - left),
            -(top + bottom) / (top - bottom),
            -(far + near) / (far - near),
            1.0,
        ),
    )


def multiply_by_orthographic(
    matrix: Sequence[Sequence[float]],
    right: float,
    left: float,
    top: float,
    bottom: float,
    near: float,
    far: float,
) -> Matrix4x4:
    """Return ``matrix`` combined with an orthographic projection.

    The translation goes into the last column of the first three rows and
    those rows are scaled; the last row is left unchanged.
    """
    rows = [list(map(float, row)) for row in matrix]
    if len(rows) != 4 or any(len(row) != 4 for row in rows):
        raise ValueError("a 4x4 matrix needs four rows of four values")

    offsets = (
        -(right + left) / (right - left),
        -(top + bottom) / (top - bottom),
        -(far + near) / (far - near),
    )
    factors = (
        2.0 / (right - left),
        2.0 / (top - bottom),
        -2.0 / (far - near),
    )
    for row, factor in zip(rows[:3], factors):
        row[3] += sum(value * offset for value, offset in zip(row[:3], offsets))
        row[:3] = [value * factor for value in row[:3]]
    return tuple(tuple(row) for row in rows)