"""Bounding boxes of voxel models, used to fit the shadow map."""

from __future__ import annotations

import math
from typing import Iterable, Sequence, Tuple

from vopix.matrix import Matrix3x3
from vopix.numeric import clamp
from vopix.vector import Vector3

SHADOW_MIN_Z = 0
SHADOW_MAX_Z = 255

Box = Tuple[Vector3, Vector3]


def model_corners(
    dimension: Sequence[float],
    center: Vector3,
    position: Vector3,
    rotation: Matrix3x3,
    small_scale: bool = False,
) -> Tuple[Vector3, ...]:
    """World positions of the eight corners of a model's voxel grid.

    Corners are taken relative to ``center``, halved for small-scale models,
    rotated and then moved to ``position``.
    """
    dx, dy, dz = (float(size) for size in dimension)
    scale = 0.5 if small_scale else 1.0
    local = (
        Vector3(0, 0, 0),
        Vector3(dx, 0, 0),
        Vector3(0, dy, 0),
        Vector3(0, 0, dz),
        Vector3(dx, dy, 0),
        Vector3(dx, 0, dz),
        Vector3(0, dy, dz),
        Vector3(dx, dy, dz),
    )
    return tuple(
        rotation.rotate((corner - center).scaled(scale)) + position for corner in local
    )


def model_bounds(
    dimension: Sequence[float],
    center: Vector3,
    position: Vector3,
    rotation: Matrix3x3,
    small_scale: bool = False,
) -> Box:
    """Axis-aligned ``(min, max)`` box around a placed model."""
    corners = model_corners(dimension, center, position, rotation, small_scale)
    axes = list(zip(*corners))
    return (
        Vector3(*(min(values) for values in axes)),
        Vector3(*(max(values) for values in axes)),
    )


def merge_bounds(boxes: Iterable[Box]) -> Box:
    """Box enclosing all ``boxes``, as fitted for the shadow map.

    A single box collapses to its centre point. The z range is limited to
    the shadow depth range; with no boxes the x and y extents stay infinite.
    """
    low = [math.inf] * 3
    high = [-math.inf] * 3
    count = 0
    last_center = Vector3()
    for box_low, box_high in boxes:
        count += 1
        last_center = (box_low + box_high).scaled(0.5)
        low = [min(a, b) for a, b in zip(low, box_low)]
        high = [max(a, b) for a, b in zip(high, box_high)]

    if count == 1:
        low = list(last_center)
        high = list(last_center)

    low[2] = clamp(low[2], SHADOW_MIN_Z, SHADOW_MAX_Z)
    high[2] = clamp(high[2], SHADOW_MIN_Z, SHADOW_MAX_Z)
    return Vector3(*low), Vector3(*high)