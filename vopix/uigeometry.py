"""Vertex layouts for the screen-space quads drawn by the UI batch.

Each quad is four ``(x, y)`` corners in triangle-strip order.
"""

from __future__ import annotations

import math
from typing import Tuple

from vopix.matrix import euler_to_matrix
from vopix.numeric import clamp
from vopix.vector import FORWARD, Vector3, distance

Point2 = Tuple[float, float]
Quad = Tuple[Point2, Point2, Point2, Point2]

# Shift applied to the far edges so pixel-aligned rectangles cover their last row and column.
EDGE_OFFSET = 0.375


def morph_rectangle(min_x: float, min_y: float, max_x: float, max_y: float) -> Quad:
    """Corners of an axis-aligned rectangle.

    Coordinates are truncated to integers first; the order is
    top-left, bottom-left, top-right, bottom-right.
    """
    left, bottom, right, top = (int(value) for value in (min_x, min_y, max_x, max_y))
    far_right = right + EDGE_OFFSET
    far_top = top + EDGE_OFFSET
    return (
        (float(left), far_top),
        (float(left), float(bottom)),
        (far_right, far_top),
        (far_right, float(bottom)),
    )


def morph_line(
    min_x: float, min_y: float, max_x: float, max_y: float, width: float
) -> Quad:
    """Corners of a thick line between two points.

    ``width`` is half the thickness. Endpoint coordinates are truncated to
    integers, and the endpoints are ordered so the line points upwards.
    """
    x0, y0, x1, y1 = (int(value) for value in (min_x, min_y, max_x, max_y))
    if y1 < y0:
        x0, y0, x1, y1 = x1, y1, x0, y0

    start = Vector3(x0, y0, 0)
    end = Vector3(x1, y1, 0)
    half_length = distance(start, end) / 2.0
    mid_x = (x0 + x1) / 2.0
    mid_y = (y0 + y1) / 2.0

    direction = (end - start).normalized()
    cosine = clamp(FORWARD.dot(direction), -1.0, 1.0)
    rotation = euler_to_matrix(Vector3(0.0, 0.0, math.degrees(math.acos(cosine))))

    corners = (
        (-half_length, width),
        (-half_length, -width),
        (half_length, width),
        (half_length, -width),
    )
    rotated = (rotation.rotate(Vector3(x, y, 0.0)) for x, y in corners)
    return tuple((mid_x + point.x, mid_y + point.y) for point in rotated)