import math

import pytest

from vopix.uigeometry import EDGE_OFFSET, morph_line, morph_rectangle


def _dist(p, q):
    return math.hypot(p[0] - q[0], p[1] - q[1])


def test_rectangle_layout():
    assert morph_rectangle(0, 0, 10, 20) == (
        (0.0, 20.375),
        (0.0, 0.0),
        (10.375, 20.375),
        (10.375, 0.0),
    )


def test_rectangle_truncates_coordinates():
    assert morph_rectangle(1.9, 2.9, 5.9, 7.9) == morph_rectangle(1, 2, 5, 7)


def test_rectangle_far_edges_offset():
    quad = morph_rectangle(3, 4, 8, 9)
    assert quad[2][0] - 8 == EDGE_OFFSET
    assert quad[0][1] - 9 == EDGE_OFFSET


def test_horizontal_line():
    quad = morph_line(0, 0, 10, 0, 1)
    expected = ((0, 1), (0, -1), (10, 1), (10, -1))
    for corner, want in zip(quad, expected):
        assert corner == pytest.approx(want, abs=1e-9)


def test_line_endpoint_order_does_not_matter():
    forward = morph_line(2, 3, 9, 12, 1.5)
    backward = morph_line(9, 12, 2, 3, 1.5)
    for a, b in zip(forward, backward):
        assert a == pytest.approx(b)


@pytest.mark.parametrize("end", [(7, 11), (-5, 6), (0, 10), (12, 1)])
def test_line_shape_invariants(end):
    width = 2.0
    quad = morph_line(1, 1, end[0], end[1], width)
    length = math.hypot(end[0] - 1, end[1] - 1)
    assert _dist(quad[0], quad[2]) == pytest.approx(length)
    assert _dist(quad[0], quad[1]) == pytest.approx(2 * width)
    centre_x = sum(p[0] for p in quad) / 4
    centre_y = sum(p[1] for p in quad) / 4
    assert centre_x == pytest.approx((1 + end[0]) / 2)
    assert centre_y == pytest.approx((1 + end[1]) / 2)