"""Small numeric and string helpers."""

from __future__ import annotations

import math


def lerp(t: float, a: float, b: float) -> float:
    """Linear interpolation between ``a`` and ``b``."""
    return (1 - t) * a + t * b


def step(edge: float, x: float) -> int:
    """0 below ``edge``, 1 at or above it."""
    below = x < edge
    return int(not below)


def clamp(x, low, high):
    """Limit ``x`` to the range [low, high]."""
    if x < low:
        return low
    if x > high:
        return high
    return x


def sign(x) -> int:
    """-1, 0 or 1 according to the sign of ``x``."""
    if x > 0:
        return 1
    if x < 0:
        return -1
    return 0


def smoothstep(edge0: float, edge1: float, x: float) -> float:
    """Hermite interpolation between two edges, saturated to [0, 1]."""
    t = clamp((x - edge0) / (edge1 - edge0), 0.0, 1.0)
    return t * t * (3 - 2 * t)


def modulus(a: int, b: int) -> int:
    """Integer remainder with truncating division, shifted up by ``b`` when negative."""
    if b == 0:
        raise ZeroDivisionError("modulus by zero")
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    remainder = a - b * quotient
    return remainder + b if remainder < 0 else remainder


def fmodulus(a: float, b: float) -> float:
    """Floating remainder, shifted up by ``b`` when negative."""
    remainder = math.fmod(a, b)
    return remainder + b if remainder < 0 else remainder


def strings_equal(a: str, b: str) -> bool:
    """Exact string equality."""
    return a == b


def strings_equal_ignore_case(a: str, b: str) -> bool:
    """String equality ignoring letter case, character by character."""
    if len(a) != len(b):
        return False
    return all(ca.lower() == cb.lower() for ca, cb in zip(a, b))