"""
Small numeric helpers for planar geometry.
"""

from __future__ import annotations

import math

TAU = 2 * math.pi


def clamp(value, low, high):
    """Clamp value into [low, high]. Works for ints and floats alike."""
    return max(low, min(value, high))


def is_between(value, low, high) -> bool:
    """Inclusive range check."""
    return low <= value <= high


def x_from_polar(magnitude: float, radians: float) -> float:
    return magnitude * math.cos(radians)


def y_from_polar(magnitude: float, radians: float) -> float:
    return magnitude * math.sin(radians)


def polar_offset(magnitude: float, radians: float) -> tuple[float, float]:
    """Cartesian (dx, dy) of a polar vector."""
    return x_from_polar(magnitude, radians), y_from_polar(magnitude, radians)


def angle_diff(from_angle: float, to_angle: float) -> float:
    """
    Signed smallest rotation from from_angle to to_angle.

    Returns:
        Difference in radians within [-pi, pi)
    """
    diff = to_angle - from_angle + math.pi
    # non-negative for a positive modulus
    diff %= TAU
    return diff - math.pi


def normalize_angle(angle: float) -> float:
    """Equivalent angle within [-pi, pi)."""
    return angle_diff(0.0, angle)


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between (x1, y1) and (x2, y2)."""
    return math.hypot(x2 - x1, y2 - y1)
