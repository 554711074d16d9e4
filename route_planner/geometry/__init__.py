"""
Geometry helpers.

Pure functions used by the graph model and the organic generator:
- clamp / is_between: range helpers
- x_from_polar / y_from_polar / polar_offset: polar to cartesian
- angle_diff / normalize_angle: angle arithmetic in [-pi, pi)
- distance: Euclidean distance between two points
"""

from route_planner.geometry.mathutil import (
    angle_diff,
    clamp,
    distance,
    is_between,
    normalize_angle,
    polar_offset,
    x_from_polar,
    y_from_polar,
)

__all__ = [
    "angle_diff",
    "clamp",
    "distance",
    "is_between",
    "normalize_angle",
    "polar_offset",
    "x_from_polar",
    "y_from_polar",
]
