"""
Minimal 2D point type, used for Bezier control points.
"""
from typing import NamedTuple


class Point(NamedTuple):
    """A point in SVG cartesian coordinates."""
    x: float = 0.0
    y: float = 0.0
