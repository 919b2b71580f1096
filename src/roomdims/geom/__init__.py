"""Geometry utilities for room dimensioning.

This module provides vector math, wall derivation from corners, the
right-triangle axis calculator and Shapely-based room polygon metrics.
"""

from .polygon import room_area, room_bounds, room_outline, room_perimeter
from .triangle import DimensionResult, TriangleResult, calculate_length, calculate_width, create_right_triangle
from .walls import dedup_walls_by_orientation, derive_walls, get_unique_walls

__all__ = [
    "DimensionResult",
    "TriangleResult",
    "calculate_length",
    "calculate_width",
    "create_right_triangle",
    "dedup_walls_by_orientation",
    "derive_walls",
    "get_unique_walls",
    "room_area",
    "room_bounds",
    "room_outline",
    "room_perimeter",
]
