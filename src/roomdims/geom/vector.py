"""Vector and point utilities.

Primitive 2D operations shared by wall derivation and the triangle
calculator. Every function is pure; anything with ``x`` and ``y``
attributes (Point, Vector, Corner) is accepted as input.
"""

from __future__ import annotations

import math

from ..config import TOLERANCE
from ..core.model import Point, Vector


def create_vector(start, end) -> Vector:
    """Vector from ``start`` to ``end``."""
    return Vector(end.x - start.x, end.y - start.y)


def vector_length(vector) -> float:
    """Euclidean norm of a vector."""
    return math.sqrt(vector.x * vector.x + vector.y * vector.y)


def normalize_vector(vector) -> Vector:
    """Unit vector in the direction of ``vector``.

    Returns the zero vector when ``vector`` has zero length; callers treat
    that as an undefined direction.
    """
    length = vector_length(vector)
    if length == 0:
        return Vector(0.0, 0.0)
    return Vector(vector.x / length, vector.y / length)


def perpendicular_vector(vector) -> Vector:
    """Rotate a vector 90 degrees counter-clockwise."""
    return Vector(-vector.y, vector.x)


def dot(a, b) -> float:
    return a.x * b.x + a.y * b.y


def cross(a, b) -> float:
    """Z-component of the 2D cross product."""
    return a.x * b.y - a.y * b.x


def project_point_onto_line(point, line_point, direction) -> Point:
    """Orthogonal projection of a point onto an infinite line.

    Args:
        point: The point to project.
        line_point: Any point on the line.
        direction: Direction of the line; need not be unit length.

    Returns:
        The foot of the perpendicular from ``point`` to the line.
    """
    unit = normalize_vector(direction)
    projection = dot(create_vector(line_point, point), unit)
    return Point(line_point.x + projection * unit.x, line_point.y + projection * unit.y)


def distance(p1, p2) -> float:
    """Euclidean distance between two points."""
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    return math.sqrt(dx * dx + dy * dy)


def angle(p1, p2) -> float:
    """Angle of the direction p1 -> p2 in radians, in (-pi, pi]."""
    return math.atan2(p2.y - p1.y, p2.x - p1.x)


def is_same_point(p1, p2, tolerance: float = TOLERANCE) -> bool:
    """Check if two points coincide within tolerance."""
    return distance(p1, p2) < tolerance
