"""Right-triangle projection for room length and width axes.

For a reference wall, every other corner C of the room is projected
onto a target line, giving the third vertex X of a right triangle
A-C-X with the right angle at X. The width axis uses the wall's own
line as target (how far the room extends along the wall); the length
axis uses the perpendicular through the wall start (how far the room
extends across the wall). Together they approximate a bounding
rectangle aligned to the wall. No global optimum is searched for.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from ..core.model import Corner, Line, Point
from .vector import (
    create_vector,
    distance,
    dot,
    is_same_point,
    normalize_vector,
    perpendicular_vector,
    project_point_onto_line,
    vector_length,
)

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class TriangleResult:
    """Third vertex of a right triangle and its distance from vertex A."""

    third_corner: Point
    distance: float


@dataclass(frozen=True)
class DimensionResult:
    """A measured axis: its endpoints and its length."""

    start: Point
    end: Point
    distance: float

    @property
    def line(self) -> Line:
        return Line(self.start, self.end)


def create_right_triangle(vertex_a: Point, vertex_c: Point, target_line: Line) -> Optional[TriangleResult]:
    """Create a right triangle A-C-X with the right angle at X on a line.

    X is the orthogonal projection of ``vertex_c`` onto the infinite line
    through ``target_line.start`` along ``target_line``'s direction.

    Args:
        vertex_a: Vertex the distance is measured from.
        vertex_c: Vertex projected onto the target line.
        target_line: Line the third vertex lies on.

    Returns:
        The third vertex and ``|A - X|``, or None when the target line has
        zero length and so no direction.
    """
    direction = create_vector(target_line.start, target_line.end)
    if vector_length(direction) == 0:
        return None

    third_corner = project_point_onto_line(vertex_c, target_line.start, direction)
    return TriangleResult(third_corner=third_corner, distance=distance(vertex_a, third_corner))


def calculate_width(wall: Line, corners: Sequence[Corner]) -> DimensionResult:
    """Extend a wall along its own line to the farthest corner projection.

    Two triangles are built per corner, A-C-X measured from the wall start
    and B-C-Y measured from the wall end. Whenever the larger of the two
    beats the current width, the opposite end of the axis moves to that
    triangle's third vertex.

    Args:
        wall: The wall to measure from.
        corners: All room corners.

    Returns:
        The (possibly extended) wall and its length.
    """
    start, end = wall.start, wall.end
    max_width = distance(wall.start, wall.end)

    for corner in corners:
        if is_same_point(corner, wall.start) or is_same_point(corner, wall.end):
            continue

        triangle1 = create_right_triangle(wall.start, corner.point, wall)
        triangle2 = create_right_triangle(wall.end, corner.point, wall)
        if triangle1 is None or triangle2 is None:
            continue

        new_width = max(triangle1.distance, triangle2.distance)
        if new_width > max_width:
            max_width = new_width
            if triangle1.distance > triangle2.distance:
                end = triangle1.third_corner
            else:
                start = triangle2.third_corner

    return DimensionResult(start=start, end=end, distance=max_width)


def calculate_length(wall: Line, corners: Sequence[Corner]) -> DimensionResult:
    """Span the room across a wall, perpendicular to it.

    Every corner is projected onto the perpendicular through the wall
    start and its signed offset along the unit normal is recorded. The
    wall start is the implicit zero, so the axis always includes it.

    Args:
        wall: The wall to measure from.
        corners: All room corners.

    Returns:
        Axis from the most negative to the most positive projection.
    """
    perp_vector = perpendicular_vector(create_vector(wall.start, wall.end))
    perp_line = Line(wall.start, Point(wall.start.x + perp_vector.x, wall.start.y + perp_vector.y))
    perp_unit = normalize_vector(perp_vector)
    if vector_length(perp_vector) == 0:
        LOGGER.debug("Zero-length wall at (%s, %s), no length axis", wall.start.x, wall.start.y)

    min_distance = 0.0
    max_distance = 0.0
    min_third_corner = wall.start
    max_third_corner = wall.start

    for corner in corners:
        if is_same_point(corner, wall.start):
            continue

        triangle = create_right_triangle(wall.start, corner.point, perp_line)
        if triangle is None:
            continue

        signed_distance = dot(create_vector(wall.start, triangle.third_corner), perp_unit)

        if signed_distance < min_distance:
            min_distance = signed_distance
            min_third_corner = triangle.third_corner
        if signed_distance > max_distance:
            max_distance = signed_distance
            max_third_corner = triangle.third_corner

    return DimensionResult(
        start=min_third_corner,
        end=max_third_corner,
        distance=distance(min_third_corner, max_third_corner),
    )
