"""Core data models for room dimensioning.

This module defines the fundamental data structures used to represent
a room floor plan: corners carrying wall back-references, the walls
derived from them, and the dimension options computed for each wall.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """Represents a 2D point in space.

    Attributes:
        x: The x-coordinate of the point.
        y: The y-coordinate of the point.
    """

    x: float
    y: float


@dataclass(frozen=True)
class Vector:
    """Represents a 2D displacement (difference of two points).

    Attributes:
        x: The x-component of the vector.
        y: The y-component of the vector.
    """

    x: float
    y: float


@dataclass(frozen=True)
class Line:
    """Represents an oriented line through two points.

    Used both as a finite segment and as the infinite line through
    ``start`` in the direction of ``end - start``.

    Attributes:
        start: First point of the line.
        end: Second point of the line.
    """

    start: Point
    end: Point


@dataclass(frozen=True)
class WallReference:
    """Back-reference from a corner to a wall, by wall id."""

    id: str


@dataclass(frozen=True)
class WallStub:
    """Wall record as stored in room data. Carries the id only."""

    id: str


@dataclass(frozen=True)
class Corner:
    """Represents a vertex of the room polygon.

    Attributes:
        id: Unique identifier for the corner.
        x: The x-coordinate of the corner.
        y: The y-coordinate of the corner.
        wall_starts: References to the walls that start at this corner.
        wall_ends: References to the walls that end at this corner.
    """

    id: str
    x: float
    y: float
    wall_starts: tuple[WallReference, ...] = ()
    wall_ends: tuple[WallReference, ...] = ()

    @property
    def point(self) -> Point:
        return Point(self.x, self.y)


@dataclass(frozen=True)
class Wall:
    """Represents a directed wall segment between two corners.

    Attributes:
        id: Identifier of the wall, taken from the corner references.
        start: Point of the corner the wall starts at.
        end: Point of the corner the wall ends at.
    """

    id: str
    start: Point
    end: Point

    @property
    def line(self) -> Line:
        return Line(self.start, self.end)


@dataclass(frozen=True)
class RoomData:
    """Represents a complete room as loaded from room data.

    Attributes:
        walls: Wall stubs carrying ids only.
        corners: Corners of the room polygon, in stored order.
    """

    walls: tuple[WallStub, ...]
    corners: tuple[Corner, ...]


@dataclass(frozen=True)
class DimensionOption:
    """One candidate length/width measurement frame, keyed to a wall.

    Attributes:
        id: Stable identifier, ``dim_<wallId>_<index>``.
        length: Axis spanning the room across the wall's normal.
        width: The wall extended along its own direction.
        length_distance: Length of the ``length`` axis.
        width_distance: Length of the ``width`` axis.
        description: Human-readable summary of both distances.
    """

    id: str
    length: Line
    width: Line
    length_distance: float
    width_distance: float
    description: str
