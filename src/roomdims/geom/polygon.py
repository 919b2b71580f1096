"""Polygon geometry utilities for room calculations.

This module reconstructs the room contour by walking the corner graph
and computes area, perimeter and bounds with Shapely.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from shapely.geometry import Polygon

from ..config import MIN_CORNERS
from ..core.model import Corner, RoomData
from ..core.topology import build_wall_adjacency

LOGGER = logging.getLogger(__name__)

MIN_POLYGON_AREA = 1e-6  # Minimum area for valid polygons


def _walk_corner_cycle(corners: Tuple[Corner, ...]) -> List[Corner]:
    """Follow wall_starts from the first corner until the loop closes.

    Returns an empty list if the walk dead-ends or does not return to
    the first corner within one lap.
    """
    adjacency = build_wall_adjacency(corners)
    loop = []
    index = 0

    for _ in range(len(corners)):
        corner = corners[index]
        loop.append(corner)

        if not corner.wall_starts:
            return []
        _, next_index = adjacency[corner.wall_starts[0].id]
        if next_index is None:
            return []
        if next_index == 0:
            return loop
        index = next_index

    return []


def room_outline(room: RoomData) -> Optional[Polygon]:
    """Reconstruct the room outline as a Shapely polygon.

    Args:
        room: Room whose corners carry wall references.

    Returns:
        Shapely Polygon of the room outline, or None if the corners do not
        form a closed loop of at least three corners.
    """
    if len(room.corners) < MIN_CORNERS:
        return None

    loop = _walk_corner_cycle(room.corners)
    if len(loop) < MIN_CORNERS:
        LOGGER.debug("Corner walk did not close into a polygon")
        return None

    polygon = Polygon([(c.x, c.y) for c in loop])
    if polygon.area <= MIN_POLYGON_AREA:
        return None

    return polygon


def room_area(room: RoomData) -> float:
    """Calculate room area in room units squared, or 0.0 without an outline."""
    polygon = room_outline(room)
    if polygon is None:
        return 0.0
    return polygon.area


def room_perimeter(room: RoomData) -> float:
    """Calculate room perimeter in room units, or 0.0 without an outline."""
    polygon = room_outline(room)
    if polygon is None:
        return 0.0
    return polygon.length


def room_bounds(room: RoomData) -> Optional[Tuple[float, float, float, float]]:
    """Bounding box (min_x, min_y, max_x, max_y) of the room corners."""
    if not room.corners:
        return None
    xs = [c.x for c in room.corners]
    ys = [c.y for c in room.corners]
    return min(xs), min(ys), max(xs), max(ys)
