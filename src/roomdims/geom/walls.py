"""Wall derivation from room corners.

Walls are never stored with geometry: each one is rebuilt from the
corner whose ``wall_starts`` references it and the corner whose
``wall_ends`` references the same id.
"""

from __future__ import annotations

import logging
import math
from typing import List, Sequence

from ..config import TOLERANCE
from ..core.model import Corner, Wall
from ..core.topology import build_wall_adjacency
from .vector import angle

LOGGER = logging.getLogger(__name__)


def derive_walls(corners: Sequence[Corner]) -> List[Wall]:
    """Reconstruct directed walls from corner back-references.

    Walls come out in corner order, then in each corner's ``wall_starts``
    order. A reference with no matching end corner is skipped.

    Args:
        corners: Corners of the room.

    Returns:
        List of walls from their start corner to their end corner.
    """
    adjacency = build_wall_adjacency(corners)
    walls = []

    for corner in corners:
        for ref in corner.wall_starts:
            _, end_index = adjacency[ref.id]
            if end_index is None:
                LOGGER.debug("Wall %s starts at corner %s but ends nowhere, skipping", ref.id, corner.id)
                continue

            end_corner = corners[end_index]
            walls.append(Wall(id=ref.id, start=corner.point, end=end_corner.point))

    return walls


def dedup_walls_by_orientation(walls: Sequence[Wall], tolerance: float = TOLERANCE) -> List[Wall]:
    """Keep the first wall of every orientation.

    Two walls share an orientation when their angles differ by less than
    ``tolerance``, or differ from pi by less than ``tolerance`` (a wall and
    its reverse). Each wall is checked against every angle kept so far;
    the scan order decides which wall of a bucket survives.

    Args:
        walls: Walls in derivation order.
        tolerance: Angle tolerance in radians.

    Returns:
        The kept walls, in input order.
    """
    seen_angles: List[float] = []
    unique_walls = []

    for wall in walls:
        wall_angle = angle(wall.start, wall.end)

        is_unique = True
        for seen_angle in seen_angles:
            diff = abs(wall_angle - seen_angle)
            if diff < tolerance or abs(diff - math.pi) < tolerance:
                is_unique = False
                break

        if is_unique:
            seen_angles.append(wall_angle)
            unique_walls.append(wall)
        else:
            LOGGER.debug("Wall %s duplicates a seen orientation (%.4f rad)", wall.id, wall_angle)

    return unique_walls


def get_unique_walls(corners: Sequence[Corner]) -> List[Wall]:
    """Derive the walls of a room and drop repeated orientations."""
    return dedup_walls_by_orientation(derive_walls(corners))
