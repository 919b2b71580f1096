"""Strict validation functions for room data.

The geometry engine degrades silently on malformed rooms. Callers that
want to reject such rooms up front run these validators first.
"""

from __future__ import annotations

import logging

import networkx as nx

from ..config import MIN_CORNERS
from ..core.model import RoomData
from ..core.topology import build_corner_graph, build_wall_adjacency
from ..geom.polygon import room_outline

LOGGER = logging.getLogger(__name__)


class InvalidRoom(Exception):
    """Raised when a room violates the closed simple polygon invariants."""

    pass


def validate_min_corners(room: RoomData, minimum: int = MIN_CORNERS) -> bool:
    """Validate that the room has enough corners to enclose an area."""
    return len(room.corners) >= minimum


def validate_references(room: RoomData) -> bool:
    """Validate that every wall reference is resolved at both ends.

    Args:
        room: The room to validate.

    Returns:
        True if each wall id referenced by a corner has both a start and
        an end corner, False otherwise.
    """
    for wall_id, (start, end) in build_wall_adjacency(room.corners).items():
        if start is None or end is None:
            LOGGER.debug("Wall %s is missing its %s corner", wall_id, "start" if start is None else "end")
            return False
    return True


def validate_closed_cycle(room: RoomData) -> bool:
    """Validate that corners and walls form exactly one closed loop.

    Every corner must start exactly one wall and end exactly one wall,
    and all corners must be reachable from each other.

    Args:
        room: The room to validate.

    Returns:
        True if the corner graph is a single cycle, False otherwise.
    """
    if not room.corners:
        return False

    if len({c.id for c in room.corners}) != len(room.corners):
        return False

    wall_count = sum(len(c.wall_starts) for c in room.corners)
    if wall_count != len(room.corners):
        return False

    G = build_corner_graph(room.corners)
    if G.number_of_edges() != G.number_of_nodes():
        return False

    for node in G.nodes:
        if G.in_degree(node) != 1 or G.out_degree(node) != 1:
            return False

    return nx.is_weakly_connected(G)


def validate_simple_polygon(room: RoomData) -> bool:
    """Validate that the room outline does not cross itself."""
    polygon = room_outline(room)
    if polygon is None:
        return False
    return polygon.is_valid


def validate_all(room: RoomData) -> bool:
    """Run all validators on the room.

    Args:
        room: The room to validate.

    Returns:
        True if all validations pass.

    Raises:
        InvalidRoom: If any validation fails, naming the failed check.
    """
    if not validate_min_corners(room):
        raise InvalidRoom(f"Room has {len(room.corners)} corners, at least {MIN_CORNERS} required")

    if not validate_references(room):
        raise InvalidRoom("Wall reference validation failed: dangling wall references detected")

    if not validate_closed_cycle(room):
        raise InvalidRoom("Cycle validation failed: corners do not form a single closed loop")

    if not validate_simple_polygon(room):
        raise InvalidRoom("Polygon validation failed: room outline is self-intersecting or empty")

    return True
