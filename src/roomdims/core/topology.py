"""Topology analysis for room corner graphs.

This module turns the corner back-references (``wall_starts`` /
``wall_ends``) into explicit structures: an id-indexed adjacency
mapping used by wall derivation, and a NetworkX graph used by the
strict validators.
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence, Tuple

import networkx as nx

from .model import Corner


def build_wall_adjacency(
    corners: Sequence[Corner],
) -> Dict[str, Tuple[Optional[int], Optional[int]]]:
    """Build adjacency mapping from wall ids to their endpoint corners.

    Args:
        corners: Corners of the room, in stored order.

    Returns:
        Dictionary mapping wall_id to (start corner index, end corner index).
        Either index is None when no corner references that end of the wall.
        When several corners reference the same end, the first one wins.
    """
    starts: Dict[str, int] = {}
    ends: Dict[str, int] = {}

    for index, corner in enumerate(corners):
        for ref in corner.wall_starts:
            starts.setdefault(ref.id, index)
        for ref in corner.wall_ends:
            ends.setdefault(ref.id, index)

    adjacency = {}
    for wall_id in list(starts) + [w for w in ends if w not in starts]:
        adjacency[wall_id] = (starts.get(wall_id), ends.get(wall_id))

    return adjacency


def build_corner_graph(corners: Sequence[Corner]) -> nx.DiGraph:
    """Build a directed graph of corners connected by walls.

    Creates a NetworkX DiGraph where nodes are corner ids and each edge
    is a wall running from its start corner to its end corner. Walls
    missing either endpoint are left out.

    Args:
        corners: Corners of the room, in stored order.

    Returns:
        NetworkX DiGraph with ``wall_id`` stored on every edge.
    """
    G = nx.DiGraph()

    for corner in corners:
        G.add_node(corner.id, x=corner.x, y=corner.y)

    for wall_id, (start, end) in build_wall_adjacency(corners).items():
        if start is None or end is None:
            continue
        G.add_edge(corners[start].id, corners[end].id, wall_id=wall_id)

    return G
