"""Dimension option generation.

Runs the triangle calculator once per unique wall of a room and
assembles the results into dimension options.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Sequence

from ..config import DESCRIPTION_PRECISION, OPTION_ID_PREFIX
from ..core.model import Corner, DimensionOption, Line, RoomData
from ..geom.triangle import calculate_length, calculate_width
from ..geom.walls import get_unique_walls

LOGGER = logging.getLogger(__name__)


def _describe(length_distance: float, width_distance: float) -> str:
    return (
        f"Length: {length_distance:.{DESCRIPTION_PRECISION}f} units, "
        f"Width: {width_distance:.{DESCRIPTION_PRECISION}f} units"
    )


def generate_all_dimension_combinations(corners: Sequence[Corner]) -> List[DimensionOption]:
    """Generate one length/width option per unique wall.

    Args:
        corners: All room corners.

    Returns:
        Options in unique-wall order, with ids ``dim_<wallId>_<index>``.
    """
    walls = get_unique_walls(corners)
    options = []

    for index, wall in enumerate(walls):
        width = calculate_width(wall.line, corners)
        length = calculate_length(wall.line, corners)

        options.append(
            DimensionOption(
                id=f"{OPTION_ID_PREFIX}_{wall.id}_{index}",
                length=length.line,
                width=width.line,
                length_distance=length.distance,
                width_distance=width.distance,
                description=_describe(length.distance, width.distance),
            )
        )

    LOGGER.debug("Generated %d dimension options from %d corners", len(options), len(corners))
    return options


def room_dimensions(room: RoomData) -> List[DimensionOption]:
    """Generate dimension options for a loaded room."""
    return generate_all_dimension_combinations(room.corners)


def _line_to_dict(line: Line) -> Dict[str, Any]:
    return {
        "start": {"x": line.start.x, "y": line.start.y},
        "end": {"x": line.end.x, "y": line.end.y},
    }


def option_to_dict(option: DimensionOption) -> Dict[str, Any]:
    """Convert a dimension option to a JSON-ready dictionary."""
    return {
        "id": option.id,
        "length": _line_to_dict(option.length),
        "width": _line_to_dict(option.width),
        "lengthDistance": option.length_distance,
        "widthDistance": option.width_distance,
        "description": option.description,
    }
