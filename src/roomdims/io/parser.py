"""Parser for room floor plan JSON files.

This module provides functionality to parse JSON room data (walls with
ids, corners with coordinates and wall back-references) into RoomData
objects, and to write dimension options back out as JSON.
"""

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Sequence

from ..config import JSON_INDENT
from ..core.model import Corner, DimensionOption, RoomData, WallReference, WallStub
from ..engine.dimensions import option_to_dict

LOGGER = logging.getLogger(__name__)


def _parse_refs(refs: Any) -> tuple[WallReference, ...]:
    """Parse a list of ``{"id": ...}`` wall references."""
    return tuple(WallReference(id=str(ref["id"])) for ref in refs)


def _parse_corner(corner_data: Mapping[str, Any]) -> Corner:
    return Corner(
        id=str(corner_data["id"]),
        x=float(corner_data["x"]),
        y=float(corner_data["y"]),
        wall_starts=_parse_refs(corner_data.get("wallStarts", [])),
        wall_ends=_parse_refs(corner_data.get("wallEnds", [])),
    )


def parse_room(data: Mapping[str, Any]) -> RoomData:
    """Convert decoded room JSON into a RoomData object.

    Args:
        data: Mapping with ``walls`` and ``corners`` lists.

    Returns:
        RoomData with corners in stored order.

    Raises:
        ValueError: If a wall or corner record is malformed.
    """
    if not isinstance(data, Mapping):
        raise ValueError(f"Room data must be an object, got {type(data).__name__}")

    for field in ("walls", "corners"):
        if not isinstance(data.get(field, []), list):
            raise ValueError(f"'{field}' must be a list, got {type(data[field]).__name__}")

    walls = []
    for i, wall_data in enumerate(data.get("walls", [])):
        try:
            walls.append(WallStub(id=str(wall_data["id"])))
        except (KeyError, TypeError) as e:
            raise ValueError(f"Invalid wall data at index {i}: {e}") from e

    corners = []
    for i, corner_data in enumerate(data.get("corners", [])):
        try:
            corners.append(_parse_corner(corner_data))
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid corner data at index {i}: {e}") from e

    LOGGER.debug("Parsed room with %d walls and %d corners", len(walls), len(corners))
    return RoomData(walls=tuple(walls), corners=tuple(corners))


def load_room(path: str) -> RoomData:
    """Load a room floor plan from a JSON file.

    Args:
        path: Path to the JSON file containing room data.

    Returns:
        RoomData object representing the floor plan.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the JSON data is invalid or malformed.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"File not found: {path}")

    with open(file_path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

    return parse_room(data)


def save_dimensions(options: Sequence[DimensionOption], output_path: str) -> None:
    """Save dimension options to a JSON file.

    Args:
        options: Dimension options to write.
        output_path: Path where to save the JSON file.
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump([option_to_dict(o) for o in options], f, indent=JSON_INDENT)
