"""Bundled sample rooms."""

from __future__ import annotations

import json
import random
from importlib import resources
from typing import List, Optional, Tuple

from ..config import ROOM_TYPES
from ..core.model import RoomData
from .parser import parse_room


def get_all_room_types() -> List[str]:
    """Names of the bundled sample rooms."""
    return list(ROOM_TYPES)


def get_room_data(room_type: str) -> RoomData:
    """Load one of the bundled sample rooms.

    Args:
        room_type: One of ``get_all_room_types()``.

    Returns:
        RoomData of the sample room.

    Raises:
        KeyError: If the room type is not bundled.
    """
    if room_type not in ROOM_TYPES:
        raise KeyError(f"Unknown room type: {room_type}")

    resource = resources.files("roomdims") / "data" / f"{room_type}.json"
    return parse_room(json.loads(resource.read_text(encoding="utf-8")))


def get_random_room(rng: Optional[random.Random] = None) -> Tuple[str, RoomData]:
    """Pick a bundled sample room at random.

    Args:
        rng: Random generator to draw from; the module generator if None.

    Returns:
        Tuple of (room_type, room_data).
    """
    rng = rng or random
    room_type = rng.choice(get_all_room_types())
    return room_type, get_room_data(room_type)
