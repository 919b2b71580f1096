"""Room data loading and dimension export."""

from .parser import load_room, parse_room, save_dimensions
from .rooms import get_all_room_types, get_random_room, get_room_data

__all__ = ["get_all_room_types", "get_random_room", "get_room_data", "load_room", "parse_room", "save_dimensions"]
