"""Engine module for room dimensioning.

This module provides dimension option generation and the strict room
validators layered on top of the geometry engine.
"""

from .dimensions import generate_all_dimension_combinations, option_to_dict, room_dimensions
from .validators import InvalidRoom, validate_all

__all__ = [
    "InvalidRoom",
    "generate_all_dimension_combinations",
    "option_to_dict",
    "room_dimensions",
    "validate_all",
]
