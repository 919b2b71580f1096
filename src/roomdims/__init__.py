"""Room Dimensions - length/width axes for polygonal room floor plans."""

__version__ = "0.1.0"

from .core.model import Corner, DimensionOption, Line, Point, RoomData, Wall
from .engine.dimensions import generate_all_dimension_combinations

__all__ = [
    "Corner",
    "DimensionOption",
    "Line",
    "Point",
    "RoomData",
    "Wall",
    "generate_all_dimension_combinations",
]
