"""Core data models for room dimensioning."""

from .model import Corner, DimensionOption, Line, Point, RoomData, Vector, Wall, WallReference, WallStub
from .topology import build_corner_graph, build_wall_adjacency

__all__ = [
    "Corner",
    "DimensionOption",
    "Line",
    "Point",
    "RoomData",
    "Vector",
    "Wall",
    "WallReference",
    "WallStub",
    "build_corner_graph",
    "build_wall_adjacency",
]
