"""Shared test fixtures for room dimension tests."""
import pytest
from roomdims.core.model import Corner, RoomData, WallReference, WallStub
from roomdims.io.rooms import get_room_data


def _cyclic_room(points, prefix="w", corner_prefix="c"):
    """Room whose corners are joined in order, last back to first."""
    n = len(points)
    corners = tuple(
        Corner(
            id=f"{corner_prefix}{i + 1}", x=float(x), y=float(y),
            wall_starts=(WallReference(f"{prefix}{i + 1}"),),
            wall_ends=(WallReference(f"{prefix}{(i - 1) % n + 1}"),),
        )
        for i, (x, y) in enumerate(points)
    )
    walls = tuple(WallStub(f"{prefix}{i + 1}") for i in range(n))
    return RoomData(walls=walls, corners=corners)


@pytest.fixture(scope="session")
def make_room():
    """Factory: list of (x, y) -> closed RoomData."""
    return _cyclic_room


@pytest.fixture(scope="session")
def square_room():
    """10x10 square, counter-clockwise from the origin."""
    return _cyclic_room([(0, 0), (10, 0), (10, 10), (0, 10)])


@pytest.fixture(scope="session")
def triangle_room():
    """3-4-5 right triangle with the right angle at the origin."""
    return _cyclic_room([(0, 0), (4, 0), (0, 3)])


@pytest.fixture(scope="session")
def t_shape_room():
    """Bundled T-shaped sample room."""
    return get_room_data("t_shape")


@pytest.fixture(scope="session")
def bowtie_room():
    """Self-intersecting four-corner room."""
    return _cyclic_room([(0, 0), (10, 10), (10, 0), (0, 10)])
