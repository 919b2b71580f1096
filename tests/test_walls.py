"""Tests for wall derivation and orientation de-duplication."""
import math
from roomdims.core.model import Corner, Point, Wall, WallReference
from roomdims.core.topology import build_corner_graph, build_wall_adjacency
from roomdims.geom.vector import distance
from roomdims.geom.walls import dedup_walls_by_orientation, derive_walls, get_unique_walls


# --- derive_walls ---

def test_square_has_four_walls(square_room):
    walls = derive_walls(square_room.corners)
    assert [w.id for w in walls] == ["w1", "w2", "w3", "w4"]
    assert all(abs(distance(w.start, w.end) - 10.0) < 1e-12 for w in walls)


def test_wall_endpoints_follow_corner_order(square_room):
    walls = derive_walls(square_room.corners)
    assert walls[0] == Wall("w1", Point(0, 0), Point(10, 0))
    assert walls[3] == Wall("w4", Point(0, 10), Point(0, 0))


def test_n_corners_give_n_walls(make_room):
    for n in range(3, 9):
        pts = [(math.cos(2 * math.pi * i / n), math.sin(2 * math.pi * i / n)) for i in range(n)]
        assert len(derive_walls(make_room(pts).corners)) == n


def test_wall_endpoints_match_corners(t_shape_room):
    corner_points = [c.point for c in t_shape_room.corners]
    for wall in derive_walls(t_shape_room.corners):
        assert any(distance(wall.start, p) < 0.01 for p in corner_points)
        assert any(distance(wall.end, p) < 0.01 for p in corner_points)


def test_dangling_reference_is_skipped():
    corners = [
        Corner("a", 0, 0, wall_starts=(WallReference("w1"), WallReference("ghost"))),
        Corner("b", 5, 0, wall_ends=(WallReference("w1"),)),
    ]
    walls = derive_walls(corners)
    assert [w.id for w in walls] == ["w1"]


def test_first_end_corner_wins():
    corners = [
        Corner("a", 0, 0, wall_starts=(WallReference("w1"),)),
        Corner("b", 5, 0, wall_ends=(WallReference("w1"),)),
        Corner("c", 9, 9, wall_ends=(WallReference("w1"),)),
    ]
    assert derive_walls(corners)[0].end == Point(5, 0)


def test_empty_corners():
    assert derive_walls([]) == []
    assert get_unique_walls([]) == []


# --- dedup_walls_by_orientation ---

def test_square_dedups_to_two(square_room):
    unique = get_unique_walls(square_room.corners)
    assert [w.id for w in unique] == ["w1", "w2"]


def test_t_shape_dedups_to_two(t_shape_room):
    assert len(get_unique_walls(t_shape_room.corners)) == 2


def test_triangle_walls_all_unique(triangle_room):
    assert len(get_unique_walls(triangle_room.corners)) == 3


def test_reverse_wall_is_duplicate():
    walls = [Wall("a", Point(0, 0), Point(1, 0)), Wall("b", Point(5, 5), Point(2, 5))]
    assert [w.id for w in dedup_walls_by_orientation(walls)] == ["a"]


def test_near_parallel_within_tolerance_is_duplicate():
    walls = [Wall("a", Point(0, 0), Point(100, 0)), Wall("b", Point(0, 0), Point(100, 0.5))]
    assert [w.id for w in dedup_walls_by_orientation(walls)] == ["a"]


def test_outside_tolerance_is_kept():
    walls = [Wall("a", Point(0, 0), Point(100, 0)), Wall("b", Point(0, 0), Point(100, 5))]
    assert [w.id for w in dedup_walls_by_orientation(walls)] == ["a", "b"]


def test_first_wall_of_bucket_is_kept():
    walls = [
        Wall("x", Point(0, 0), Point(0, 1)),
        Wall("y", Point(0, 0), Point(1, 0)),
        Wall("z", Point(3, 0), Point(3, -4)),
    ]
    assert [w.id for w in dedup_walls_by_orientation(walls)] == ["x", "y"]


def test_dedup_idempotent(t_shape_room, triangle_room, square_room):
    for room in (t_shape_room, triangle_room, square_room):
        once = dedup_walls_by_orientation(derive_walls(room.corners))
        assert dedup_walls_by_orientation(once) == once


# --- topology ---

def test_wall_adjacency_indices(square_room):
    adjacency = build_wall_adjacency(square_room.corners)
    assert adjacency["w1"] == (0, 1)
    assert adjacency["w4"] == (3, 0)


def test_wall_adjacency_marks_missing_end():
    corners = [Corner("a", 0, 0, wall_starts=(WallReference("w1"),))]
    assert build_wall_adjacency(corners) == {"w1": (0, None)}


def test_corner_graph_edges(triangle_room):
    G = build_corner_graph(triangle_room.corners)
    assert G.number_of_nodes() == 3
    assert G.edges["c1", "c2"]["wall_id"] == "w1"
    assert G.has_edge("c3", "c1")
