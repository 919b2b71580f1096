"""Tests for roomdims.geom.vector pure functions."""
import math
from roomdims.core.model import Point, Vector
from roomdims.geom.vector import (
    angle, create_vector, cross, distance, dot, is_same_point,
    normalize_vector, perpendicular_vector, project_point_onto_line, vector_length,
)


# --- create_vector / vector_length ---

def test_create_vector():
    v = create_vector(Point(1, 2), Point(4, 6))
    assert v == Vector(3, 4)


def test_vector_length():
    assert vector_length(Vector(3, 4)) == 5.0
    assert vector_length(Vector(0, 0)) == 0.0


# --- normalize_vector ---

def test_normalize_vector_unit_length():
    n = normalize_vector(Vector(3, 4))
    assert abs(n.x - 0.6) < 1e-12
    assert abs(n.y - 0.8) < 1e-12


def test_normalize_zero_vector_is_zero():
    assert normalize_vector(Vector(0, 0)) == Vector(0.0, 0.0)


# --- perpendicular_vector ---

def test_perpendicular_is_ccw_rotation():
    assert perpendicular_vector(Vector(1, 0)) == Vector(0, 1)
    assert perpendicular_vector(Vector(0, 1)) == Vector(-1, 0)


def test_perpendicular_is_orthogonal():
    v = Vector(2.5, -7.0)
    assert dot(v, perpendicular_vector(v)) == 0.0


# --- project_point_onto_line ---

def test_project_onto_x_axis():
    p = project_point_onto_line(Point(3, 7), Point(0, 0), Vector(5, 0))
    assert abs(p.x - 3.0) < 1e-12
    assert abs(p.y) < 1e-12


def test_project_onto_diagonal():
    p = project_point_onto_line(Point(2, 0), Point(0, 0), Vector(1, 1))
    assert abs(p.x - 1.0) < 1e-12
    assert abs(p.y - 1.0) < 1e-12


def test_project_point_already_on_line():
    p = project_point_onto_line(Point(4, 4), Point(1, 1), Vector(-3, -3))
    assert abs(p.x - 4.0) < 1e-12
    assert abs(p.y - 4.0) < 1e-12


# --- distance / angle ---

def test_distance_symmetric():
    a, b = Point(1, 1), Point(4, 5)
    assert distance(a, b) == distance(b, a) == 5.0


def test_distance_zero_for_same_point():
    assert distance(Point(2, 3), Point(2, 3)) == 0.0


def test_angle_quadrants():
    o = Point(0, 0)
    assert angle(o, Point(1, 0)) == 0.0
    assert abs(angle(o, Point(0, 1)) - math.pi / 2) < 1e-12
    assert abs(angle(o, Point(-1, 0)) - math.pi) < 1e-12
    assert abs(angle(o, Point(0, -1)) + math.pi / 2) < 1e-12


# --- helpers ---

def test_cross_parallel_is_zero():
    assert cross(Vector(2, 4), Vector(1, 2)) == 0.0


def test_is_same_point_tolerance():
    assert is_same_point(Point(0, 0), Point(0.005, 0))
    assert not is_same_point(Point(0, 0), Point(0.02, 0))
