import math

import pytest

from contestlib.point import (
    Point,
    angle,
    cross,
    dist2,
    dot,
    rotate_ccw,
    rotate_ccw90,
    rotate_cw90,
)


def test_rotate_ccw90():
    assert tuple(rotate_ccw90(Point(2, 5))) == (-5, 2)


def test_rotate_cw90():
    assert tuple(rotate_cw90(Point(2, 5))) == (5, -2)


def test_rotate_ccw_quarter_turn():
    assert tuple(rotate_ccw(Point(2, 5), math.pi / 2)) == pytest.approx((-5, 2))


def test_rotations_are_inverse():
    p = Point(1.5, -3.25)
    assert rotate_cw90(rotate_ccw90(p)) == p


def test_rotate_preserves_length():
    p = Point(3.0, -7.0)
    assert abs(rotate_ccw(p, 1.234)) == pytest.approx(abs(p))


def test_arithmetic_round_trip():
    p, q = Point(1.0, 2.0), Point(-4.0, 0.5)
    assert (p + q) - q == p
    assert (p * 4) / 4 == p


def test_abs_of_3_4():
    assert abs(Point(3, 4)) == pytest.approx(5.0)


def test_cross_with_itself_is_zero():
    p = Point(2.5, -1.5)
    assert cross(p, p) == 0


def test_cross_antisymmetric():
    p, q = Point(1, 4), Point(-2, 3)
    assert cross(p, q) == -cross(q, p)


def test_dist2_matches_dot():
    p, q = Point(1, 4), Point(-2, 3)
    assert dist2(p, q) == dot(p - q, p - q)


def test_dot_of_perpendicular_vectors():
    p = Point(2, 5)
    assert dot(p, rotate_ccw90(p)) == 0


def test_angle_of_same_direction_is_zero():
    assert angle(Point(1, 1), Point(3, 3)) == pytest.approx(0.0, abs=1e-7)


def test_angle_of_perpendicular_vectors():
    p = Point(2, 5)
    assert angle(p, rotate_ccw90(p)) == pytest.approx(math.pi / 2)


def test_angle_of_opposite_vectors():
    p = Point(2, 5)
    assert angle(p, p * -1) == pytest.approx(math.pi)


def test_str_format():
    assert str(Point(5, 2)) == "(5,2)"