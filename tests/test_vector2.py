import math

import pytest

from vecmath import Vector2


def test_setters_chain():
    v = Vector2()
    assert v.set(1, 2) is v
    assert v.set_x(3).set_y(4).to_array() == [3, 4]


def test_length_and_distance():
    assert Vector2(3, 4).length() == 5
    assert Vector2(3, 4).length_squared() == 25
    assert Vector2(1, 1).distance_to(Vector2(4, 5)) == 5
    assert Vector2(1, 1).distance_to_squared(Vector2(4, 5)) == 25


def test_arithmetic():
    v = Vector2(1, 2).add(Vector2(3, 4))
    assert v.to_array() == [4, 6]
    assert v.subtract(Vector2(2, 2)).to_array() == [2, 4]
    assert v.multiply(Vector2(2, 0.5)).to_array() == [4, 2]
    assert v.divide(Vector2(4, 2)).to_array() == [1, 1]
    assert v.multiply_scalar(6).divide_scalar(2).to_array() == [3, 3]


@pytest.mark.parametrize("other, expected", [
    (Vector2(0, 1), math.pi / 2),
    (Vector2(0, -1), -math.pi / 2),
    (Vector2(1, 0), 0.0),
    (Vector2(-1, 0), math.pi),
])
def test_angle_to_is_signed(other, expected):
    assert Vector2(1, 0).angle_to(other) == pytest.approx(expected)


def test_angle_to_zero_vector():
    assert Vector2(0, 0).angle_to(Vector2(1, 0)) == 0
    assert Vector2(1, 0).angle_to(Vector2(0, 0)) == 0


def test_normal_is_clockwise_perpendicular():
    assert Vector2(1, 2).normal().to_array() == [2, -1]


def test_unit():
    assert Vector2(3, 4).unit().to_array() == pytest.approx([0.6, 0.8])
    assert Vector2().unit().to_array() == [0, 0]


def test_dot_and_cross():
    assert Vector2(1, 2).dot(Vector2(3, 4)) == 11
    assert Vector2(1, 0).cross(Vector2(0, 1)) == 1
    assert Vector2(0, 1).cross(Vector2(1, 0)) == -1


def test_rotate():
    v = Vector2(1, 0).rotate(math.pi / 2)
    assert v.to_array() == pytest.approx([0, 1], abs=1e-12)


def test_equal_copy_clone():
    v = Vector2(1, 2)
    assert v.equal(Vector2(1, 2))
    assert not v.equal(Vector2(2, 1))
    assert Vector2().copy(v).equal(v)
    assert v.clone() is not v
