import dataclasses
import math

import numpy as np
import pytest

from electrostatic_lab.types import Vector2


def test_arithmetic():
    a = Vector2(1, 2)
    b = Vector2(3, -4)
    assert a + b == Vector2(4, -2)
    assert b - a == Vector2(2, -6)
    assert a * 3 == Vector2(3, 6)
    assert 3 * a == Vector2(3, 6)
    assert b / 2 == Vector2(1.5, -2)
    assert -a == Vector2(-1, -2)


def test_magnitude_and_distance():
    v = Vector2(3, 4)
    assert v.magnitude() == 5.0
    assert Vector2(1, 1).distance_to(Vector2(4, 5)) == 5.0


def test_normalize_zero_vector_is_zero():
    """Normalizing a zero-length vector must not divide by zero."""
    n = Vector2.zero().normalize()
    assert n == Vector2(0.0, 0.0)
    assert not math.isnan(n.x) and not math.isnan(n.y)


def test_normalize_unit_length():
    n = Vector2(-7, 24).normalize()
    assert n.magnitude() == pytest.approx(1.0)
    assert n.x == pytest.approx(-7 / 25)
    assert n.y == pytest.approx(24 / 25)


def test_immutable():
    v = Vector2(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.x = 5.0


def test_of_and_conversions():
    assert Vector2.of((2, 3)) == Vector2(2.0, 3.0)
    v = Vector2(1, 2)
    assert Vector2.of(v) is v
    assert tuple(v) == (1.0, 2.0)
    assert np.array_equal(v.to_array(), np.array([1.0, 2.0]))
    with pytest.raises(ValueError):
        Vector2.of((1, 2, 3))
