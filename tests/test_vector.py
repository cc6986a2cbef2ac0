"""Tests for the Vector3 value type."""

import math

import pytest

from swarm_sim.physics.vector import Vector3


def test_arithmetic():
    """Test component-wise arithmetic."""
    a = Vector3(1.0, 2.0, 0.0)
    b = Vector3(3.0, -1.0, 0.0)

    assert a + b == Vector3(4.0, 1.0, 0.0)
    assert b - a == Vector3(2.0, -3.0, 0.0)
    assert a * 2.0 == Vector3(2.0, 4.0, 0.0)
    assert 2.0 * a == a * 2.0
    assert b / 2.0 == Vector3(1.5, -0.5, 0.0)
    assert -a == Vector3(-1.0, -2.0, -0.0)
    assert a.dot(b) == pytest.approx(1.0)


def test_magnitude_and_normalize():
    """Test length and unit vector."""
    v = Vector3(3.0, 4.0, 0.0)
    assert v.magnitude == 5.0
    assert v.sqr_magnitude == 25.0

    unit = v.normalized()
    assert unit.magnitude == pytest.approx(1.0)
    assert unit == Vector3(0.6, 0.8, 0.0)


def test_normalize_tiny_vector_is_zero():
    """Vectors without a usable direction normalize to zero, not NaN."""
    assert Vector3.zero().normalized() == Vector3.zero()
    assert Vector3(1e-7, 0.0, 0.0).normalized() == Vector3.zero()
    assert all(math.isfinite(c) for c in Vector3(1e-7, 1e-7, 0).normalized())


def test_immutable():
    """Vectors are values; fields cannot be reassigned."""
    v = Vector3(1.0, 2.0, 3.0)
    with pytest.raises(AttributeError):
        v.x = 5.0


def test_axis_access():
    """Test indexing, with_axis and tuple conversion."""
    v = Vector3(1.0, 2.0, 3.0)
    assert v[0] == 1.0 and v[1] == 2.0 and v[2] == 3.0
    assert v.with_axis(1, -7.0) == Vector3(1.0, -7.0, 3.0)
    assert v == Vector3(1.0, 2.0, 3.0)
    assert Vector3.from_tuple(v.to_tuple()) == v
    assert list(v) == [1.0, 2.0, 3.0]
