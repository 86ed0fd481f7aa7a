from __future__ import annotations

import dataclasses
import math

import numpy as np
import pytest

from geom3d import Point3D, Vector3D


def test_point_construct_and_read() -> None:
    p = Point3D(1.0, 2.0, 3.0)
    assert p.x == 1.0
    assert p.y == 2.0
    assert p.z == 3.0


def test_point_constants() -> None:
    assert Point3D.zeroes() == Point3D(0.0, 0.0, 0.0)
    assert Point3D.ones() == Point3D(1.0, 1.0, 1.0)


def test_point_coerces_to_float() -> None:
    p = Point3D(1, np.float64(2.5), 3)
    assert type(p.x) is float
    assert type(p.y) is float
    assert (p.x, p.y, p.z) == (1.0, 2.5, 3.0)


def test_point_is_frozen() -> None:
    p = Point3D(1.0, 2.0, 3.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.x = 5.0  # type: ignore[misc]


def test_point_add_sub() -> None:
    assert Point3D(1.0, 2.0, 3.0) + Point3D(4.0, 5.0, 6.0) == Point3D(5.0, 7.0, 9.0)
    assert Point3D(9.0, 8.0, 7.0) - Point3D(1.0, 2.0, 3.0) == Point3D(8.0, 6.0, 4.0)


def test_point_in_place_ops_rebind() -> None:
    p = Point3D(1.0, 2.0, 3.0)
    alias = p
    p += Point3D(4.0, 5.0, 6.0)
    assert p == Point3D(5.0, 7.0, 9.0)
    assert alias == Point3D(1.0, 2.0, 3.0)

    p = Point3D(1.0, 2.0, 3.0)
    p -= Point3D(9.0, 8.0, 7.0)
    assert p == Point3D(-8.0, -6.0, -4.0)

    p = Point3D(1.0, 2.0, 3.0)
    p *= 2.0
    assert p == Point3D(2.0, 4.0, 6.0)

    p /= 2.0
    assert p == Point3D(1.0, 2.0, 3.0)


def test_point_scale() -> None:
    p = Point3D(1.0, 2.0, 3.0)
    assert p * 2.0 == Point3D(2.0, 4.0, 6.0)
    assert 2.0 * p == Point3D(2.0, 4.0, 6.0)
    assert Point3D(2.0, 4.0, 6.0) / 2.0 == p


def test_point_divide_by_zero_is_ieee() -> None:
    p = Point3D(1.0, -2.0, 0.0) / 0.0
    assert p.x == math.inf
    assert p.y == -math.inf
    assert math.isnan(p.z)


def test_point_neg() -> None:
    assert -Point3D(1.0, 2.0, 3.0) == Point3D(-1.0, -2.0, -3.0)


def test_point_does_not_mix_with_vector() -> None:
    p = Point3D(1.0, 2.0, 3.0)
    v = Vector3D(1.0, 2.0, 3.0)
    with pytest.raises(TypeError):
        _ = p + v
    with pytest.raises(TypeError):
        _ = v - p
    with pytest.raises(TypeError):
        _ = p * v
    assert p != v


def test_point_nan_propagates() -> None:
    p = Point3D(math.nan, 1.0, math.inf) + Point3D(1.0, 1.0, -math.inf)
    assert math.isnan(p.x)
    assert p.y == 2.0
    assert math.isnan(p.z)
