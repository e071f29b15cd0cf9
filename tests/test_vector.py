import dataclasses
import math

import pytest

from spacegeom.errors import DegenerateInput
from spacegeom.vector import (
    ORIGIN,
    Point3D,
    Vector3D,
    as_point,
    as_vector,
    cross,
    dist,
    dot,
    mag,
    vclose,
    vector_from_two_points,
)


def test_dot_and_cross():
    a = Vector3D(2, 1, -1)
    b = Vector3D(1, -1, 2)
    assert a.dot(b) == -1
    assert a.cross(b) == Vector3D(1, -5, -3)
    # functional forms agree and accept plain tuples
    assert dot((2, 1, -1), (1, -1, 2)) == -1
    assert cross((2, 1, -1), (1, -1, 2)) == Vector3D(1, -5, -3)


@pytest.mark.parametrize("a,b", [
    ((1, 2, 3), (4, 5, 6)),
    ((-2.5, 0.1, 7), (3, -3, 0.25)),
    ((1e3, -2e-2, 5), (0.3, 0.7, -11)),
])
def test_cross_is_orthogonal_to_both_factors(a, b):
    c = as_vector(a).cross(as_vector(b))
    scale = mag(a) * mag(b)
    assert abs(c.dot(as_vector(a))) / scale < 1e-9
    assert abs(c.dot(as_vector(b))) / scale < 1e-9


def test_normalize_has_unit_magnitude():
    for v in [(3, 0, 4), (1, 1, 1), (-1e-3, 2e-3, 5e-4), (1e6, -2e6, 3)]:
        assert math.isclose(as_vector(v).normalize().magnitude(), 1.0)


def test_normalize_zero_vector_raises():
    with pytest.raises(DegenerateInput):
        Vector3D(0, 0, 0).normalize()
    # DegenerateInput is a ValueError
    with pytest.raises(ValueError):
        Vector3D(1e-12, 0, 0).normalize()


def test_vector_operators():
    a = Vector3D(1, 2, 3)
    b = Vector3D(4, 5, 6)
    assert a + b == Vector3D(5, 7, 9)
    assert b - a == Vector3D(3, 3, 3)
    assert a * 2 == Vector3D(2, 4, 6)
    assert 2 * a == Vector3D(2, 4, 6)
    assert -a == Vector3D(-1, -2, -3)
    assert list(a) == [1, 2, 3]
    assert a[2] == 3
    assert len(a) == 3


def test_point_vector_arithmetic():
    p = Point3D(1, 1, 1)
    q = Point3D(2, 3, 4)
    v = q - p
    assert isinstance(v, Vector3D)
    assert v == Vector3D(1, 2, 3)
    assert p + v == q
    assert q - v == p
    with pytest.raises(TypeError):
        p + q


def test_point_vector_conversion():
    p = Point3D(1, -2, 3)
    assert p.to_vector() == Vector3D(1, -2, 3)
    assert Point3D.from_vector(Vector3D(1, -2, 3)) == p
    assert Vector3D(0, 0, 0).to_point() == ORIGIN


def test_values_are_immutable():
    v = Vector3D(1, 2, 3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.x = 5


def test_as_vector_and_as_point():
    assert as_vector([1, 2, 3]) == Vector3D(1.0, 2.0, 3.0)
    assert as_point((1, 2, 3)) == Point3D(1.0, 2.0, 3.0)
    p = Point3D(1, 2, 3)
    assert as_point(p) is p
    with pytest.raises(ValueError):
        as_vector([1, 2])
    with pytest.raises(ValueError):
        as_vector([True, 1, 2])
    with pytest.raises(ValueError):
        as_point("abc")


def test_vector_from_two_points_and_distance():
    assert vector_from_two_points((1, 2, 3), (4, 6, 3)) == Vector3D(3, 4, 0)
    assert math.isclose(dist((1, 2, 3), (4, 6, 3)), 5.0)


def test_vclose():
    assert vclose((1, 2, 3), (1, 2, 3 + 1e-12))
    assert not vclose((1, 2, 3), (1, 2, 3.001))
