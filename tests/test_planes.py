import math

import pytest

from spacegeom.errors import DegenerateInput
from spacegeom.planes import (
    PlaneCoefficients,
    PlaneForm,
    as_coefficients,
    plane_from_coefficients,
    plane_from_normal_point,
    plane_from_three_points,
    plane_vector_normal_form,
    point_on_plane,
)
from spacegeom.vector import Point3D, Vector3D


def test_coefficients():
    c = PlaneCoefficients(1, 2, 3, -6)
    assert c.normal == Vector3D(1, 2, 3)
    assert c.d_rhs == 6
    assert c.evaluate((1, 1, 1)) == 0
    assert c.evaluate((0, 0, 0)) == -6
    assert tuple(c.scaled(2)) == (2, 4, 6, -12)
    assert PlaneCoefficients.from_rhs(1, 1, 1, 6) == PlaneCoefficients(1, 1, 1, -6)
    assert str(c) == "1x + 2y + 3z + -6 = 0"


def test_vector_normal_form_normalizes():
    pl = plane_vector_normal_form((0, 0, 2), 3)
    assert pl.kind is PlaneForm.VECTOR_NORMAL
    assert pl.normal == Vector3D(0, 0, 1)
    assert pl.distance_from_origin == 3
    assert pl.equation == "r · (0.00i + 0.00j + 1.00k) = 3"
    assert tuple(pl.coefficients) == (0, 0, 1, -3)


def test_vector_normal_form_flips_negative_distance():
    pl = plane_vector_normal_form((0, 0, 2), -3)
    assert pl.normal == Vector3D(0, 0, -1)
    assert pl.distance_from_origin == 3
    assert pl.equation == "r · (0.00i + 0.00j - 1.00k) = 3"
    assert pl.coefficients.evaluate((0, 0, -3)) == 0


def test_vector_normal_form_rejects_zero_normal():
    with pytest.raises(DegenerateInput):
        plane_vector_normal_form((0, 0, 0), 1)


def test_plane_from_normal_point():
    pl = plane_from_normal_point((1, 2, 3), (1, 1, 1))
    assert pl.kind is PlaneForm.CARTESIAN_NORMAL_POINT
    assert tuple(pl.coefficients) == (1, 2, 3, -6)
    assert pl.equation == "1x + 2y + 3z + -6 = 0"
    with pytest.raises(DegenerateInput):
        plane_from_normal_point((0, 0, 0), (1, 1, 1))


def test_plane_from_coefficients():
    pl = plane_from_coefficients((1, 2, 2, -9))
    assert pl.kind is PlaneForm.CARTESIAN_COEFFICIENTS
    assert pl.normal == Vector3D(1, 2, 2)
    assert math.isclose(pl.distance_from_origin, 3.0)
    with pytest.raises(DegenerateInput):
        plane_from_coefficients((0, 0, 0, 5))


def test_plane_from_three_points():
    pl = plane_from_three_points((1, 0, 0), (0, 1, 0), (0, 0, 1))
    assert tuple(pl.coefficients) == (1, 1, 1, -1)
    for p in [(1, 0, 0), (0, 1, 0), (0, 0, 1)]:
        assert pl.coefficients.evaluate(p) == 0


def test_plane_from_collinear_points():
    with pytest.raises(DegenerateInput, match="collinear"):
        plane_from_three_points((0, 0, 0), (1, 1, 1), (2, 2, 2))


def test_point_on_plane():
    assert point_on_plane((2, 0, 0, -4)) == Point3D(2, 0, 0)
    assert point_on_plane((0, 0, 4, -8)) == Point3D(0, 0, 2)
    for coeffs in [(1, 2, 3, -6), (0, 5, -1, 2)]:
        c = as_coefficients(coeffs)
        assert abs(c.evaluate(point_on_plane(c))) < 1e-12
    with pytest.raises(DegenerateInput):
        point_on_plane((0, 0, 0, 1))


def test_as_coefficients():
    c = PlaneCoefficients(1, 0, 0, 0)
    assert as_coefficients(c) is c
    assert as_coefficients([1, 0, 0, 0]) == c
    assert as_coefficients(plane_from_coefficients(c)) == c
    with pytest.raises(ValueError):
        as_coefficients((1, 2, 3))
