import math

import pytest

from spacegeom.algebra import (
    area_triangle_points,
    area_triangle_vectors,
    check_collinearity_points,
    clamp_unit,
    cross_product,
    dot_product,
    projection_vector_on_vector,
    scalar_triple_product,
    section_formula,
    unit_vector,
    vector_magnitude,
)
from spacegeom.errors import DegenerateInput
from spacegeom.vector import Point3D, Vector3D


def test_clamp_unit():
    assert clamp_unit(1.0000000002) == 1.0
    assert clamp_unit(-1.5) == -1.0
    assert clamp_unit(0.25) == 0.25


def test_vector_magnitude():
    res = vector_magnitude((3, 4, 12))
    assert res.vector == Vector3D(3, 4, 12)
    assert math.isclose(res.magnitude, 13.0)


def test_unit_vector():
    res = unit_vector((3, 0, 4))
    assert res.unit.x == pytest.approx(0.6)
    assert res.unit.y == pytest.approx(0.0)
    assert res.unit.z == pytest.approx(0.8)
    with pytest.raises(DegenerateInput):
        unit_vector((0, 0, 0))


def test_dot_product_with_angle():
    res = dot_product((1, -1, 2), (2, 3, -1))
    assert res.dot == -3
    expected = math.acos(-3 / (math.sqrt(6) * math.sqrt(14)))
    assert math.isclose(res.angle_radians, expected)
    assert math.isclose(res.angle_degrees, math.degrees(expected))


def test_dot_product_of_perpendicular_vectors():
    res = dot_product((1, 0, 0), (0, 0, 5))
    assert res.dot == 0
    assert math.isclose(res.angle_degrees, 90.0)


def test_dot_product_with_zero_vector_has_no_angle():
    res = dot_product((0, 0, 0), (1, 2, 3))
    assert res.dot == 0
    assert res.angle_radians is None
    assert res.angle_degrees is None


def test_projection():
    res = projection_vector_on_vector((1, -1, 2), (2, 3, -1))
    assert math.isclose(res.scalar_projection, -3 / math.sqrt(14))
    k = -3 / 14
    assert res.vector_projection.x == pytest.approx(2 * k)
    assert res.vector_projection.y == pytest.approx(3 * k)
    assert res.vector_projection.z == pytest.approx(-1 * k)
    with pytest.raises(DegenerateInput):
        projection_vector_on_vector((1, 2, 3), (0, 0, 0))


def test_cross_product():
    res = cross_product((1, 0, 0), (0, 1, 0))
    assert res.cross == Vector3D(0, 0, 1)
    assert res.magnitude == 1.0


def test_area_of_triangle():
    assert math.isclose(area_triangle_vectors((1, 0, 0), (0, 1, 0)).area, 0.5)
    res = area_triangle_points((1, 1, 1), (1, 2, 3), (2, 3, 1))
    assert math.isclose(res.area, math.sqrt(21) / 2)
    assert res.context['P1'] == "(1.00, 1.00, 1.00)"
    # degenerate triangle
    assert area_triangle_points((0, 0, 0), (1, 1, 1), (2, 2, 2)).area == 0.0


def test_scalar_triple_product():
    res = scalar_triple_product((1, 0, 0), (0, 1, 0), (0, 0, 1))
    assert res.value == 1
    assert not res.coplanar
    res = scalar_triple_product((1, 0, 0), (0, 1, 0), (1, 1, 0))
    assert res.value == 0
    assert res.coplanar


def test_section_formula_internal():
    res = section_formula((1, 0, -1), (3, 2, 1), 2, 3)
    assert res.division == 'internal'
    assert res.point.x == pytest.approx(1.8)
    assert res.point.y == pytest.approx(0.8)
    assert res.point.z == pytest.approx(-0.2)


def test_section_formula_midpoint():
    res = section_formula((0, 0, 0), (2, 4, 6), 1, 1)
    assert res.point == Point3D(1, 2, 3)


def test_section_formula_external():
    res = section_formula((1, 0, -1), (3, 2, 1), 2, 1, internal=False)
    assert res.division == 'external'
    assert res.point == Point3D(5, 4, 3)


def test_section_formula_degenerate_ratios():
    with pytest.raises(DegenerateInput):
        section_formula((0, 0, 0), (1, 1, 1), 1, -1)
    with pytest.raises(DegenerateInput):
        section_formula((0, 0, 0), (1, 1, 1), 2, 2, internal=False)


def test_collinear_points():
    res = check_collinearity_points([(1, 2, 3), (2, 3, 4), (3, 4, 5), (-1, 0, 1)])
    assert res.collinear
    assert bool(res)


def test_non_collinear_points_name_the_offender():
    res = check_collinearity_points([(1, 2, 3), (2, 3, 4), (3, 4, 5), (3, 4, 6)])
    assert not res
    assert 'point 3' in res.reason


def test_collinearity_trivial_cases():
    assert check_collinearity_points([]).collinear
    assert check_collinearity_points([(1, 2, 3)]).collinear
    assert check_collinearity_points([(1, 2, 3), (4, 5, 6)]).collinear


def test_collinearity_with_coincident_leading_points():
    res = check_collinearity_points([(0, 0, 0), (0, 0, 0), (0, 0, 0)])
    assert res.collinear
    assert res.reason == 'All points are coincident.'
    assert not check_collinearity_points([(0, 0, 0), (0, 0, 0), (1, 0, 0)]).collinear
