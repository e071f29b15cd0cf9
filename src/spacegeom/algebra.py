"""Vector algebra operations that return result records.

These wrap the primitives in ``spacegeom.vector`` with the derived
quantities callers usually want alongside the raw number: the angle that
goes with a dot product, the magnitude of a cross product, the coplanarity
verdict of a scalar triple product, and so on.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from math import acos, degrees
from typing import Dict, Optional, Sequence, Tuple

from spacegeom.errors import DegenerateInput
from spacegeom.formatting import pstr, vecstr
from spacegeom.tolerance import is_zero, is_zero_vector
from spacegeom.vector import (
    Point3D,
    PointLike,
    Vector3D,
    VectorLike,
    as_point,
    as_vector,
    vector_from_two_points,
)

logger = logging.getLogger(__name__)


def clamp_unit(c: float) -> float:
    """clamp a cosine/sine into [-1, 1] to absorb floating-point drift"""
    return max(-1.0, min(1.0, c))


@dataclass(frozen=True)
class MagnitudeResult:
    vector: Vector3D
    magnitude: float


@dataclass(frozen=True)
class UnitVectorResult:
    vector: Vector3D
    unit: Vector3D


@dataclass(frozen=True)
class DotProductResult:
    v1: Vector3D
    v2: Vector3D
    dot: float
    angle_radians: Optional[float]
    angle_degrees: Optional[float]


@dataclass(frozen=True)
class ProjectionResult:
    vector_a: Vector3D
    vector_b: Vector3D
    scalar_projection: float
    vector_projection: Vector3D


@dataclass(frozen=True)
class CrossProductResult:
    v1: Vector3D
    v2: Vector3D
    cross: Vector3D
    magnitude: float


@dataclass(frozen=True)
class AreaTriangleResult:
    area: float
    context: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ScalarTripleProductResult:
    a: Vector3D
    b: Vector3D
    c: Vector3D
    value: float
    coplanar: bool


@dataclass(frozen=True)
class SectionFormulaResult:
    point: Point3D
    p1: Point3D
    p2: Point3D
    m: float
    n: float
    division: str


@dataclass(frozen=True)
class CollinearityResult:
    collinear: bool
    reason: str
    points: Tuple[Point3D, ...]

    def __bool__(self) -> bool:
        return self.collinear


def vector_magnitude(v: VectorLike) -> MagnitudeResult:
    v = as_vector(v)
    return MagnitudeResult(v, v.magnitude())


def unit_vector(v: VectorLike) -> UnitVectorResult:
    v = as_vector(v)
    if v.is_zero():
        raise DegenerateInput('Cannot compute unit vector for a zero vector.',
                              'unit_vector')
    return UnitVectorResult(v, v.normalize())


def dot_product(v1: VectorLike, v2: VectorLike) -> DotProductResult:
    """Dot product of ``v1`` and ``v2`` plus the angle between them.

    The angle fields are ``None`` when either vector is zero, since no
    angle is defined.
    """
    v1 = as_vector(v1)
    v2 = as_vector(v2)
    dp = v1.dot(v2)
    m1 = v1.magnitude()
    m2 = v2.magnitude()
    rad = deg = None
    if not is_zero(m1) and not is_zero(m2):
        rad = acos(clamp_unit(dp / (m1*m2)))
        deg = degrees(rad)
    return DotProductResult(v1, v2, dp, rad, deg)


def projection_vector_on_vector(a: VectorLike, b: VectorLike) -> ProjectionResult:
    """scalar and vector projection of ``a`` onto ``b``"""
    a = as_vector(a)
    b = as_vector(b)
    mb = b.magnitude()
    if is_zero(mb):
        raise DegenerateInput('Cannot project onto a zero vector (vector B).',
                              'projection_vector_on_vector')
    scalar = a.dot(b) / mb
    return ProjectionResult(a, b, scalar, b.normalize().scale(scalar))


def cross_product(v1: VectorLike, v2: VectorLike) -> CrossProductResult:
    v1 = as_vector(v1)
    v2 = as_vector(v2)
    cp = v1.cross(v2)
    return CrossProductResult(v1, v2, cp, cp.magnitude())


def area_triangle_vectors(side1: VectorLike, side2: VectorLike) -> AreaTriangleResult:
    """area of the triangle spanned by two adjacent sides, ½|s1 x s2|"""
    cp = cross_product(side1, side2)
    context = {
        'method': '0.5 * |side1 x side2|',
        'side1': vecstr(cp.v1),
        'side2': vecstr(cp.v2),
    }
    return AreaTriangleResult(0.5*cp.magnitude, context)


def area_triangle_points(p1: PointLike, p2: PointLike, p3: PointLike) -> AreaTriangleResult:
    p1, p2, p3 = as_point(p1), as_point(p2), as_point(p3)
    area = area_triangle_vectors(p2 - p1, p3 - p1).area
    context = {
        'method': '0.5 * |(P2-P1) x (P3-P1)|',
        'P1': pstr(p1),
        'P2': pstr(p2),
        'P3': pstr(p3),
    }
    return AreaTriangleResult(area, context)


def scalar_triple_product(a: VectorLike, b: VectorLike, c: VectorLike) -> ScalarTripleProductResult:
    """`a . (b x c)`; zero iff the three vectors are coplanar"""
    a, b, c = as_vector(a), as_vector(b), as_vector(c)
    value = a.dot(b.cross(c))
    return ScalarTripleProductResult(a, b, c, value, is_zero(value))


def section_formula(p1: PointLike, p2: PointLike, m: float, n: float,
                    internal: bool = True) -> SectionFormulaResult:
    """Point dividing segment ``p1``-``p2`` in the ratio ``m:n``.

    Internal division gives `(n*P1 + m*P2)/(m+n)`, external division
    gives `(m*P2 - n*P1)/(m-n)`.
    """
    p1 = as_point(p1)
    p2 = as_point(p2)
    v1 = p1.to_vector()
    v2 = p2.to_vector()
    if internal:
        if is_zero(m + n):
            raise DegenerateInput('Sum of ratios m+n cannot be zero for internal division.',
                                  'section_formula')
        r = v1.scale(n).add(v2.scale(m)).scale(1.0/(m + n))
        division = 'internal'
    else:
        if is_zero(m - n):
            raise DegenerateInput('Ratios m and n cannot be equal for external division.',
                                  'section_formula')
        r = v2.scale(m).sub(v1.scale(n)).scale(1.0/(m - n))
        division = 'external'
    return SectionFormulaResult(Point3D.from_vector(r), p1, p2, m, n, division)


def check_collinearity_points(points: Sequence[PointLike]) -> CollinearityResult:
    """Do all ``points`` lie on a single line?

    Every point is compared against the direction from the first point to
    the second.  When the first two points coincide the set is collinear
    only if all points coincide.
    """
    pts = tuple(as_point(p) for p in (points or ()))
    if len(pts) < 2:
        return CollinearityResult(True, 'Less than 2 points are trivially collinear.', pts)
    if len(pts) == 2:
        return CollinearityResult(True, 'Two points are always collinear.', pts)

    p0 = pts[0]
    v1 = vector_from_two_points(p0, pts[1])
    if v1.is_zero():
        for i in range(2, len(pts)):
            if not vector_from_two_points(p0, pts[i]).is_zero():
                return CollinearityResult(
                    False,
                    'Points are not collinear; first two are coincident, but others differ.',
                    pts)
        return CollinearityResult(True, 'All points are coincident.', pts)

    for i in range(2, len(pts)):
        vi = vector_from_two_points(p0, pts[i])
        if vi.is_zero():
            continue
        if not is_zero_vector(v1.cross(vi)):
            logger.debug("point %d breaks collinearity", i)
            return CollinearityResult(
                False,
                f'Vector from point 0 to point {i} is not parallel to vector from point 0 to point 1.',
                pts)
    return CollinearityResult(
        True,
        'All vectors formed from the first point to other points are parallel (or points are coincident).',
        pts)


__all__ = [
    'clamp_unit',
    'MagnitudeResult',
    'UnitVectorResult',
    'DotProductResult',
    'ProjectionResult',
    'CrossProductResult',
    'AreaTriangleResult',
    'ScalarTripleProductResult',
    'SectionFormulaResult',
    'CollinearityResult',
    'vector_magnitude',
    'unit_vector',
    'dot_product',
    'projection_vector_on_vector',
    'cross_product',
    'area_triangle_vectors',
    'area_triangle_points',
    'scalar_triple_product',
    'section_formula',
    'check_collinearity_points',
]
