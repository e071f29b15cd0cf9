## planes for spacegeom
## Copyright (c) 2026 spacegeom contributors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""planes

A plane is held in one of two ways:

- vector normal form, a unit normal ``n`` and a non-negative distance
  ``d`` from the origin, `r . n = d`.  This is the Hessian Normal Form,
  https://mathworld.wolfram.com/HessianNormalForm.html
- cartesian form, coefficients of `Ax + By + Cz + D = 0`, held in a
  ``PlaneCoefficients``.

``PlaneRepresentation`` carries whichever of normal, distance and
coefficients the constructor could determine.  The cartesian
constructors always fill in the coefficients, which is what the relation
analyzer works from.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from spacegeom.errors import DegenerateInput
from spacegeom.formatting import fnum, planestr, vecstr
from spacegeom.tolerance import is_zero
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


class PlaneForm(Enum):
    """How a plane representation was built."""
    VECTOR_NORMAL = "vector_normal_form"
    CARTESIAN_NORMAL_POINT = "cartesian_form_normal_point"
    CARTESIAN_COEFFICIENTS = "cartesian_form_coeffs"


@dataclass(frozen=True)
class PlaneCoefficients:
    """``a*x + b*y + c*z + d = 0``"""

    a: float
    b: float
    c: float
    d: float

    @classmethod
    def from_rhs(cls, a: float, b: float, c: float, d_rhs: float) -> "PlaneCoefficients":
        """coefficients of ``a*x + b*y + c*z = d_rhs``"""
        return cls(a, b, c, -d_rhs)

    @property
    def normal(self) -> Vector3D:
        return Vector3D(self.a, self.b, self.c)

    @property
    def d_rhs(self) -> float:
        return -self.d

    def evaluate(self, p: PointLike) -> float:
        """`A*x + B*y + C*z + D` at ``p``; zero on the plane"""
        return self.a*p[0] + self.b*p[1] + self.c*p[2] + self.d

    def scaled(self, k: float) -> "PlaneCoefficients":
        return PlaneCoefficients(self.a*k, self.b*k, self.c*k, self.d*k)

    def __iter__(self) -> Iterator[float]:
        yield self.a
        yield self.b
        yield self.c
        yield self.d

    def __str__(self) -> str:
        return planestr(self.a, self.b, self.c, self.d)


@dataclass(frozen=True)
class PlaneRepresentation:
    kind: PlaneForm
    equation: str
    normal: Optional[Vector3D] = None
    distance_from_origin: Optional[float] = None
    coefficients: Optional[PlaneCoefficients] = None

    def __str__(self) -> str:
        return self.equation


def as_coefficients(plane) -> PlaneCoefficients:
    """Accept ``PlaneCoefficients``, a ``PlaneRepresentation`` or an ``(A, B, C, D)`` sequence."""
    if isinstance(plane, PlaneCoefficients):
        return plane
    if isinstance(plane, PlaneRepresentation):
        if plane.coefficients is None:
            raise ValueError('plane representation carries no coefficients')
        return plane.coefficients
    if isinstance(plane, (tuple, list)) and len(plane) == 4:
        return PlaneCoefficients(*(float(x) for x in plane))
    raise ValueError('bad plane: {!r}'.format(plane))


def plane_vector_normal_form(normal: VectorLike, distance: float) -> PlaneRepresentation:
    """Plane `r . n = d` for unit normal ``n`` and signed distance ``d``.

    The normal is normalized.  A negative ``distance`` flips both the
    normal and the distance, so the stored distance is never negative.
    """
    normal = as_vector(normal)
    if normal.is_zero():
        raise DegenerateInput('Normal vector for a plane cannot be zero.',
                              'plane_vector_normal_form')
    n = normal.normalize()
    d = distance
    if d < 0:
        n = -n
        d = -d
    eq = "r · ({}) = {}".format(vecstr(n), fnum(d))
    coeffs = PlaneCoefficients(n.x, n.y, n.z, -d)
    return PlaneRepresentation(PlaneForm.VECTOR_NORMAL, eq, n, d, coeffs)


def plane_from_normal_point(normal: VectorLike, point: PointLike) -> PlaneRepresentation:
    """Plane through ``point`` perpendicular to ``normal``, `D = -(n . P)`."""
    normal = as_vector(normal)
    point = as_point(point)
    if normal.is_zero():
        raise DegenerateInput('Normal vector for a plane cannot be zero.',
                              'plane_from_normal_point')
    d = -normal.dot(point.to_vector())
    coeffs = PlaneCoefficients(normal.x, normal.y, normal.z, d)
    return PlaneRepresentation(PlaneForm.CARTESIAN_NORMAL_POINT, str(coeffs),
                               normal, None, coeffs)


def plane_from_coefficients(coeffs) -> PlaneRepresentation:
    coeffs = as_coefficients(coeffs)
    normal = coeffs.normal
    if normal.is_zero():
        raise DegenerateInput('Coefficients A,B,C for normal vector cannot all be zero.',
                              'plane_from_coefficients')
    distance = abs(coeffs.d) / normal.magnitude()
    return PlaneRepresentation(PlaneForm.CARTESIAN_COEFFICIENTS, str(coeffs),
                               normal, distance, coeffs)


def plane_from_three_points(p1: PointLike, p2: PointLike, p3: PointLike) -> PlaneRepresentation:
    """Plane through three points, normal `(p2 - p1) x (p3 - p1)`."""
    p1 = as_point(p1)
    normal = vector_from_two_points(p1, p2).cross(vector_from_two_points(p1, p3))
    if normal.is_zero():
        logger.debug("collinear points %r %r %r", p1, p2, p3)
        raise DegenerateInput('The three points are collinear and do not define a unique plane.',
                              'plane_from_three_points')
    return plane_from_normal_point(normal, p1)


def point_on_plane(coeffs) -> Point3D:
    """A point of the plane, solved on the first axis with a non-zero coefficient."""
    coeffs = as_coefficients(coeffs)
    if not is_zero(coeffs.a):
        return Point3D(-coeffs.d/coeffs.a, 0.0, 0.0)
    if not is_zero(coeffs.b):
        return Point3D(0.0, -coeffs.d/coeffs.b, 0.0)
    if not is_zero(coeffs.c):
        return Point3D(0.0, 0.0, -coeffs.d/coeffs.c)
    raise DegenerateInput('Coefficients A,B,C for normal vector cannot all be zero.',
                          'point_on_plane')


__all__ = [
    'PlaneForm',
    'PlaneCoefficients',
    'PlaneRepresentation',
    'as_coefficients',
    'plane_vector_normal_form',
    'plane_from_normal_point',
    'plane_from_coefficients',
    'plane_from_three_points',
    'point_on_plane',
]
