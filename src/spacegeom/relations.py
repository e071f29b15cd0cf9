## relation analyzer for spacegeom: angles, distances, intersections
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

"""relations between points, lines and planes

====================
OVERVIEW
====================

This module classifies and quantifies how two figures sit relative to
each other.  Every function is pure and returns a frozen result record.

angles
======

- ``angle_between_lines(d1, d2)`` -- `acos(d1.d2 / |d1||d2|)`
- ``angle_between_planes(p1, p2)`` -- the angle between the normals
- ``angle_line_plane(line, plane)`` -- `asin(|d.n| / |d||n|)`, the
  complement of the line-to-normal angle, so the sign of the line
  direction does not matter

Cosines and sines are clamped to `[-1, 1]` before the inverse
trigonometric call.  Angles come back in radians and degrees.

distances
=========

- ``distance_point_line(P, A, d)`` -- `|(P-A) x d| / |d|`, with the foot
  of the perpendicular at `A + t*d`, `t = (P-A).d / |d|^2`
- ``distance_point_plane(P, plane)`` -- signed distance
  `(A*x + B*y + C*z + D) / |(A,B,C)|`, foot at `P - signed*n_unit`

classifications
===============

- ``relationship_line_plane(line, plane)`` -- ``LinePlaneRelation``:
  a line whose direction is perpendicular to the normal is parallel to
  the plane, and either lies in it or sits at a fixed distance;
  otherwise it meets the plane at `λ = -(n.A + D)/(n.d)`.
- ``intersection_two_planes(c1, c2)`` -- ``PlanePlaneRelation``: the
  planes meet along `n1 x n2` unless that is zero, in which case they
  are coincident or parallel.
- ``lines_relationship(P1, d1, P2, d2)`` -- ``LineLineRelation``:
  collinear, parallel, intersecting or skew, with the shortest distance
  and the closest points.
- ``check_coplanarity_lines(l1, l2)`` -- scalar triple product test,
  plus a plane containing both lines when one exists.

All tolerance tests go through ``spacegeom.tolerance`` with the single
``spacegeom.config.epsilon``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from math import asin, acos, degrees
from typing import Optional

from spacegeom.algebra import clamp_unit, scalar_triple_product
from spacegeom.errors import DegenerateInput, NumericInstability
from spacegeom.lines import LineRepresentation, as_line, line_vector_form
from spacegeom.planes import (
    PlaneCoefficients,
    PlaneRepresentation,
    as_coefficients,
    plane_from_coefficients,
    plane_from_normal_point,
    point_on_plane,
)
from spacegeom.solve import det2x2, solve2x2
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


class LinePlaneRelation(Enum):
    PARALLEL_DISTINCT = "line_parallel_to_plane_distinct"
    LIES_IN_PLANE = "line_lies_in_plane"
    INTERSECTS = "line_intersects_plane"


class PlanePlaneRelation(Enum):
    INTERSECTING = "intersecting"
    COINCIDENT = "coincident"
    PARALLEL_DISTINCT = "parallel_distinct"


class LineLineRelation(Enum):
    COLLINEAR = "collinear"
    PARALLEL_DISTINCT = "parallel_distinct"
    INTERSECTING = "intersecting"
    SKEW = "skew"


## result records
## --------------

@dataclass(frozen=True)
class AngleBetweenLinesResult:
    direction1: Vector3D
    direction2: Vector3D
    angle_radians: float
    angle_degrees: float


@dataclass(frozen=True)
class AngleBetweenPlanesResult:
    plane1: PlaneRepresentation
    plane2: PlaneRepresentation
    angle_radians: float
    angle_degrees: float


@dataclass(frozen=True)
class AngleLinePlaneResult:
    line: LineRepresentation
    plane: PlaneRepresentation
    angle_radians: float
    angle_degrees: float


@dataclass(frozen=True)
class DistancePointLineResult:
    point: Point3D
    line: LineRepresentation
    distance: float
    foot: Point3D


@dataclass(frozen=True)
class DistancePointPlaneResult:
    point: Point3D
    plane: PlaneRepresentation
    distance: float
    signed_distance: float
    foot: Point3D


@dataclass(frozen=True)
class LinePlaneRelationshipResult:
    line: LineRepresentation
    plane: PlaneRepresentation
    relation: LinePlaneRelation
    intersection: Optional[Point3D] = None
    distance: Optional[float] = None


@dataclass(frozen=True)
class LinePlaneIntersectionResult:
    line: LineRepresentation
    plane: PlaneRepresentation
    intersects: bool
    point: Optional[Point3D]
    message: str


@dataclass(frozen=True)
class PlaneIntersectionResult:
    plane1: PlaneRepresentation
    plane2: PlaneRepresentation
    relation: PlanePlaneRelation
    line: Optional[LineRepresentation]
    message: str

    @property
    def intersects(self) -> bool:
        """coincident planes share every point, so they intersect too"""
        return self.relation is not PlanePlaneRelation.PARALLEL_DISTINCT


@dataclass(frozen=True)
class LinesRelationshipResult:
    line1: LineRepresentation
    line2: LineRepresentation
    relation: LineLineRelation
    distance: float
    point_on_line1: Optional[Point3D] = None
    point_on_line2: Optional[Point3D] = None

    @property
    def coplanar(self) -> bool:
        return self.relation is not LineLineRelation.SKEW

    @property
    def intersection(self) -> Optional[Point3D]:
        if self.relation is LineLineRelation.INTERSECTING:
            return self.point_on_line1
        return None


@dataclass(frozen=True)
class CoplanarityLinesResult:
    line1: LineRepresentation
    line2: LineRepresentation
    coplanar: bool
    plane: Optional[PlaneRepresentation]
    reason: str

    def __bool__(self) -> bool:
        return self.coplanar


## helpers
## -------

def _direction(x) -> Vector3D:
    if isinstance(x, LineRepresentation):
        return x.direction
    return as_vector(x)


def _plane(x) -> PlaneRepresentation:
    if isinstance(x, PlaneRepresentation):
        return x
    return plane_from_coefficients(x)


def _angle(a: Vector3D, b: Vector3D, operation: str) -> float:
    if a.is_zero() or b.is_zero():
        raise DegenerateInput('Direction vectors cannot be zero for angle calculation.',
                              operation)
    return acos(clamp_unit(a.dot(b) / (a.magnitude()*b.magnitude())))


def _signed_residual(coeffs: PlaneCoefficients, p: Point3D) -> float:
    # signed distance of p from the plane, independent of coefficient scale
    return coeffs.evaluate(p) / coeffs.normal.magnitude()


def _line_with_direction(line, operation: str) -> LineRepresentation:
    line = as_line(line)
    if line.direction.is_zero():
        raise DegenerateInput('Line direction vector cannot be zero.', operation)
    return line


## angles
## ------

def angle_between_lines(dir1, dir2) -> AngleBetweenLinesResult:
    """Angle between two line directions (or ``LineRepresentation``s)."""
    d1 = _direction(dir1)
    d2 = _direction(dir2)
    rad = _angle(d1, d2, 'angle_between_lines')
    return AngleBetweenLinesResult(d1, d2, rad, degrees(rad))


def angle_between_planes(plane1, plane2) -> AngleBetweenPlanesResult:
    """Angle between two planes, measured between their normals."""
    pl1 = _plane(plane1)
    pl2 = _plane(plane2)
    if pl1.normal is None or pl2.normal is None:
        raise DegenerateInput('Plane definitions must include normal vectors.',
                              'angle_between_planes')
    rad = _angle(pl1.normal, pl2.normal, 'angle_between_planes')
    return AngleBetweenPlanesResult(pl1, pl2, rad, degrees(rad))


def angle_line_plane(line, plane) -> AngleLinePlaneResult:
    """Angle between a line and a plane, in `[0, pi/2]`."""
    ln = as_line(line)
    pl = _plane(plane)
    d = ln.direction
    n = pl.normal
    if n is None or d.is_zero() or n.is_zero():
        raise DegenerateInput('Direction/normal vector(s) cannot be zero for angle calculation.',
                              'angle_line_plane')
    sin_alpha = clamp_unit(abs(d.dot(n)) / (d.magnitude()*n.magnitude()))
    rad = asin(sin_alpha)
    return AngleLinePlaneResult(ln, pl, rad, degrees(rad))


## distances
## ---------

def distance_point_line(point: PointLike, line_point: PointLike,
                        line_dir: VectorLike) -> DistancePointLineResult:
    """Distance from ``point`` to the line through ``line_point`` along
    ``line_dir``, and the foot of the perpendicular.
    """
    p = as_point(point)
    a = as_point(line_point)
    d = as_vector(line_dir)
    if d.is_zero():
        raise DegenerateInput('Line direction vector cannot be zero.',
                              'distance_point_line')
    ap = vector_from_two_points(a, p)
    dd = d.dot(d)
    distance = ap.cross(d).magnitude() / d.magnitude()
    t = ap.dot(d) / dd
    foot = a + d.scale(t)
    return DistancePointLineResult(p, line_vector_form(a, d), distance, foot)


def distance_point_plane(point: PointLike, plane) -> DistancePointPlaneResult:
    """Distance from ``point`` to a plane given by coefficients."""
    p = as_point(point)
    coeffs = as_coefficients(plane)
    pl = plane_from_coefficients(coeffs)
    n = coeffs.normal
    signed = coeffs.evaluate(p) / n.magnitude()
    foot = p - n.normalize().scale(signed)
    return DistancePointPlaneResult(p, pl, abs(signed), signed, foot)


## line and plane
## --------------

def relationship_line_plane(line, plane) -> LinePlaneRelationshipResult:
    """Classify a line against a plane.

    ``PARALLEL_DISTINCT`` reports the distance between them,
    ``LIES_IN_PLANE`` reports distance zero, and ``INTERSECTS`` reports
    the point of intersection.
    """
    ln = _line_with_direction(line, 'relationship_line_plane')
    coeffs = as_coefficients(plane)
    pl = plane_from_coefficients(coeffs)
    n = coeffs.normal
    d = ln.direction
    a = ln.point

    n_dot_d = n.dot(d)
    value = coeffs.evaluate(a)
    if is_zero(n_dot_d):
        # direction perpendicular to the normal
        distance = abs(_signed_residual(coeffs, a))
        if is_zero(distance):
            logger.debug("line %s lies in plane %s", ln, pl)
            return LinePlaneRelationshipResult(ln, pl, LinePlaneRelation.LIES_IN_PLANE,
                                               None, 0.0)
        logger.debug("line %s parallel to plane %s at %g", ln, pl, distance)
        return LinePlaneRelationshipResult(ln, pl, LinePlaneRelation.PARALLEL_DISTINCT,
                                           None, distance)

    lam = -value / n_dot_d
    hit = ln.sample(lam)
    logger.debug("line %s meets plane %s at lambda=%g", ln, pl, lam)
    return LinePlaneRelationshipResult(ln, pl, LinePlaneRelation.INTERSECTS, hit, None)


def intersection_line_plane(line, plane) -> LinePlaneIntersectionResult:
    """Intersection of a line and a plane.

    ``intersects`` is True both for a single crossing point and for a
    line lying in the plane; only the former has a ``point``.
    """
    rel = relationship_line_plane(line, plane)
    if rel.relation is LinePlaneRelation.INTERSECTS:
        return LinePlaneIntersectionResult(rel.line, rel.plane, True, rel.intersection,
                                           rel.relation.value)
    if rel.relation is LinePlaneRelation.LIES_IN_PLANE:
        return LinePlaneIntersectionResult(rel.line, rel.plane, True, None,
                                           'Line lies in the plane (infinite intersection points).')
    return LinePlaneIntersectionResult(rel.line, rel.plane, False, None, rel.relation.value)


## plane and plane
## ---------------

def _point_on_both_planes(c1: PlaneCoefficients, c2: PlaneCoefficients) -> Point3D:
    # fix z, then x, then y, on the first non-singular minor
    if not is_zero(det2x2(c1.a, c1.b, c2.a, c2.b)):
        x, y = solve2x2(c1.a, c1.b, c2.a, c2.b, -c1.d, -c2.d)
        return Point3D(x, y, 0.0)
    if not is_zero(det2x2(c1.b, c1.c, c2.b, c2.c)):
        y, z = solve2x2(c1.b, c1.c, c2.b, c2.c, -c1.d, -c2.d)
        return Point3D(0.0, y, z)
    if not is_zero(det2x2(c1.a, c1.c, c2.a, c2.c)):
        x, z = solve2x2(c1.a, c1.c, c2.a, c2.c, -c1.d, -c2.d)
        return Point3D(x, 0.0, z)
    raise NumericInstability('Planes intersect, but no non-singular 2x2 minor was found.',
                             'intersection_two_planes')


def intersection_two_planes(plane1, plane2) -> PlaneIntersectionResult:
    """Intersect two planes given by coefficients.

    Non-parallel planes meet in a line with direction `n1 x n2`.  Parallel
    planes are coincident when a point of the first satisfies the second.
    """
    c1 = as_coefficients(plane1)
    c2 = as_coefficients(plane2)
    pl1 = plane_from_coefficients(c1)
    pl2 = plane_from_coefficients(c2)
    n1 = c1.normal
    n2 = c2.normal

    direction = n1.cross(n2)
    if is_zero_vector(direction):
        p = point_on_plane(c1)
        if is_zero(_signed_residual(c2, p)):
            logger.debug("planes %s and %s coincide", pl1, pl2)
            return PlaneIntersectionResult(pl1, pl2, PlanePlaneRelation.COINCIDENT, None,
                                           'Planes are coincident (same plane).')
        logger.debug("planes %s and %s are parallel", pl1, pl2)
        return PlaneIntersectionResult(pl1, pl2, PlanePlaneRelation.PARALLEL_DISTINCT, None,
                                       'Planes are parallel and distinct.')

    p = _point_on_both_planes(c1, c2)
    ln = line_vector_form(p, direction)
    logger.debug("planes %s and %s meet along %s", pl1, pl2, ln)
    return PlaneIntersectionResult(pl1, pl2, PlanePlaneRelation.INTERSECTING, ln,
                                   'Planes intersect in a line.')


## line and line
## -------------

def lines_relationship(p1: PointLike, d1: VectorLike,
                       p2: PointLike, d2: VectorLike) -> LinesRelationshipResult:
    """Classify two lines and find the shortest distance between them.

    With `w = P2 - P1`: parallel lines are `|w x d1| / |d1|` apart and
    collinear when that is zero.  Otherwise the distance is
    `|w.(d1 x d2)| / |d1 x d2|`; zero means the lines intersect, anything
    else means they are skew, and the closest points come from the normal
    equations of `|P1 + t*d1 - P2 - s*d2|^2`.
    """
    p1 = as_point(p1)
    p2 = as_point(p2)
    d1 = as_vector(d1)
    d2 = as_vector(d2)
    if d1.is_zero() or d2.is_zero():
        raise DegenerateInput('Direction vectors for lines cannot be zero.',
                              'lines_relationship')
    line1 = line_vector_form(p1, d1)
    line2 = line_vector_form(p2, d2)

    w = vector_from_two_points(p1, p2)
    c = d1.cross(d2)

    if is_zero_vector(c):
        distance = w.cross(d1).magnitude() / d1.magnitude()
        if is_zero(distance):
            logger.debug("lines are collinear")
            return LinesRelationshipResult(line1, line2, LineLineRelation.COLLINEAR, distance)
        logger.debug("lines are parallel, %g apart", distance)
        return LinesRelationshipResult(line1, line2, LineLineRelation.PARALLEL_DISTINCT, distance)

    cc = c.dot(c)
    distance = abs(w.dot(c)) / c.magnitude()
    if is_zero(distance):
        t = w.cross(d2).dot(c) / cc
        hit = p1 + d1.scale(t)
        logger.debug("lines intersect at %r", hit)
        return LinesRelationshipResult(line1, line2, LineLineRelation.INTERSECTING,
                                       distance, hit, hit)

    # closed-form solution of the normal equations
    #   t*d1.d1 - s*d1.d2 = w.d1
    #   t*d1.d2 - s*d2.d2 = w.d2
    # whose determinant is -|d1 x d2|^2, already known to be non-zero
    t = w.cross(d2).dot(c) / cc
    s = w.cross(d1).dot(c) / cc
    q1 = p1 + d1.scale(t)
    q2 = p2 + d2.scale(s)
    logger.debug("lines are skew, %g apart", distance)
    return LinesRelationshipResult(line1, line2, LineLineRelation.SKEW, distance, q1, q2)


def shortest_distance_between_lines(p1: PointLike, d1: VectorLike,
                                    p2: PointLike, d2: VectorLike) -> LinesRelationshipResult:
    return lines_relationship(p1, d1, p2, d2)


def check_coplanarity_lines(line1, line2) -> CoplanarityLinesResult:
    """Are two lines coplanar?  If so, also return a plane containing both.

    Coplanarity is decided by the scalar triple product `[P1P2, d1, d2]`.
    Collinear lines lie in infinitely many planes; one of them is picked.
    """
    l1 = _line_with_direction(line1, 'check_coplanarity_lines')
    l2 = _line_with_direction(line2, 'check_coplanarity_lines')
    p1, d1 = l1.point, l1.direction
    d2 = l2.direction
    w = vector_from_two_points(p1, l2.point)

    if not scalar_triple_product(w, d1, d2).coplanar:
        return CoplanarityLinesResult(l1, l2, False, None, 'Lines are skew (not coplanar).')

    c = d1.cross(d2)
    if not is_zero_vector(c):
        return CoplanarityLinesResult(l1, l2, True, plane_from_normal_point(c, p1),
                                      'Lines are intersecting and coplanar.')

    normal = w.cross(d1)
    if not is_zero_vector(normal):
        return CoplanarityLinesResult(l1, l2, True, plane_from_normal_point(normal, p1),
                                      'Lines are parallel and coplanar.')

    # collinear: any plane through the line will do
    if not is_zero(d1.x) or not is_zero(d1.y):
        normal = Vector3D(-d1.y, d1.x, 0.0)
    else:
        normal = Vector3D(0.0, -d1.z, d1.y)
    return CoplanarityLinesResult(l1, l2, True, plane_from_normal_point(normal.normalize(), p1),
                                  'Lines are collinear (same line).')


__all__ = [
    'LinePlaneRelation',
    'PlanePlaneRelation',
    'LineLineRelation',
    'AngleBetweenLinesResult',
    'AngleBetweenPlanesResult',
    'AngleLinePlaneResult',
    'DistancePointLineResult',
    'DistancePointPlaneResult',
    'LinePlaneRelationshipResult',
    'LinePlaneIntersectionResult',
    'PlaneIntersectionResult',
    'LinesRelationshipResult',
    'CoplanarityLinesResult',
    'angle_between_lines',
    'angle_between_planes',
    'angle_line_plane',
    'distance_point_line',
    'distance_point_plane',
    'relationship_line_plane',
    'intersection_line_plane',
    'intersection_two_planes',
    'lines_relationship',
    'shortest_distance_between_lines',
    'check_coplanarity_lines',
]
