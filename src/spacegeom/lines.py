## straight lines in space for spacegeom
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

"""straight lines in space

A line is a point on the line plus a direction vector.  Unlike a segment,
the line is unbounded: it is parameterized as `r = P + λD` for every real
`λ`.

Two textual forms are produced:

- vector form, ``r = (x0, y0, z0) + λ(ai + bj + ck)``
- cartesian symmetric form, ``(x - x0)/a = (y - y0)/b = (z - z0)/c``

In the symmetric form an axis whose ratio is zero cannot appear as a
division term, so it is emitted as a fixed coordinate instead, *e.g.*
``(x - 1)/2 = (z - 3)/4; y = 2``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from spacegeom.direction import DirectionRatios, direction_ratios_from_vector
from spacegeom.errors import DegenerateInput
from spacegeom.formatting import fnum, pstr, vecstr
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


class LineForm(Enum):
    """How a line representation was written."""
    VECTOR = "vector_form"
    CARTESIAN_SYMMETRIC = "cartesian_symmetric_form"
    POINT = "point_form"


@dataclass(frozen=True)
class LineRepresentation:
    kind: LineForm
    equation: str
    point: Point3D
    direction: Vector3D

    @property
    def is_degenerate(self) -> bool:
        """True for the point form produced from all-zero ratios"""
        return self.kind is LineForm.POINT

    def sample(self, lam: float) -> Point3D:
        """the point `P + λD`"""
        return self.point + self.direction.scale(lam)

    def __str__(self) -> str:
        return self.equation


def line_vector_form(point: PointLike, direction: VectorLike) -> LineRepresentation:
    """Line through ``point`` along ``direction``, `r = P + λD`."""
    point = as_point(point)
    direction = as_vector(direction)
    if direction.is_zero():
        logger.debug("zero direction for line through %r", point)
        raise DegenerateInput('Direction vector for a line cannot be a zero vector.',
                              'line_vector_form')
    eq = "r = {} + λ({})".format(pstr(point), vecstr(direction))
    return LineRepresentation(LineForm.VECTOR, eq, point, direction)


def line_cartesian_symmetric(point: PointLike, dr: DirectionRatios) -> LineRepresentation:
    """Symmetric form through ``point`` with direction ratios ``dr``.

    All-zero ratios do not define a line; rather than failing, the result
    is a ``LineForm.POINT`` representation of ``point`` itself.
    """
    point = as_point(point)
    if not isinstance(dr, DirectionRatios):
        dr = direction_ratios_from_vector(dr)
    if dr.is_zero():
        logger.debug("all direction ratios zero, line collapses to %r", point)
        return LineRepresentation(LineForm.POINT, "Point: {}".format(pstr(point)),
                                  point, Vector3D(0.0, 0.0, 0.0))

    parts = []
    fixed = []
    for axis, coord, ratio in (('x', point.x, dr.a),
                               ('y', point.y, dr.b),
                               ('z', point.z, dr.c)):
        if is_zero(ratio):
            fixed.append("{} = {}".format(axis, fnum(coord)))
        else:
            parts.append("({} - {})/{}".format(axis, fnum(coord), fnum(ratio)))

    eq = " = ".join(parts)
    if fixed:
        eq += "; " + ", ".join(fixed)
    return LineRepresentation(LineForm.CARTESIAN_SYMMETRIC, eq, point, dr.to_vector())


def line_from_two_points(p1: PointLike, p2: PointLike) -> Tuple[LineRepresentation, LineRepresentation]:
    """Line through two distinct points, as (vector form, symmetric form).

    Both representations are anchored at ``p1`` with direction `p2 - p1`.
    """
    p1 = as_point(p1)
    d = vector_from_two_points(p1, p2)
    if d.is_zero():
        raise DegenerateInput('The two points are coincident, cannot define a unique line.',
                              'line_from_two_points')
    return (line_vector_form(p1, d),
            line_cartesian_symmetric(p1, direction_ratios_from_vector(d)))


def as_line(line) -> LineRepresentation:
    """Accept a ``LineRepresentation`` or a ``(point, direction)`` pair."""
    if isinstance(line, LineRepresentation):
        return line
    if isinstance(line, (tuple, list)) and len(line) == 2:
        return line_vector_form(line[0], line[1])
    raise ValueError('bad line: {!r}'.format(line))


__all__ = [
    'LineForm',
    'LineRepresentation',
    'line_vector_form',
    'line_cartesian_symmetric',
    'line_from_two_points',
    'as_line',
]
