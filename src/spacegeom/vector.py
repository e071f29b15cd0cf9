## vector and point primitives for spacegeom
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

"""vector and point primitives for **spacegeom**

vectors
=======

A ``Vector3D`` is an immutable ``(x, y, z)`` triple interpreted as a
displacement.  All operations return new instances: ::

   a = Vector3D(1, -1, 2)
   b = Vector3D(2, 3, -1)
   a.dot(b)            # -3
   a.cross(b)          # Vector3D(-5, 5, 5)
   (a + b).magnitude()

points
======

A ``Point3D`` is an immutable ``(x, y, z)`` location.  Points and vectors
share their arithmetic but not their meaning, so the operators only allow
the combinations that make sense: ::

   point - point   -> Vector3D
   point + vector  -> Point3D
   point - vector  -> Point3D

``Point3D.to_vector()`` gives the position vector (the vector from the
origin) and ``Point3D.from_vector()`` goes back.

functional forms
================

``add``, ``sub``, ``scale3``, ``dot``, ``cross``, ``mag`` and ``dist``
accept anything indexable with three numbers, so plain tuples work as
well as the value types.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from math import sqrt
from typing import Iterator, Sequence, Union

from spacegeom import config
from spacegeom.errors import DegenerateInput
from spacegeom.tolerance import is_zero_vector

logger = logging.getLogger(__name__)


## utility function to determine if argument is a "real" python
## number, since booleans are considered ints
def isgoodnum(n) -> bool:
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n, bool)) and isinstance(n, (int, float))


def _components(a: Sequence[float], kind: str) -> tuple[float, float, float]:
    if isinstance(a, (Vector3D, Point3D)):
        return a.x, a.y, a.z
    if not isinstance(a, (tuple, list)) or len(a) != 3:
        raise ValueError(f'bad {kind}: {a!r}')
    for x in a:
        if not isgoodnum(x):
            raise ValueError(f'bad element in {kind}: {x!r}')
    return float(a[0]), float(a[1]), float(a[2])


@dataclass(frozen=True)
class Vector3D:
    """Immutable 3 vector."""

    x: float
    y: float
    z: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __len__(self) -> int:
        return 3

    def __getitem__(self, i: int) -> float:
        return (self.x, self.y, self.z)[i]

    def add(self, other: Vector3D) -> Vector3D:
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def sub(self, other: Vector3D) -> Vector3D:
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, c: float) -> Vector3D:
        return Vector3D(self.x*c, self.y*c, self.z*c)

    def dot(self, other: Vector3D) -> float:
        return self.x*other.x + self.y*other.y + self.z*other.z

    def cross(self, other: Vector3D) -> Vector3D:
        """ standard determinant expansion of ``self`` x ``other``"""
        return Vector3D(self.y*other.z - self.z*other.y,
                        self.z*other.x - self.x*other.z,
                        self.x*other.y - self.y*other.x)

    def magnitude(self) -> float:
        return sqrt(self.x*self.x + self.y*self.y + self.z*self.z)

    def normalize(self) -> Vector3D:
        """Return the unit vector, raising ``DegenerateInput`` for a zero vector."""
        m = self.magnitude()
        if m < config.epsilon:
            logger.debug("refusing to normalize zero vector %r", self)
            raise DegenerateInput('cannot normalize a zero vector', 'normalize')
        return Vector3D(self.x/m, self.y/m, self.z/m)

    def is_zero(self, eps: float | None = None) -> bool:
        return is_zero_vector(self, eps)

    def to_point(self) -> Point3D:
        return Point3D(self.x, self.y, self.z)

    def __add__(self, other: Vector3D) -> Vector3D:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Vector3D) -> Vector3D:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, c: float) -> Vector3D:
        if not isgoodnum(c):
            return NotImplemented
        return self.scale(c)

    __rmul__ = __mul__

    def __neg__(self) -> Vector3D:
        return Vector3D(-self.x, -self.y, -self.z)


@dataclass(frozen=True)
class Point3D:
    """Immutable 3D location."""

    x: float
    y: float
    z: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __len__(self) -> int:
        return 3

    def __getitem__(self, i: int) -> float:
        return (self.x, self.y, self.z)[i]

    def to_vector(self) -> Vector3D:
        """position vector of this point"""
        return Vector3D(self.x, self.y, self.z)

    @classmethod
    def from_vector(cls, v: Vector3D) -> Point3D:
        return cls(v.x, v.y, v.z)

    def translate(self, v: Vector3D) -> Point3D:
        return Point3D(self.x + v.x, self.y + v.y, self.z + v.z)

    def __add__(self, other: Vector3D) -> Point3D:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return self.translate(other)

    def __sub__(self, other):
        if isinstance(other, Point3D):
            return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Vector3D):
            return self.translate(-other)
        return NotImplemented


VectorLike = Union[Vector3D, Sequence[float]]
PointLike = Union[Point3D, Sequence[float]]

ORIGIN = Point3D(0.0, 0.0, 0.0)


def as_vector(a: VectorLike) -> Vector3D:
    """Convenience function for making a ``Vector3D`` from practically anything"""
    if isinstance(a, Vector3D):
        return a
    return Vector3D(*_components(a, 'vector'))


def as_point(a: PointLike) -> Point3D:
    """Convenience function for making a ``Point3D`` from practically anything"""
    if isinstance(a, Point3D):
        return a
    return Point3D(*_components(a, 'point'))


## R^3 -> R^3 functions
## ------------------------------------------------
def add(a: VectorLike, b: VectorLike) -> Vector3D:
    """ 3 vector, `a + b`"""
    return Vector3D(a[0]+b[0], a[1]+b[1], a[2]+b[2])

def sub(a: VectorLike, b: VectorLike) -> Vector3D:
    """ 3 vector, `a - b`"""
    return Vector3D(a[0]-b[0], a[1]-b[1], a[2]-b[2])

def scale3(a: VectorLike, c: float) -> Vector3D:
    """ 3 vector, vector ``a`` times scalar ``c``, `a * c`"""
    return Vector3D(a[0]*c, a[1]*c, a[2]*c)

def cross(a: VectorLike, b: VectorLike) -> Vector3D:
    """ 3 vector cross product `a x b`"""
    return Vector3D(a[1]*b[2] - a[2]*b[1],
                    a[2]*b[0] - a[0]*b[2],
                    a[0]*b[1] - a[1]*b[0])

## R^3 -> R functions
## ----------------------------------------
def dot(a: VectorLike, b: VectorLike) -> float:
    """ 3 vector ``a`` dot ``b`` """
    return a[0]*b[0]+a[1]*b[1]+a[2]*b[2]

def mag(a: VectorLike) -> float:
    """ compute the magnitude of 3 vector ``a``"""
    return sqrt(a[0]*a[0]+a[1]*a[1]+a[2]*a[2])

def dist(a: PointLike, b: PointLike) -> float:
    """ compute the euclidean distance between two points ``a`` and ``b``"""
    return mag(sub(a, b))

## determine if two vectors are the same, to within epsilon
def vclose(a: VectorLike, b: VectorLike, eps: float | None = None) -> bool:
    return is_zero_vector(sub(a, b), eps)


def vector_from_two_points(p1: PointLike, p2: PointLike) -> Vector3D:
    """displacement from ``p1`` to ``p2``"""
    return sub(as_point(p2), as_point(p1))


__all__ = [
    'Vector3D',
    'Point3D',
    'VectorLike',
    'PointLike',
    'ORIGIN',
    'isgoodnum',
    'as_vector',
    'as_point',
    'add',
    'sub',
    'scale3',
    'cross',
    'dot',
    'mag',
    'dist',
    'vclose',
    'vector_from_two_points',
]
