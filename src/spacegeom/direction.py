"""Direction ratios and direction cosines."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from math import sqrt
from typing import Iterator

from spacegeom import config
from spacegeom.tolerance import is_zero, is_zero_vector
from spacegeom.vector import PointLike, Vector3D, VectorLike, as_vector, vector_from_two_points

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectionRatios:
    """Any triple proportional to a direction; ``k*(a, b, c)`` is the same direction."""

    a: float
    b: float
    c: float

    def __iter__(self) -> Iterator[float]:
        yield self.a
        yield self.b
        yield self.c

    def __getitem__(self, i: int) -> float:
        return (self.a, self.b, self.c)[i]

    def __len__(self) -> int:
        return 3

    def is_zero(self, eps: float | None = None) -> bool:
        return is_zero_vector(self, eps)

    def to_vector(self) -> Vector3D:
        return Vector3D(self.a, self.b, self.c)

    def __str__(self) -> str:
        return "a={:.4f}, b={:.4f}, c={:.4f}".format(self.a, self.b, self.c)


@dataclass(frozen=True)
class DirectionCosines:
    """Unit direction triple ``(l, m, n)``.

    ``valid`` is False for the all-zero result derived from a zero
    vector.  Use ``from_components`` to have validity computed from
    `l^2 + m^2 + n^2 = 1`.
    """

    l: float
    m: float
    n: float
    valid: bool = True

    @classmethod
    def from_components(cls, l: float, m: float, n: float) -> "DirectionCosines":
        return cls(l, m, n, abs(l*l + m*m + n*n - 1.0) < config.epsilon)

    @classmethod
    def invalid(cls) -> "DirectionCosines":
        return cls(0.0, 0.0, 0.0, False)

    def __iter__(self) -> Iterator[float]:
        yield self.l
        yield self.m
        yield self.n

    def __getitem__(self, i: int) -> float:
        return (self.l, self.m, self.n)[i]

    def __len__(self) -> int:
        return 3

    def to_vector(self) -> Vector3D:
        return Vector3D(self.l, self.m, self.n)

    def __str__(self) -> str:
        return "l={:.4f}, m={:.4f}, n={:.4f} (Valid: {})".format(
            self.l, self.m, self.n, self.valid)


def direction_ratios_from_vector(v: VectorLike) -> DirectionRatios:
    v = as_vector(v)
    return DirectionRatios(v.x, v.y, v.z)


def direction_ratios_from_points(p1: PointLike, p2: PointLike) -> DirectionRatios:
    return direction_ratios_from_vector(vector_from_two_points(p1, p2))


def direction_cosines_from_ratios(dr: DirectionRatios) -> DirectionCosines:
    """Normalize ``dr``.  A zero triple gives the invalid all-zero result."""
    mag_sq = dr.a*dr.a + dr.b*dr.b + dr.c*dr.c
    if is_zero(mag_sq):
        logger.debug("zero direction ratios, returning invalid cosines")
        return DirectionCosines.invalid()
    m = sqrt(mag_sq)
    return DirectionCosines(dr.a/m, dr.b/m, dr.c/m)


def direction_cosines_from_vector(v: VectorLike) -> DirectionCosines:
    v = as_vector(v)
    if v.is_zero():
        logger.debug("zero vector, returning invalid cosines")
        return DirectionCosines.invalid()
    u = v.normalize()
    return DirectionCosines(u.x, u.y, u.z)


__all__ = [
    'DirectionRatios',
    'DirectionCosines',
    'direction_ratios_from_vector',
    'direction_ratios_from_points',
    'direction_cosines_from_ratios',
    'direction_cosines_from_vector',
]
