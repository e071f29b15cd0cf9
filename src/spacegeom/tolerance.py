"""Named epsilon predicates.

Every degeneracy branch in spacegeom goes through one of these so that
all classifications agree on the same tolerance.
"""

from __future__ import annotations

from math import sqrt
from typing import Sequence

from spacegeom import config

Triple = Sequence[float]


def is_zero(x: float, eps: float | None = None) -> bool:
    """Is scalar ``x`` within epsilon of zero?"""
    if eps is None:
        eps = config.epsilon
    return abs(x) < eps


## utilty function to determine if scalars a and b are the same to
## within epsilon
def close(a: float, b: float, eps: float | None = None) -> bool:
    """Are two scalars the same within epsilon?"""
    return is_zero(a - b, eps)


def is_zero_vector(v: Triple, eps: float | None = None) -> bool:
    """Is every component of ``v`` within epsilon of zero?"""
    return is_zero(v[0], eps) and is_zero(v[1], eps) and is_zero(v[2], eps)


def is_parallel(a: Triple, b: Triple, eps: float | None = None) -> bool:
    """Are directions ``a`` and ``b`` parallel (or anti-parallel)?

    Tested on the cross product, the same quantity the line/plane
    classifications branch on.  A zero vector is parallel to anything.
    """
    cx = a[1]*b[2] - a[2]*b[1]
    cy = a[2]*b[0] - a[0]*b[2]
    cz = a[0]*b[1] - a[1]*b[0]
    return is_zero_vector((cx, cy, cz), eps)


def is_coincident(p: Triple, q: Triple, eps: float | None = None) -> bool:
    """Do points ``p`` and ``q`` coincide within epsilon?"""
    dx = p[0] - q[0]
    dy = p[1] - q[1]
    dz = p[2] - q[2]
    return is_zero(sqrt(dx*dx + dy*dy + dz*dz), eps)


__all__ = [
    'is_zero',
    'close',
    'is_zero_vector',
    'is_parallel',
    'is_coincident',
]
