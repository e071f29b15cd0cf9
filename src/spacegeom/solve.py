"""Small linear solves evaluated in extended precision.

The relation analyzer needs one 2x2 system to find a point on the line
where two planes meet.  It is solved by Cramer's rule with the products
carried out in ``mpmath`` at ``WORKING_DPS`` decimal digits, so that
nearly-singular systems lose as little as possible before the result is
rounded back to ``float``.
"""

from __future__ import annotations

import logging
from typing import Tuple

import mpmath as mpm

from spacegeom import config
from spacegeom.errors import NumericInstability

logger = logging.getLogger(__name__)

WORKING_DPS = 30


def det2x2(a11: float, a12: float, a21: float, a22: float) -> float:
    """determinant of ``[[a11, a12], [a21, a22]]``"""
    with mpm.workdps(WORKING_DPS):
        return float(mpm.mpf(a11)*mpm.mpf(a22) - mpm.mpf(a12)*mpm.mpf(a21))


def solve2x2(a11: float, a12: float, a21: float, a22: float,
             b1: float, b2: float) -> Tuple[float, float]:
    """Solve ``a11*u + a12*v = b1``, ``a21*u + a22*v = b2`` for ``(u, v)``.

    Raises ``NumericInstability`` if the determinant is within epsilon of
    zero.
    """
    with mpm.workdps(WORKING_DPS):
        m11, m12, m21, m22 = (mpm.mpf(a11), mpm.mpf(a12),
                              mpm.mpf(a21), mpm.mpf(a22))
        r1, r2 = mpm.mpf(b1), mpm.mpf(b2)
        det = m11*m22 - m12*m21
        if mpm.fabs(det) < mpm.mpf(config.epsilon):
            logger.debug("singular 2x2 system, det=%s", det)
            raise NumericInstability('singular 2x2 system (determinant ~ 0)', 'solve2x2')
        u = (r1*m22 - m12*r2) / det
        v = (m11*r2 - r1*m21) / det
        return float(u), float(v)


__all__ = [
    'WORKING_DPS',
    'det2x2',
    'solve2x2',
]
