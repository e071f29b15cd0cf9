"""String formatting for numbers, points and vectors in equation strings."""

from __future__ import annotations

from typing import Sequence

from spacegeom import config


def fnum(val: float, places: int | None = None) -> str:
    """Format a scalar for an equation string.

    Values within epsilon of an integer print as that integer, anything
    else prints with ``config.decimals`` places.
    """
    if places is None:
        places = config.decimals
    r = round(val)
    if abs(val - r) < config.epsilon:
        return "{:d}".format(int(r))
    return "{:.{p}f}".format(val, p=places)


def pstr(p: Sequence[float], places: int | None = None) -> str:
    """ ``(x, y, z)`` """
    if places is None:
        places = config.vector_decimals
    # adding 0.0 turns -0.0 into 0.0
    return "({:.{p}f}, {:.{p}f}, {:.{p}f})".format(p[0] + 0.0, p[1] + 0.0, p[2] + 0.0,
                                                   p=places)


def vecstr(v: Sequence[float], places: int | None = None) -> str:
    """ ``ai + bj + ck``, folding negative components into the sign"""
    if places is None:
        places = config.vector_decimals
    s = "{:.{p}f}i".format(v[0] + 0.0, p=places)
    for comp, unit in ((v[1], 'j'), (v[2], 'k')):
        sign = '-' if comp < 0 else '+'
        s += " {} {:.{p}f}{}".format(sign, abs(comp), unit, p=places)
    return s


def planestr(a: float, b: float, c: float, d: float) -> str:
    """ ``Ax + By + Cz + D = 0`` """
    return "{}x + {}y + {}z + {} = 0".format(fnum(a), fnum(b), fnum(c), fnum(d))


__all__ = [
    'fnum',
    'pstr',
    'vecstr',
    'planestr',
]
