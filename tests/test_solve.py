import pytest

from spacegeom.errors import NumericInstability
from spacegeom.solve import det2x2, solve2x2


def test_det2x2():
    assert det2x2(1, 2, 3, 4) == -2.0
    assert det2x2(2, 4, 1, 2) == 0.0


def test_solve2x2():
    u, v = solve2x2(1, 1, 1, -1, 3, 1)
    assert u == pytest.approx(2.0)
    assert v == pytest.approx(1.0)


def test_solve2x2_fractional():
    # 3u + 2v = 1, u - v = 2
    u, v = solve2x2(3, 2, 1, -1, 1, 2)
    assert u == pytest.approx(1.0)
    assert v == pytest.approx(-1.0)


def test_singular_system_raises():
    with pytest.raises(NumericInstability):
        solve2x2(2, 4, 1, 2, 1, 1)
    with pytest.raises(ValueError):
        solve2x2(1, 1, 1, 1 + 1e-12, 0, 0)
