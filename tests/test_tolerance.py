from spacegeom import config
from spacegeom.tolerance import close, is_coincident, is_parallel, is_zero, is_zero_vector


def test_is_zero_uses_configured_epsilon():
    assert is_zero(0.0)
    assert is_zero(config.epsilon / 2)
    assert not is_zero(config.epsilon * 2)
    assert is_zero(1e-4, eps=1e-3)


def test_close():
    assert close(1.0, 1.0 + 1e-12)
    assert not close(1.0, 1.001)


def test_is_zero_vector_is_componentwise():
    assert is_zero_vector((0, 1e-12, -1e-12))
    assert not is_zero_vector((0, 0, 1e-6))


def test_is_parallel():
    assert is_parallel((1, 2, 3), (2, 4, 6))
    assert is_parallel((1, 2, 3), (-1, -2, -3))
    assert not is_parallel((1, 0, 0), (0, 1, 0))
    # a zero vector is parallel to anything
    assert is_parallel((0, 0, 0), (5, -1, 2))


def test_is_coincident():
    assert is_coincident((1, 2, 3), (1, 2, 3))
    assert not is_coincident((1, 2, 3), (1, 2, 3.5))
