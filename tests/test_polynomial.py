"""Tests for polynomial interpolation."""

import numpy as np
import pytest
from approx1d import PolynomialInterpolation, SampleList
from numpy.polynomial import Polynomial


def _prepared(t, x, maximum_order: int | None = None) -> PolynomialInterpolation:
    alg = PolynomialInterpolation(maximum_order)
    alg.prepare(SampleList(t, x))
    return alg


@pytest.mark.parametrize("n", (5, 6, 10))
def test_cubic_exact(n: int) -> None:
    """Check a cubic is reproduced with a vanishing error estimate."""
    np.random.seed(912)
    p = Polynomial(np.random.random_sample(4))
    t = np.linspace(-1, 1, n)
    alg = _prepared(t, p(t))
    for v in np.linspace(-1.5, 1.5, 13):
        value, error = alg.interpolate_with_error(v)
        assert value == pytest.approx(p(v))
        assert error == pytest.approx(0.0, abs=1e-9)


def test_quadratic_samples() -> None:
    """Check samples of a parabola give the parabola."""
    alg = _prepared([0.0, 1.0, 2.0, 3.0], [0.0, 1.0, 4.0, 9.0])
    assert alg.interpolate(1.5) == pytest.approx(2.25)
    assert alg.extrapolate(4.0) == pytest.approx(16.0)


def test_order_limit() -> None:
    """Check only the samples closest to the position are used."""
    t = np.arange(8.0)
    x = t**3
    alg = _prepared(t, x, 2)
    assert alg.effective_order == 2
    # Line through the samples at 2 and 3
    assert alg.interpolate(2.5) == pytest.approx(17.5)

    alg.maximum_order = 4
    assert alg.effective_order == 4
    assert alg.interpolate(2.5) == pytest.approx(2.5**3)

    alg.maximum_order = None
    assert alg.effective_order == 8
    alg.maximum_order = 20
    assert alg.effective_order == 8


def test_reproduces_samples() -> None:
    """Check interpolating at a sample gives exactly its value."""
    np.random.seed(1512)
    t = np.sort(np.random.random_sample(7))
    x = np.random.random_sample(7)
    alg = _prepared(t, x, 3)
    for ti, xi in zip(t, x):
        assert alg.interpolate_with_error(ti) == (xi, 0.0)


def test_repeated_positions() -> None:
    """Check samples with the same position can not be interpolated through."""
    alg = _prepared([0.0, 1.0, 1.0, 2.0], [0.0, 1.0, 2.0, 3.0])
    with pytest.raises(ValueError):
        alg.interpolate(0.5)


def test_unprepared() -> None:
    """Check interpolating without samples fails."""
    alg = PolynomialInterpolation()
    assert alg.effective_order is None
    assert alg.supports_error_estimation
    assert not alg.supports_differentiation
    with pytest.raises(RuntimeError):
        alg.interpolate(0.0)
    with pytest.raises(ValueError):
        alg.prepare(SampleList())
    with pytest.raises(ValueError):
        PolynomialInterpolation(-1)
