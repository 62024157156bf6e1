"""Test Hermite splines."""

import numpy as np
import pytest
from approx1d import HermiteSpline
from numpy.polynomial import Polynomial
from scipy.integrate import quad


def _cubic_spline(n: int) -> tuple[Polynomial, HermiteSpline]:
    """Create a Hermite spline using exact values and derivatives of a cubic."""
    np.random.seed(0)
    p = Polynomial(np.random.random_sample(4))
    knots = np.sort(np.random.random_sample(n)) * 4 - 2
    return p, HermiteSpline(knots, p(knots), p.deriv()(knots))


@pytest.mark.parametrize("n", (2, 3, 10))
def test_nodes(n: int):
    """Check values and derivatives at the knots are the ones given."""
    np.random.seed(1512)
    knots = np.sort(np.random.random_sample(n))
    values = np.random.random_sample(n)
    derivatives = np.random.random_sample(n)
    spline = HermiteSpline(knots, values, derivatives)
    assert spline.n == n
    assert spline(knots) == pytest.approx(values)
    assert spline.derivative(knots) == pytest.approx(derivatives)


@pytest.mark.parametrize("n,ntest", ((2, 10), (5, 100), (20, 1000)))
def test_cubic_exact(n: int, ntest: int):
    """Check a cubic is reproduced exactly, including outside of the knots."""
    p, spline = _cubic_spline(n)
    xtest = np.linspace(-3, 3, ntest)
    assert spline(xtest) == pytest.approx(p(xtest))
    assert spline.derivative(xtest) == pytest.approx(p.deriv()(xtest))
    assert spline.second_derivative(xtest) == pytest.approx(p.deriv(2)(xtest))


@pytest.mark.parametrize("n,ntest", ((2, 10), (5, 100), (20, 1000)))
def test_antiderivative(n: int, ntest: int):
    """Check the antiderivative of a cubic is exact from the first knot."""
    p, spline = _cubic_spline(n)
    antiderivative = p.integ(lbnd=spline.knots[0])
    xtest = np.linspace(-3, 3, ntest)
    assert spline.antiderivative(xtest) == pytest.approx(antiderivative(xtest))


@pytest.mark.parametrize("n", (2, 4, 10))
def test_segment_integrals(n: int):
    """Check integrals over segments match numerical integration."""
    np.random.seed(912)
    knots = np.sort(np.random.random_sample(n))
    spline = HermiteSpline(
        knots, np.random.random_sample(n), np.random.random_sample(n) - 0.5
    )
    for i in range(n - 1):
        q, _ = quad(spline, knots[i], knots[i + 1])
        assert spline.segment_integrals[i] == pytest.approx(q)


def test_scalar():
    """Check scalar positions give scalar results."""
    spline = HermiteSpline([0, 1], [0, 1], [1, 1])
    assert float(spline(0.5)) == pytest.approx(0.5)
    assert np.ndim(spline(0.5)) == 0


def test_invalid():
    """Check invalid knots are rejected."""
    with pytest.raises(ValueError):
        HermiteSpline([0.0], [1.0], [0.0])
    with pytest.raises(ValueError):
        HermiteSpline([0.0, 1.0], [1.0], [0.0, 0.0])
    with pytest.raises(ValueError):
        HermiteSpline([0.0, 0.0, 1.0], [1.0, 2.0, 3.0], [0.0, 0.0, 0.0])
    with pytest.raises(ValueError):
        HermiteSpline([1.0, 0.0], [1.0, 2.0], [0.0, 0.0])
