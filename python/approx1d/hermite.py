"""Interpolation functions related to Hermite cubic splines"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import numpy.typing as npt
from numpy.polynomial import Polynomial

from approx1d._common import ensure_array

_H0 = Polynomial([1, 0, -3, 2])
"""
:math:`H_0(u) = 2 u^3 - 3 u^2 + 1`
"""
_H1 = Polynomial([0, 0, 3, -2])
"""
:math:`H_1(u) = -2 u^3 + 3 u^2`
"""
_H2 = Polynomial([0, 1, -2, 1])
"""
:math:`H_2(u) = u^3 - 2 u^2 + u`
"""
_H3 = Polynomial([0, 0, -1, 1])
"""
:math:`H_3(u) = u^3 - u^2`
"""

_BASIS = (_H0, _H1, _H2, _H3)
_BASIS_D1 = tuple(h.deriv() for h in _BASIS)
_BASIS_D2 = tuple(h.deriv(2) for h in _BASIS)
_BASIS_INT = tuple(h.integ() for h in _BASIS)


@dataclass(frozen=True, eq=False, init=False)
class HermiteSpline:
    r"""Piecewise cubic defined by values and derivatives at its knots.

    On the segment :math:`[t_k, t_{k+1}]` with :math:`h_k = t_{k+1} - t_k` and
    :math:`u = (t - t_k) / h_k`, the spline is

    .. math::

        s(t) = H_0(u) x_k + H_1(u) x_{k+1} + h_k \left(H_2(u) d_k + H_3(u)
        d_{k+1}\right)

    where the basis are:

    :math:`H_0(u) = 2 u^3 - 3 u^2 + 1`

    :math:`H_1(u) = -2 u^3 + 3 u^2`

    :math:`H_2(u) = u^3 - 2 u^2 + u`

    :math:`H_3(u) = u^3 - u^2`

    Outside of the knots, the first or the last segment is continued.

    Parameters
    ----------
    knots : (N,) array_like
        Strictly increasing positions of the knots. There must be at least two.
    values : (N,) array_like
        Values of the spline at the knots.
    derivatives : (N,) array_like
        First derivatives of the spline at the knots.
    """

    knots: npt.NDArray[np.float64]
    values: npt.NDArray[np.float64]
    derivatives: npt.NDArray[np.float64]

    def __init__(
        self,
        knots: npt.ArrayLike,
        values: npt.ArrayLike,
        derivatives: npt.ArrayLike,
    ) -> None:
        t = np.array(knots, np.float64)
        x = np.array(values, np.float64)
        d = np.array(derivatives, np.float64)
        if t.ndim != 1 or t.shape != x.shape or t.shape != d.shape:
            raise ValueError(
                "Knots, values, and derivatives must be 1D arrays of the same length"
                f" (got {t.shape}, {x.shape}, and {d.shape})."
            )
        if t.shape[0] < 2:
            raise ValueError(
                f"Spline needs at least two knots (instead it had {t.shape[0]})."
            )
        if np.any(np.diff(t) <= 0):
            raise ValueError("Knots of the spline must be strictly increasing.")

        object.__setattr__(self, "knots", t)
        object.__setattr__(self, "values", x)
        object.__setattr__(self, "derivatives", d)

    @property
    def n(self) -> int:
        """Return number of knots in the spline."""
        return int(self.knots.shape[0])

    def _segments(
        self, t: npt.ArrayLike
    ) -> tuple[
        npt.NDArray[np.float64],
        npt.NDArray[np.intp],
        npt.NDArray[np.float64],
        npt.NDArray[np.float64],
    ]:
        """Find segments of positions and local coordinates within them."""
        pos = ensure_array(t, np.float64)
        k = np.clip(np.searchsorted(self.knots, pos, side="right") - 1, 0, self.n - 2)
        h = self.knots[k + 1] - self.knots[k]
        u = (pos - self.knots[k]) / h
        return pos, k, h, u

    def _combine(
        self,
        basis: tuple[Polynomial, ...],
        k: npt.NDArray[np.intp],
        h: npt.NDArray[np.float64],
        u: npt.NDArray[np.float64],
    ) -> npt.NDArray[np.float64]:
        return (
            basis[0](u) * self.values[k]
            + basis[1](u) * self.values[k + 1]
            + h * basis[2](u) * self.derivatives[k]
            + h * basis[3](u) * self.derivatives[k + 1]
        )

    def __call__(self, t: npt.ArrayLike) -> npt.NDArray[np.float64]:
        """Evaluate the spline.

        Parameters
        ----------
        t : array_like
            Positions where the spline should be evaluated.

        Returns
        -------
        array
            Array of interpolated values at positions specified by ``t``.
        """
        _, k, h, u = self._segments(t)
        return self._combine(_BASIS, k, h, u)

    def derivative(self, t: npt.ArrayLike) -> npt.NDArray[np.float64]:
        """Evaluate the first derivative of the spline at positions ``t``."""
        _, k, h, u = self._segments(t)
        return self._combine(_BASIS_D1, k, h, u) / h

    def second_derivative(self, t: npt.ArrayLike) -> npt.NDArray[np.float64]:
        """Evaluate the second derivative of the spline at positions ``t``."""
        _, k, h, u = self._segments(t)
        return self._combine(_BASIS_D2, k, h, u) / h**2

    @property
    def segment_integrals(self) -> npt.NDArray[np.float64]:
        """Integrals of the spline over each of its segments."""
        h = np.diff(self.knots)
        return h * (self.values[:-1] + self.values[1:]) / 2 + h**2 * (
            self.derivatives[:-1] - self.derivatives[1:]
        ) / 12

    def antiderivative(self, t: npt.ArrayLike) -> npt.NDArray[np.float64]:
        """Integrate the spline from the first knot up to positions ``t``.

        Parameters
        ----------
        t : array_like
            Upper limits of integration. They may lie outside the knots, in which
            case the end segments are integrated past their knots.

        Returns
        -------
        array
            Definite integrals of the spline from its first knot to ``t``.
        """
        _, k, h, u = self._segments(t)
        cumulative = np.pad(np.cumsum(self.segment_integrals), (1, 0))
        return cumulative[k] + h * self._combine(_BASIS_INT, k, h, u)
