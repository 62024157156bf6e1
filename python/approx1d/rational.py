"""Rational interpolation using the algorithm of Bulirsch and Stoer."""

from __future__ import annotations

import logging

import numpy as np

from approx1d._common import clamp_order, suggest_window
from approx1d.samples import SampleList

logger = logging.getLogger(__name__)

_TINY = 1.0e-15
"""Offset preventing the rare zero over zero condition."""


class RationalInterpolation:
    r"""Diagonal rational interpolation of samples close to the position.

    At each position, a rational function passing exactly through
    :attr:`effective_order` samples closest to it is evaluated, using a
    tableau of corrections similar to Neville's algorithm for polynomials.
    Unlike polynomials, rational functions can represent poles, so this is
    well suited to functions which have them, as well as for extrapolation.

    Parameters
    ----------
    maximum_order : int, optional
        Maximum number of samples to use at once. If not given, all samples are used.

    Notes
    -----
    When a denominator in the tableau becomes exactly zero, the position is at a
    pole of the interpolant and the value returned is positive infinity, with the
    error estimate being zero. Which sign the infinity should have is not determined,
    so positive is always used.

    Samples with repeated abscissae are not rejected. If they fall within the window,
    the tableau is still computed, but the value returned is meaningless. Use
    :meth:`SampleList.add` to merge such samples before interpolating.
    """

    _samples: SampleList | None
    _maximum_order: int | None
    _effective_order: int | None

    def __init__(self, maximum_order: int | None = None) -> None:
        if maximum_order is not None and maximum_order < 0:
            raise ValueError(f"Maximum order can not be negative (got {maximum_order}).")
        self._samples = None
        self._maximum_order = maximum_order
        self._effective_order = None

    @property
    def supports_error_estimation(self) -> bool:
        """Always ``True`` for rational interpolation."""
        return True

    @property
    def supports_differentiation(self) -> bool:
        """Always ``False`` for rational interpolation."""
        return False

    @property
    def supports_integration(self) -> bool:
        """Always ``False`` for rational interpolation."""
        return False

    @property
    def maximum_order(self) -> int | None:
        """Maximum number of samples used, or ``None`` if unbounded."""
        return self._maximum_order

    @maximum_order.setter
    def maximum_order(self, value: int | None) -> None:
        if value is not None and value < 0:
            raise ValueError(f"Maximum order can not be negative (got {value}).")
        self._maximum_order = value
        if self._samples is not None:
            self._effective_order = clamp_order(value, self._samples.count)

    @property
    def effective_order(self) -> int | None:
        """Number of samples actually used, or ``None`` if not prepared."""
        return self._effective_order

    def prepare(self, samples: SampleList) -> None:
        """Use the samples for interpolation."""
        if samples is None:
            raise ValueError("Samples must be given.")
        if samples.count == 0:
            raise ValueError("Rational interpolation needs at least one sample.")
        self._samples = samples
        self._effective_order = clamp_order(self._maximum_order, samples.count)
        logger.debug(
            "Prepared rational interpolation of order %d on %d samples.",
            self._effective_order,
            samples.count,
        )

    def interpolate(self, t: float) -> float:
        """Interpolate the value at ``t``."""
        value, _ = self.interpolate_with_error(t)
        return value

    def interpolate_with_error(self, t: float) -> tuple[float, float]:
        """Interpolate the value at ``t`` and estimate its error.

        Parameters
        ----------
        t : float
            Position of interpolation.

        Returns
        -------
        float
            Interpolated value, which is positive infinity at a pole.
        float
            The last correction made in the tableau, which serves as the error
            estimate. It is zero when ``t`` coincides with a sample or is at a pole.
        """
        if self._samples is None or self._effective_order is None:
            raise RuntimeError("Interpolation was not prepared with any samples.")

        t = float(t)
        order = self._effective_order
        nodes = self._samples.t
        offset, closest = suggest_window(nodes, t, order)

        if nodes[closest] == t:
            return float(self._samples.x[closest]), 0.0

        tw: list[float] = nodes[offset : offset + order].tolist()
        c: list[float] = self._samples.x[offset : offset + order].tolist()
        d = [v + _TINY for v in c]

        ns = closest - offset
        x = float(self._samples.x[closest])
        ns -= 1
        error = 0.0
        for level in range(1, order):
            for i in range(order - level):
                hp = tw[i + level] - t
                ho = (tw[i] - t) * d[i] / hp
                den = ho - c[i + 1]
                if den == 0.0:
                    logger.debug("Rational interpolation hit a pole at t=%g.", t)
                    return float(np.inf), 0.0

                den = (c[i + 1] - d[i]) / den
                d[i] = c[i + 1] * den
                c[i] = ho * den

            if 2 * (ns + 1) < order - level:
                error = c[ns + 1]
            else:
                error = d[ns]
                ns -= 1
            x += error

        return x, error

    def extrapolate(self, t: float) -> float:
        """Extrapolate the value at ``t``, which is the same as interpolating it."""
        return self.interpolate(t)
