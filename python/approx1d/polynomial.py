"""Polynomial interpolation using Neville's algorithm.

Polynomial interpolation through many samples is prone to the Runge phenomenon,
so limiting the order is usually a good idea for larger sample sets.
"""

from __future__ import annotations

import logging

from approx1d._common import clamp_order, suggest_window
from approx1d.samples import SampleList

logger = logging.getLogger(__name__)


class PolynomialInterpolation:
    """Lagrange polynomial interpolation of samples close to the position.

    Parameters
    ----------
    maximum_order : int, optional
        Maximum number of samples to use at once. If not given, all samples are used.
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
        """Always ``True`` for polynomial interpolation."""
        return True

    @property
    def supports_differentiation(self) -> bool:
        """Always ``False`` for polynomial interpolation."""
        return False

    @property
    def supports_integration(self) -> bool:
        """Always ``False`` for polynomial interpolation."""
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
            raise ValueError("Polynomial interpolation needs at least one sample.")
        self._samples = samples
        self._effective_order = clamp_order(self._maximum_order, samples.count)
        logger.debug(
            "Prepared polynomial interpolation of order %d on %d samples.",
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
            Interpolated value.
        float
            The last correction made in the tableau, which serves as the error
            estimate.
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
        d = list(c)

        ns = closest - offset
        x = float(self._samples.x[closest])
        ns -= 1
        error = 0.0
        for level in range(1, order):
            for i in range(order - level):
                ho = tw[i] - t
                hp = tw[i + level] - t
                den = ho - hp
                if den == 0.0:
                    raise ValueError(
                        f"Samples {offset + i} and {offset + i + level} have the same"
                        " position."
                    )
                den = (c[i + 1] - d[i]) / den
                d[i] = hp * den
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
