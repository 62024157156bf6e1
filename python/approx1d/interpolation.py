"""Interpolation of a one dimensional function given by samples.

This module connects a :class:`SampleList` to an interpolation algorithm. The
algorithm is prepared lazily, right before the first evaluation, and again after
each change of the samples, detected through :attr:`SampleList.version`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from enum import IntEnum

import numpy.typing as npt

from approx1d.algorithm import (
    DifferentiableAlgorithm,
    IntegrableAlgorithm,
    InterpolationAlgorithm,
    OrderLimitedAlgorithm,
)
from approx1d.polynomial import PolynomialInterpolation
from approx1d.rational import RationalInterpolation
from approx1d.samples import SampleList
from approx1d.splines import CubicSplineInterpolation

logger = logging.getLogger(__name__)


class InterpolationMode(IntEnum):
    """Characteristics of the sampled function, which determine the algorithm."""

    EXPECT_NO_POLES = 1
    """Polynomial interpolation."""
    EXPECT_POLES = 2
    """Rational interpolation."""
    SMOOTH = 8
    """Natural cubic spline interpolation."""


_ALGORITHMS: dict[InterpolationMode, Callable[[], InterpolationAlgorithm]] = {
    InterpolationMode.EXPECT_NO_POLES: PolynomialInterpolation,
    InterpolationMode.EXPECT_POLES: RationalInterpolation,
    InterpolationMode.SMOOTH: CubicSplineInterpolation,
}


def select_algorithm(
    mode: InterpolationMode, maximum_order: int | None = None
) -> InterpolationAlgorithm:
    """Create an algorithm suitable for the interpolation mode.

    Parameters
    ----------
    mode : InterpolationMode
        What kind of function is interpolated.
    maximum_order : int, optional
        Maximum order of the algorithm. Only algorithms which use a limited number of
        samples accept it.

    Returns
    -------
    InterpolationAlgorithm
        New, unprepared algorithm.
    """
    try:
        factory = _ALGORITHMS[InterpolationMode(mode)]
    except ValueError as e:
        raise ValueError(f"Unknown interpolation mode {mode!r}.") from e

    algorithm = factory()
    if maximum_order is not None:
        if not isinstance(algorithm, OrderLimitedAlgorithm):
            raise TypeError(
                f"Interpolation mode {InterpolationMode(mode).name} does not support"
                " limiting the order."
            )
        algorithm.maximum_order = maximum_order
    return algorithm


class Interpolation1D:
    """Interpolate a one dimensional function given by its samples.

    Positions inside the sampled domain are interpolated, while those outside it
    are extrapolated.

    Parameters
    ----------
    samples : SampleList or Mapping of float to float or array_like
        Samples of the function. If a :class:`SampleList` is given, it is used
        directly (not copied) and changes made to it are taken into account by
        the following evaluations. Otherwise, these are abscissae of the samples
        or a mapping of abscissae to values.
    x : array_like, optional
        Values of the samples, if ``samples`` are abscissae.
    algorithm : InterpolationMode or InterpolationAlgorithm, default: EXPECT_NO_POLES
        Algorithm to use, or the mode used to select it.
    maximum_order : int, optional
        Maximum order of the algorithm, if it allows limiting it.
    """

    _samples: SampleList
    _algorithm: InterpolationAlgorithm
    _prepared_version: int | None

    def __init__(
        self,
        samples: SampleList | Mapping[float, float] | npt.ArrayLike,
        x: npt.ArrayLike | None = None,
        algorithm: InterpolationMode
        | InterpolationAlgorithm = InterpolationMode.EXPECT_NO_POLES,
        maximum_order: int | None = None,
    ) -> None:
        if isinstance(samples, SampleList):
            if x is not None:
                raise ValueError("Values can not be given with a sample list.")
            sample_list = samples
        else:
            sample_list = SampleList(samples, x)

        alg: InterpolationAlgorithm
        if isinstance(algorithm, InterpolationMode):
            alg = select_algorithm(algorithm, maximum_order)
        elif isinstance(algorithm, InterpolationAlgorithm):
            alg = algorithm
            if maximum_order is not None:
                if not isinstance(alg, OrderLimitedAlgorithm):
                    raise TypeError(
                        f"Algorithm {type(alg).__name__} does not support limiting"
                        " the order."
                    )
                alg.maximum_order = maximum_order
        else:
            raise TypeError(
                "Algorithm must be an interpolation mode or an interpolation "
                f"algorithm (instead it was {type(algorithm).__name__})."
            )

        self._samples = sample_list
        self._algorithm = alg
        # Version of the samples the algorithm was last prepared with
        self._prepared_version = None

    def __repr__(self) -> str:
        """Return the representation of the interpolation."""
        return f"Interpolation1D({self._samples!r}, algorithm={self._algorithm!r})"

    def _ensure_prepared(self) -> None:
        if self._samples.count == 0:
            raise RuntimeError("Can not evaluate interpolation without any samples.")
        version = self._samples.version
        if self._prepared_version != version:
            logger.debug(
                "Preparing %s with %d samples.",
                type(self._algorithm).__name__,
                self._samples.count,
            )
            self._algorithm.prepare(self._samples)
            self._prepared_version = version

    @property
    def samples(self) -> SampleList:
        """Samples which are interpolated."""
        return self._samples

    @property
    def algorithm(self) -> InterpolationAlgorithm:
        """Algorithm used for interpolation."""
        return self._algorithm

    @property
    def is_prepared(self) -> bool:
        """Check if the algorithm is prepared for the current samples."""
        return self._prepared_version == self._samples.version

    @property
    def supports_error_estimation(self) -> bool:
        """Check if the algorithm can estimate the error."""
        return self._algorithm.supports_error_estimation

    @property
    def supports_differentiation(self) -> bool:
        """Check if the algorithm can compute derivatives."""
        return self._algorithm.supports_differentiation

    @property
    def supports_integration(self) -> bool:
        """Check if the algorithm can compute integrals."""
        return self._algorithm.supports_integration

    @property
    def maximum_order(self) -> int | None:
        """Maximum order of the algorithm, or ``None`` if it is not limited."""
        if isinstance(self._algorithm, OrderLimitedAlgorithm):
            return self._algorithm.maximum_order
        return None

    @maximum_order.setter
    def maximum_order(self, value: int | None) -> None:
        if not isinstance(self._algorithm, OrderLimitedAlgorithm):
            raise TypeError(
                f"Algorithm {type(self._algorithm).__name__} does not support limiting"
                " the order."
            )
        self._algorithm.maximum_order = value

    def evaluate(self, t: float) -> float:
        """Interpolate or extrapolate the function at ``t``.

        Parameters
        ----------
        t : float
            Position where the function should be evaluated.

        Returns
        -------
        float
            Interpolated value if ``t`` is within the samples, otherwise the
            extrapolated value.
        """
        self._ensure_prepared()
        if self._samples.min_t <= t <= self._samples.max_t:
            return self._algorithm.interpolate(t)
        return self._algorithm.extrapolate(t)

    def __call__(self, t: float) -> float:
        """Interpolate or extrapolate the function at ``t``."""
        return self.evaluate(t)

    def evaluate_with_error(self, t: float) -> tuple[float, float]:
        """Interpolate the function at ``t`` and estimate the error.

        Unlike :meth:`evaluate`, this always uses interpolation, even if ``t`` is
        outside the samples.

        Parameters
        ----------
        t : float
            Position where the function should be evaluated.

        Returns
        -------
        float
            Interpolated value.
        float
            Estimate of the error, which is zero if the algorithm does not support
            error estimation.
        """
        self._ensure_prepared()
        return self._algorithm.interpolate_with_error(t)

    def differentiate(self, t: float) -> tuple[float, float, float]:
        """Return the value, first, and second derivative at ``t``."""
        if not self._algorithm.supports_differentiation or not isinstance(
            self._algorithm, DifferentiableAlgorithm
        ):
            raise RuntimeError(
                f"Algorithm {type(self._algorithm).__name__} does not support"
                " differentiation."
            )
        self._ensure_prepared()
        return self._algorithm.differentiate(t)

    def integrate(self, t: float) -> float:
        """Return the integral from the first sample to ``t``."""
        if not self._algorithm.supports_integration or not isinstance(
            self._algorithm, IntegrableAlgorithm
        ):
            raise RuntimeError(
                f"Algorithm {type(self._algorithm).__name__} does not support"
                " integration."
            )
        self._ensure_prepared()
        return self._algorithm.integrate(t)
