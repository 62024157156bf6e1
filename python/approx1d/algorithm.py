"""Capabilities which interpolation algorithms provide."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from approx1d.samples import SampleList


@runtime_checkable
class InterpolationAlgorithm(Protocol):
    """Type which can interpolate samples of a one dimensional function.

    Before any evaluation, the algorithm must be prepared with :meth:`prepare`.
    Whatever it computes there is only valid until the samples are next changed,
    after which it must be prepared again.
    """

    @property
    def supports_error_estimation(self) -> bool:
        """Check if :meth:`interpolate_with_error` returns a meaningful error."""
        ...

    @property
    def supports_differentiation(self) -> bool:
        """Check if the algorithm is a :class:`DifferentiableAlgorithm`."""
        ...

    @property
    def supports_integration(self) -> bool:
        """Check if the algorithm is an :class:`IntegrableAlgorithm`."""
        ...

    def prepare(self, samples: SampleList) -> None:
        """Precompute what is needed to interpolate the samples.

        Parameters
        ----------
        samples : SampleList
            Samples to interpolate. The algorithm may keep a reference to them.
        """
        ...

    def interpolate(self, t: float) -> float:
        """Interpolate the value at ``t``."""
        ...

    def interpolate_with_error(self, t: float) -> tuple[float, float]:
        """Interpolate the value at ``t`` and estimate the error of it.

        Returns
        -------
        float
            Interpolated value.
        float
            Estimate of the error. This is not a strict bound. It is zero if
            error estimation is not supported.
        """
        ...

    def extrapolate(self, t: float) -> float:
        """Extrapolate the value at ``t`` outside of the sampled domain."""
        ...


@runtime_checkable
class OrderLimitedAlgorithm(Protocol):
    """Algorithm which uses a limited number of samples close to the position."""

    maximum_order: int | None

    @property
    def effective_order(self) -> int | None:
        """Number of samples actually used, or ``None`` if not prepared."""
        ...


@runtime_checkable
class DifferentiableAlgorithm(Protocol):
    """Algorithm which can compute derivatives of the interpolant."""

    def differentiate(self, t: float) -> tuple[float, float, float]:
        """Return the value, first, and second derivative at ``t``."""
        ...


@runtime_checkable
class IntegrableAlgorithm(Protocol):
    """Algorithm which can compute integrals of the interpolant."""

    def integrate(self, t: float) -> float:
        """Return the integral from the first sample to ``t``."""
        ...
