"""Cubic spline interpolation with continuous first and second derivatives."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum

import numpy as np
import numpy.typing as npt

from approx1d._common import sort_samples
from approx1d.hermite import HermiteSpline
from approx1d.samples import SampleList
from approx1d.tridiagonal import solve_tridiagonal

__all__ = [
    "BoundaryKind",
    "CubicSplineInterpolation",
    "SplineBC",
    "cubic_spline",
]

logger = logging.getLogger(__name__)


class BoundaryKind(IntEnum):
    """Kinds of boundary conditions at an end of a cubic spline."""

    PARABOLICALLY_TERMINATED = 0
    """The last segment of the spline is a parabola."""
    FIRST_DERIVATIVE = 1
    """First derivative at the end is prescribed."""
    SECOND_DERIVATIVE = 2
    """Second derivative at the end is prescribed."""
    NATURAL = 3
    """Second derivative at the end is zero."""


@dataclass(frozen=True)
class SplineBC:
    """Represents a boundary condition at one end of a cubic spline.

    Parameters
    ----------
    kind : BoundaryKind
        What kind of condition it is.
    value : float, default: 0.0
        Value of the prescribed derivative. Ignored for
        :attr:`BoundaryKind.PARABOLICALLY_TERMINATED` and
        :attr:`BoundaryKind.NATURAL`.
    """

    kind: BoundaryKind
    value: float = 0.0

    def __post_init__(self) -> None:
        """Check the kind is valid."""
        try:
            kind = BoundaryKind(self.kind)
        except ValueError as e:
            raise ValueError(f"Unsupported boundary condition {self.kind!r}.") from e
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "value", float(self.value))

    @classmethod
    def natural(cls) -> SplineBC:
        """Return the natural boundary condition (zero second derivative)."""
        return cls(BoundaryKind.NATURAL)

    @classmethod
    def parabolic(cls) -> SplineBC:
        """Return the parabolically terminated boundary condition."""
        return cls(BoundaryKind.PARABOLICALLY_TERMINATED)

    @classmethod
    def first_derivative(cls, value: float) -> SplineBC:
        """Return the boundary condition prescribing the first derivative."""
        return cls(BoundaryKind.FIRST_DERIVATIVE, value)

    @classmethod
    def second_derivative(cls, value: float) -> SplineBC:
        """Return the boundary condition prescribing the second derivative."""
        return cls(BoundaryKind.SECOND_DERIVATIVE, value)

    def normalized(self) -> SplineBC:
        """Return the condition with natural replaced by zero second derivative."""
        if self.kind == BoundaryKind.NATURAL:
            return SplineBC(BoundaryKind.SECOND_DERIVATIVE, 0.0)
        return self


def _spline_derivative_system(
    t: npt.NDArray[np.float64],
    x: npt.NDArray[np.float64],
    bc_left: SplineBC,
    bc_right: SplineBC,
) -> tuple[
    npt.NDArray[np.float64],
    npt.NDArray[np.float64],
    npt.NDArray[np.float64],
    npt.NDArray[np.float64],
]:
    """Create the tridiagonal system for first derivatives at the knots.

    Parameters
    ----------
    t : (N,) array
        Sorted knots of the spline.
    x : (N,) array
        Values at the knots.
    bc_left : SplineBC
        Normalized boundary condition at the first knot.
    bc_right : SplineBC
        Normalized boundary condition at the last knot.

    Returns
    -------
    (N,) array
        Sub-diagonal of the system matrix.
    (N,) array
        Main diagonal of the system matrix.
    (N,) array
        Super-diagonal of the system matrix.
    (N,) array
        Right side of the system.
    """
    n = int(t.shape[0])
    h = np.diff(t)
    s = np.diff(x) / h

    a = np.zeros(n, np.float64)
    b = np.zeros(n, np.float64)
    c = np.zeros(n, np.float64)
    r = np.zeros(n, np.float64)

    match bc_left.kind:
        case BoundaryKind.PARABOLICALLY_TERMINATED:
            b[0] = 1
            c[0] = 1
            r[0] = 2 * s[0]
        case BoundaryKind.FIRST_DERIVATIVE:
            b[0] = 1
            c[0] = 0
            r[0] = bc_left.value
        case BoundaryKind.SECOND_DERIVATIVE:
            b[0] = 2
            c[0] = 1
            r[0] = 3 * s[0] - 0.5 * bc_left.value * h[0]
        case _:
            raise ValueError(f"Unsupported left boundary condition {bc_left.kind!r}.")

    # Continuity of the second derivative at interior knots
    a[1:-1] = h[1:]
    b[1:-1] = 2 * (h[:-1] + h[1:])
    c[1:-1] = h[:-1]
    r[1:-1] = 3 * (s[:-1] * h[1:] + s[1:] * h[:-1])

    match bc_right.kind:
        case BoundaryKind.PARABOLICALLY_TERMINATED:
            a[-1] = 1
            b[-1] = 1
            r[-1] = 2 * s[-1]
        case BoundaryKind.FIRST_DERIVATIVE:
            a[-1] = 0
            b[-1] = 1
            r[-1] = bc_right.value
        case BoundaryKind.SECOND_DERIVATIVE:
            a[-1] = 1
            b[-1] = 2
            r[-1] = 3 * s[-1] + 0.5 * bc_right.value * h[-1]
        case _:
            raise ValueError(f"Unsupported right boundary condition {bc_right.kind!r}.")

    return a, b, c, r


def cubic_spline(
    t: npt.ArrayLike,
    x: npt.ArrayLike,
    bc_left: SplineBC | None = None,
    bc_right: SplineBC | None = None,
) -> HermiteSpline:
    """Create a cubic spline interpolating the samples.

    Parameters
    ----------
    t : (N,) array_like
        Positions of the samples. They need not be sorted, but must be distinct.
    x : (N,) array_like
        Values of the samples.
    bc_left : SplineBC, optional
        Boundary condition at the first knot. If it is not provided, the natural
        boundary condition is used.
    bc_right : SplineBC, optional
        Boundary condition at the last knot. If it is not provided, the natural
        boundary condition is used.

    Returns
    -------
    HermiteSpline
        Spline which passes through all samples and has continuous first and second
        derivatives.
    """
    tt, xx = sort_samples(t, x)
    n = int(tt.shape[0])
    if n < 2:
        raise ValueError(f"Cubic spline needs at least two samples (got {n}).")
    if np.any(np.diff(tt) == 0):
        raise ValueError("Samples of a cubic spline must have distinct positions.")

    left = (bc_left if bc_left is not None else SplineBC.natural()).normalized()
    right = (bc_right if bc_right is not None else SplineBC.natural()).normalized()

    if (
        n == 2
        and left.kind == BoundaryKind.PARABOLICALLY_TERMINATED
        and right.kind == BoundaryKind.PARABOLICALLY_TERMINATED
    ):
        # Two parabolic ends leave the system singular.
        logger.debug("Replacing parabolic boundaries of a two knot spline by natural.")
        left = SplineBC(BoundaryKind.SECOND_DERIVATIVE, 0.0)
        right = SplineBC(BoundaryKind.SECOND_DERIVATIVE, 0.0)

    a, b, c, r = _spline_derivative_system(tt, xx, left, right)
    d = solve_tridiagonal(a, b, c, r)
    return HermiteSpline(tt, xx, d)


class CubicSplineInterpolation:
    """Interpolation with a cubic spline through all the samples.

    The spline has continuous first and second derivatives. Outside of the
    samples, the first or the last cubic segment is continued.

    Parameters
    ----------
    bc_left : SplineBC, optional
        Boundary condition at the first sample. If it is not provided, the natural
        boundary condition is used.
    bc_right : SplineBC, optional
        Boundary condition at the last sample. If it is not provided, the natural
        boundary condition is used.
    """

    bc_left: SplineBC
    bc_right: SplineBC
    _spline: HermiteSpline | None

    def __init__(
        self, bc_left: SplineBC | None = None, bc_right: SplineBC | None = None
    ) -> None:
        self.bc_left = bc_left if bc_left is not None else SplineBC.natural()
        self.bc_right = bc_right if bc_right is not None else SplineBC.natural()
        self._spline = None

    @property
    def supports_error_estimation(self) -> bool:
        """Always ``False`` for cubic splines."""
        return False

    @property
    def supports_differentiation(self) -> bool:
        """Always ``True`` for cubic splines."""
        return True

    @property
    def supports_integration(self) -> bool:
        """Always ``True`` for cubic splines."""
        return True

    @property
    def spline(self) -> HermiteSpline:
        """Spline computed by the last preparation."""
        if self._spline is None:
            raise RuntimeError("Interpolation was not yet prepared.")
        return self._spline

    def init(
        self,
        t: npt.ArrayLike,
        x: npt.ArrayLike,
        bc_left: SplineBC | None = None,
        bc_right: SplineBC | None = None,
    ) -> None:
        """Build the spline directly from (possibly unsorted) samples.

        Parameters
        ----------
        t : (N,) array_like
            Positions of the samples.
        x : (N,) array_like
            Values of the samples.
        bc_left : SplineBC, optional
            Replaces the boundary condition at the first sample.
        bc_right : SplineBC, optional
            Replaces the boundary condition at the last sample.
        """
        left = bc_left if bc_left is not None else self.bc_left
        right = bc_right if bc_right is not None else self.bc_right
        spline = cubic_spline(t, x, left, right)
        self.bc_left = left
        self.bc_right = right
        self._spline = spline
        logger.debug("Prepared cubic spline with %d knots.", spline.n)

    def prepare(self, samples: SampleList) -> None:
        """Compute the spline through the samples."""
        if samples is None:
            raise ValueError("Samples must be given.")
        self.init(samples.t, samples.x)

    def interpolate(self, t: float) -> float:
        """Interpolate the value at ``t``."""
        return float(self.spline(t))

    def interpolate_with_error(self, t: float) -> tuple[float, float]:
        """Interpolate the value at ``t``, with the error estimate being zero."""
        return self.interpolate(t), 0.0

    def extrapolate(self, t: float) -> float:
        """Extrapolate by continuing the end segment of the spline."""
        return self.interpolate(t)

    def differentiate(self, t: float) -> tuple[float, float, float]:
        """Return the value, first, and second derivative at ``t``."""
        spl = self.spline
        return (
            float(spl(t)),
            float(spl.derivative(t)),
            float(spl.second_derivative(t)),
        )

    def integrate(self, t: float) -> float:
        """Integrate the spline from the first sample to ``t``."""
        return float(self.spline.antiderivative(t))
