"""Common internal Python functions."""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

DEFAULT_RELATIVE_ACCURACY = 10 * np.finfo(np.float64).eps
"""Relative accuracy at which two abscissae are considered the same."""


def ensure_array(a: npt.ArrayLike, dt: np.dtype | type) -> npt.NDArray:
    """Return the array which has the specified dtype."""
    if isinstance(a, np.ndarray) and a.dtype == dt:
        return a
    return np.array(a, dtype=dt)


def almost_equal(a: float, b: float) -> bool:
    """Check if two values are equal up to the default relative accuracy."""
    if a == b:
        return True
    if np.isnan(a) or np.isnan(b) or np.isinf(a) or np.isinf(b):
        return False
    if (a == 0 and abs(b) < DEFAULT_RELATIVE_ACCURACY) or (
        b == 0 and abs(a) < DEFAULT_RELATIVE_ACCURACY
    ):
        return True
    return abs(a - b) < DEFAULT_RELATIVE_ACCURACY * max(abs(a), abs(b))


def sort_samples(
    t: npt.ArrayLike, x: npt.ArrayLike
) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """Sort samples by their abscissae, carrying the values along.

    Parameters
    ----------
    t : (N,) array_like
        Abscissae of the samples.
    x : (N,) array_like
        Values of the samples.

    Returns
    -------
    (N,) array
        Sorted copy of ``t``.
    (N,) array
        Copy of ``x`` permuted the same way as ``t``.
    """
    real_t: npt.NDArray[np.float64] = np.array(t, np.float64, ndmin=1)
    real_x: npt.NDArray[np.float64] = np.array(x, np.float64, ndmin=1)

    if real_t.ndim != 1 or real_x.ndim != 1:
        raise ValueError("Both t and x must be flat arrays")
    if real_t.shape != real_x.shape:
        raise ValueError(
            "Both t and x must have the same length (got"
            f" {real_t.shape[0]} and {real_x.shape[0]})."
        )

    # Stable, so samples with equal t keep the order they were given in.
    sort_idx = np.argsort(real_t, kind="stable")
    return real_t[sort_idx], real_x[sort_idx]


def locate(nodes: npt.NDArray[np.float64], t: float) -> int:
    """Find the index of the last node which is not greater than ``t``.

    Parameters
    ----------
    nodes : (N,) array
        Sorted array of nodes.
    t : float
        Position to look for.

    Returns
    -------
    int
        Index of the largest node ``<= t``. It is clamped to zero for positions
        before the first node and is ``N - 1`` for positions after the last.
    """
    n = int(nodes.shape[0])
    if n == 0:
        raise RuntimeError("Can not search an empty set of nodes.")
    i = int(np.searchsorted(nodes, t, side="right")) - 1
    return min(max(i, 0), n - 1)


def suggest_window(
    nodes: npt.NDArray[np.float64], t: float, order: int
) -> tuple[int, int]:
    """Choose which consecutive nodes to use for interpolating at ``t``.

    Parameters
    ----------
    nodes : (N,) array
        Sorted array of nodes.
    t : float
        Position where interpolation is needed.
    order : int
        Number of nodes to use. Must not be more than ``N``.

    Returns
    -------
    int
        Index of the first node of the window of ``order`` nodes, centered as well as
        possible around ``t``.
    int
        Index of the node closest to ``t``.
    """
    closest = locate(nodes, t)
    offset = min(max(closest - max(order - 1, 0) // 2, 0), int(nodes.shape[0]) - order)

    if closest < nodes.shape[0] - 1:
        if abs(t - nodes[closest]) > abs(t - nodes[closest + 1]):
            closest += 1

    return offset, closest


def clamp_order(maximum_order: int | None, count: int) -> int:
    """Return number of samples to use, given the maximum order and sample count."""
    if maximum_order is None:
        return count
    return min(maximum_order, count)
