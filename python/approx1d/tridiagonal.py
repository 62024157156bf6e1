"""Solver for tridiagonal systems of equations."""

from __future__ import annotations

import numpy as np
import numpy.typing as npt


def solve_tridiagonal(
    a: npt.NDArray[np.float64],
    b: npt.NDArray[np.float64],
    c: npt.NDArray[np.float64],
    d: npt.NDArray[np.float64],
) -> npt.NDArray[np.float64]:
    r"""Solve a tridiagonal system using the Thomas algorithm.

    The system solved is

    .. math::

        a_k y_{k-1} + b_k y_k + c_k y_{k+1} = d_k, \quad k = 0, \dots, N - 1

    with :math:`a_0` and :math:`c_{N-1}` ignored. No pivoting is done, so the
    system should be diagonally dominant, which is always the case for the
    systems of spline derivatives.

    Parameters
    ----------
    a : (N,) array
        Sub-diagonal of the matrix.
    b : (N,) array
        Main diagonal of the matrix. It is overwritten during elimination.
    c : (N,) array
        Super-diagonal of the matrix.
    d : (N,) array
        Right side of the system. It is overwritten during elimination.

    Returns
    -------
    (N,) array
        Solution of the system.
    """
    n = int(b.shape[0])
    if a.shape != (n,) or c.shape != (n,) or d.shape != (n,):
        raise ValueError(
            "All diagonals and the right side must be 1D arrays of the same length "
            f"(got {a.shape}, {b.shape}, {c.shape}, and {d.shape})."
        )
    if n == 0:
        return np.empty(0, np.float64)

    # Forward elimination
    for k in range(1, n):
        if b[k - 1] == 0.0:
            raise ValueError(f"Zero pivot encountered in row {k - 1}.")
        f = a[k] / b[k - 1]
        b[k] -= f * c[k - 1]
        d[k] -= f * d[k - 1]

    if b[n - 1] == 0.0:
        raise ValueError(f"Zero pivot encountered in row {n - 1}.")

    # Back substitution
    y = np.empty(n, np.float64)
    y[n - 1] = d[n - 1] / b[n - 1]
    for k in range(n - 2, -1, -1):
        y[k] = (d[k] - c[k] * y[k + 1]) / b[k]

    return y
