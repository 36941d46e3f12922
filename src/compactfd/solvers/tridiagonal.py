# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import numpy as np
from numba import njit


@njit(cache=True)
def _thomas_impl(a, b, c, d, pivot_tol):
    """Thomas sweep. Returns (x, bad_row); bad_row is -1 unless a pivot
    fell below ``pivot_tol``, in which case x is undefined."""
    N = len(b)
    cp = np.empty(N)
    dp = np.empty(N)
    x = np.empty(N)

    if abs(b[0]) < pivot_tol:
        return x, 0
    cp[0] = c[0] / b[0]
    dp[0] = d[0] / b[0]
    for i in range(1, N):
        denom = b[i] - a[i] * cp[i - 1]
        if abs(denom) < pivot_tol:
            return x, i
        cp[i] = c[i] / denom
        dp[i] = (d[i] - a[i] * dp[i - 1]) / denom

    x[-1] = dp[-1]
    for i in range(N - 2, -1, -1):
        x[i] = dp[i] - cp[i] * x[i + 1]
    return x, -1


def thomas_solve(a, b, c, d):
    """Solve tridiagonal system Ax = d using the Thomas algorithm.

    No pivoting is done; the compact-scheme operators are non-singular
    without it.

    Args:
        a: lower diagonal, length N. a[0] is unused.
        b: main diagonal, length N.
        c: upper diagonal, length N. c[-1] is unused.
        d: right-hand side, length N.

    Returns:
        x: solution, length N.

    Raises:
        ValueError: if the inputs are not 1D arrays of one common length.
        numpy.linalg.LinAlgError: on a (near-)zero pivot or a non-finite
            solution.
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    c = np.asarray(c, dtype=float)
    d = np.asarray(d, dtype=float)
    for name, arr in (("a", a), ("b", b), ("c", c), ("d", d)):
        if arr.ndim != 1:
            raise ValueError(f"{name} must be 1D, got shape {arr.shape}")
    N = b.shape[0]
    if N == 0:
        raise ValueError("system must have at least one row")
    if not (a.shape[0] == c.shape[0] == d.shape[0] == N):
        raise ValueError(
            f"a, b, c, d must all have length {N}, got "
            f"{a.shape[0]}, {N}, {c.shape[0]}, {d.shape[0]}"
        )

    scale = np.max(np.abs(b))
    pivot_tol = 100.0 * np.finfo(float).eps * (scale if scale > 0 else 1.0)
    x, bad_row = _thomas_impl(a, b, c, d, pivot_tol)
    if bad_row >= 0:
        raise np.linalg.LinAlgError(f"Near-zero pivot at row {bad_row}")
    if not np.all(np.isfinite(x)):
        raise np.linalg.LinAlgError("Tridiagonal solve produced non-finite values")
    return x
