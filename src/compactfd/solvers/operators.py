# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT


import numpy as np
from numba import njit


@njit(cache=True)
def banded_matvec(bands, width, f):
    """Numba-compiled product of a row-stored banded matrix with f.

    ``bands[i, width + (j - i)]`` is entry (i, j); columns outside
    [0, N) are skipped.
    """
    N = bands.shape[0]
    out = np.zeros(N)
    for i in range(N):
        k_lo = max(0, width - i)
        k_hi = min(2 * width + 1, N - i + width)
        s = 0.0
        for k in range(k_lo, k_hi):
            s += bands[i, k] * f[i + k - width]
        out[i] = s
    return out


def compact_rhs(Q, f, dx):
    """Right-hand side b = Q f / dx of the compact system M y = b."""
    return Q.matvec(f) / dx


def tridiag_matvec(lower, diag, upper, x):
    """Apply a tridiagonal operator given by its three length-N diagonals.

        y[i] = lower[i]*x[i-1] + diag[i]*x[i] + upper[i]*x[i+1]

    ``lower[0]`` and ``upper[-1]`` are ignored.
    """
    y = diag * x
    y[1:] += lower[1:] * x[:-1]
    y[:-1] += upper[:-1] * x[1:]
    return y
