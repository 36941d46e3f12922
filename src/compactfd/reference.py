# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Dense reference implementation of the compact derivative.

Builds M and Q as full N x N matrices and calls ``np.linalg.solve``. This
is O(N^3) and exists only to cross-check the banded path.
"""

import numpy as np

from compactfd.stencils import get_scheme


def dense_stencils(N, order):
    """Return dense (M, Q) for an N-point grid."""
    scheme = get_scheme(order)
    if N < scheme.min_nodes:
        raise ValueError(
            f"order {order} needs at least {scheme.min_nodes} nodes, got {N}"
        )

    M = np.zeros((N, N))
    Q = np.zeros((N, N))
    for i, row in scheme.rows(N):
        W, C, E = i - 1, i, i + 1
        lower, diag, upper = row.m
        M[C, C] = diag
        if W >= 0:
            M[C, W] = lower
        if E < N:
            M[C, E] = upper
        for k, coeff in enumerate(row.q):
            Q[C, C + row.start + k] = coeff
    return M, Q


def derivative_dense(f, dx, order=4):
    """Compact derivative via a dense linear solve."""
    f = np.asarray(f, dtype=float)
    M, Q = dense_stencils(f.size, order)
    return np.linalg.solve(M, Q @ f / dx)
