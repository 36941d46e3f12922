# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Coefficient tables for the central compact first-derivative schemes.

A compact scheme couples neighbouring derivative values through a
tridiagonal operator M and the function samples through a banded operator Q:

    M df/dx = (1/dx) Q f

Coefficients follow Lele (1992), "Compact finite difference schemes with
spectral-like resolution", J. Comput. Phys. 103(1), 16-42. Each row of the
system belongs to a row class (left boundary, near-left, interior,
near-right, right boundary); the right-hand classes are the mirror images of
the left-hand ones.
"""

from collections import namedtuple

import numpy as np

from compactfd.solvers.operators import banded_matvec


# m: (lower, diag, upper) entries of M on this row.
# q: Q coefficients, the first one at column (row + start).
StencilRow = namedtuple("StencilRow", ["m", "q", "start"])


def mirror_row(row):
    """Reflect a boundary row onto the opposite end of the grid.

    M swaps its lower and upper entries; Q reverses its columns and flips
    sign (the first derivative is odd under x -> -x).
    """
    lower, diag, upper = row.m
    q = tuple(-c for c in reversed(row.q))
    start = -(row.start + len(row.q) - 1)
    return StencilRow(m=(upper, diag, lower), q=q, start=start)


class CompactScheme:
    """Row-class coefficient table for one order of accuracy.

    Attributes:
        order: formal interior order of accuracy.
        left: rows applied at nodes 0, 1, ... from the left boundary.
        interior: row applied at every node not covered by a boundary row.
        right: rows applied at nodes N-1, N-2, ... (mirrors of ``left``).
        min_nodes: smallest grid the scheme accepts.
        width: half-bandwidth of Q (largest |column - row| of any row).
    """

    def __init__(self, order, left, interior, min_nodes):
        self.order = order
        self.left = tuple(left)
        self.interior = interior
        self.right = tuple(mirror_row(r) for r in self.left)
        self.min_nodes = min_nodes
        self.width = max(
            max(abs(r.start), abs(r.start + len(r.q) - 1))
            for r in self.left + (interior,) + self.right
        )

    def rows(self, N):
        """Yield ``(i, row)`` for every node of an N-point grid."""
        nb = len(self.left)
        for i in range(N):
            if i < nb:
                yield i, self.left[i]
            elif i >= N - nb:
                yield i, self.right[N - 1 - i]
            else:
                yield i, self.interior

    def __repr__(self):
        return f"CompactScheme(order={self.order}, width={self.width}, min_nodes={self.min_nodes})"


# 4th order: tridiagonal interior (alpha = 1/4), one-sided closure on row 0.
ORDER4_LEFT = StencilRow(
    m=(0.0, 1.0, 3.0),
    q=(-17.0 / 6.0, 3.0 / 2.0, 3.0 / 2.0, -1.0 / 6.0),
    start=0,
)
ORDER4_INTERIOR = StencilRow(
    m=(1.0 / 4.0, 1.0, 1.0 / 4.0),
    q=(-3.0 / 4.0, 0.0, 3.0 / 4.0),
    start=-1,
)

# 6th order: tridiagonal interior (alpha = 1/3), one-sided closures on the
# first two rows.
ORDER6_LEFT = StencilRow(
    m=(0.0, 1.0, 5.0),
    q=(-197.0 / 60.0, -5.0 / 12.0, 5.0, -5.0 / 3.0, 5.0 / 12.0, -1.0 / 20.0),
    start=0,
)
ORDER6_NEAR_LEFT = StencilRow(
    m=(1.0 / 8.0, 1.0, 3.0 / 4.0),
    q=(-43.0 / 96.0, -5.0 / 6.0, 9.0 / 8.0, 1.0 / 6.0, -1.0 / 96.0),
    start=-1,
)
ORDER6_INTERIOR = StencilRow(
    m=(1.0 / 3.0, 1.0, 1.0 / 3.0),
    q=(-1.0 / 36.0, -7.0 / 9.0, 0.0, 7.0 / 9.0, 1.0 / 36.0),
    start=-2,
)

SCHEMES = {
    4: CompactScheme(4, [ORDER4_LEFT], ORDER4_INTERIOR, min_nodes=6),
    6: CompactScheme(6, [ORDER6_LEFT, ORDER6_NEAR_LEFT], ORDER6_INTERIOR, min_nodes=9),
}


def get_scheme(order):
    """Return the coefficient table for ``order`` (4 or 6)."""
    try:
        return SCHEMES[order]
    except (KeyError, TypeError):
        raise ValueError(
            f"order must be one of {sorted(SCHEMES)}, got {order!r}"
        ) from None


class BandedOperator:
    """Square banded matrix stored by rows.

    ``bands[i, width + (j - i)]`` holds entry (i, j); entries that would
    fall outside the matrix are kept at zero.
    """

    def __init__(self, bands, width):
        bands = np.asarray(bands, dtype=float)
        if bands.ndim != 2 or bands.shape[1] != 2 * width + 1:
            raise ValueError(
                f"bands must have shape (N, {2 * width + 1}), got {bands.shape}"
            )
        self.bands = bands
        self.width = width
        self.N = bands.shape[0]

    @property
    def shape(self):
        return (self.N, self.N)

    def matvec(self, f):
        f = np.asarray(f, dtype=float)
        if f.shape != (self.N,):
            raise ValueError(f"f must have shape {(self.N,)}, got {f.shape}")
        return banded_matvec(self.bands, self.width, f)

    def to_dense(self):
        N, w = self.N, self.width
        A = np.zeros((N, N))
        for i in range(N):
            for k in range(2 * w + 1):
                j = i + k - w
                if 0 <= j < N:
                    A[i, j] = self.bands[i, k]
        return A


def build_stencils(N, order):
    """Build the compact-scheme operators for an N-point grid.

    Args:
        N: number of grid nodes.
        order: 4 or 6.

    Returns:
        (lower, diag, upper, Q): the three diagonals of M, each of length N
        (``lower[0]`` and ``upper[-1]`` are zero), and Q as a
        :class:`BandedOperator`.

    Raises:
        ValueError: unsupported order, or N too small for the boundary
            stencils of that order.
    """
    scheme = get_scheme(order)
    if N < scheme.min_nodes:
        raise ValueError(
            f"order {order} needs at least {scheme.min_nodes} nodes, got {N}"
        )

    w = scheme.width
    lower = np.zeros(N)
    diag = np.zeros(N)
    upper = np.zeros(N)
    bands = np.zeros((N, 2 * w + 1))

    for i, row in scheme.rows(N):
        lower[i], diag[i], upper[i] = row.m
        k0 = w + row.start
        bands[i, k0:k0 + len(row.q)] = row.q

    return lower, diag, upper, BandedOperator(bands, w)
