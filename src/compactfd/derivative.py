# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""First derivative of sampled data by a central compact scheme.

Solves

    M df/dx = (1/dx) Q f

with M tridiagonal and Q banded (see :mod:`compactfd.stencils`). M is
inverted with the Thomas algorithm, optionally inside an SOR loop
(:mod:`compactfd.solvers.sor`).
"""

import logging
import math

import numpy as np

from compactfd.stencils import build_stencils, get_scheme
from compactfd.solvers.operators import compact_rhs
from compactfd.solvers.sor import sor_solve

logger = logging.getLogger(__name__)


def _validate(f, dx, order):
    scheme = get_scheme(order)

    try:
        dx = float(dx)
    except (TypeError, ValueError):
        raise ValueError(f"dx must be a real number, got {dx!r}") from None
    if not math.isfinite(dx) or dx <= 0.0:
        raise ValueError(f"dx must be positive and finite, got {dx}")

    f = np.asarray(f, dtype=float)
    if f.ndim != 1:
        raise ValueError(f"f must be 1D, got shape {f.shape}")
    if f.size < scheme.min_nodes:
        raise ValueError(
            f"order {order} needs at least {scheme.min_nodes} samples, got {f.size}"
        )
    if not np.all(np.isfinite(f)):
        raise ValueError("f contains NaN or infinite values")
    return f, dx


def derivative_info(f, dx, order=4, sor=None):
    """Compact-scheme derivative together with the solver status.

    Args:
        f: samples on a uniform grid, shape (N,).
        dx: grid spacing, > 0.
        order: 4 or 6.
        sor: :class:`~compactfd.solvers.sor.SORParams`; defaults to a single
            direct solve.

    Returns:
        dict with ``derivative``, ``residual``, ``iterations``,
        ``converged``, ``order`` and ``dx``.

    Raises:
        ValueError: invalid order, spacing or samples.
        numpy.linalg.LinAlgError: the tridiagonal system is singular.
    """
    f, dx = _validate(f, dx, order)
    N = f.size

    lower, diag, upper, Q = build_stencils(N, order)
    b = compact_rhs(Q, f, dx)
    result = sor_solve(lower, diag, upper, b, sor)

    logger.debug(
        "compact derivative: N=%d order=%d dx=%g residual=%.3e iterations=%d",
        N, order, dx, result["residual"], result["iterations"],
    )

    return {
        "derivative": result["x"],
        "residual": result["residual"],
        "iterations": result["iterations"],
        "converged": result["converged"],
        "order": order,
        "dx": dx,
    }


def derivative(f, dx, order=4, sor=None):
    """First derivative df/dx of uniformly sampled f.

    Order 4 is exact for polynomials up to degree 4, order 6 up to degree 6,
    boundary rows included. See :func:`derivative_info` for the
    arguments and for the SOR convergence status.
    """
    return derivative_info(f, dx, order=order, sor=sor)["derivative"]


def ddx(f, grid, order=4, sor=None):
    """First derivative df/dx of f sampled on a :class:`UniformGrid`."""
    if len(f) != grid.N:
        raise ValueError(f"f has {len(f)} samples but the grid has {grid.N} nodes")
    return derivative(f, grid.dx, order=order, sor=sor)
