# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Successive over-relaxation around the tridiagonal solve.

For A = L + D + U the iteration solves

    (D/omega + L + U) x^{k+1} = b + ((1 - omega)/omega) D x^k

starting from x^0 = 0, and stops when

    ||b - A x^{k+1}||_2 / ||b - A x^0||_2 <= tol

or after ``max_iter`` sweeps. With omega = 1 and max_iter = 1 this is a
single direct Thomas solve.
"""

import logging

import numpy as np

from compactfd.solvers.operators import tridiag_matvec
from compactfd.solvers.tridiagonal import thomas_solve

logger = logging.getLogger(__name__)


class SORParams:
    """Relaxation settings for :func:`sor_solve`.

    Attributes:
        omega: relaxation factor, 0 < omega <= 1.
        tol: relative L2 residual at which the iteration stops.
        max_iter: maximum number of tridiagonal solves.
    """

    def __init__(self, omega=1.0, tol=1.0e-6, max_iter=1):
        if not 0.0 < omega <= 1.0:
            raise ValueError(f"omega must be in (0, 1], got {omega}")
        if not tol > 0.0:
            raise ValueError(f"tol must be positive, got {tol}")
        if int(max_iter) != max_iter or max_iter < 1:
            raise ValueError(f"max_iter must be an integer >= 1, got {max_iter}")

        self.omega = float(omega)
        self.tol = float(tol)
        self.max_iter = int(max_iter)

    def __repr__(self):
        return f"SORParams(omega={self.omega}, tol={self.tol}, max_iter={self.max_iter})"


def sor_solve(lower, diag, upper, rhs, params=None):
    """Solve a tridiagonal system with optional SOR refinement.

    Args:
        lower, diag, upper: diagonals of A, each of length N
            (``lower[0]`` and ``upper[-1]`` unused).
        rhs: right-hand side b, length N.
        params: :class:`SORParams`; defaults to a single direct solve.

    Returns:
        dict with ``x`` (last iterate), ``residual`` (relative L2 residual
        of ``x``), ``iterations`` and ``converged``. Running out of
        iterations is reported through ``converged`` rather than raised.
    """
    params = params or SORParams()
    lower = np.asarray(lower, dtype=float)
    diag = np.asarray(diag, dtype=float)
    upper = np.asarray(upper, dtype=float)
    rhs = np.asarray(rhs, dtype=float)

    omega = params.omega
    x = np.zeros_like(rhs)

    # Normalise by the residual of the initial guess (x^0 = 0, so ||b||).
    resid0 = np.linalg.norm(rhs - tridiag_matvec(lower, diag, upper, x))
    if resid0 == 0.0:
        return {"x": x, "residual": 0.0, "iterations": 0, "converged": True}

    diag_mod = diag / omega
    relax = (1.0 - omega) / omega

    residual = np.inf
    for k in range(1, params.max_iter + 1):
        rhs_mod = rhs + relax * (diag * x)
        x = thomas_solve(lower, diag_mod, upper, rhs_mod)
        residual = np.linalg.norm(rhs - tridiag_matvec(lower, diag, upper, x)) / resid0
        logger.debug("SOR iteration %d: residual=%.3e", k, residual)
        if residual <= params.tol:
            break

    converged = bool(residual <= params.tol)
    if not converged:
        logger.warning(
            "SOR did not converge: residual=%.3e > tol=%.1e after %d iterations (omega=%s)",
            residual, params.tol, k, omega,
        )

    return {
        "x": x,
        "residual": float(residual),
        "iterations": k,
        "converged": converged,
    }
