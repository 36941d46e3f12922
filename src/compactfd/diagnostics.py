# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

# src/compactfd/diagnostics.py
import numpy as np
from compactfd.derivative import ddx
from compactfd.grid import UniformGrid


class ConvergenceStudy:
    """Grid-refinement study of the compact derivative against an exact one.

    Usage:
        study = ConvergenceStudy(np.sin, np.cos, order=6)
        for N in (16, 32, 64):
            study.accumulate(N)
        rows = study.finalize()
    """

    def __init__(self, func, dfunc, order, L=1.0, x0=0.0, sor=None):
        self.func = func
        self.dfunc = dfunc
        self.order = order
        self.L = L
        self.x0 = x0
        self.sor = sor
        self.samples = []

    def accumulate(self, N):
        """Differentiate on an N-point grid and store the error norms."""
        g = UniformGrid(N, L=self.L, x0=self.x0)
        df = ddx(self.func(g.x), g, order=self.order, sor=self.sor)
        err = df - self.dfunc(g.x)

        self.samples.append({
            "N": N,
            "dx": g.dx,
            "max_error": float(np.max(np.abs(err))),
            "l2_error": float(np.sqrt(np.mean(err**2))),
        })

    def finalize(self):
        """Return rows sorted by N, each with the observed order of accuracy.

        The observed order between two refinements is
        log(e_coarse / e_fine) / log(dx_coarse / dx_fine) on the max error;
        it is None for the coarsest grid or when an error is zero.
        """
        rows = sorted(self.samples, key=lambda s: s["N"])
        out = []
        prev = None
        for s in rows:
            row = dict(s)
            row["observed_order"] = None
            if prev is not None and prev["max_error"] > 0 and s["max_error"] > 0:
                row["observed_order"] = float(
                    np.log(prev["max_error"] / s["max_error"])
                    / np.log(prev["dx"] / s["dx"])
                )
            out.append(row)
            prev = s
        return out
