# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import numpy as np


class UniformGrid:
    """1D uniform grid of N nodes spanning [x0, x0 + L].

    Attributes:
        N: number of grid points
        L: domain length
        x0: coordinate of the first node
        x: node coordinates, shape (N,)
        dx: grid spacing L / (N - 1)
    """

    def __init__(self, N, L=1.0, x0=0.0):
        if N < 2:
            raise ValueError(f"N must be >= 2, got {N}")
        if not L > 0:
            raise ValueError(f"L must be positive, got {L}")

        self.N = N
        self.L = L
        self.x0 = x0

        self.x = np.linspace(x0, x0 + L, N)
        self.dx = L / (N - 1)

    @classmethod
    def from_spacing(cls, N, dx, x0=0.0):
        """Grid of N nodes with spacing dx starting at x0."""
        if not dx > 0:
            raise ValueError(f"dx must be positive, got {dx}")
        return cls(N, L=dx * (N - 1), x0=x0)
