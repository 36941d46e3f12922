#!/usr/bin/env python
"""Validate the banded compact derivative against the dense reference.

For each order and a range of grid sizes, differentiates random and smooth
samples with both paths and requires agreement to a relative tolerance. The
dense path builds full N x N matrices and calls np.linalg.solve, so the two
differ only by floating-point reordering.
"""

import os
import sys

import numpy as np

# Allow running without pip install -e .
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from compactfd.derivative import derivative
from compactfd.reference import derivative_dense

REL_TOL = 1e-10
SIZES = (9, 10, 16, 33, 64, 127, 256)


def main():
    rng = np.random.default_rng(2022)

    print(f"Banded vs dense validation: orders (4, 6), N in {SIZES}")
    print("=" * 60)
    print(f"{'Order':>6} {'N':>6} {'Case':>8} {'Rel Err':>12} {'Status':>8}")
    print("-" * 60)

    all_pass = True
    for order in (4, 6):
        for N in SIZES:
            x = np.linspace(0.0, 1.0, N)
            dx = 1.0 / (N - 1)
            cases = {
                "random": rng.standard_normal(N),
                "smooth": np.exp(-x) * np.sin(3.0 * np.pi * x),
            }
            for label, f in cases.items():
                fast = derivative(f, dx, order=order)
                ref = derivative_dense(f, dx, order=order)
                rel_err = np.linalg.norm(fast - ref) / max(np.linalg.norm(ref), 1e-300)
                ok = rel_err < REL_TOL
                all_pass &= ok
                print(f"{order:>6} {N:>6} {label:>8} {rel_err:>12.2e} "
                      f"{'PASS' if ok else 'FAIL':>8}")
    print("=" * 60)

    if all_pass:
        print("All checks PASSED.")
    else:
        print("VALIDATION FAILURE: banded and dense paths disagree.")
        sys.exit(1)


if __name__ == "__main__":
    main()
