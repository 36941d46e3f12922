# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Benchmarking utilities for the compact-derivative hot paths.

Times the stencil build, the banded right-hand side, the Thomas solve and
the full derivative, plus the dense reference for comparison.
"""

import time
import numpy as np


def _make_test_data(N=256, order=6):
    """Smooth samples on a uniform grid on [0, 1]."""
    from compactfd.grid import UniformGrid
    grid = UniformGrid(N, L=1.0)
    f = np.exp(-grid.x) * np.sin(4.0 * np.pi * grid.x)
    return grid, f


def _time_fn(fn, args=(), kwargs=None, n_warmup=3, n_iter=100):
    """Time a function over n_iter calls, returning median and stats."""
    kwargs = kwargs or {}
    for _ in range(n_warmup):
        fn(*args, **kwargs)
    times = []
    for _ in range(n_iter):
        t0 = time.perf_counter_ns()
        fn(*args, **kwargs)
        t1 = time.perf_counter_ns()
        times.append((t1 - t0) * 1e-6)  # ms
    times = np.array(times)
    return {
        "median_ms": float(np.median(times)),
        "mean_ms": float(np.mean(times)),
        "std_ms": float(np.std(times)),
        "min_ms": float(np.min(times)),
        "max_ms": float(np.max(times)),
        "n_iter": n_iter,
    }


def bench_thomas_solve(N=256, n_iter=500):
    """Benchmark thomas_solve."""
    from compactfd.solvers.tridiagonal import thomas_solve
    rng = np.random.default_rng(0)
    a = rng.standard_normal(N)
    b = rng.standard_normal(N) + 5.0  # diag dominant
    c = rng.standard_normal(N)
    d = rng.standard_normal(N)
    return _time_fn(thomas_solve, args=(a, b, c, d), n_iter=n_iter)


def bench_build_stencils(N=256, n_iter=500):
    """Benchmark build_stencils (order 6)."""
    from compactfd.stencils import build_stencils
    return _time_fn(build_stencils, args=(N, 6), n_iter=n_iter)


def bench_compact_rhs(N=256, n_iter=500):
    """Benchmark the banded right-hand side Q f / dx."""
    from compactfd.stencils import build_stencils
    from compactfd.solvers.operators import compact_rhs
    grid, f = _make_test_data(N)
    _, _, _, Q = build_stencils(N, 6)
    return _time_fn(compact_rhs, args=(Q, f, grid.dx), n_iter=n_iter)


def bench_derivative(N=256, n_iter=500):
    """Benchmark the full banded derivative (order 6)."""
    from compactfd.derivative import derivative
    grid, f = _make_test_data(N)
    return _time_fn(derivative, args=(f, grid.dx, 6), n_iter=n_iter)


def bench_derivative_dense(N=256, n_iter=50):
    """Benchmark the dense reference derivative (order 6)."""
    from compactfd.reference import derivative_dense
    grid, f = _make_test_data(N)
    return _time_fn(derivative_dense, args=(f, grid.dx, 6), n_iter=n_iter)


def run_all_benchmarks(N=256, verbose=True):
    """Run all micro-benchmarks. Returns dict of results."""
    results = {}

    benches = [
        ("thomas_solve", bench_thomas_solve),
        ("build_stencils", bench_build_stencils),
        ("compact_rhs", bench_compact_rhs),
        ("derivative", bench_derivative),
        ("derivative_dense", bench_derivative_dense),
    ]

    for name, fn in benches:
        if verbose:
            print(f"  {name}...", end="", flush=True)
        r = fn(N=N)
        results[name] = r
        if verbose:
            print(f" {r['median_ms']:.3f} ms (median, n={r['n_iter']})")

    return results


def compare_results(before, after):
    """Print a comparison table of two benchmark result sets."""
    print(f"\n{'Benchmark':<22} {'Before':>10} {'After':>10} {'Speedup':>10}")
    print("-" * 55)
    for key in before:
        b = before[key]["median_ms"]
        a = after[key]["median_ms"]
        speedup = b / a if a > 0 else float("inf")
        print(f"{key:<22} {b:>8.3f}ms {a:>8.3f}ms {speedup:>9.1f}x")


if __name__ == "__main__":
    print("=" * 55)
    print("compactfd Benchmarks")
    print("=" * 55)
    print()

    print("Micro-benchmarks (N=256):")
    run_all_benchmarks(N=256)
