# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Command-line interface for compact-scheme differentiation."""

import argparse
import logging
import sys

import numpy as np

from compactfd.derivative import derivative_info
from compactfd.diagnostics import ConvergenceStudy
from compactfd.io import load_samples, save_run
from compactfd.solvers.sor import SORParams
from compactfd.utils import configure_logging, print_derivative_summary, print_summary_table

logger = logging.getLogger(__name__)


def _build_parser():
    parser = argparse.ArgumentParser(
        prog="compactfd",
        description="First derivatives by 4th/6th-order central compact schemes.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    derive = sub.add_parser("derive", help="Differentiate samples read from a file")
    derive.add_argument(
        "input",
        help="Samples file: one value per line, or JSON with a 'samples' list",
    )
    derive.add_argument(
        "--dx", type=float, required=True,
        help="Grid spacing",
    )
    derive.add_argument(
        "--order", type=int, default=4, choices=[4, 6],
        help="Order of accuracy (default: 4)",
    )
    derive.add_argument(
        "--omega", type=float, default=1.0,
        help="SOR relaxation factor in (0, 1] (default: 1.0)",
    )
    derive.add_argument(
        "--tol", type=float, default=1.0e-6,
        help="SOR relative residual tolerance (default: 1e-6)",
    )
    derive.add_argument(
        "--max-iter", type=int, default=1,
        help="Maximum SOR iterations (default: 1, a direct solve)",
    )
    derive.add_argument(
        "--output", type=str, default=None,
        help="Write the result as JSON to this path",
    )
    derive.add_argument(
        "--log-dir", type=str, default=None,
        help="Also log to <log-dir>/compactfd.log",
    )

    study = sub.add_parser("study", help="Grid-refinement study on sin(2*pi*x)")
    study.add_argument(
        "--order", type=int, default=4, choices=[4, 6],
        help="Order of accuracy (default: 4)",
    )
    study.add_argument(
        "-N", nargs="+", type=int, default=[16, 32, 64, 128],
        help="Grid sizes (default: 16 32 64 128)",
    )
    study.add_argument(
        "--length", type=float, default=1.0,
        help="Domain length (default: 1.0)",
    )
    return parser


def _run_derive(args):
    if args.log_dir is not None:
        configure_logging(args.log_dir, "compactfd")

    f = load_samples(args.input)
    sor = SORParams(omega=args.omega, tol=args.tol, max_iter=args.max_iter)
    logger.info("Differentiating %d samples from %s (order=%d, %r)",
                f.size, args.input, args.order, sor)
    info = derivative_info(f, args.dx, order=args.order, sor=sor)

    print_derivative_summary(info)
    if args.output is not None:
        save_run(dict(info, samples=f), args.output)
        print(f"\nResult saved to {args.output}")


def _run_study(args):
    k = 2.0 * np.pi / args.length
    study = ConvergenceStudy(
        lambda x: np.sin(k * x),
        lambda x: k * np.cos(k * x),
        order=args.order,
        L=args.length,
    )
    for N in args.N:
        study.accumulate(N)
    print(f"Convergence of order-{args.order} compact scheme on sin(2*pi*x/L), L={args.length}")
    print_summary_table(study.finalize())


def main(argv=None):
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "derive":
            _run_derive(args)
        else:
            _run_study(args)
    except (ValueError, OSError, np.linalg.LinAlgError) as exc:
        print(f"compactfd: error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
