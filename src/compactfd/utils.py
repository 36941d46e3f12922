# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Shared helpers for the command line: logging setup and summary tables."""

import logging
import os


def configure_logging(outdir, run_name, level=logging.INFO):
    """Set up file + console logging on the 'compactfd' logger.

    Args:
        outdir: directory for the log file.
        run_name: used in the log filename.
        level: logging level for the logger and both handlers.

    Returns:
        the configured logger.
    """
    os.makedirs(outdir, exist_ok=True)
    logger = logging.getLogger("compactfd")
    logger.setLevel(level)

    fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")

    # File handler
    log_path = os.path.join(outdir, f"{run_name}.log")
    fh = logging.FileHandler(log_path)
    fh.setLevel(level)
    fh.setFormatter(fmt)
    logger.addHandler(fh)

    # Console handler (only if none already exists)
    if not any(isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
               for h in logger.handlers):
        ch = logging.StreamHandler()
        ch.setLevel(level)
        ch.setFormatter(fmt)
        logger.addHandler(ch)

    return logger


def print_summary_table(rows):
    """Print convergence-study rows (see ConvergenceStudy.finalize)."""
    header = f"{'N':>6} {'dx':>12} {'max_error':>12} {'l2_error':>12} {'order':>8}"
    print(header)
    print("-" * len(header))
    for row in rows:
        p = row["observed_order"]
        p_str = "-" if p is None else f"{p:.2f}"
        print(
            f"{row['N']:>6d} {row['dx']:>12.4e} {row['max_error']:>12.4e} "
            f"{row['l2_error']:>12.4e} {p_str:>8}"
        )


def print_derivative_summary(info):
    """Print the status fields of a derivative_info() result."""
    d = info["derivative"]
    print(f"order={info['order']} dx={info['dx']:g} N={len(d)}")
    print(
        f"residual={info['residual']:.3e} iterations={info['iterations']} "
        f"converged={info['converged']}"
    )
    print(f"df/dx range: [{d.min():.6g}, {d.max():.6g}]")
