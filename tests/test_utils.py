# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

# tests/test_utils.py
import logging
import os

import numpy as np
from compactfd.derivative import derivative_info
from compactfd.utils import (
    configure_logging,
    print_derivative_summary,
    print_summary_table,
)


def test_configure_logging(tmp_path):
    """configure_logging should create a log file in the output directory."""
    logger = configure_logging(str(tmp_path), "test_run")

    logger.info("test message")

    # Flush handlers
    for h in logger.handlers:
        h.flush()

    log_files = [f for f in os.listdir(tmp_path) if f.endswith(".log")]
    assert len(log_files) == 1
    assert "test_run" in log_files[0]
    with open(tmp_path / log_files[0]) as f:
        assert "test message" in f.read()

    # Clean up handlers to avoid leaking between tests
    for h in logger.handlers[:]:
        logger.removeHandler(h)
        h.close()
    logger.setLevel(logging.NOTSET)


def test_print_summary_table(capsys):
    """print_summary_table should print formatted rows."""
    rows = [
        {"N": 16, "dx": 1 / 15, "max_error": 1.5e-3, "l2_error": 9.0e-4, "observed_order": None},
        {"N": 32, "dx": 1 / 31, "max_error": 9.1e-5, "l2_error": 5.0e-5, "observed_order": 3.86},
    ]
    print_summary_table(rows)
    captured = capsys.readouterr()
    assert "1.5000e-03" in captured.out
    assert "3.86" in captured.out
    assert " -" in captured.out


def test_print_derivative_summary(capsys):
    info = derivative_info(np.linspace(0.0, 1.0, 10), 1.0 / 9, order=4)
    print_derivative_summary(info)
    out = capsys.readouterr().out
    assert "order=4" in out
    assert "converged=True" in out
    assert "N=10" in out
