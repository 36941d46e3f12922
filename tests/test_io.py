# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import numpy as np
import pytest
from compactfd.derivative import derivative_info
from compactfd.io import save_run, load_run, load_samples


def test_save_and_load_roundtrip(tmp_path):
    f = np.linspace(0.0, 1.0, 10) ** 2
    info = derivative_info(f, 1.0 / 9, order=4)
    path = tmp_path / "run_001.json"
    save_run(dict(info, samples=f), str(path))
    loaded = load_run(str(path))
    assert loaded["order"] == 4
    assert loaded["converged"] is True
    assert np.allclose(loaded["derivative"], info["derivative"])
    assert np.allclose(load_samples(str(path)), f)


def test_load_samples_text(tmp_path):
    path = tmp_path / "samples.txt"
    path.write_text("0.0\n0.5\n1.0\n1.5\n")
    assert np.allclose(load_samples(str(path)), [0.0, 0.5, 1.0, 1.5])


def test_load_samples_json_requires_key(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text('{"values": [1, 2, 3]}')
    with pytest.raises(ValueError):
        load_samples(str(path))
