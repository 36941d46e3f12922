# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import json
import numpy as np


class _NumpyEncoder(json.JSONEncoder):
    def default(self, obj):
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        if isinstance(obj, (np.float32, np.float64)):
            return float(obj)
        if isinstance(obj, (np.int32, np.int64)):
            return int(obj)
        if isinstance(obj, np.bool_):
            return bool(obj)
        return super().default(obj)


def save_run(result, path):
    with open(path, "w") as f:
        json.dump(result, f, cls=_NumpyEncoder, indent=2)


def load_run(path):
    with open(path, "r") as f:
        return json.load(f)


def load_samples(path):
    """Read function samples from ``path``.

    ``.json`` files must hold an object with a ``samples`` list (the
    format :func:`save_run` writes for a derive run); anything else is read
    with ``np.loadtxt`` as a single column.
    """
    if str(path).endswith(".json"):
        data = load_run(path)
        if not isinstance(data, dict) or "samples" not in data:
            raise ValueError(f"{path}: expected a JSON object with a 'samples' key")
        return np.asarray(data["samples"], dtype=float)
    return np.atleast_1d(np.loadtxt(path, dtype=float))
