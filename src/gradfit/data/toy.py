from __future__ import annotations

import numpy as np


def make_linear_regression(
    n: int = 97, d: int = 1, noise: float = 0.1, low: float = 0.0, high: float = 2.0, seed: int = 42
):
    """
    Features uniform in [low, high), labels y = b + X·w + noise.
    Returns (table, w_true, b_true) where table is (n, d+1) with the label last,
    the same layout a data file on disk has.
    """
    rng = np.random.default_rng(seed)
    X = rng.uniform(low, high, size=(n, d))
    w_true = rng.normal(size=(d,))
    b_true = float(rng.normal())
    y = X @ w_true + b_true + noise * rng.normal(size=(n,))
    table = np.c_[X, y].astype(np.float64)
    return table, w_true, b_true


def write_table(path, table: np.ndarray, delimiter: str = ",") -> None:
    np.savetxt(path, table, delimiter=delimiter, fmt="%.10g")
