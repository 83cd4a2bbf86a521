from __future__ import annotations

from typing import Any

import numpy as np

from gradfit.core.errors import DimensionMismatch
from gradfit.data.design import add_bias
from gradfit.linalg.matrix import Matrix, as_matrix


def _check_theta(theta: Any) -> Matrix:
    theta = as_matrix(theta)
    if not theta.is_vector:
        raise DimensionMismatch(f"theta must be a column vector, got {theta.rows}x{theta.cols}")
    return theta


def predict(theta: Any, features: Any) -> float:
    """theta · [1, features...] for a single example."""
    theta = _check_theta(theta)
    x = np.asarray(features, dtype=np.float64).ravel()
    if x.size + 1 != theta.rows:
        raise DimensionMismatch(
            f"theta has {theta.rows} entries, expected {x.size + 1} for {x.size} feature(s)"
        )
    return float((Matrix(add_bias(x.reshape(1, -1))) @ theta)[0, 0])


def predict_many(theta: Any, features: Any) -> np.ndarray:
    """
    Predictions for an (m, n) feature array. A 1-D array is read as m examples
    of a single feature. Returns shape (m,).
    """
    theta = _check_theta(theta)
    X = Matrix(add_bias(features))
    if X.cols != theta.rows:
        raise DimensionMismatch(
            f"theta has {theta.rows} entries, features give {X.cols} columns with bias"
        )
    return (X @ theta).ravel()
