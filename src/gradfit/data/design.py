from __future__ import annotations

from typing import Tuple

import numpy as np

from gradfit.core.errors import DimensionMismatch
from gradfit.data.loader import Dataset
from gradfit.linalg.matrix import Matrix


def add_bias(features) -> np.ndarray:
    """Prepend a column of ones to an (m, n) feature array; 1-D input is one feature."""
    F = np.asarray(features, dtype=np.float64)
    if F.ndim == 1:
        F = F.reshape(-1, 1)
    return np.c_[np.ones((F.shape[0], 1)), F]


def build_design_matrix(dataset: Dataset, label_column: int = -1) -> Tuple[Matrix, Matrix]:
    """
    Split a dataset into the design matrix X = [1, features...] (m, n+1)
    and the label vector y (m, 1). The label is the last column by default.
    """
    if dataset.cols < 2:
        raise DimensionMismatch(
            f"need at least one feature column and one label column, got {dataset.cols} column(s)"
        )
    if not -dataset.cols <= label_column < dataset.cols:
        raise DimensionMismatch(
            f"label_column {label_column} out of range for {dataset.cols} columns"
        )
    j = label_column % dataset.cols
    feats = np.delete(dataset.values, j, axis=1)
    X = Matrix(add_bias(feats))
    y = Matrix.column(dataset.values[:, j])
    return X, y
