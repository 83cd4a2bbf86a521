# src/gradfit/classic/linear/cost.py
from __future__ import annotations

from typing import Any, Tuple

from gradfit.core.errors import DimensionMismatch
from gradfit.linalg.matrix import Matrix, as_matrix, elementwise_power, sum_all


def check_shapes(X: Any, y: Any, theta: Any) -> Tuple[Matrix, Matrix, Matrix]:
    """
    Coerce (X, y, theta) to Matrix and enforce
        rows(X) == rows(y) == m > 0,  cols(X) == rows(theta),  y and theta are columns.
    Raises DimensionMismatch before any arithmetic happens.
    """
    X, y, theta = as_matrix(X), as_matrix(y), as_matrix(theta)
    if not y.is_vector:
        raise DimensionMismatch(f"y must be a column vector, got {y.rows}x{y.cols}")
    if not theta.is_vector:
        raise DimensionMismatch(f"theta must be a column vector, got {theta.rows}x{theta.cols}")
    if X.rows != y.rows:
        raise DimensionMismatch(f"X has {X.rows} rows but y has {y.rows} entries")
    if X.cols != theta.rows:
        raise DimensionMismatch(f"X has {X.cols} columns but theta has {theta.rows} entries")
    if X.rows == 0:
        raise DimensionMismatch("X has no rows")
    return X, y, theta


def _cost(X: Matrix, y: Matrix, theta: Matrix) -> float:
    # shapes already checked
    m = y.rows
    scalar = 1.0 / (2.0 * m)
    err = X @ theta - y
    return scalar * sum_all(elementwise_power(err, 2))


def compute_cost(X: Any, y: Any, theta: Any) -> float:
    """
    Squared-error cost of a linear model:

        J(theta) = 1/(2m) * sum_i (x_i · theta - y_i)^2

    X: (m, n+1) design matrix with the bias column, y: (m, 1), theta: (n+1, 1).
    """
    X, y, theta = check_shapes(X, y, theta)
    return _cost(X, y, theta)


def _gradient(X: Matrix, y: Matrix, theta: Matrix) -> Matrix:
    m = y.rows
    return (1.0 / m) * (X.T @ (X @ theta - y))


def compute_gradient(X: Any, y: Any, theta: Any) -> Matrix:
    """dJ/dtheta = (1/m) * X^T (X theta - y); shape (n+1, 1)."""
    X, y, theta = check_shapes(X, y, theta)
    return _gradient(X, y, theta)
