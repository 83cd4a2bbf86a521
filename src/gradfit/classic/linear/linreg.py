from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from gradfit.classic.linear.cost import compute_cost
from gradfit.classic.linear.gradient_descent import StoppingPolicy, descend
from gradfit.classic.linear.predict import predict_many
from gradfit.data.design import add_bias
from gradfit.linalg.matrix import Matrix


@dataclass
class LinearRegressionGD:
    alpha: float = 0.01
    iterations: int = 1500
    tol: Optional[float] = None
    record_cost: bool = True
    log_every: int = 0
    theta_: Matrix | None = None  # (n+1, 1), bias first
    cost_history_: Tuple[float, ...] = ()
    n_iter_: int = 0
    converged_: bool = False

    def fit(self, features: np.ndarray, y: np.ndarray, theta0=None):
        X = Matrix(add_bias(features))
        y = Matrix.column(y)
        if theta0 is None:
            theta0 = Matrix.zeros(X.cols)
        policy = StoppingPolicy(max_iterations=self.iterations, tol=self.tol)
        res = descend(
            X, y, theta0, self.alpha, policy, record_cost=self.record_cost, log_every=self.log_every
        )
        self.theta_ = res.theta
        self.cost_history_ = res.cost_history
        self.n_iter_ = res.iterations_run
        self.converged_ = res.converged
        return self

    def _fitted(self) -> Matrix:
        if self.theta_ is None:
            raise RuntimeError("LinearRegressionGD is not fitted; call fit() first")
        return self.theta_

    @property
    def intercept_(self) -> float:
        return float(self._fitted()[0, 0])

    @property
    def coef_(self) -> np.ndarray:
        return self._fitted().ravel()[1:]

    def predict(self, features: np.ndarray) -> np.ndarray:
        return predict_many(self._fitted(), features)

    def cost(self, features: np.ndarray, y: np.ndarray) -> float:
        return compute_cost(add_bias(features), Matrix.column(y), self._fitted())
