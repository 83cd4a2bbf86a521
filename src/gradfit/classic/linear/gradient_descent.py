from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from numbers import Integral, Real
from typing import Any, List, Optional, Tuple

from gradfit.classic.linear.cost import _cost, check_shapes
from gradfit.core.errors import InvalidHyperparameter
from gradfit.linalg.matrix import Matrix

log = logging.getLogger("gradfit.gd")


def check_alpha(alpha: Any) -> float:
    if isinstance(alpha, bool) or not isinstance(alpha, Real):
        raise InvalidHyperparameter(f"alpha must be a real number, got {alpha!r}")
    alpha = float(alpha)
    if not math.isfinite(alpha) or alpha < 0.0:
        raise InvalidHyperparameter(f"alpha must be finite and >= 0, got {alpha}")
    return alpha


def check_iterations(iterations: Any) -> int:
    if isinstance(iterations, bool) or not isinstance(iterations, Integral):
        raise InvalidHyperparameter(f"iterations must be an integer, got {iterations!r}")
    if iterations < 0:
        raise InvalidHyperparameter(f"iterations must be >= 0, got {iterations}")
    return int(iterations)


@dataclass(frozen=True)
class StoppingPolicy:
    """
    When to stop the update loop.

    tol=None  -> run exactly max_iterations updates.
    tol=float -> also stop once |J(theta_prev) - J(theta_new)| < tol.
    """

    max_iterations: int = 1500
    tol: Optional[float] = None

    def __post_init__(self) -> None:
        check_iterations(self.max_iterations)
        if self.tol is not None:
            if isinstance(self.tol, bool) or not isinstance(self.tol, Real):
                raise InvalidHyperparameter(f"tol must be a real number, got {self.tol!r}")
            if not math.isfinite(self.tol) or self.tol <= 0.0:
                raise InvalidHyperparameter(f"tol must be finite and > 0, got {self.tol}")


@dataclass(frozen=True)
class DescentResult:
    theta: Matrix  # (n+1, 1)
    cost_history: Tuple[float, ...]  # J after each update; empty unless recorded
    iterations_run: int
    converged: bool  # True only when the tol rule stopped the loop

    @property
    def final_cost(self) -> Optional[float]:
        return self.cost_history[-1] if self.cost_history else None


def descend(
    X: Any,
    y: Any,
    theta0: Any,
    alpha: float,
    policy: Optional[StoppingPolicy] = None,
    record_cost: bool = True,
    log_every: int = 0,
) -> DescentResult:
    """
    Batch gradient descent on J(theta) = 1/(2m) * ||X theta - y||^2.

    Each update computes the full gradient from the current theta, then applies it:
        theta <- theta - alpha * (1/m) * X^T (X theta - y)
    theta0 is copied and never modified.
    """
    alpha = check_alpha(alpha)
    policy = policy if policy is not None else StoppingPolicy()
    X, y, theta = check_shapes(X, y, theta0)

    if alpha == 0.0:
        log.warning("alpha=0: theta will not move")

    Xt = X.T
    scalar = 1.0 / y.rows
    track = record_cost or policy.tol is not None
    history: List[float] = []
    prev_cost = _cost(X, y, theta) if policy.tol is not None else math.inf
    converged = False
    n_run = 0

    for i in range(1, policy.max_iterations + 1):
        # Vectorized gradient, from the pre-update theta
        grad = scalar * (Xt @ (X @ theta - y))
        theta = theta - alpha * grad
        n_run = i

        cost = _cost(X, y, theta) if track else None
        if record_cost:
            history.append(cost)
        if log_every and i % log_every == 0:
            log.debug(f"iter {i}/{policy.max_iterations} theta={theta.tolist()} cost={cost}")
        if policy.tol is not None:
            if abs(prev_cost - cost) < policy.tol:
                converged = True
                break
            prev_cost = cost

    final_cost = history[-1] if history else _cost(X, y, theta)
    if not math.isfinite(final_cost):
        log.warning(f"cost is {final_cost} after {n_run} iterations; alpha={alpha} may be too large")
    log.info(
        f"gradient descent: {n_run} iterations, alpha={alpha}, "
        f"cost={final_cost:.6f}, converged={converged}"
    )
    return DescentResult(
        theta=theta, cost_history=tuple(history), iterations_run=n_run, converged=converged
    )


def gradient_descent(X: Any, y: Any, theta0: Any, alpha: float, iterations: int) -> Matrix:
    """Run exactly `iterations` full-batch updates and return the final theta."""
    policy = StoppingPolicy(max_iterations=check_iterations(iterations))
    return descend(X, y, theta0, alpha, policy, record_cost=False).theta

