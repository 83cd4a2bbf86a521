from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from numbers import Integral, Real
from pathlib import Path
from typing import Any, Dict, List, Optional

from gradfit.classic.linear.gradient_descent import StoppingPolicy, check_alpha
from gradfit.core.io import load_yaml


@dataclass
class RunConfig:
    # I/O
    data: Optional[str] = None  # headerless delimited file, label in `label_column`
    delimiter: str = ","
    label_column: int = -1

    # Optimisation
    alpha: float = 0.01
    iterations: int = 1500
    tol: Optional[float] = None  # None -> fixed number of iterations
    theta0: Optional[List[float]] = None  # None -> zeros

    # Reporting
    predict: List[List[float]] = field(default_factory=list)  # feature rows to score
    scale: float = 1.0  # multiplier for printed predictions (10000 in the profit exercise)

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None
    log_every: int = 0  # DEBUG progress line every N iterations (0 = off)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "RunConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(d) - known)
        if unknown:
            raise ValueError(f"Unknown config key(s): {', '.join(unknown)}")
        return cls(**d)

    @classmethod
    def from_yaml(cls, path: Path | str) -> "RunConfig":
        d = load_yaml(path)
        if not isinstance(d, dict):
            raise ValueError(f"{path}: expected a mapping at the top level")
        return cls.from_dict(d)

    def override(self, **kwargs: Any) -> "RunConfig":
        """Copy with every non-None keyword applied (CLI flags over file values)."""
        return replace(self, **{k: v for k, v in kwargs.items() if v is not None})

    def policy(self) -> StoppingPolicy:
        return StoppingPolicy(max_iterations=self.iterations, tol=self.tol)

    def validate(self) -> "RunConfig":
        check_alpha(self.alpha)
        self.policy()
        if isinstance(self.label_column, bool) or not isinstance(self.label_column, Integral):
            raise ValueError(f"label_column must be an integer, got {self.label_column!r}")
        if self.theta0 is not None:
            self.theta0 = _floats("theta0", self.theta0)
        if not isinstance(self.predict, (list, tuple)):
            raise ValueError(f"predict must be a list of feature rows, got {self.predict!r}")
        self.predict = [_floats("predict", row) for row in self.predict]
        return self


def _floats(name: str, values: Any) -> List[float]:
    if not isinstance(values, (list, tuple)):
        values = [values]
    for v in values:
        if isinstance(v, bool) or not isinstance(v, Real):
            raise ValueError(f"{name} must hold numbers, got {v!r}")
    return [float(v) for v in values]
