from pathlib import Path

import pytest

from gradfit.config import RunConfig
from gradfit.core.errors import InvalidHyperparameter


def test_defaults_match_exercise():
    cfg = RunConfig()
    assert cfg.alpha == 0.01
    assert cfg.iterations == 1500
    assert cfg.tol is None
    assert cfg.policy().max_iterations == 1500


def test_from_yaml_and_override(tmp_path: Path):
    p = tmp_path / "run.yaml"
    p.write_text("alpha: 0.02\niterations: 10\npredict:\n  - [3.5]\nscale: 10000\n")
    cfg = RunConfig.from_yaml(p)
    assert cfg.alpha == 0.02 and cfg.iterations == 10
    assert cfg.predict == [[3.5]]
    cfg2 = cfg.override(alpha=None, iterations=20)
    assert cfg2.alpha == 0.02 and cfg2.iterations == 20
    assert cfg.iterations == 10


def test_empty_yaml_gives_defaults(tmp_path: Path):
    p = tmp_path / "empty.yaml"
    p.write_text("")
    assert RunConfig.from_yaml(p) == RunConfig()


def test_unknown_key(tmp_path: Path):
    p = tmp_path / "bad.yaml"
    p.write_text("alpha: 0.1\nlearning_rate: 0.2\n")
    with pytest.raises(ValueError, match="learning_rate"):
        RunConfig.from_yaml(p)


def test_validate():
    with pytest.raises(InvalidHyperparameter):
        RunConfig(alpha=-1.0).validate()
    with pytest.raises(InvalidHyperparameter):
        RunConfig(iterations=-5).validate()
    with pytest.raises(InvalidHyperparameter):
        RunConfig(tol=0.0).validate()
    assert RunConfig(alpha=0.5).validate().alpha == 0.5


def test_validate_rows_and_columns():
    cfg = RunConfig(theta0=[0, 1], predict=[[3.5], 7]).validate()
    assert cfg.theta0 == [0.0, 1.0]
    assert cfg.predict == [[3.5], [7.0]]
    with pytest.raises(ValueError, match="theta0"):
        RunConfig(theta0=["a", "b"]).validate()
    with pytest.raises(ValueError, match="predict"):
        RunConfig(predict=[[True]]).validate()
    with pytest.raises(ValueError, match="label_column"):
        RunConfig(label_column="last").validate()
