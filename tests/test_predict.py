import numpy as np
import pytest

from gradfit.classic.linear.predict import predict, predict_many
from gradfit.core.errors import DimensionMismatch
from gradfit.linalg.matrix import Matrix


def test_predict_prepends_bias():
    theta = Matrix.column([-3.6303, 1.1664])
    assert predict(theta, [3.5]) == pytest.approx(-3.6303 + 3.5 * 1.1664)
    # profit in $10,000s -> dollars
    assert predict(theta, [3.5]) * 10000 == pytest.approx(4519.77, abs=5.0)
    assert predict(theta, [7.0]) * 10000 == pytest.approx(45342.45, abs=5.0)


def test_predict_scalar_feature_and_multi_feature():
    assert predict([1.0, 2.0], 4.0) == 9.0
    assert predict([1.0, 2.0, -1.0], [3.0, 5.0]) == 2.0


def test_predict_many_matches_predict():
    rng = np.random.default_rng(0)
    F = rng.normal(size=(10, 2))
    theta = rng.normal(size=3)
    many = predict_many(theta, F)
    assert many.shape == (10,)
    assert np.allclose(many, [predict(theta, row) for row in F])


def test_predict_many_1d_is_single_feature():
    out = predict_many([0.5, 2.0], np.array([0.0, 1.0, 2.0]))
    assert np.allclose(out, [0.5, 2.5, 4.5])


def test_predict_dimension_mismatch():
    with pytest.raises(DimensionMismatch):
        predict([1.0, 2.0], [1.0, 2.0])
    with pytest.raises(DimensionMismatch):
        predict_many([1.0, 2.0], np.ones((4, 2)))
    with pytest.raises(DimensionMismatch):
        predict(np.ones((2, 2)), [1.0])
