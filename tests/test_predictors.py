"""Tests for predictors and the predictor factory."""

import numpy as np
import pytest

from amyloidpred.config import PredictorConfig, PredictorType
from amyloidpred.predictors import (
    BasePredictor,
    CallablePredictor,
    ConstantPredictor,
    create_predictor,
)


def test_constant_predictor_default():
    predictor = ConstantPredictor()
    assert predictor.score("MREFTPT") == pytest.approx(3.14159)
    assert predictor.score("A") == predictor.score("KVKVKV")


def test_score_batch_returns_float_array():
    scores = ConstantPredictor(value=0.5).score_batch(["MREF", "TPT", "KV"])
    assert isinstance(scores, np.ndarray)
    assert scores.dtype == np.float64
    np.testing.assert_allclose(scores, [0.5, 0.5, 0.5])


def test_callable_predictor():
    def hydrophobic_fraction(sequence):
        return sum(aa in "AILMFVW" for aa in sequence) / len(sequence)

    predictor = CallablePredictor(hydrophobic_fraction)
    assert predictor.name == "hydrophobic_fraction"
    assert predictor.score("AAKK") == pytest.approx(0.5)
    np.testing.assert_allclose(predictor.score_batch(["AAAA", "KKKK"]), [1.0, 0.0])


def test_callable_predictor_rejects_non_callable():
    with pytest.raises(TypeError):
        CallablePredictor(42)


def test_base_predictor_is_abstract():
    with pytest.raises(TypeError):
        BasePredictor()


def test_create_predictor_from_config():
    predictor = create_predictor(PredictorConfig(constant_value=1.25))
    assert isinstance(predictor, ConstantPredictor)
    assert predictor.score("MREF") == 1.25


def test_create_predictor_from_dict():
    predictor = create_predictor({"predictor_type": "constant"})
    assert isinstance(predictor, ConstantPredictor)

    predictor = create_predictor({"predictor_type": PredictorType.CONSTANT})
    assert isinstance(predictor, ConstantPredictor)


def test_create_predictor_unknown_type():
    with pytest.raises(ValueError, match="Unknown predictor type"):
        create_predictor({"predictor_type": "esm2"})
