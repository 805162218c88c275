# amyloidpred/predictors/__init__.py
"""Predictor factory and exports."""

from typing import Union

from .base import BasePredictor, PredictionResult
from .constant import CallablePredictor, ConstantPredictor
from ..config import PredictorConfig, PredictorType


def create_predictor(config: Union[PredictorConfig, dict]) -> BasePredictor:
    """
    Factory function to create a predictor based on configuration.

    Args:
        config: PredictorConfig object or dict with predictor settings

    Returns:
        Initialized predictor instance
    """
    if isinstance(config, dict):
        config = PredictorConfig(**config)

    try:
        predictor_type = PredictorType(config.predictor_type)
    except ValueError:
        raise ValueError(f"Unknown predictor type: {config.predictor_type}")

    predictor_map = {
        PredictorType.CONSTANT: lambda: ConstantPredictor(value=config.constant_value),
    }

    return predictor_map[predictor_type]()


__all__ = [
    "BasePredictor",
    "PredictionResult",
    "ConstantPredictor",
    "CallablePredictor",
    "create_predictor",
]
