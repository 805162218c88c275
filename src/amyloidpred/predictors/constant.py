# predictors/constant.py
"""Placeholder and adapter predictors."""

from typing import Callable, Optional

from .base import BasePredictor


class ConstantPredictor(BasePredictor):
    """Returns the same score for every sequence.

    Stands in until a real amyloidogenesis model is available.
    """

    name = "constant"

    def __init__(self, value: float = 3.14159):
        self.value = float(value)

    def score(self, sequence: str) -> float:
        return self.value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(value={self.value})"


class CallablePredictor(BasePredictor):
    """Wraps any ``score(sequence) -> float`` function."""

    def __init__(self, func: Callable[[str], float], name: Optional[str] = None):
        if not callable(func):
            raise TypeError(f"Expected a callable, got {type(func).__name__}")
        self._func = func
        self.name = name or getattr(func, "__name__", "callable")

    def score(self, sequence: str) -> float:
        return float(self._func(sequence))
