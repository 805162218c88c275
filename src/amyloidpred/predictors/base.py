# predictors/base.py
"""Base class for amyloidogenesis predictors."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable
import numpy as np

from ..io.fasta_parser import FastaRecord


@dataclass
class PredictionResult:
    """Container for a single prediction."""
    record: FastaRecord
    score: float

    @property
    def description(self) -> str:
        return self.record.description


class BasePredictor(ABC):
    """Abstract base class for sequence scorers."""

    name = "base"

    @abstractmethod
    def score(self, sequence: str) -> float:
        """
        Score a single protein sequence.

        Args:
            sequence: Validated amino acid sequence string

        Returns:
            Amyloidogenesis score
        """
        pass

    def score_batch(self, sequences: Iterable[str]) -> np.ndarray:
        """
        Score several sequences.

        Args:
            sequences: Amino acid sequence strings

        Returns:
            float64 array with one score per sequence, in input order
        """
        return np.fromiter((self.score(seq) for seq in sequences), dtype=np.float64)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name})"
