# amyloidpred/config.py
"""Configuration for amyloidpred."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ParseMode(Enum):
    """FASTA parsing strictness."""
    STRICT = "strict"  # exactly one record, any bad character fails
    FUZZY = "fuzzy"    # every well-formed record, noise skipped


class PredictorType(Enum):
    """Available scoring backends."""
    CONSTANT = "constant"


@dataclass
class PredictorConfig:
    """Configuration for the scoring backend."""
    predictor_type: PredictorType = PredictorType.CONSTANT
    constant_value: float = 3.14159


@dataclass
class InputConfig:
    """Configuration for reading and parsing input."""
    mode: ParseMode = ParseMode.STRICT
    encoding: str = "utf-8"
    max_sequences: Optional[int] = None


@dataclass
class OutputConfig:
    """Configuration for score output."""
    precision: int = 4
    show_description: bool = False
    show_progress: bool = False


@dataclass
class PipelineConfig:
    """Main configuration for the prediction pipeline."""
    predictor: PredictorConfig = field(default_factory=PredictorConfig)
    input: InputConfig = field(default_factory=InputConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
