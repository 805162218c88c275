# amyloidpred/__init__.py
"""amyloidpred - amyloidogenesis prediction from protein FASTA sequences."""

__version__ = "0.1.0"

from .config import (
    PipelineConfig,
    PredictorConfig,
    InputConfig,
    OutputConfig,
    ParseMode,
    PredictorType,
)
from .errors import (
    AmyloidPredError,
    InputReadError,
    FastaParseError,
    NoRecordsFound,
    MissingHeader,
    InvalidResidue,
)
from .io.fasta_parser import FastaParser, FastaRecord, parse_fasta
from .pipeline import PredictionPipeline
from .predictors import (
    BasePredictor,
    PredictionResult,
    ConstantPredictor,
    CallablePredictor,
    create_predictor,
)

__all__ = [
    # Config
    "PipelineConfig",
    "PredictorConfig",
    "InputConfig",
    "OutputConfig",
    "ParseMode",
    "PredictorType",
    # Errors
    "AmyloidPredError",
    "InputReadError",
    "FastaParseError",
    "NoRecordsFound",
    "MissingHeader",
    "InvalidResidue",
    # IO
    "FastaParser",
    "FastaRecord",
    "parse_fasta",
    # Pipeline
    "PredictionPipeline",
    # Predictors
    "BasePredictor",
    "PredictionResult",
    "ConstantPredictor",
    "CallablePredictor",
    "create_predictor",
]
