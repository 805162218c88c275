# amyloidpred/pipeline.py
"""Main prediction pipeline."""

from typing import List, Optional
import logging

import numpy as np
from tqdm import tqdm

from .config import PipelineConfig
from .io.fasta_parser import FastaParser, FastaRecord
from .io.reader import read_input
from .predictors import BasePredictor, PredictionResult, create_predictor

logger = logging.getLogger(__name__)


class PredictionPipeline:
    """
    Pipeline for scoring protein sequences.

    Handles:
    - Reading input from a file or a literal FASTA string
    - Parsing and validating records
    - Scoring each record with a predictor
    - Formatting scores for output
    """

    def __init__(
        self,
        config: Optional[PipelineConfig] = None,
        predictor: Optional[BasePredictor] = None
    ):
        """
        Initialize the prediction pipeline.

        Args:
            config: Pipeline configuration. Uses defaults if None.
            predictor: Predictor to use instead of the configured one.
        """
        self.config = config or PipelineConfig()
        self.predictor = predictor or create_predictor(self.config.predictor)

        self.records: List[FastaRecord] = []
        self.results: List[PredictionResult] = []

    def load_records(self, text: str) -> List[FastaRecord]:
        """
        Parse records from a FASTA text buffer.

        Args:
            text: FASTA formatted text

        Returns:
            List of FastaRecord, capped at max_sequences if configured
        """
        self.records = []
        records = FastaParser.parse(text, self.config.input.mode)

        max_sequences = self.config.input.max_sequences
        if max_sequences is not None and 0 < max_sequences < len(records):
            logger.info(f"Keeping first {max_sequences} of {len(records)} sequences")
            records = records[:max_sequences]

        self.records = records
        logger.info(f"Loaded {len(self.records)} sequences")
        return self.records

    def load_source(self, source: str, from_file: bool = False) -> List[FastaRecord]:
        """Read source (a path if from_file, else literal FASTA) and parse it."""
        text = read_input(source, from_file=from_file, encoding=self.config.input.encoding)
        return self.load_records(text)

    def predict(self, records: Optional[List[FastaRecord]] = None) -> List[PredictionResult]:
        """
        Score records in input order.

        Args:
            records: Records to score. Uses loaded records if None.

        Returns:
            List of PredictionResult objects
        """
        records = records if records is not None else self.records
        if not records:
            raise ValueError("No records loaded. Call load_records first.")

        logger.debug(f"Scoring {len(records)} sequences with {self.predictor!r}")

        self.results = [
            PredictionResult(record=record, score=float(self.predictor.score(record.sequence)))
            for record in tqdm(
                records,
                desc="Scoring",
                unit="seq",
                disable=not self.config.output.show_progress,
            )
        ]
        return self.results

    def scores(self) -> np.ndarray:
        """Return the scores of the last prediction run as an array."""
        return np.array([r.score for r in self.results], dtype=np.float64)

    def format_results(self, results: Optional[List[PredictionResult]] = None) -> List[str]:
        """Render one output line per result."""
        results = results if results is not None else self.results
        precision = self.config.output.precision
        if precision < 0:
            raise ValueError(f"precision must be non-negative, got {precision}")

        lines = []
        for result in results:
            score = f"{result.score:.{precision}f}"
            if self.config.output.show_description:
                lines.append(f"{result.description}\t{score}")
            else:
                lines.append(score)
        return lines

    def run(self, source: str, from_file: bool = False) -> List[PredictionResult]:
        """
        Run the full pipeline.

        Args:
            source: Path to a FASTA file if from_file, else FASTA text
            from_file: Whether source names a file

        Returns:
            List of PredictionResult objects
        """
        self.load_source(source, from_file=from_file)
        return self.predict()
