# amyloidpred/errors.py
"""Exception types raised by amyloidpred."""

from typing import Optional


class AmyloidPredError(Exception):
    """Base class for all amyloidpred errors."""


class InputReadError(AmyloidPredError):
    """Input file could not be opened, read or decoded."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class FastaParseError(AmyloidPredError):
    """
    Input text could not be parsed as FASTA.

    Attributes:
        fragment: The piece of input that failed to parse (may be empty)
        line: 1-based line number of the fragment, if known
    """

    def __init__(self, message: str, fragment: str = "", line: Optional[int] = None):
        self.fragment = fragment
        self.line = line
        super().__init__(message)

    @property
    def location(self) -> str:
        """Fragment prefixed with its line number, for display."""
        if self.line is None:
            return self.fragment
        return f"line {self.line}: {self.fragment}"


class NoRecordsFound(FastaParseError):
    """Zero FASTA records were recognised in the input."""


class MissingHeader(NoRecordsFound):
    """Sequence content without a leading '>' header line."""


class InvalidResidue(FastaParseError):
    """Sequence content contains characters outside the residue alphabet."""

    def __init__(self, message: str, fragment: str = "", line: Optional[int] = None,
                 invalid: str = ""):
        self.invalid = invalid
        super().__init__(message, fragment=fragment, line=line)
