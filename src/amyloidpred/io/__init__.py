# src/amyloidpred/io/__init__.py
"""Input/Output utilities for amyloidpred."""

from .fasta_parser import FastaParser, FastaRecord, RESIDUES, parse_fasta
from .reader import read_input, read_text

__all__ = [
    "FastaParser",
    "FastaRecord",
    "RESIDUES",
    "parse_fasta",
    "read_input",
    "read_text",
]
