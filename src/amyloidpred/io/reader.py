# io/reader.py
"""Reading FASTA input from files or command-line strings."""

from pathlib import Path
import gzip
import logging

from ..errors import InputReadError

logger = logging.getLogger(__name__)


def read_text(path: str, encoding: str = "utf-8") -> str:
    """
    Read a whole text file, transparently decompressing '.gz' files.

    Args:
        path: Path to the input file
        encoding: Text encoding of the file

    Returns:
        File contents as a string

    Raises:
        InputReadError: File is missing, unreadable or not valid text
    """
    file_path = Path(path)

    if file_path.suffix == '.gz':
        opener = gzip.open
    else:
        opener = open

    try:
        with opener(file_path, 'rt', encoding=encoding) as f:
            text = f.read()
    except (OSError, EOFError, UnicodeDecodeError) as e:
        raise InputReadError(str(path), str(e)) from e

    logger.debug(f"Read {len(text)} characters from {path}")
    return text


def read_input(source: str, from_file: bool = False, encoding: str = "utf-8") -> str:
    """Return source itself, or the contents of the file it names."""
    if from_file:
        return read_text(source, encoding=encoding)
    return source
