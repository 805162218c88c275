# io/fasta_parser.py
"""FASTA text parsing and validation."""

from dataclasses import dataclass
from typing import Iterator, List, Tuple, Union
import logging
import re

from ..config import ParseMode
from ..errors import InvalidResidue, MissingHeader, NoRecordsFound

logger = logging.getLogger(__name__)

# NCBI amino acid codes: A-Z without J and O, plus '*' (stop) and '-' (gap)
RESIDUES = frozenset("ABCDEFGHIKLMNPQRSTUVWXYZ*-")

_RESIDUE_CLASS = r"A-IK-NP-Z*\-"
_INVALID_RE = re.compile(rf"[^{_RESIDUE_CLASS}]")
_RECORD_RE = re.compile(
    rf"^(>[^\n]*)\n((?:[{_RESIDUE_CLASS}]+(?:\n|$))+)",
    re.MULTILINE,
)
_HEADER_ID_RE = re.compile(r"^(\S+)")


def _invalid_characters(line: str) -> str:
    """Return the sorted unique characters of line outside the alphabet."""
    return "".join(sorted(set(_INVALID_RE.findall(line))))


def _normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


@dataclass(frozen=True)
class FastaRecord:
    """A single validated FASTA record."""
    description: str  # header line, '>' marker included
    sequence: str

    def __post_init__(self):
        if not self.sequence:
            raise InvalidResidue(
                f"Empty sequence for {self.description!r}",
                fragment=self.description,
            )
        invalid = _invalid_characters(self.sequence)
        if invalid:
            raise InvalidResidue(
                f"Invalid characters {invalid!r} in sequence {self.description!r}",
                fragment=self.sequence,
                invalid=invalid,
            )

    @property
    def id(self) -> str:
        m = _HEADER_ID_RE.match(self.description.lstrip(">").strip())
        return m.group(1) if m else "seq"

    def __len__(self) -> int:
        return len(self.sequence)


class FastaParser:
    """Parse FASTA formatted text into records."""

    @classmethod
    def parse(
        cls,
        text: str,
        mode: Union[ParseMode, str] = ParseMode.STRICT
    ) -> List[FastaRecord]:
        """
        Parse a FASTA text buffer.

        Args:
            text: Raw text, e.g. file contents or a command-line argument
            mode: STRICT requires exactly one well-formed record,
                  FUZZY extracts every well-formed record and skips the rest

        Returns:
            List of FastaRecord in document order (never empty)

        Raises:
            NoRecordsFound: No record could be recognised
            MissingHeader: Strict mode, content does not start with '>'
            InvalidResidue: Strict mode, a sequence line has invalid characters
        """
        mode = ParseMode(mode)
        text = _normalize_newlines(text)

        if mode is ParseMode.STRICT:
            records = [cls._parse_strict(text)]
        else:
            records = list(cls.iterate(text))
            if not records:
                fragment = next((ln for ln in text.split("\n") if ln.strip()), "")
                raise NoRecordsFound("No FASTA sequences found", fragment=fragment)

        logger.debug(f"Parsed {len(records)} record(s) in {mode.value} mode")
        return records

    @classmethod
    def iterate(cls, text: str) -> Iterator[FastaRecord]:
        """
        Iterate over every well-formed record in text, skipping noise.

        Yields:
            FastaRecord objects in document order
        """
        text = _normalize_newlines(text)
        last_end = 0

        for match in _RECORD_RE.finditer(text):
            skipped = text[last_end:match.start()]
            if skipped.strip():
                logger.debug(f"Skipping unmatched text: {skipped.strip()!r}")
            last_end = match.end()

            yield FastaRecord(
                description=match.group(1),
                sequence=match.group(2).replace("\n", ""),
            )

        if text[last_end:].strip():
            logger.debug(f"Skipping unmatched text: {text[last_end:].strip()!r}")

    @classmethod
    def _parse_strict(cls, text: str) -> FastaRecord:
        """Parse text that must hold exactly one record."""
        lines: List[Tuple[int, str]] = list(enumerate(text.split("\n"), start=1))

        # Blank lines around the record are tolerated
        while lines and not lines[0][1].strip():
            lines.pop(0)
        while lines and not lines[-1][1].strip():
            lines.pop()

        if not lines:
            raise NoRecordsFound("Input is empty")

        header_no, header = lines[0]
        if not header.startswith(">"):
            raise MissingHeader(
                "Sequence without a '>' header line",
                fragment=header,
                line=header_no,
            )

        body = lines[1:]
        if not body:
            raise NoRecordsFound(
                f"No sequence after header {header!r}",
                fragment=header,
                line=header_no,
            )

        for line_no, line in body:
            if not line:
                raise InvalidResidue(
                    "Blank line inside sequence block",
                    fragment=line,
                    line=line_no,
                )
            invalid = _invalid_characters(line)
            if invalid:
                raise InvalidResidue(
                    f"Invalid characters {invalid!r} in sequence line",
                    fragment=line,
                    line=line_no,
                    invalid=invalid,
                )

        return FastaRecord(
            description=header,
            sequence="".join(line for _, line in body),
        )


def parse_fasta(text: str, mode: Union[ParseMode, str] = ParseMode.STRICT) -> List[FastaRecord]:
    """Shortcut for FastaParser.parse."""
    return FastaParser.parse(text, mode)
