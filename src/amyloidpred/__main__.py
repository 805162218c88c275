# amyloidpred/__main__.py
"""Command-line interface for amyloidpred."""

import argparse
import logging
import sys

from . import __version__
from .config import (
    PipelineConfig,
    PredictorConfig,
    InputConfig,
    OutputConfig,
    ParseMode,
)
from .errors import InputReadError, InvalidResidue, MissingHeader, NoRecordsFound
from .pipeline import PredictionPipeline


def setup_logging(verbose: bool = False) -> None:
    """Configure logging. Messages go to stderr, scores to stdout."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def positive_int(value: str) -> int:
    """argparse type for integers >= 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def non_negative_int(value: str) -> int:
    """argparse type for integers >= 0."""
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog='amyloidpred',
        description='CLI to perform amyloidogenesis prediction from protein sequences.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Score a single sequence given on the command line
  amyloidpred $'>sp|X|TEST protein\\nMREFTPT'

  # Score a single-record FASTA file
  amyloidpred -f protein.fasta

  # Score every record in a multi-record file, skipping malformed ones
  amyloidpred -f proteins.fasta --fuzzy --with-description
"""
    )

    parser.add_argument(
        'sequence',
        type=str,
        metavar='SEQUENCE',
        help='FASTA formatted string (or a path with --file)'
    )
    parser.add_argument(
        '-f', '--file',
        action='store_true',
        help='Treat SEQUENCE as a path to a FASTA file'
    )
    parser.add_argument(
        '--encoding',
        type=str,
        default='utf-8',
        help='Input file encoding (default: utf-8)'
    )

    # Parsing options
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        '--strict',
        dest='mode',
        action='store_const',
        const=ParseMode.STRICT.value,
        help='Require exactly one well-formed record (default)'
    )
    mode.add_argument(
        '--fuzzy',
        dest='mode',
        action='store_const',
        const=ParseMode.FUZZY.value,
        help='Score every well-formed record, ignoring anything else'
    )
    parser.set_defaults(mode=ParseMode.STRICT.value)

    parser.add_argument(
        '--max-sequences',
        type=positive_int,
        default=None,
        help='Maximum number of sequences to score'
    )

    # Output options
    parser.add_argument(
        '--precision',
        type=non_negative_int,
        default=4,
        help='Decimal places in printed scores (default: 4)'
    )
    parser.add_argument(
        '--with-description',
        action='store_true',
        help='Prefix each score with the record description'
    )
    parser.add_argument(
        '--progress',
        action='store_true',
        help='Show a progress bar on stderr'
    )

    # Other options
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Verbose output'
    )
    parser.add_argument(
        '--version',
        action='version',
        version='%(prog)s ' + __version__
    )

    return parser


def build_config(args: argparse.Namespace) -> PipelineConfig:
    """Build a PipelineConfig from parsed arguments."""
    return PipelineConfig(
        predictor=PredictorConfig(),
        input=InputConfig(
            mode=ParseMode(args.mode),
            encoding=args.encoding,
            max_sequences=args.max_sequences,
        ),
        output=OutputConfig(
            precision=args.precision,
            show_description=args.with_description,
            show_progress=args.progress,
        ),
    )


def main(args=None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(args)

    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    pipeline = PredictionPipeline(build_config(args))

    try:
        pipeline.run(args.sequence, from_file=args.file)
    except InputReadError as e:
        print(f"Error: cannot open/read file:\n{e}", file=sys.stderr)
        return 1
    except (MissingHeader, InvalidResidue) as e:
        print(f"Error: cannot parse <SEQUENCE> as FASTA\nFailed at: {e.location}", file=sys.stderr)
        logger.debug(str(e))
        return 1
    except NoRecordsFound as e:
        print("Error: no sequences found in <SEQUENCE>", file=sys.stderr)
        logger.debug(str(e))
        return 1
    except Exception as e:
        logger.error(f"Prediction failed: {e}")
        if args.verbose:
            raise
        return 1

    for line in pipeline.format_results():
        print(line)

    return 0


if __name__ == '__main__':
    sys.exit(main())
