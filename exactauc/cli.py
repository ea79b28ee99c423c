#!/usr/bin/env python3
"""
Compute the ROC AUC of a text file of ``ground_truth,prediction`` records.

Usage:
    exactauc scores.csv
    exactauc scores.tsv --delimiter $'\\t' --on-malformed skip
"""

import argparse
import sys
from typing import List, Optional

from .auc import exact_auc
from .config import (
    DEFAULT_DELIMITER,
    DEFAULT_MALFORMED_POLICY,
    EXIT_ALL_NEGATIVES,
    EXIT_ALL_POSITIVES,
    EXIT_INPUT_ERROR,
    EXIT_OK,
    MALFORMED_POLICIES,
)
from .errors import AllNegativesError, AllPositivesError
from .io import load_samples


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exactauc",
        description="Exact ROC AUC with integer trapezoidal integration",
    )
    parser.add_argument(
        "input_file",
        help="Text file with one 'ground_truth,prediction' record per line",
    )
    parser.add_argument(
        "--delimiter",
        default=DEFAULT_DELIMITER,
        help="Field separator (default: ',')",
    )
    parser.add_argument(
        "--on-malformed",
        choices=MALFORMED_POLICIES,
        default=DEFAULT_MALFORMED_POLICY,
        help="Stop at, skip or reject malformed records (default: stop)",
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=6,
        help="Decimal places of the printed AUC (default: 6)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point; returns the process exit status."""
    args = build_parser().parse_args(argv)

    try:
        samples = load_samples(
            args.input_file,
            delimiter=args.delimiter,
            on_malformed=args.on_malformed,
        )
    except OSError as e:
        print(f"couldn't open input file: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    except ValueError as e:
        print(f"invalid input file: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    print(f"data points read from input file: {len(samples)}")

    try:
        auc = exact_auc(samples)
    except AllNegativesError as e:
        print(e, file=sys.stderr)
        return EXIT_ALL_NEGATIVES
    except AllPositivesError as e:
        print(e, file=sys.stderr)
        return EXIT_ALL_POSITIVES
    except ValueError as e:
        print(f"invalid input file: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    print(f"AUC: {auc:.{args.precision}f}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
