"""
Command line entry point.

Usage:
    policycheck passwords <file> [--skip-malformed]
    policycheck expenses <file> [--target N] [--skip-malformed]

Prints "Part 1" / "Part 2" results to stdout. A missing file, a malformed
line or an invalid POLICYCHECK_* setting aborts the run with exit status 1
and no partial output.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import LOG_FORMAT, Settings, load_settings
from .decode import decode_input, split_lines
from .errors import ConfigError, ParseError
from .expenses import find_product, load_numbers
from .models import ValidationMode
from .records import count_valid, load_records
from .rules import EXPENSE_COMBINATION_SIZES

logger = logging.getLogger(__name__)


def read_lines(path: str) -> List[str]:
    return split_lines(decode_input(Path(path).read_bytes()))


def run_passwords(args: argparse.Namespace, settings: Settings) -> List[str]:
    records, _ = load_records(read_lines(args.file), skip_malformed=args.skip_malformed)
    logger.info("loaded %d records from %s", len(records), args.file)
    return [
        f"Part 1: {count_valid(records, ValidationMode.count)}",
        f"Part 2: {count_valid(records, ValidationMode.position)}",
    ]


def run_expenses(args: argparse.Namespace, settings: Settings) -> List[str]:
    target = args.target if args.target is not None else settings.expense_target
    numbers, _ = load_numbers(read_lines(args.file), skip_malformed=args.skip_malformed)
    logger.info("loaded %d entries from %s", len(numbers), args.file)
    out = []
    for part, size in enumerate(EXPENSE_COMBINATION_SIZES, start=1):
        product = find_product(numbers, size, target)
        out.append(f"Part {part}: {product if product is not None else 'none'}")
    return out


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="policycheck", description="Puzzle input checker")
    sub = parser.add_subparsers(dest="command", required=True)

    pw = sub.add_parser("passwords", help="Count records valid under each password policy")
    pw.add_argument("file")
    pw.add_argument("--skip-malformed", action="store_true",
                    help="Skip malformed lines instead of aborting")
    pw.set_defaults(func=run_passwords)

    ex = sub.add_parser("expenses", help="Multiply expense entries summing to a target")
    ex.add_argument("file")
    ex.add_argument("--target", type=int, default=None,
                    help="Sum to search for (default: POLICYCHECK_EXPENSE_TARGET or 2020)")
    ex.add_argument("--skip-malformed", action="store_true",
                    help="Skip non-integer lines instead of aborting")
    ex.set_defaults(func=run_expenses)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except ConfigError as exc:
        logging.basicConfig(format=LOG_FORMAT)
        logger.error("%s", exc)
        return 1
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    try:
        lines = args.func(args, settings)
    except (OSError, ParseError, UnicodeDecodeError) as exc:
        logger.error("%s", exc)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
