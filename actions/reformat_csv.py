#!/usr/bin/env python3
"""
Rewrite a CSV resource in the canonical csvtable dialect.

**Purpose**: Loads a resource through the configured byte store, checks that
every row has one field per column, and writes it back out with canonical
quoting (only fields containing a comma or newline, or starting with a
quote, are quoted).

**Usage**:
    From project root:
    ```bash
    # Print canonical text to stdout
    python actions/reformat_csv.py data/people.csv

    # Write canonical text to another resource
    python actions/reformat_csv.py data/people.csv --output data/people_clean.csv

    # Exit 1 if the file is not already canonical (nothing is written)
    python actions/reformat_csv.py data/people.csv --check
    ```

**Exit codes**:
  - 0: Success (or already canonical with --check)
  - 1: --check found differences
  - 2: The resource could not be read, parsed or written
"""

import argparse
import sys
from pathlib import Path

# Ensure project root is on path for imports
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from csvtable.config.settings import get_settings
from csvtable.data.dataset import Dataset
from csvtable.data.errors import TableError
from csvtable.stores.factory import build_store
from csvtable.utils.logging_utils import setup_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Rewrite a CSV resource in the canonical csvtable dialect.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "source",
        help="Resource to read (a file path for the local store)",
    )
    parser.add_argument(
        "--output",
        "-o",
        default=None,
        help="Resource to write. Defaults to printing to stdout.",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Do not write; exit 1 if the source is not already canonical.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Main entrypoint.

    Steps:
      1. Load settings, configure logging and build the byte store
      2. Load and validate the source resource
      3. Compare or write the canonical text
    """
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
    except ValueError as e:
        print(f"ERROR: Invalid configuration: {e}", file=sys.stderr)
        return 2

    setup_logger(level=settings.log_level)

    with build_store(settings) as store:
        return _reformat(args, store)


def _reformat(args: argparse.Namespace, store) -> int:
    """Run steps 2 and 3 of main() against an open byte store."""
    try:
        source_text = store.read_all(args.source)
        dataset = Dataset.from_text(source_text)
    except TableError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    rows, cols = dataset.shape
    canonical = dataset.to_text()

    if args.check:
        if canonical == source_text:
            print(f"OK: {args.source} is canonical ({rows} rows x {cols} columns)")
            return 0
        print(f"DIFF: {args.source} is not canonical ({rows} rows x {cols} columns)")
        return 1

    if args.output is None:
        sys.stdout.write(canonical)
        if canonical:
            sys.stdout.write("\n")
        return 0

    try:
        dataset.save_to(args.output, store=store)
    except TableError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    print(f"Wrote {args.output} ({rows} rows x {cols} columns)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
