"""
=============================================================================
MERGESORT CLI ENTRY POINT
=============================================================================

Sort values from the command line or from stdin.

=============================================================================
USAGE
=============================================================================

    # Sort integers given as arguments
    python -m mergesort 3 1 2

    # Read whitespace-separated values from stdin
    seq 50 -1 1 | python -m mergesort

    # Sort words
    python -m mergesort --type str pear apple fig

    # Pick a merge strategy and show statistics
    python -m mergesort --strategy lazy --stats 5 4 3 2 1

    # Double-check the result against the sort properties
    python -m mergesort --verify 9 8 7

=============================================================================
EXIT CODES
=============================================================================

    0   sorted (and verified, with --verify)
    1   sort failed (e.g. recursion limit) or verification failed
    2   bad command line / unparsable value

=============================================================================
"""

import argparse
import json
import logging
import sys

from . import __version__
from .config import LOG_FORMATS, LOG_LEVELS, SortConfig, setup_logging
from .core.merge import MergeStrategy
from .errors import MergeSortError
from .sorter import sort_with_stats
from .verify import is_permutation, is_sorted


logger = logging.getLogger("mergesort.cli")

VALUE_TYPES = {
    "int": int,
    "float": float,
    "str": str,
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate from main() for testing)."""
    parser = argparse.ArgumentParser(
        prog="mergesort",
        description="Stable merge sort with selectable merge strategies",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m mergesort 3 1 2                     # 1 2 3
  echo "b c a" | python -m mergesort --type str # a b c
  python -m mergesort --strategy recursive 2 1  # textbook recursion
  python -m mergesort --stats 5 4 3 2 1         # stats on stderr
        """
    )

    # ─────────────────────────────────────────────────────────────────────
    # INPUT
    # ─────────────────────────────────────────────────────────────────────

    parser.add_argument(
        "values",
        nargs="*",
        help="Values to sort (default: read whitespace-separated values from stdin)"
    )

    parser.add_argument(
        "--type", "-t",
        choices=sorted(VALUE_TYPES),
        default="int",
        help="Type to convert values to before sorting (default: int)"
    )

    # ─────────────────────────────────────────────────────────────────────
    # ALGORITHM
    # ─────────────────────────────────────────────────────────────────────

    parser.add_argument(
        "--strategy", "-s",
        choices=[s.value for s in MergeStrategy],
        default=None,
        help="Merge strategy (default: $MERGESORT_STRATEGY or iterative)"
    )

    # ─────────────────────────────────────────────────────────────────────
    # OUTPUT
    # ─────────────────────────────────────────────────────────────────────

    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print sort statistics to stderr"
    )

    parser.add_argument(
        "--verify",
        action="store_true",
        help="Check that the output is a sorted permutation of the input"
    )

    parser.add_argument(
        "--log-level", "-l",
        choices=list(LOG_LEVELS),
        default=None,
        help="Logging level (default: $MERGESORT_LOG_LEVEL or INFO)"
    )

    parser.add_argument(
        "--log-format",
        choices=list(LOG_FORMATS),
        default=None,
        help="Format of the statistics record, for --stats and the log (default: text)"
    )

    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"mergesort {__version__}"
    )

    return parser


def main(argv=None) -> int:
    """
    Main CLI entry point.

    Returns the process exit code, so tests can call it directly.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    # =========================================================================
    # CREATE CONFIGURATION
    # =========================================================================
    # Environment first, then CLI flags on top

    config = SortConfig.from_env()
    if args.strategy:
        config.strategy = args.strategy
    if args.log_level:
        config.log_level = args.log_level
    if args.log_format:
        config.log_format = args.log_format

    try:
        config.validate()
    except ValueError as e:
        parser.error(str(e))

    setup_logging(config)

    # =========================================================================
    # READ INPUT
    # =========================================================================

    raw_values = args.values if args.values else sys.stdin.read().split()
    convert = VALUE_TYPES[args.type]
    try:
        values = [convert(v) for v in raw_values]
    except ValueError as e:
        parser.error(f"cannot convert value to {args.type}: {e}")

    # =========================================================================
    # SORT
    # =========================================================================

    try:
        result, stats = sort_with_stats(values, config=config)
    except MergeSortError as e:
        logger.error("Sort failed: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(" ".join(str(v) for v in result))

    if args.stats:
        if config.log_format == "json":
            print(json.dumps(stats.to_dict()), file=sys.stderr)
        else:
            print(stats.to_text(), file=sys.stderr)

    if args.verify:
        if not (is_sorted(result) and is_permutation(values, result)):
            logger.error("Verification failed for %d values", len(values))
            print("Error: verification failed", file=sys.stderr)
            return 1
        logger.info("Verified %d values", len(values))

    return 0


# =============================================================================
# ENTRY POINT
# =============================================================================
# This allows running: python -m mergesort

if __name__ == "__main__":
    sys.exit(main())
