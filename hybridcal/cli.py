"""Command-line demonstration: count the days between two dates.

Usage::

    python -m hybridcal 1582-10-04 1582-10-15
    October 4, 1582 - October 15, 1582: 1 days
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from hybridcal.arithmetic.ops import days_between
from hybridcal.errors import HybridCalError
from hybridcal.format.iso8601 import parse_date

logger = logging.getLogger(__name__)

DEFAULT_FIRST = "2000-02-29"
DEFAULT_LAST = "2001-02-28"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hybridcal",
        description=(
            "Count the days between two dates (Julian before 1582-10-15, "
            "Gregorian after, negative years are BC)."
        ),
    )
    parser.add_argument(
        "first", nargs="?", default=DEFAULT_FIRST,
        help=f"Start date as YYYY-MM-DD (default {DEFAULT_FIRST})",
    )
    parser.add_argument(
        "last", nargs="?", default=DEFAULT_LAST,
        help=f"End date as YYYY-MM-DD (default {DEFAULT_LAST})",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        first = parse_date(args.first)
        last = parse_date(args.last)
        days = days_between(first, last)
    except HybridCalError as exc:
        logger.debug("Rejected input %r, %r", args.first, args.last)
        print(exc, file=sys.stderr)
        return 1

    print(f"{first} - {last}: {days} days")
    return 0


if __name__ == "__main__":
    sys.exit(main())
