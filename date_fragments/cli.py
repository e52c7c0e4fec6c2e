#!/usr/bin/env python3
"""
Command-line interface for date-fragments.

Reads lines from stdin and prints the date recognized at the front of each:

    $ date-fragments
    Today is: 2024-08-04
    + 10
    recognized: 2024-08-14
    22-04
    recognized: 2024-04-22
    yesterday
    recognized: 2024-08-03
"""

import argparse
import os
import sys
import logging
from typing import Callable, Iterable, Optional, TextIO

from date_fragments import quick
from date_fragments.combinators import alt
from date_fragments.config import load_config
from date_fragments.errors import DateParseError
from date_fragments.i18n import LOCALES, ORDERS, get_bundle
from date_fragments.types import Clock, local_today

logger = logging.getLogger("date_fragments.cli")


def setup_logging(debug=False, level_name="INFO"):
    """Set up logging configuration."""
    level = logging.DEBUG if debug else getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler()
        ]
    )


def versatile_parser(locale: str = "en", order: str = "dmy") -> Callable:
    """
    Quick offsets first, then the locale bundle

    The order matters: "+10" would otherwise be taken by the day-only parser
    of the bundle as day 1 followed by "0".
    """
    return alt(quick.bundle, get_bundle(locale, order))


def run(lines: Iterable[str], parser: Callable, clock: Clock = local_today,
        out: Optional[TextIO] = None) -> int:
    """
    Recognize every line and report the result

    Returns:
        Number of lines that could not be recognized
    """
    out = out or sys.stdout
    failures = 0
    print(f"Today is: {clock().isoformat()}", file=out)

    for line in lines:
        line = line.rstrip('\r\n')
        try:
            rest, recognized = parser(line, clock=clock)
        except DateParseError as e:
            failures += 1
            logger.debug(f"Failed to recognize {line!r}: {e!r}")
            print(f"unable to recognize the input as a date: {e}", file=out)
            continue
        if rest:
            logger.info(f"Unconsumed input after date: {rest!r}")
        print(f"recognized: {recognized.isoformat()}", file=out)

    return failures


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(description='Recognize dates in text fragments read from stdin')
    parser.add_argument('--locale', choices=LOCALES, help='Word table to use (default from config)')
    parser.add_argument('--order', choices=ORDERS, help='Numeric field order (default from config)')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    parser.add_argument('--config', help='Path to config file')

    args = parser.parse_args(argv)

    if args.config and not os.path.exists(args.config):
        print(f"Config file not found: {args.config}", file=sys.stderr)
        return 1

    config = load_config(args.config)

    # Set up logging
    setup_logging(args.debug, config["log_level"])

    locale = args.locale or config["locale"]
    order = args.order or config["order"]

    try:
        date_parser = versatile_parser(locale, order)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 2

    logger.debug(f"Using locale {locale} with {order} order")

    try:
        run(sys.stdin, date_parser)
    except KeyboardInterrupt:
        print("\nStopped by user")
    return 0


if __name__ == '__main__':
    sys.exit(main())
