#!/usr/bin/env python3
"""
Main entry point for sysfetch.
"""

import os
import sys
import argparse
import logging

from .modules import get_all_modules
from .ui.report import FetchReport, BANNER_LAYOUTS

logger = logging.getLogger("sysfetch")


def parse_arguments(argv=None):
    """Parse command line arguments."""
    default_banner = os.environ.get("SYSFETCH_BANNER", "none")
    if default_banner not in BANNER_LAYOUTS:
        default_banner = "none"

    parser = argparse.ArgumentParser(description="Print a short summary of this machine")
    parser.add_argument("-b", "--banner", choices=BANNER_LAYOUTS, default=default_banner,
                        help="Show the ASCII banner above or beside the facts")
    parser.add_argument("-d", "--debug", action="store_true", help="Log skipped facts to stderr")
    parser.add_argument("--version", action="store_true", help="Show version information")
    return parser.parse_args(argv)


def setup_logging(debug: bool):
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True
    )


def show_version():
    """Show version information."""
    from . import __version__
    print(f"sysfetch version {__version__}")


def main(argv=None):
    """Main function."""
    args = parse_arguments(argv)

    if args.version:
        show_version()
        sys.exit(0)

    setup_logging(args.debug)

    try:
        report = FetchReport(get_all_modules(), banner=args.banner)
        print(report.generate())
        print()
    except KeyboardInterrupt:
        logger.warning("Operation cancelled by user.")
        sys.exit(0)


if __name__ == "__main__":
    main()
