"""Shared plumbing for the tutorial programs in scripts/."""

import argparse
import logging
import sys

from cvtutorials.image_io import ImageReadError, ImageWriteError
from cvtutorials.persistence import FileStorageError

# Errors a tutorial program reports to the user before exiting with status 1.
TUTORIAL_ERRORS = (
    ValueError,
    OSError,
    ImageReadError,
    ImageWriteError,
    FileStorageError,
)


def make_parser(description: str, display: bool = True) -> argparse.ArgumentParser:
    """Create an argument parser with the flags every program shares."""
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    if display:
        parser.add_argument(
            "--no-display",
            action="store_true",
            help="Do not open any windows",
        )
    return parser


def parse_args(
    parser: argparse.ArgumentParser, args: list[str] | None
) -> argparse.Namespace:
    """Parse the command line and configure logging."""
    parsed = parser.parse_args(args)
    logging.basicConfig(level=getattr(logging, parsed.log_level))
    return parsed


def print_error(message: object) -> int:
    """Report an error on standard error and return the failing exit status."""
    print(f"\nERROR: {message}", file=sys.stderr)
    return 1
