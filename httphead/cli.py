"""Command-line interface for inspecting raw HTTP request files."""

import argparse
import logging
import os
import sys

from httphead import __version__

LOG_FORMAT = "[%(levelname)s] %(message)s"

STDIN = "-"


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser for the httphead CLI."""
    parser = argparse.ArgumentParser(
        prog="httphead",
        description=(
            "httphead v{ver}: parse a raw HTTP/1.x request head and print "
            "its method, target and headers.\n\n"
            "Header lines that cannot be parsed are dropped and reported "
            "on stderr unless --strict is given."
        ).format(ver=__version__),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  httphead request.txt\n"
            "  printf 'GET / HTTP/1.1\\r\\nHost: x\\r\\n' | httphead\n"
            "  httphead request.txt --strict -v\n"
        ),
    )

    parser.add_argument(
        "request_file",
        nargs="?",
        default=STDIN,
        help="Path to a raw HTTP request file ('-' or omitted reads stdin).",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=False,
        help="Fail on the first malformed header line instead of dropping it.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate parsed CLI arguments.

    Raises:
        SystemExit: If the request file does not exist or is not readable.
    """
    if args.request_file == STDIN:
        return

    if not os.path.isfile(args.request_file):
        print(
            f"Error: Request file not found: '{args.request_file}'",
            file=sys.stderr,
        )
        sys.exit(1)

    if not os.access(args.request_file, os.R_OK):
        print(
            f"Error: Request file is not readable: '{args.request_file}'",
            file=sys.stderr,
        )
        sys.exit(1)


def configure_logging(verbose: bool) -> None:
    """Install a stderr handler on the root logger."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def parse_cli(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse and validate command-line arguments.

    Args:
        argv: Optional list of arguments (defaults to sys.argv).

    Returns:
        Parsed and validated argument namespace.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    validate_args(args)
    return args
