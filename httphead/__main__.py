"""httphead: main entry point.

Ties together the CLI and parser modules: load a raw request, parse it
and print the structured result.
"""

import logging
import sys

from httphead.cli import STDIN, configure_logging, parse_cli
from httphead.errors import ParseError
from httphead.models import Request
from httphead.parser import load_request_file, parse_request

logger = logging.getLogger(__name__)


def normalize_newlines(text: str) -> str:
    """Convert bare LF terminators (as saved by most editors) to CRLF."""
    return text.replace("\r\n", "\n").replace("\n", "\r\n")


def print_request(request: Request) -> None:
    """Print a parsed request to stdout, one header per line."""
    print(f"Method : {request.method}")
    print(f"Target : {request.target}")
    print(f"Headers: {len(request.headers)}")
    for header in request.headers:
        print(f"    {header.to_line()}")


def main(argv: list[str] | None = None) -> int:
    """Run the httphead tool.

    Args:
        argv: Optional argument list (defaults to sys.argv).

    Returns:
        Exit code (0 = parsed, 2 = unreadable input or parse error).
    """
    args = parse_cli(argv)
    configure_logging(args.verbose)

    logger.debug("Loading raw request from: %s", args.request_file)
    try:
        if args.request_file == STDIN:
            raw_text = sys.stdin.read()
        else:
            raw_text = load_request_file(args.request_file)
    except OSError as exc:
        print(f"Error reading request: {exc}", file=sys.stderr)
        return 2

    try:
        request = parse_request(normalize_newlines(raw_text), strict=args.strict)
    except ParseError as exc:
        print(f"Error parsing request: {exc}", file=sys.stderr)
        return 2

    # Each dropped line has already been logged by the parser
    print_request(request)
    print(f"Dropped: {len(request.diagnostics)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
