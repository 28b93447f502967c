"""Raw HTTP request parsing.

Turns a raw request head (e.g. read off a proxy socket or pasted from an
intercepting tool) into a :class:`Request` holding the method, target and
headers.
"""

from __future__ import annotations

import logging

from httphead._tokens import ascii_lower, split_lines
from httphead.errors import MalformedHeader, MalformedRequestLine, NoRequestLine
from httphead.header import parse_header
from httphead.models import (
    ExtensionMethod,
    Header,
    HeaderDiagnostic,
    KnownMethod,
    Method,
    Request,
)

logger = logging.getLogger(__name__)

# Lowercased token -> known method. "header" is accepted as a legacy
# spelling of HEAD.
KNOWN_METHODS: dict[str, KnownMethod] = {
    "options": KnownMethod.OPTIONS,
    "get": KnownMethod.GET,
    "head": KnownMethod.HEAD,
    "header": KnownMethod.HEAD,
    "post": KnownMethod.POST,
    "put": KnownMethod.PUT,
    "delete": KnownMethod.DELETE,
    "trace": KnownMethod.TRACE,
}


def classify_method(token: str) -> Method:
    """Map a request-line token onto :data:`Method`, case-insensitively."""
    known = KNOWN_METHODS.get(ascii_lower(token))
    if known is not None:
        return known
    return ExtensionMethod(token)


def parse_request(raw: str | bytes, *, strict: bool = False) -> Request:
    """Parse a raw HTTP request head into its components.

    Handles:
      - Known methods in any letter case, plus extension methods
      - Target extraction (copied verbatim, no URI decoding)
      - Ordered header parsing of every line after the request line
      - Blank lines, which are skipped without a diagnostic
      - Malformed header lines, which are dropped and reported in
        ``Request.diagnostics`` unless *strict* is set

    Args:
        raw: The request text with CRLF line terminators. ``bytes`` are
            decoded as ISO-8859-1.
        strict: Raise on the first malformed header line instead of
            dropping it.

    Returns:
        A Request with method, target, headers and diagnostics.

    Raises:
        NoRequestLine: If the input is empty or blank.
        MalformedRequestLine: If the request line has no target.
        MalformedHeader: If *strict* is set and a header line is malformed.
    """
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("iso-8859-1")

    lines = split_lines(raw)
    if not any(lines):
        raise NoRequestLine()

    # --- Parse request line ---
    request_line = lines[0]
    tokens = request_line.split()
    if len(tokens) < 2:
        raise MalformedRequestLine(request_line)

    method = classify_method(tokens[0])
    target = tokens[1]

    # --- Parse headers ---
    headers: list[Header] = []
    diagnostics: list[HeaderDiagnostic] = []
    for number, line in enumerate(lines[1:], start=1):
        if not line:
            continue
        try:
            headers.append(parse_header(line))
        except MalformedHeader as exc:
            if strict:
                raise
            logger.warning(
                "Dropping malformed header on line %d (%s): %r",
                number,
                exc.reason,
                line,
            )
            diagnostics.append(HeaderDiagnostic(number, line, exc.reason))

    return Request(
        method=method,
        target=target,
        headers=tuple(headers),
        diagnostics=tuple(diagnostics),
    )


def load_request_file(filepath: str) -> str:
    """Read and return the contents of a raw request file.

    Args:
        filepath: Path to the raw request text file.

    Returns:
        The raw text content of the file.

    Raises:
        FileNotFoundError: If the file does not exist.
        OSError: If the file cannot be read.
    """
    # newline="" keeps CRLF terminators intact
    with open(filepath, "r", encoding="utf-8", newline="") as fh:
        return fh.read()
