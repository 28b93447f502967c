"""Header line parsing.

Converts a single raw ``Name: value`` line into a :class:`Header`, folding
the name against the table of known header names.
"""

from __future__ import annotations

from httphead._tokens import ascii_lower, split_field
from httphead.errors import MalformedHeader
from httphead.models import CustomHeader, Header, HeaderName, KnownHeader

# Lowercased wire name -> known header
KNOWN_HEADERS: dict[str, KnownHeader] = {
    "accept": KnownHeader.ACCEPT,
    "accept-charset": KnownHeader.ACCEPT_CHARSET,
    "accept-encoding": KnownHeader.ACCEPT_ENCODING,
    "host": KnownHeader.HOST,
    "user-agent": KnownHeader.USER_AGENT,
    "referer": KnownHeader.REFERER,
}


def classify_header_name(name: str) -> HeaderName:
    """Map a trimmed header name onto :data:`HeaderName`.

    Known names match case-insensitively. Anything else comes back as a
    :class:`CustomHeader` carrying *name* unchanged.
    """
    known = KNOWN_HEADERS.get(ascii_lower(name))
    if known is not None:
        return known
    return CustomHeader(name)


def parse_header(line: str) -> Header:
    """Parse one header line.

    The line is split on its first colon only, so values such as
    ``http://example.com`` or ``session=a:b`` survive intact. Both the name
    and the value are trimmed; whitespace inside the value is kept.

    Args:
        line: A single header line without its CRLF terminator.

    Returns:
        The parsed :class:`Header`.

    Raises:
        MalformedHeader: If the line has no colon or an empty name.
    """
    parts = split_field(line)
    if len(parts) != 2:
        raise MalformedHeader(line, "no colon")

    name, value = parts
    if not name:
        raise MalformedHeader(line, "empty name")

    return Header(name=classify_header_name(name), value=value)
