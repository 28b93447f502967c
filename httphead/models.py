"""Value types produced by the request and header parsers.

``Method`` and ``HeaderName`` are tagged unions: a closed ``Enum`` of the
names the parser knows, plus a dataclass variant that carries the original
text of anything else. Both halves support ``match`` statements::

    match request.method:
        case KnownMethod.GET:
            ...
        case ExtensionMethod(token=token):
            ...
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Union

from requests.structures import CaseInsensitiveDict

from httphead._tokens import ascii_lower


class KnownMethod(enum.Enum):
    """Request methods recognized by the parser."""

    OPTIONS = "OPTIONS"
    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    TRACE = "TRACE"

    @property
    def token(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class ExtensionMethod:
    """A method token outside :class:`KnownMethod`, case preserved."""

    token: str

    def __str__(self) -> str:
        return self.token


Method = Union[KnownMethod, ExtensionMethod]


class KnownHeader(enum.Enum):
    """Header names recognized by the parser, valued by canonical text."""

    ACCEPT = "Accept"
    ACCEPT_CHARSET = "Accept-Charset"
    ACCEPT_ENCODING = "Accept-Encoding"
    HOST = "Host"
    REFERER = "Referer"
    USER_AGENT = "User-Agent"

    @property
    def text(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class CustomHeader:
    """A header name outside :class:`KnownHeader`, text kept as written."""

    name: str

    @property
    def text(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


HeaderName = Union[KnownHeader, CustomHeader]


@dataclass(frozen=True, slots=True)
class Header:
    """One parsed ``Name: value`` line."""

    name: HeaderName
    value: str

    def to_line(self) -> str:
        return f"{self.name.text}: {self.value}"


@dataclass(frozen=True, slots=True)
class HeaderDiagnostic:
    """A header line that was dropped from a leniently parsed request.

    ``line_number`` is zero-based and counts the request line as line 0.
    """

    line_number: int
    line: str
    reason: str


@dataclass(frozen=True, slots=True)
class Request:
    """A parsed request head.

    ``headers`` keeps input order. ``diagnostics`` lists the header lines
    that failed to parse and were left out; it is informational and does
    not take part in equality.
    """

    method: Method
    target: str
    headers: tuple[Header, ...] = ()
    diagnostics: tuple[HeaderDiagnostic, ...] = field(
        default=(), compare=False
    )

    def header(
        self, name: str | HeaderName, default: str | None = None
    ) -> str | None:
        """Return the value of the first header called *name*.

        The lookup is case-insensitive. *name* may be plain text or a
        :data:`HeaderName` variant.
        """
        wanted = ascii_lower(name if isinstance(name, str) else name.text)
        for hdr in self.headers:
            if ascii_lower(hdr.name.text) == wanted:
                return hdr.value
        return default

    def header_map(self) -> CaseInsensitiveDict:
        """Return the headers as a case-insensitive mapping.

        Repeated names collapse to the last value seen.
        """
        mapping: CaseInsensitiveDict = CaseInsensitiveDict()
        for hdr in self.headers:
            mapping[hdr.name.text] = hdr.value
        return mapping
