"""httphead: parse raw HTTP/1.x request heads into typed values."""

from httphead.errors import (
    MalformedHeader,
    MalformedRequestLine,
    NoRequestLine,
    ParseError,
)
from httphead.header import parse_header
from httphead.models import (
    CustomHeader,
    ExtensionMethod,
    Header,
    HeaderDiagnostic,
    HeaderName,
    KnownHeader,
    KnownMethod,
    Method,
    Request,
)
from httphead.parser import load_request_file, parse_request

__version__ = "0.1.0"

__all__ = [
    "CustomHeader",
    "ExtensionMethod",
    "Header",
    "HeaderDiagnostic",
    "HeaderName",
    "KnownHeader",
    "KnownMethod",
    "MalformedHeader",
    "MalformedRequestLine",
    "Method",
    "NoRequestLine",
    "ParseError",
    "Request",
    "load_request_file",
    "parse_header",
    "parse_request",
]
