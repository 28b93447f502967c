"""Exceptions raised while parsing raw HTTP request text."""

from __future__ import annotations


class ParseError(ValueError):
    """Base class for every request or header parse failure."""


class MalformedHeader(ParseError):
    """A header line lacks a colon or has an empty name."""

    def __init__(self, line: str, reason: str) -> None:
        super().__init__(f"Malformed header ({reason}): {line!r}")
        self.line = line
        self.reason = reason


class MalformedRequestLine(ParseError):
    """The request line has fewer than two whitespace-delimited tokens."""

    def __init__(self, line: str) -> None:
        super().__init__(f"Malformed request line: {line!r}")
        self.line = line


class NoRequestLine(ParseError):
    """The input holds no request line at all."""

    def __init__(self) -> None:
        super().__init__("No request line in input")
