"""Tokenization helpers shared by the header and request parsers."""

from __future__ import annotations

CRLF = "\r\n"

_ASCII_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_ASCII_FOLD = str.maketrans(_ASCII_UPPER, _ASCII_UPPER.lower())


def ascii_lower(text: str) -> str:
    """Lowercase ASCII letters only; other characters pass through."""
    return text.translate(_ASCII_FOLD)


def split_lines(raw: str) -> list[str]:
    """Split *raw* on CRLF and trim surrounding whitespace from each line."""
    return [line.strip() for line in raw.split(CRLF)]


def split_field(line: str) -> list[str]:
    """Split *line* on its first colon and trim both parts.

    Returns one part when the line holds no colon.
    """
    return [part.strip() for part in line.split(":", 1)]
