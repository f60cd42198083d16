from __future__ import annotations


class SpanError(Exception):
    """Base class for span errors raised by commentspans."""


class InvalidSpanError(SpanError, ValueError):
    """A span range is malformed or does not fit the text it describes."""

    def __init__(self, message: str, start: int | None = None, end: int | None = None):
        super().__init__(message)
        self.start = start
        self.end = end
