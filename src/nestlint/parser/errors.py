"""Errors raised while reading a stylesheet."""

from __future__ import annotations


class ParseError(Exception):
    """The stylesheet is not well formed.

    ``line`` and ``column`` are 1-based. Both are None when Lark could not
    place the error, which happens at end of input.
    """

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        source: str | None = None,
    ):
        super().__init__(message)
        self.line = line
        self.column = column
        self.source = source

    @property
    def location(self) -> str:
        """``source:line:column``, leaving out the parts that are unknown."""
        parts = [self.source or "<string>"]
        if self.line is not None:
            parts.append(str(self.line))
            if self.column is not None:
                parts.append(str(self.column))
        return ":".join(parts)
