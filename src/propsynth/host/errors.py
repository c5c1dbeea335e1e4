"""Declaration file errors."""

from __future__ import annotations


class ParseError(Exception):
    """Raised when declaration source cannot be parsed."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        path: str | None = None,
    ):
        self.line = line
        self.column = column
        self.path = path
        super().__init__(message)
