"""Parsing-related exceptions."""

from __future__ import annotations

from specyml.exceptions.base import SpecymlError


class ParseError(SpecymlError, ValueError):
    """Raised when YAML text is malformed or has the wrong root shape."""

    def __init__(self, message: str, *, line: int | None = None, column: int | None = None) -> None:
        self.message = message
        self.line = line
        self.column = column
        location = ""
        if line is not None:
            location = f"line {line}"
            if column is not None:
                location = f"{location}, column {column}"
            location = f" ({location})"
        super().__init__(f"{message}{location}")
