"""Structured validation issues and the exception that carries them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from specyml.exceptions.base import SpecymlError


@dataclass(frozen=True)
class ValidationIssue:
    """A single validation problem with a stable code and key path."""

    code: str
    path: str
    message: str
    hint: str = ""
    line: int | None = None
    column: int | None = None

    def format(self) -> str:
        """Format as a human-readable single-line message."""
        location = self.path or "<root>"
        if self.line is not None:
            location = f"{location} (line {self.line}"
            if self.column is not None:
                location = f"{location}, column {self.column}"
            location = f"{location})"
        parts = [f"[{self.code}]", f"{location}:", self.message]
        if self.hint:
            parts.append(f"({self.hint})")
        return " ".join(parts)


def sort_issues(issues: Iterable[ValidationIssue]) -> list[ValidationIssue]:
    """Sort issues deterministically by code, path, line."""
    return sorted(issues, key=lambda i: (i.code, i.path, i.line or 0))


def format_issues(issues: Iterable[ValidationIssue]) -> str:
    """Format issues as a multi-line string."""
    return "\n".join(issue.format() for issue in sort_issues(issues))


class ValidationError(SpecymlError, ValueError):
    """Raised when parsed values are incompatible with the target schema."""

    def __init__(self, issues: Iterable[ValidationIssue]) -> None:
        self.issues: tuple[ValidationIssue, ...] = tuple(sort_issues(issues))
        count = len(self.issues)
        noun = "issue" if count == 1 else "issues"
        super().__init__(f"{count} validation {noun}:\n{format_issues(self.issues)}")
