"""Reading typed values from YAML text."""

from __future__ import annotations

import dataclasses
import logging
from typing import Any

from specyml.constants.validation import SPEC001, SPEC002
from specyml.exceptions import ParseError, ValidationError
from specyml.exceptions.validation import ValidationIssue, sort_issues
from specyml.loading.binder import bind_values, collect
from specyml.loading.parser import key_locations, load_yaml, parse_text
from specyml.schema.defaults import materialize
from specyml.schema.model import SpecSchema
from specyml.schema.reflector import as_schema

logger = logging.getLogger(__name__)


def load_text(text: str, spec: SpecSchema | type, *, strict: bool = False) -> dict[str, Any]:
    """Parse and bind YAML text, returning values keyed by field name."""
    raw = parse_text(text)
    try:
        return bind_values(raw, spec, strict=strict)
    except ValidationError as exc:
        raise ValidationError(_locate(exc.issues, text)) from None


def load_spec(text: str, spec: SpecSchema | type, *, strict: bool = False) -> Any:
    """Parse YAML text into an instance of *spec* (a dict for built schemas)."""
    schema = as_schema(spec)
    return materialize(schema, load_text(text, schema, strict=strict))


def validate_text(text: str, spec: SpecSchema | type, *, strict: bool = False) -> list[ValidationIssue]:
    """Check YAML text against a schema without raising.

    Returns every issue found, sorted deterministically; an empty list means
    the text loads cleanly.
    """
    schema = as_schema(spec)
    try:
        raw = load_yaml(text)
    except ParseError as exc:
        return [ValidationIssue(code=SPEC001, path="", message=exc.message, line=exc.line, column=exc.column)]
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        return [
            ValidationIssue(
                code=SPEC002,
                path="",
                message=f"document root must be a mapping, got {type(raw).__name__}",
                line=1,
                column=1,
            )
        ]
    issues: list[ValidationIssue] = []
    collect(raw, schema, issues, strict=strict)
    logger.debug("Validated text against %s: %d issue(s)", schema.name, len(issues))
    return sort_issues(_locate(issues, text))


def _locate(issues: tuple[ValidationIssue, ...] | list[ValidationIssue], text: str) -> list[ValidationIssue]:
    if not issues:
        return []
    locations = key_locations(text)
    located: list[ValidationIssue] = []
    for issue in issues:
        position = locations.get(issue.path)
        if position is None or issue.line is not None:
            located.append(issue)
            continue
        located.append(dataclasses.replace(issue, line=position[0], column=position[1]))
    return located
