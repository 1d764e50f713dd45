"""Scalar and comment formatting."""

from __future__ import annotations

import math

import yaml

from specyml.constants.rendering import COMMENT_MARKER, DOCUMENT_END_SUFFIX
from specyml.types.common import YamlScalar


def format_scalar(value: YamlScalar) -> str:
    """Format a scalar as a single-line YAML token, quoting where needed."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    options: dict[str, object] = {
        "default_flow_style": True,
        "allow_unicode": True,
        "width": math.inf,
    }
    if isinstance(value, str) and not value.isprintable():
        # Line breaks and control characters only survive on one line in double quotes.
        options["default_style"] = '"'
    dumped = yaml.safe_dump(value, **options)
    if dumped.endswith(DOCUMENT_END_SUFFIX):
        dumped = dumped[: -len(DOCUMENT_END_SUFFIX)]
    return dumped.rstrip("\n")


def format_comment(line: str) -> str:
    """Prefix a comment line with ``#``.

    Lines already starting with ``#`` get no extra space, so they can be used
    as visual separators. Blank lines become a bare ``#``.
    """
    if line.startswith(COMMENT_MARKER):
        return COMMENT_MARKER + line
    if not line.strip():
        return COMMENT_MARKER
    return f"{COMMENT_MARKER} {line}"
