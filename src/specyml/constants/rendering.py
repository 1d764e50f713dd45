"""Rendering defaults for commented YAML output."""

from __future__ import annotations

DEFAULT_INDENT: int = 2
COMMENT_MARKER: str = "#"
SEQUENCE_MARKER: str = "- "

ARRAY_COMMENT_FIRST: str = "first"
ARRAY_COMMENT_ALL: str = "all"
VALID_ARRAY_COMMENT_STYLES: frozenset[str] = frozenset({ARRAY_COMMENT_FIRST, ARRAY_COMMENT_ALL})
DEFAULT_ARRAY_COMMENT_STYLE: str = ARRAY_COMMENT_FIRST

# PyYAML terminates bare root scalars with an explicit document end marker.
DOCUMENT_END_SUFFIX: str = "\n...\n"

# PyYAML rejects implicit keys this long; longer keys use the explicit ``? key`` form.
MAX_IMPLICIT_KEY_LENGTH: int = 1024
EXPLICIT_KEY_MARKER: str = "? "
EXPLICIT_VALUE_MARKER: str = ":"
