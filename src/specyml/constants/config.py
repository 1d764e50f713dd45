"""Project configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "specyml.yaml"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "indent",
        "array_comment_style",
        "blank_line_before_comments",
        "strict",
    }
)

SYNC_TEMP_PREFIX: str = ".specyml-"
SYNC_TEMP_SUFFIX: str = ".yaml.tmp"
