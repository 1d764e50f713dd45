"""Rendering options."""

from __future__ import annotations

from dataclasses import dataclass

from specyml.constants.rendering import DEFAULT_ARRAY_COMMENT_STYLE, DEFAULT_INDENT, VALID_ARRAY_COMMENT_STYLES
from specyml.types.schema import ArrayCommentStyle


@dataclass(frozen=True)
class RenderOptions:
    """Layout settings for the serializer."""

    indent: int = DEFAULT_INDENT
    array_comment_style: ArrayCommentStyle = DEFAULT_ARRAY_COMMENT_STYLE  # type: ignore[assignment]
    blank_line_before_comments: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.indent, bool) or not isinstance(self.indent, int) or self.indent < 1:
            raise ValueError(f"indent must be a positive integer, got {self.indent!r}")
        if self.array_comment_style not in VALID_ARRAY_COMMENT_STYLES:
            raise ValueError(
                f"array_comment_style must be one of {sorted(VALID_ARRAY_COMMENT_STYLES)}, "
                f"got {self.array_comment_style!r}"
            )
