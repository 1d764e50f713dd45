"""Project configuration model."""

from __future__ import annotations

from dataclasses import dataclass

from specyml.constants.rendering import DEFAULT_ARRAY_COMMENT_STYLE, DEFAULT_INDENT
from specyml.rendering.options import RenderOptions
from specyml.types.schema import ArrayCommentStyle


@dataclass(frozen=True)
class SpecymlConfig:
    """Resolved project config."""

    indent: int = DEFAULT_INDENT
    array_comment_style: ArrayCommentStyle = DEFAULT_ARRAY_COMMENT_STYLE  # type: ignore[assignment]
    blank_line_before_comments: bool = True
    strict: bool = False

    @property
    def render_options(self) -> RenderOptions:
        """Serializer options described by this config."""
        return RenderOptions(
            indent=self.indent,
            array_comment_style=self.array_comment_style,
            blank_line_before_comments=self.blank_line_before_comments,
        )
