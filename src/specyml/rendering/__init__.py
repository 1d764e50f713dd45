"""Text rendering of document trees."""

from __future__ import annotations

from specyml.rendering.options import RenderOptions
from specyml.rendering.scalars import format_comment, format_scalar
from specyml.rendering.serializer import RenderedDocument, render, render_spec

__all__ = [
    "RenderOptions",
    "RenderedDocument",
    "format_comment",
    "format_scalar",
    "render",
    "render_spec",
]
