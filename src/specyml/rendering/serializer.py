"""Render document trees into commented YAML text.

Comments are written directly above their key at the key's indentation.
Nested blocks indent by ``RenderOptions.indent`` spaces. Sequence items use
``- `` markers; a mapping inside a sequence starts on the marker line and its
remaining keys align under the first one. Keys too long for an implicit YAML
key are written as ``? key`` followed by ``: value``. Output depends only on
the tree and the options, so identical trees always render identical text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from specyml.constants.rendering import (
    ARRAY_COMMENT_ALL,
    COMMENT_MARKER,
    EXPLICIT_KEY_MARKER,
    EXPLICIT_VALUE_MARKER,
    MAX_IMPLICIT_KEY_LENGTH,
    SEQUENCE_MARKER,
)
from specyml.document.builder import build_document
from specyml.document.tree import DocumentEntry, DocumentNode, DocumentTree, MappingNode, ScalarNode, SequenceNode
from specyml.rendering.options import RenderOptions
from specyml.rendering.scalars import format_comment, format_scalar
from specyml.schema.model import SpecSchema


@dataclass(frozen=True)
class RenderedDocument:
    """Rendered output as an immutable sequence of lines."""

    lines: tuple[str, ...]

    @property
    def text(self) -> str:
        return "\n".join(self.lines) + "\n" if self.lines else ""

    def __str__(self) -> str:
        return self.text


def render(tree: DocumentTree, options: RenderOptions | None = None) -> RenderedDocument:
    """Render a document tree."""
    writer = _Writer(options or RenderOptions())
    if tree.header:
        writer.lines.extend(format_comment(line) for line in tree.header)
        writer.lines.append("")
    if tree.root.entries:
        writer.mapping(tree.root, "", comments=True)
    else:
        writer.lines.append("{}")
    return RenderedDocument(lines=tuple(writer.lines))


def render_spec(
    spec: SpecSchema | type,
    values: Any = None,
    options: RenderOptions | None = None,
) -> str:
    """Build and render a document in one step."""
    return render(build_document(spec, values), options).text


class _Writer:
    def __init__(self, options: RenderOptions) -> None:
        self.options = options
        self.unit = " " * options.indent
        self.lines: list[str] = []

    def mapping(self, node: MappingNode, indent: str, *, comments: bool) -> None:
        for index, entry in enumerate(node.entries):
            self.comments(entry, indent, index, enabled=comments)
            self.entry(entry, indent, comments=comments)

    def comments(self, entry: DocumentEntry, indent: str, index: int, *, enabled: bool) -> None:
        if not enabled or not entry.comments:
            return
        if self.options.blank_line_before_comments and index > 0 and self.lines and self.lines[-1]:
            self.lines.append("")
        self.lines.extend(indent + format_comment(line) for line in entry.comments)

    def entry(self, entry: DocumentEntry, indent: str, *, comments: bool) -> None:
        key = format_scalar(entry.key)
        if len(key) >= MAX_IMPLICIT_KEY_LENGTH:
            self.lines.append(f"{indent}{EXPLICIT_KEY_MARKER}{key}")
            key_line = f"{indent}{EXPLICIT_VALUE_MARKER}"
        else:
            key_line = f"{indent}{key}:"
        node = entry.node
        if isinstance(node, ScalarNode):
            self.lines.append(f"{key_line} {format_scalar(node.value)}")
        elif _is_empty(node):
            self.lines.append(f"{key_line} {_empty_token(node)}")
        else:
            self.lines.append(key_line)
            self.block(node, indent + self.unit, comments=comments)

    def block(self, node: DocumentNode, indent: str, *, comments: bool) -> None:
        if isinstance(node, MappingNode):
            if node.collection:
                self.collection_mapping(node, indent, comments=comments)
            else:
                self.mapping(node, indent, comments=comments)
        elif isinstance(node, SequenceNode):
            self.sequence(node, indent, comments=comments)

    def collection_mapping(self, node: MappingNode, indent: str, *, comments: bool) -> None:
        for index, entry in enumerate(node.entries):
            self.entry(entry, indent, comments=comments and self._element_comments(index))

    def sequence(self, node: SequenceNode, indent: str, *, comments: bool) -> None:
        for index, item in enumerate(node.items):
            element_comments = comments and self._element_comments(index)
            if isinstance(item, ScalarNode):
                self.lines.append(f"{indent}{SEQUENCE_MARKER}{format_scalar(item.value)}")
            elif _is_empty(item):
                self.lines.append(f"{indent}{SEQUENCE_MARKER}{_empty_token(item)}")
            elif isinstance(item, MappingNode) and not item.collection:
                self.sequence_mapping(item, indent, index, comments=element_comments)
            else:
                self.nested_item(item, indent, comments=element_comments)

    def sequence_mapping(self, item: MappingNode, indent: str, index: int, *, comments: bool) -> None:
        first, *rest = item.entries
        content = indent + " " * len(SEQUENCE_MARKER)
        self.comments(first, indent, index, enabled=comments)
        start = len(self.lines)
        self.entry(first, content, comments=comments)
        self.lines[start] = indent + SEQUENCE_MARKER + self.lines[start][len(content) :]
        for position, entry in enumerate(rest, start=1):
            self.comments(entry, content, position, enabled=comments)
            self.entry(entry, content, comments=comments)

    def nested_item(self, item: DocumentNode, indent: str, *, comments: bool) -> None:
        content = indent + " " * len(SEQUENCE_MARKER)
        start = len(self.lines)
        self.block(item, content, comments=comments)
        # Leading comments move out to the marker indentation, above the marker.
        while self.lines[start].startswith(content + COMMENT_MARKER):
            self.lines[start] = indent + self.lines[start][len(content) :]
            start += 1
        self.lines[start] = indent + SEQUENCE_MARKER + self.lines[start][len(content) :]

    def _element_comments(self, index: int) -> bool:
        return index == 0 or self.options.array_comment_style == ARRAY_COMMENT_ALL


def _is_empty(node: DocumentNode) -> bool:
    if isinstance(node, MappingNode):
        return not node.entries
    if isinstance(node, SequenceNode):
        return not node.items
    return False


def _empty_token(node: DocumentNode) -> str:
    return "{}" if isinstance(node, MappingNode) else "[]"
