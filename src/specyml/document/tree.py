"""Immutable document tree produced before text rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from specyml.types.common import YamlScalar


@dataclass(frozen=True)
class ScalarNode:
    value: YamlScalar

    def plain(self) -> Any:
        return self.value


@dataclass(frozen=True)
class SequenceNode:
    items: tuple[DocumentNode, ...] = ()

    def plain(self) -> Any:
        return [item.plain() for item in self.items]


@dataclass(frozen=True)
class DocumentEntry:
    """A keyed child of a mapping, with the comment lines shown above it."""

    key: str
    node: DocumentNode
    comments: tuple[str, ...] = ()


@dataclass(frozen=True)
class MappingNode:
    """Ordered mapping.

    ``collection`` marks mappings whose keys come from data (``map`` fields)
    rather than from a schema; their values count as collection elements for
    array comment styles.
    """

    entries: tuple[DocumentEntry, ...] = ()
    collection: bool = False

    def plain(self) -> Any:
        return {entry.key: entry.node.plain() for entry in self.entries}


type DocumentNode = ScalarNode | SequenceNode | MappingNode


@dataclass(frozen=True)
class DocumentTree:
    """Root of a document: header comment lines plus the top-level mapping."""

    root: MappingNode
    header: tuple[str, ...] = ()

    def plain(self) -> dict[str, Any]:
        """Return the YAML data the tree represents, without comments."""
        return self.root.plain()
