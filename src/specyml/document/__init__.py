"""Ordered document trees and their construction from schemas."""

from __future__ import annotations

from specyml.document.builder import build_document, build_node
from specyml.document.tree import (
    DocumentEntry,
    DocumentNode,
    DocumentTree,
    MappingNode,
    ScalarNode,
    SequenceNode,
)

__all__ = [
    "DocumentEntry",
    "DocumentNode",
    "DocumentTree",
    "MappingNode",
    "ScalarNode",
    "SequenceNode",
    "build_document",
    "build_node",
]
