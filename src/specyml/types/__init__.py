"""Shared type aliases for specyml."""

from .common import JsonObject, YamlScalar
from .schema import ArrayCommentStyle, KeyStyle, NodeKind, Validator

__all__ = [
    "ArrayCommentStyle",
    "JsonObject",
    "KeyStyle",
    "NodeKind",
    "Validator",
    "YamlScalar",
]
