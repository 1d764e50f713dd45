"""Type aliases for schema declarations."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Literal

type NodeKind = Literal["str", "int", "float", "bool", "enum", "list", "map", "spec", "any"]
type KeyStyle = Literal["snake", "kebab", "camel"]
type ArrayCommentStyle = Literal["first", "all"]

# Returns an error message, or None when the value is acceptable.
type Validator = Callable[[Any], str | None]
