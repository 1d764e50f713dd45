"""Schema data model: one node per configuration entry."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from specyml.constants.schema import SCALAR_KINDS, VALID_KINDS
from specyml.exceptions import SchemaError
from specyml.types.schema import KeyStyle, NodeKind, Validator


class _MissingType(Enum):
    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _MissingType.MISSING
"""Sentinel for a field without a declared default."""


@dataclass(frozen=True)
class SchemaNode:
    """Description of one configuration field.

    Container kinds carry an ``item`` node describing their elements
    (``list``) or values (``map``). The ``spec`` kind carries the nested
    :class:`SpecSchema`.
    """

    name: str
    key: str
    kind: NodeKind
    default: Any = MISSING
    default_factory: Callable[[], Any] | None = None
    comments: tuple[str, ...] = ()
    item: SchemaNode | None = None
    spec: SpecSchema | None = None
    choices: type[Enum] | None = None
    collection: type = list
    nullable: bool = False
    required: bool = False
    validators: tuple[Validator, ...] = ()
    order: int | None = None

    def __post_init__(self) -> None:
        if self.kind not in VALID_KINDS:
            raise SchemaError(f"field '{self.name}': unknown kind {self.kind!r}")
        if self.kind in ("list", "map") and self.item is None:
            raise SchemaError(f"field '{self.name}': {self.kind} fields need an item node")
        if self.kind == "spec" and self.spec is None:
            raise SchemaError(f"field '{self.name}': spec fields need a nested schema")
        if self.kind == "enum" and (self.choices is None or not list(self.choices)):
            raise SchemaError(f"field '{self.name}': enum fields need a non-empty Enum type")

    @property
    def has_default(self) -> bool:
        """Whether a default was declared (as opposed to a zero value)."""
        return self.default is not MISSING or self.default_factory is not None

    @property
    def is_scalar(self) -> bool:
        return self.kind in SCALAR_KINDS

    def describe(self) -> str:
        """Short type description used in error messages."""
        if self.kind == "enum" and self.choices is not None:
            return f"one of {[member.value for member in self.choices]}"
        if self.kind == "list" and self.item is not None:
            return f"list of {self.item.describe()}"
        if self.kind == "map" and self.item is not None:
            return f"mapping of {self.item.describe()}"
        if self.kind == "spec" and self.spec is not None:
            return f"mapping ({self.spec.name})"
        return self.kind


@dataclass(frozen=True)
class SpecSchema:
    """An ordered, named set of schema nodes plus the file header."""

    name: str
    fields: tuple[SchemaNode, ...]
    header: tuple[str, ...] = ()
    factory: Callable[..., Any] | None = None
    key_style: KeyStyle = "snake"
    _by_key: dict[str, SchemaNode] = field(init=False, repr=False, compare=False)
    _by_name: dict[str, SchemaNode] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        by_key: dict[str, SchemaNode] = {}
        by_name: dict[str, SchemaNode] = {}
        for node in self.fields:
            if node.key in by_key:
                raise SchemaError(
                    f"{self.name}: fields '{by_key[node.key].name}' and '{node.name}' map to the same key '{node.key}'"
                )
            if node.name in by_name:
                raise SchemaError(f"{self.name}: duplicate field name '{node.name}'")
            by_key[node.key] = node
            by_name[node.name] = node
        object.__setattr__(self, "_by_key", by_key)
        object.__setattr__(self, "_by_name", by_name)

    def __iter__(self) -> Iterator[SchemaNode]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def keys(self) -> tuple[str, ...]:
        return tuple(node.key for node in self.fields)

    def names(self) -> tuple[str, ...]:
        return tuple(node.name for node in self.fields)

    def by_key(self, key: str) -> SchemaNode | None:
        return self._by_key.get(key)

    def by_name(self, name: str) -> SchemaNode | None:
        return self._by_name.get(name)

    def lookup(self, name_or_key: str) -> SchemaNode | None:
        """Find a field by attribute name first, then by YAML key."""
        return self._by_name.get(name_or_key) or self._by_key.get(name_or_key)


def apply_order(nodes: Iterable[SchemaNode]) -> tuple[SchemaNode, ...]:
    """Stable-sort nodes: unordered first in declaration order, then by ``order``."""
    indexed = list(enumerate(nodes))
    indexed.sort(key=lambda pair: (pair[1].order is not None, pair[1].order or 0, pair[0]))
    return tuple(node for _, node in indexed)


def split_lines(lines: str | Iterable[str] | None) -> tuple[str, ...]:
    """Normalize comment input into individual lines, splitting embedded newlines."""
    if lines is None:
        return ()
    if isinstance(lines, str):
        lines = (lines,)
    result: list[str] = []
    for line in lines:
        if not isinstance(line, str):
            raise SchemaError(f"comment lines must be strings, got {type(line).__name__}")
        result.extend(line.split("\n"))
    return tuple(result)
