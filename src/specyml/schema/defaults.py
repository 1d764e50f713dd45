"""Default values, zero values and typed materialization."""

from __future__ import annotations

import copy
import dataclasses
from collections.abc import Mapping
from enum import Enum
from typing import Any

from specyml.schema.model import MISSING, SchemaNode, SpecSchema

_ZERO_SCALARS: dict[str, Any] = {
    "str": "",
    "int": 0,
    "float": 0.0,
    "bool": False,
    "any": None,
}


def default_values(schema: SpecSchema) -> dict[str, Any]:
    """Return the declared defaults of every field, keyed by field name.

    Fields without a declared default receive their zero value.
    """
    return {node.name: resolve_default(node) for node in schema.fields}


def resolve_default(node: SchemaNode) -> Any:
    """Return a fresh default for *node*, normalized to bound-value form."""
    if node.default_factory is not None:
        value = node.default_factory()
    elif node.default is not MISSING:
        value = copy.deepcopy(node.default)
    else:
        return zero_value(node)
    return normalize_value(node, value)


def zero_value(node: SchemaNode) -> Any:
    """Value used for fields that declare no default."""
    if node.nullable:
        return None
    if node.kind == "spec" and node.spec is not None:
        return default_values(node.spec)
    if node.kind == "list":
        return node.collection()
    if node.kind == "map":
        return {}
    if node.kind == "enum" and node.choices is not None:
        return next(iter(node.choices))
    return _ZERO_SCALARS[node.kind]


def is_unset(node: SchemaNode, value: Any) -> bool:
    """Whether *value* is the zero placeholder of a field with no declared default.

    Field validators are not applied to placeholders.
    """
    return not node.has_default and value == zero_value(node)


def normalize_value(node: SchemaNode, value: Any) -> Any:
    """Convert a Python-side value into the shape the loader produces.

    Spec instances become dicts keyed by field name, enum values become
    members, and sequences take the declared collection type.
    """
    if value is None:
        return None
    if node.kind == "spec" and node.spec is not None:
        return _normalize_spec(node.spec, value)
    if node.kind == "list" and node.item is not None and _is_sequence(value):
        return node.collection(normalize_value(node.item, element) for element in value)
    if node.kind == "map" and node.item is not None and isinstance(value, Mapping):
        return {key: normalize_value(node.item, element) for key, element in value.items()}
    if node.kind == "enum" and node.choices is not None and not isinstance(value, node.choices):
        return enum_member(node.choices, value) or value
    if node.kind == "float" and isinstance(value, int) and not isinstance(value, bool):
        return float(value)
    return value


def _normalize_spec(schema: SpecSchema, value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {node.name: normalize_value(node, getattr(value, node.name)) for node in schema.fields}
    if isinstance(value, Mapping):
        result: dict[str, Any] = {}
        for node in schema.fields:
            if node.name in value:
                result[node.name] = normalize_value(node, value[node.name])
            elif node.key in value:
                result[node.name] = normalize_value(node, value[node.key])
            else:
                result[node.name] = resolve_default(node)
        return result
    return value


def enum_member(choices: type[Enum], raw: Any) -> Enum | None:
    """Find an enum member by value, then by name (exact, then case-insensitive)."""
    for member in choices:
        if member.value == raw and type(member.value) is type(raw):
            return member
    if isinstance(raw, str):
        if raw in choices.__members__:
            return choices.__members__[raw]
        folded = raw.casefold()
        for name, member in choices.__members__.items():
            if name.casefold() == folded:
                return member
    return None


def materialize(schema: SpecSchema, values: Mapping[str, Any]) -> Any:
    """Build the typed object for bound values using the schema factory.

    Schemas without a factory (explicitly built ones) materialize to dicts.
    """
    kwargs = {}
    for node in schema.fields:
        value = values[node.name] if node.name in values else resolve_default(node)
        kwargs[node.name] = _materialize_node(node, value)
    if schema.factory is None:
        return kwargs
    return schema.factory(**kwargs)


def _materialize_node(node: SchemaNode, value: Any) -> Any:
    if value is None:
        return None
    if node.kind == "spec" and node.spec is not None and isinstance(value, Mapping):
        return materialize(node.spec, value)
    if node.kind == "list" and node.item is not None and _is_sequence(value):
        return node.collection(_materialize_node(node.item, element) for element in value)
    if node.kind == "map" and node.item is not None and isinstance(value, Mapping):
        return {key: _materialize_node(node.item, element) for key, element in value.items()}
    return value


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple, set, frozenset))
