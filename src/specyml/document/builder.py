"""Build document trees from schemas and runtime values."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from enum import Enum
from typing import Any

from specyml.document.tree import DocumentEntry, DocumentNode, DocumentTree, MappingNode, ScalarNode, SequenceNode
from specyml.exceptions import BindingError
from specyml.schema.defaults import enum_member, is_unset, resolve_default
from specyml.schema.model import MISSING, SchemaNode, SpecSchema
from specyml.schema.reflector import as_schema
from specyml.schema.validators import run_validators


def build_document(spec: SpecSchema | type, values: Any = None) -> DocumentTree:
    """Build a document tree, substituting defaults for absent values.

    ``values`` may be a mapping keyed by field name (or YAML key), a config
    spec instance, or ``None`` for an all-defaults document.
    """
    schema = as_schema(spec)
    return DocumentTree(root=_build_spec(schema, values, ""), header=schema.header)


def build_node(node: SchemaNode, value: Any, path: str = "", *, check: bool = True) -> DocumentNode:
    """Build the document node for one value, checking it against *node*.

    With ``check=False`` the type is still enforced but validators are skipped.
    """
    built = _build_value(node, value, path or node.key)
    if not check:
        return built
    messages = run_validators(node.validators, value)
    if messages:
        raise BindingError(path or node.key, "; ".join(messages))
    return built


def _build_spec(schema: SpecSchema, values: Any, path: str) -> MappingNode:
    if values is not None and not _is_instance(values) and not isinstance(values, Mapping):
        raise BindingError(path, f"expected a mapping or {schema.name} instance, got {type(values).__name__}")
    if isinstance(values, Mapping):
        known = set(schema.names()) | set(schema.keys())
        unknown = sorted(str(key) for key in values if key not in known)
        if unknown:
            raise BindingError(path, f"unknown fields for {schema.name}: {unknown}")

    entries: list[DocumentEntry] = []
    for node in schema.fields:
        value = _lookup(values, node)
        if value is MISSING:
            value = resolve_default(node)
        child = build_node(node, value, _join(path, node.key), check=not is_unset(node, value))
        entries.append(DocumentEntry(key=node.key, node=child, comments=node.comments))
    return MappingNode(entries=tuple(entries))


def _lookup(values: Any, node: SchemaNode) -> Any:
    if values is None:
        return MISSING
    if isinstance(values, Mapping):
        if node.name in values:
            return values[node.name]
        return values.get(node.key, MISSING)
    return getattr(values, node.name, MISSING)


def _build_value(node: SchemaNode, value: Any, path: str) -> DocumentNode:
    if value is None:
        if node.nullable or node.kind == "any":
            return ScalarNode(None)
        raise BindingError(path, f"expected {node.describe()}, got null")

    kind = node.kind
    if kind == "str":
        if not isinstance(value, str):
            raise _mismatch(node, value, path)
        return ScalarNode(value)
    if kind == "int":
        if isinstance(value, bool) or not isinstance(value, int):
            raise _mismatch(node, value, path)
        return ScalarNode(value)
    if kind == "float":
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise _mismatch(node, value, path)
        return ScalarNode(float(value))
    if kind == "bool":
        if not isinstance(value, bool):
            raise _mismatch(node, value, path)
        return ScalarNode(value)
    if kind == "enum":
        return ScalarNode(_enum_value(node, value, path))
    if kind == "any":
        return _build_any(value, path)
    if kind == "list":
        return _build_sequence(node, value, path)
    if kind == "map":
        return _build_map(node, value, path)
    assert node.spec is not None
    return _build_spec(node.spec, value, path)


def _enum_value(node: SchemaNode, value: Any, path: str) -> Any:
    assert node.choices is not None
    if isinstance(value, node.choices):
        return value.value
    if isinstance(value, Enum):
        raise _mismatch(node, value, path)
    member = enum_member(node.choices, value)
    if member is None:
        raise _mismatch(node, value, path)
    return member.value


def _build_sequence(node: SchemaNode, value: Any, path: str) -> SequenceNode:
    assert node.item is not None
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, (list, tuple, set, frozenset)):
        raise _mismatch(node, value, path)
    elements = list(value)
    if isinstance(value, (set, frozenset)):
        elements = _sorted_elements(elements)
    return SequenceNode(
        items=tuple(build_node(node.item, element, f"{path}[{index}]") for index, element in enumerate(elements))
    )


def _build_map(node: SchemaNode, value: Any, path: str) -> MappingNode:
    assert node.item is not None
    if not isinstance(value, Mapping):
        raise _mismatch(node, value, path)
    entries: list[DocumentEntry] = []
    for key, element in value.items():
        if not isinstance(key, str):
            raise BindingError(path, f"mapping keys must be strings, got {type(key).__name__}")
        entries.append(DocumentEntry(key=key, node=build_node(node.item, element, _join(path, key))))
    return MappingNode(entries=tuple(entries), collection=True)


def _build_any(value: Any, path: str) -> DocumentNode:
    if isinstance(value, Enum):
        return _build_any(value.value, path)
    if value is None or isinstance(value, (str, int, float, bool)):
        return ScalarNode(value)
    if isinstance(value, Mapping):
        return MappingNode(
            entries=tuple(
                DocumentEntry(key=str(key), node=_build_any(element, _join(path, str(key))))
                for key, element in value.items()
            ),
            collection=True,
        )
    if isinstance(value, (list, tuple, set, frozenset)):
        elements = _sorted_elements(list(value)) if isinstance(value, (set, frozenset)) else list(value)
        return SequenceNode(
            items=tuple(_build_any(element, f"{path}[{index}]") for index, element in enumerate(elements))
        )
    raise BindingError(path, f"value of type {type(value).__name__} cannot be represented in YAML")


def _sorted_elements(elements: list[Any]) -> list[Any]:
    try:
        return sorted(elements)
    except TypeError:
        return sorted(elements, key=repr)


def _is_instance(value: Any) -> bool:
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def _mismatch(node: SchemaNode, value: Any, path: str) -> BindingError:
    return BindingError(path, f"expected {node.describe()}, got {type(value).__name__} {value!r}")


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key
