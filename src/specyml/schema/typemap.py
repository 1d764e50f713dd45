"""Mapping from Python type annotations to schema node shapes."""

from __future__ import annotations

import collections.abc
import types
import typing
from dataclasses import dataclass
from enum import Enum
from typing import Any

from specyml.constants.schema import SPEC_MARKER_ATTR, VALID_KINDS
from specyml.exceptions import SchemaError
from specyml.schema.model import SchemaNode, SpecSchema
from specyml.types.schema import NodeKind

_SCALAR_TYPES: dict[type, NodeKind] = {
    bool: "bool",
    int: "int",
    float: "float",
    str: "str",
}

_SEQUENCE_ORIGINS: dict[Any, type] = {
    list: list,
    tuple: tuple,
    set: set,
    frozenset: frozenset,
    collections.abc.Sequence: list,
    collections.abc.MutableSequence: list,
    collections.abc.Iterable: list,
    collections.abc.Collection: list,
    collections.abc.Set: frozenset,
    collections.abc.MutableSet: set,
}

_MAPPING_ORIGINS: frozenset[Any] = frozenset(
    {dict, collections.abc.Mapping, collections.abc.MutableMapping},
)


@dataclass(frozen=True)
class TypeShape:
    """Resolved node shape for an annotation."""

    kind: NodeKind
    item: SchemaNode | None = None
    spec: SpecSchema | None = None
    choices: type[Enum] | None = None
    collection: type = list
    nullable: bool = False


def is_config_spec(obj: object) -> bool:
    """Return whether *obj* is a class decorated with ``@config_spec``."""
    return isinstance(obj, type) and hasattr(obj, SPEC_MARKER_ATTR)


def item_node(annotation: Any, *, path: str, stack: tuple[type, ...] = ()) -> SchemaNode:
    """Build the anonymous node describing container elements."""
    if isinstance(annotation, SchemaNode):
        return annotation
    shape = resolve_type(annotation, path=path, stack=stack)
    return SchemaNode(
        name="",
        key="",
        kind=shape.kind,
        item=shape.item,
        spec=shape.spec,
        choices=shape.choices,
        collection=shape.collection,
        nullable=shape.nullable,
    )


def resolve_type(annotation: Any, *, path: str, stack: tuple[type, ...] = ()) -> TypeShape:
    """Resolve an annotation (or kind name, or nested schema) into a node shape.

    Raises SchemaError when the annotation has no document node mapping.
    """
    if isinstance(annotation, SpecSchema):
        return TypeShape(kind="spec", spec=annotation)

    if isinstance(annotation, str):
        if annotation not in VALID_KINDS or annotation == "spec":
            raise SchemaError(f"field '{path}': unsupported kind name {annotation!r}")
        if annotation == "enum":
            raise SchemaError(f"field '{path}': enum fields must be declared with their Enum type")
        if annotation in ("list", "map"):
            return TypeShape(kind=annotation, item=item_node(Any, path=f"{path}[]"))
        return TypeShape(kind=annotation)

    if annotation is Any or annotation is object:
        return TypeShape(kind="any")

    if annotation in _SCALAR_TYPES:
        return TypeShape(kind=_SCALAR_TYPES[annotation])

    if isinstance(annotation, type) and issubclass(annotation, Enum):
        return TypeShape(kind="enum", choices=annotation)

    if is_config_spec(annotation):
        from specyml.schema.reflector import reflect_class

        return TypeShape(kind="spec", spec=reflect_class(annotation, stack=stack))

    origin = typing.get_origin(annotation)
    args = typing.get_args(annotation)

    if origin is typing.Annotated:
        return resolve_type(args[0], path=path, stack=stack)

    if origin is typing.Union or origin is types.UnionType:
        members = [arg for arg in args if arg is not type(None)]
        if len(members) != 1:
            raise SchemaError(f"field '{path}': union types are not supported ({annotation!r})")
        inner = resolve_type(members[0], path=path, stack=stack)
        return TypeShape(
            kind=inner.kind,
            item=inner.item,
            spec=inner.spec,
            choices=inner.choices,
            collection=inner.collection,
            nullable=len(members) != len(args),
        )

    if annotation in _SEQUENCE_ORIGINS:
        return TypeShape(kind="list", item=item_node(Any, path=f"{path}[]"), collection=_SEQUENCE_ORIGINS[annotation])

    if origin in _SEQUENCE_ORIGINS:
        if origin is tuple:
            if len(args) != 2 or args[1] is not Ellipsis:
                raise SchemaError(f"field '{path}': only variable-length tuples (tuple[T, ...]) are supported")
            args = args[:1]
        element = args[0] if args else Any
        return TypeShape(
            kind="list",
            item=item_node(element, path=f"{path}[]", stack=stack),
            collection=_SEQUENCE_ORIGINS[origin],
        )

    if annotation in _MAPPING_ORIGINS:
        return TypeShape(kind="map", item=item_node(Any, path=f"{path}.*"))

    if origin in _MAPPING_ORIGINS:
        key_type, value_type = args if args else (str, Any)
        if key_type is not str:
            raise SchemaError(f"field '{path}': mapping keys must be str, got {key_type!r}")
        return TypeShape(kind="map", item=item_node(value_type, path=f"{path}.*", stack=stack))

    raise SchemaError(f"field '{path}': unsupported type {annotation!r}")
