"""Explicit schema construction without class reflection."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import replace
from typing import Any

from specyml.constants.schema import VALID_KEY_STYLES
from specyml.exceptions import SchemaError
from specyml.schema.model import MISSING, SchemaNode, SpecSchema, apply_order, split_lines
from specyml.schema.typemap import TypeShape, item_node, resolve_type
from specyml.types.schema import KeyStyle, Validator
from specyml.utils.naming import key_for


def field(
    name: str,
    kind: Any,
    *,
    default: Any = MISSING,
    default_factory: Callable[[], Any] | None = None,
    comment: str | Iterable[str] | None = None,
    key: str | None = None,
    item: Any = None,
    required: bool = False,
    nullable: bool | None = None,
    validators: Iterable[Validator] = (),
    order: int | None = None,
    key_style: KeyStyle = "snake",
) -> SchemaNode:
    """Declare one schema field.

    ``kind`` is a kind name (``"int"``, ``"list"``...), a Python type or
    generic alias (``int``, ``list[str]``, an ``Enum`` subclass), or a nested
    :class:`SpecSchema`. For ``"list"`` and ``"map"`` kinds the element type
    can be given separately through ``item``.
    """
    if not name:
        raise SchemaError("field name must be a non-empty string")
    shape = resolve_type(kind, path=name)
    if item is not None:
        if shape.kind not in ("list", "map"):
            raise SchemaError(f"field '{name}': item is only valid for list and map fields")
        shape = replace(shape, item=item_node(item, path=f"{name}[]"))
    if nullable is not None:
        shape = replace(shape, nullable=nullable)
    return make_node(
        name,
        shape,
        default=default,
        default_factory=default_factory,
        comments=split_lines(comment),
        key=key,
        required=required,
        validators=tuple(validators),
        order=order,
        key_style=key_style,
    )


def make_node(
    name: str,
    shape: TypeShape,
    *,
    default: Any,
    default_factory: Callable[[], Any] | None,
    comments: tuple[str, ...],
    key: str | None,
    required: bool,
    validators: tuple[Validator, ...],
    order: int | None,
    key_style: KeyStyle,
) -> SchemaNode:
    """Combine a resolved type shape with per-field options."""
    if default is not MISSING and default_factory is not None:
        raise SchemaError(f"field '{name}': cannot set both default and default_factory")
    if required and (default is not MISSING or default_factory is not None):
        raise SchemaError(f"field '{name}': required fields cannot declare a default")
    return SchemaNode(
        name=name,
        key=key if key is not None else key_for(name, key_style),
        kind=shape.kind,
        default=default,
        default_factory=default_factory,
        comments=comments,
        item=shape.item,
        spec=shape.spec,
        choices=shape.choices,
        collection=shape.collection,
        nullable=shape.nullable,
        required=required,
        validators=validators,
        order=order,
    )


class SpecBuilder:
    """Fluent builder for :class:`SpecSchema`.

    Example::

        schema = (
            SpecBuilder("ServerConfig", key_style="kebab")
            .header("Server configuration")
            .field("max_players", int, default=100, comment="Maximum players online.")
            .build()
        )
    """

    def __init__(self, name: str, *, key_style: KeyStyle = "snake") -> None:
        if key_style not in VALID_KEY_STYLES:
            raise SchemaError(f"key_style must be one of {sorted(VALID_KEY_STYLES)}, got {key_style!r}")
        self._name = name
        self._key_style: KeyStyle = key_style
        self._header: list[str] = []
        self._nodes: list[SchemaNode] = []
        self._factory: Callable[..., Any] | None = None

    def header(self, *lines: str) -> SpecBuilder:
        self._header.extend(split_lines(lines))
        return self

    def add(self, node: SchemaNode) -> SpecBuilder:
        self._nodes.append(node)
        return self

    def field(self, name: str, kind: Any, **options: Any) -> SpecBuilder:
        options.setdefault("key_style", self._key_style)
        return self.add(field(name, kind, **options))

    def factory(self, factory: Callable[..., Any]) -> SpecBuilder:
        """Set the callable used by ``materialize`` to build typed objects."""
        self._factory = factory
        return self

    def build(self) -> SpecSchema:
        return SpecSchema(
            name=self._name,
            fields=apply_order(self._nodes),
            header=tuple(self._header),
            factory=self._factory,
            key_style=self._key_style,
        )
