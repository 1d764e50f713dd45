"""Schema reflection over ``@config_spec`` dataclasses.

A config spec class is a regular dataclass. Per-field comments, keys,
ordering and validators are attached through :func:`setting`, which stores
them in the dataclass field metadata::

    @config_spec(header=["Server configuration"], key_style="kebab")
    class ServerConfig:
        max_players: int = setting(100, comment="Maximum number of players.")
        motd: str = setting("Welcome!", comment="Shown in the server list.")
"""

from __future__ import annotations

import copy
import dataclasses
import functools
import logging
import typing
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, overload

from specyml.constants.schema import METADATA_NAMESPACE, SPEC_MARKER_ATTR, VALID_KEY_STYLES
from specyml.exceptions import SchemaError
from specyml.schema.builder import make_node
from specyml.schema.model import MISSING, SchemaNode, SpecSchema, apply_order, split_lines
from specyml.schema.typemap import is_config_spec, resolve_type
from specyml.types.schema import KeyStyle, Validator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpecOptions:
    """Class-level options recorded by ``@config_spec``."""

    header: tuple[str, ...] = ()
    key_style: KeyStyle = "snake"


@dataclass(frozen=True)
class SettingInfo:
    """Per-field options recorded by :func:`setting`."""

    comments: tuple[str, ...] = ()
    key: str | None = None
    order: int | None = None
    required: bool = False
    validators: tuple[Validator, ...] = ()


@overload
def config_spec[T](cls: type[T], /) -> type[T]: ...


@overload
def config_spec[T](
    *,
    header: str | Iterable[str] | None = None,
    key_style: KeyStyle = "snake",
) -> Callable[[type[T]], type[T]]: ...


def config_spec(
    cls: type | None = None,
    /,
    *,
    header: str | Iterable[str] | None = None,
    key_style: KeyStyle = "snake",
) -> Any:
    """Mark a class as a config spec, turning it into a keyword-only dataclass."""
    if key_style not in VALID_KEY_STYLES:
        raise SchemaError(f"key_style must be one of {sorted(VALID_KEY_STYLES)}, got {key_style!r}")
    options = SpecOptions(header=split_lines(header), key_style=key_style)

    def wrap(klass: type) -> type:
        if "__dataclass_fields__" not in vars(klass):
            klass = dataclass(kw_only=True)(klass)
        setattr(klass, SPEC_MARKER_ATTR, options)
        return klass

    if cls is None:
        return wrap
    return wrap(cls)


def setting(
    default: Any = MISSING,
    *,
    default_factory: Callable[[], Any] | None = None,
    comment: str | Iterable[str] | None = None,
    key: str | None = None,
    order: int | None = None,
    required: bool = False,
    validators: Iterable[Validator] = (),
) -> Any:
    """Declare a config spec field with comments and YAML options.

    Unhashable defaults (lists, dicts, sets, spec instances) are copied per instance.
    """
    info = SettingInfo(
        comments=split_lines(comment),
        key=key,
        order=order,
        required=required,
        validators=tuple(validators),
    )
    metadata = {METADATA_NAMESPACE: info}
    if default is not MISSING and default_factory is not None:
        raise SchemaError("cannot set both default and default_factory")
    if default is not MISSING and type(default).__hash__ is None:
        default_factory = functools.partial(copy.deepcopy, default)
        default = MISSING
    if default_factory is not None:
        return dataclasses.field(default_factory=default_factory, metadata=metadata)
    if default is not MISSING:
        return dataclasses.field(default=default, metadata=metadata)
    return dataclasses.field(metadata=metadata)


def reflect_spec(cls: type) -> SpecSchema:
    """Build a :class:`SpecSchema` from a ``@config_spec`` class."""
    return reflect_class(cls)


def as_schema(target: SpecSchema | type) -> SpecSchema:
    """Accept either a schema or a config spec class."""
    if isinstance(target, SpecSchema):
        return target
    return reflect_class(target)


def reflect_class(cls: type, *, stack: tuple[type, ...] = ()) -> SpecSchema:
    if not is_config_spec(cls):
        raise SchemaError(f"{cls!r} is not a config spec; decorate it with @config_spec")
    if cls in stack:
        chain = " -> ".join(klass.__name__ for klass in (*stack, cls))
        raise SchemaError(f"recursive config spec: {chain}")

    options: SpecOptions = getattr(cls, SPEC_MARKER_ATTR)
    try:
        hints = typing.get_type_hints(cls, include_extras=True)
    except NameError as exc:
        raise SchemaError(f"{cls.__name__}: cannot resolve annotations: {exc}") from exc

    nodes: list[SchemaNode] = []
    for spec_field in dataclasses.fields(cls):
        if not spec_field.init:
            continue
        nodes.append(_reflect_field(cls, spec_field, hints[spec_field.name], options, (*stack, cls)))

    schema = SpecSchema(
        name=cls.__name__,
        fields=apply_order(nodes),
        header=options.header,
        factory=cls,
        key_style=options.key_style,
    )
    logger.debug("Reflected config spec %s with %d fields", cls.__name__, len(schema.fields))
    return schema


def _reflect_field(
    cls: type,
    spec_field: dataclasses.Field[Any],
    annotation: Any,
    options: SpecOptions,
    stack: tuple[type, ...],
) -> SchemaNode:
    info = spec_field.metadata.get(METADATA_NAMESPACE, SettingInfo())
    default: Any = MISSING
    default_factory: Callable[[], Any] | None = None
    if spec_field.default is not dataclasses.MISSING:
        default = spec_field.default
    elif spec_field.default_factory is not dataclasses.MISSING:
        default_factory = spec_field.default_factory

    path = f"{cls.__name__}.{spec_field.name}"
    return make_node(
        spec_field.name,
        resolve_type(annotation, path=path, stack=stack),
        default=default,
        default_factory=default_factory,
        comments=info.comments,
        key=info.key,
        required=info.required,
        validators=info.validators,
        order=info.order,
        key_style=options.key_style,
    )
