"""Bind parsed YAML data to a schema.

Binding is collect-all: every problem found in the document is recorded as a
:class:`ValidationIssue` so callers can report them in one pass.
"""

from __future__ import annotations

import logging
from typing import Any

from specyml.constants.validation import SPEC003, SPEC004, SPEC005, SPEC006, SPEC007
from specyml.exceptions import ValidationError
from specyml.exceptions.validation import ValidationIssue
from specyml.schema.defaults import enum_member, is_unset, resolve_default
from specyml.schema.model import SchemaNode, SpecSchema
from specyml.schema.reflector import as_schema
from specyml.schema.validators import run_validators
from specyml.utils.naming import suggest_key

logger = logging.getLogger(__name__)


def bind_values(raw: dict[str, Any], spec: SpecSchema | type, *, strict: bool = False) -> dict[str, Any]:
    """Apply a parsed mapping to a schema, filling unspecified fields with defaults.

    Returns bound values keyed by field name. Raises ValidationError listing
    every type-incompatible value.
    """
    issues: list[ValidationIssue] = []
    values = collect(raw, as_schema(spec), issues, strict=strict)
    if issues:
        raise ValidationError(issues)
    return values


def collect(
    raw: dict[str, Any],
    schema: SpecSchema,
    issues: list[ValidationIssue],
    *,
    strict: bool = False,
) -> dict[str, Any]:
    """Bind *raw* against *schema*, appending problems to *issues*."""
    return _Binder(issues, strict).spec(schema, raw, "")


def bind_node(node: SchemaNode, raw: Any, path: str = "") -> Any:
    """Bind a single value; raises ValidationError on problems."""
    issues: list[ValidationIssue] = []
    value = _Binder(issues, strict=False).node(node, raw, path or node.key)
    if issues:
        raise ValidationError(issues)
    return value


class _Binder:
    def __init__(self, issues: list[ValidationIssue], strict: bool) -> None:
        self.issues = issues
        self.strict = strict

    def spec(self, schema: SpecSchema, raw: dict[Any, Any], path: str) -> dict[str, Any]:
        for key in raw:
            if schema.by_key(str(key)) is not None:
                continue
            key_path = _join(path, str(key))
            if self.strict:
                self.issues.append(
                    ValidationIssue(
                        code=SPEC004,
                        path=key_path,
                        message=f"unknown key `{key}`",
                        hint=suggest_key(str(key), schema.keys()),
                    )
                )
            else:
                logger.warning("Ignoring unknown key %s", key_path)

        values: dict[str, Any] = {}
        for field_node in schema.fields:
            key_path = _join(path, field_node.key)
            if field_node.key in raw:
                values[field_node.name] = self.node(field_node, raw[field_node.key], key_path, field=True)
                continue
            if field_node.required:
                self.issues.append(
                    ValidationIssue(
                        code=SPEC005,
                        path=key_path,
                        message=f"missing required key `{field_node.key}`",
                    )
                )
            values[field_node.name] = resolve_default(field_node)
        return values

    def node(self, node: SchemaNode, raw: Any, path: str, *, field: bool = False) -> Any:
        before = len(self.issues)
        value = self._convert(node, raw, path)
        if field and not node.required and is_unset(node, value):
            # Optional fields left at their placeholder, as in a freshly rendered file.
            return value
        if len(self.issues) == before and node.validators:
            for message in run_validators(node.validators, value):
                self.issues.append(ValidationIssue(code=SPEC006, path=path, message=message))
        return value

    def _convert(self, node: SchemaNode, raw: Any, path: str) -> Any:
        if raw is None:
            if node.nullable or node.kind == "any":
                return None
            if node.kind in ("list", "map", "spec"):
                # An empty block (``key:`` with nothing under it) means "use the default".
                return resolve_default(node)
            return self._mismatch(node, raw, path)

        kind = node.kind
        if kind == "any":
            return raw
        if kind == "str":
            if isinstance(raw, str):
                return raw
            return self._mismatch(node, raw, path)
        if kind == "int":
            if isinstance(raw, int) and not isinstance(raw, bool):
                return raw
            return self._mismatch(node, raw, path)
        if kind == "float":
            if isinstance(raw, (int, float)) and not isinstance(raw, bool):
                return float(raw)
            return self._mismatch(node, raw, path)
        if kind == "bool":
            if isinstance(raw, bool):
                return raw
            return self._mismatch(node, raw, path)
        if kind == "enum":
            return self._enum(node, raw, path)
        if kind == "list":
            return self._sequence(node, raw, path)
        if kind == "map":
            return self._mapping(node, raw, path)
        assert node.spec is not None
        if not isinstance(raw, dict):
            return self._mismatch(node, raw, path)
        return self.spec(node.spec, raw, path)

    def _enum(self, node: SchemaNode, raw: Any, path: str) -> Any:
        assert node.choices is not None
        member = enum_member(node.choices, raw)
        if member is None:
            allowed = ", ".join(str(choice.value) for choice in node.choices)
            self.issues.append(
                ValidationIssue(
                    code=SPEC007,
                    path=path,
                    message=f"invalid value {raw!r}",
                    hint=f"expected one of: {allowed}",
                )
            )
        return member

    def _sequence(self, node: SchemaNode, raw: Any, path: str) -> Any:
        assert node.item is not None
        if not isinstance(raw, list):
            return self._mismatch(node, raw, path)
        item = node.item
        elements = [self.node(item, element, f"{path}[{index}]") for index, element in enumerate(raw)]
        try:
            return node.collection(elements)
        except TypeError:
            # Mappings are unhashable and cannot populate a set.
            self.issues.append(
                ValidationIssue(code=SPEC003, path=path, message=f"elements of `{path}` cannot form a set")
            )
            return elements

    def _mapping(self, node: SchemaNode, raw: Any, path: str) -> Any:
        assert node.item is not None
        if not isinstance(raw, dict):
            return self._mismatch(node, raw, path)
        return {str(key): self.node(node.item, element, _join(path, str(key))) for key, element in raw.items()}

    def _mismatch(self, node: SchemaNode, raw: Any, path: str) -> None:
        got = "null" if raw is None else type(raw).__name__
        self.issues.append(
            ValidationIssue(
                code=SPEC003,
                path=path,
                message=f"invalid type for `{path}`",
                hint=f"expected {node.describe()}; got {got}",
            )
        )
        return None


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key
