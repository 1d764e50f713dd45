"""Export config specs as JSON Schema (Draft 2020-12).

The exported schema describes the YAML document, so keys are YAML keys and
defaults are shown in their rendered form. Built-in validators contribute
their equivalent keywords (``minimum``, ``pattern`` and so on).
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from specyml.constants.schema import JSON_SCHEMA_ATTR, JSON_SCHEMA_DIALECT, KIND_JSON_TYPES
from specyml.document.builder import build_node
from specyml.schema.defaults import resolve_default
from specyml.schema.model import SchemaNode, SpecSchema
from specyml.schema.reflector import as_schema
from specyml.types.common import JsonObject


def to_json_schema(spec: SpecSchema | type) -> JsonObject:
    """Return a JSON Schema document for *spec*."""
    schema = as_schema(spec)
    document: JsonObject = {"$schema": JSON_SCHEMA_DIALECT, "title": schema.name}
    if schema.header:
        document["description"] = "\n".join(schema.header)
    document.update(_object_schema(schema))
    return document


def _object_schema(schema: SpecSchema) -> JsonObject:
    result: JsonObject = {
        "type": "object",
        "properties": {node.key: _field_schema(node) for node in schema.fields},
        "additionalProperties": False,
    }
    required = [node.key for node in schema.fields if node.required]
    if required:
        result["required"] = required
    return result


def _field_schema(node: SchemaNode) -> JsonObject:
    result = _node_schema(node)
    if node.comments:
        result["description"] = "\n".join(node.comments)
    if node.has_default:
        result["default"] = build_node(node, resolve_default(node)).plain()
    return result


def _node_schema(node: SchemaNode) -> JsonObject:
    result: JsonObject
    if node.kind == "spec":
        assert node.spec is not None
        result = _object_schema(node.spec)
    elif node.kind == "enum":
        assert node.choices is not None
        result = {"enum": [member.value for member in node.choices]}
    elif node.kind == "any":
        result = {}
    else:
        result = {"type": KIND_JSON_TYPES[node.kind]}
        if node.kind == "list":
            assert node.item is not None
            result["items"] = _node_schema(node.item)
            if node.collection in (set, frozenset):
                result["uniqueItems"] = True
        elif node.kind == "map":
            assert node.item is not None
            result["additionalProperties"] = _node_schema(node.item)

    for validator in node.validators:
        keywords = getattr(validator, JSON_SCHEMA_ATTR, None)
        if keywords:
            result.update({key: _json_value(value) for key, value in keywords.items()})

    if node.nullable:
        if "type" in result:
            result["type"] = [result["type"], "null"]
        if "enum" in result and None not in result["enum"]:
            result["enum"] = [*result["enum"], None]
    return result


def _json_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, list):
        return [_json_value(element) for element in value]
    return value
