"""Schema node kinds and key styles."""

from __future__ import annotations

SCALAR_KINDS: frozenset[str] = frozenset({"str", "int", "float", "bool", "enum", "any"})
CONTAINER_KINDS: frozenset[str] = frozenset({"list", "map"})
VALID_KINDS: frozenset[str] = SCALAR_KINDS | CONTAINER_KINDS | {"spec"}

KEY_STYLE_SNAKE: str = "snake"
KEY_STYLE_KEBAB: str = "kebab"
KEY_STYLE_CAMEL: str = "camel"
VALID_KEY_STYLES: frozenset[str] = frozenset({KEY_STYLE_SNAKE, KEY_STYLE_KEBAB, KEY_STYLE_CAMEL})

# Metadata keys stored on dataclass fields by ``setting(...)``.
METADATA_NAMESPACE: str = "specyml"

# Attribute set on ``@config_spec`` classes.
SPEC_MARKER_ATTR: str = "__specyml_spec__"

JSON_SCHEMA_DIALECT: str = "https://json-schema.org/draft/2020-12/schema"

KIND_JSON_TYPES: dict[str, str] = {
    "str": "string",
    "int": "integer",
    "float": "number",
    "bool": "boolean",
    "list": "array",
    "map": "object",
    "spec": "object",
}

# Attribute carrying JSON Schema keywords on built-in validators.
JSON_SCHEMA_ATTR: str = "__specyml_json_schema__"
