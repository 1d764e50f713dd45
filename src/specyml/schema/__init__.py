"""Schema description: nodes, explicit builder, and class reflection."""

from __future__ import annotations

from specyml.schema.builder import SpecBuilder, field
from specyml.schema.defaults import default_values, materialize, resolve_default, zero_value
from specyml.schema.model import MISSING, SchemaNode, SpecSchema
from specyml.schema.reflector import as_schema, config_spec, reflect_spec, setting
from specyml.schema.typemap import is_config_spec
from specyml.schema.validators import in_range, matches, non_empty, one_of

__all__ = [
    "MISSING",
    "SchemaNode",
    "SpecBuilder",
    "SpecSchema",
    "as_schema",
    "config_spec",
    "default_values",
    "field",
    "in_range",
    "is_config_spec",
    "matches",
    "materialize",
    "non_empty",
    "one_of",
    "reflect_spec",
    "resolve_default",
    "setting",
    "zero_value",
]
