"""specyml: commented, type-safe YAML configuration from typed specs."""

from __future__ import annotations

from specyml.document import DocumentTree, build_document
from specyml.exceptions import (
    BindingError,
    ConfigError,
    ParseError,
    SchemaError,
    SpecymlError,
    ValidationError,
)
from specyml.exceptions.validation import ValidationIssue
from specyml.json_schema import to_json_schema
from specyml.loading import bind_values, load_spec, load_text, parse_text, validate_text
from specyml.rendering import RenderedDocument, RenderOptions, render, render_spec
from specyml.schema import (
    MISSING,
    SchemaNode,
    SpecBuilder,
    SpecSchema,
    config_spec,
    default_values,
    field,
    in_range,
    matches,
    materialize,
    non_empty,
    one_of,
    reflect_spec,
    setting,
)
from specyml.spec_file import SpecFile

__version__ = "1.4.0"

__all__ = [
    "MISSING",
    "BindingError",
    "ConfigError",
    "DocumentTree",
    "ParseError",
    "RenderOptions",
    "RenderedDocument",
    "SchemaError",
    "SchemaNode",
    "SpecBuilder",
    "SpecFile",
    "SpecSchema",
    "SpecymlError",
    "ValidationError",
    "ValidationIssue",
    "__version__",
    "bind_values",
    "build_document",
    "config_spec",
    "default_values",
    "field",
    "in_range",
    "load_spec",
    "load_text",
    "matches",
    "materialize",
    "non_empty",
    "one_of",
    "parse_text",
    "reflect_spec",
    "render",
    "render_spec",
    "setting",
    "to_json_schema",
    "validate_text",
]
