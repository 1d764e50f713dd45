"""Parsing and binding YAML text against schemas."""

from __future__ import annotations

from specyml.loading.binder import bind_node, bind_values
from specyml.loading.loader import load_spec, load_text, validate_text
from specyml.loading.parser import key_locations, load_yaml, parse_text

__all__ = [
    "bind_node",
    "bind_values",
    "key_locations",
    "load_spec",
    "load_text",
    "load_yaml",
    "parse_text",
    "validate_text",
]
