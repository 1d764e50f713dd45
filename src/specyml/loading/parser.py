"""YAML text parsing with located errors."""

from __future__ import annotations

from typing import Any

import yaml

from specyml.exceptions import ParseError


def load_yaml(text: str) -> Any:
    """Parse YAML text, raising ParseError with a 1-based location on failure."""
    try:
        return yaml.safe_load(text)
    except yaml.MarkedYAMLError as exc:
        mark = exc.problem_mark or exc.context_mark
        problem = exc.problem or exc.context or "malformed YAML"
        if mark is None:
            raise ParseError(f"invalid YAML: {problem}") from exc
        raise ParseError(f"invalid YAML: {problem}", line=mark.line + 1, column=mark.column + 1) from exc
    except yaml.YAMLError as exc:
        raise ParseError(f"invalid YAML: {exc}") from exc


def parse_text(text: str) -> dict[str, Any]:
    """Parse a YAML document whose root must be a mapping.

    An empty document parses to an empty mapping.
    """
    raw = load_yaml(text)
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ParseError(f"document root must be a mapping, got {type(raw).__name__}")
    return raw


def key_locations(text: str) -> dict[str, tuple[int, int]]:
    """Map dotted key paths to the 1-based line and column of their keys.

    Sequence items are addressed as ``path[index]``. Returns an empty mapping
    when the text does not compose.
    """
    try:
        root = yaml.compose(text, Loader=yaml.SafeLoader)
    except yaml.YAMLError:
        return {}
    locations: dict[str, tuple[int, int]] = {}
    if root is not None:
        _walk(root, "", locations)
    return locations


def _walk(node: yaml.Node, path: str, locations: dict[str, tuple[int, int]]) -> None:
    if isinstance(node, yaml.MappingNode):
        for key_node, value_node in node.value:
            key = str(key_node.value)
            child = f"{path}.{key}" if path else key
            locations.setdefault(child, (key_node.start_mark.line + 1, key_node.start_mark.column + 1))
            _walk(value_node, child, locations)
    elif isinstance(node, yaml.SequenceNode):
        for index, item in enumerate(node.value):
            child = f"{path}[{index}]"
            locations.setdefault(child, (item.start_mark.line + 1, item.start_mark.column + 1))
            _walk(item, child, locations)
