"""Round-trip properties between rendering and loading."""

from __future__ import annotations

from enum import Enum
from typing import Any

import pytest
from sample_specs import Endpoint, LogLevel, ServerConfig

from specyml import RenderOptions, SpecBuilder, SpecSchema, load_spec, load_text, render_spec


class Mode(Enum):
    FAST = 1
    SAFE = 2


def test_defaults_round_trip(server_schema: SpecSchema) -> None:
    assert load_spec(render_spec(server_schema), ServerConfig) == ServerConfig()


@pytest.mark.parametrize(
    "options",
    [
        RenderOptions(),
        RenderOptions(indent=4, array_comment_style="all"),
        RenderOptions(indent=1, blank_line_before_comments=False),
    ],
    ids=["default", "wide_all", "narrow_compact"],
)
def test_custom_values_round_trip(server_schema: SpecSchema, options: RenderOptions) -> None:
    config = ServerConfig(
        max_players=999,
        motd="Quotes ' and \" and: colons # hash",
        log_level=LogLevel.WARNING,
        ratio=1e-3,
        endpoints=[Endpoint(host="a.example", port=1), Endpoint(host="yes", port=2)],
        tags={"null", "true", "123"},
        limits={"overworld": 10, "nether": 0},
        admin="root",
    )

    text = render_spec(server_schema, config, options)

    assert load_spec(text, ServerConfig) == config


def test_render_of_loaded_values_is_stable(server_schema: SpecSchema) -> None:
    first = render_spec(server_schema, {"motd": "x", "limits": {"b": 1, "a": 2}})
    second = render_spec(server_schema, load_text(first, server_schema))

    assert first == second


@pytest.mark.parametrize(
    ("kind", "value"),
    [
        (str, "multi\nline\ttext"),
        (str, ""),
        (float, float("inf")),
        (float, -2.5),
        (int, -7),
        (bool, False),
        (Mode, Mode.SAFE),
        (list[dict[str, int]], [{"a": 1}, {}]),
        (tuple[str, ...], ("b", "a")),
        (frozenset[int], frozenset({3, 1})),
        (dict[str, list[str]], {"k": []}),
        (Any, {"nested": [1, "two", None]}),
        (str | None, None),
    ],
    ids=[
        "control_chars",
        "empty_str",
        "infinity",
        "negative_float",
        "negative_int",
        "false",
        "int_enum",
        "list_of_maps",
        "tuple",
        "frozenset",
        "map_of_lists",
        "any",
        "optional_none",
    ],
)
def test_single_field_round_trip(kind: Any, value: Any) -> None:
    schema = SpecBuilder("One").field("value", kind).build()

    text = render_spec(schema, {"value": value})

    assert load_text(text, schema) == {"value": value}


def test_declaration_order_is_preserved(server_schema: SpecSchema) -> None:
    text = render_spec(server_schema)
    positions = [text.index(f"\n{key}:") for key in server_schema.keys()]

    assert positions == sorted(positions)


def test_long_map_keys_round_trip(server_schema: SpecSchema) -> None:
    long_key = "k" * 1100
    values = {"limits": {long_key: 1, "short": 2}}

    text = render_spec(server_schema, values)

    assert f"  ? {long_key}\n  : 1\n" in text
    assert load_text(text, server_schema)["limits"] == {long_key: 1, "short": 2}
