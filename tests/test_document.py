"""Tests for building document trees from values."""

from __future__ import annotations

from typing import Any

import pytest
from sample_specs import CREDENTIALS_SCHEMA, Endpoint, LogLevel, ServerConfig

from specyml import BindingError, SpecBuilder, SpecSchema, build_document
from specyml.document import MappingNode, ScalarNode, SequenceNode


def test_build_document_defaults(server_schema: SpecSchema) -> None:
    tree = build_document(server_schema)

    assert tree.header == ("Server configuration", "#####")
    assert [entry.key for entry in tree.root.entries] == list(server_schema.keys())
    assert tree.plain() == {
        "max-players": 20,
        "motd": "Hello world",
        "log-level": "info",
        "ratio": 0.5,
        "endpoints": [{"host": "localhost", "port": 8080}],
        "tags": ["alpha", "beta"],
        "limits": {},
        "admin": None,
    }


def test_build_document_accepts_names_keys_and_instances(server_schema: SpecSchema) -> None:
    by_name = build_document(server_schema, {"max_players": 7})
    by_key = build_document(server_schema, {"max-players": 7})
    by_instance = build_document(ServerConfig, ServerConfig(max_players=7))

    assert by_name == by_key == by_instance
    assert by_name.plain()["max-players"] == 7


def test_build_document_entry_comments(server_schema: SpecSchema) -> None:
    tree = build_document(server_schema)
    entries = {entry.key: entry for entry in tree.root.entries}

    assert entries["motd"].comments == ("Message of the day.", "Shown in the server list.")
    assert entries["ratio"].comments == ()


def test_build_document_node_types(server_schema: SpecSchema) -> None:
    tree = build_document(server_schema, {"limits": {"nether": 3}})
    entries = {entry.key: entry.node for entry in tree.root.entries}

    assert isinstance(entries["max-players"], ScalarNode)
    assert isinstance(entries["endpoints"], SequenceNode)
    limits = entries["limits"]
    assert isinstance(limits, MappingNode)
    assert limits.collection is True
    assert limits.plain() == {"nether": 3}


def test_build_document_int_accepted_for_float(server_schema: SpecSchema) -> None:
    tree = build_document(server_schema, {"ratio": 2})

    ratio = tree.plain()["ratio"]
    assert ratio == 2.0
    assert isinstance(ratio, float)


@pytest.mark.parametrize(
    ("values", "expected"),
    [
        ({"log_level": LogLevel.DEBUG}, "debug"),
        ({"log_level": "warning"}, "warning"),
        ({"log_level": "WARNING"}, "warning"),
    ],
    ids=["member", "value", "name"],
)
def test_build_document_enum_values(server_schema: SpecSchema, values: dict[str, Any], expected: str) -> None:
    assert build_document(server_schema, values).plain()["log-level"] == expected


def test_build_document_nested_instances(server_schema: SpecSchema) -> None:
    tree = build_document(server_schema, {"endpoints": [Endpoint(host="a"), {"port": 81}]})

    assert tree.plain()["endpoints"] == [{"host": "a", "port": 8080}, {"host": "localhost", "port": 81}]


def test_build_document_sets_are_sorted(server_schema: SpecSchema) -> None:
    tree = build_document(server_schema, {"tags": {"zeta", "eta", "alpha"}})

    assert tree.plain()["tags"] == ["alpha", "eta", "zeta"]


@pytest.mark.parametrize(
    ("values", "path", "expected_match"),
    [
        ({"max_players": "many"}, "max-players", "expected int"),
        ({"max_players": True}, "max-players", "expected int"),
        ({"ratio": "fast"}, "ratio", "expected float"),
        ({"motd": 42}, "motd", "expected str"),
        ({"motd": None}, "motd", "got null"),
        ({"log_level": "loud"}, "log-level", "one of"),
        ({"endpoints": "localhost"}, "endpoints", "expected list"),
        ({"endpoints": [{"port": "x"}]}, "endpoints[0].port", "expected int"),
        ({"limits": ["a"]}, "limits", "expected mapping"),
        ({"max_players": 5000}, "max-players", "too big"),
        ({"endpoints": [{"port": 0}]}, "endpoints[0].port", "too small"),
        ({"unknown": 1}, "", "unknown fields"),
    ],
    ids=[
        "str_for_int",
        "bool_for_int",
        "str_for_float",
        "int_for_str",
        "null_for_str",
        "bad_enum",
        "scalar_for_list",
        "nested_type",
        "list_for_map",
        "validator_max",
        "nested_validator",
        "unknown_field",
    ],
)
def test_build_document_binding_errors(
    server_schema: SpecSchema,
    values: dict[str, Any],
    path: str,
    expected_match: str,
) -> None:
    with pytest.raises(BindingError, match=expected_match) as excinfo:
        build_document(server_schema, values)

    assert excinfo.value.path == path


def test_build_document_any_values() -> None:
    schema = SpecBuilder("Free").field("payload", "any").build()

    tree = build_document(schema, {"payload": {"a": [1, {"b": None}], "c": {3, 1}}})

    assert tree.plain() == {"payload": {"a": [1, {"b": None}], "c": [1, 3]}}


def test_build_document_rejects_unrepresentable_any() -> None:
    schema = SpecBuilder("Free").field("payload", "any").build()

    with pytest.raises(BindingError, match="cannot be represented"):
        build_document(schema, {"payload": object()})


def test_build_document_placeholders_are_not_validated() -> None:
    tree = build_document(CREDENTIALS_SCHEMA)

    assert tree.plain() == {"url": "", "port": 0}


@pytest.mark.parametrize(
    ("values", "expected_match"),
    [
        ({"url": "mysql://db"}, "does not match"),
        ({"url": "postgres://db", "port": 70000}, "too big"),
    ],
    ids=["pattern", "range"],
)
def test_build_document_validates_provided_values(values: dict[str, Any], expected_match: str) -> None:
    with pytest.raises(BindingError, match=expected_match):
        build_document(CREDENTIALS_SCHEMA, values)
