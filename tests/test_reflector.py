"""Tests for ``@config_spec`` reflection."""

from __future__ import annotations

import dataclasses
from typing import Annotated, Any

import pytest
from sample_specs import Endpoint, LogLevel, ServerConfig

from specyml import SchemaError, SpecSchema, config_spec, default_values, reflect_spec, setting


@config_spec
class TreeNode:
    children: list[TreeNode] = setting(default_factory=list)


@config_spec(key_style="camel")
class CamelSpec:
    read_timeout: float = 1.5
    retry_count: Annotated[int, "metadata is ignored"] = 3
    payload: Any = None
    extra: dict[str, list[int]] = setting(default_factory=dict)


@config_spec
class Unsupported:
    callback: complex = 0j


@dataclasses.dataclass
class PlainBase:
    name: str = "base"


@config_spec
class Derived(PlainBase):
    level: int = setting(1, comment="Level.")


@config_spec
class RequiredName:
    name: str = setting(required=True, comment="Must be given.")


def test_reflect_spec_field_order_and_keys(server_schema: SpecSchema) -> None:
    assert server_schema.name == "ServerConfig"
    assert server_schema.keys() == (
        "max-players",
        "motd",
        "log-level",
        "ratio",
        "endpoints",
        "tags",
        "limits",
        "admin",
    )
    assert server_schema.header == ("Server configuration", "#####")
    assert server_schema.factory is ServerConfig


def test_reflect_spec_kinds(server_schema: SpecSchema) -> None:
    kinds = {node.name: node.kind for node in server_schema.fields}

    assert kinds == {
        "max_players": "int",
        "motd": "str",
        "log_level": "enum",
        "ratio": "float",
        "endpoints": "list",
        "tags": "list",
        "limits": "map",
        "admin": "str",
    }
    endpoints = server_schema.by_name("endpoints")
    assert endpoints is not None and endpoints.item is not None
    assert endpoints.item.kind == "spec"
    assert endpoints.item.spec is not None
    assert endpoints.item.spec.keys() == ("host", "port")
    tags = server_schema.by_name("tags")
    assert tags is not None and tags.collection is set


def test_reflect_spec_comments(server_schema: SpecSchema) -> None:
    motd = server_schema.by_name("motd")

    assert motd is not None
    assert motd.comments == ("Message of the day.", "Shown in the server list.")


def test_reflect_spec_optional_is_nullable(server_schema: SpecSchema) -> None:
    admin = server_schema.by_name("admin")

    assert admin is not None
    assert admin.nullable is True


def test_reflect_spec_default_values(server_schema: SpecSchema) -> None:
    assert default_values(server_schema) == {
        "max_players": 20,
        "motd": "Hello world",
        "log_level": LogLevel.INFO,
        "ratio": 0.5,
        "endpoints": [{"host": "localhost", "port": 8080}],
        "tags": {"alpha", "beta"},
        "limits": {},
        "admin": None,
    }


def test_reflect_spec_camel_keys_and_annotated() -> None:
    schema = reflect_spec(CamelSpec)

    assert schema.keys() == ("readTimeout", "retryCount", "payload", "extra")
    extra = schema.by_key("extra")
    assert extra is not None and extra.item is not None
    assert extra.item.kind == "list"
    assert schema.by_key("payload").kind == "any"  # type: ignore[union-attr]


def test_config_spec_makes_keyword_only_dataclass() -> None:
    endpoint = Endpoint(port=9000)

    assert endpoint.host == "localhost"
    assert endpoint.port == 9000
    with pytest.raises(TypeError):
        Endpoint("example.org")  # type: ignore[misc]


def test_setting_copies_unhashable_defaults() -> None:
    first = ServerConfig()
    second = ServerConfig()
    first.tags.add("gamma")

    assert second.tags == {"alpha", "beta"}


def test_config_spec_on_dataclass_subclass() -> None:
    schema = reflect_spec(Derived)

    assert schema.names() == ("name", "level")
    assert Derived(level=3).name == "base"


def test_required_setting_is_reflected() -> None:
    node = reflect_spec(RequiredName).by_name("name")

    assert node is not None
    assert node.required is True
    assert node.comments == ("Must be given.",)


@pytest.mark.parametrize(
    ("target", "expected_match"),
    [
        (TreeNode, "recursive config spec: TreeNode -> TreeNode"),
        (Unsupported, "Unsupported.callback"),
        (PlainBase, "not a config spec"),
    ],
    ids=["recursive", "unsupported_type", "undecorated"],
)
def test_reflect_spec_errors(target: type, expected_match: str) -> None:
    with pytest.raises(SchemaError, match=expected_match):
        reflect_spec(target)


def test_config_spec_rejects_unknown_key_style() -> None:
    with pytest.raises(SchemaError, match="key_style"):
        config_spec(key_style="upper")  # type: ignore[call-overload]


def test_reflection_is_pure() -> None:
    assert reflect_spec(ServerConfig) == reflect_spec(ServerConfig)
