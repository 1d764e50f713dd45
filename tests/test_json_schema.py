"""Tests for JSON Schema export."""

from __future__ import annotations

import jsonschema
import pytest
import yaml
from sample_specs import CREDENTIALS_SCHEMA, DATABASE_SCHEMA, ServerConfig

from specyml import SpecBuilder, SpecSchema, matches, non_empty, render_spec, to_json_schema


def test_json_schema_is_valid_draft_2020_12(server_schema: SpecSchema) -> None:
    schema = to_json_schema(server_schema)

    jsonschema.Draft202012Validator.check_schema(schema)
    assert schema["$schema"] == "https://json-schema.org/draft/2020-12/schema"
    assert schema["title"] == "ServerConfig"
    assert schema["description"] == "Server configuration\n#####"


def test_json_schema_properties(server_schema: SpecSchema) -> None:
    properties = to_json_schema(server_schema)["properties"]

    assert list(properties) == list(server_schema.keys())
    assert properties["max-players"] == {
        "type": "integer",
        "minimum": 1,
        "maximum": 1000,
        "description": "Maximum number of players.",
        "default": 20,
    }
    assert properties["log-level"]["enum"] == ["debug", "info", "warning"]
    assert properties["admin"]["type"] == ["string", "null"]
    assert properties["tags"]["uniqueItems"] is True
    assert properties["tags"]["default"] == ["alpha", "beta"]
    assert properties["limits"]["additionalProperties"] == {"type": "integer"}
    endpoint = properties["endpoints"]["items"]
    assert endpoint["type"] == "object"
    assert list(endpoint["properties"]) == ["host", "port"]


def test_json_schema_required_fields() -> None:
    schema = to_json_schema(DATABASE_SCHEMA)

    assert schema["required"] == ["url"]
    jsonschema.validate({"url": "db.local"}, schema)
    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate({"pool_size": 3}, schema)


def test_rendered_defaults_validate_against_schema() -> None:
    schema = to_json_schema(ServerConfig)

    jsonschema.validate(yaml.safe_load(render_spec(ServerConfig)), schema)


@pytest.mark.parametrize(
    "document",
    [
        {"max-players": 0},
        {"log-level": "loud"},
        {"max_players": 3},
        {"endpoints": [{"port": "x"}]},
    ],
    ids=["below_minimum", "bad_enum", "unknown_key", "nested_type"],
)
def test_invalid_documents_fail_schema(document: dict[str, object]) -> None:
    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(document, to_json_schema(ServerConfig))


def test_json_schema_validator_keywords() -> None:
    schema = (
        SpecBuilder("Names")
        .field("slug", str, default="a-b", validators=[matches(r"[a-z-]+")])
        .field("names", list[str], default=["x"], validators=[non_empty()])
        .build()
    )

    properties = to_json_schema(schema)["properties"]

    assert properties["slug"]["pattern"] == "^(?:[a-z-]+)$"
    assert properties["names"]["minItems"] == 1
    jsonschema.validate({"slug": "ok-slug", "names": ["y"]}, to_json_schema(schema))
    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate({"slug": "Not OK"}, to_json_schema(schema))


def test_json_schema_omits_default_without_declared_default() -> None:
    schema = to_json_schema(CREDENTIALS_SCHEMA)
    properties = schema["properties"]

    assert "default" not in properties["url"]
    assert "default" not in properties["port"]
    assert properties["url"]["pattern"] == "^(?:postgres://.*)$"
    assert properties["port"]["minimum"] == 1
    jsonschema.validate({"url": "postgres://db", "port": 5432}, schema)
