"""Shared pytest fixtures for specs and files."""

from __future__ import annotations

from pathlib import Path

import pytest
from sample_specs import DATABASE_SCHEMA, ServerConfig

from specyml import SpecSchema, reflect_spec


@pytest.fixture(scope="session")
def server_schema() -> SpecSchema:
    """Return the reflected schema of the sample server config."""
    return reflect_spec(ServerConfig)


@pytest.fixture(scope="session")
def database_schema() -> SpecSchema:
    """Return the explicitly built database schema."""
    return DATABASE_SCHEMA


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Return a not-yet-existing config file path inside a temp dir."""
    return tmp_path / "server.yaml"
