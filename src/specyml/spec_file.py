"""File-backed config handle: load, edit and save one YAML file."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from specyml.constants.config import SYNC_TEMP_PREFIX, SYNC_TEMP_SUFFIX
from specyml.document.builder import build_document, build_node
from specyml.io import read_text_if_exists, write_text_atomic
from specyml.loading.loader import load_text
from specyml.rendering.options import RenderOptions
from specyml.rendering.serializer import render
from specyml.schema.defaults import default_values, materialize, normalize_value
from specyml.schema.model import SchemaNode, SpecSchema
from specyml.schema.reflector import as_schema

logger = logging.getLogger(__name__)


class SpecFile:
    """A config file bound to a schema.

    Values start out as the schema defaults and are replaced by :meth:`load`.
    Lookups accept either the attribute name or the YAML key of a top-level
    field.
    """

    def __init__(
        self,
        path: Path | str,
        spec: SpecSchema | type,
        *,
        options: RenderOptions | None = None,
        strict: bool = False,
    ) -> None:
        self.path = Path(path)
        self.schema = as_schema(spec)
        self.options = options or RenderOptions()
        self.strict = strict
        self._values: dict[str, Any] = default_values(self.schema)

    def __repr__(self) -> str:
        return f"SpecFile({str(self.path)!r}, {self.schema.name})"

    @property
    def values(self) -> Mapping[str, Any]:
        """Read-only view of the current values, keyed by field name."""
        return MappingProxyType(self._values)

    @property
    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> SpecFile:
        """Read the file; a missing file leaves every field at its default."""
        text = read_text_if_exists(self.path)
        if text is None:
            logger.debug("Config file %s not found; using defaults", self.path)
            self._values = default_values(self.schema)
        else:
            self._values = load_text(text, self.schema, strict=self.strict)
            logger.debug("Loaded %s from %s", self.schema.name, self.path)
        return self

    def reload(self) -> Mapping[str, Any]:
        """Re-read the file and return the fresh values."""
        return self.load().values

    def render(self) -> str:
        """Render the current values as commented YAML."""
        return render(build_document(self.schema, self._values), self.options).text

    def save(self) -> None:
        """Write the current values atomically."""
        write_text_atomic(
            path=self.path,
            text=self.render(),
            temp_prefix=SYNC_TEMP_PREFIX,
            temp_suffix=SYNC_TEMP_SUFFIX,
        )
        logger.debug("Saved %s to %s", self.schema.name, self.path)

    def reset(self) -> None:
        """Restore every field to its default."""
        self._values = default_values(self.schema)

    def get(self, key: str) -> Any:
        return self._values[self._node(key).name]

    def set(self, key: str, value: Any) -> None:
        """Replace one top-level value; invalid values raise BindingError."""
        node = self._node(key)
        build_node(node, value, node.key)
        self._values[node.name] = normalize_value(node, value)

    def as_object(self) -> Any:
        """Materialize the current values into the spec type."""
        return materialize(self.schema, self._values)

    def sync(self) -> bool:
        """Load, then save, filling in defaults and comments.

        Returns whether the file content changed.
        """
        before = read_text_if_exists(self.path)
        self.load()
        after = self.render()
        if before == after:
            return False
        self.save()
        return True

    def _node(self, key: str) -> SchemaNode:
        node = self.schema.lookup(key)
        if node is None:
            raise KeyError(key)
        return node
