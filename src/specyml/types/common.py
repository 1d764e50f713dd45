"""Cross-module type aliases."""

from __future__ import annotations

from typing import Any

type YamlScalar = str | int | float | bool | None
type JsonObject = dict[str, Any]
