"""Command line constants."""

from __future__ import annotations

# Separates the module path from the attribute in ``module.path:AttrName``.
TARGET_SEPARATOR: str = ":"
