"""Schema declaration exceptions."""

from __future__ import annotations

from specyml.exceptions.base import SpecymlError


class SchemaError(SpecymlError, TypeError):
    """Raised when a config spec cannot be mapped to document nodes."""
