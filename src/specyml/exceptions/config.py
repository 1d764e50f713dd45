"""Configuration-related exceptions."""

from __future__ import annotations

from specyml.exceptions.base import SpecymlError


class ConfigError(SpecymlError, ValueError):
    """Raised when the specyml project configuration is invalid."""
