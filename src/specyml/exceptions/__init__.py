"""Shared exception hierarchy for specyml."""

from __future__ import annotations

from .base import SpecymlError
from .binding import BindingError
from .config import ConfigError
from .parsing import ParseError
from .schema import SchemaError
from .validation import ValidationError

__all__ = [
    "BindingError",
    "ConfigError",
    "ParseError",
    "SchemaError",
    "SpecymlError",
    "ValidationError",
]
