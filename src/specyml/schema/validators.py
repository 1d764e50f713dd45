"""Built-in field validators.

A validator receives the bound value and returns an error message, or
``None`` when the value is acceptable. Validators run when values are read
from text and when they are written into a document.
"""

from __future__ import annotations

import re
from collections.abc import Sized
from typing import Any

from specyml.constants.schema import JSON_SCHEMA_ATTR
from specyml.types.schema import Validator


def in_range(minimum: float | None = None, maximum: float | None = None) -> Validator:
    """Accept numbers within ``[minimum, maximum]``; non-numbers are left to type checks."""

    def check(value: Any) -> str | None:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        if minimum is not None and value < minimum:
            return f"value is too small: {value} < {minimum}"
        if maximum is not None and value > maximum:
            return f"value is too big: {value} > {maximum}"
        return None

    return _describe(check, {"minimum": minimum, "maximum": maximum})


def one_of(*allowed: Any) -> Validator:
    """Accept only the listed values."""

    def check(value: Any) -> str | None:
        if value in allowed:
            return None
        return f"value {value!r} is not one of {list(allowed)}"

    return _describe(check, {"enum": list(allowed)})


def matches(pattern: str) -> Validator:
    """Accept strings fully matching a regular expression."""
    compiled = re.compile(pattern)

    def check(value: Any) -> str | None:
        if not isinstance(value, str):
            return None
        if compiled.fullmatch(value):
            return None
        return f"value {value!r} does not match pattern {pattern!r}"

    return _describe(check, {"pattern": f"^(?:{pattern})$"})


def non_empty() -> Validator:
    """Reject empty strings and empty collections."""

    def check(value: Any) -> str | None:
        if isinstance(value, Sized) and len(value) == 0:
            return "value must not be empty"
        return None

    return _describe(check, {"minLength": 1, "minItems": 1, "minProperties": 1})


def run_validators(validators: tuple[Validator, ...], value: Any) -> list[str]:
    """Run validators in order and collect their messages."""
    messages: list[str] = []
    for validator in validators:
        message = validator(value)
        if message:
            messages.append(message)
    return messages


def _describe(check: Validator, keywords: dict[str, Any]) -> Validator:
    # JSON Schema keywords equivalent to the check, used by the schema export.
    setattr(check, JSON_SCHEMA_ATTR, {key: value for key, value in keywords.items() if value is not None})
    return check
