"""Tests for built-in field validators."""

from __future__ import annotations

from typing import Any

import pytest

from specyml import in_range, matches, non_empty, one_of
from specyml.schema.validators import run_validators
from specyml.types import Validator


@pytest.mark.parametrize(
    ("validator", "value", "expected"),
    [
        (in_range(1, 10), 5, None),
        (in_range(1, 10), 0, "value is too small: 0 < 1"),
        (in_range(1, 10), 11, "value is too big: 11 > 10"),
        (in_range(minimum=0), 10**9, None),
        (in_range(1, 10), "text", None),
        (one_of("a", "b"), "a", None),
        (one_of("a", "b"), "c", "value 'c' is not one of ['a', 'b']"),
        (matches(r"\d+"), "123", None),
        (matches(r"\d+"), "12a", "value '12a' does not match pattern '\\\\d+'"),
        (non_empty(), "x", None),
        (non_empty(), [], "value must not be empty"),
        (non_empty(), 0, None),
    ],
    ids=[
        "range_ok",
        "range_low",
        "range_high",
        "range_open_max",
        "range_non_number",
        "one_of_ok",
        "one_of_bad",
        "matches_ok",
        "matches_partial",
        "non_empty_ok",
        "non_empty_list",
        "non_empty_non_sized",
    ],
)
def test_builtin_validators(validator: Validator, value: Any, expected: str | None) -> None:
    assert validator(value) == expected


def test_run_validators_collects_messages() -> None:
    messages = run_validators((in_range(maximum=3), one_of(1, 2)), 7)

    assert messages == ["value is too big: 7 > 3", "value 7 is not one of [1, 2]"]
