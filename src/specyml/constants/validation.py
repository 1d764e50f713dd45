"""Stable issue codes reported by the loader and validators."""

from __future__ import annotations

SPEC001: str = "SPEC001"  # malformed YAML
SPEC002: str = "SPEC002"  # document root is not a mapping
SPEC003: str = "SPEC003"  # type mismatch
SPEC004: str = "SPEC004"  # unknown key
SPEC005: str = "SPEC005"  # missing required key
SPEC006: str = "SPEC006"  # validator rejected value
SPEC007: str = "SPEC007"  # invalid enum value

SUGGESTION_CUTOFF: float = 0.6
