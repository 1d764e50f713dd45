"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "specyml"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ specyml",
    "     // commented, type-safe YAML from typed specs",
)
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} config generator"))
