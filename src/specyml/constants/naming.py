"""Constants for key name mapping."""

from __future__ import annotations

import re
from re import Pattern

CAMEL_BOUNDARY_PATTERN: Pattern[str] = re.compile(r"([a-z0-9])([A-Z])")
KEBAB_SEPARATOR: str = "-"
SNAKE_SEPARATOR: str = "_"
