"""Key name mapping between attribute names and YAML keys."""

from __future__ import annotations

import difflib
from collections.abc import Iterable

from specyml.constants.naming import CAMEL_BOUNDARY_PATTERN, KEBAB_SEPARATOR, SNAKE_SEPARATOR
from specyml.constants.schema import KEY_STYLE_CAMEL, KEY_STYLE_KEBAB, KEY_STYLE_SNAKE
from specyml.constants.validation import SUGGESTION_CUTOFF
from specyml.types.schema import KeyStyle


def camel_to_kebab(name: str) -> str:
    """Convert ``maxPlayers`` to ``max-players``."""
    if not name:
        return name
    return CAMEL_BOUNDARY_PATTERN.sub(r"\1-\2", name).lower()


def kebab_to_camel(name: str) -> str:
    """Convert ``max-players`` to ``maxPlayers``."""
    head, *rest = name.split(KEBAB_SEPARATOR)
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def snake_to_kebab(name: str) -> str:
    """Convert ``max_players`` to ``max-players``."""
    return name.strip(SNAKE_SEPARATOR).replace(SNAKE_SEPARATOR, KEBAB_SEPARATOR)


def snake_to_camel(name: str) -> str:
    """Convert ``max_players`` to ``maxPlayers``."""
    return kebab_to_camel(snake_to_kebab(name))


def key_for(name: str, style: KeyStyle) -> str:
    """Map an attribute name to a YAML key under the given key style."""
    if style == KEY_STYLE_SNAKE:
        return name
    if style == KEY_STYLE_KEBAB:
        return snake_to_kebab(camel_to_kebab(name).replace(KEBAB_SEPARATOR, SNAKE_SEPARATOR))
    if style == KEY_STYLE_CAMEL:
        return snake_to_camel(name)
    raise ValueError(f"unknown key style: {style!r}")


def suggest_key(unknown: str, allowed: Iterable[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=SUGGESTION_CUTOFF)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
