"""Config loading and normalization for specyml projects."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from specyml.config.model import SpecymlConfig
from specyml.constants.config import ALLOWED_CONFIG_KEYS, CONFIG_FILENAME
from specyml.constants.rendering import DEFAULT_ARRAY_COMMENT_STYLE, DEFAULT_INDENT, VALID_ARRAY_COMMENT_STYLES
from specyml.exceptions import ConfigError
from specyml.utils.naming import suggest_key

logger = logging.getLogger(__name__)


def load_config(root: Path, config_path: Path | None = None) -> SpecymlConfig:
    """Load and validate project config from ``specyml.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return SpecymlConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"Config file at {path} is not valid UTF-8: {exc.reason}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    for key in raw:
        if key not in ALLOWED_CONFIG_KEYS:
            hint = suggest_key(str(key), ALLOWED_CONFIG_KEYS)
            message = f"Unknown config key '{key}' in {path}"
            raise ConfigError(f"{message} ({hint})" if hint else message)

    indent = raw.get("indent", DEFAULT_INDENT)
    if isinstance(indent, bool) or not isinstance(indent, int) or indent <= 0:
        raise ConfigError("indent must be a positive integer")

    array_comment_style = raw.get("array_comment_style", DEFAULT_ARRAY_COMMENT_STYLE)
    if not isinstance(array_comment_style, str) or array_comment_style not in VALID_ARRAY_COMMENT_STYLES:
        raise ConfigError(
            f"array_comment_style must be one of {sorted(VALID_ARRAY_COMMENT_STYLES)}, got {array_comment_style!r}"
        )

    blank_line_before_comments = raw.get("blank_line_before_comments", True)
    if not isinstance(blank_line_before_comments, bool):
        raise ConfigError("blank_line_before_comments must be a boolean")

    strict = raw.get("strict", False)
    if not isinstance(strict, bool):
        raise ConfigError("strict must be a boolean")

    logger.debug("Loaded config from %s", path)
    return SpecymlConfig(
        indent=indent,
        array_comment_style=array_comment_style,  # type: ignore[arg-type]
        blank_line_before_comments=blank_line_before_comments,
        strict=strict,
    )
