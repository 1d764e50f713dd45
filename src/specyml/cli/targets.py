"""Resolve ``module.path:AttrName`` command line targets to schemas."""

from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

from specyml.constants.cli import TARGET_SEPARATOR
from specyml.exceptions import SchemaError
from specyml.schema.model import SpecSchema
from specyml.schema.reflector import as_schema
from specyml.schema.typemap import is_config_spec

logger = logging.getLogger(__name__)


def resolve_target(target: str) -> SpecSchema:
    """Import a target and return its schema.

    The attribute may be a ``SpecSchema`` or a ``@config_spec`` class; dotted
    attribute paths (``module:Outer.Inner``) are followed. Modules in the
    current working directory are importable, as with ``python -m``.
    """
    module_name, separator, attribute = target.partition(TARGET_SEPARATOR)
    if not separator or not module_name or not attribute:
        raise SchemaError(f"target must look like 'module.path:AttrName', got {target!r}")
    cwd = str(Path.cwd())
    if cwd not in sys.path:
        sys.path.insert(0, cwd)
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise SchemaError(f"cannot import module '{module_name}': {exc}") from exc

    obj: object = module
    for part in attribute.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise SchemaError(f"module '{module_name}' has no attribute '{attribute}'") from exc

    if not isinstance(obj, SpecSchema) and not is_config_spec(obj):
        raise SchemaError(f"{target} is neither a SpecSchema nor a @config_spec class")
    logger.debug("Resolved target %s", target)
    return as_schema(obj)  # type: ignore[arg-type]
