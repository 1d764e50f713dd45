"""Project configuration for the specyml command line."""

from __future__ import annotations

from specyml.config.loader import load_config
from specyml.config.model import SpecymlConfig

__all__ = ["SpecymlConfig", "load_config"]
