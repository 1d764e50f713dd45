"""Root exception type."""

from __future__ import annotations


class SpecymlError(Exception):
    """Base class for all specyml errors."""
