"""Value binding exceptions."""

from __future__ import annotations

from specyml.exceptions.base import SpecymlError


class BindingError(SpecymlError, ValueError):
    """Raised when a provided value does not fit the expected node shape."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}" if path else message)
