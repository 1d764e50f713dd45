"""Text read/write helpers with atomic persistence."""

from __future__ import annotations

import os
import tempfile
from contextlib import suppress
from pathlib import Path

from specyml.exceptions import ParseError


def read_text(path: Path) -> str:
    """Read a UTF-8 file; undecodable content raises ParseError."""
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(f"{path} is not valid UTF-8: {exc.reason} at byte {exc.start}") from exc


def read_text_if_exists(path: Path) -> str | None:
    """Return file contents, or ``None`` when the file does not exist."""
    try:
        return read_text(path)
    except FileNotFoundError:
        return None


def write_text_atomic(
    *,
    path: Path,
    text: str,
    temp_prefix: str,
    temp_suffix: str,
) -> None:
    """Replace *path* with *text* in one rename; the temp file never outlives a failure."""
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            newline="\n",
            dir=path.parent,
            prefix=temp_prefix,
            suffix=temp_suffix,
            delete=False,
        ) as handle:
            temp_name = handle.name
            handle.write(text)
        os.replace(temp_name, path)
    except Exception:
        if temp_name:
            with suppress(FileNotFoundError):
                Path(temp_name).unlink()
        raise
