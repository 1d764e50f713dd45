"""Shared file I/O helpers."""

from .files import read_text, read_text_if_exists, write_text_atomic

__all__ = ["read_text", "read_text_if_exists", "write_text_atomic"]
