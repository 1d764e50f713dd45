"""Shared constants for specyml."""
