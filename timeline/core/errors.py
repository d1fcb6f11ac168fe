# timeline/core/errors.py
"""
Error types raised across the package boundary.

Lookup misses (PointBuffer, PointRegistry), rejected zooms and unresolved
genres are not errors: they come back as None or fall back to a neutral value.
"""

from __future__ import annotations


class TimelineError(Exception):
    """Base class for all timeline errors."""


class EmptyCollectionError(TimelineError, IndexError):
    """Boundary or search operation on a PointCollection with no items."""

    def __init__(self, operation: str):
        super().__init__(f"{operation}() called on an empty collection")
        self.operation = operation


class ConfigError(TimelineError, ValueError):
    """Configuration value that cannot be used."""


class DatasetError(TimelineError, ValueError):
    """Malformed scrobble record or unusable dataset."""
