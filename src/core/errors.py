from __future__ import annotations


class AgedCacheError(Exception):
    """Base error for the aged cache package."""


class ValidationError(AgedCacheError):
    """Raised when a checked argument is invalid."""
