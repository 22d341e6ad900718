"""Configuration and environment helpers for the project.

Provides small helpers to read typed environment variables and exposes
project-level configuration constants used across the codebase (e.g.
DEFAULT_RETENTION_MILLIS, LOG_LEVEL, LOG_SWEEPS).
"""

from __future__ import annotations

import os


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_str(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


# Retention used by AgedCache.put when the caller passes none
DEFAULT_RETENTION_MILLIS = _env_int("AGED_CACHE_DEFAULT_RETENTION_MS", 60_000)

# Logging
LOG_LEVEL = _env_str("AGED_CACHE_LOG_LEVEL", "WARNING").upper()
LOG_SWEEPS = _env_bool("AGED_CACHE_LOG_SWEEPS", False)
