"""Logging configuration for the aged cache package."""

from __future__ import annotations

import logging
import sys

import config

LOGGER_NAME = "aged_cache"

_CONFIGURED = False


def configure_logging() -> None:
    """Configure the aged_cache logger hierarchy once.

    Respects ``AGED_CACHE_LOG_LEVEL`` through ``config.LOG_LEVEL`` (default: WARNING).
    """
    global _CONFIGURED
    if _CONFIGURED:
        return
    _CONFIGURED = True

    level = getattr(logging, config.LOG_LEVEL, logging.WARNING)

    root_logger = logging.getLogger(LOGGER_NAME)
    root_logger.setLevel(level)

    if not root_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(level)
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
