import logging

import config
import core.logging_config as logging_config_mod
from core.logging_config import configure_logging


def test_configure_logging_is_idempotent(monkeypatch):
    name = "aged_cache_test_idempotent"
    monkeypatch.setattr(logging_config_mod, "LOGGER_NAME", name)
    monkeypatch.setattr(logging_config_mod, "_CONFIGURED", False)
    monkeypatch.setattr(config, "LOG_LEVEL", "DEBUG")

    configure_logging()
    configure_logging()

    logger = logging.getLogger(name)
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_configure_logging_unknown_level_falls_back_to_warning(monkeypatch):
    name = "aged_cache_test_unknown_level"
    monkeypatch.setattr(logging_config_mod, "LOGGER_NAME", name)
    monkeypatch.setattr(logging_config_mod, "_CONFIGURED", False)
    monkeypatch.setattr(config, "LOG_LEVEL", "CHATTY")

    configure_logging()

    assert logging.getLogger(name).level == logging.WARNING
