import logging

from depgraph.core.config import Settings
from depgraph.core.logging import configure_logging, LOGGER_NAME


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("DEPGRAPH_LOG_LEVEL", raising=False)
    monkeypatch.delenv("DEPGRAPH_DEBUG", raising=False)

    settings = Settings()
    assert settings.LOG_LEVEL == "WARNING"
    assert settings.DEBUG is False


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("DEPGRAPH_LOG_LEVEL", " debug ")
    monkeypatch.setenv("DEPGRAPH_DEBUG", "TRUE")

    settings = Settings()
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.DEBUG is True


def test_configure_logging_is_idempotent():
    logger = logging.getLogger(LOGGER_NAME)
    saved_handlers, saved_level = list(logger.handlers), logger.level
    try:
        configure_logging("INFO")
        configure_logging("DEBUG")

        ours = [h for h in logger.handlers if getattr(h, "_depgraph_handler", False)]
        assert len(ours) == 1
        assert logger.level == logging.DEBUG
    finally:
        logger.handlers = saved_handlers
        logger.setLevel(saved_level)


def test_configure_logging_uses_settings_level(monkeypatch):
    from depgraph.core import logging as logging_module

    monkeypatch.setattr(logging_module.settings, "LOG_LEVEL", "ERROR")
    logger = logging.getLogger(LOGGER_NAME)
    saved_handlers, saved_level = list(logger.handlers), logger.level
    try:
        assert configure_logging() is logger
        assert logger.level == logging.ERROR
    finally:
        logger.handlers = saved_handlers
        logger.setLevel(saved_level)
