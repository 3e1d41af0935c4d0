"""
Tests for the package logger setup.
"""

import logging

import pytest

from meter_api.app.core.config import Settings
from meter_api.app.core import logging_config
from meter_api.app.core.logging_config import PACKAGE_LOGGER, setup_logging


@pytest.fixture
def bare_logging(monkeypatch):
    """Unconfigured package and uvicorn loggers, restored afterwards.

    pytest keeps its own handlers on the root logger while a test runs,
    so the root check is replaced rather than the root handlers.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    monkeypatch.setattr(package_logger, "handlers", [])
    level = package_logger.level
    monkeypatch.setattr(logging_config, "_root_configured", lambda: False)
    monkeypatch.setattr(logging.getLogger("uvicorn"), "handlers", [])
    yield package_logger
    package_logger.setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_level_from_settings(self, app):
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self, bare_logging):
        setup_logging(Settings(log_level="chatty", log_file=""))
        assert bare_logging.level == logging.INFO

    def test_reuses_uvicorn_handlers(self, bare_logging):
        uvicorn_handler = logging.NullHandler()
        logging.getLogger("uvicorn").handlers = [uvicorn_handler]
        logger = setup_logging(Settings(log_level="DEBUG", log_file=""))
        assert logger is bare_logging
        assert logger.handlers == [uvicorn_handler]
        assert logger.level == logging.DEBUG

    def test_console_handler_without_uvicorn(self, bare_logging):
        logger = setup_logging(Settings(log_level="INFO", log_file=""))
        assert [type(h) for h in logger.handlers] == [logging.StreamHandler]

    def test_file_handler(self, bare_logging, tmp_path):
        log_file = tmp_path / "meter.log"
        logger = setup_logging(Settings(log_level="INFO", log_file=str(log_file)))
        file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
        try:
            assert len(file_handlers) == 1
            logging.getLogger(PACKAGE_LOGGER + ".tests").info("meter 6 created")
            file_handlers[0].flush()
            assert "meter 6 created" in log_file.read_text(encoding="utf-8")
        finally:
            for handler in file_handlers:
                handler.close()

    def test_handlers_attached_once(self, bare_logging):
        setup_logging(Settings(log_level="INFO", log_file=""))
        setup_logging(Settings(log_level="ERROR", log_file=""))
        assert len(bare_logging.handlers) == 1
        assert bare_logging.level == logging.ERROR

    def test_root_handlers_left_in_charge(self, bare_logging, monkeypatch):
        monkeypatch.setattr(logging_config, "_root_configured", lambda: True)
        setup_logging(Settings(log_level="INFO", log_file=""))
        assert bare_logging.handlers == []
