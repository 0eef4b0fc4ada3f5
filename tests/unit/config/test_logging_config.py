"""Tests for centralized logging configuration."""

import json
import logging
import logging.handlers
import sys
from decimal import Decimal

import pytest

from chantier_tracker.config.logging_config import (
    JSONFormatter,
    LoggingConfig,
    configure_logging,
    reset_logging,
)


class TestLoggingConfig:
    """Test LoggingConfig class."""

    def test_default_config(self):
        config = LoggingConfig()
        assert config.log_level == "INFO"
        assert config.log_format == "standard"
        assert config.log_file is None
        assert config.enable_console is True
        assert config.max_file_size == 5 * 1024 * 1024
        assert config.backup_count == 3

    def test_level_is_uppercased(self):
        assert LoggingConfig(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValueError, match="Invalid log level"):
            LoggingConfig(log_level="LOUD")

    def test_invalid_log_format(self):
        with pytest.raises(ValueError, match="Invalid log format"):
            LoggingConfig(log_format="xml")

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        monkeypatch.setenv("LOG_FORMAT", "json")
        monkeypatch.setenv("LOG_FILE", "/tmp/chantier.log")
        monkeypatch.setenv("LOG_CONSOLE", "false")

        config = LoggingConfig.from_env()

        assert config.log_level == "ERROR"
        assert config.log_format == "json"
        assert config.log_file == "/tmp/chantier.log"
        assert config.enable_console is False

    def test_from_env_defaults(self, monkeypatch):
        for var in ("LOG_LEVEL", "LOG_FORMAT", "LOG_FILE", "LOG_CONSOLE"):
            monkeypatch.delenv(var, raising=False)

        config = LoggingConfig.from_env(default_level="WARNING")

        assert config.log_level == "WARNING"
        assert config.log_format == "standard"
        assert config.log_file is None
        assert config.enable_console is True


class TestJSONFormatter:
    def make_record(self, **extra):
        record = logging.LogRecord(
            "chantier_tracker.test", logging.INFO, __file__, 10, "Loaded %s sites",
            (3,), None,
        )
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_standard_fields(self):
        data = json.loads(JSONFormatter().format(self.make_record()))
        assert data["level"] == "INFO"
        assert data["logger"] == "chantier_tracker.test"
        assert data["message"] == "Loaded 3 sites"
        assert data["line"] == 10
        assert "timestamp" in data

    def test_extra_fields_are_serialized(self):
        record = self.make_record(site_id=1, rate=Decimal("20.5"))
        data = json.loads(JSONFormatter().format(record))
        assert data["site_id"] == 1
        assert data["rate"] == "20.5"

    def test_private_attributes_skipped(self):
        data = json.loads(JSONFormatter().format(self.make_record(_hidden=1)))
        assert "_hidden" not in data

    def test_exception_included(self):
        try:
            raise ValueError("bad row")
        except ValueError:
            record = logging.LogRecord(
                "x", logging.ERROR, __file__, 1, "failed", None, sys.exc_info()
            )
        data = json.loads(JSONFormatter().format(record))
        assert "ValueError: bad row" in data["exception"]


class TestConfigureLogging:
    def teardown_method(self):
        reset_logging()

    def test_console_handler(self):
        configure_logging(LoggingConfig(log_level="DEBUG"))
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)

    def test_file_handler_creates_directory(self, tmp_path):
        log_file = tmp_path / "logs" / "chantier.log"
        configure_logging(
            LoggingConfig(enable_console=False, log_file=str(log_file))
        )
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.handlers.RotatingFileHandler)
        assert log_file.parent.is_dir()

    def test_json_format_written_to_file(self, tmp_path):
        log_file = tmp_path / "chantier.log"
        configure_logging(
            LoggingConfig(
                log_format="json", enable_console=False, log_file=str(log_file)
            )
        )
        logging.getLogger("chantier_tracker.test").info("Exported %d rows", 4)
        for handler in logging.getLogger().handlers:
            handler.flush()

        data = json.loads(log_file.read_text().strip())
        assert data["message"] == "Exported 4 rows"

    def test_reconfiguring_does_not_duplicate_handlers(self):
        configure_logging(LoggingConfig())
        configure_logging(LoggingConfig())
        assert len(logging.getLogger().handlers) == 1

    def test_reset_logging(self):
        configure_logging(LoggingConfig(log_level="DEBUG"))
        reset_logging()
        root = logging.getLogger()
        assert root.handlers == []
        assert root.level == logging.WARNING
