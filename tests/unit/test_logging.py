"""Unit tests for logging setup."""

import json
import logging
import logging.handlers
from pathlib import Path

from luba_catalog.catalog_logging import (
    LOGGER_NAME,
    JSONFormatter,
    LogCategory,
    get_category_logger,
    get_logger,
    setup_logging,
)


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_file_logging(self, tmp_path: Path) -> None:
        """Test that a configured log file receives records."""
        log_file = tmp_path / "catalog.log"
        logger = setup_logging(log_file=log_file)
        logger.info("Test message")

        assert log_file.exists()
        assert "Test message" in log_file.read_text()

    def test_no_file_by_default(self, tmp_path: Path) -> None:
        """Test that only a console handler exists without a log file."""
        logger = setup_logging()
        assert all(
            not isinstance(h, logging.handlers.RotatingFileHandler)
            for h in logger.handlers
        )

    def test_quiet_has_no_console(self) -> None:
        """Test quiet mode removes the console handler."""
        logger = setup_logging(quiet=True)
        assert logger.handlers == []

    def test_verbose_console_level(self) -> None:
        """Test verbose mode lowers the console level to DEBUG."""
        logger = setup_logging(verbose=True)
        assert logger.handlers[0].level == logging.DEBUG

    def test_json_format(self, tmp_path: Path) -> None:
        """Test JSON log format."""
        log_file = tmp_path / "json.log"
        setup_logging(log_file=log_file, log_format="json")

        get_category_logger(LogCategory.SEARCH).info("JSON test message")

        lines = log_file.read_text().strip().split("\n")
        log_entry = json.loads(lines[-1])
        assert log_entry["message"] == "JSON test message"
        assert log_entry["level"] == "INFO"
        assert log_entry["logger"] == f"{LOGGER_NAME}.search"


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_extra_fields(self) -> None:
        """Test operation extras are included."""
        record = logging.LogRecord(
            "luba_catalog", logging.INFO, __file__, 1, "looked up", None, None
        )
        record.operation = "lookup_token"
        record.result_count = 3
        entry = json.loads(JSONFormatter().format(record))
        assert entry["operation"] == "lookup_token"
        assert entry["result_count"] == 3
        assert "query" not in entry


class TestLoggers:
    """Tests for logger accessors."""

    def test_category_logger_name(self) -> None:
        """Test category loggers nest under the package logger."""
        assert get_category_logger(LogCategory.MIGRATION).name == "luba_catalog.migration"
        assert get_logger().name == LOGGER_NAME
