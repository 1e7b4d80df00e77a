"""Tests for logging setup."""

import logging

import pytest

from seo_report.logging_config import LOG_FORMAT, setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    """Put the root logger back the way it was."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestLoggingConfig:
    """Test cases for setup_logging."""

    def test_level(self):
        """Test the root level follows the flag."""
        setup_logging(level="DEBUG")
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self):
        """Test an unknown level name."""
        setup_logging(level="LOUD")
        assert logging.getLogger().level == logging.INFO

    def test_log_file(self, tmp_path):
        """Test a file handler is added and its directory created."""
        log_file = tmp_path / "logs" / "seo.log"
        setup_logging(level="INFO", log_file=str(log_file))

        logging.getLogger("seo_report.test").info("hello")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "hello" in log_file.read_text()

    def test_quiets_urllib3(self):
        """Test noisy third-party loggers are raised to WARNING."""
        setup_logging(level="DEBUG")
        assert logging.getLogger("urllib3").level == logging.WARNING
        assert logging.getLogger("charset_normalizer").level == logging.WARNING

    def test_console_logs_go_to_stderr(self, capsys):
        """Test log lines never mix into a report printed on stdout."""
        setup_logging(level="INFO")
        logging.getLogger("seo_report.test").info("fetching page")

        captured = capsys.readouterr()
        assert "fetching page" not in captured.out
        assert "seo_report.test - INFO - fetching page" in captured.err

    def test_format(self):
        """Test the console handler uses the shared format."""
        setup_logging(level="INFO")
        assert logging.getLogger().handlers[0].formatter._fmt == LOG_FORMAT
