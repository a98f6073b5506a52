"""Tests for structured logging system."""

import pytest
import logging
from pathlib import Path

from android_missing_translations.utils.logging import (
    LOGGER_NAME,
    Logger,
    ColoredFormatter,
    get_logger,
    configure_logging,
    reset_logger,
)
from android_missing_translations.utils.colors import Colors


def make_record(level, msg='Test message'):
    return logging.LogRecord(
        name='test',
        level=level,
        pathname='',
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None
    )


class TestColoredFormatter:
    """Test cases for ColoredFormatter."""

    def test_format_without_colors(self):
        """Formatter without colors should return plain text."""
        formatter = ColoredFormatter(fmt='%(message)s', use_colors=False)
        result = formatter.format(make_record(logging.INFO))
        assert result == 'Test message'

    def test_info_is_never_colored(self):
        formatter = ColoredFormatter(fmt='%(message)s', use_colors=True)
        assert formatter.format(make_record(logging.INFO)) == 'Test message'

    def test_levels_have_colors(self):
        """Non-INFO levels should be wrapped in their color."""
        formatter = ColoredFormatter(fmt='%(message)s', use_colors=True, use_prefixes=False)

        levels = [
            (logging.DEBUG, Colors.DIM),
            (logging.WARNING, Colors.WARNING),
            (logging.ERROR, Colors.FAIL),
        ]

        for level, expected_color in levels:
            result = formatter.format(make_record(level, 'Test'))
            assert result == f"{expected_color}Test{Colors.ENDC}", f"Level {level} should use color {expected_color}"

    def test_prefixes(self):
        formatter = ColoredFormatter(fmt='%(message)s', use_colors=False)

        assert formatter.format(make_record(logging.WARNING)) == 'warning: Test message'
        assert formatter.format(make_record(logging.ERROR)) == 'error: Test message'
        assert formatter.format(make_record(logging.DEBUG)) == 'Test message'

    def test_without_prefixes(self):
        formatter = ColoredFormatter(fmt='%(message)s', use_colors=False, use_prefixes=False)
        assert formatter.format(make_record(logging.ERROR)) == 'Test message'


class TestLogger:
    """Test cases for Logger class."""

    def test_singleton_pattern(self):
        """Logger should be a singleton."""
        assert Logger() is Logger()

    def test_get_logger_returns_package_logger(self):
        assert get_logger() is get_logger()
        assert get_logger().name == LOGGER_NAME

    def test_get_module_logger(self):
        """Module loggers are children of the package logger."""
        module_logger = get_logger('core.analyzer')
        assert module_logger.name == 'android_missing_translations.core.analyzer'

    def test_package_logger_does_not_propagate(self):
        assert get_logger().propagate is False

    def test_configure_verbose(self):
        """Verbose mode should set DEBUG level."""
        assert configure_logging(verbose=True)._console_handler.level == logging.DEBUG

    def test_configure_quiet(self):
        """Quiet mode should set WARNING level."""
        assert configure_logging(quiet=True)._console_handler.level == logging.WARNING

    def test_quiet_wins_over_verbose(self):
        assert configure_logging(verbose=True, quiet=True)._console_handler.level == logging.WARNING

    def test_configure_default(self):
        """Default mode should set INFO level."""
        assert configure_logging()._console_handler.level == logging.INFO

    def test_reconfigure_keeps_one_console_handler(self):
        configure_logging()
        configure_logging(verbose=True)

        handlers = logging.getLogger(LOGGER_NAME).handlers
        assert len(handlers) == 1

    def test_records_go_to_stderr(self, capsys):
        configure_logging(use_colors=False)

        get_logger('cli').info("Info message")
        get_logger('cli').debug("Hidden message")

        captured = capsys.readouterr()
        assert captured.out == ''
        assert "Info message" in captured.err
        assert "Hidden message" not in captured.err

    def test_verbose_shows_debug(self, capsys):
        configure_logging(verbose=True, use_colors=False)

        get_logger('core').debug("Debug message")

        assert "Debug message" in capsys.readouterr().err

    def test_quiet_hides_info(self, capsys):
        configure_logging(quiet=True, use_colors=False)

        get_logger('core').info("Info message")
        get_logger('core').warning("Careful")

        err = capsys.readouterr().err
        assert "Info message" not in err
        assert "warning: Careful" in err


class TestFileLogging:
    """Test cases for file logging functionality."""

    def test_log_file_format(self, tmp_path):
        """File log should have timestamp, level and logger name."""
        log_file = tmp_path / 'test.log'
        logger = configure_logging(quiet=True, log_file=log_file)

        get_logger('core').debug("Debug message")
        get_logger('core').warning("Warning message")
        logger._file_handler.flush()

        content = log_file.read_text()
        assert "[DEBUG] android_missing_translations.core: Debug message" in content
        assert "[WARNING]" in content

    def test_log_file_no_colors(self, tmp_path):
        """File log should not contain ANSI color codes."""
        log_file = tmp_path / 'test.log'
        logger = configure_logging(log_file=log_file, use_colors=True)

        get_logger().error("Broken")
        logger._file_handler.flush()

        content = log_file.read_text()
        assert '\033[' not in content
        assert 'Broken' in content

    def test_log_file_directory_creation(self, tmp_path):
        """Should create directory if it doesn't exist."""
        log_file = tmp_path / 'subdir' / 'test.log'
        configure_logging(log_file=log_file)

        assert log_file.parent.exists()


class TestResetLogger:
    """Test cases for reset_logger function."""

    def test_reset_clears_instance(self):
        first = Logger()
        reset_logger()

        assert Logger() is not first

    def test_reset_clears_handlers(self):
        configure_logging(log_file=None)
        reset_logger()

        from android_missing_translations.utils import logging as log_module
        assert log_module._logger is None
        assert logging.getLogger(LOGGER_NAME).handlers == []
