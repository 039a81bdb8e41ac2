"""Tests for core logging module."""

import logging
from io import StringIO

import pytest

from .lib import LOG_FORMAT, get_logger, setup_logging


class TestLogging:
    """Test core logging API."""

    @pytest.mark.unit
    def test_get_logger(self) -> None:
        """Verify logger instance creation."""
        logger = get_logger("test")
        assert logger.name == "test"
        assert isinstance(logger, logging.Logger)

    @pytest.mark.unit
    def test_get_logger_default_name(self) -> None:
        """Verify default logger name."""
        logger = get_logger()
        assert logger.name == "cosmo"

    @pytest.mark.unit
    def test_setup_logging(self) -> None:
        """Verify logging setup keeps the level on the root/handler."""
        stream = StringIO()
        setup_logging(level=logging.DEBUG, stream=stream)
        logger = get_logger("test_setup")
        logger.debug("test message")

        # basicConfig is a no-op once logging is configured, so only the
        # API contract is checked here.
        assert logger.level == logging.NOTSET

    @pytest.mark.unit
    def test_setup_logging_accepts_level_name(self) -> None:
        """Level names are accepted alongside numeric levels."""
        setup_logging(level="warning", stream=StringIO())
        setup_logging(level="not-a-level", stream=StringIO())

    @pytest.mark.unit
    def test_format_includes_logger_name(self) -> None:
        """Records are formatted with the logger name and level."""
        formatter = logging.Formatter(LOG_FORMAT)
        record = logging.LogRecord("cosmo.validation", logging.INFO, "", 0, "hi", None, None)
        line = formatter.format(record)
        assert " - cosmo.validation - INFO - hi" in line
