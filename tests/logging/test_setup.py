"""Tests for logging setup."""

import io
import logging

from pmr_trip.settings import LoggingSettings
from pmr_trip.sim_logging import (
    ContextFilter,
    JSONFormatter,
    get_logger,
    log_session_context,
    setup_logging,
    setup_logging_from_settings,
)


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_configures_root_logger(self):
        """Verify handler is added to root logger."""
        root_logger = logging.getLogger()
        original_handlers = root_logger.handlers.copy()
        original_level = root_logger.level

        try:
            root_logger.handlers.clear()
            setup_logging(level="DEBUG")

            assert len(root_logger.handlers) == 1
            assert root_logger.level == logging.DEBUG
            handler = root_logger.handlers[0]
            assert any(isinstance(f, ContextFilter) for f in handler.filters)
        finally:
            root_logger.handlers = original_handlers
            root_logger.setLevel(original_level)

    def test_setup_from_settings_uses_json(self):
        root_logger = logging.getLogger()
        original_handlers = root_logger.handlers.copy()
        original_level = root_logger.level

        try:
            handler = setup_logging_from_settings(
                LoggingSettings(format="json", environment="staging")
            )

            assert handler in root_logger.handlers
            formatter = handler.formatter
            assert isinstance(formatter, JSONFormatter)
            assert formatter.environment == "staging"
        finally:
            root_logger.handlers = original_handlers
            root_logger.setLevel(original_level)


class TestHandlerReplacement:
    def test_second_setup_swaps_project_handler_only(self):
        root_logger = logging.getLogger()
        original_handlers = root_logger.handlers.copy()
        original_level = root_logger.level
        foreign = logging.NullHandler()

        try:
            root_logger.addHandler(foreign)
            first = setup_logging()
            second = setup_logging(json_output=True)

            assert foreign in root_logger.handlers
            assert second in root_logger.handlers
            assert first not in root_logger.handlers
        finally:
            root_logger.handlers = original_handlers
            root_logger.setLevel(original_level)

    def test_writes_to_given_stream(self):
        root_logger = logging.getLogger()
        original_handlers = root_logger.handlers.copy()
        original_level = root_logger.level
        stream = io.StringIO()

        try:
            setup_logging(stream=stream)
            with log_session_context("sess-7"):
                get_logger("pmr_trip.test").info("driver phone 06 12 34 56 78")

            output = stream.getvalue()
            assert "[sess-7]" in output
            assert "[PHONE]" in output
        finally:
            root_logger.handlers = original_handlers
            root_logger.setLevel(original_level)


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger_returns_named_logger(self):
        """Verify logger name is set correctly."""
        logger = get_logger("pmr_trip.taxi")

        assert logger.name == "pmr_trip.taxi"
        assert isinstance(logger, logging.Logger)
