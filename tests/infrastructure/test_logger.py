#!/usr/bin/env python3
"""Tests for the Logger module."""

import io
import logging
import threading

import pytest

from fixset import FixSet, Rule
from fixset.infrastructure.logger import LogLevel, Logger, get_logger, set_global_logger


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def logger(stream):
    handler = logging.StreamHandler(stream)
    return Logger(name="fixset.test", level=LogLevel.DEBUG, handlers=[handler])


class TestLogLevel:
    """Tests for LogLevel enum."""

    def test_log_levels(self):
        """Test log level values match Python logging."""
        assert LogLevel.DEBUG == logging.DEBUG
        assert LogLevel.INFO == logging.INFO
        assert LogLevel.WARNING == logging.WARNING
        assert LogLevel.ERROR == logging.ERROR
        assert LogLevel.CRITICAL == logging.CRITICAL


class TestLogger:
    """Tests for Logger class."""

    def test_logger_creation(self, logger):
        """Test creating a logger."""
        assert logger.name == "fixset.test"
        assert logger.get_level() == LogLevel.DEBUG
        assert logger.logger.propagate is False

    def test_default_leaves_level_alone(self):
        """Test logger without level does not change the stdlib level."""
        Logger(name="fixset.test")
        assert logging.getLogger("fixset.test").level == logging.NOTSET

    def test_default_adds_null_handler(self):
        """Test logger without handlers gets a NullHandler only."""
        logger = Logger(name="fixset.test")

        assert [type(h) for h in logger.logger.handlers] == [logging.NullHandler]
        assert logger.logger.propagate is True

    def test_default_keeps_existing_handlers(self, stream):
        """Test existing handlers and propagation are preserved."""
        app_handler = logging.StreamHandler(stream)
        logging.getLogger("fixset.test").addHandler(app_handler)

        logger = Logger(name="fixset.test")

        assert logger.logger.handlers == [app_handler]
        assert logger.logger.propagate is True

    def test_string_level(self, logger):
        """Test setting level by name."""
        logger.set_level("error")
        assert logger.get_level() == LogLevel.ERROR

    def test_message_with_context(self, logger, stream):
        """Test context is appended as key=value pairs."""
        logger.debug("Rule created", prefixes=2, replace_prefix=True)
        assert "Rule created | prefixes=2 replace_prefix=True" in stream.getvalue()

    def test_message_without_context(self, logger, stream):
        """Test plain message is left alone."""
        logger.info("Loaded")
        assert stream.getvalue().strip() == "Loaded"

    def test_level_filtering(self, logger, stream):
        """Test messages below level are dropped."""
        logger.set_level(LogLevel.WARNING)
        logger.debug("hidden")
        logger.info("hidden")
        logger.warning("shown")
        logger.error("also shown")

        output = stream.getvalue()
        assert "hidden" not in output
        assert "shown" in output
        assert "also shown" in output

    def test_is_enabled_for(self, logger):
        """Test level checks."""
        logger.set_level(LogLevel.INFO)

        assert logger.is_enabled_for("info")
        assert not logger.is_enabled_for(LogLevel.DEBUG)

    def test_add_context(self, logger, stream):
        """Test temporary context is merged and removed."""
        with logger.add_context(rule="include"):
            logger.info("inside", element="a")
        logger.info("outside")

        lines = stream.getvalue().splitlines()
        assert lines[0] == "inside | rule='include' element='a'"
        assert lines[1] == "outside"

    def test_context_attached_to_record(self, logger):
        """Test context is available on the log record."""
        records = []

        class Capture(logging.Handler):
            def emit(self, record):
                records.append(record)

        logger.add_handler(Capture())
        logger.debug("msg", key="value")

        assert records[0].context == {"key": "value"}

    def test_context_is_thread_local(self, logger, stream):
        """Test context in one thread does not leak to another."""
        ready = threading.Event()
        done = threading.Event()

        def worker():
            with logger.add_context(worker=True):
                ready.set()
                done.wait(timeout=5)

        thread = threading.Thread(target=worker)
        thread.start()
        ready.wait(timeout=5)
        logger.info("main")
        done.set()
        thread.join()

        assert stream.getvalue().strip() == "main"


class TestGlobalLogger:
    """Tests for the shared logger instance."""

    def test_get_logger_reuses_instance(self):
        """Test get_logger returns the same logger."""
        assert get_logger() is get_logger()

    def test_set_global_logger(self, logger):
        """Test replacing the global logger."""
        set_global_logger(logger)
        assert get_logger("fixset.test") is logger

    def test_reset_global_logger(self, logger):
        """Test None resets the global logger."""
        set_global_logger(logger)
        set_global_logger(None)

        assert get_logger("fixset.test") is not logger


class TestApplicationLogging:
    """Tests for logging configured by the application."""

    def test_app_handler_survives_rule_construction(self):
        """Test building rules keeps handlers attached by the application."""
        app_handler = logging.NullHandler()
        stdlib_logger = logging.getLogger("fixset")
        stdlib_logger.addHandler(app_handler)

        Rule({"prefixes": "a"})
        FixSet({"include": {"prefixes": "a"}}).get_name("abc")

        assert stdlib_logger.handlers == [app_handler]
        assert stdlib_logger.propagate is True

    def test_app_receives_debug_records(self, stream):
        """Test application handler and level control library output."""
        stdlib_logger = logging.getLogger("fixset")
        stdlib_logger.addHandler(logging.StreamHandler(stream))
        stdlib_logger.setLevel(logging.DEBUG)

        Rule({"prefixes": "a"})

        assert "Rule created" in stream.getvalue()

    def test_records_propagate_to_root(self, caplog):
        """Test records reach root handlers."""
        with caplog.at_level(logging.DEBUG, logger="fixset"):
            Rule({"suffixes": "z"})

        assert any("Rule created" in record.getMessage() for record in caplog.records)
