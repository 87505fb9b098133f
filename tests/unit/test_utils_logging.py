"""
Unit tests for logging utilities.

Tests the logging configuration and the domain logging helpers.
"""

import logging
import os
import tempfile
from unittest.mock import patch

from automap.utils.logging import AutoMapLogger, get_logger, setup_logging


class TestLoggingSetup:
    """Test logging setup and configuration."""

    def teardown_method(self):
        setup_logging(level="INFO")

    def test_setup_logging_default(self):
        with patch.dict('os.environ', {}, clear=False) as env:
            env.pop('AUTOMAP_LOG_LEVEL', None)
            setup_logging()

        logger = logging.getLogger('automap')
        assert logger.level == logging.INFO
        assert len(logger.handlers) > 0
        assert logger.propagate is False

    def test_setup_logging_debug_level(self):
        setup_logging(level='DEBUG')
        assert logging.getLogger('automap').level == logging.DEBUG

    def test_setup_logging_invalid_level(self):
        setup_logging(level='INVALID')
        assert logging.getLogger('automap').level == logging.INFO

    def test_setup_logging_environment_variable(self):
        with patch.dict('os.environ', {'AUTOMAP_LOG_LEVEL': 'WARNING'}):
            setup_logging()
        assert logging.getLogger('automap').level == logging.WARNING

    def test_setup_logging_with_file(self):
        with tempfile.NamedTemporaryFile(suffix='.log', delete=False) as f:
            log_file = f.name

        try:
            setup_logging(log_file=log_file)
            logger = logging.getLogger('automap')

            handler_types = [type(h).__name__ for h in logger.handlers]
            assert 'StreamHandler' in handler_types
            assert 'FileHandler' in handler_types

            logger.info("Test message")
            for handler in logger.handlers:
                handler.flush()

            with open(log_file, 'r') as f:
                assert "Test message" in f.read()
        finally:
            for handler in logging.getLogger('automap').handlers[:]:
                handler.close()
            setup_logging(level="INFO")
            if os.path.exists(log_file):
                os.unlink(log_file)

    def test_setup_logging_removes_existing_handlers(self):
        logger = logging.getLogger('automap')
        dummy_handler = logging.StreamHandler()
        logger.addHandler(dummy_handler)

        setup_logging()

        assert dummy_handler not in logger.handlers


class TestGetLogger:
    """Test logger naming."""

    def test_prefixes_component_name(self):
        assert get_logger("resolver").name == "automap.resolver"

    def test_keeps_module_name(self):
        assert get_logger("automap.codegen.resolver").name == "automap.codegen.resolver"


class TestAutoMapLogger:
    """Test the domain logging helpers."""

    def test_generation_start(self):
        helper = AutoMapLogger("test")
        with patch.object(helper.logger, 'info') as info:
            helper.log_generation_start("AutoValue_Person", 2)
        info.assert_called_once_with("Generating AutoValue_Person (2 properties)")

    def test_key_override(self):
        helper = AutoMapLogger("test")
        with patch.object(helper.logger, 'debug') as debug:
            helper.log_key_override("id", "identifier", "SerializedName")
        assert "identifier" in debug.call_args[0][0]
        assert "@SerializedName" in debug.call_args[0][0]

    def test_generation_failure_is_error(self):
        helper = AutoMapLogger("test")
        with patch.object(helper.logger, 'error') as error:
            helper.log_generation_failure("AutoValue_Person", "template missing")
        error.assert_called_once()
        assert "template missing" in error.call_args[0][0]

    def test_inapplicable(self):
        helper = AutoMapLogger("test")
        with patch.object(helper.logger, 'debug') as debug:
            helper.log_inapplicable("com.example.Plain")
        assert "com.example.Plain" in debug.call_args[0][0]
