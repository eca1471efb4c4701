"""
Unit tests for logging configuration.
"""
import io
import logging
import os
import uuid
from unittest.mock import patch
from logger_config import get_logger


def _unique_name():
    return f'test-logger-{uuid.uuid4()}'


class TestGetLogger:
    """Tests for get_logger."""

    @patch.dict(os.environ, {'LOG_LEVEL': 'debug'})
    def test_level_from_environment(self):
        """Test LOG_LEVEL sets the logger level case-insensitively."""
        assert get_logger(_unique_name()).level == logging.DEBUG

    @patch.dict(os.environ, {'LOG_LEVEL': 'INVALID'})
    def test_unknown_level_falls_back_to_info(self):
        """Test an unknown LOG_LEVEL name yields INFO."""
        assert get_logger(_unique_name()).level == logging.INFO

    @patch.dict(os.environ, {}, clear=True)
    def test_default_level(self):
        """Test INFO is used when LOG_LEVEL is unset."""
        assert get_logger(_unique_name()).level == logging.INFO

    def test_handler_added_once(self):
        """Test repeated calls do not stack handlers."""
        name = _unique_name()
        first = get_logger(name)
        second = get_logger(name)

        assert first is second
        assert len(second.handlers) == 1
        assert second.propagate is False

    @patch.dict(os.environ, {}, clear=True)
    def test_correlation_id_in_output(self):
        """Test records carry the correlation id or a placeholder."""
        logger = get_logger(_unique_name())
        handler = logger.handlers[0]
        stream = io.StringIO()
        handler.setStream(stream)

        logger.info('with id', extra={'correlation_id': 'abc-123'})
        logger.info('without id')

        lines = stream.getvalue().splitlines()
        assert '[abc-123] with id' in lines[0]
        assert '[-] without id' in lines[1]
