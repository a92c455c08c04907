"""
Unit tests for logger_module.py.

Tests cover:
- Logger initialization and handler attachment
- Log level configuration
- File and console output
- Idempotency of initialization
- Convenience logging methods
"""

import logging
from unittest.mock import patch, MagicMock
import pytest

from src.config.logger_module import initialize_logger, log_debug, log_info, log_warning, log_error


def _reset_logger():
    """Clear handlers and the module-level initialization flag."""
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        handler.close()
    root_logger.handlers.clear()
    root_logger.setLevel(logging.WARNING)
    
    import src.config.logger_module
    src.config.logger_module._logger_initialized = False


def _flush():
    for handler in logging.getLogger().handlers:
        handler.flush()


@pytest.fixture(autouse=True)
def clean_logger():
    """Start and finish every test with an uninitialized root logger."""
    _reset_logger()
    yield
    _reset_logger()


class TestInitializeLogger:
    """Test cases for initialize_logger function."""
    
    def test_initialize_logger_default_parameters(self, tmp_path):
        """Test logger initialization with default level."""
        log_file = tmp_path / "logs" / "pluscode.log"
        
        initialize_logger(log_file=str(log_file))
        
        root_logger = logging.getLogger()
        assert root_logger.level == logging.INFO
        assert len(root_logger.handlers) == 2
        
        handler_types = [type(h).__name__ for h in root_logger.handlers]
        assert "StreamHandler" in handler_types
        assert "FileHandler" in handler_types
        assert log_file.exists()
    
    def test_initialize_logger_custom_level(self, tmp_path):
        """Test logger initialization with custom log level."""
        initialize_logger(log_level="DEBUG", log_file=str(tmp_path / "test.log"))
        
        assert logging.getLogger().level == logging.DEBUG
    
    def test_initialize_logger_invalid_level(self, tmp_path):
        """Test logger initialization with invalid log level defaults to INFO."""
        initialize_logger(log_level="INVALID", log_file=str(tmp_path / "test.log"))
        
        assert logging.getLogger().level == logging.INFO
    
    def test_initialize_logger_creates_directory(self, tmp_path):
        """Test that logger creates log directory if it doesn't exist."""
        log_file = tmp_path / "deep" / "nested" / "path" / "pluscode.log"
        
        initialize_logger(log_file=str(log_file))
        
        assert log_file.parent.exists()
        assert log_file.exists()
    
    def test_initialize_logger_idempotency(self, tmp_path):
        """Test that multiple calls to initialize_logger don't duplicate handlers."""
        log_file = tmp_path / "test.log"
        
        initialize_logger(log_file=str(log_file))
        initialize_logger(log_file=str(log_file))
        initialize_logger(log_level="DEBUG", log_file=str(log_file))
        
        root_logger = logging.getLogger()
        assert len(root_logger.handlers) == 2
        # Later calls must not change the level either
        assert root_logger.level == logging.INFO
    
    def test_initialize_logger_handler_levels(self, tmp_path):
        """Console shows warnings and up, the file gets everything."""
        initialize_logger(log_file=str(tmp_path / "test.log"))
        
        console_handler = None
        file_handler = None
        for handler in logging.getLogger().handlers:
            if isinstance(handler, logging.FileHandler):
                file_handler = handler
            elif isinstance(handler, logging.StreamHandler):
                console_handler = handler
        
        assert console_handler is not None
        assert file_handler is not None
        assert console_handler.level == logging.WARNING
        assert file_handler.level == logging.DEBUG
    
    def test_initialize_logger_formatters(self, tmp_path):
        """Test that handlers have appropriate formatters."""
        initialize_logger(log_file=str(tmp_path / "test.log"))
        
        for handler in logging.getLogger().handlers:
            assert handler.formatter is not None
            format_string = handler.formatter._fmt
            assert "%(asctime)s" in format_string
            assert "%(levelname)s" in format_string
            assert "%(message)s" in format_string


class TestLoggingOutput:
    """Test cases for actual logging output."""
    
    def test_log_levels_respected(self, tmp_path):
        """Test that log levels are respected."""
        log_file = tmp_path / "test.log"
        initialize_logger(log_level="WARNING", log_file=str(log_file))
        
        root_logger = logging.getLogger()
        root_logger.debug("Debug message")
        root_logger.info("Info message")
        root_logger.warning("Warning message")
        root_logger.error("Error message")
        _flush()
        
        log_content = log_file.read_text()
        assert "Debug message" not in log_content
        assert "Info message" not in log_content
        assert "Warning message" in log_content
        assert "Error message" in log_content
    
    def test_file_records_source_location(self, tmp_path):
        """File entries carry the emitting file and line."""
        log_file = tmp_path / "test.log"
        initialize_logger(log_file=str(log_file))
        
        log_info("Located message")
        _flush()
        
        assert "logger_module.py:" in log_file.read_text()


class TestConvenienceMethods:
    """Test cases for convenience logging methods."""
    
    @pytest.mark.parametrize("method,level,message", [
        (log_debug, "DEBUG", "Test debug message"),
        (log_info, "INFO", "Test info message"),
        (log_warning, "WARNING", "Test warning message"),
        (log_error, "ERROR", "Test error message"),
    ])
    def test_message_written(self, tmp_path, method, level, message):
        """Each helper writes at its own level."""
        log_file = tmp_path / "test.log"
        initialize_logger(log_level="DEBUG", log_file=str(log_file))
        
        method(message)
        _flush()
        
        log_content = log_file.read_text()
        assert f"{level} - " in log_content
        assert message in log_content
    
    def test_debug_hidden_at_info_level(self, tmp_path):
        """Debug output from the codec stays out of an INFO log."""
        log_file = tmp_path / "test.log"
        initialize_logger(log_level="INFO", log_file=str(log_file))
        
        log_debug("Shortened 9C3W9QCJ+2VX by 4 digits")
        _flush()
        
        assert "Shortened" not in log_file.read_text()
    
    def test_convenience_methods_before_initialization(self):
        """Convenience methods work even before explicit initialization."""
        log_warning("Warning without initialization")
    
    @patch('logging.getLogger')
    def test_convenience_methods_call_correct_levels(self, mock_get_logger):
        """Test that convenience methods call the correct logging levels."""
        mock_logger = MagicMock()
        mock_get_logger.return_value = mock_logger
        
        log_debug("debug message")
        log_info("info message")
        log_warning("warning message")
        log_error("error message")
        
        mock_logger.debug.assert_called_once_with("debug message")
        mock_logger.info.assert_called_once_with("info message")
        mock_logger.warning.assert_called_once_with("warning message")
        mock_logger.error.assert_called_once_with("error message")
