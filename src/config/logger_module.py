"""
Logging utilities for the plus code toolkit.

Provides centralized logging configuration and convenience methods
for consistent logging across the codec and its command line.
"""

import logging
from pathlib import Path


# Flag to track if logger has been initialized to ensure idempotency
_logger_initialized = False


def initialize_logger(log_level: str = "INFO", log_file: str = "logs/pluscode.log") -> None:
    """
    Initialize the root logger with console and file handlers.
    
    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file
    """
    global _logger_initialized
    
    if _logger_initialized:
        return
    
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    
    # Clear any existing handlers to prevent duplicates
    root_logger.handlers.clear()
    
    console_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    
    file_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    
    # Console stays quiet below warnings; command output goes to stdout.
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(console_formatter)
    
    file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(file_formatter)
    
    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)
    
    _logger_initialized = True
    
    root_logger.info(f"Logger initialized with level {log_level}, file: {log_file}")


def log_debug(message: str) -> None:
    """
    Log a debug message.
    
    Args:
        message: Message to log
    """
    logging.getLogger().debug(message)


def log_info(message: str) -> None:
    """
    Log an info message.
    
    Args:
        message: Message to log
    """
    logging.getLogger().info(message)


def log_warning(message: str) -> None:
    """
    Log a warning message.
    
    Args:
        message: Message to log
    """
    logging.getLogger().warning(message)


def log_error(message: str) -> None:
    """
    Log an error message.
    
    Args:
        message: Message to log
    """
    logging.getLogger().error(message)
