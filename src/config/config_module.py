"""
Configuration management module for the plus code toolkit.

Handles loading environment variables, accessing configuration values,
and building codec settings.
"""

import os
import logging
from dataclasses import dataclass
from typing import Any
from dotenv import load_dotenv

from ..pluscode.pluscode_constants import PAIR_CODE_LENGTH, SEPARATOR_POSITION


class ConfigError(Exception):
    """Custom exception for configuration-related errors."""
    pass


def load_config(env_path: str = ".env") -> None:
    """
    Load environment variables from a .env file.
    
    Args:
        env_path: Path to the .env file (default: ".env")
    """
    logger = logging.getLogger(__name__)
    
    if os.path.exists(env_path):
        load_dotenv(env_path, override=True)
        logger.info(f"Loaded configuration from {env_path}")
    else:
        logger.warning(f"Configuration file {env_path} not found, using system environment variables only")


def get_config(key: str, default: Any = None) -> Any:
    """
    Get a configuration value from environment variables.
    
    Args:
        key: Environment variable key
        default: Default value if key not found
        
    Returns:
        Configuration value or default
    """
    logger = logging.getLogger(__name__)
    
    value = os.getenv(key, default)
    
    if value == default and default is not None:
        logger.warning(f"Configuration key '{key}' not found, using default value: {default}")
    elif value is None:
        logger.warning(f"Configuration key '{key}' not found and no default provided")
    
    return value


def get_int_config(key: str, default: int) -> int:
    """
    Get an integer configuration value.
    
    Args:
        key: Environment variable key
        default: Value used when the key is not set
        
    Returns:
        Parsed integer value
        
    Raises:
        ConfigError: If the value is set but is not an integer
    """
    value = get_config(key, default)
    try:
        return int(value)
    except (TypeError, ValueError):
        message = f"Configuration key '{key}' must be an integer, got: {value!r}"
        logging.getLogger(__name__).error(message)
        raise ConfigError(message)


@dataclass
class CodecSettings:
    """Runtime settings for the plus code command line."""
    
    # Number of significant digits produced by encode when none is given
    default_code_length: int = PAIR_CODE_LENGTH
    
    log_level: str = "INFO"
    log_file: str = "logs/pluscode.log"
    
    def __post_init__(self):
        """Validate configuration values."""
        length = self.default_code_length
        if length < 2 or (length < SEPARATOR_POSITION and length % 2 == 1):
            raise ConfigError(
                f"Invalid default_code_length: {length}. "
                f"Must be at least 2 and even below {SEPARATOR_POSITION}"
            )
        
        if self.log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ConfigError(f"Invalid log_level: {self.log_level}")


def load_codec_settings() -> CodecSettings:
    """
    Build codec settings from the PLUSCODE_* environment variables.
    
    Returns:
        Validated CodecSettings
        
    Raises:
        ConfigError: If a value is malformed or out of range
    """
    return CodecSettings(
        default_code_length=get_int_config("PLUSCODE_DEFAULT_CODE_LENGTH", PAIR_CODE_LENGTH),
        log_level=get_config("PLUSCODE_LOG_LEVEL", "INFO"),
        log_file=get_config("PLUSCODE_LOG_FILE", "logs/pluscode.log"),
    )
