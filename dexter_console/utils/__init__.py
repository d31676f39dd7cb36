"""Utility modules for the Dexter console.

This package provides utility functions and classes for:
- Configuration management
- Structured logging
- Exception handling
"""

from .config import (
    AppConfig,
    AppSettings,
    ConsoleConfig,
    Environment,
    IdStrategy,
    LogFormat,
    LoggingConfig,
    get_config,
    init_config,
    reset_config,
)
from .exceptions import (
    ConfigurationError,
    ConsoleError,
    EntityNotFoundError,
    InvalidConfigurationError,
    MissingConfigurationError,
    SeedLoadError,
    ValidationError,
)
from .logging import (
    LoggerAdapter,
    clear_correlation_id,
    get_correlation_id,
    get_logger,
    get_session_logger,
    get_store_logger,
    set_correlation_id,
    setup_logging,
)

__all__ = [
    # Config
    "AppConfig",
    "AppSettings",
    "ConsoleConfig",
    "LoggingConfig",
    "Environment",
    "IdStrategy",
    "LogFormat",
    "get_config",
    "init_config",
    "reset_config",
    # Logging
    "setup_logging",
    "get_logger",
    "LoggerAdapter",
    "get_store_logger",
    "get_session_logger",
    "get_correlation_id",
    "set_correlation_id",
    "clear_correlation_id",
    # Exceptions
    "ConsoleError",
    "ConfigurationError",
    "MissingConfigurationError",
    "InvalidConfigurationError",
    "SeedLoadError",
    "ValidationError",
    "EntityNotFoundError",
]
