"""Custom exception classes for the Dexter console.

This module provides a unified exception hierarchy for the application.
Core operations treat empty drafts and unknown ids as silent no-ops; the
exceptions here cover configuration, seed loading, patch validation and the
opt-in strict id mode.
"""

from typing import Any


class ConsoleError(Exception):
    """Base exception for all Dexter console errors.

    All custom exceptions in this system should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
            cause: Optional original exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for presentation."""
        result: dict[str, Any] = {
            "error": self.__class__.__name__,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result


# ============================================================================
# Configuration Errors
# ============================================================================


class ConfigurationError(ConsoleError):
    """Raised when there's a configuration error."""

    pass


class MissingConfigurationError(ConfigurationError):
    """Raised when a required configuration is missing."""

    def __init__(self, config_key: str, message: str | None = None):
        self.config_key = config_key
        msg = message or f"Missing required configuration: {config_key}"
        super().__init__(msg, details={"config_key": config_key})


class InvalidConfigurationError(ConfigurationError):
    """Raised when a configuration value is invalid."""

    def __init__(self, config_key: str, value: Any, message: str | None = None):
        self.config_key = config_key
        self.value = value
        msg = message or f"Invalid configuration value for {config_key}: {value}"
        super().__init__(msg, details={"config_key": config_key, "value": str(value)})


class SeedLoadError(ConfigurationError):
    """Raised when seed data cannot be loaded."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        details = {"path": path} if path else None
        super().__init__(
            f"{message}" + (f" (path: {path})" if path else ""), details=details
        )


# ============================================================================
# State Errors
# ============================================================================


class ValidationError(ConsoleError):
    """Raised when a patch is rejected before any state is mutated."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(
            f"Invalid value for {field}: {reason}",
            details={"field": field, "reason": reason},
        )


class EntityNotFoundError(ConsoleError):
    """Raised in strict mode when an update targets an unknown id."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(
            f"{entity_type} not found: {entity_id}",
            details={"entity_type": entity_type, "entity_id": entity_id},
        )
