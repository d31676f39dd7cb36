"""Application configuration management.

This module provides configuration loading from environment variables and YAML files.
"""

import os
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from .exceptions import InvalidConfigurationError, MissingConfigurationError

DEFAULT_WELCOME_MESSAGE = (
    "Welcome to Dexter Web. Ask a financial research question, manage providers, "
    "or configure A2A agent cards."
)
DEFAULT_ACKNOWLEDGMENT = (
    "Message queued. This web UI is ready to connect to the agent runtime."
)


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class LogFormat(str, Enum):
    """Log output format types."""

    JSON = "json"
    CONSOLE = "console"


class IdStrategy(str, Enum):
    """Id generation strategies."""

    UUID = "uuid"
    COUNTER = "counter"


class AppSettings(BaseModel):
    """Application settings."""

    env: Environment = Field(
        default=Environment.DEVELOPMENT, description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")
    name: str = Field(default="Dexter Web Console", description="Application name")
    version: str = Field(default="0.1.0", description="Application version")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Log level")
    format: LogFormat = Field(default=LogFormat.JSON, description="Log format")
    file: str | None = Field(default=None, description="Optional log file path")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v_upper


class ConsoleConfig(BaseModel):
    """Session behaviour settings."""

    welcome_message: str = Field(
        default=DEFAULT_WELCOME_MESSAGE, description="Seeded agent greeting"
    )
    acknowledgment: str = Field(
        default=DEFAULT_ACKNOWLEDGMENT,
        description="Placeholder agent reply appended after each user message",
    )
    seed_file: str | None = Field(
        default=None, description="Optional YAML file overriding the built-in seeds"
    )
    id_strategy: IdStrategy = Field(
        default=IdStrategy.UUID, description="Id generation strategy"
    )
    id_prefix: str = Field(default="id", description="Prefix for generated ids")
    strict_ids: bool = Field(
        default=False, description="Raise on updates that target an unknown id"
    )
    validate_urls: bool = Field(
        default=False, description="Validate base_url and contact fields in patches"
    )
    key_mask_length: int = Field(
        default=8, description="Number of mask characters shown for hidden keys"
    )

    @field_validator("id_prefix")
    @classmethod
    def validate_id_prefix(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("id_prefix must not be empty")
        return v.strip()

    @field_validator("key_mask_length")
    @classmethod
    def validate_key_mask_length(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("key_mask_length must be positive")
        return v


class AppConfig(BaseModel):
    """Main application configuration."""

    app: AppSettings = Field(default_factory=AppSettings)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    console: ConsoleConfig = Field(default_factory=ConsoleConfig)

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> "AppConfig":
        """Load configuration from environment variables.

        Args:
            env_file: Optional path to .env file

        Returns:
            AppConfig instance populated from environment

        Raises:
            InvalidConfigurationError: If a variable holds an invalid value
        """
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        data: dict[str, Any] = {
            "app": {
                "env": os.getenv("APP_ENV", "development"),
                "debug": os.getenv("APP_DEBUG", "false").lower() == "true",
            },
            "logging": {
                "level": os.getenv("LOG_LEVEL", "INFO"),
                "format": os.getenv("LOG_FORMAT", "json"),
                "file": os.getenv("LOG_FILE"),
            },
            "console": {
                "acknowledgment": os.getenv(
                    "CONSOLE_ACK_MESSAGE", DEFAULT_ACKNOWLEDGMENT
                ),
                "seed_file": os.getenv("CONSOLE_SEED_FILE"),
                "id_strategy": os.getenv("CONSOLE_ID_STRATEGY", "uuid"),
                "strict_ids": (
                    os.getenv("CONSOLE_STRICT_IDS", "false").lower() == "true"
                ),
                "validate_urls": (
                    os.getenv("CONSOLE_VALIDATE_URLS", "false").lower() == "true"
                ),
            },
        }
        return cls._from_yaml_dict(data)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> "AppConfig":
        """Load configuration from YAML file.

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            AppConfig instance populated from YAML

        Raises:
            MissingConfigurationError: If YAML file doesn't exist
            InvalidConfigurationError: If YAML content is invalid
        """
        path = Path(yaml_path)
        if not path.exists():
            raise MissingConfigurationError(
                str(yaml_path), f"Configuration file not found: {yaml_path}"
            )

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise InvalidConfigurationError(
                str(path), "<unparseable>", f"Invalid YAML in {path}: {e}"
            ) from e

        if not isinstance(data, dict):
            raise InvalidConfigurationError(
                str(path), type(data).__name__, "YAML content must be a dictionary"
            )

        return cls._from_yaml_dict(data)

    @classmethod
    def _from_yaml_dict(cls, data: dict[str, Any]) -> "AppConfig":
        """Create config from parsed YAML dictionary.

        Raises:
            InvalidConfigurationError: Naming the first offending key.
        """
        config_data: dict[str, Any] = {}

        for section, model in (
            ("app", AppSettings),
            ("logging", LoggingConfig),
            ("console", ConsoleConfig),
        ):
            if section not in data:
                continue
            section_data = data[section]
            if not isinstance(section_data, dict):
                raise InvalidConfigurationError(
                    section,
                    section_data,
                    f"Configuration section '{section}' must be a mapping",
                )
            try:
                config_data[section] = model(**section_data)
            except PydanticValidationError as e:
                error = e.errors()[0]
                key = ".".join([section, *(str(part) for part in error["loc"])])
                value = error.get("input")
                raise InvalidConfigurationError(
                    key,
                    value,
                    f"Invalid configuration value for {key}: {value!r} "
                    f"({error['msg']})",
                ) from e

        return cls(**config_data)

    @classmethod
    def load(
        cls,
        yaml_path: str | Path | None = None,
        env_file: str | Path | None = None,
    ) -> "AppConfig":
        """Load configuration with YAML as base and environment overrides.

        Environment variables take precedence over YAML settings.

        Args:
            yaml_path: Optional path to YAML configuration file
            env_file: Optional path to .env file

        Returns:
            AppConfig instance with merged configuration
        """
        if yaml_path:
            config = cls.from_yaml(yaml_path)
        else:
            config = cls()

        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        return cls._apply_env_overrides(config)

    @classmethod
    def _apply_env_overrides(cls, config: "AppConfig") -> "AppConfig":
        """Apply environment variable overrides to existing config."""
        data = config.model_dump()

        # App settings
        if os.getenv("APP_ENV"):
            data["app"]["env"] = os.getenv("APP_ENV")
        if os.getenv("APP_DEBUG"):
            data["app"]["debug"] = os.getenv("APP_DEBUG", "").lower() == "true"

        # Logging
        if os.getenv("LOG_LEVEL"):
            data["logging"]["level"] = os.getenv("LOG_LEVEL", "INFO")
        if os.getenv("LOG_FORMAT"):
            data["logging"]["format"] = os.getenv("LOG_FORMAT", "json")
        if os.getenv("LOG_FILE"):
            data["logging"]["file"] = os.getenv("LOG_FILE")

        # Console
        if os.getenv("CONSOLE_SEED_FILE"):
            data["console"]["seed_file"] = os.getenv("CONSOLE_SEED_FILE")
        if os.getenv("CONSOLE_ID_STRATEGY"):
            data["console"]["id_strategy"] = os.getenv("CONSOLE_ID_STRATEGY")
        if os.getenv("CONSOLE_STRICT_IDS"):
            data["console"]["strict_ids"] = (
                os.getenv("CONSOLE_STRICT_IDS", "").lower() == "true"
            )
        if os.getenv("CONSOLE_VALIDATE_URLS"):
            data["console"]["validate_urls"] = (
                os.getenv("CONSOLE_VALIDATE_URLS", "").lower() == "true"
            )
        if os.getenv("CONSOLE_ACK_MESSAGE"):
            data["console"]["acknowledgment"] = os.getenv("CONSOLE_ACK_MESSAGE", "")

        return cls._from_yaml_dict(data)


# Global configuration instance
_config: AppConfig | None = None


def get_config() -> AppConfig:
    """Get the global configuration instance.

    Returns:
        The global AppConfig instance

    Raises:
        RuntimeError: If configuration has not been initialized
    """
    global _config
    if _config is None:
        raise RuntimeError("Configuration not initialized. Call init_config() first.")
    return _config


def init_config(
    yaml_path: str | Path | None = None,
    env_file: str | Path | None = None,
) -> AppConfig:
    """Initialize the global configuration.

    Args:
        yaml_path: Optional path to YAML configuration file
        env_file: Optional path to .env file

    Returns:
        The initialized AppConfig instance
    """
    global _config
    _config = AppConfig.load(yaml_path=yaml_path, env_file=env_file)
    return _config


def reset_config() -> None:
    """Reset the global configuration (mainly for testing)."""
    global _config
    _config = None
