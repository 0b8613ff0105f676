"""
Configuration management for cosmoskit.

Handles loading, validation, and access to client configuration settings.

Author: Cosmoskit Team
Date: 2026-10-18
"""

import os
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional
from enum import Enum

import yaml
from pydantic import BaseModel, Field, field_validator, ValidationError, ConfigDict

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://localhost:8081/"


class LogLevel(str, Enum):
    """Valid log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class ConsistencyLevel(str, Enum):
    """Consistency levels accepted by the service."""
    STRONG = "Strong"
    BOUNDED_STALENESS = "BoundedStaleness"
    SESSION = "Session"
    EVENTUAL = "Eventual"
    CONSISTENT_PREFIX = "ConsistentPrefix"


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: LogLevel = LogLevel.WARNING
    format: str = "text"
    file: Optional[str] = None
    rotation_size: str = "10MB"
    rotation_count: int = 5
    module_levels: Optional[Dict[str, str]] = Field(
        default=None,
        description="Per-module log levels, e.g., {'cosmoskit.request': 'DEBUG'}"
    )


class ConnectionPolicy(BaseModel):
    """HTTP connection settings."""
    request_timeout: float = Field(
        default=60.0,
        gt=0.0,
        description="Total timeout per request in seconds"
    )
    connect_timeout: float = Field(default=10.0, gt=0.0)
    max_connections: int = Field(default=100, ge=1)
    user_agent_suffix: Optional[str] = None
    verify_ssl: bool = True


class ClientConfig(BaseModel):
    """Main cosmoskit configuration schema."""

    endpoint: str = Field(default=DEFAULT_ENDPOINT, description="Account endpoint URL")

    auth_token: Optional[str] = Field(
        default=None,
        description="Authorization token forwarded verbatim on every request"
    )

    consistency_level: Optional[ConsistencyLevel] = None

    connection: ConnectionPolicy = Field(default_factory=ConnectionPolicy)

    default_headers: Dict[str, str] = Field(default_factory=dict)

    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, v: str) -> str:
        """Validate endpoint URL and normalise the trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Endpoint must start with http:// or https://")
        return v.rstrip("/") + "/"

    model_config = ConfigDict(use_enum_values=True)


class ConfigManager:
    """
    Manages cosmoskit configuration loading and validation.

    Configuration precedence (highest to lowest):
    1. Explicit overrides
    2. Environment variables (COSMOSKIT_*)
    3. Configuration file (YAML/JSON)
    4. Defaults
    """

    def __init__(self):
        self._config: Optional[ClientConfig] = None
        self._config_file: Optional[Path] = None

    def load(
        self,
        config_file: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None
    ) -> ClientConfig:
        """
        Load and validate configuration from multiple sources.

        Args:
            config_file: Path to configuration file (YAML or JSON)
            overrides: Dictionary of explicit overrides

        Returns:
            Validated ClientConfig instance

        Raises:
            ValidationError: If configuration is invalid
            FileNotFoundError: If specified config file doesn't exist
        """
        logger.debug("Loading cosmoskit configuration")

        config_dict: Dict[str, Any] = {}

        if config_file:
            config_dict = self._load_from_file(config_file)
            self._config_file = Path(config_file)
            logger.info(f"Loaded configuration from file: {config_file}")

        env_config = self._load_from_env()
        config_dict = self._merge_configs(config_dict, env_config)
        if env_config:
            logger.debug(f"Applied {len(env_config)} environment variable overrides")

        if overrides:
            config_dict = self._merge_configs(config_dict, overrides)
            logger.debug(f"Applied {len(overrides)} explicit overrides")

        try:
            self._config = ClientConfig(**config_dict)
            self._log_configuration()
            return self._config
        except ValidationError as e:
            logger.error(f"Configuration validation failed: {e}")
            raise

    def _load_from_file(self, file_path: str) -> Dict[str, Any]:
        """Load configuration from YAML or JSON file."""
        path = Path(file_path)

        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {file_path}")

        with open(path, 'r') as f:
            if path.suffix in ['.yaml', '.yml']:
                return yaml.safe_load(f) or {}
            elif path.suffix == '.json':
                return json.load(f)
            else:
                raise ValueError(f"Unsupported config file format: {path.suffix}")

    def _load_from_env(self) -> Dict[str, Any]:
        """Load configuration from environment variables."""
        config: Dict[str, Any] = {}

        if endpoint := os.getenv("COSMOSKIT_ENDPOINT"):
            config["endpoint"] = endpoint
        if auth_token := os.getenv("COSMOSKIT_AUTH_TOKEN"):
            config["auth_token"] = auth_token
        if consistency := os.getenv("COSMOSKIT_CONSISTENCY_LEVEL"):
            config["consistency_level"] = consistency

        if timeout := os.getenv("COSMOSKIT_REQUEST_TIMEOUT"):
            config.setdefault("connection", {})["request_timeout"] = float(timeout)
        if verify_ssl := os.getenv("COSMOSKIT_VERIFY_SSL"):
            config.setdefault("connection", {})["verify_ssl"] = verify_ssl.lower() in ['true', '1', 'yes']

        if log_level := os.getenv("COSMOSKIT_LOG_LEVEL"):
            config.setdefault("logging", {})["level"] = log_level.upper()
        if log_format := os.getenv("COSMOSKIT_LOG_FORMAT"):
            config.setdefault("logging", {})["format"] = log_format.lower()

        return config

    def _merge_configs(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge two configuration dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value

        return result

    def _log_configuration(self) -> None:
        """Log the loaded configuration (with the auth token redacted)."""
        if not self._config:
            return

        config_dict = self._config.model_dump(mode="json")
        if config_dict.get("auth_token"):
            config_dict["auth_token"] = "***REDACTED***"

        logger.debug(f"Active configuration: {json.dumps(config_dict, indent=2)}")

    def get_config(self) -> ClientConfig:
        """
        Get the loaded configuration.

        Returns:
            ClientConfig instance

        Raises:
            RuntimeError: If configuration hasn't been loaded
        """
        if self._config is None:
            raise RuntimeError("Configuration not loaded. Call load() first.")
        return self._config

    def reload(self) -> ClientConfig:
        """
        Reload configuration from the same sources.

        Returns:
            Reloaded ClientConfig instance
        """
        config_file = str(self._config_file) if self._config_file else None
        return self.load(config_file=config_file)
