"""Core module initialization."""

from .config_manager import (
    ClientConfig,
    ConfigManager,
    ConnectionPolicy,
    ConsistencyLevel,
    LoggingConfig,
    LogLevel,
)
from .logging_config import configure_logging, get_logger, setup_logging

__all__ = [
    "ClientConfig",
    "ConfigManager",
    "ConnectionPolicy",
    "ConsistencyLevel",
    "LoggingConfig",
    "LogLevel",
    "configure_logging",
    "get_logger",
    "setup_logging",
]
