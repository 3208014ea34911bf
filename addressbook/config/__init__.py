"""Configuration management module for the address book."""

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError, ReportableError
from .loader import load_config
from .models import (
    AddressBookConfig,
    AppConfig,
    LogFormat,
    LogLevel,
    LoggingConfig,
)

__all__ = [
    # Main loader functions
    "load_config",
    "load_environment_config",
    # Configuration models
    "AppConfig",
    "AddressBookConfig",
    "LoggingConfig",
    "EnvironmentConfig",
    # Enums
    "LogLevel",
    "LogFormat",
    # Exceptions
    "ConfigurationError",
    "ReportableError",
]
