"""Configuration management module for the Job Search Dashboard."""

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .loader import load_config, validate_config_file
from .models import (
    AdvancedConfig,
    AppConfig,
    LogFormat,
    LoggingConfig,
    LogLevel,
    SearchDefaults,
    ServicesConfig,
)

__all__ = [
    # Loader functions
    "load_config",
    "validate_config_file",
    "load_environment_config",
    # Configuration models
    "AppConfig",
    "ServicesConfig",
    "SearchDefaults",
    "LoggingConfig",
    "AdvancedConfig",
    "EnvironmentConfig",
    # Enums
    "LogLevel",
    "LogFormat",
    # Exceptions
    "ConfigurationError",
]
