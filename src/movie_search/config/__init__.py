"""Configuration management module."""

from .config_manager import ConfigManager
from .models import Config, LoggingConfig, TMDbConfig

__all__ = [
    "ConfigManager",
    "Config",
    "TMDbConfig",
    "LoggingConfig",
]
