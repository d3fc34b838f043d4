"""
Configuration Package
Environment-specific settings for the demonstration runner
"""

from .app_config import (
    AppConfig, ConfigError, ConfigManager, DemoSettings, Environment, LoggingConfig,
    get_config, get_current_config
)

__all__ = [
    'AppConfig',
    'ConfigError',
    'ConfigManager',
    'DemoSettings',
    'Environment',
    'LoggingConfig',
    'get_config',
    'get_current_config'
]
