"""
Managers Package

Application-level managers for configuration.
"""

from .config_manager import (
    ConfigManager,
    ConfigData,
    ConfigurationError,
    FareConfig,
    RoutingConfig,
    StoreConfig,
    LoggingConfig,
)

__all__ = [
    'ConfigManager',
    'ConfigData',
    'ConfigurationError',
    'FareConfig',
    'RoutingConfig',
    'StoreConfig',
    'LoggingConfig'
]
