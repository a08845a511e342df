"""
Configuration management for the Metro Planner application.

This module handles loading, saving, and validating application configuration
using Pydantic models for type safety and validation.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

from .. import __version__

logger = logging.getLogger(__name__)


class FareConfig(BaseModel):
    """Pricing policy constants used by the fare calculator."""

    base_fare: float = Field(1.5, ge=0, description="Flat fare charged for every journey")
    per_station_fare: float = Field(0.15, ge=0, description="Charge per station on the path")
    interchange_fee: float = Field(0.25, ge=0, description="Charge per interchange used")

    model_config = {"frozen": True}


class RoutingConfig(BaseModel):
    """Settings for duration estimates."""

    distance_per_minute: float = Field(10.0, gt=0, description="Distance units travelled per minute")
    interchange_minutes: int = Field(3, ge=0, description="Minutes added per interchange")

    model_config = {"frozen": True}


class StoreConfig(BaseModel):
    """Configuration for the persisted network definition."""

    network_path: Optional[str] = None  # None uses the user data directory


class LoggingConfig(BaseModel):
    """Configuration for application logging."""

    level: str = "WARNING"


class ConfigData(BaseModel):
    """Main configuration data model."""

    fare: FareConfig = FareConfig()
    routing: RoutingConfig = RoutingConfig()
    store: StoreConfig = StoreConfig()
    logging: LoggingConfig = LoggingConfig()


class ConfigurationError(Exception):
    """Exception raised for configuration-related errors."""

    pass


class ConfigManager:
    """
    Manages application configuration with file persistence.

    Handles loading configuration from JSON files, creating default
    configurations, and saving changes back to disk.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the configuration file. If None, uses the
                platform's user configuration directory
        """
        if config_path is None:
            self.config_path = self.get_default_config_path()
        else:
            self.config_path = Path(config_path)
        self.config: Optional[ConfigData] = None

        logger.debug(f"ConfigManager initialized with path: {self.config_path}")

    @staticmethod
    def get_default_config_path() -> Path:
        """
        Get the default configuration file path.

        On Windows, uses AppData/Roaming/MetroPlanner/config.json
        On Linux, uses XDG_CONFIG_HOME/MetroPlanner/config.json or ~/.config/MetroPlanner/config.json

        Returns:
            Path: Default configuration file path
        """
        if os.name == "nt":  # Windows
            appdata = os.environ.get("APPDATA")
            if appdata:
                return Path(appdata) / "MetroPlanner" / "config.json"
        else:
            xdg_config = os.environ.get("XDG_CONFIG_HOME")
            if xdg_config:
                return Path(xdg_config) / "MetroPlanner" / "config.json"
            return Path.home() / ".config" / "MetroPlanner" / "config.json"

        # Fallback to current directory for development
        return Path("config.json")

    def load_config(self) -> ConfigData:
        """
        Load configuration from file.

        If the configuration file doesn't exist, creates a default one.

        Returns:
            ConfigData: The loaded configuration

        Raises:
            ConfigurationError: If the configuration file is invalid
        """
        logger.debug(f"Loading config from: {self.config_path}")

        if not self.config_path.exists():
            logger.info(f"Config file doesn't exist, creating default at: {self.config_path}")
            self.create_default_config()

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            self.config = ConfigData(**data)
            logger.debug(f"Successfully loaded config from: {self.config_path}")
            return self.config
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in config file: {e}")
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration values: {e}")
        except (OSError, TypeError) as e:
            raise ConfigurationError(f"Failed to load config: {e}")

    def save_config(self, config: ConfigData) -> bool:
        """
        Save configuration to file.

        Args:
            config: Configuration data to save

        Returns:
            bool: True if saved successfully, False otherwise
        """
        logger.info(f"Saving config to: {self.config_path}")

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)

            with open(self.config_path, "w", encoding="utf-8") as f:
                json.dump(config.model_dump(), f, indent=2, ensure_ascii=False)

            self.config = config
            logger.info(f"Successfully saved config to: {self.config_path}")
            return True

        except OSError as e:
            logger.error(f"Failed to save config to {self.config_path}: {e}")
            return False

    def create_default_config(self) -> None:
        """Create a default configuration file."""
        self.save_config(ConfigData())

    def update_fare(self, fare: FareConfig) -> None:
        """
        Replace the pricing policy and save to file.

        Args:
            fare: New fare constants
        """
        if self.config is None:
            self.load_config()

        self.config = self.config.model_copy(update={"fare": fare})
        self.save_config(self.config)

    def get_config_summary(self) -> dict:
        """
        Get a summary of current configuration for display.

        Returns:
            dict: Configuration summary
        """
        if self.config is None:
            self.load_config()

        return {
            "app_version": __version__,
            "base_fare": self.config.fare.base_fare,
            "per_station_fare": self.config.fare.per_station_fare,
            "interchange_fee": self.config.fare.interchange_fee,
            "network_path": self.config.store.network_path or "default",
            "log_level": self.config.logging.level,
        }
