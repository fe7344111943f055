"""
Configuration management for GeoWidget
"""

import logging
import os
from pathlib import Path
from typing import Dict, Optional, Any

import yaml

from geowidget.core.defaults import SENTINEL, DEFAULT_STALE_THRESHOLD_SECONDS
from geowidget.core.exceptions import ConfigurationError

TRUE_VALUES = ("1", "true", "yes")

class Config:
    """Configuration management for GeoWidget"""

    def __init__(self, config_file: Optional[Path] = None, debug: bool = False):
        """
        Initialize configuration with optional config file

        Args:
            config_file: Path to configuration file (YAML)
            debug: Enable debug mode
        """
        # Default settings
        self._initialize_defaults()
        self.debug = debug

        # Load configuration file if provided
        if config_file:
            self._load_config_file(config_file)

        # Load environment variables
        self._load_environment()

        # Create the log directory if file logging is enabled
        self._ensure_directories()

        # Validate configuration
        self._validate_configuration()

    def _initialize_defaults(self):
        """Initialize default configuration values"""
        # Output settings
        self.debug = False
        self.verbose = False
        self.monochrome = False
        self.json_output = False
        self.json_pretty = False

        # Data sources
        self.provider = "maxmind"
        self.asn_database_file = "GeoLite2-ASN.mmdb"
        self.city_database_file = "GeoLite2-City.mmdb"

        # Resolution policy
        self.sentinel = SENTINEL
        self.stale_threshold_seconds = DEFAULT_STALE_THRESHOLD_SECONDS

        # Server settings
        self.server_bind_addr = "0.0.0.0"
        self.server_bind_port = 8888

        # Debug log file (disabled unless set)
        self.log_file = None

    def _load_config_file(self, config_file: Path):
        """
        Load configuration from YAML file

        Args:
            config_file: Path to configuration file

        Raises:
            ConfigurationError: If the file cannot be read or parsed
        """
        config_file = Path(config_file)
        if not config_file.exists():
            raise ConfigurationError(f"Configuration file not found: {config_file}")

        try:
            with open(config_file, 'r') as f:
                config_data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Error loading configuration file: {e}")

        if not isinstance(config_data, dict):
            raise ConfigurationError("Configuration file must contain a YAML dictionary")

        # Update configuration with file values
        self._update_from_dict(config_data)

    def _load_environment(self):
        """Load configuration from environment variables"""
        # Database paths
        self.asn_database_file = os.environ.get("GEOWIDGET_ASN_DATABASE_FILE", self.asn_database_file)
        self.city_database_file = os.environ.get("GEOWIDGET_CITY_DATABASE_FILE", self.city_database_file)

        # Numeric settings
        port = os.environ.get("GEOWIDGET_PORT")
        if port is not None:
            self.server_bind_port = self._parse_int("GEOWIDGET_PORT", port)
        threshold = os.environ.get("GEOWIDGET_STALE_THRESHOLD")
        if threshold is not None:
            self.stale_threshold_seconds = self._parse_int("GEOWIDGET_STALE_THRESHOLD", threshold)

        # Boolean settings
        if os.environ.get("GEOWIDGET_DEBUG") in TRUE_VALUES:
            self.debug = True
        if os.environ.get("GEOWIDGET_VERBOSE") in TRUE_VALUES:
            self.verbose = True
        if os.environ.get("GEOWIDGET_MONOCHROME") in TRUE_VALUES:
            self.monochrome = True
        if os.environ.get("GEOWIDGET_JSON") in TRUE_VALUES:
            self.json_output = True
        if os.environ.get("GEOWIDGET_JSON_PRETTY") in TRUE_VALUES:
            self.json_pretty = True

    @staticmethod
    def _parse_int(name: str, value: str) -> int:
        try:
            return int(value)
        except ValueError:
            raise ConfigurationError(f"{name} must be an integer: {value}")

    def _ensure_directories(self):
        """Ensure the log file directory exists"""
        if not self.log_file:
            return
        try:
            Path(self.log_file).parent.mkdir(exist_ok=True, parents=True)
        except OSError as e:
            logging.warning(f"Could not create log directory: {e}")

    def _validate_configuration(self):
        """
        Validate configuration values

        Raises:
            ConfigurationError: If configuration is invalid
        """
        port = self.server_bind_port
        if not isinstance(port, int) or isinstance(port, bool) or not 1 <= port <= 65535:
            raise ConfigurationError("server_bind_port must be an integer between 1 and 65535")

        threshold = self.stale_threshold_seconds
        if not isinstance(threshold, int) or isinstance(threshold, bool) or threshold <= 0:
            raise ConfigurationError("stale_threshold_seconds must be a positive integer")

        if not isinstance(self.sentinel, str) or not self.sentinel:
            raise ConfigurationError("sentinel must be a non-empty string")

        for key in ("asn_database_file", "city_database_file"):
            if not getattr(self, key):
                raise ConfigurationError(f"{key} must be set")

    def _update_from_dict(self, config_data: Dict[str, Any]):
        """
        Update configuration from dictionary

        Args:
            config_data: Dictionary containing configuration values
        """
        for key, value in config_data.items():
            if hasattr(self, key) and not key.startswith('_'):
                setattr(self, key, value)
            else:
                logging.warning(f"Ignoring unknown configuration key: {key}")

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert configuration to dictionary

        Returns:
            Dictionary representation of configuration
        """
        result = {}
        for key, value in self.__dict__.items():
            if not key.startswith('_'):
                result[key] = str(value) if isinstance(value, Path) else value
        return result

    def save(self, config_file: Path):
        """
        Save configuration to file

        Args:
            config_file: Path to save configuration to

        Raises:
            ConfigurationError: If the file cannot be written
        """
        config_file = Path(config_file)
        try:
            config_file.parent.mkdir(exist_ok=True, parents=True)
            with open(config_file, 'w') as f:
                yaml.dump(self.to_dict(), f, default_flow_style=False)
        except OSError as e:
            raise ConfigurationError(f"Error saving configuration: {e}")
