"""
Configuration loader for the retail insights pipeline.
Handles YAML config files with validation.
"""

import yaml
import os
import logging
from typing import Dict, Any

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a configuration file is structurally invalid."""


class ConfigLoader:
    """Load and validate YAML configuration files."""

    REQUIRED_SECTIONS = ['data', 'columns', 'cleaning']
    REQUIRED_COLUMN_KEYS = ['country', 'age', 'month', 'amount', 'rating', 'segment', 'category']
    REQUIRED_CLEANING_KEYS = ['drop_columns', 'keep_category']

    def __init__(self, config_path: str):
        """Initialize config loader with path to YAML file."""
        self.config_path = config_path
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        if not os.path.exists(self.config_path):
            raise FileNotFoundError(f"Config file not found: {self.config_path}")

        with open(self.config_path, 'r') as f:
            config = yaml.safe_load(f) or {}

        if not isinstance(config, dict):
            raise ConfigError(f"Config file must contain a mapping at top level: {self.config_path}")

        logger.info(f"Loaded config from: {self.config_path}")
        return config

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value using a dotted key, e.g. 'output.dpi'."""
        keys = key.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_column_config(self) -> Dict[str, Any]:
        """Get column mapping section."""
        return self.config.get('columns', {})

    def get_cleaning_config(self) -> Dict[str, Any]:
        """Get cleaning configuration section."""
        return self.config.get('cleaning', {})

    def validate_config(self) -> bool:
        """Validate configuration structure."""
        for section in self.REQUIRED_SECTIONS:
            if section not in self.config:
                logger.error(f"Missing required config section: {section}")
                return False

        column_config = self.get_column_config()
        for key in self.REQUIRED_COLUMN_KEYS:
            if key not in column_config:
                logger.error(f"Missing required columns config key: {key}")
                return False

        cleaning_config = self.get_cleaning_config()
        for key in self.REQUIRED_CLEANING_KEYS:
            if key not in cleaning_config:
                logger.error(f"Missing required cleaning config key: {key}")
                return False

        if not self.get('data.raw_file'):
            logger.error("Missing required data config key: raw_file")
            return False

        logger.info("Configuration validation passed")
        return True

    def save_config(self, output_path: str):
        """Save current configuration to file."""
        output_dir = os.path.dirname(output_path)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)

        with open(output_path, 'w') as f:
            yaml.dump(self.config, f, default_flow_style=False, indent=2)

        logger.info(f"Configuration saved to: {output_path}")

    def update_config(self, updates: Dict[str, Any]):
        """Update configuration with new values."""
        for key, value in updates.items():
            keys = key.split('.')
            config = self.config

            # Navigate to the nested location
            for k in keys[:-1]:
                if k not in config:
                    config[k] = {}
                config = config[k]

            config[keys[-1]] = value

        logger.info(f"Configuration updated with: {updates}")


def load_config(config_path: str) -> ConfigLoader:
    """Load and validate configuration."""
    config_loader = ConfigLoader(config_path)

    if not config_loader.validate_config():
        raise ConfigError(f"Configuration validation failed: {config_path}")

    return config_loader
