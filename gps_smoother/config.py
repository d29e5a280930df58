"""
Configuration manager for the GPS smoother.
"""

import copy
import json
import logging
import os
from typing import Dict, Any, Optional

from .math.constants import (DEFAULT_WINDOW_SIZE, DEFAULT_ALPHA,
                             DEFAULT_MAX_BEARING_STD_DEG, MS_PER_SECOND)

logger = logging.getLogger(__name__)

class SmootherConfig:
    """Configuration manager for the GPS smoother."""

    DEFAULT_CONFIG = {
        # Smoothing window
        "window_size": DEFAULT_WINDOW_SIZE,
        "alpha": DEFAULT_ALPHA,

        # Timestamp units per second (1000 = epoch milliseconds)
        "timestamp_scale": MS_PER_SECOND,

        # Quality gating
        "stability": {
            "max_bearing_std_deg": DEFAULT_MAX_BEARING_STD_DEG
        },

        # Logging
        "log_level": "INFO"
    }

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to a JSON configuration file; defaults are
                used when it is omitted or does not exist
        """
        self.config_file = config_file
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)

        # Load configuration from file if it exists
        if config_file is not None:
            if os.path.exists(config_file):
                self.load_config()
            else:
                logger.info("Config file %s not found, using defaults", config_file)

    def load_config(self) -> bool:
        """
        Load configuration from file.

        Returns:
            True if loaded successfully
        """
        try:
            with open(self.config_file, 'r') as f:
                file_config = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Failed to load config %s: %s", self.config_file, e)
            return False

        # Merge with defaults (file config overrides defaults)
        self._merge_config(self.config, file_config)

        logger.info("Configuration loaded from %s", self.config_file)
        return True

    def save_config(self, config_file: Optional[str] = None) -> bool:
        """
        Save current configuration to file.

        Args:
            config_file: Destination path (defaults to the loaded file)

        Returns:
            True if saved successfully
        """
        path = config_file or self.config_file
        if path is None:
            logger.error("No config file path given, nothing saved")
            return False

        try:
            with open(path, 'w') as f:
                json.dump(self.config, f, indent=2)
        except OSError as e:
            logger.error("Failed to save config %s: %s", path, e)
            return False

        logger.info("Configuration saved to %s", path)
        return True

    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]):
        """Recursively merge configuration dictionaries."""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_config(base[key], value)
            else:
                base[key] = value

    def get(self, key: str, default=None):
        """Get configuration value with optional default."""
        keys = key.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value: Any):
        """Set configuration value."""
        keys = key.split('.')
        config = self.config

        for k in keys[:-1]:
            if k not in config:
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value

    def configure_logging(self):
        """Configure root logging at the configured level."""
        level = logging.getLevelName(str(self.log_level).upper())
        if not isinstance(level, int):
            level = logging.INFO
        logging.basicConfig(level=level,
                            format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # Property accessors for common configuration values
    @property
    def window_size(self) -> int:
        return self.config["window_size"]

    @property
    def alpha(self) -> float:
        return self.config["alpha"]

    @property
    def timestamp_scale(self) -> float:
        return self.config["timestamp_scale"]

    @property
    def max_bearing_std_deg(self) -> float:
        return self.get("stability.max_bearing_std_deg", DEFAULT_MAX_BEARING_STD_DEG)

    @property
    def log_level(self) -> str:
        return self.config["log_level"]
