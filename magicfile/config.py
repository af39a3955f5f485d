#!/usr/bin/env python3
"""
magicfile Configuration Management
"""

import copy
import os
from pathlib import Path
from typing import Any, Optional

from .config_schemas.schemas import MagicFileConfig
from .config_store import ConfigStore
from .core.constants import CONFIG_DIR_NAME, CONFIG_ENV_VAR, CONFIG_FILE_NAME, MAX_SNIFF_BYTES
from .utils.logger import get_logger

logger = get_logger(__name__)


class Config:
    """Configuration manager for magicfile"""

    DEFAULT_CONFIG = {
        "sniff": {"max_bytes": MAX_SNIFF_BYTES},
        "engine": {"magic_file": None},
        "logging": {"level": "WARNING", "log_file": False},
    }

    def __init__(self, config_path: Optional[str] = None):
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)
        self.config_path = config_path or self._get_default_config_path()

        # Load configuration if exists
        if os.path.exists(self.config_path):
            self.load_config()

    def _get_default_config_path(self) -> str:
        """Get default configuration file path"""
        env_path = os.getenv(CONFIG_ENV_VAR)
        if env_path:
            return env_path
        return str(Path.home() / CONFIG_DIR_NAME / CONFIG_FILE_NAME)

    def load_config(self):
        """Load configuration from file"""
        user_config = ConfigStore.load(self.config_path)
        if not user_config:
            return

        self._merge_config(user_config)
        try:
            self.typed_config
        except (TypeError, ValueError) as e:
            logger.warning(f"Ignoring invalid config {self.config_path}: {e}")
            self.config = copy.deepcopy(self.DEFAULT_CONFIG)

    def save_config(self):
        """Save configuration to file"""
        ConfigStore.save(self.config_path, self.config)

    def _merge_config(self, user_config: dict[str, Any]):
        """Merge user configuration with defaults"""
        for section, settings in user_config.items():
            if section in self.config and isinstance(settings, dict):
                self.config[section].update(settings)
            else:
                self.config[section] = settings

    def get(self, section: str, key: Optional[str] = None, default=None):
        """Get configuration value"""
        if key is None:
            return self.config.get(section, default)
        return self.config.get(section, {}).get(key, default)

    def set(self, section: str, key: str, value):
        """Set configuration value"""
        if section not in self.config:
            self.config[section] = {}
        self.config[section][key] = value

    @property
    def typed_config(self) -> MagicFileConfig:
        """Validated view of the known configuration sections"""
        known = {section: self.config[section] for section in self.DEFAULT_CONFIG}
        return MagicFileConfig.from_dict(known)

    @property
    def sniff_window(self) -> int:
        return self.typed_config.sniff.max_bytes

    def __getitem__(self, key):
        """Allow dict-like access"""
        return self.config[key]

    def __contains__(self, key):
        """Allow 'in' operator"""
        return key in self.config
