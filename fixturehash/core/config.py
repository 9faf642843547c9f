"""Configuration management for fixturehash.

This module provides a clean interface for reading and writing
both project-local and global configuration files.
"""

import os
import configparser
from pathlib import Path
from typing import Optional, Dict

from .hash import DEFAULT_CHUNK_SIZE, HEX_DIGEST_LENGTH

PROJECT_CONFIG_NAME = '.fixturehash'

DEFAULTS = {
    'core': {
        'chunksize': str(DEFAULT_CHUNK_SIZE),
        'encoding': 'utf-8',
        'abbrev': str(HEX_DIGEST_LENGTH),
    },
}

MIN_ABBREV = 4


class Config:
    """
    Manages fixturehash configuration files.

    Configuration is stored in INI format:
    - Global config: ~/.fixturehashconfig
    - Project config: .fixturehash in the working directory

    Project config takes precedence over global config.
    Environment variables take highest precedence.
    """

    GLOBAL_CONFIG_PATH = Path.home() / '.fixturehashconfig'

    def __init__(self, project_config_path: Optional[Path] = None):
        """
        Initialize Config manager.

        Args:
            project_config_path: Path to project config file, if any
        """
        self.project_config_path = project_config_path
        self._global_config = None
        self._project_config = None

    @property
    def global_config(self) -> configparser.ConfigParser:
        """Load and return global configuration."""
        if self._global_config is None:
            self._global_config = configparser.ConfigParser(interpolation=None)
            if self.GLOBAL_CONFIG_PATH.exists():
                self._global_config.read(self.GLOBAL_CONFIG_PATH)
        return self._global_config

    @property
    def project_config(self) -> Optional[configparser.ConfigParser]:
        """Load and return project configuration."""
        if self._project_config is None and self.project_config_path:
            self._project_config = configparser.ConfigParser(interpolation=None)
            if self.project_config_path.exists():
                self._project_config.read(self.project_config_path)
        return self._project_config

    def get(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        """
        Get a configuration value.

        Priority order (highest to lowest):
        1. Environment variables (FIXTUREHASH_<SECTION>_<KEY>)
        2. Project config
        3. Global config
        4. Built-in defaults
        5. Fallback value
        """
        env_key = f"FIXTUREHASH_{section.upper()}_{key.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return env_value

        if self.project_config and self.project_config.has_option(section, key):
            return self.project_config.get(section, key)

        if self.global_config.has_option(section, key):
            return self.global_config.get(section, key)

        return DEFAULTS.get(section, {}).get(key, fallback)

    def get_int(self, section: str, key: str, fallback: Optional[int] = None) -> Optional[int]:
        """
        Get a configuration value as an integer.

        Raises:
            ValueError: If the stored value is not an integer
        """
        value = self.get(section, key)
        if value is None:
            return fallback
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"Config {section}.{key} must be an integer, got {value!r}")

    @property
    def chunk_size(self) -> int:
        size = self.get_int('core', 'chunksize')
        if size <= 0:
            raise ValueError(f"Config core.chunksize must be positive, got {size}")
        return size

    @property
    def encoding(self) -> str:
        return self.get('core', 'encoding')

    @property
    def abbrev(self) -> int:
        abbrev = self.get_int('core', 'abbrev')
        if not MIN_ABBREV <= abbrev <= HEX_DIGEST_LENGTH:
            raise ValueError(
                f"Config core.abbrev must be between {MIN_ABBREV} and {HEX_DIGEST_LENGTH}, got {abbrev}"
            )
        return abbrev

    def _target(self, global_config: bool):
        if global_config:
            return self.global_config, self.GLOBAL_CONFIG_PATH
        if not self.project_config_path:
            raise ValueError("No project config path available")
        return self.project_config, self.project_config_path

    def set(self, section: str, key: str, value: str, global_config: bool = False) -> None:
        """
        Set a configuration value.

        Args:
            section: Config section
            key: Config key
            value: Value to set
            global_config: If True, write to global config; otherwise project config
        """
        config, config_path = self._target(global_config)

        if not config.has_section(section):
            config.add_section(section)

        config.set(section, key, value)

        with open(config_path, 'w') as f:
            config.write(f)

    def unset(self, section: str, key: str, global_config: bool = False) -> bool:
        """
        Remove a configuration value.

        Returns:
            True if value was removed, False if it didn't exist
        """
        if not global_config and not self.project_config_path:
            return False
        config, config_path = self._target(global_config)

        if not config.has_option(section, key):
            return False

        config.remove_option(section, key)

        # Remove empty sections
        if not config.options(section):
            config.remove_section(section)

        with open(config_path, 'w') as f:
            config.write(f)

        return True

    def list_all(self, global_only: bool = False, project_only: bool = False) -> Dict[str, Dict[str, str]]:
        """
        List all configuration values.

        Args:
            global_only: Only show global config
            project_only: Only show project config

        Returns:
            Dict of sections to key-value dicts
        """
        result = {}

        if not project_only:
            for section in self.global_config.sections():
                result.setdefault(section, {})
                for key, value in self.global_config.items(section):
                    result[section][f"{key} (global)"] = value

        if not global_only and self.project_config:
            for section in self.project_config.sections():
                result.setdefault(section, {})
                for key, value in self.project_config.items(section):
                    result[section][key] = value

        return result


def get_config(directory: Optional[Path] = None) -> Config:
    """
    Get a Config instance for a directory.

    Args:
        directory: Directory holding the project config (default: cwd)

    Returns:
        Config instance
    """
    directory = Path(directory) if directory else Path.cwd()
    return Config(directory / PROJECT_CONFIG_NAME)
