"""Configuration management for ignorekit.

Settings are read from INI files in the style of Git config, with an
environment override for every key.
"""

import os
import configparser
from pathlib import Path
from typing import Optional, Dict, List, Union


GLOBAL_CONFIG_NAME = '.ignorekitconfig'
LOCAL_CONFIG_NAME = '.ignorekit'

DEFAULTS = {
    ('core', 'ignorefile'): '.gitignore',
    ('core', 'excludes'): '',
    ('core', 'ignoregitdir'): 'true',
}


class Config:
    """
    Manages ignorekit configuration files.

    Configuration is stored in INI format:
    - Global config: ~/.ignorekitconfig
    - Root config: <root>/.ignorekit

    Root config takes precedence over global config.
    Environment variables take highest precedence.
    """

    def __init__(self, root: Optional[Union[str, Path]] = None):
        """
        Initialize Config manager.

        Args:
            root: Directory the ignore file is loaded from, if any
        """
        self.root_config_path = Path(root) / LOCAL_CONFIG_NAME if root is not None else None
        self._global_config = None
        self._root_config = None

    @property
    def global_config_path(self) -> Path:
        return Path.home() / GLOBAL_CONFIG_NAME

    @property
    def global_config(self) -> configparser.ConfigParser:
        """Load and return global configuration."""
        if self._global_config is None:
            self._global_config = configparser.ConfigParser()
            if self.global_config_path.exists():
                self._global_config.read(self.global_config_path)
        return self._global_config

    @property
    def root_config(self) -> Optional[configparser.ConfigParser]:
        """Load and return root-local configuration."""
        if self._root_config is None and self.root_config_path:
            self._root_config = configparser.ConfigParser()
            if self.root_config_path.exists():
                self._root_config.read(self.root_config_path)
        return self._root_config

    def get(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        """
        Get a configuration value.

        Priority order (highest to lowest):
        1. Environment variables (IGNOREKIT_<SECTION>_<KEY>)
        2. Root config
        3. Global config
        4. Fallback value, or the built-in default

        Args:
            section: Config section (e.g., 'core')
            key: Config key (e.g., 'ignorefile')
            fallback: Default value if not found

        Returns:
            Configuration value or fallback
        """
        env_key = f"IGNOREKIT_{section.upper()}_{key.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return env_value

        if self.root_config and self.root_config.has_option(section, key):
            return self.root_config.get(section, key)

        if self.global_config.has_option(section, key):
            return self.global_config.get(section, key)

        if fallback is not None:
            return fallback
        return DEFAULTS.get((section, key))

    def get_bool(self, section: str, key: str, fallback: bool = False) -> bool:
        """
        Get a boolean configuration value.

        Raises:
            ValueError: If the value is not a recognised boolean
        """
        value = self.get(section, key)
        if value is None:
            return fallback
        try:
            return configparser.ConfigParser.BOOLEAN_STATES[value.strip().lower()]
        except KeyError:
            raise ValueError(f"Invalid boolean for {section}.{key}: {value!r}")

    def get_list(self, section: str, key: str) -> List[str]:
        """
        Get a list value, one item per line.

        Commas are kept, so a value can hold patterns such as [a,b].
        """
        value = self.get(section, key) or ''
        return [line.strip() for line in value.splitlines() if line.strip()]

    def set(self, section: str, key: str, value: str, global_config: bool = False) -> None:
        """
        Set a configuration value.

        Args:
            section: Config section
            key: Config key
            value: Value to set
            global_config: If True, write to global config; otherwise root config
        """
        if global_config:
            config = self.global_config
            config_path = self.global_config_path
        else:
            if not self.root_config_path:
                raise ValueError("No root config path available")
            config = self.root_config
            config_path = self.root_config_path

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
        if global_config:
            config = self.global_config
            config_path = self.global_config_path
        else:
            if not self.root_config:
                return False
            config = self.root_config
            config_path = self.root_config_path

        if not config.has_option(section, key):
            return False

        config.remove_option(section, key)

        if not config.options(section):
            config.remove_section(section)

        with open(config_path, 'w') as f:
            config.write(f)

        return True

    def list_all(self, global_only: bool = False, root_only: bool = False) -> Dict[str, Dict[str, str]]:
        """
        List all configuration values.

        Args:
            global_only: Only show global config
            root_only: Only show root config

        Returns:
            Dict of sections to key-value dicts
        """
        result = {}

        if not root_only:
            for section in self.global_config.sections():
                result.setdefault(section, {})
                for key, value in self.global_config.items(section):
                    result[section][f"{key} (global)"] = value

        if not global_only and self.root_config:
            for section in self.root_config.sections():
                result.setdefault(section, {})
                for key, value in self.root_config.items(section):
                    result[section][key] = value

        return result


def split_key(key: str):
    """Split ``section.key`` into its parts, defaulting the section to 'core'."""
    return tuple(key.split('.', 1)) if '.' in key else ('core', key)
