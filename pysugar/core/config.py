"""Manages configuration for pysugar.

This module loads the settings used by the command-line tool and by callers
who want shared defaults (HTTP timeout, user agent, env file location,
random seed). Settings are merged from default values, TOML files and
environment variables, and read through a single dot-path interface.
"""

import os
import sys
from pathlib import Path
from typing import Dict, Any, Optional

try:
    import tomllib  # Available in Python 3.11+
except ImportError:
    import tomli as tomllib  # Fallback for Python versions < 3.11

from .. import __version__

# The default path for the user-specific global configuration file.
USER_CONFIG_PATH = Path.home() / ".config" / "pysugar" / "config.toml"

# The project-level configuration file, looked up in the working directory.
PROJECT_CONFIG_NAME = "pysugar.toml"


class Config:
    """Handles the configuration for pysugar.

    Configuration is loaded from multiple sources with a defined precedence:
    1.  Default values (lowest precedence).
    2.  Project-specific `pysugar.toml` file.
    3.  User-level `~/.config/pysugar/config.toml` file.
    4.  A custom configuration file specified at runtime.
    5.  Environment variables (highest precedence).

    Attributes:
        DEFAULT_CONFIG (Dict[str, Any]): The default configuration values.
    """

    DEFAULT_CONFIG = {
        "timeout": 30,  # Network request timeout in seconds.
        "verbose": False,
        "colors": True,
        "env_file": ".env",
        "http": {
            "user_agent": f"pysugar/{__version__}",
        },
        "random": {
            "seed": None,  # None seeds from system entropy.
        },
    }

    ENV_MAPPING = {
        "PYSUGAR_TIMEOUT": "timeout",
        "PYSUGAR_VERBOSE": "verbose",
        "PYSUGAR_COLORS": "colors",
        "PYSUGAR_ENV_FILE": "env_file",
        "PYSUGAR_USER_AGENT": "http.user_agent",
        "PYSUGAR_RANDOM_SEED": "random.seed",
    }

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """Initializes the configuration manager.

        Args:
            config_path (Optional[Path]): An optional path to a specific
                configuration file. If provided, the default file locations
                are skipped.
        """
        self.config = self._defaults()
        self._load_config(config_path)

    def _defaults(self) -> Dict[str, Any]:
        # Nested sections are copied so instances never share them.
        return {
            key: dict(value) if isinstance(value, dict) else value
            for key, value in self.DEFAULT_CONFIG.items()
        }

    def _load_config(self, config_path: Optional[Path] = None) -> None:
        if config_path:
            self._load_file_config(Path(config_path))
        else:
            self._load_default_configs()

        self._load_env_config()

    def _load_default_configs(self) -> None:
        """Loads configs from standard locations if they exist."""
        project_config = Path.cwd() / PROJECT_CONFIG_NAME
        if project_config.exists():
            self._load_file_config(project_config)

        if USER_CONFIG_PATH.exists():
            self._load_file_config(USER_CONFIG_PATH)

    def _merge_configs(self, base: Dict[str, Any], new: Dict[str, Any]) -> None:
        """Recursively merges a new config dict into a base dict."""
        for key, value in new.items():
            if isinstance(value, dict) and key in base and isinstance(base[key], dict):
                self._merge_configs(base[key], value)
            else:
                base[key] = value

    def _load_file_config(self, config_path: Path) -> None:
        """Loads and merges configuration from a TOML file.

        A file that cannot be read or parsed is reported on stderr and
        skipped.

        Args:
            config_path (Path): The path to the TOML configuration file.
        """
        try:
            with open(config_path, "rb") as f:
                file_config = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            print(f"Warning: Could not load config from {config_path}: {e}", file=sys.stderr)
            return
        self._merge_configs(self.config, file_config)

    def _load_env_config(self) -> None:
        """Loads and merges configuration from `PYSUGAR_*` variables."""
        for env_var, config_key in self.ENV_MAPPING.items():
            value = os.getenv(env_var)
            if value is not None:
                self._set_nested_key(config_key, value)

    def _set_nested_key(self, key_path: str, value: str) -> None:
        """Sets a value from an environment variable, casting by key.

        Args:
            key_path (str): The dot-separated key (e.g., "http.user_agent").
            value (str): The raw string value.
        """
        keys = key_path.split('.')
        target_config = self.config
        for key in keys[:-1]:
            if key not in target_config or not isinstance(target_config[key], dict):
                target_config[key] = {}
            target_config = target_config[key]

        leaf_key = keys[-1]

        if leaf_key in ["colors", "verbose"]:
            target_config[leaf_key] = value.lower() in ("true", "1", "yes", "on")
        elif leaf_key in ["timeout", "seed"]:
            try:
                target_config[leaf_key] = int(value)
            except ValueError:
                print(f"Warning: Invalid integer value for {leaf_key}: {value}", file=sys.stderr)
        else:
            target_config[leaf_key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """Retrieves a configuration value using a dot-separated key.

        Args:
            key (str): The dot-separated key (e.g., "random.seed").
            default (Any): The value to return if the key is not found.

        Returns:
            Any: The configuration value or the default.
        """
        value = self.config
        try:
            for k in key.split('.'):
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, key: str, value: Any) -> None:
        """Sets a configuration value in memory."""
        keys = key.split('.')
        target_config = self.config
        for k in keys[:-1]:
            target_config = target_config.setdefault(k, {})
        target_config[keys[-1]] = value

    def __str__(self) -> str:
        return f"Config({self.config})"
