"""
================================================================================
Configuration Loader
================================================================================

Settings file loading for UI tests (credentials and environment values).

Features:
    - JSON or YAML settings document (parsed with PyYAML)
    - Nested sections flattened to dot notation ("Logging.Level")
    - Read-only settings mapping, loaded once per loader
    - Required-key lookup that fails loudly instead of returning ""

The loaded settings are passed explicitly to fixtures and page objects; there
is no process-wide configuration instance.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterator, Optional, Union

import yaml
from loguru import logger

from .constants import APP_SETTINGS, APP_SETTINGS_ENV_VAR
from .exceptions import ConfigLoadError, MissingSettingError


def default_settings_path() -> Path:
    """Settings file path: APPSETTINGS_PATH env var or ./appsettings.json."""
    return Path(os.environ.get(APP_SETTINGS_ENV_VAR) or APP_SETTINGS)


class AppSettings(Mapping):
    """
    Read-only string settings loaded from the settings file.

    Usage:
        >>> settings = ConfigLoader("appsettings.json").load()
        >>> settings.require("TestUserEmail")
        'demo.user@example.com'
        >>> settings.get("Logging.Level", "INFO")
        'INFO'
    """

    def __init__(self, values: Dict[str, str], source: Optional[Path] = None):
        self._values = MappingProxyType(dict(values))
        self.source = source

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"AppSettings(source={str(self.source)!r}, keys={sorted(self._values)})"

    def require(self, key: str) -> str:
        """
        Get a setting that must be present and non-empty.

        Args:
            key: Setting name (dot notation for nested sections)

        Returns:
            Setting value

        Raises:
            MissingSettingError: When the key is absent or its value is empty
        """
        value = self._values.get(key)
        if value is None or not value.strip():
            raise MissingSettingError(key)
        return value


class ConfigLoader:
    """
    Loads the settings document once and hands out the same settings.

    Usage:
        >>> loader = ConfigLoader()          # APPSETTINGS_PATH or appsettings.json
        >>> settings = loader.load()
        >>> settings is loader.load()
        True
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None) -> None:
        """
        Initialize configuration loader.

        Args:
            config_path: Path to the JSON/YAML settings file.
                        Uses default_settings_path() if not specified.
        """
        self._config_path = Path(config_path) if config_path else default_settings_path()
        self._settings: Optional[AppSettings] = None

    @property
    def config_path(self) -> Path:
        return self._config_path

    def load(self) -> AppSettings:
        """
        Load settings from file (first call) or return the cached settings.

        Raises:
            ConfigLoadError: When the file is missing, unreadable or malformed
        """
        if self._settings is None:
            self._settings = AppSettings(self._read(), source=self._config_path)
            logger.debug(
                f"Loaded {len(self._settings)} settings from: {self._config_path}"
            )
        return self._settings

    def _read(self) -> Dict[str, str]:
        if not self._config_path.is_file():
            raise ConfigLoadError(self._config_path, "file not found")

        try:
            with open(self._config_path, "rb") as f:
                document = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigLoadError(self._config_path, f"invalid document: {e}") from e
        except OSError as e:
            raise ConfigLoadError(self._config_path, str(e)) from e

        if document is None:
            document = {}
        if not isinstance(document, dict):
            raise ConfigLoadError(
                self._config_path,
                f"top level must be a mapping, got {type(document).__name__}",
            )

        return _flatten(document)


def _flatten(document: Dict[Any, Any], prefix: str = "") -> Dict[str, str]:
    """Flatten nested sections into dot-notation keys with string values."""
    flat: Dict[str, str] = {}
    for key, value in document.items():
        name = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.update(_flatten(value, prefix=f"{name}."))
        elif value is None:
            flat[name] = ""
        elif isinstance(value, bool):
            flat[name] = "true" if value else "false"
        else:
            flat[name] = str(value)
    return flat


__all__ = [
    "AppSettings",
    "ConfigLoader",
    "default_settings_path",
]
