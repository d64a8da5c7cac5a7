"""Unified configuration management for the library."""
from __future__ import annotations

import json
import logging
import os
import threading
from typing import Any, Dict, Optional, Type, TypeVar, cast

from pydantic import ValidationError

from composition_registry.config.schemas import LibraryConfig, LoggingConfig, ObserverConfig
from composition_registry.config.utils.env_expansion import expand_config_env_vars
from composition_registry.domain.core.exceptions import ConfigurationError

T = TypeVar("T")
logger = logging.getLogger(__name__)

# Environment variable -> (section, key)
ENV_OVERRIDES: Dict[str, tuple] = {
    "COMPOSITION_LOG_LEVEL": ("logging", "level"),
    "COMPOSITION_LOG_FORMAT": ("logging", "format"),
    "COMPOSITION_ALLOW_DUPLICATE_SUBSCRIBERS": ("observer", "allow_duplicate_subscribers"),
    "COMPOSITION_NOTIFY_ON_ABSENT_VALUE": ("observer", "notify_on_absent_value"),
    "COMPOSITION_SUBSCRIBER_ERROR_POLICY": ("observer", "subscriber_error_policy"),
}

_SECTIONS: Dict[Type, str] = {
    LoggingConfig: "logging",
    ObserverConfig: "observer",
}


def _deep_merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class ConfigurationManager:
    """
    Single source of truth for library configuration.

    Sources are applied in order, later ones winning:
    - JSON config file (optional)
    - COMPOSITION_* environment variables
    - explicit overrides passed to the constructor

    The validated LibraryConfig is loaded lazily on first access.
    """

    def __init__(self, config_file: Optional[str] = None,
                 overrides: Optional[Dict[str, Any]] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._overrides = overrides or {}
        self._lock = threading.RLock()
        self._app_config: Optional[LibraryConfig] = None

    @property
    def app_config(self) -> LibraryConfig:
        """Lazy load library configuration."""
        config = self._app_config
        if config is None:
            with self._lock:
                config = self._app_config
                if config is None:
                    config = self._load_app_config()
                    self._app_config = config
        return config

    def get_typed(self, config_type: Type[T]) -> T:
        """Get a typed configuration section (LoggingConfig, ObserverConfig or LibraryConfig)."""
        if config_type is LibraryConfig:
            return cast(T, self.app_config)
        section = _SECTIONS.get(config_type)
        if section is None:
            raise ConfigurationError(f"Unknown configuration type: {config_type.__name__}")
        return cast(T, getattr(self.app_config, section))

    def reload(self) -> None:
        """Drop the cached configuration so the next access reloads all sources."""
        with self._lock:
            self._app_config = None
        logger.debug("Configuration cache cleared")

    def _load_app_config(self) -> LibraryConfig:
        config_data = self._load_file() if self._config_file else {}
        config_data = expand_config_env_vars(config_data)
        config_data = self._apply_environment_overrides(config_data)
        config_data = _deep_merge(config_data, self._overrides)

        try:
            config = LibraryConfig.from_dict(config_data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}", details=e.errors()) from e

        logger.debug("Loaded configuration from %s", self._config_file or "defaults")
        return config

    def _load_file(self) -> Dict[str, Any]:
        try:
            with open(self._config_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise ConfigurationError(f"Configuration file not found: {self._config_file}") from e
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Failed to read configuration file {self._config_file}: {e}"
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {self._config_file} must contain a JSON object"
            )
        return data

    @staticmethod
    def _apply_environment_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
        overrides: Dict[str, Dict[str, Any]] = {}
        for env_var, (section, key) in ENV_OVERRIDES.items():
            raw = os.environ.get(env_var)
            if raw is None:
                continue
            overrides.setdefault(section, {})[key] = raw
            logger.debug("Applying environment override %s", env_var)
        return _deep_merge(config_data, overrides)
