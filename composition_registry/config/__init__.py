"""Configuration package - schemas and the configuration manager."""

from composition_registry.config.manager import ConfigurationManager
from composition_registry.config.schemas import LibraryConfig, LoggingConfig, ObserverConfig

__all__ = [
    "ConfigurationManager",
    "LibraryConfig",
    "LoggingConfig",
    "ObserverConfig",
]
