"""Configuration schemas."""

from .app_schema import LibraryConfig
from .logging_schema import LoggingConfig
from .observer_schema import ObserverConfig

__all__ = ["LibraryConfig", "LoggingConfig", "ObserverConfig"]
