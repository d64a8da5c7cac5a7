"""Top-level library configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

from .logging_schema import LoggingConfig
from .observer_schema import ObserverConfig


class LibraryConfig(BaseModel):
    """Library configuration."""

    model_config = ConfigDict(extra="forbid")

    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    observer: ObserverConfig = Field(default_factory=lambda: ObserverConfig())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LibraryConfig":
        """Create configuration from a plain dictionary."""
        return cls.model_validate(data)
