# composition_registry/domain/core/exceptions.py
from typing import Any, Hashable, Optional


class CompositionError(Exception):
    """Base exception for all composition registry errors."""
    pass


class DuplicateSubscriberError(CompositionError):
    """Raised when a subscriber identity is already registered and duplicates are disallowed."""
    def __init__(self, subscriber_id: Hashable):
        super().__init__(f"Subscriber '{subscriber_id}' is already registered")
        self.subscriber_id = subscriber_id


class ImmutableDecoratorError(CompositionError, AttributeError):
    """Raised when code tries to mutate a decorator after construction."""
    def __init__(self, decorator_type: str, attribute: str):
        super().__init__(
            f"Cannot set '{attribute}' on {decorator_type}: decorators are immutable, "
            f"build a new chain instead"
        )
        self.decorator_type = decorator_type
        self.attribute = attribute


class ConfigurationError(CompositionError):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.details = details
