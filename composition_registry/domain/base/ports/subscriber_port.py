"""Subscriber port for change notifications."""

from abc import ABC, abstractmethod
from typing import Generic, Hashable, Optional, TypeVar

V = TypeVar("V")


class SubscriberPort(ABC, Generic[V]):
    """Port for objects that receive value broadcasts from an observable."""

    @property
    @abstractmethod
    def subscriber_id(self) -> Hashable:
        """Stable identity used for removal and duplicate detection."""

    @abstractmethod
    def update(self, value: Optional[V]) -> None:
        """Handle a newly broadcast value."""
