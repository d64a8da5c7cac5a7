"""Observable port describing subscription management."""

from abc import ABC, abstractmethod
from typing import Generic, Hashable, Optional, TypeVar, Union

from composition_registry.domain.base.ports.subscriber_port import SubscriberPort

V = TypeVar("V")


class ObservablePort(ABC, Generic[V]):
    """Port for publishers that fan a value out to subscribers."""

    @abstractmethod
    def add_subscriber(self, subscriber: SubscriberPort[V]) -> None:
        """Register a subscriber at the end of the notification order."""

    @abstractmethod
    def remove_subscriber(self, subscriber: Union[Hashable, SubscriberPort[V]]) -> bool:
        """Remove the first subscriber matching the given identity."""

    @abstractmethod
    def set_value(self, value: Optional[V]) -> None:
        """Store a new value and broadcast it."""

    @abstractmethod
    def notify_subscribers(self) -> None:
        """Broadcast the current value to every registered subscriber."""
