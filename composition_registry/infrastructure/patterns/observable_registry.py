"""Observable registry - ordered fan-out of a value to subscribers.

Subscribers are kept in insertion order and every broadcast walks a
snapshot of that order, so subscribe/unsubscribe calls made from inside a
notification only affect later broadcasts.
"""

from typing import Any, Callable, Hashable, List, Optional, Tuple, Union

from composition_registry.config.schemas import ObserverConfig
from composition_registry.domain.base.ports.observable_port import ObservablePort, V
from composition_registry.domain.base.ports.subscriber_port import SubscriberPort
from composition_registry.domain.core.exceptions import DuplicateSubscriberError
from composition_registry.infrastructure.logging.logger import get_logger

SubscriberRef = Union[Hashable, SubscriberPort]


class FunctionSubscriber(SubscriberPort[V]):
    """Adapts a callable to the subscriber port."""

    def __init__(self, subscriber_id: Hashable, callback: Callable[[Optional[V]], None]):
        self._subscriber_id = subscriber_id
        self._callback = callback

    @property
    def subscriber_id(self) -> Hashable:
        return self._subscriber_id

    def update(self, value: Optional[V]) -> None:
        self._callback(value)

    def __repr__(self) -> str:
        return f"FunctionSubscriber(id={self._subscriber_id!r})"


def _identity_of(subscriber: Any) -> Hashable:
    # Subscriber objects carry their identity; anything else is the key itself
    if hasattr(subscriber, "subscriber_id"):
        return subscriber.subscriber_id
    return subscriber


class ObservableRegistry(ObservablePort[V]):
    """
    Registry of subscribers notified whenever the current value changes.

    Policies come from ObserverConfig:
    - allow_duplicate_subscribers: when False, add_subscriber rejects an
      identity that is already registered
    - notify_on_absent_value: when False, broadcasting None is skipped
    - subscriber_error_policy: "propagate" re-raises the first subscriber
      error, "isolate" logs it and continues with the next subscriber
    """

    def __init__(self, config: Optional[ObserverConfig] = None):
        """Initialize an empty registry with no current value."""
        self._config = config or ObserverConfig()
        self._subscribers: List[SubscriberPort[V]] = []
        self._value: Optional[V] = None
        self._logger = get_logger(__name__)

    @property
    def config(self) -> ObserverConfig:
        return self._config

    @property
    def value(self) -> Optional[V]:
        """Last value passed to set_value."""
        return self._value

    @property
    def subscribers(self) -> Tuple[SubscriberPort[V], ...]:
        """Snapshot of registered subscribers in notification order."""
        return tuple(self._subscribers)

    @property
    def subscriber_ids(self) -> Tuple[Hashable, ...]:
        return tuple(s.subscriber_id for s in self._subscribers)

    def __len__(self) -> int:
        return len(self._subscribers)

    def __contains__(self, subscriber: object) -> bool:
        subscriber_id = _identity_of(subscriber)
        return any(s.subscriber_id == subscriber_id for s in self._subscribers)

    def add_subscriber(self, subscriber: SubscriberPort[V]) -> None:
        """
        Append a subscriber to the notification order.

        Raises:
            DuplicateSubscriberError: If duplicates are disallowed and the
                identity is already registered
        """
        subscriber_id = subscriber.subscriber_id
        if not self._config.allow_duplicate_subscribers and subscriber_id in self:
            raise DuplicateSubscriberError(subscriber_id)

        self._subscribers.append(subscriber)
        self._logger.debug(
            "Subscriber added", subscriber_id=subscriber_id, subscriber_count=len(self._subscribers)
        )

    def remove_subscriber(self, subscriber: SubscriberRef) -> bool:
        """
        Remove the first subscriber whose identity matches.

        Args:
            subscriber: Identity key or a subscriber object

        Returns:
            True if a subscriber was removed, False if nothing matched
        """
        subscriber_id = _identity_of(subscriber)
        for index, registered in enumerate(self._subscribers):
            if registered.subscriber_id == subscriber_id:
                del self._subscribers[index]
                self._logger.debug("Subscriber removed", subscriber_id=subscriber_id)
                return True

        self._logger.debug("No subscriber to remove", subscriber_id=subscriber_id)
        return False

    def clear_subscribers(self) -> None:
        self._subscribers.clear()

    def set_value(self, value: Optional[V]) -> None:
        """Store ``value`` as the current value and broadcast it."""
        self._value = value
        self.notify_subscribers()

    def notify_subscribers(self) -> None:
        """Broadcast the current value to every registered subscriber in order."""
        value = self._value
        if value is None and not self._config.notify_on_absent_value:
            self._logger.debug("Current value is absent, skipping broadcast")
            return

        snapshot = tuple(self._subscribers)
        self._logger.debug("Broadcasting value", subscriber_count=len(snapshot))

        for subscriber in snapshot:
            if self._config.subscriber_error_policy == "propagate":
                subscriber.update(value)
                continue
            try:
                subscriber.update(value)
            except Exception:
                self._logger.exception(
                    "Subscriber failed to handle update", subscriber_id=subscriber.subscriber_id
                )
