"""Domain ports - interfaces that client code implements."""

from .behavior_port import BehaviorPort
from .observable_port import ObservablePort
from .subscriber_port import SubscriberPort

__all__ = [
    "BehaviorPort",
    "ObservablePort",
    "SubscriberPort",
]
