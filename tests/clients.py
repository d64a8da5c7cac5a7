"""Client code used by the test suite.

Filters, navigation modes, news subscribers, coffee toppings and screen
decorations drive the library through its public ports only.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import List, Optional, Tuple

from composition_registry import BehaviorPort, Decorator, SubscriberPort


# Strategy clients

@dataclass(frozen=True)
class Image:
    name: str
    filters: Tuple[str, ...] = ()


class Sepia(BehaviorPort[Image, Image]):
    def apply(self, data: Image) -> Image:
        return replace(data, filters=data.filters + ("sepia",))


class Clarendon(BehaviorPort[Image, Image]):
    def apply(self, data: Image) -> Image:
        return replace(data, filters=data.filters + ("clarendon",))


class Mono(BehaviorPort[Image, Image]):
    def apply(self, data: Image) -> Image:
        return replace(data, filters=data.filters + ("mono",))


@dataclass(frozen=True)
class Trip:
    start: str
    destination: str


class BusNavigation(BehaviorPort[Trip, str]):
    def apply(self, data: Trip) -> str:
        return f"Bus route from {data.start} to {data.destination}"


class AirNavigation(BehaviorPort[Trip, str]):
    def apply(self, data: Trip) -> str:
        return f"Air route from {data.start} to {data.destination}"


class TrainNavigation(BehaviorPort[Trip, str]):
    def apply(self, data: Trip) -> str:
        return f"Train route from {data.start} to {data.destination}"


# Observer clients

class RecordingSubscriber(SubscriberPort[int]):
    """Records every value it receives, optionally into a shared call log."""

    def __init__(self, subscriber_id: str, call_log: Optional[List[Tuple[str, Optional[int]]]] = None):
        self._subscriber_id = subscriber_id
        self.received: List[Optional[int]] = []
        self._call_log = call_log

    @property
    def subscriber_id(self) -> str:
        return self._subscriber_id

    def update(self, value: Optional[int]) -> None:
        self.received.append(value)
        if self._call_log is not None:
            self._call_log.append((self._subscriber_id, value))


class NewsAgency(RecordingSubscriber):
    def __init__(self, call_log=None):
        super().__init__("newsAgency", call_log)


class Reporter(RecordingSubscriber):
    def __init__(self, call_log=None):
        super().__init__("reporter", call_log)


class Blogger(RecordingSubscriber):
    def __init__(self, call_log=None):
        super().__init__("blogger", call_log)


class FailingSubscriber(SubscriberPort[int]):
    def __init__(self, subscriber_id: str = "failing"):
        self._subscriber_id = subscriber_id

    @property
    def subscriber_id(self) -> str:
        return self._subscriber_id

    def update(self, value: Optional[int]) -> None:
        raise RuntimeError(f"cannot handle {value}")


# Decorator clients

class Coffee(ABC):
    @abstractmethod
    def cost(self) -> float:
        ...

    @abstractmethod
    def ingredients(self) -> str:
        ...


class Espresso(Coffee):
    def cost(self) -> float:
        return 100

    def ingredients(self) -> str:
        return "Espresso"


class Milk(Decorator[Coffee], Coffee):
    def cost(self) -> float:
        return self.inner.cost() + 20

    def ingredients(self) -> str:
        return self.inner.ingredients() + ", Milk"


class Whip(Decorator[Coffee], Coffee):
    def cost(self) -> float:
        return self.inner.cost() + 30

    def ingredients(self) -> str:
        return self.inner.ingredients() + ", Whip"


class Chocolate(Decorator[Coffee], Coffee):
    def cost(self) -> float:
        return self.inner.cost() + 50

    def ingredients(self) -> str:
        return self.inner.ingredients() + ", Chocolate"


class Syrup(Decorator[Coffee], Coffee):
    """Topping configured at construction time."""

    def __init__(self, inner: Coffee, flavour: str, price: float = 15):
        super().__init__(inner)
        self.flavour = flavour
        self.price = price

    def cost(self) -> float:
        return self.inner.cost() + self.price

    def ingredients(self) -> str:
        return self.inner.ingredients() + f", {self.flavour} Syrup"


@dataclass(frozen=True)
class ViewStyle:
    background: str
    border_width: int = 0
    subviews: Tuple[str, ...] = field(default_factory=tuple)


class Screen(ABC):
    @abstractmethod
    def style(self) -> ViewStyle:
        ...


class MainView(Screen):
    def __init__(self, background: str):
        self.background = background

    def style(self) -> ViewStyle:
        return ViewStyle(background=self.background)


class AddBorder(Decorator[Screen], Screen):
    def style(self) -> ViewStyle:
        return replace(self.inner.style(), border_width=6)


class AddImage(Decorator[Screen], Screen):
    def style(self) -> ViewStyle:
        inner_style = self.inner.style()
        return replace(inner_style, subviews=inner_style.subviews + ("paperplane.circle.fill",))
