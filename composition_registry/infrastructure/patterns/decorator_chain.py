"""Decorator chain - layered wrapping of a capability object.

A decorator holds exactly one ``inner`` object (a base component or another
decorator) and satisfies the same capability interface. Concrete layers
call ``self.inner`` directly and augment the result:

    class Milk(Decorator[Coffee]):
        def cost(self) -> float:
            return self.inner.cost() + 20

        def ingredients(self) -> str:
            return self.inner.ingredients() + ", Milk"

Decorators are frozen once construction finishes. To change a decorated
object, build a new chain.
"""

import functools
from typing import Any, Callable, Generic, Iterator, Tuple, Type, TypeVar

from composition_registry.domain.core.exceptions import ImmutableDecoratorError
from composition_registry.infrastructure.logging.logger import get_logger

T = TypeVar("T")
TDecorator = TypeVar("TDecorator", bound="Decorator")

logger = get_logger(__name__)


def _freeze_after(init: Callable[..., None]) -> Callable[..., None]:
    """Wrap an __init__ so the instance freezes when the most derived __init__ returns."""

    @functools.wraps(init)
    def __init__(self: Any, *args: Any, **kwargs: Any) -> None:
        init(self, *args, **kwargs)
        if type(self).__init__ is __init__:
            object.__setattr__(self, "_frozen", True)

    return __init__


class Decorator(Generic[T]):
    """Base class for a single wrapping layer.

    Layers may also inherit from the capability interface itself, whether
    that is an ABC or a ``typing.Protocol``.
    """

    _frozen = False

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "__init__" in cls.__dict__:
            cls.__init__ = _freeze_after(cls.__dict__["__init__"])  # type: ignore[misc]

    def __init__(self, inner: T):
        """
        Initialize the layer.

        Args:
            inner: Wrapped component, either a base object or another decorator
        """
        self._inner = inner

    @property
    def inner(self) -> T:
        """Wrapped component."""
        return self._inner

    def __setattr__(self, name: str, value: Any) -> None:
        if self._frozen:
            raise ImmutableDecoratorError(type(self).__name__, name)
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if self._frozen:
            raise ImmutableDecoratorError(type(self).__name__, name)
        super().__delattr__(name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._inner!r})"


Decorator.__init__ = _freeze_after(Decorator.__init__)  # type: ignore[misc]


def wrap(inner: Any, decorator_type: Type[TDecorator], *args: Any, **kwargs: Any) -> TDecorator:
    """
    Wrap ``inner`` in a new layer.

    Args:
        inner: Component to wrap
        decorator_type: Decorator subclass to construct
        *args: Extra positional arguments for the decorator
        **kwargs: Extra keyword arguments for the decorator

    Returns:
        The new outermost decorator
    """
    return decorator_type(inner, *args, **kwargs)


def iter_chain(component: Any) -> Iterator[Any]:
    """Yield every node from the outermost decorator down to the base."""
    node = component
    while isinstance(node, Decorator):
        yield node
        node = node.inner
    yield node


def unwrap(component: Any) -> Any:
    """Return the base component at the bottom of a chain."""
    node = component
    for node in iter_chain(component):
        pass
    return node


def chain_depth(component: Any) -> int:
    """Number of decorator layers above the base component."""
    return sum(1 for _ in iter_chain(component)) - 1


_LayerSpec = Tuple[Type[Decorator], Tuple[Any, ...], Tuple[Tuple[str, Any], ...]]


class DecoratorChain(Generic[T]):
    """
    Immutable builder for decorator chains.

    Each call to ``then`` returns a new builder, so a partially configured
    chain can be shared and extended in different directions.

    Usage:
        cappuccino = DecoratorChain(Espresso()).then(Milk).then(Whip)
        mocha = cappuccino.then(Chocolate)
        drink = mocha.build()
    """

    __slots__ = ("_base", "_layers")

    def __init__(self, base: T, layers: Tuple[_LayerSpec, ...] = ()):
        self._base = base
        self._layers = tuple(layers)

    @property
    def base(self) -> T:
        return self._base

    @property
    def depth(self) -> int:
        return len(self._layers)

    @property
    def layer_types(self) -> Tuple[Type[Decorator], ...]:
        """Decorator types in wrapping order, innermost first."""
        return tuple(layer[0] for layer in self._layers)

    def then(self, decorator_type: Type[Decorator], *args: Any, **kwargs: Any) -> "DecoratorChain[T]":
        """Return a new builder with one more layer on top."""
        spec: _LayerSpec = (decorator_type, args, tuple(kwargs.items()))
        return DecoratorChain(self._base, self._layers + (spec,))

    def build(self) -> Any:
        """Construct the wrappers bottom-up and return the outermost object."""
        component: Any = self._base
        for decorator_type, args, kwargs in self._layers:
            component = wrap(component, decorator_type, *args, **dict(kwargs))

        logger.debug(
            "Decorator chain built",
            base=type(self._base).__name__,
            layers=[t.__name__ for t in self.layer_types],
        )
        return component

    def __repr__(self) -> str:
        names = ", ".join(t.__name__ for t in self.layer_types)
        return f"DecoratorChain(base={type(self._base).__name__}, layers=[{names}])"
