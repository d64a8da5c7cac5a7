"""Strategy context - delegates an operation to a replaceable behavior.

The context holds at most one behavior and talks to it only through
``BehaviorPort.apply``. An empty context is a valid state: ``execute``
does nothing and returns ``None``.
"""

from typing import Callable, Generic, Optional

from composition_registry.domain.base.ports.behavior_port import BehaviorPort, TInput, TOutput
from composition_registry.infrastructure.logging.logger import get_logger


class FunctionBehavior(BehaviorPort[TInput, TOutput]):
    """Adapts a plain callable to the behavior port."""

    def __init__(self, func: Callable[[TInput], TOutput], name: Optional[str] = None):
        self._func = func
        self.name = name or getattr(func, "__name__", type(func).__name__)

    def apply(self, data: TInput) -> TOutput:
        return self._func(data)

    def __repr__(self) -> str:
        return f"FunctionBehavior(name='{self.name}')"


class StrategyContext(Generic[TInput, TOutput]):
    """
    Context holding a pluggable behavior.

    Usage:
        context = StrategyContext()
        context.set_behavior(SepiaFilter())
        result = context.execute(image)
    """

    def __init__(self, behavior: Optional[BehaviorPort[TInput, TOutput]] = None):
        """
        Initialize the context.

        Args:
            behavior: Optional behavior to install immediately
        """
        self._behavior = behavior
        self._logger = get_logger(__name__)

    @property
    def behavior(self) -> Optional[BehaviorPort[TInput, TOutput]]:
        """Currently installed behavior, or None."""
        return self._behavior

    @property
    def has_behavior(self) -> bool:
        return self._behavior is not None

    def set_behavior(self, behavior: Optional[BehaviorPort[TInput, TOutput]]) -> None:
        """Replace the installed behavior. Passing None empties the context."""
        self._behavior = behavior
        self._logger.debug("Behavior replaced", behavior=type(behavior).__name__)

    def execute(self, data: TInput) -> Optional[TOutput]:
        """
        Run the installed behavior on ``data``.

        Args:
            data: Input passed unchanged to the behavior

        Returns:
            The behavior's result, or None when no behavior is installed
        """
        behavior = self._behavior
        if behavior is None:
            self._logger.debug("No behavior installed, skipping execution")
            return None
        return behavior.apply(data)
