"""Behavior port for pluggable algorithms."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

TInput = TypeVar("TInput")
TOutput = TypeVar("TOutput")


class BehaviorPort(ABC, Generic[TInput, TOutput]):
    """Port for a swappable algorithm installed in a strategy context.

    Implementations may hold their own configuration, but the context only
    ever talks to them through ``apply``.
    """

    @abstractmethod
    def apply(self, data: TInput) -> TOutput:
        """Run the algorithm on ``data`` and return its result."""
