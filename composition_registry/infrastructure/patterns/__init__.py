"""Composition patterns - strategy context, observable registry, decorator chain."""

from .decorator_chain import Decorator, DecoratorChain, chain_depth, iter_chain, unwrap, wrap
from .observable_registry import FunctionSubscriber, ObservableRegistry
from .strategy_context import FunctionBehavior, StrategyContext

__all__ = [
    "Decorator",
    "DecoratorChain",
    "FunctionBehavior",
    "FunctionSubscriber",
    "ObservableRegistry",
    "StrategyContext",
    "chain_depth",
    "iter_chain",
    "unwrap",
    "wrap",
]
