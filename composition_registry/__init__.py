"""Composition Registry - Root Package.

A small library for the three composition mechanics that recur across
classic object-oriented design patterns:

    - StrategyContext: delegates an operation to a replaceable behavior
    - ObservableRegistry: broadcasts a value to subscribers in insertion order
    - Decorator / DecoratorChain: immutable layered wrapping of a component

The components are independent; use any one of them on its own. None of
them perform I/O; they log through structlog and leave presentation to
the caller.

Architecture:
    domain          capability ports and exceptions
    infrastructure  pattern implementations and logging
    config          pydantic schemas and the configuration manager
"""

from ._package import PACKAGE_NAME, __version__
from .config import ConfigurationManager, LibraryConfig, LoggingConfig, ObserverConfig
from .domain.base.ports import BehaviorPort, ObservablePort, SubscriberPort
from .domain.core.exceptions import (
    CompositionError,
    ConfigurationError,
    DuplicateSubscriberError,
    ImmutableDecoratorError,
)
from .infrastructure.logging import get_logger, setup_logging
from .infrastructure.patterns import (
    Decorator,
    DecoratorChain,
    FunctionBehavior,
    FunctionSubscriber,
    ObservableRegistry,
    StrategyContext,
    chain_depth,
    iter_chain,
    unwrap,
    wrap,
)

__package_name__ = PACKAGE_NAME

__all__ = [
    "BehaviorPort",
    "CompositionError",
    "ConfigurationError",
    "ConfigurationManager",
    "Decorator",
    "DecoratorChain",
    "DuplicateSubscriberError",
    "FunctionBehavior",
    "FunctionSubscriber",
    "ImmutableDecoratorError",
    "LibraryConfig",
    "LoggingConfig",
    "ObservablePort",
    "ObservableRegistry",
    "ObserverConfig",
    "StrategyContext",
    "SubscriberPort",
    "__version__",
    "chain_depth",
    "get_logger",
    "iter_chain",
    "setup_logging",
    "unwrap",
    "wrap",
]
