"""Structured logging for the library using structlog.

Every component gets its logger from ``get_logger``. Loggers are always
backed by the stdlib ``logging`` module, so records reach whatever handlers
the host application installed. Call ``setup_logging`` only when the
library should own its output (scripts, tests, notebooks).
"""

import logging
import sys
from typing import Any, List, Optional

import structlog

from composition_registry.config.schemas import LoggingConfig

ROOT_LOGGER_NAME = "composition_registry"

# Chain applied to events emitted through structlog before they reach stdlib
_BOUND_PROCESSORS: List[Any] = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.StackInfoRenderer(),
    structlog.stdlib.render_to_log_kwargs,
]

_HANDLER_ATTR = "_composition_registry_handler"


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger for a module.

    Args:
        name: Logger name, normally ``__name__``

    Returns:
        structlog bound logger wrapping ``logging.getLogger(name)``
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_BOUND_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def _build_formatter(config: LoggingConfig) -> structlog.stdlib.ProcessorFormatter:
    if config.format == "json":
        renderer: List[Any] = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        renderer = [structlog.dev.ConsoleRenderer(colors=False)]

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.ExtraAdder(),
            structlog.processors.TimeStamper(fmt="iso"),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *renderer,
        ],
    )


def setup_logging(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the library.

    Args:
        config: Logging configuration. Defaults to ``LoggingConfig()``.

    Returns:
        Logger bound to the package root.
    """
    if config is None:
        config = LoggingConfig()

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(getattr(logging, config.level))

    # Replace our own handler on repeated calls, never the host's
    for handler in package_logger.handlers[:]:
        if getattr(handler, _HANDLER_ATTR, False):
            package_logger.removeHandler(handler)

    if config.destination == "stdout":
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(_build_formatter(config))
        setattr(handler, _HANDLER_ATTR, True)
        package_logger.addHandler(handler)
        package_logger.propagate = False
    else:
        package_logger.propagate = True

    logger = get_logger(ROOT_LOGGER_NAME)
    logger.debug(
        "Logging configured",
        log_level=config.level,
        log_format=config.format,
        log_destination=config.destination,
    )
    return logger
