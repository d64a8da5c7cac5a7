import logging

import pytest

from composition_registry import ObservableRegistry, ObserverConfig
from composition_registry.infrastructure.logging.logger import ROOT_LOGGER_NAME
from tests.clients import Blogger, Espresso, Image, NewsAgency, Reporter


@pytest.fixture
def image():
    return Image(name="holiday.png")


@pytest.fixture
def call_log():
    """Shared (subscriber_id, value) log for ordering assertions."""
    return []


@pytest.fixture
def news_subscribers(call_log):
    return NewsAgency(call_log), Reporter(call_log), Blogger(call_log)


@pytest.fixture
def registry():
    return ObservableRegistry()


@pytest.fixture
def strict_registry():
    return ObservableRegistry(ObserverConfig(allow_duplicate_subscribers=False))


@pytest.fixture
def espresso():
    return Espresso()


@pytest.fixture
def restore_package_logger():
    """Undo handler/level/propagate changes made by setup_logging."""
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    handlers = package_logger.handlers[:]
    level = package_logger.level
    propagate = package_logger.propagate
    yield package_logger
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate
