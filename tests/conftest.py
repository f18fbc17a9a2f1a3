import logging

import pytest

from patternkit.catalog import registry as catalog_registry
from patternkit.patterns import singleton, strategy
from patternkit.patterns.simple_factory import VehicleFactory


@pytest.fixture(autouse=True)
def reset_singletons():
    """Give each test fresh singleton and registry state."""
    singleton.LazySingleton.reset_instance()
    singleton.ThreadSafeSingleton.reset_instance()
    singleton.AppSettings.reset_instance()
    singleton.SingletonRegistry.get_instance().reset()
    strategy._payment_registry = None
    catalog_registry._catalog = None
    yield


@pytest.fixture
def restore_vehicle_types():
    """Undo vehicle registrations made by a test."""
    saved = dict(VehicleFactory._constructors)
    yield
    VehicleFactory._constructors.clear()
    VehicleFactory._constructors.update(saved)


@pytest.fixture
def restore_root_logger():
    """Put back the root logger's handlers and level after setup_logging runs."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
