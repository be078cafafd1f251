"""
Global pytest configuration and fixtures.
Provides container fixtures and resets global state between tests.
"""

import pytest

from service_container import ServiceContainer, reset_config, reset_container
from tests.helpers.services import Clock


@pytest.fixture(scope="function", autouse=True)
def reset_global_container(monkeypatch):
    """Reset the global container and configuration before each test to ensure clean state."""
    monkeypatch.delenv('SERVICE_CONTAINER_ENABLE_AUTO_WIRING', raising=False)
    monkeypatch.delenv('SERVICE_CONTAINER_FILTER_CLASS_NAMES', raising=False)
    reset_container()
    reset_config()
    Clock.instances = 0

    yield

    reset_container()
    reset_config()


@pytest.fixture(scope="function")
def container():
    """Create an autowiring service container with the default filters."""
    return ServiceContainer()


@pytest.fixture(scope="function")
def manual_container():
    """Create a service container with autowiring disabled."""
    return ServiceContainer(enable_auto_wiring=False)
