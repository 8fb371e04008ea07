"""Pytest configuration and shared fixtures."""
import logging

import pytest
import structlog

from wirebox import Container, ContainerSettings


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")


@pytest.fixture
def container():
    return Container()


@pytest.fixture
def strict_container():
    return Container(ContainerSettings(detect_cycles=True, thread_safe=True))


@pytest.fixture
def reset_logging():
    """Restore structlog and root logging after a test configures them."""
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.WARNING)
