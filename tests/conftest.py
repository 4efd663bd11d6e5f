"""
Pytest configuration and shared fixtures for reqkit tests.
"""

import logging
import os
from types import SimpleNamespace

import pytest

REQKIT_ENV_VARS = [
    "REQKIT_USER_AGENT",
    "REQKIT_LANGUAGE",
    "REQKIT_LOG_LEVEL",
    "REQKIT_LOG_FORMAT",
]


@pytest.fixture
def clean_environment():
    """Ensure clean environment variables for testing."""
    original_env = {}

    for var in REQKIT_ENV_VARS:
        if var in os.environ:
            original_env[var] = os.environ[var]
            del os.environ[var]

    yield

    for var in REQKIT_ENV_VARS:
        os.environ.pop(var, None)
    for var, value in original_env.items():
        os.environ[var] = value


@pytest.fixture
def make_response():
    """Factory for minimal response objects exposing ``status``."""

    def _make(status: int):
        return SimpleNamespace(status=status, url="https://example.com/api")

    return _make


@pytest.fixture
def reset_reqkit_logger():
    """Restore the reqkit logger after a test reconfigures it."""
    package_logger = logging.getLogger("reqkit")
    handlers = package_logger.handlers[:]
    level = package_logger.level

    yield package_logger

    for handler in package_logger.handlers[:]:
        if handler not in handlers:
            package_logger.removeHandler(handler)
    package_logger.setLevel(level)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
