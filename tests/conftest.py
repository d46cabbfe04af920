"""Pytest configuration and shared fixtures for klaw-option tests."""

import pytest


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from klaw_option import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from klaw_option import Nothing

    return Nothing


@pytest.fixture
def add3():
    """Three-argument function for applicative tests."""

    def add(a, b, c):
        return a + b + c

    return add


@pytest.fixture(autouse=True)
def silent_logging():
    """Keep the library silent between tests, whatever a test configured."""
    from klaw_option._logging import clear_log_hooks, reset_logging

    yield
    clear_log_hooks()
    reset_logging()
