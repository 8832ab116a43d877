# tests/conftest.py
"""
Pytest configuration and fixtures for objectlessons tests.
"""

import pytest

from objectlessons import TrickDog, SharedNameDog


@pytest.fixture(autouse=True)
def reset_class_state():
    """Restore class attributes that lessons assign to."""
    shared_name = SharedNameDog.name
    tricks = TrickDog.tricks

    yield

    SharedNameDog.name = shared_name
    TrickDog.tricks = tricks


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: Slow tests that take significant time"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: Unit tests"
    )
