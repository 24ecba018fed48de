"""Pytest configuration for mongofactory tests."""

import pytest

from fakes import FakeConnector
from mongofactory.naming import Reference


@pytest.fixture
def fake_connector() -> FakeConnector:
    """Create a connector that never touches the network."""
    return FakeConnector()


@pytest.fixture
def reference() -> Reference:
    """Create a reference with a complete single-address configuration."""
    return Reference.from_mapping(
        {
            "address": "127.0.0.1",
            "database": "some_db",
            "username": "some_user",
            "password": "some_password",
        }
    )
