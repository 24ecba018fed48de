"""Integration test fixtures for mongofactory.

These tests require a running MongoDB server.
Start one with:
    docker run -d -p 27017:27017 mongo:7
"""

import os

import pytest
from pymongo import MongoClient
from pymongo.errors import PyMongoError

MONGO_TEST_ADDRESS = os.environ.get("MONGO_TEST_ADDRESS", "localhost:27017")


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "integration: marks tests as requiring a MongoDB server")


@pytest.fixture(scope="session")
def server_address() -> str:
    """Get the test server address, skipping if nothing answers."""
    client: MongoClient = MongoClient(MONGO_TEST_ADDRESS, serverSelectionTimeoutMS=500)
    try:
        client.admin.command("ping")
    except PyMongoError:
        pytest.skip(f"No MongoDB server at {MONGO_TEST_ADDRESS}")
    finally:
        client.close()
    return MONGO_TEST_ADDRESS
