"""Naming-lookup object factory for MongoDB database handles."""

from collections.abc import Mapping
from typing import Any

from pymongo.database import Database

from mongofactory.connector import Connector, Credential, connect_database
from mongofactory.endpoint import Endpoint, is_blank, parse_seeds
from mongofactory.exceptions import (
    ConnectionFailure,
    InvalidEndpoint,
    InvalidPropertyValue,
    MongoFactoryError,
)
from mongofactory.factory import ConnectionConfigBuilder, MongoObjectFactory
from mongofactory.naming import RefAddr, Reference
from mongofactory.secret import SecretBuffer

__all__ = [
    "connect",
    "ConnectionConfigBuilder",
    "MongoObjectFactory",
    "Reference",
    "RefAddr",
    "Endpoint",
    "Credential",
    "Connector",
    "SecretBuffer",
    "connect_database",
    "parse_seeds",
    "is_blank",
    "MongoFactoryError",
    "InvalidPropertyValue",
    "InvalidEndpoint",
    "ConnectionFailure",
]

__version__ = "0.1.0"


def connect(
    properties: Mapping[str, str],
    *,
    connector: Connector = connect_database,
) -> Database[Any] | None:
    """Build a database handle from a mapping of properties.

    Args:
        properties: Property names ("address", "seeds", "database", ...) to values
        connector: Callable creating the handle, defaults to pymongo

    Returns:
        The configured database, or None if required properties are missing
    """
    builder = ConnectionConfigBuilder(connector)
    builder.apply_properties(properties.items())
    return builder.build()
