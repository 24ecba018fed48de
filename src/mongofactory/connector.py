"""Default client constructor backed by pymongo."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from mongofactory.endpoint import Endpoint
from mongofactory.exceptions import ConnectionFailure
from mongofactory.secret import SecretBuffer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Credential:
    """Username, authentication database and password."""

    username: str
    database: str
    password: SecretBuffer = field(hash=False)

    def __repr__(self) -> str:
        return f"Credential(username={self.username!r}, database={self.database!r})"


Connector = Callable[[str | Sequence[Endpoint], str, list[Credential]], Database[Any]]


def _hosts(target: str | Sequence[Endpoint]) -> str | list[str]:
    if isinstance(target, str):
        # Validates the address; pymongo accepts the raw string
        return str(Endpoint.parse(target))
    return [str(endpoint) for endpoint in target]


def connect_database(
    target: str | Sequence[Endpoint],
    database: str,
    credentials: list[Credential],
    **client_options: Any,
) -> Database[Any]:
    """Create a MongoClient and return the named database.

    Args:
        target: A single "host[:port]" address or an ordered seed list
        database: Database name to bind the handle to
        credentials: Zero or one credential
        client_options: Extra keyword options for MongoClient

    Returns:
        The database handle

    Raises:
        InvalidEndpoint: if the address cannot be parsed
        ConnectionFailure: if pymongo rejects the configuration
    """
    hosts = _hosts(target)
    options: dict[str, Any] = dict(client_options)

    if credentials:
        credential = credentials[0]
        options.update(
            username=credential.username,
            password=credential.password.reveal(),
            authSource=credential.database,
        )

    logger.debug("Creating MongoClient for %s, database %s", hosts, database)

    try:
        client: MongoClient[Any] = MongoClient(host=hosts, **options)
    except PyMongoError as e:
        raise ConnectionFailure(f"Failed to create client for {hosts}: {e}") from e

    try:
        return client.get_database(database)
    except PyMongoError as e:
        client.close()
        raise ConnectionFailure(f"Failed to open database {database!r}: {e}") from e
