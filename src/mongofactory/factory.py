"""Object factory turning naming-lookup properties into a MongoDB handle."""

import logging
from collections.abc import Callable, Iterable
from typing import Any

from pymongo.database import Database
from pymongo.write_concern import WriteConcern

from mongofactory.connector import Connector, Credential, connect_database
from mongofactory.endpoint import Endpoint, is_blank, is_not_blank, parse_seeds
from mongofactory.naming import Reference
from mongofactory.policies import resolve_read_preference, resolve_write_concern
from mongofactory.secret import SecretBuffer

logger = logging.getLogger(__name__)

# host[:port]
PROPERTY_ADDRESS = "address"
# host[:port],host1[:port1],...
PROPERTY_SEEDS = "seeds"
PROPERTY_DATABASE = "database"
PROPERTY_USERNAME = "username"
PROPERTY_PASSWORD = "password"
# One of the names in policies.WRITE_CONCERNS
PROPERTY_WRITE_CONCERN = "writeConcern"
# One of the names in policies.READ_PREFERENCES
PROPERTY_READ_PREFERENCE = "readPreference"

PROPERTY_NAMES = (
    PROPERTY_ADDRESS,
    PROPERTY_SEEDS,
    PROPERTY_DATABASE,
    PROPERTY_USERNAME,
    PROPERTY_PASSWORD,
    PROPERTY_WRITE_CONCERN,
    PROPERTY_READ_PREFERENCE,
)


class ConnectionConfigBuilder:
    """Accumulates connection properties and builds a database handle."""

    def __init__(self, connector: Connector = connect_database) -> None:
        """Initialize an empty builder.

        Args:
            connector: Callable creating the database handle from
                (address or seeds, database, credentials)
        """
        self._connector = connector
        self._address: str | None = None
        self._seeds: list[Endpoint] = []
        self._database: str | None = None
        self._username: str | None = None
        self._password = SecretBuffer()
        self._write_concern: WriteConcern | None = None
        self._read_preference: Any = None

        self._handlers: dict[str, Callable[[str], None]] = {
            PROPERTY_ADDRESS: self._set_address,
            PROPERTY_SEEDS: self.add_seeds,
            PROPERTY_DATABASE: self._set_database,
            PROPERTY_USERNAME: self._set_username,
            PROPERTY_PASSWORD: self._set_password,
            PROPERTY_WRITE_CONCERN: self._set_write_concern,
            PROPERTY_READ_PREFERENCE: self._set_read_preference,
        }

    @property
    def address(self) -> str | None:
        return self._address

    @property
    def seeds(self) -> list[Endpoint]:
        """Seed endpoints in the order they were given."""
        return list(self._seeds)

    @property
    def database(self) -> str | None:
        return self._database

    @property
    def username(self) -> str | None:
        return self._username

    @property
    def write_concern(self) -> WriteConcern | None:
        return self._write_concern

    @property
    def read_preference(self) -> Any:
        return self._read_preference

    @property
    def credentials(self) -> list[Credential]:
        """Credentials passed to the connector; empty without a username."""
        if is_not_blank(self._username):
            assert self._username is not None
            return [Credential(self._username, self._database or "", self._password)]
        return []

    def apply_property(self, name: str, value: str) -> None:
        """Apply a single named property.

        Unknown names are ignored.

        Raises:
            InvalidPropertyValue: for an unknown write concern or read preference
            InvalidEndpoint: for a malformed seed
        """
        handler = self._handlers.get(name)
        if handler is None:
            logger.debug("Ignoring unknown property %r", name)
            return
        handler(value)

    def apply_properties(self, properties: Iterable[tuple[str, str]]) -> None:
        """Apply (name, value) pairs in order."""
        for name, value in properties:
            self.apply_property(name, value)

    def add_seeds(self, value: str) -> None:
        """Append the endpoints of a comma and/or whitespace separated list."""
        self._seeds.extend(parse_seeds(value))

    def _set_address(self, value: str) -> None:
        self._address = value

    def _set_database(self, value: str) -> None:
        self._database = value

    def _set_username(self, value: str) -> None:
        self._username = value

    def _set_password(self, value: str) -> None:
        self._password.clear()
        self._password = SecretBuffer(value)

    def _set_write_concern(self, value: str) -> None:
        self._write_concern = resolve_write_concern(value)

    def _set_read_preference(self, value: str) -> None:
        self._read_preference = resolve_read_preference(value)

    def clear_password(self) -> None:
        """Zero the stored password."""
        self._password.clear()

    def validate(self) -> bool:
        """Check that a database and an address or seed list are present."""
        if is_blank(self._address) and not self._seeds:
            logger.error("Either an %s or a %s property is required", PROPERTY_ADDRESS, PROPERTY_SEEDS)
            return False
        if is_blank(self._database):
            logger.error("A %s property is required", PROPERTY_DATABASE)
            return False
        return True

    def build(self) -> Database[Any] | None:
        """Create the database handle.

        Returns:
            The configured handle, or None if required properties are missing

        Raises:
            InvalidEndpoint: if the address cannot be parsed
            ConnectionFailure: if the connector cannot create the client
        """
        if not self.validate():
            return None
        assert self._database is not None

        credentials = self.credentials
        if is_not_blank(self._address):
            assert self._address is not None
            logger.debug("Connecting to address %s", self._address)
            db = self._connector(self._address, self._database, credentials)
        else:
            logger.debug("Connecting to seeds %s", ", ".join(map(str, self._seeds)))
            db = self._connector(list(self._seeds), self._database, credentials)

        # Unset policies keep the driver defaults
        options: dict[str, Any] = {}
        if self._write_concern is not None:
            options["write_concern"] = self._write_concern
        if self._read_preference is not None:
            options["read_preference"] = self._read_preference
        if options:
            db = db.with_options(**options)
        return db


class MongoObjectFactory:
    """Object factory for naming lookups resolving to a MongoDB database."""

    def __init__(self, connector: Connector = connect_database) -> None:
        self._connector = connector
        self.last_builder: ConnectionConfigBuilder | None = None

    def get_object_instance(
        self,
        obj: object,
        name: str | None = None,
        context: Any = None,
        environment: dict[str, Any] | None = None,
    ) -> Database[Any] | None:
        """Build a database handle from a Reference.

        Returns None when ``obj`` is not a Reference or when required
        properties are missing, so the caller can try another factory.
        """
        if not isinstance(obj, Reference):
            return None

        builder = ConnectionConfigBuilder(self._connector)
        self.last_builder = builder
        try:
            for addr in obj.get_all():
                builder.apply_property(addr.addr_type, addr.content)
            return builder.build()
        finally:
            # The connector has consumed the password by now
            builder.clear_password()
