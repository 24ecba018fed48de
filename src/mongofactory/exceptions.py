"""Exceptions for mongofactory."""


class MongoFactoryError(Exception):
    """Base exception for mongofactory errors."""

    pass


class InvalidPropertyValue(MongoFactoryError, ValueError):
    """A recognized property carries a value outside its allowed names."""

    name: str
    value: str

    def __init__(self, name: str, value: str, kind: str) -> None:
        self.name = name
        self.value = value
        super().__init__(f"Illegal value of {kind}: {value!r}")


class InvalidEndpoint(MongoFactoryError, ValueError):
    """Host specification is not a valid host[:port]."""

    spec: str

    def __init__(self, spec: str, reason: str) -> None:
        self.spec = spec
        super().__init__(f"Invalid endpoint {spec!r}: {reason}")


class ConnectionFailure(MongoFactoryError):
    """Error creating the client or resolving the database."""

    pass
