"""Test doubles for mongofactory tests."""

from collections.abc import Sequence
from typing import Any
from unittest.mock import MagicMock

from mongofactory.connector import Credential
from mongofactory.endpoint import Endpoint
from mongofactory.secret import SecretBuffer


class FakeConnector:
    """Records connector calls and hands back a mock database."""

    def __init__(self) -> None:
        self.calls: list[tuple[str | list[Endpoint], str, list[Credential]]] = []
        self.database = MagicMock(name="Database")

    def __call__(
        self,
        target: str | Sequence[Endpoint],
        database: str,
        credentials: list[Credential],
    ) -> Any:
        if not isinstance(target, str):
            target = list(target)
        # Snapshot passwords, the factory clears them after building
        recorded = [
            Credential(c.username, c.database, SecretBuffer(c.password.reveal())) for c in credentials
        ]
        self.calls.append((target, database, recorded))
        self.database.name = database
        return self.database

    @property
    def target(self) -> str | list[Endpoint]:
        return self.calls[-1][0]

    @property
    def credentials(self) -> list[Credential]:
        return self.calls[-1][2]
