"""Integration tests against a single MongoDB server.

Requires running MongoDB server.
"""

import pytest
from pymongo.read_preferences import ReadPreference
from pymongo.write_concern import WriteConcern

from mongofactory import connect
from mongofactory.factory import MongoObjectFactory
from mongofactory.naming import Reference


@pytest.mark.integration
class TestSingleNode:
    def test_connect_and_ping(self, server_address: str) -> None:
        db = connect({"address": server_address, "database": "mongofactory_test"})
        assert db is not None
        try:
            assert db.command("ping")["ok"] == 1.0
        finally:
            db.client.close()

    def test_seeds_and_policies(self, server_address: str) -> None:
        ref = Reference.from_mapping(
            {
                "seeds": server_address,
                "database": "mongofactory_test",
                "writeConcern": "ACKNOWLEDGED",
                "readPreference": "primaryPreferred",
            }
        )
        db = MongoObjectFactory().get_object_instance(ref)
        assert db is not None
        try:
            assert db.name == "mongofactory_test"
            assert db.write_concern == WriteConcern(w=1)
            assert db.read_preference == ReadPreference.PRIMARY_PREFERRED
        finally:
            db.client.close()

    def test_insert_and_find(self, server_address: str) -> None:
        db = connect(
            {"address": server_address, "database": "mongofactory_test", "writeConcern": "W1"}
        )
        assert db is not None
        try:
            db.items.insert_one({"name": "test"})
            assert db.items.find_one({"name": "test"})["name"] == "test"
            db.items.delete_many({"name": "test"})
        finally:
            db.client.close()
