"""Infrastructure test fixtures — in-process Mongo client and failure injection.

Invariants:
    - Every test gets a fresh mongomock client (empty deviceadm.devices)
    - failing_collection hands out a MagicMock collection behind a fake client
      so driver exceptions can be injected per method

Design Decisions:
    - mongomock over a live mongod: implements the pymongo collection contract
      ($set, $setOnInsert, upsert, skip/limit) with no external dependency
"""

from unittest.mock import MagicMock

import mongomock
import pytest

from deviceadm.infrastructure.device_store import (
    DB_NAME, DEVICES_COLLECTION, MongoDeviceStore,
)


@pytest.fixture
def mongo_client():
    client = mongomock.MongoClient()
    yield client
    client.close()


@pytest.fixture
def store(mongo_client):
    return MongoDeviceStore(mongo_client)


@pytest.fixture
def devices_coll(mongo_client):
    """Raw collection for seeding and asserting stored documents."""
    return mongo_client[DB_NAME][DEVICES_COLLECTION]


class _FakeClient:
    """Minimal client exposing client[db][collection] and admin.command."""

    def __init__(self, collection):
        self._collection = collection
        self.admin = MagicMock()
        self.close = MagicMock()

    def __getitem__(self, name):
        assert name == DB_NAME
        return {DEVICES_COLLECTION: self._collection}


@pytest.fixture
def failing_collection():
    return MagicMock()


@pytest.fixture
def failing_store(failing_collection):
    return MongoDeviceStore(_FakeClient(failing_collection))
