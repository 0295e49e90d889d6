"""Integration test fixtures: live MongoDB."""

from __future__ import annotations

import os

import pytest
from pymongo import MongoClient
from pymongo.errors import PyMongoError

# Default local MongoDB endpoint
MONGO_URL = os.environ.get("MONGO_URL", "mongodb://localhost:27017")
TEST_DB = "docschema-inttest"


def _mongo_available() -> bool:
    """Check if MongoDB is reachable."""
    client = MongoClient(MONGO_URL, serverSelectionTimeoutMS=500)
    try:
        client.admin.command("ping")
        return True
    except PyMongoError:
        return False
    finally:
        client.close()


skip_no_mongo = pytest.mark.skipif(
    not _mongo_available(),
    reason="MongoDB not available",
)


@pytest.fixture
def seeded_collection():
    """Create a collection with sample orders; dropped afterwards."""
    client = MongoClient(MONGO_URL)
    coll = client[TEST_DB]["orders"]
    coll.drop()
    coll.insert_many([
        {"customer": "Ann", "total": 12.5, "items": [{"sku": "a", "qty": 1}]},
        {"customer": "Bo", "total": 3, "items": [{"sku": "b"}], "note": None},
        {"customer": "Cy", "total": 7.25, "items": []},
    ])
    yield coll.name
    coll.drop()
    client.close()


@pytest.fixture
def empty_collection():
    client = MongoClient(MONGO_URL)
    coll = client[TEST_DB]["empty"]
    coll.drop()
    yield coll.name
    client.close()
