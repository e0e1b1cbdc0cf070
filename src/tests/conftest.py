import pytest
import os
import sys
import mongomock
import mongomock.database

# Ensure src is on the path for imports
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

import database

SOURCE_URL = "mongodb://source.test:27017"
DESTINATION_URL = "mongodb://backup.test:27017"

def fake_list_collections(self, filter=None, session=None, **kwargs):
    """listCollections entries as the server returns them for plain collections."""
    return iter([
        {"name": name, "type": "collection", "options": {}, "info": {"readOnly": False}}
        for name in self.list_collection_names()
    ])

@pytest.fixture
def servers(monkeypatch):
    """
    Replaces the real driver with in-memory servers. Every MongoClient opened
    for the same URL sees the same data, like two connections to one server.
    """
    clients = {}

    def fake_client(url, **kwargs):
        if url not in clients:
            clients[url] = mongomock.MongoClient()
        return clients[url]

    monkeypatch.setattr(database, "MongoClient", fake_client)
    monkeypatch.setattr(mongomock.database.Database, "list_collections", fake_list_collections, raising=False)
    return clients

@pytest.fixture
def source_client(servers):
    return database.MongoClient(SOURCE_URL)

@pytest.fixture
def destination_client(servers):
    return database.MongoClient(DESTINATION_URL)
