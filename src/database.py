from logger import log
import logging
from pymongo import MongoClient
from pymongo.errors import ConfigurationError, InvalidName, PyMongoError
import config
from errors import DatabaseConnectionError, ListError

def connect(url, database_name):
    """
    Opens a client for `url` and returns (client, db).

    The server is pinged before returning so that an unreachable host or bad
    credentials fail here instead of on the first real operation.
    """
    if not url:
        raise DatabaseConnectionError("No connection URL given.")
    if not database_name:
        raise DatabaseConnectionError("No database name given.")

    log(f"Connecting to database {database_name}...")
    client = None
    try:
        client = MongoClient(url, serverSelectionTimeoutMS=config.SERVER_SELECTION_TIMEOUT_MS)
        client.admin.command("ping")
        db = client[database_name]
    except InvalidName as e:
        close(client)
        raise DatabaseConnectionError(f"Invalid database name {database_name!r}: {e}") from e
    except ConfigurationError as e:
        # InvalidURI is a ConfigurationError too
        close(client)
        raise DatabaseConnectionError(f"Invalid connection URL for {database_name}: {e}") from e
    except PyMongoError as e:
        close(client)
        raise DatabaseConnectionError(f"Could not connect to {database_name}: {e}") from e

    log(f"Connected to database {database_name}")
    return client, db

def close(client):
    if client is None:
        return
    client.close()

def list_collections(db):
    """
    Returns the listing entry (name, type, options, info) of every collection
    in `db`, in listing order. An empty database gives an empty list.

    Views are left out.
    """
    log("Fetching collection list...")
    try:
        entries = list(db.list_collections())
    except PyMongoError as e:
        raise ListError(f"Could not list collections of {db.name}: {e}") from e

    collections = []
    for entry in entries:
        if entry["name"].startswith("system."):
            continue
        if entry.get("type") == "view":
            log(f"Skipping view {entry['name']}")
            continue
        collections.append(entry)
    log(f"Found {len(collections)} collections")
    for collection in collections:
        log(f"   - {collection['name']}", logging.DEBUG)
    return collections
