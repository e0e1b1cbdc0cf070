from logger import log
from pymongo.errors import OperationFailure, PyMongoError
from errors import CopyError, DropError

# Server error code for "ns not found"
NAMESPACE_NOT_FOUND = 26

def drop_collection(db, name):
    """Drops `name` from `db`. A collection that does not exist is not an error."""
    try:
        db[name].drop()
    except OperationFailure as e:
        if e.code != NAMESPACE_NOT_FOUND:
            raise DropError(f"Could not drop collection {name} on {db.name}: {e}") from e
    except PyMongoError as e:
        raise DropError(f"Could not drop collection {name} on {db.name}: {e}") from e

def copy_collection(source_db, destination_db, name):
    """
    Replaces `name` on the destination with the documents of the source
    collection. Returns the number of documents copied.
    """
    log(f"Dropping collection {name} on the destination (if it exists)...")
    drop_collection(destination_db, name)

    log(f"Copying documents of collection {name}...")
    try:
        # The whole collection is loaded as one batch
        documents = list(source_db[name].find())
    except PyMongoError as e:
        raise CopyError(f"Could not read collection {name}: {e}") from e

    if not documents:
        log(f"No documents found in collection {name}")
        return 0

    try:
        destination_db[name].insert_many(documents)
    except PyMongoError as e:
        raise CopyError(f"Could not insert into collection {name}: {e}") from e

    log(f"Copied {len(documents)} documents of collection {name}")
    return len(documents)

def copy_all(source_db, destination_db, collections):
    """
    Copies every collection in `collections` (descriptors from
    database.list_collections). The first failure aborts the rest.
    Returns {collection name: documents copied}.
    """
    copied = {}
    for collection in collections:
        name = collection["name"]
        copied[name] = copy_collection(source_db, destination_db, name)
    return copied
