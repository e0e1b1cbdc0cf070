from logger import log
import logging
import time
from pymongo.errors import PyMongoError
from errors import DropError, ListError

# --- CONFIGURATION ---
# Backup names look like <base name><SEPARATOR><unix timestamp>
SEPARATOR = "_"
DEFAULT_RETENTION = 10

def generate_name(base_name, timestamp=None):
    if timestamp is None:
        timestamp = int(time.time())
    return f"{base_name}{SEPARATOR}{int(timestamp)}"

def extract_timestamp(name):
    """
    Returns the creation timestamp embedded after the last separator.
    Raises ValueError if the suffix is not an integer.
    """
    _, sep, suffix = name.rpartition(SEPARATOR)
    if not sep:
        raise ValueError(f"'{name}' has no '{SEPARATOR}' separator")
    return int(suffix)

def is_backup_of(name, base_name):
    if not name.startswith(base_name + SEPARATOR):
        return False
    # The remainder must be exactly the timestamp
    suffix = name[len(base_name) + len(SEPARATOR):]
    return suffix.isascii() and suffix.isdigit()

def list_backups(client, base_name):
    """
    Lists the backup databases of `base_name` on the server behind `client`,
    oldest first.
    """
    try:
        names = client.list_database_names()
    except PyMongoError as e:
        raise ListError(f"Could not list databases: {e}") from e

    backups = []
    for name in names:
        if is_backup_of(name, base_name):
            backups.append(name)
        elif name.startswith(base_name):
            log(f"Ignoring database {name}: not a backup of {base_name}", logging.DEBUG)

    backups.sort(key=extract_timestamp)
    return backups

def enforce_retention(client, backups, limit=DEFAULT_RETENTION, trim=False):
    """
    Drops the oldest backup when there are more than `limit` of them.

    Only one database is dropped per call, even when the catalog is far over
    the limit. With trim=True the oldest backups are dropped until exactly
    `limit` remain.

    Returns the names of the dropped databases.
    """
    if limit < 1:
        raise ValueError("Retention limit must be at least 1.")

    log(f"Found {len(backups)} existing backups (keeping {limit})")
    if len(backups) <= limit:
        return []

    oldest_first = sorted(backups, key=extract_timestamp)
    excess = len(backups) - limit if trim else 1

    dropped = []
    for name in oldest_first[:excess]:
        log(f"Dropping old backup {name}...")
        try:
            client.drop_database(name)
        except PyMongoError as e:
            raise DropError(f"Could not drop backup database {name}: {e}") from e
        dropped.append(name)
        log(f"Dropped old backup {name}")
    return dropped
