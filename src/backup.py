from logger import log, log_error
import argparse
import sys
import config
import catalog
import copier
import database
from errors import BackupError

def backup_mongodb(source_url, destination_url, db_name, retention=catalog.DEFAULT_RETENTION, trim=False):
    """
    Copies every collection of `db_name` on the source server into a new
    timestamped database on the destination server, after pruning old backups.

    Never raises. Returns (True, summary) on success, where summary holds
    'backup_name', 'collections' (name -> documents copied) and 'pruned'
    (dropped backup names), or (False, error) on failure.
    """
    # Generated once, before any connection is made
    backup_name = catalog.generate_name(db_name)
    summary = {"backup_name": backup_name, "collections": {}, "pruned": []}

    source_client = None
    destination_client = None
    try:
        log(f"Starting MongoDB backup of {db_name} into {backup_name}")

        # 1. Connect to both servers
        source_client, source_db = database.connect(source_url, db_name)
        destination_client, destination_db = database.connect(destination_url, backup_name)

        # 2. Prune old backups
        backups = catalog.list_backups(destination_client, db_name)
        summary["pruned"] = catalog.enforce_retention(destination_client, backups, limit=retention, trim=trim)

        # 3. Copy collections
        collections = database.list_collections(source_db)
        if not collections:
            log("No collections found in the source database. Nothing to back up.")
            return True, summary

        summary["collections"] = copier.copy_all(source_db, destination_db, collections)

        total = sum(summary["collections"].values())
        log(f"Backup complete! {len(collections)} collections, {total} documents copied to {backup_name}")
        return True, summary

    except (BackupError, ValueError) as e:
        log_error(f"Backup of {db_name} failed", e)
        return False, e
    finally:
        if source_client is not None or destination_client is not None:
            log("Closing database connections...")
        database.close(source_client)
        database.close(destination_client)

def print_backups(destination_url, db_name):
    """Logs the backup catalog of `db_name`. Returns False if it could not be read."""
    client = None
    try:
        client, _ = database.connect(destination_url, db_name)
        backups = catalog.list_backups(client, db_name)
    except BackupError as e:
        log_error("Could not list backups", e)
        return False
    finally:
        database.close(client)

    if not backups:
        log(f"No backups of {db_name} found.")
        return True

    log(f"{len(backups)} backups of {db_name} (oldest first):")
    for name in backups:
        log(f"   - {name}")
    return True

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Back up a MongoDB database into a timestamped copy and rotate old copies")
    parser.add_argument("--source-url", default=config.SOURCE_DATABASE_URL, help="Source connection string (default: $SOURCE_DATABASE_URL)")
    parser.add_argument("--destination-url", default=config.DESTINATION_DATABASE_URL, help="Destination connection string (default: $DESTINATION_DATABASE_URL)")
    parser.add_argument("--db-name", default=config.DATABASE_NAME, help="Database to back up (default: $DATABASE_NAME)")
    parser.add_argument("--keep", type=int, default=config.BACKUP_RETENTION, help="Number of backups to keep (default: $BACKUP_RETENTION or 10)")
    parser.add_argument("--trim", action="store_true", help="Drop every backup over the limit instead of only the oldest one")
    parser.add_argument("--list", action="store_true", help="List existing backups and exit")
    return parser.parse_args(argv)

def main(argv=None):
    """Runs the CLI. Returns the process exit code."""
    args = parse_args(argv)

    if not args.db_name:
        log_error("No database name given. Set DATABASE_NAME or pass --db-name.")
        return 1
    if not args.destination_url:
        log_error("No destination URL given. Set DESTINATION_DATABASE_URL or pass --destination-url.")
        return 1

    if args.list:
        return 0 if print_backups(args.destination_url, args.db_name) else 1

    if not args.source_url:
        log_error("No source URL given. Set SOURCE_DATABASE_URL or pass --source-url.")
        return 1

    success, _ = backup_mongodb(args.source_url, args.destination_url, args.db_name, retention=args.keep, trim=args.trim)
    return 0 if success else 1

if __name__ == "__main__":
    sys.exit(main())
