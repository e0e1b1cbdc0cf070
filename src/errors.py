class BackupError(Exception):
    """Base class for every failure raised during a backup run."""

class DatabaseConnectionError(BackupError):
    """Server unreachable, authentication failed or the URL is malformed."""

class ListError(BackupError):
    """Listing collections or databases failed."""

class DropError(BackupError):
    """Dropping a collection or database failed (other than namespace-not-found)."""

class CopyError(BackupError):
    """Reading a source collection or inserting into the destination failed."""
