class StorageError(Exception):
    """Raised when a storage gateway fails to write a record."""
