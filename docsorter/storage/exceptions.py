class StorageIOError(Exception):
    """Raised when a document or its metadata cannot be written to storage."""
