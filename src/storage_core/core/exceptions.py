"""
Exceptions raised by the storage layer.

Every error carries the key that caused it (when there is one) so callers
can report failures without consulting the store's recent key.
"""

from typing import Optional


class StorageError(Exception):
    """Base exception for storage operations."""

    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(message)
        self.key = key


class InvalidConfigError(StorageError):
    """Exception raised when storage configuration is malformed."""
    pass


class PathOutOfRootError(StorageError):
    """Exception raised when a key resolves outside the storage root."""

    def __init__(self, path: str, root: str, key: Optional[str] = None):
        super().__init__(f"Path '{path}' is outside of storage root '{root}'", key=key)
        self.path = path
        self.root = root


class KeyNotFoundError(StorageError):
    """Exception raised when an operation requires a key that doesn't exist."""
    pass


class StorageReadError(StorageError):
    """Exception raised when reading from the filesystem fails."""
    pass


class StorageWriteError(StorageError):
    """Exception raised when writing, touching or moving fails."""
    pass


class DirectoryCreationError(StorageError):
    """Exception raised when a directory can't be created."""
    pass
