"""
Core storage modules.

Contains the logic for:
- Storage configuration
- Key and path resolution
- Directory enumeration
- Storage exceptions
"""

from .config import StorageConfig
from .path_resolver import PathResolver, directory_separator
from .exceptions import (
    StorageError,
    InvalidConfigError,
    PathOutOfRootError,
    KeyNotFoundError,
    StorageReadError,
    StorageWriteError,
    DirectoryCreationError,
)

__all__ = [
    "StorageConfig",
    "PathResolver",
    "directory_separator",
    "StorageError",
    "InvalidConfigError",
    "PathOutOfRootError",
    "KeyNotFoundError",
    "StorageReadError",
    "StorageWriteError",
    "DirectoryCreationError",
]
