"""
Storage Core Library

Key-addressed byte storage with a local filesystem backend.

Main exports:
- StorageConfig: Validated storage configuration
- PathResolver: Key/path mapping confined to a storage root
- StorageInterface: Storage abstraction and capability interfaces
- LocalStorage: Local filesystem storage
- StorageError and subclasses: Storage failures
"""

from .core import (
    StorageConfig,
    PathResolver,
    StorageError,
    InvalidConfigError,
    PathOutOfRootError,
    KeyNotFoundError,
    StorageReadError,
    StorageWriteError,
    DirectoryCreationError,
)
from .services import (
    StorageInterface,
    DirectoryAware,
    SizeAware,
    AbsolutePathAware,
    Touchable,
    LocalStorage,
)

__version__ = "1.0.0"

__all__ = [
    "StorageConfig",
    "PathResolver",
    "StorageError",
    "InvalidConfigError",
    "PathOutOfRootError",
    "KeyNotFoundError",
    "StorageReadError",
    "StorageWriteError",
    "DirectoryCreationError",
    "StorageInterface",
    "DirectoryAware",
    "SizeAware",
    "AbsolutePathAware",
    "Touchable",
    "LocalStorage"
]
