"""
Service layer for storage abstraction.

Contains:
- The storage contract and its capability interfaces
- The local filesystem backend
"""

from .storage_abstraction import (
    StorageInterface,
    DirectoryAware,
    SizeAware,
    AbsolutePathAware,
    Touchable,
)
from .local_storage import LocalStorage

__all__ = [
    "StorageInterface",
    "DirectoryAware",
    "SizeAware",
    "AbsolutePathAware",
    "Touchable",
    "LocalStorage"
]
