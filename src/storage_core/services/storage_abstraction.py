"""
Storage abstraction layer for pluggable storage backends.

Defines the base key/value contract every backend implements and the
optional capability interfaces a backend may add on top of it.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Union


class StorageInterface(ABC):
    """Abstract storage interface for pluggable storage backends"""

    @abstractmethod
    def exists(self, key: str) -> bool:
        """Check if key exists"""
        pass

    @abstractmethod
    def read(self, key: str) -> bytes:
        """Return the contents stored under key"""
        pass

    @abstractmethod
    def write(self, key: str, contents: Union[bytes, str], append: bool = False) -> int:
        """Store contents under key and return the number of bytes written"""
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Delete key, returning whether it succeeded"""
        pass

    @abstractmethod
    def rename(self, source_key: str, target_key: str) -> None:
        """Move contents from source_key to target_key"""
        pass

    @abstractmethod
    def list_keys(self, key: str = "", recursive: Union[bool, int] = False) -> List[str]:
        """List keys below key, sorted ascending"""
        pass

    @abstractmethod
    def get_modified_time(self, key: str) -> Optional[float]:
        """Return modification time of key, None if unknown"""
        pass

    @abstractmethod
    def get_url(self, key: str) -> str:
        """Return a public URL for key"""
        pass

    @property
    @abstractmethod
    def recent_key(self) -> Optional[str]:
        """Key passed to the most recent operation"""
        pass

    @property
    @abstractmethod
    def date_folder_sharding(self) -> bool:
        """Whether written keys are placed in YYYY/MM/DD folders"""
        pass

    def supports(self, capability: type) -> bool:
        """Check whether this backend implements a capability interface."""
        return isinstance(self, capability)


class DirectoryAware(ABC):
    """Backend that distinguishes directory keys from file keys"""

    @abstractmethod
    def is_directory(self, key: str) -> bool:
        pass


class SizeAware(ABC):
    """Backend that can report the size of stored contents"""

    @abstractmethod
    def get_size(self, key: str) -> Optional[int]:
        pass


class AbsolutePathAware(ABC):
    """Backend whose keys map onto absolute filesystem paths"""

    @abstractmethod
    def get_absolute_path(self, key: str) -> str:
        pass


class Touchable(ABC):
    """Backend that can update modification times"""

    @abstractmethod
    def touch(self, key: str) -> None:
        pass
