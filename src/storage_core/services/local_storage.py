"""
Local filesystem storage backend.

Keys map onto paths below a configured root directory, for example with
root ``/var/storage``::

    key  = "invoices/2024/report.pdf"
    path = "/var/storage/invoices/2024/report.pdf"

Resolution never yields a path outside the root; a key that would escape
raises PathOutOfRootError before the filesystem is touched.
"""

import logging
import os
import re
from datetime import date
from pathlib import Path
from typing import List, Mapping, Optional, Union

from ..core.config import StorageConfig
from ..core.directory_scanner import list_directory, walk_leaves
from ..core.exceptions import (
    InvalidConfigError,
    KeyNotFoundError,
    PathOutOfRootError,
    StorageReadError,
    StorageWriteError,
)
from ..core.path_resolver import PathResolver
from ..logging import timed_operation
from .storage_abstraction import (
    AbsolutePathAware,
    DirectoryAware,
    SizeAware,
    StorageInterface,
    Touchable,
)

logger = logging.getLogger(__name__)

DATE_FOLDER_PATTERN = re.compile(r"^[0-9]{4}/[0-9]{2}/[0-9]{2}/")


def _today() -> date:
    return date.today()


class LocalStorage(StorageInterface, DirectoryAware, SizeAware, AbsolutePathAware, Touchable):
    """Local filesystem storage implementation"""

    def __init__(self, config: Union[StorageConfig, Mapping]):
        """
        Initialize local storage.

        Args:
            config: StorageConfig, or a mapping with the same field names

        Raises:
            InvalidConfigError: If config is neither
        """
        if isinstance(config, Mapping):
            config = StorageConfig.from_mapping(config)

        if not isinstance(config, StorageConfig):
            raise InvalidConfigError(
                f"Storage config must be a StorageConfig or mapping, got {type(config).__name__}"
            )

        self.config = config
        self.resolver = PathResolver()
        self.directory = self.resolver.normalize_root(config.root_directory)
        self.public_url = config.public_url_prefix
        self.create = config.create_missing_directories
        self._recent_key: Optional[str] = None

        logger.debug(f"Local storage initialized at {self.directory}")

    @classmethod
    def from_yaml(cls, config_path: Union[str, Path]) -> "LocalStorage":
        """Create storage from a YAML configuration file."""
        return cls(StorageConfig.from_yaml(config_path))

    @property
    def recent_key(self) -> Optional[str]:
        return self._recent_key

    @property
    def date_folder_sharding(self) -> bool:
        return self.config.date_folder_sharding

    def _build_path(self, key: str, create: Optional[bool] = None) -> str:
        if create is None:
            create = self.create
        path = self.resolver.resolve(key, self.directory, create)
        if not self.resolver.is_within_root(path, self.directory):
            logger.error(f"Rejected key outside storage root: {key!r} -> {path}")
            raise PathOutOfRootError(path, self.directory, key=key)
        return path

    def exists(self, key: str) -> bool:
        """Check if key exists in local storage"""
        self._recent_key = key
        return os.path.exists(self._build_path(key, create=False))

    def get_modified_time(self, key: str) -> Optional[float]:
        """Return modification timestamp, None if key doesn't exist"""
        self._recent_key = key
        path = self._build_path(key, create=False)
        try:
            return os.path.getmtime(path)
        except (OSError, ValueError):
            return None

    def get_size(self, key: str) -> Optional[int]:
        """Return size in bytes, None if key doesn't exist"""
        self._recent_key = key
        path = self._build_path(key, create=False)
        try:
            return os.path.getsize(path)
        except (OSError, ValueError):
            return None

    def touch(self, key: str) -> None:
        """Update modification time, creating an empty file if needed"""
        self._recent_key = key
        path = self._build_path(key)
        try:
            Path(path).touch(exist_ok=True)
        except OSError as e:
            raise StorageWriteError(f"Failed to touch '{key}': {e}", key=key) from e

    def rename(self, source_key: str, target_key: str) -> None:
        """
        Move a key to a new location.

        Target parent directories are created first and an existing target
        file is replaced.

        Raises:
            KeyNotFoundError: If source_key doesn't exist
            StorageWriteError: If the move fails
        """
        self._recent_key = source_key
        source_path = self._build_path(source_key, create=False)
        if not os.path.exists(source_path):
            raise KeyNotFoundError(f"Key not found: {source_key}", key=source_key)

        target_path = self._build_path(target_key)
        self.resolver.ensure_directory_exists(os.path.dirname(target_path), recursive=True)

        try:
            os.replace(source_path, target_path)
        except OSError as e:
            raise StorageWriteError(
                f"Failed to rename '{source_key}' to '{target_key}': {e}", key=source_key
            ) from e

        logger.info(f"Renamed {source_key} -> {target_key}")

    def read(self, key: str) -> bytes:
        """Return the full contents of key"""
        self._recent_key = key
        path = self._build_path(key)
        try:
            with open(path, "rb") as f:
                return f.read()
        except OSError as e:
            raise StorageReadError(f"Failed to read '{key}': {e}", key=key) from e

    def write(self, key: str, contents: Union[bytes, str], append: bool = False) -> int:
        """
        Write contents under key.

        With date folder sharding enabled, keys that don't already start
        with a YYYY/MM/DD/ folder are placed in today's folder. The key
        actually used is available as ``recent_key`` afterwards.

        Args:
            key: Destination key
            contents: Bytes, or text to store as UTF-8
            append: Append instead of overwriting

        Returns:
            Number of bytes written
        """
        if self.date_folder_sharding:
            key = self._shard_key(key)
        self._recent_key = key

        path = self._build_path(key)
        self.resolver.ensure_directory_exists(os.path.dirname(path), recursive=True)

        data = contents.encode("utf-8") if isinstance(contents, str) else contents
        try:
            with open(path, "ab" if append else "wb") as f:
                written = f.write(data)
        except OSError as e:
            raise StorageWriteError(f"Failed to write '{key}': {e}", key=key) from e

        logger.info(f"Wrote {written} bytes to {key}")
        return written

    def _shard_key(self, key: str) -> str:
        key = key.lstrip("/")
        if DATE_FOLDER_PATTERN.match(key):
            return key
        return _today().strftime("%Y/%m/%d") + "/" + key

    def delete(self, key: str) -> bool:
        """
        Delete a file or an empty directory.

        Filesystem failures are logged and reported as False rather than
        raised. The storage root itself is never removed.
        """
        self._recent_key = key
        path = self._build_path(key, create=False)

        if path == self.directory:
            logger.warning("Refusing to delete the storage root")
            return False

        try:
            if os.path.isdir(path):
                os.rmdir(path)
            else:
                os.unlink(path)
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to delete {key}: {e}")
            return False

        logger.info(f"Deleted {key}")
        return True

    def get_absolute_path(self, key: str) -> str:
        self._recent_key = key
        return self._build_path(key)

    def get_url(self, key: str) -> str:
        """Return public URL of key"""
        self._recent_key = key
        key = key.replace("\\", "/")
        return self.public_url + "/" + key.lstrip("/")

    def is_directory(self, key: str) -> bool:
        self._recent_key = key
        return os.path.isdir(self._build_path(key, create=False))

    @timed_operation("local_storage.list_keys")
    def list_keys(self, key: str = "", recursive: Union[bool, int] = False) -> List[str]:
        """
        Return all keys (files and directories) below key.

        Args:
            key: Directory key to list, defaults to the storage root
            recursive: False for immediate children only, True for every
                file at any depth, or an int limiting the recursion depth
                (0 behaves like False, negative like True)

        Returns:
            Keys relative to the storage root, sorted ascending
        """
        self._recent_key = key
        if isinstance(recursive, bool):
            max_depth = None
        elif isinstance(recursive, int):
            max_depth = recursive if recursive > -1 else None
        else:
            raise TypeError(f"recursive must be a bool or int, got {type(recursive).__name__}")

        path = self._build_path(key, create=False)
        if not os.path.isdir(path):
            return []

        if recursive:
            files = walk_leaves(path, max_depth)
        else:
            try:
                files = list_directory(path)
            except OSError as e:
                raise StorageReadError(f"Failed to list '{key}': {e}", key=key) from e

        keys = [self.resolver.key_from_path(file, self.directory) for file in files]
        keys.sort()

        logger.debug(f"Listed {len(keys)} keys under {key or '<root>'}")
        return keys
