"""
Key to path resolution for local storage.

Maps logical, slash-separated keys onto physical paths below a storage root
and back again. Containment is reported by ``is_within_root``; callers decide
what to do with a path that escapes the root.
"""

import logging
import os
import posixpath

from .exceptions import DirectoryCreationError, InvalidConfigError, PathOutOfRootError

logger = logging.getLogger(__name__)

KEY_SEPARATOR = "/"


def directory_separator() -> str:
    """Return the path separator of the running platform."""
    return os.sep


class PathResolver:
    """
    Bidirectional mapping between storage keys and filesystem paths.

    Features:
    - Root normalization to an absolute path without trailing separator
    - Key resolution with optional parent directory creation
    - Containment checks against the root
    - Reverse mapping of scanned paths back into keys
    """

    def __init__(self, dir_mode: int = 0o777):
        """
        Initialize resolver.

        Args:
            dir_mode: Mode for created directories, applied through the umask
        """
        self.separator = directory_separator()
        self.dir_mode = dir_mode

    def normalize_root(self, raw) -> str:
        """
        Normalize a configured root directory.

        Args:
            raw: Root directory as configured

        Returns:
            Absolute path using platform separators, without trailing separator

        Raises:
            InvalidConfigError: If raw is empty
        """
        if raw is None or not str(raw).strip():
            raise InvalidConfigError("Storage root directory can't be empty")

        # abspath collapses duplicate separators and dot segments as well
        return os.path.abspath(os.fspath(raw))

    def normalize_key(self, key: str) -> str:
        """Return the canonical form of a key."""
        key = key.replace(self.separator, KEY_SEPARATOR)
        normalized = posixpath.normpath(key).strip(KEY_SEPARATOR)
        return "" if normalized == "." else normalized

    def resolve(self, key: str, root: str, create_if_missing: bool = False) -> str:
        """
        Build the physical path of a key.

        The result is not guaranteed to be inside ``root``; check it with
        ``is_within_root`` before touching the filesystem.

        Args:
            key: Logical key, an empty key resolves to the root itself
            root: Normalized storage root
            create_if_missing: Create the parent directory chain if missing

        Returns:
            Normalized absolute path
        """
        relative = key.strip(KEY_SEPARATOR + self.separator)
        if not relative:
            return root

        relative = relative.replace(KEY_SEPARATOR, self.separator)
        path = os.path.normpath(os.path.join(root, relative))

        if create_if_missing and path != root and self.is_within_root(path, root):
            parent = os.path.dirname(path)
            if not os.path.isdir(parent):
                self.ensure_directory_exists(parent, recursive=True)

        return path

    def is_within_root(self, path: str, root: str) -> bool:
        if path == root:
            return True
        return path.startswith(root.rstrip(self.separator) + self.separator)

    def key_from_path(self, path: str, root: str) -> str:
        """
        Convert a path below the root back into a key.

        Args:
            path: Absolute path produced by resolution or directory scanning
            root: Normalized storage root

        Returns:
            Key relative to the root, using forward slashes

        Raises:
            PathOutOfRootError: If path isn't below root
        """
        if path == root:
            return ""

        prefix = root.rstrip(self.separator) + self.separator
        if not path.startswith(prefix):
            raise PathOutOfRootError(path, root)

        return path[len(prefix):].replace(self.separator, KEY_SEPARATOR)

    def ensure_directory_exists(self, directory: str, recursive: bool = True) -> None:
        """
        Create a directory unless it already exists.

        Args:
            directory: Directory to create
            recursive: Create missing ancestors as well

        Raises:
            DirectoryCreationError: If the filesystem refuses to create it
        """
        if os.path.isdir(directory):
            return

        try:
            if recursive:
                os.makedirs(directory, mode=self.dir_mode, exist_ok=True)
            else:
                os.mkdir(directory, self.dir_mode)
        except OSError as e:
            # Someone else may have created it in the meantime
            if os.path.isdir(directory):
                return
            logger.error(f"Failed to create directory {directory}: {e}")
            raise DirectoryCreationError(f"Failed to create directory '{directory}': {e}") from e

        logger.debug(f"Created directory: {directory}")
