"""
Directory enumeration used when listing storage keys.
"""

import logging
import os
from typing import Iterator, List, Optional

logger = logging.getLogger(__name__)


def list_directory(path: str) -> List[str]:
    """
    List the immediate entries of a directory.

    Returns full paths of files and directories alike. ``os.scandir`` never
    reports the ``.`` and ``..`` self references.

    Raises:
        OSError: If the directory can't be read
    """
    with os.scandir(path) as entries:
        return [entry.path for entry in entries]


def walk_leaves(path: str, max_depth: Optional[int] = None) -> Iterator[str]:
    """
    Recursively yield the leaf entries below a directory.

    Directories are descended rather than reported, so empty directories
    produce nothing. Depth 0 is the immediate children of ``path``; a
    directory found at ``max_depth`` isn't descended and is yielded as a
    leaf. Symlinked directories are yielded as leaves and never followed.

    A directory that can't be read contributes no entries; the rest of the
    walk carries on.

    Args:
        path: Directory to walk
        max_depth: Deepest level to descend into, None for unbounded
    """
    return _walk(path, max_depth, 0)


def _walk(path: str, max_depth: Optional[int], depth: int) -> Iterator[str]:
    try:
        with os.scandir(path) as it:
            entries = list(it)
    except OSError as e:
        logger.warning(f"Skipping unreadable directory {path}: {e}")
        return

    for entry in entries:
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError:
            is_dir = False

        if is_dir and (max_depth is None or depth < max_depth):
            yield from _walk(entry.path, max_depth, depth + 1)
        else:
            yield entry.path
