"""
Test helper utilities for storage-core.
"""

from pathlib import Path
from typing import Dict, Any, Iterable, Optional
import yaml


def create_tree(root: Path, files: Iterable[str], directories: Iterable[str] = ()) -> Path:
    """
    Create files and empty directories below root.

    Args:
        root: Directory to create the tree in
        files: Relative file paths, each file gets its own path as content
        directories: Relative paths of extra (empty) directories

    Returns:
        The root directory
    """
    for directory in directories:
        (root / directory).mkdir(parents=True, exist_ok=True)

    for file in files:
        path = root / file
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(file)

    return root


def write_storage_config(
    config_path: Path,
    config: Dict[str, Any],
    section: Optional[str] = None
) -> Path:
    """
    Write a storage configuration YAML file.

    Args:
        config_path: File to write
        config: Storage options
        section: Optional top-level section to nest the options under

    Returns:
        Path to the written file
    """
    document = {section: config} if section else config
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        yaml.dump(document, f)
    return config_path
