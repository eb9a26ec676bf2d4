"""
Shared test configuration and fixtures for storage-core.
"""

import pytest
import tempfile
import shutil
from pathlib import Path

from storage_core import StorageConfig
from storage_core.services import LocalStorage


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def storage_root(temp_dir):
    """Create the storage root inside the temporary directory."""
    root = temp_dir / "store"
    root.mkdir()
    return root


@pytest.fixture
def storage(storage_root):
    """Create a LocalStorage instance over an empty root."""
    return LocalStorage(StorageConfig(
        root_directory=str(storage_root),
        public_url_prefix="https://cdn.example.com/files",
    ))


@pytest.fixture
def sharded_storage(storage_root):
    """Create a LocalStorage instance with date folder sharding."""
    return LocalStorage(StorageConfig(
        root_directory=str(storage_root),
        date_folder_sharding=True,
    ))


@pytest.fixture
def creating_storage(storage_root):
    """Create a LocalStorage instance that creates missing directories."""
    return LocalStorage(StorageConfig(
        root_directory=str(storage_root),
        create_missing_directories=True,
    ))


@pytest.fixture
def sample_config_dict(storage_root):
    """Sample storage configuration mapping."""
    return {
        "root_directory": str(storage_root),
        "public_url_prefix": "https://cdn.example.com",
        "date_folder_sharding": True,
        "create_missing_directories": False,
    }
