"""
Storage configuration.

Configuration is captured once, validated, and never mutated afterwards.
"""

import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Union

import yaml

from .exceptions import InvalidConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StorageConfig:
    """Configuration for a local storage instance."""

    root_directory: str

    # Prefix used when building public links to stored keys
    public_url_prefix: str = ""

    # Prefix written keys with YYYY/MM/DD/
    date_folder_sharding: bool = False

    # Create missing parent directories while resolving keys
    create_missing_directories: bool = False

    def __post_init__(self):
        if isinstance(self.root_directory, Path):
            object.__setattr__(self, "root_directory", str(self.root_directory))

        if not isinstance(self.root_directory, str) or not self.root_directory.strip():
            raise InvalidConfigError("root_directory must be a non-empty string")

        if not isinstance(self.public_url_prefix, str):
            raise InvalidConfigError("public_url_prefix must be a string")

        for name in ("date_folder_sharding", "create_missing_directories"):
            if not isinstance(getattr(self, name), bool):
                raise InvalidConfigError(f"{name} must be a boolean")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "StorageConfig":
        """
        Build a config from a mapping of field names to values.

        Args:
            data: Mapping using exactly the StorageConfig field names

        Returns:
            Validated StorageConfig

        Raises:
            InvalidConfigError: If data isn't a mapping, has unknown keys,
                lacks root_directory or holds values of the wrong type
        """
        if not isinstance(data, Mapping):
            raise InvalidConfigError(
                f"Storage config must be a mapping, got {type(data).__name__}"
            )

        known = {f.name for f in fields(cls)}
        unknown = sorted(str(k) for k in data if k not in known)
        if unknown:
            raise InvalidConfigError(f"Unknown storage config options: {', '.join(unknown)}")

        if "root_directory" not in data:
            raise InvalidConfigError("root_directory is required")

        return cls(**data)

    @classmethod
    def from_yaml(cls, config_path: Union[str, Path]) -> "StorageConfig":
        """
        Load configuration from a YAML file.

        The options may sit at the top level of the document or under a
        ``storage`` section.
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise InvalidConfigError(f"Storage configuration not found: {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                raw_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"Error parsing storage configuration {config_path}: {e}")
            raise InvalidConfigError(f"Invalid storage configuration: {e}") from e
        except OSError as e:
            logger.error(f"Error reading storage configuration {config_path}: {e}")
            raise InvalidConfigError(f"Failed to read storage configuration: {e}") from e

        if raw_config is None:
            raise InvalidConfigError("Empty storage configuration")

        if isinstance(raw_config, dict) and isinstance(raw_config.get("storage"), dict):
            raw_config = raw_config["storage"]

        logger.debug(f"Loaded storage configuration from {config_path}")
        return cls.from_mapping(raw_config)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
