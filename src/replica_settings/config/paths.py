"""Default settings directories"""

import os
from pathlib import Path

from .schema import StorageConfig


class SettingsPaths:
    """Default settings directories, keyed by registry category.

    All paths use environment variable expansion for portability.
    """

    REPLICA = "Replica"
    OPENWAY_REPLICA = "OpenWay Replica"

    CATEGORY_DIRECTORIES = {
        REPLICA: r"%PROGRAMDATA%\Itron\Replica",
        OPENWAY_REPLICA: r"%PROGRAMDATA%\Itron\OpenWay Replica",
    }

    @classmethod
    def expand_path(cls, path_str: str) -> Path:
        """Expand environment variables in path string.

        Args:
            path_str: Path string potentially containing environment variables

        Returns:
            Path object with expanded variables
        """
        return Path(os.path.expandvars(path_str))

    @classmethod
    def directory_for(cls, category: str) -> Path:
        """Resolve the default directory of a registry category.

        Args:
            category: Registry category name (e.g. "Replica")

        Returns:
            Expanded directory path

        Raises:
            KeyError: If the category is unknown
        """
        return cls.expand_path(cls.CATEGORY_DIRECTORIES[category])

    @classmethod
    def for_category(cls, category: str) -> StorageConfig:
        """Build a StorageConfig rooted at a category's default directory."""
        return StorageConfig(root_directory=cls.directory_for(category))

    @classmethod
    def ensure_directory(cls, storage: StorageConfig) -> Path:
        """Ensure the storage root directory exists.

        Returns:
            Path to the directory
        """
        path = Path(storage.root_directory)
        path.mkdir(parents=True, exist_ok=True)
        return path
