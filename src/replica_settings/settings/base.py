"""Helpers shared by the settings classes"""

from pathlib import Path
from typing import Optional

from ..config.paths import SettingsPaths
from ..config.schema import DEFAULT_ROOT_NODE, StorageConfig
from ..core.document import PathLike
from ..errors import IndexOutOfRangeError


def resolve_settings_path(
    base_file_name: str,
    file_path: Optional[PathLike] = None,
    storage: Optional[StorageConfig] = None,
    category: str = SettingsPaths.REPLICA,
) -> Path:
    """Pick the file a settings class should load.

    Args:
        base_file_name: Default file name without extension
        file_path: Explicit file, wins over everything else
        storage: Storage config whose root directory holds the default file
        category: Registry category used when no storage config is given

    Returns:
        Path to the settings file
    """
    if file_path:
        return Path(file_path)
    if storage is None:
        storage = SettingsPaths.for_category(category)
    return storage.file_path(base_file_name)


def check_index(index: int, limit: int, what: str) -> None:
    """Raise IndexOutOfRangeError unless 0 <= index < limit."""
    if index < 0 or index >= limit:
        raise IndexOutOfRangeError(f"Invalid {what} index {index}, expected 0 to {limit - 1}")


def root_node_for(storage: Optional[StorageConfig] = None) -> str:
    """Document element name configured by ``storage``, or the default."""
    return storage.root_node if storage is not None else DEFAULT_ROOT_NODE
