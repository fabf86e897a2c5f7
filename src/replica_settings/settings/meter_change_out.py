"""Meter change-out options"""

from typing import Optional

from .base import resolve_settings_path, root_node_for
from ..config.schema import StorageConfig
from ..core.access import SettingsAccess
from ..core.document import PathLike


class MeterChangeOutSettings:
    """What to do with the old meter's data during a change-out."""

    BASE_FILE_NAME = "MeterChangeOut"
    MAIN_NODE = "MeterChangeOut"

    XML_NODE_CREATE_DATA_FILE = "ChangeOutCreateDataFile"
    XML_NODE_COPY_REGISTERS = "ChangeOutCopyRegisters"
    XML_NODE_EDIT_REGISTERS = "ChangeOutEditRegisters"
    XML_NODE_DEFAULT_FILE_LOCATION = "ChangeOutDefaultFileLocation"

    def __init__(
        self,
        file_path: Optional[PathLike] = None,
        storage: Optional[StorageConfig] = None,
    ):
        path = resolve_settings_path(self.BASE_FILE_NAME, file_path, storage)
        self.access = SettingsAccess.open(path, self.MAIN_NODE, root_node_for(storage))

    @property
    def create_data_file(self) -> int:
        return self.access.get_int(self.XML_NODE_CREATE_DATA_FILE)

    @create_data_file.setter
    def create_data_file(self, value: int) -> None:
        self.access.set_int(self.XML_NODE_CREATE_DATA_FILE, value)

    @property
    def copy_registers(self) -> int:
        return self.access.get_int(self.XML_NODE_COPY_REGISTERS)

    @copy_registers.setter
    def copy_registers(self, value: int) -> None:
        self.access.set_int(self.XML_NODE_COPY_REGISTERS, value)

    @property
    def edit_registers(self) -> int:
        return self.access.get_int(self.XML_NODE_EDIT_REGISTERS)

    @edit_registers.setter
    def edit_registers(self, value: int) -> None:
        self.access.set_int(self.XML_NODE_EDIT_REGISTERS, value)

    @property
    def default_file_location(self) -> str:
        return self.access.get_string(self.XML_NODE_DEFAULT_FILE_LOCATION)

    @default_file_location.setter
    def default_file_location(self, value: str) -> None:
        self.access.set_string(self.XML_NODE_DEFAULT_FILE_LOCATION, value)

    def save(self) -> bool:
        return self.access.save_settings()
