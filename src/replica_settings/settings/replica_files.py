"""Which components go into an exported replica file"""

from enum import IntEnum
from typing import Optional

from .base import resolve_settings_path, root_node_for
from ..config.schema import StorageConfig
from ..core.access import SettingsAccess
from ..core.document import PathLike


class ProgramSelection(IntEnum):
    """How programs are included in a replica file"""
    DO_NOT_INCLUDE = 0
    INCLUDE_ALL = 1
    SELECT = 2


class ReplicaFileSettings:
    """File-inclusion flags and last-used directories for replica export."""

    BASE_FILE_NAME = "SystemSettings"
    MAIN_NODE = "SystemSettings"

    XML_NODE_PROGRAMS = "Programs"
    XML_NODE_SETTINGS = "Settings"
    XML_NODE_DST = "DST"
    XML_NODE_SECURITY = "Security"
    XML_NODE_FIELD_PRO_SETTINGS = "FieldProSettings"
    XML_NODE_ADDRESS_BOOK = "AddressBook"
    XML_NODE_LAST_REPLICA_DIRECTORY = "ReplicaDirectory"
    XML_NODE_LAST_FIELD_PRO_DIRECTORY = "FieldProDirectory"
    XML_NODE_PASSWORD_PROTECTED = "PasswordProtected"
    XML_NODE_REPORT_SPECIFICATION = "ReportSpecification"
    XML_NODE_FIRMWARE_FILES = "FirmwareFiles"

    def __init__(
        self,
        file_path: Optional[PathLike] = None,
        storage: Optional[StorageConfig] = None,
    ):
        path = resolve_settings_path(self.BASE_FILE_NAME, file_path, storage)
        self.access = SettingsAccess.open(path, self.MAIN_NODE, root_node_for(storage))

    @property
    def programs_options(self) -> ProgramSelection:
        stored = self.access.get_int(self.XML_NODE_PROGRAMS)
        try:
            return ProgramSelection(stored)
        except ValueError:
            return ProgramSelection.DO_NOT_INCLUDE

    @programs_options.setter
    def programs_options(self, value: ProgramSelection) -> None:
        self.access.set_int(self.XML_NODE_PROGRAMS, int(value))

    @property
    def programs(self) -> bool:
        return self.programs_options != ProgramSelection.DO_NOT_INCLUDE

    @property
    def settings(self) -> bool:
        return self.access.get_bool(self.XML_NODE_SETTINGS)

    @settings.setter
    def settings(self, value: bool) -> None:
        self.access.set_bool(self.XML_NODE_SETTINGS, value)

    @property
    def dst(self) -> bool:
        return self.access.get_bool(self.XML_NODE_DST)

    @dst.setter
    def dst(self, value: bool) -> None:
        self.access.set_bool(self.XML_NODE_DST, value)

    @property
    def security(self) -> bool:
        return self.access.get_bool(self.XML_NODE_SECURITY)

    @security.setter
    def security(self, value: bool) -> None:
        self.access.set_bool(self.XML_NODE_SECURITY, value)

    @property
    def field_pro_settings(self) -> bool:
        return self.access.get_bool(self.XML_NODE_FIELD_PRO_SETTINGS)

    @field_pro_settings.setter
    def field_pro_settings(self, value: bool) -> None:
        self.access.set_bool(self.XML_NODE_FIELD_PRO_SETTINGS, value)

    @property
    def address_book(self) -> bool:
        return self.access.get_bool(self.XML_NODE_ADDRESS_BOOK)

    @address_book.setter
    def address_book(self, value: bool) -> None:
        self.access.set_bool(self.XML_NODE_ADDRESS_BOOK, value)

    @property
    def canadian(self) -> bool:
        """The Canadian component is always included."""
        return True

    @canadian.setter
    def canadian(self, value: bool) -> None:
        pass

    @property
    def report_specification(self) -> bool:
        return self.access.get_bool(self.XML_NODE_REPORT_SPECIFICATION)

    @report_specification.setter
    def report_specification(self, value: bool) -> None:
        self.access.set_bool(self.XML_NODE_REPORT_SPECIFICATION, value)

    @property
    def password_protected(self) -> bool:
        return self.access.get_bool(self.XML_NODE_PASSWORD_PROTECTED)

    @password_protected.setter
    def password_protected(self, value: bool) -> None:
        self.access.set_bool(self.XML_NODE_PASSWORD_PROTECTED, value)

    @property
    def firmware_files(self) -> bool:
        return self.access.get_bool(self.XML_NODE_FIRMWARE_FILES)

    @firmware_files.setter
    def firmware_files(self, value: bool) -> None:
        self.access.set_bool(self.XML_NODE_FIRMWARE_FILES, value)

    @property
    def last_replica_directory(self) -> str:
        return self.access.get_string(self.XML_NODE_LAST_REPLICA_DIRECTORY)

    @last_replica_directory.setter
    def last_replica_directory(self, value: str) -> None:
        self.access.set_string(self.XML_NODE_LAST_REPLICA_DIRECTORY, value)

    @property
    def last_field_pro_directory(self) -> str:
        return self.access.get_string(self.XML_NODE_LAST_FIELD_PRO_DIRECTORY)

    @last_field_pro_directory.setter
    def last_field_pro_directory(self, value: str) -> None:
        self.access.set_string(self.XML_NODE_LAST_FIELD_PRO_DIRECTORY, value)

    def save(self) -> bool:
        return self.access.save_settings()
