"""OpenWay installation-wide system settings"""

from typing import Optional

from .base import check_index, resolve_settings_path, root_node_for
from .field_pro import FieldProLogonOptions
from ..config.paths import SettingsPaths
from ..config.schema import CodecConfig, StorageConfig
from ..core.access import SettingsAccess
from ..core.codec import ObfuscationCodec
from ..core.document import PathLike
from ..logging_config import get_logger

logger = get_logger("system_settings")


class SystemSettings:
    """Installation flags, tool passwords and security code regions.

    Passwords are kept obfuscated on disk. Security code regions are
    indexed entries (``SecurityCodeRegionName0``, ``SecurityCodeRegionPWD0``,
    ...) bounded by ``region_count``.
    """

    BASE_FILE_NAME = "OpenWaySystemSettings"
    MAIN_NODE = "OpenWaySystemSettings"

    XML_NODE_IS_CANADIAN = "IsCanadian"
    XML_NODE_CURRENT_PWD = "CurrentPWD"
    XML_NODE_PREVIOUS_PWD = "PreviousPWD"
    XML_NODE_CURRENT_ICS_PWD = "CurrentICSPWD"
    XML_NODE_PREVIOUS_ICS_PWD = "PreviousICSPWD"
    XML_NODE_SECURITY_CODE_REGION_PWD = "SecurityCodeRegionPWD"
    XML_NODE_SECURITY_CODE_REGION_NAME = "SecurityCodeRegionName"
    XML_NODE_SECURITY_CODE_REGION_COUNT = "SecurityCodeRegionCount"
    XML_NODE_SECURITY_CODE_REGIONS_ENABLED = "SecurityCodeRegionsEnabled"
    XML_NODE_ZIGBEE_SCAN_LIMIT = "ZigBeeScanLimit"
    XML_NODE_ENABLE_C1218_SESSION_TIMEOUT = "EnableC1218SessionTimeout"
    XML_NODE_C1218_SESSION_TIMEOUT = "C1281SessionTimeout"

    DEFAULT_ZIGBEE_SCAN_LIMIT = 4
    DEFAULT_C1218_SESSION_TIMEOUT = 30

    def __init__(
        self,
        file_path: Optional[PathLike] = None,
        storage: Optional[StorageConfig] = None,
        codec: Optional[CodecConfig] = None,
    ):
        path = resolve_settings_path(
            self.BASE_FILE_NAME, file_path, storage, SettingsPaths.OPENWAY_REPLICA
        )
        self.access = SettingsAccess.open(path, self.MAIN_NODE, root_node_for(storage))
        self.codec = ObfuscationCodec(codec)
        self.logon_options = FieldProLogonOptions(self.access, self.codec)

    # Installation

    @property
    def is_canadian(self) -> bool:
        return self.access.get_bool(self.XML_NODE_IS_CANADIAN)

    @is_canadian.setter
    def is_canadian(self, value: bool) -> None:
        self.access.set_bool(self.XML_NODE_IS_CANADIAN, value)

    @property
    def zigbee_scan_limit(self) -> int:
        """Number of ZigBee scans; never less than one scan."""
        scans = self.access.get_int(self.XML_NODE_ZIGBEE_SCAN_LIMIT)
        return scans if scans > 0 else self.DEFAULT_ZIGBEE_SCAN_LIMIT

    @zigbee_scan_limit.setter
    def zigbee_scan_limit(self, value: int) -> None:
        self.access.set_int(self.XML_NODE_ZIGBEE_SCAN_LIMIT, value)

    @property
    def enable_c1218_session_timeout(self) -> bool:
        return self.access.get_bool(self.XML_NODE_ENABLE_C1218_SESSION_TIMEOUT)

    @enable_c1218_session_timeout.setter
    def enable_c1218_session_timeout(self, value: bool) -> None:
        self.access.set_bool(self.XML_NODE_ENABLE_C1218_SESSION_TIMEOUT, value)

    @property
    def c1218_session_timeout(self) -> int:
        """Session timeout in seconds; 30 when unset or invalid."""
        seconds = self.access.get_int(self.XML_NODE_C1218_SESSION_TIMEOUT)
        return seconds if seconds > 0 else self.DEFAULT_C1218_SESSION_TIMEOUT

    @c1218_session_timeout.setter
    def c1218_session_timeout(self, value: int) -> None:
        self.access.set_int(self.XML_NODE_C1218_SESSION_TIMEOUT, value)

    # Passwords

    @property
    def current_password(self) -> str:
        return self._get_secret(self.XML_NODE_CURRENT_PWD)

    @current_password.setter
    def current_password(self, value: str) -> None:
        self._set_secret(self.XML_NODE_CURRENT_PWD, value)

    @property
    def previous_password(self) -> str:
        return self._get_secret(self.XML_NODE_PREVIOUS_PWD)

    @previous_password.setter
    def previous_password(self, value: str) -> None:
        self._set_secret(self.XML_NODE_PREVIOUS_PWD, value)

    @property
    def current_ics_password(self) -> str:
        return self._get_secret(self.XML_NODE_CURRENT_ICS_PWD)

    @current_ics_password.setter
    def current_ics_password(self, value: str) -> None:
        self._set_secret(self.XML_NODE_CURRENT_ICS_PWD, value)

    @property
    def previous_ics_password(self) -> str:
        return self._get_secret(self.XML_NODE_PREVIOUS_ICS_PWD)

    @previous_ics_password.setter
    def previous_ics_password(self, value: str) -> None:
        self._set_secret(self.XML_NODE_PREVIOUS_ICS_PWD, value)

    def change_password(self, new_password: str) -> None:
        """Make the current password the previous one and store a new one."""
        self.previous_password = self.current_password
        self.current_password = new_password
        logger.debug("Tool password changed")

    # Security code regions

    @property
    def regions_enabled(self) -> bool:
        return self.access.get_bool(self.XML_NODE_SECURITY_CODE_REGIONS_ENABLED)

    @regions_enabled.setter
    def regions_enabled(self, value: bool) -> None:
        self.access.set_bool(self.XML_NODE_SECURITY_CODE_REGIONS_ENABLED, value)

    @property
    def region_count(self) -> int:
        return self.access.get_int(self.XML_NODE_SECURITY_CODE_REGION_COUNT)

    @region_count.setter
    def region_count(self, value: int) -> None:
        if value < 0:
            raise ValueError(f"Region count must not be negative: {value}")
        self.access.set_int(self.XML_NODE_SECURITY_CODE_REGION_COUNT, value)

    def get_region_name(self, index: int) -> str:
        check_index(index, self.region_count, "security code region")
        return self.access.get_string(f"{self.XML_NODE_SECURITY_CODE_REGION_NAME}{index}")

    def set_region_name(self, index: int, name: str) -> None:
        check_index(index, self.region_count, "security code region")
        self.access.set_string(f"{self.XML_NODE_SECURITY_CODE_REGION_NAME}{index}", name)

    def get_region_password(self, index: int) -> str:
        check_index(index, self.region_count, "security code region")
        return self._get_secret(f"{self.XML_NODE_SECURITY_CODE_REGION_PWD}{index}")

    def set_region_password(self, index: int, password: str) -> None:
        check_index(index, self.region_count, "security code region")
        self._set_secret(f"{self.XML_NODE_SECURITY_CODE_REGION_PWD}{index}", password)

    def find_region_password(self, region_name: str) -> Optional[str]:
        """Look up a region's password by region name.

        Returns:
            The password, or None if no region has this name
        """
        for index in range(self.region_count):
            if self.get_region_name(index) == region_name:
                return self.get_region_password(index)
        return None

    def save(self) -> bool:
        return self.access.save_settings()

    def _get_secret(self, node: str) -> str:
        return self.codec.decode(self.access.get_string(node))

    def _set_secret(self, node: str, value: str) -> None:
        self.access.set_string(node, self.codec.encode(value))
