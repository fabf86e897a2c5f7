"""User access policy, stored in an encrypted settings file.

Each functional capability lists the user groups allowed to use it::

    <Capabilities>
      <ResetBilling>
        <Value>CentronII Tools Power Users</Value>
        <Value>CentronII Tools Users</Value>
      </ResetBilling>
    </Capabilities>

Group membership of the signed-on user comes from the caller; this module
only stores and evaluates the policy.
"""

from enum import Enum, Flag
from typing import Iterable, Optional

from .base import resolve_settings_path, root_node_for
from ..config.schema import EncryptionConfig, StorageConfig
from ..core.access import EncryptedSettingsAccess
from ..core.document import PathLike


class FunctionalCapability(Enum):
    """Capabilities, valued by their node names"""
    MANAGE_SYSTEM_SETTINGS = "ManageSystemSettings"
    MANAGE_CONFIG_FILES = "ManageConfigFiles"
    MANAGE_DATA_FILES = "ManageDataFiles"
    RFLAN_OPERATIONS = "RFLANOperations"
    HAN_OPERATIONS = "HANOperations"
    METER_SWITCH_OPERATIONS = "MeterSwitchOperations"
    METER_INITIALIZATION = "MeterInitialization"
    RECONFIGURATION = "MeterReconfiguration"
    FIRMWARE_DOWNLOAD = "FirmwareDownload"
    RESET_DEMAND_REGISTERS = "ResetDemand"
    RESET_BILLING_REGISTERS = "ResetBilling"
    RESET_TAMPERS = "ResetTampers"
    RESET_ACTIVITY_STATUS = "ResetActivityStatus"
    ADJUST_CLOCK = "AdjustClock"
    CLEAR_METER_DATA = "ClearMeterData"
    ENTER_EXIT_TEST_MODE = "EnterExitTestMode"


class UserGroup(Flag):
    """Configurable user groups"""
    NO_USERS = 0
    TOOLS_POWER_USERS = 1
    TOOLS_USERS = 2
    NORMAL_USERS_2 = 4
    NORMAL_USERS_3 = 8


ADMINISTRATORS_GROUP = "CentronII Tools Administrators"

GROUP_NAMES = {
    UserGroup.TOOLS_POWER_USERS: "CentronII Tools Power Users",
    UserGroup.TOOLS_USERS: "CentronII Tools Users",
    UserGroup.NORMAL_USERS_2: "CentronII Normal Users 2",
    UserGroup.NORMAL_USERS_3: "CentronII Normal Users 3",
}


class UserAccessPolicy:
    """Which user groups may use which tool capabilities."""

    BASE_FILE_NAME = "PCProUserAccessPolicy"
    MAIN_NODE = "Capabilities"
    XML_NODE_USER_ACCESS_POLICY = "UserAccessPolicy"

    def __init__(
        self,
        file_path: Optional[PathLike] = None,
        storage: Optional[StorageConfig] = None,
        encryption: Optional[EncryptionConfig] = None,
    ):
        path = resolve_settings_path(self.BASE_FILE_NAME, file_path, storage)
        self.access = EncryptedSettingsAccess.open(
            path, self.MAIN_NODE, root_node_for(storage), encryption=encryption
        )

    @property
    def enforced(self) -> bool:
        """Whether the policy is applied at all."""
        return self.access.get_bool(self.XML_NODE_USER_ACCESS_POLICY)

    @enforced.setter
    def enforced(self, value: bool) -> None:
        self.access.set_bool(self.XML_NODE_USER_ACCESS_POLICY, value)

    def get_user_groups(self, capability: FunctionalCapability) -> list[str]:
        return self.access.get_string_list(capability.value)

    def set_user_groups(self, capability: FunctionalCapability, groups: Iterable[str]) -> None:
        self.access.set_string_list(capability.value, list(groups))

    def check_group_access(self, capability: FunctionalCapability, group: UserGroup) -> bool:
        """Check whether every group in ``group`` is granted a capability."""
        allowed = self.get_user_groups(capability)
        members = [flag for flag in GROUP_NAMES if flag in group]
        return bool(members) and all(GROUP_NAMES[flag] in allowed for flag in members)

    def set_group_access(
        self,
        capability: FunctionalCapability,
        group: UserGroup,
        granted: bool,
    ) -> None:
        """Grant or revoke a capability for the groups in ``group``."""
        allowed = self.get_user_groups(capability)
        for flag, name in GROUP_NAMES.items():
            if flag not in group:
                continue
            if granted and name not in allowed:
                allowed.append(name)
            elif not granted and name in allowed:
                allowed.remove(name)
        self.set_user_groups(capability, allowed)

    def check_user_access(self, capability: FunctionalCapability, user_groups: Iterable[str]) -> bool:
        """Check whether a user belonging to ``user_groups`` may use a capability.

        Administrators are always allowed, as is everyone when the policy
        is not enforced.
        """
        if not self.enforced:
            return True

        user_groups = set(user_groups)
        if ADMINISTRATORS_GROUP in user_groups:
            return True
        return any(group in user_groups for group in self.get_user_groups(capability))

    def save(self) -> bool:
        return self.access.save_settings()
