"""Settings classes built on the core accessors."""

from .access_policy import FunctionalCapability, UserAccessPolicy, UserGroup
from .color_selections import ColorSelections
from .display import DisplayData, DisplaySettings, DisplayType, DisplayUnit
from .field_pro import FieldProLogonOptions
from .meter_change_out import MeterChangeOutSettings
from .replica_files import ProgramSelection, ReplicaFileSettings
from .security_codes import DeviceSecurityCodes, DeviceSecurityCodeSet, SecurityLevel
from .system_settings import SystemSettings

__all__ = [
    "ColorSelections",
    "DeviceSecurityCodes",
    "DeviceSecurityCodeSet",
    "SecurityLevel",
    "DisplayData",
    "DisplaySettings",
    "DisplayType",
    "DisplayUnit",
    "FieldProLogonOptions",
    "MeterChangeOutSettings",
    "ProgramSelection",
    "ReplicaFileSettings",
    "SystemSettings",
    "FunctionalCapability",
    "UserAccessPolicy",
    "UserGroup",
]
