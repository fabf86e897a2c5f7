"""Per-device security codes.

Each device type has its own section under the ``Security`` anchor and
holds one obfuscated leaf per supported code level::

    <Security>
      <SENTINEL>
        <Primary><Value>1A2B...</Value></Primary>
        <Limited><Value>...</Value></Limited>
      </SENTINEL>
    </Security>

Which levels a device supports is table data, not a class per device.
"""

from enum import Enum
from typing import Optional

from .base import resolve_settings_path, root_node_for
from ..config.schema import CodecConfig, StorageConfig
from ..core.access import SettingsAccess
from ..core.codec import ObfuscationCodec
from ..core.document import PathLike


class SecurityLevel(Enum):
    """Security code levels, valued by their node names"""
    PRIMARY = "Primary"
    SECONDARY = "Secondary"
    TERTIARY = "Tertiary"
    LIMITED = "Limited"


_STANDARD = (SecurityLevel.PRIMARY, SecurityLevel.SECONDARY)
_TERTIARY = _STANDARD + (SecurityLevel.TERTIARY,)
_LIMITED = _TERTIARY + (SecurityLevel.LIMITED,)

# Device section name -> supported code levels
DEVICE_SECURITY_LEVELS: dict[str, tuple[SecurityLevel, ...]] = {
    "CENTRON": _TERTIARY,
    "CENTRON_MONO": _LIMITED,
    "CENTRON_POLY": _LIMITED,
    "CENTRON_OPENWAY": _LIMITED,
    "SENTINEL": _LIMITED,
    "Q1000": _TERTIARY,
    "VECTRON": _TERTIARY,
    "FULCRUM": _TERTIARY,
    "DATASTAR": _STANDARD,
    "QUANTUM": _STANDARD,
    "DMTMTR200": _STANDARD,
}


class DeviceSecurityCodeSet:
    """The security codes of one device type.

    Codes are obfuscated on write and recovered on read; the stored text is
    never handed out raw.
    """

    def __init__(
        self,
        access: SettingsAccess,
        device: str,
        levels: tuple[SecurityLevel, ...],
        codec: ObfuscationCodec,
    ):
        self.access = access
        self.device = device
        self.levels = levels
        self.codec = codec

    def supports(self, level: SecurityLevel) -> bool:
        return level in self.levels

    def get_code(self, level: SecurityLevel) -> str:
        """Read a security code.

        A code that was never written reads as "" and is not created.

        Raises:
            KeyError: If the device has no code at this level
            MalformedEncodingError: If the stored text is not valid hex
        """
        path = self._path(level)
        if not self.access.node_exists(path):
            return ""
        return self.codec.decode(self.access.get_string(path))

    def set_code(self, level: SecurityLevel, code: str) -> None:
        """Store a security code.

        Raises:
            KeyError: If the device has no code at this level
            KeyExhaustedError: If the code is longer than the obfuscation key
        """
        path = self._path(level)
        self.access.set_string(path, self.codec.encode(code))

    def has_code(self, level: SecurityLevel) -> bool:
        """Whether a code at this level has ever been written."""
        return self.access.node_exists(self._path(level))

    @property
    def primary(self) -> str:
        return self.get_code(SecurityLevel.PRIMARY)

    @primary.setter
    def primary(self, code: str) -> None:
        self.set_code(SecurityLevel.PRIMARY, code)

    @property
    def secondary(self) -> str:
        return self.get_code(SecurityLevel.SECONDARY)

    @secondary.setter
    def secondary(self, code: str) -> None:
        self.set_code(SecurityLevel.SECONDARY, code)

    @property
    def tertiary(self) -> str:
        return self.get_code(SecurityLevel.TERTIARY)

    @tertiary.setter
    def tertiary(self, code: str) -> None:
        self.set_code(SecurityLevel.TERTIARY, code)

    @property
    def limited(self) -> str:
        return self.get_code(SecurityLevel.LIMITED)

    @limited.setter
    def limited(self, code: str) -> None:
        self.set_code(SecurityLevel.LIMITED, code)

    def _path(self, level: SecurityLevel) -> tuple[str, str]:
        if level not in self.levels:
            raise KeyError(f"{self.device} has no {level.value} security code")
        return (self.device, level.value)


class DeviceSecurityCodes:
    """Security codes for every supported device type, in one file."""

    BASE_FILE_NAME = "Security Codes"
    MAIN_NODE = "Security"

    def __init__(
        self,
        file_path: Optional[PathLike] = None,
        storage: Optional[StorageConfig] = None,
        codec: Optional[CodecConfig] = None,
        device_levels: Optional[dict[str, tuple[SecurityLevel, ...]]] = None,
    ):
        path = resolve_settings_path(self.BASE_FILE_NAME, file_path, storage)
        self.access = SettingsAccess.open(path, self.MAIN_NODE, root_node_for(storage))
        self.codec = ObfuscationCodec(codec)
        self.device_levels = dict(device_levels or DEVICE_SECURITY_LEVELS)

    @property
    def devices(self) -> list[str]:
        return list(self.device_levels)

    def device(self, name: str) -> DeviceSecurityCodeSet:
        """Get the security codes of a device type.

        Raises:
            KeyError: If the device type is unknown
        """
        if name not in self.device_levels:
            raise KeyError(f"Unknown device type: {name}")
        return DeviceSecurityCodeSet(self.access, name, self.device_levels[name], self.codec)

    def __getitem__(self, name: str) -> DeviceSecurityCodeSet:
        return self.device(name)

    def save(self) -> bool:
        return self.access.save_settings()
