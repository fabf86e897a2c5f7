"""Display formatting per quantity type"""

from enum import Enum, IntEnum
from typing import Optional

from .base import resolve_settings_path, root_node_for
from ..config.schema import StorageConfig
from ..core.access import SettingsAccess
from ..core.document import PathLike


class DisplayUnit(IntEnum):
    """Unit scaling of displayed values"""
    UNIT = 0
    KILO = 1
    MEGA = 2


class DisplayType(Enum):
    """Display types, valued by their section names"""
    ENERGY = "Energy"
    DEMAND = "Demand"
    CUMM_DEMAND = "CummDemand"
    VOLTS = "Volts"
    AMPS = "Amps"
    THD = "THD"
    POWER_FACTOR = "PowerFactor"


class DisplayData:
    """Formatting block of one display type"""

    XML_NODE_TOTAL_DIGITS = "TotalDigits"
    XML_NODE_DECIMAL_DIGITS = "DecimalDigits"
    XML_NODE_DISPLAY_UNITS = "DisplayUnits"
    XML_NODE_LEADING_ZEROS = "LeadingZeros"
    XML_NODE_DISPLAY_ANNUNCIATOR = "DisplayAnnunciator"
    XML_NODE_FLOATING_DECIMAL = "FloatingDecimal"

    def __init__(self, access: SettingsAccess, display_type: DisplayType):
        self.access = access
        self.display_type = display_type

    def _node(self, name: str) -> tuple[str, str]:
        return (self.display_type.value, name)

    @property
    def total_digits(self) -> int:
        return self.access.get_int(self._node(self.XML_NODE_TOTAL_DIGITS))

    @total_digits.setter
    def total_digits(self, value: int) -> None:
        self.access.set_int(self._node(self.XML_NODE_TOTAL_DIGITS), value)

    @property
    def decimal_digits(self) -> int:
        return self.access.get_int(self._node(self.XML_NODE_DECIMAL_DIGITS))

    @decimal_digits.setter
    def decimal_digits(self, value: int) -> None:
        self.access.set_int(self._node(self.XML_NODE_DECIMAL_DIGITS), value)

    @property
    def display_units(self) -> DisplayUnit:
        stored = self.access.get_int(self._node(self.XML_NODE_DISPLAY_UNITS))
        try:
            return DisplayUnit(stored)
        except ValueError:
            return DisplayUnit.UNIT

    @display_units.setter
    def display_units(self, value: DisplayUnit) -> None:
        self.access.set_int(self._node(self.XML_NODE_DISPLAY_UNITS), int(value))

    @property
    def leading_zeros(self) -> bool:
        return self.access.get_bool(self._node(self.XML_NODE_LEADING_ZEROS))

    @leading_zeros.setter
    def leading_zeros(self, value: bool) -> None:
        self.access.set_bool(self._node(self.XML_NODE_LEADING_ZEROS), value)

    @property
    def display_annunciator(self) -> bool:
        return self.access.get_bool(self._node(self.XML_NODE_DISPLAY_ANNUNCIATOR))

    @display_annunciator.setter
    def display_annunciator(self, value: bool) -> None:
        self.access.set_bool(self._node(self.XML_NODE_DISPLAY_ANNUNCIATOR), value)

    @property
    def floating_decimal(self) -> bool:
        return self.access.get_bool(self._node(self.XML_NODE_FLOATING_DECIMAL))

    @floating_decimal.setter
    def floating_decimal(self, value: bool) -> None:
        self.access.set_bool(self._node(self.XML_NODE_FLOATING_DECIMAL), value)


class DisplaySettings:
    """Display formatting for every display type, in one file."""

    BASE_FILE_NAME = "DisplayOptions"
    MAIN_NODE = "Display"

    def __init__(
        self,
        file_path: Optional[PathLike] = None,
        storage: Optional[StorageConfig] = None,
    ):
        path = resolve_settings_path(self.BASE_FILE_NAME, file_path, storage)
        self.access = SettingsAccess.open(path, self.MAIN_NODE, root_node_for(storage))
        self._blocks = {
            display_type: DisplayData(self.access, display_type)
            for display_type in DisplayType
        }

    def __getitem__(self, display_type: DisplayType) -> DisplayData:
        return self._blocks[display_type]

    def save(self) -> bool:
        return self.access.save_settings()
