"""Field tool logon options"""

from ..core.access import SettingsAccess
from ..core.codec import ObfuscationCodec


class FieldProLogonOptions:
    """Communication and logon options of the handheld field tool.

    Lives in a ``LogonOptions`` group under whichever anchor the owning
    settings file uses.
    """

    XML_NODE_GROUP = "LogonOptions"
    XML_NODE_PORT_NUMBER = "PortNumber"
    XML_NODE_OPTICAL_PROBE = "OpticalProbe"
    XML_NODE_DTR = "DTR"
    XML_NODE_RTS = "RTS"
    XML_NODE_MAX_BAUD_RATE = "MaxBaudRate"
    XML_NODE_PASSWORD = "Password"
    XML_NODE_LOGOFF_AFTER_INIT = "LogoffAfterInitialization"

    DEFAULT_MAX_BAUD_RATE = 9600

    def __init__(self, access: SettingsAccess, codec: ObfuscationCodec):
        self.access = access
        self.codec = codec

    def _node(self, name: str) -> tuple[str, str]:
        return (self.XML_NODE_GROUP, name)

    @property
    def port_number(self) -> str:
        return self.access.get_string(self._node(self.XML_NODE_PORT_NUMBER))

    @port_number.setter
    def port_number(self, value: str) -> None:
        self.access.set_string(self._node(self.XML_NODE_PORT_NUMBER), value)

    @property
    def optical_probe(self) -> str:
        return self.access.get_string(self._node(self.XML_NODE_OPTICAL_PROBE))

    @optical_probe.setter
    def optical_probe(self, value: str) -> None:
        self.access.set_string(self._node(self.XML_NODE_OPTICAL_PROBE), value)

    @property
    def dtr(self) -> bool:
        return self.access.get_bool(self._node(self.XML_NODE_DTR))

    @dtr.setter
    def dtr(self, value: bool) -> None:
        self.access.set_bool(self._node(self.XML_NODE_DTR), value)

    @property
    def rts(self) -> bool:
        return self.access.get_bool(self._node(self.XML_NODE_RTS))

    @rts.setter
    def rts(self, value: bool) -> None:
        self.access.set_bool(self._node(self.XML_NODE_RTS), value)

    @property
    def max_baud_rate(self) -> int:
        """Highest baud rate to negotiate; 9600 when unset."""
        baud_rate = self.access.get_int(self._node(self.XML_NODE_MAX_BAUD_RATE))
        return baud_rate or self.DEFAULT_MAX_BAUD_RATE

    @max_baud_rate.setter
    def max_baud_rate(self, value: int) -> None:
        self.access.set_int(self._node(self.XML_NODE_MAX_BAUD_RATE), value)

    @property
    def password(self) -> str:
        return self.codec.decode(self.access.get_string(self._node(self.XML_NODE_PASSWORD)))

    @password.setter
    def password(self, value: str) -> None:
        self.access.set_string(self._node(self.XML_NODE_PASSWORD), self.codec.encode(value))

    @property
    def logoff_after_initialization(self) -> bool:
        return self.access.get_bool(self._node(self.XML_NODE_LOGOFF_AFTER_INIT))

    @logoff_after_initialization.setter
    def logoff_after_initialization(self, value: bool) -> None:
        self.access.set_bool(self._node(self.XML_NODE_LOGOFF_AFTER_INIT), value)
