"""Unit tests for SystemSettings and FieldProLogonOptions."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from replica_settings.config.schema import StorageConfig
from replica_settings.errors import IndexOutOfRangeError
from replica_settings.settings.system_settings import SystemSettings


@pytest.fixture
def system(storage: StorageConfig) -> SystemSettings:
    return SystemSettings(storage=storage)


def test_defaults_for_unset_values(system: SystemSettings):
    """Unset numeric settings fall back to their documented defaults."""

    assert system.is_canadian is False
    assert system.zigbee_scan_limit == 4
    assert system.c1218_session_timeout == 30
    assert system.enable_c1218_session_timeout is False
    assert system.region_count == 0


def test_non_positive_limits_use_defaults(system: SystemSettings):
    """Zero or negative limits are treated as unset."""

    system.zigbee_scan_limit = 0
    system.c1218_session_timeout = -5

    assert system.zigbee_scan_limit == 4
    assert system.c1218_session_timeout == 30

    system.zigbee_scan_limit = 10
    system.c1218_session_timeout = 90

    assert system.zigbee_scan_limit == 10
    assert system.c1218_session_timeout == 90


def test_settings_persist(system: SystemSettings, storage: StorageConfig):
    """Values reload from the OpenWay system settings file."""

    system.is_canadian = True
    system.enable_c1218_session_timeout = True
    assert system.save() is True

    file_path = storage.file_path("OpenWaySystemSettings")
    root = ET.parse(file_path).getroot()
    assert root.findtext("OpenWaySystemSettings/IsCanadian/Value") == "1"

    reloaded = SystemSettings(storage=storage)
    assert reloaded.is_canadian is True
    assert reloaded.enable_c1218_session_timeout is True


def test_passwords_are_obfuscated(system: SystemSettings, storage: StorageConfig):
    """Passwords are stored encoded and read back in clear."""

    system.current_password = "secret"
    system.current_ics_password = "ics-pass"
    system.save()

    raw = storage.file_path("OpenWaySystemSettings").read_text(encoding="utf-8")
    assert "secret" not in raw
    assert "ics-pass" not in raw

    reloaded = SystemSettings(storage=storage)
    assert reloaded.current_password == "secret"
    assert reloaded.current_ics_password == "ics-pass"
    assert reloaded.previous_ics_password == ""


def test_change_password_keeps_previous(system: SystemSettings):
    """Changing the password moves the old one to previous."""

    system.current_password = "first"
    system.change_password("second")

    assert system.current_password == "second"
    assert system.previous_password == "first"


def test_regions_bounded_by_count(system: SystemSettings):
    """Region entries are only addressable below region_count."""

    with pytest.raises(IndexOutOfRangeError):
        system.get_region_name(0)

    system.region_count = 2
    system.set_region_name(1, "North")

    assert system.get_region_name(1) == "North"
    assert system.get_region_name(0) == ""
    with pytest.raises(IndexOutOfRangeError):
        system.set_region_password(2, "x")


def test_negative_region_count_rejected(system: SystemSettings):
    """A region count cannot be negative."""

    with pytest.raises(ValueError):
        system.region_count = -1


def test_find_region_password(system: SystemSettings, storage: StorageConfig):
    """Region passwords are obfuscated and found by region name."""

    system.regions_enabled = True
    system.region_count = 2
    system.set_region_name(0, "North")
    system.set_region_password(0, "n0rth")
    system.set_region_name(1, "South")
    system.set_region_password(1, "s0uth")
    system.save()

    raw = storage.file_path("OpenWaySystemSettings").read_text(encoding="utf-8")
    assert "s0uth" not in raw

    reloaded = SystemSettings(storage=storage)
    assert reloaded.regions_enabled is True
    assert reloaded.find_region_password("South") == "s0uth"
    assert reloaded.find_region_password("West") is None


class TestFieldProLogonOptions:
    """Tests for the LogonOptions group."""

    def test_unset_baud_rate_defaults_to_9600(self, system: SystemSettings):
        """A stored baud rate of zero reads as 9600."""

        system.logon_options.max_baud_rate = 0

        assert system.logon_options.max_baud_rate == 9600
        assert system.access.get_int(["LogonOptions", "MaxBaudRate"]) == 0

    def test_options_round_trip(self, system: SystemSettings, storage: StorageConfig):
        """Logon options persist with the owning file."""

        options = system.logon_options
        options.port_number = "COM3"
        options.optical_probe = "Generic"
        options.dtr = True
        options.rts = False
        options.max_baud_rate = 28800
        options.logoff_after_initialization = True
        options.password = "fieldpw"
        system.save()

        reloaded = SystemSettings(storage=storage).logon_options
        assert reloaded.port_number == "COM3"
        assert reloaded.optical_probe == "Generic"
        assert reloaded.dtr is True
        assert reloaded.rts is False
        assert reloaded.max_baud_rate == 28800
        assert reloaded.logoff_after_initialization is True
        assert reloaded.password == "fieldpw"

    def test_options_nested_under_anchor(self, system: SystemSettings, storage: StorageConfig):
        """The group sits directly under the file's anchor."""

        system.logon_options.port_number = "COM1"
        system.save()

        root = ET.parse(storage.file_path("OpenWaySystemSettings")).getroot()
        assert root.findtext("OpenWaySystemSettings/LogonOptions/PortNumber/Value") == "COM1"
