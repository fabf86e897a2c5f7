"""Unit tests for DeviceSecurityCodes."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from replica_settings.config.schema import CodecConfig, StorageConfig
from replica_settings.core.codec import ObfuscationCodec
from replica_settings.errors import KeyExhaustedError, MalformedEncodingError
from replica_settings.settings.security_codes import (
    DEVICE_SECURITY_LEVELS,
    DeviceSecurityCodes,
    SecurityLevel,
)


@pytest.fixture
def codes(storage: StorageConfig) -> DeviceSecurityCodes:
    return DeviceSecurityCodes(storage=storage)


def test_default_device_table(codes: DeviceSecurityCodes):
    """Every known device type is available."""

    assert set(codes.devices) == set(DEVICE_SECURITY_LEVELS)
    assert codes["SENTINEL"].supports(SecurityLevel.LIMITED)
    assert not codes["VECTRON"].supports(SecurityLevel.LIMITED)
    assert codes["VECTRON"].supports(SecurityLevel.TERTIARY)
    assert not codes["DATASTAR"].supports(SecurityLevel.TERTIARY)


def test_unknown_device_raises(codes: DeviceSecurityCodes):
    """Looking up an unknown device type is a KeyError."""

    with pytest.raises(KeyError):
        codes.device("TOASTER")


def test_unsupported_level_raises(codes: DeviceSecurityCodes):
    """A device only has the code levels it supports."""

    datastar = codes["DATASTAR"]

    with pytest.raises(KeyError):
        datastar.tertiary
    with pytest.raises(KeyError):
        datastar.set_code(SecurityLevel.LIMITED, "1234")
    assert not codes.access.node_exists(["DATASTAR", "Limited"])


def test_unset_code_is_empty(codes: DeviceSecurityCodes):
    """A code that was never written reads as the empty string."""

    assert codes["CENTRON"].primary == ""
    assert codes["CENTRON"].has_code(SecurityLevel.SECONDARY) is False


def test_reading_unset_code_does_not_create_it(codes: DeviceSecurityCodes):
    """Reading a level that was never written leaves has_code False."""

    centron = codes["CENTRON"]

    assert centron.primary == ""
    assert centron.has_code(SecurityLevel.PRIMARY) is False
    assert not codes.access.node_exists("CENTRON")

    centron.primary = "1234"

    assert centron.has_code(SecurityLevel.PRIMARY) is True


def test_codes_persist_obfuscated(codes: DeviceSecurityCodes, storage: StorageConfig):
    """Codes are stored obfuscated and decoded on read."""

    sentinel = codes["SENTINEL"]
    sentinel.primary = "ABC1234"
    sentinel.limited = "LIM"
    assert codes.save() is True

    file_path = storage.file_path("Security Codes")
    stored = ET.parse(file_path).getroot().findtext("Security/SENTINEL/Primary/Value")
    assert stored == ObfuscationCodec().encode("ABC1234")
    assert "ABC1234" not in file_path.read_text(encoding="utf-8")

    reloaded = DeviceSecurityCodes(storage=storage)
    assert reloaded["SENTINEL"].primary == "ABC1234"
    assert reloaded["SENTINEL"].limited == "LIM"
    assert reloaded["SENTINEL"].has_code(SecurityLevel.PRIMARY) is True


def test_devices_are_independent(codes: DeviceSecurityCodes):
    """Each device has its own section."""

    codes["CENTRON"].secondary = "one"
    codes["Q1000"].secondary = "two"

    assert codes["CENTRON"].secondary == "one"
    assert codes["Q1000"].secondary == "two"


def test_code_longer_than_key_rejected(codes: DeviceSecurityCodes):
    """Codes longer than the obfuscation key cannot be stored."""

    with pytest.raises(KeyExhaustedError):
        codes["QUANTUM"].primary = "x" * 33


def test_corrupt_stored_code_raises(codes: DeviceSecurityCodes):
    """Stored text that is not hex is reported, not guessed at."""

    codes.access.set_string(["FULCRUM", "Primary"], "XYZ")

    with pytest.raises(MalformedEncodingError):
        codes["FULCRUM"].primary


def test_custom_codec_key(storage: StorageConfig):
    """The obfuscation key comes from the codec config."""

    codes = DeviceSecurityCodes(storage=storage, codec=CodecConfig(key=b"\x00" * 8))
    codes["CENTRON"].primary = "AB"

    assert codes.access.get_string(["CENTRON", "Primary"]) == "4142"


def test_custom_device_table(storage: StorageConfig):
    """Device types can be supplied as data."""

    codes = DeviceSecurityCodes(
        storage=storage,
        device_levels={"PROTOTYPE": (SecurityLevel.PRIMARY,)},
    )

    assert codes.devices == ["PROTOTYPE"]
    codes["PROTOTYPE"].primary = "1"
    assert codes["PROTOTYPE"].primary == "1"
