"""Replica Settings - file-backed settings store for the meter tool suite.

This package provides:
    - Anchored navigation over hierarchical XML settings files
    - Typed string, bool, int, float and list accessors with zero defaults
    - Reversible obfuscation of security codes stored in those files
    - Encrypted-at-rest settings documents with the same accessor contract
    - Settings classes for colors, security codes, display formatting,
      meter change-out, replica export and system-wide options

Package Structure:
    errors: ErrorKind and the exceptions raised by the store
    config: Storage, codec and encryption configuration, default directories
    core: Document engine, cursor, typed accessors and obfuscation codec
    settings: Settings classes built on the core accessors

Quick Start::

    from replica_settings import SettingsAccess, encode_string, decode_string

    access = SettingsAccess.open("Security Codes.xml", "Security")
    access.set_string(("SENTINEL", "Primary"), encode_string("ABC1234"))
    access.save_settings()

Settings files:
    - Default directory per registry category, e.g.
      %PROGRAMDATA%/Itron/Replica/SystemSettings.xml
    - Log file: replica_settings.log in the directory given to setup_logging
"""

from .core.access import EncryptedSettingsAccess, SettingsAccess
from .core.codec import ObfuscationCodec, decode_string, encode_string
from .errors import (
    ErrorKind,
    IndexOutOfRangeError,
    KeyExhaustedError,
    MalformedEncodingError,
    SettingsError,
    SettingsIOError,
)

__version__ = "1.0.0"
__app_name__ = "Replica Settings"

__all__ = [
    "SettingsAccess",
    "EncryptedSettingsAccess",
    "ObfuscationCodec",
    "encode_string",
    "decode_string",
    "ErrorKind",
    "SettingsError",
    "MalformedEncodingError",
    "KeyExhaustedError",
    "IndexOutOfRangeError",
    "SettingsIOError",
]
