"""Exception types raised by the settings store.

Every error carries an ``ErrorKind`` so callers can branch on the category
without caring which built-in exception it also derives from.
"""

from enum import Enum


class ErrorKind(Enum):
    """Categories of settings store failures"""
    MALFORMED_ENCODING = "malformed_encoding"
    KEY_EXHAUSTED = "key_exhausted"
    INDEX_OUT_OF_RANGE = "index_out_of_range"
    IO_FAILURE = "io_failure"


class SettingsError(Exception):
    """Base class for all settings store errors."""

    kind: ErrorKind

    def __init__(self, message: str, kind: ErrorKind):
        super().__init__(message)
        self.kind = kind


class MalformedEncodingError(SettingsError, ValueError):
    """Obfuscated text is odd-length, holds non-hex characters, or the
    plaintext holds characters that cannot be obfuscated."""

    def __init__(self, message: str):
        super().__init__(message, ErrorKind.MALFORMED_ENCODING)


class KeyExhaustedError(SettingsError, ValueError):
    """Text is longer than the obfuscation key."""

    def __init__(self, message: str):
        super().__init__(message, ErrorKind.KEY_EXHAUSTED)


class IndexOutOfRangeError(SettingsError, IndexError):
    """An indexed setting was addressed outside its declared bounds."""

    def __init__(self, message: str):
        super().__init__(message, ErrorKind.INDEX_OUT_OF_RANGE)


class SettingsIOError(SettingsError, OSError):
    """A settings document could not be read, decrypted, parsed or written."""

    def __init__(self, message: str):
        super().__init__(message, ErrorKind.IO_FAILURE)
