"""Reversible obfuscation of security codes.

Security codes are XORed with a fixed key and written as uppercase hex so
they never sit in a settings file as clear text. This is obfuscation for
casual inspection only, not encryption.
"""

import string
from typing import Optional

from ..config.schema import CodecConfig
from ..errors import KeyExhaustedError, MalformedEncodingError
from ..logging_config import get_logger

logger = get_logger("codec")

_HEX_DIGITS = frozenset(string.hexdigits)


class ObfuscationCodec:
    """Encodes and decodes obfuscated security code strings."""

    def __init__(self, config: Optional[CodecConfig] = None):
        self.config = config or CodecConfig()

    @property
    def max_length(self) -> int:
        """Longest plaintext the key can cover."""
        return len(self.config.key)

    def encode(self, plain_text: str) -> str:
        """Obfuscate a string for storage.

        Args:
            plain_text: The clear text security code

        Returns:
            Uppercase hex string, two digits per character

        Raises:
            KeyExhaustedError: If the text is longer than the key
            MalformedEncodingError: If a character is outside U+0000-U+00FF
        """
        self._check_length(len(plain_text))

        try:
            code_units = plain_text.encode("latin-1")
        except UnicodeEncodeError as e:
            raise MalformedEncodingError(
                f"Character {plain_text[e.start]!r} cannot be obfuscated"
            ) from e

        return "".join(f"{unit:02X}" for unit in self._apply_key(code_units))

    def decode(self, encoded_text: str) -> str:
        """Recover the clear text of an obfuscated string.

        Args:
            encoded_text: Hex string produced by encode()

        Returns:
            The clear text security code

        Raises:
            MalformedEncodingError: If the text is odd-length or not hex
            KeyExhaustedError: If the text decodes past the end of the key
        """
        if len(encoded_text) % 2 != 0:
            raise MalformedEncodingError(
                f"Obfuscated text has odd length {len(encoded_text)}"
            )

        bad = [ch for ch in encoded_text if ch not in _HEX_DIGITS]
        if bad:
            raise MalformedEncodingError(f"Obfuscated text holds non-hex character {bad[0]!r}")

        self._check_length(len(encoded_text) // 2)

        code_units = bytes(
            int(encoded_text[index:index + 2], 16)
            for index in range(0, len(encoded_text), 2)
        )
        return self._apply_key(code_units).decode("latin-1")

    def _apply_key(self, code_units: bytes) -> bytes:
        # XOR is its own inverse, so encode and decode share this step
        key = self.config.key
        return bytes(unit ^ key[index] for index, unit in enumerate(code_units))

    def _check_length(self, length: int) -> None:
        if length > self.max_length:
            logger.debug(f"Rejecting {length} character code, key covers {self.max_length}")
            raise KeyExhaustedError(
                f"Text of {length} characters exceeds the {self.max_length} character key"
            )


def encode_string(plain_text: str, config: Optional[CodecConfig] = None) -> str:
    """Obfuscate a string with the given (or default) codec config."""
    return ObfuscationCodec(config).encode(plain_text)


def decode_string(encoded_text: str, config: Optional[CodecConfig] = None) -> str:
    """Recover an obfuscated string with the given (or default) codec config."""
    return ObfuscationCodec(config).decode(encoded_text)
