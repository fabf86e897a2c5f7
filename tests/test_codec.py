"""Unit tests for ObfuscationCodec."""

from __future__ import annotations

import string

import pytest

from replica_settings.config.schema import DEFAULT_CODEC_KEY, CodecConfig
from replica_settings.core.codec import ObfuscationCodec, decode_string, encode_string
from replica_settings.errors import (
    ErrorKind,
    KeyExhaustedError,
    MalformedEncodingError,
)


@pytest.fixture
def codec() -> ObfuscationCodec:
    return ObfuscationCodec()


@pytest.mark.parametrize(
    "plain_text",
    ["", "A", "ABC1234", "0000", "p@ss word!", "\x00\xff", "x" * len(DEFAULT_CODEC_KEY)],
)
def test_decode_reverses_encode(codec: ObfuscationCodec, plain_text: str):
    """Decoding an encoded string returns the original string."""

    assert codec.decode(codec.encode(plain_text)) == plain_text


def test_encode_empty_string(codec: ObfuscationCodec):
    """The empty string encodes to the empty string."""

    assert codec.encode("") == ""
    assert codec.decode("") == ""


def test_encode_output_is_uppercase_hex(codec: ObfuscationCodec):
    """Encoded text is even-length uppercase hex, two digits per character."""

    encoded = codec.encode("Security1")

    assert len(encoded) == 2 * len("Security1")
    assert set(encoded) <= set("0123456789ABCDEF")


def test_encode_is_xor_with_key(codec: ObfuscationCodec):
    """Each character is XORed with the key byte at the same position."""

    # 'A' (0x41) ^ 'R' (0x52) == 0x13
    assert codec.encode("A") == "13"


def test_encode_with_custom_key():
    """The key comes from the injected config."""

    codec = ObfuscationCodec(CodecConfig(key=b"\x00\x01"))

    assert codec.encode("AB") == "4143"
    assert codec.decode("4143") == "AB"


def test_encode_does_not_leak_plain_text(codec: ObfuscationCodec):
    """The encoded form does not contain the clear text."""

    assert "ABC1234" not in codec.encode("ABC1234")


def test_decode_accepts_lowercase_hex(codec: ObfuscationCodec):
    """Lowercase hex digits decode the same as uppercase."""

    encoded = codec.encode("key")

    assert codec.decode(encoded.lower()) == "key"


def test_decode_odd_length_raises(codec: ObfuscationCodec):
    """Odd-length input is malformed, not truncated."""

    with pytest.raises(MalformedEncodingError) as exc_info:
        codec.decode("131")

    assert exc_info.value.kind is ErrorKind.MALFORMED_ENCODING


@pytest.mark.parametrize("encoded", ["1G", "zz", "13 4", "+1", "1_"])
def test_decode_non_hex_raises(codec: ObfuscationCodec, encoded: str):
    """Any non-hex character is malformed."""

    with pytest.raises(MalformedEncodingError):
        codec.decode(encoded)


def test_encode_longer_than_key_raises(codec: ObfuscationCodec):
    """Plain text longer than the key is rejected."""

    with pytest.raises(KeyExhaustedError) as exc_info:
        codec.encode("x" * (codec.max_length + 1))

    assert exc_info.value.kind is ErrorKind.KEY_EXHAUSTED


def test_decode_longer_than_key_raises(codec: ObfuscationCodec):
    """Encoded text covering more characters than the key is rejected."""

    with pytest.raises(KeyExhaustedError):
        codec.decode("00" * (codec.max_length + 1))


def test_encode_rejects_wide_characters(codec: ObfuscationCodec):
    """Characters that do not fit in two hex digits cannot be encoded."""

    with pytest.raises(MalformedEncodingError):
        codec.encode("€")


def test_errors_are_value_errors(codec: ObfuscationCodec):
    """Codec errors can be caught as ValueError."""

    with pytest.raises(ValueError):
        codec.decode("XYZ")


def test_empty_key_rejected():
    """A codec config needs at least one key byte."""

    with pytest.raises(ValueError):
        CodecConfig(key=b"")


def test_module_helpers_match_codec():
    """encode_string and decode_string use the default config."""

    text = string.ascii_letters[:20]

    assert encode_string(text) == ObfuscationCodec().encode(text)
    assert decode_string(encode_string(text)) == text
