"""Key handling for encrypted settings documents.

Uses Fernet symmetric encryption. When no key is configured, the key is
derived from the Windows username, machine name, and a static salt. This
keeps encrypted settings readable on the same machine by the same user
without storing the key next to the file.
"""

import base64
import hashlib
import os

from cryptography.fernet import Fernet, InvalidToken

from .schema import EncryptionConfig
from ..errors import SettingsIOError
from ..logging_config import get_logger

logger = get_logger("security")

# Static salt - not secret, just adds entropy
_SALT = b"ReplicaSettings_v1_salt_2004"


def derive_machine_key() -> bytes:
    """Generate a machine-specific encryption key.

    Derives a key from the current username and computer name.

    Returns:
        url-safe base64 encoded 32-byte key suitable for Fernet
    """
    username = os.environ.get("USERNAME", os.environ.get("USER", "default_user"))
    computername = os.environ.get("COMPUTERNAME", "default_machine")

    key_material = f"{username}:{computername}".encode('utf-8')

    key = hashlib.pbkdf2_hmac(
        'sha256',
        key_material,
        _SALT,
        iterations=100000,
        dklen=32
    )

    return base64.urlsafe_b64encode(key)


def generate_key() -> bytes:
    """Create a new random Fernet key."""
    return Fernet.generate_key()


def get_cipher(config: EncryptionConfig) -> Fernet:
    """Build the Fernet cipher for an encryption config.

    Raises:
        ValueError: If the configured key is not a valid Fernet key
    """
    key = config.key if config.key is not None else derive_machine_key()
    return Fernet(key)


def encrypt_document(cipher: Fernet, data: bytes) -> bytes:
    """Encrypt serialized document bytes."""
    return cipher.encrypt(data)


def decrypt_document(cipher: Fernet, token: bytes, source: str = "") -> bytes:
    """Decrypt document bytes.

    Args:
        cipher: The Fernet cipher
        token: Encrypted file contents
        source: Path used in error messages

    Returns:
        The decrypted document bytes

    Raises:
        SettingsIOError: If the token is corrupt or the key is wrong
    """
    try:
        return cipher.decrypt(token)
    except InvalidToken as e:
        logger.error(f"Failed to decrypt settings document {source}")
        raise SettingsIOError(f"Cannot decrypt settings document {source}") from e
