"""Configuration data models"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# Default obfuscation key; deployments that need another key pass their own CodecConfig
DEFAULT_CODEC_KEY = b"Rp1c@S3cur1tyC0d3sK3y!#Mtr0bfu5c"

DEFAULT_ROOT_NODE = "PCPRO98"


@dataclass(frozen=True)
class CodecConfig:
    """Key material for the security code obfuscation codec"""
    key: bytes = DEFAULT_CODEC_KEY

    def __post_init__(self):
        if not self.key:
            raise ValueError("Obfuscation key must not be empty")


@dataclass(frozen=True)
class StorageConfig:
    """Where settings files live when no explicit path is given"""
    root_directory: Path
    root_node: str = DEFAULT_ROOT_NODE

    def file_path(self, base_file_name: str) -> Path:
        """Build the default path of a settings file.

        Args:
            base_file_name: File name without extension (e.g. "SystemSettings")

        Returns:
            ``<root_directory>/<base_file_name>.xml``
        """
        return Path(self.root_directory) / f"{base_file_name}.xml"


@dataclass(frozen=True)
class EncryptionConfig:
    """Key material for encrypted settings documents.

    ``key`` is a url-safe base64 Fernet key. When None, a key derived from
    the current user and machine is used.
    """
    key: Optional[bytes] = None
