"""Configuration module.

Submodules:
    schema: CodecConfig, StorageConfig and EncryptionConfig data classes
    paths: SettingsPaths with default directories per registry category
    security: Fernet key handling for encrypted settings documents
"""

from .paths import SettingsPaths
from .schema import CodecConfig, EncryptionConfig, StorageConfig

__all__ = [
    "CodecConfig",
    "EncryptionConfig",
    "StorageConfig",
    "SettingsPaths",
]
