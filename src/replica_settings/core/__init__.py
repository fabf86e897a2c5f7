"""Core settings store.

Submodules:
    document: SettingsDocument, the XML tree behind one settings file
    encrypted: EncryptedSettingsDocument, the same tree encrypted on disk
    cursor: SettingsCursor for anchor-relative navigation and leaf values
    access: SettingsAccess and EncryptedSettingsAccess typed accessors
    codec: ObfuscationCodec for security codes
"""

from .access import EncryptedSettingsAccess, SettingsAccess
from .codec import ObfuscationCodec
from .cursor import SettingsCursor
from .document import SettingsDocument
from .encrypted import EncryptedSettingsDocument

__all__ = [
    "SettingsAccess",
    "EncryptedSettingsAccess",
    "ObfuscationCodec",
    "SettingsCursor",
    "SettingsDocument",
    "EncryptedSettingsDocument",
]
