"""Settings document stored encrypted at rest"""

from pathlib import Path
from typing import Optional

from .document import PathLike, SettingsDocument
from ..config.schema import DEFAULT_ROOT_NODE, EncryptionConfig
from ..config.security import decrypt_document, encrypt_document, get_cipher


class EncryptedSettingsDocument(SettingsDocument):
    """A SettingsDocument whose file holds a Fernet token of the XML.

    Only the bytes on disk differ; the tree, anchor and navigation behave
    exactly like the plain document.
    """

    def __init__(
        self,
        file_path: PathLike,
        main_node: str = "",
        root_node: str = DEFAULT_ROOT_NODE,
        encryption: Optional[EncryptionConfig] = None,
    ):
        self.cipher = get_cipher(encryption or EncryptionConfig())
        super().__init__(file_path, main_node, root_node)

    def _read_bytes(self, path: Path) -> bytes:
        token = super()._read_bytes(path)
        return decrypt_document(self.cipher, token, str(path))

    def _write_bytes(self, path: Path, data: bytes) -> None:
        super()._write_bytes(path, encrypt_document(self.cipher, data))
