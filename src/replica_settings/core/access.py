"""Typed get/set access to settings relative to a document's anchor"""

from typing import Optional, Sequence, Union

from .cursor import SettingsCursor
from .document import PathLike, SettingsDocument
from .encrypted import EncryptedSettingsDocument
from ..config.schema import DEFAULT_ROOT_NODE, EncryptionConfig

# A single node name, or the names walked in order from the anchor
NodePath = Union[str, Sequence[str]]


def _segments(node: NodePath) -> tuple[str, ...]:
    segments = (node,) if isinstance(node, str) else tuple(node)
    if not segments or not all(segments):
        raise ValueError(f"Invalid node path: {node!r}")
    return segments


class SettingsAccess:
    """Reads and writes typed leaf values under a document's anchor.

    Each call resets the cursor to the anchor, walks the node path
    (creating missing nodes), then reads or writes the leaf. Values that
    are missing or fail to parse come back as "", False, 0 or 0.0.
    """

    def __init__(self, document: SettingsDocument):
        self.document = document
        self._cursor = SettingsCursor(document)

    @classmethod
    def open(
        cls,
        file_path: PathLike,
        main_node: str = "",
        root_node: str = DEFAULT_ROOT_NODE,
    ) -> "SettingsAccess":
        """Load a settings file and wrap it.

        Args:
            file_path: Settings file, created on save if it does not exist
            main_node: Anchor section name, the root node if empty
            root_node: Document element name
        """
        return cls(SettingsDocument(file_path, main_node, root_node))

    @property
    def file_path(self):
        return self.document.file_path

    def save_settings(self, file_path: Optional[PathLike] = None) -> bool:
        """Save the document, to its load path unless another is given.

        Returns:
            Whether the written file reads back as a settings document
        """
        return self.document.save(file_path)

    def node_exists(self, node: NodePath) -> bool:
        """Check for a node under the anchor without creating it."""
        self._cursor.reset_to_anchor()
        return self._cursor.walk(_segments(node), create_if_missing=False)

    def _select(self, node: NodePath) -> SettingsCursor:
        self._cursor.reset_to_anchor()
        self._cursor.walk(_segments(node), create_if_missing=True)
        return self._cursor

    def get_string(self, node: NodePath) -> str:
        return self._select(node).value

    def set_string(self, node: NodePath, value: str) -> None:
        self._select(node).value = value

    def get_bool(self, node: NodePath) -> bool:
        return self._select(node).bool_value

    def set_bool(self, node: NodePath, value: bool) -> None:
        self._select(node).bool_value = value

    def get_int(self, node: NodePath) -> int:
        return self._select(node).int_value

    def set_int(self, node: NodePath, value: int) -> None:
        self._select(node).int_value = value

    def get_float(self, node: NodePath) -> float:
        return self._select(node).float_value

    def set_float(self, node: NodePath, value: float) -> None:
        self._select(node).float_value = value

    def get_string_list(self, node: NodePath) -> list[str]:
        return self._select(node).values

    def set_string_list(self, node: NodePath, values: Sequence[str]) -> None:
        self._select(node).values = values


class EncryptedSettingsAccess(SettingsAccess):
    """SettingsAccess over a document that is encrypted on disk.

    Accessor behaviour is identical to SettingsAccess; only the document
    engine differs.
    """

    def __init__(self, document: EncryptedSettingsDocument):
        super().__init__(document)

    @classmethod
    def open(
        cls,
        file_path: PathLike,
        main_node: str = "",
        root_node: str = DEFAULT_ROOT_NODE,
        encryption: Optional[EncryptionConfig] = None,
    ) -> "EncryptedSettingsAccess":
        """Load an encrypted settings file and wrap it.

        Raises:
            SettingsIOError: If the file cannot be decrypted with the key
        """
        return cls(EncryptedSettingsDocument(file_path, main_node, root_node, encryption))
