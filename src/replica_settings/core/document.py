"""Settings document - load/save the XML tree behind a settings file"""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional, Union

from ..config.schema import DEFAULT_ROOT_NODE
from ..errors import SettingsIOError
from ..logging_config import get_logger

logger = get_logger("document")

PathLike = Union[str, Path]


def find_child(parent: ET.Element, name: str) -> Optional[ET.Element]:
    """Return the first direct child of parent with the given tag."""
    for child in parent:
        if child.tag == name:
            return child
    return None


class SettingsDocument:
    """In-memory XML tree of one settings file.

    The document element is the root node (``PCPRO98`` unless configured
    otherwise). The main node under it is the anchor that all relative
    navigation starts from. A missing file, a file with a different document
    element, or a missing main node all yield a freshly created root and
    anchor.
    """

    def __init__(
        self,
        file_path: PathLike,
        main_node: str = "",
        root_node: str = DEFAULT_ROOT_NODE,
    ):
        self.file_path = Path(file_path)
        self.main_node = main_node
        self.root_node = root_node
        self.root: ET.Element = ET.Element(root_node)
        self.anchor: ET.Element = self.root
        self.load()

    def load(self) -> None:
        """Load the document from its file path.

        Raises:
            SettingsIOError: If the file exists but cannot be read or parsed
        """
        root = None
        if self.file_path.exists():
            logger.debug(f"Loading settings from {self.file_path}")
            root = self._parse(self._read_bytes(self.file_path), self.file_path)
            if root.tag != self.root_node:
                logger.warning(
                    f"{self.file_path} has root <{root.tag}>, expected <{self.root_node}>; starting fresh"
                )
                root = None

        self._process_nodes(root)

    def save(self, file_path: Optional[PathLike] = None) -> bool:
        """Write the document to disk.

        Args:
            file_path: Target path, the load path if None or empty

        Returns:
            True if the written file reads back with the expected root node

        Raises:
            SettingsIOError: If the document cannot be serialized or the file
                cannot be written. Nothing is written in the first case.
        """
        target = Path(file_path) if file_path else self.file_path
        logger.debug(f"Saving settings to {target}")

        data = self.serialize()
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Cannot create directory for {target}: {e}")
            raise SettingsIOError(f"Cannot create directory for {target}") from e
        self._write_bytes(target, data)

        try:
            written = self._parse(self._read_bytes(target), target)
        except SettingsIOError as e:
            logger.warning(f"Saved settings did not read back: {e}")
            return False
        return written.tag == self.root_node

    def serialize(self) -> bytes:
        """Render the document as indented UTF-8 XML.

        Only whitespace between elements is touched; leaf text is written
        as stored.

        Raises:
            SettingsIOError: If a stored value cannot be represented in XML
        """
        ET.indent(self.root, space="  ")
        data = ET.tostring(self.root, encoding="utf-8", xml_declaration=True)
        # ElementTree does not reject control characters, so check the result
        self._parse(data, self.file_path)
        return data

    def _read_bytes(self, path: Path) -> bytes:
        try:
            return path.read_bytes()
        except OSError as e:
            logger.error(f"Cannot read {path}: {e}")
            raise SettingsIOError(f"Cannot read settings file {path}") from e

    def _write_bytes(self, path: Path, data: bytes) -> None:
        try:
            path.write_bytes(data)
        except OSError as e:
            logger.error(f"Cannot write {path}: {e}")
            raise SettingsIOError(f"Cannot write settings file {path}") from e

    @staticmethod
    def _parse(data: bytes, source: Path) -> ET.Element:
        try:
            return ET.fromstring(data)
        except ET.ParseError as e:
            logger.error(f"Malformed settings file {source}: {e}")
            raise SettingsIOError(f"Malformed settings file {source}") from e

    def _process_nodes(self, root: Optional[ET.Element]) -> None:
        """Install the root and anchor, creating whichever is missing."""
        if root is None:
            root = ET.Element(self.root_node)
        self.root = root

        if not self.main_node:
            self.anchor = root
            return

        anchor = find_child(root, self.main_node)
        if anchor is None:
            logger.debug(f"Creating anchor <{self.main_node}> in {self.file_path}")
            anchor = ET.SubElement(root, self.main_node)
        self.anchor = anchor
