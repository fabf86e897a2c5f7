"""Navigation cursor over a settings document"""

import xml.etree.ElementTree as ET
from typing import Iterable, Optional

from .document import SettingsDocument, find_child

VALUE_NODE = "Value"
BOOL_TRUE = "1"
BOOL_FALSE = "0"


class SettingsCursor:
    """Current-node pointer into a SettingsDocument.

    Every accessor call starts with reset_to_anchor(), so no position
    survives from one call to the next. Not thread-safe; one cursor per
    document.
    """

    def __init__(self, document: SettingsDocument):
        self.document = document
        self.current: Optional[ET.Element] = document.anchor

    def reset_to_anchor(self) -> None:
        self.current = self.document.anchor

    def reset_to_root(self) -> None:
        self.current = self.document.root

    def select_child(self, name: str, create_if_missing: bool) -> bool:
        """Move to the named child of the current node.

        Args:
            name: Child node name
            create_if_missing: Append an empty child if none exists

        Returns:
            True if the cursor moved. On False the position is undefined and
            must not be navigated further.
        """
        if self.current is None or not name:
            return False

        child = find_child(self.current, name)
        if child is None:
            if not create_if_missing:
                self.current = None
                return False
            child = ET.SubElement(self.current, name)

        self.current = child
        return True

    def navigate(self, name: str) -> bool:
        """Select a child, creating it if absent."""
        return self.select_child(name, True)

    def probe(self, name: str) -> bool:
        """Select a child only if it already exists."""
        return self.select_child(name, False)

    def walk(self, path: Iterable[str], create_if_missing: bool) -> bool:
        """Select each node of a path in turn, stopping at the first miss."""
        for name in path:
            if not self.select_child(name, create_if_missing):
                return False
        return True

    # Leaf values

    @property
    def value(self) -> str:
        if self.current is None:
            return ""
        value_node = find_child(self.current, VALUE_NODE)
        if value_node is None or value_node.text is None:
            return ""
        return value_node.text

    @value.setter
    def value(self, text: str) -> None:
        if self.current is None:
            return
        value_node = find_child(self.current, VALUE_NODE)
        if value_node is None:
            value_node = ET.SubElement(self.current, VALUE_NODE)
        value_node.text = text

    @property
    def bool_value(self) -> bool:
        return self.value == BOOL_TRUE

    @bool_value.setter
    def bool_value(self, flag: bool) -> None:
        self.value = BOOL_TRUE if flag else BOOL_FALSE

    @property
    def int_value(self) -> int:
        try:
            return int(self.value.strip(), 10)
        except ValueError:
            return 0

    @int_value.setter
    def int_value(self, number: int) -> None:
        self.value = str(int(number))

    @property
    def float_value(self) -> float:
        try:
            return float(self.value.strip())
        except ValueError:
            return 0.0

    @float_value.setter
    def float_value(self, number: float) -> None:
        self.value = repr(float(number))

    @property
    def values(self) -> list[str]:
        if self.current is None:
            return []
        return [node.text or "" for node in self.current if node.tag == VALUE_NODE]

    @values.setter
    def values(self, texts: Iterable[str]) -> None:
        if self.current is None:
            return
        for node in [node for node in self.current if node.tag == VALUE_NODE]:
            self.current.remove(node)
        for text in texts:
            ET.SubElement(self.current, VALUE_NODE).text = text
