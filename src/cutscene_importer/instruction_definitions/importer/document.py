"""Generic XML node tree for instruction definition documents.

ElementTree is used instead of a dict-based reader because child order across
different tag names is significant (parameters map to argument slots, and
option/list rules keep their last nested rule).
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path

from cutscene_importer.instruction_definitions.errors import DocumentReadError


@dataclass(frozen=True)
class Element:
    """One XML element: its name, text content, attributes and ordered children."""

    name: str
    inner_text: str = ""
    attributes: dict[str, str] = field(default_factory=dict)
    children: tuple[Element, ...] = ()

    def find_child(self, name: str) -> Element | None:
        """Return the first direct child with the given name, or None."""
        for child in self.children:
            if child.name == name:
                return child
        return None

    def get_child(self, name: str) -> Element:
        child = self.find_child(name)
        if child is None:
            raise KeyError(f"Element '{self.name}' has no child '{name}'")
        return child

    def get_attribute(self, name: str) -> str:
        try:
            return self.attributes[name]
        except KeyError:
            raise KeyError(f"Element '{self.name}' has no attribute '{name}'") from None

    @classmethod
    def from_etree(cls, root: ET.Element) -> Element:
        """Convert an ElementTree node and its descendants, children before parents.

        Uses an explicit stack, so nesting depth is limited by memory only.
        """
        built: dict[int, Element] = {}
        stack = [(root, False)]
        while stack:
            node, children_built = stack.pop()
            if not children_built:
                stack.append((node, True))
                stack.extend((child, False) for child in node)
                continue

            children = tuple(built.pop(id(child)) for child in node)
            inner_text = (node.text or "") + "".join(
                element.inner_text + (child.tail or "") for element, child in zip(children, node)
            )
            built[id(node)] = cls(
                name=node.tag,
                inner_text=inner_text,
                attributes=dict(node.attrib),
                children=children,
            )
        return built[id(root)]


def parse_document(text: str | bytes, file_path: str | Path | None = None) -> Element:
    """Parse XML text and return its root element."""
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise DocumentReadError(f"Could not parse XML: {e}", file_path) from e
    return Element.from_etree(root)


def load_document(file_path: str | Path) -> Element:
    """Read an XML file and return its root element."""
    try:
        with open(file_path, "rb") as f:
            text = f.read()
    except OSError as e:
        raise DocumentReadError(f"Could not read file: {e}", file_path) from e
    return parse_document(text, file_path)
