"""Document and node helpers on top of lxml."""

from typing import Any, Dict, Optional

import lxml.etree as ET


class XmlDocument:
    """Target document handed to writers.

    lxml has no free-standing document object, so this carries the version and
    encoding pair and acts as the element factory for the nodes a writer builds.
    """

    def __init__(self, version: str = "1.0", encoding: str = "UTF-8"):
        self.version = version
        self.encoding = encoding

    def create_element(self, tag: str, attrib: Optional[Dict[str, str]] = None,
                       nsmap: Optional[Dict[Optional[str], str]] = None) -> ET._Element:
        return ET.Element(tag, attrib=attrib or {}, nsmap=nsmap)

    def to_string(self, node: ET._Element, xml_declaration: bool = False) -> str:
        if not xml_declaration:
            return ET.tostring(node, encoding="unicode", with_tail=False)
        body = ET.tostring(node, encoding=self.encoding, xml_declaration=False, with_tail=False).decode(self.encoding)
        return f'<?xml version="{self.version}" encoding="{self.encoding}"?>\n{body}'

    def __repr__(self) -> str:
        return f"XmlDocument(version={self.version!r}, encoding={self.encoding!r})"


def create_document(version: str = "1.0", encoding: str = "UTF-8") -> XmlDocument:
    return XmlDocument(version, encoding)


def is_node(obj: Any) -> bool:
    """True for lxml elements (the node type writers are expected to return)."""
    return ET.iselement(obj)
