"""XML parsing and navigation helpers.

Lookups return ``None`` instead of raising when a node is missing, so a chain
of them either lands on the wanted node or short-circuits to absent.
"""

from __future__ import annotations

from collections.abc import Iterator

from lxml import etree

from xmpdm.schema import RDF, qualify

_RDF_TAG = qualify(RDF.RDF)
_DESCRIPTION_TAG = qualify(RDF.DESCRIPTION)


def make_parser() -> etree.XMLParser:
    """Create a parser that never resolves entities or touches the network."""
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        huge_tree=False,
        remove_comments=True,
    )


def parse_xml(xml: str | bytes) -> etree._Element:
    """Parse an XML document and return its root element.

    Raises:
        lxml.etree.XMLSyntaxError: If the document is not well-formed
    """
    if isinstance(xml, str):
        # lxml rejects str input carrying an encoding declaration
        xml = xml.encode("utf-8")
    return etree.fromstring(xml, parser=make_parser())


def _element_children(element: etree._Element) -> list[etree._Element]:
    return [child for child in element if isinstance(child.tag, str)]


def _resource(element: etree._Element) -> etree._Element:
    """Unwrap a struct written as a property element holding one rdf:Description."""
    if element.tag == _RDF_TAG:
        return element
    children = _element_children(element)
    if len(children) == 1 and children[0].tag == _DESCRIPTION_TAG:
        return children[0]
    return element


class XMLNode:
    """Thin read-only view over an lxml element."""

    __slots__ = ("element",)

    def __init__(self, element: etree._Element):
        self.element = element

    def __repr__(self) -> str:
        return f"XMLNode({self.element.tag!r})"

    @property
    def tag(self) -> str:
        """Return the element tag in ``{uri}local`` notation."""
        return self.element.tag

    @property
    def value(self) -> str | None:
        """Return the stripped text content, None if empty."""
        text = self.element.text
        if text is None:
            return None
        text = text.strip()
        return text or None

    def is_a(self, name: str) -> bool:
        """Check if this node has the given qualified name."""
        return self.element.tag == qualify(name)

    def child(self, name: str) -> XMLNode | None:
        """Return the first child element with the given qualified name."""
        for found in self.element.iterchildren(qualify(name)):
            return XMLNode(_resource(found))
        return None

    def children(self, name: str) -> list[XMLNode]:
        """Return every child element with the given qualified name."""
        return [XMLNode(_resource(found)) for found in self.element.iterchildren(qualify(name))]

    def descend(self, *names: str) -> XMLNode | None:
        """Follow a path of child names, stopping at the first missing step."""
        node: XMLNode | None = self
        for name in names:
            if node is None:
                return None
            node = node.child(name)
        return node

    def field(self, name: str) -> str | None:
        """Return a simple property value.

        XMP allows simple properties either as child elements or as
        attributes of the enclosing element; the child element wins.
        """
        node = self.child(name)
        if node is not None:
            return node.value
        attribute = self.element.get(qualify(name))
        if attribute is None:
            return None
        return attribute.strip() or None

    def iter_all(self, name: str) -> Iterator[XMLNode]:
        """Iterate over descendants with the given name in document order."""
        tag = qualify(name)
        for found in self.element.iter(tag):
            if found is not self.element:
                yield XMLNode(found)

    def find_all(self, name: str) -> list[XMLNode]:
        """Return all descendants with the given name in document order."""
        return list(self.iter_all(name))


def find_description(root: etree._Element) -> XMLNode | None:
    """Locate the first rdf:Description of an XMP document.

    The rdf:RDF element is either the root itself or a direct child of an
    x:xmpmeta (or other) wrapper.
    """
    node = XMLNode(root)
    if not node.is_a(RDF.RDF):
        node = node.child(RDF.RDF)
        if node is None:
            return None
    return node.child(RDF.DESCRIPTION)
