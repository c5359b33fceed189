"""Small helpers over lxml nodes.

lxml hands back several node flavours from the same tree: elements,
comments, processing instructions and entities all subclass
``etree._Element``, while text arrives as plain ``str``.  Decoders only
accept real elements, so everything here goes through :func:`node_kind`.
"""

from __future__ import annotations

from typing import Iterator

from lxml import etree

XLIFF_NS = "urn:oasis:names:tc:xliff:document:1.2"
XSI_NS = "http://www.w3.org/2001/XMLSchema-instance"
XML_NS = "http://www.w3.org/XML/1998/namespace"

DEFAULT_INDENT = "  "

_XML_PREFIX = "xml:"


def node_kind(node: object) -> str:
    """Classify *node* as ``element``, ``text``, ``comment``, etc.

    Anything that is not an lxml node or a string is reported by its
    Python type name.
    """
    if isinstance(node, etree._Comment):
        return "comment"
    if isinstance(node, etree._ProcessingInstruction):
        return "processing instruction"
    if isinstance(node, etree._Entity):
        return "entity"
    if isinstance(node, etree._Element):
        return "element"
    if isinstance(node, str):
        return "text"
    return type(node).__name__


def is_element(node: object) -> bool:
    return node_kind(node) == "element"


def local_name(element: etree._Element) -> str:
    """Return the tag name of *element* without its namespace."""
    return etree.QName(element).localname


def element_name(element: etree._Element) -> str:
    """Tag name as the model stores it.

    Elements in no namespace or in the XLIFF namespace use their bare
    name; foreign-namespace elements keep the ``{ns}tag`` form.
    """
    qname = etree.QName(element)
    if qname.namespace in (None, XLIFF_NS):
        return qname.localname
    return qname.text


def element_children(element: etree._Element) -> Iterator[etree._Element]:
    """Yield the element children of *element*, skipping comments and PIs."""
    for child in element:
        if is_element(child):
            yield child


def find_child(element: etree._Element, name: str) -> etree._Element | None:
    """Return the first element child with local name *name*, or None."""
    for child in element_children(element):
        if local_name(child) == name:
            return child
    return None


def text_content(element: etree._Element) -> str:
    """Concatenate every text node below *element*.

    Inline markup such as ``<g>`` or ``<x/>`` is flattened into its text.
    """
    return "".join(element.itertext())


def add_leaf_node(parent: etree._Element, name: str, content: str) -> etree._Element:
    """Append ``<name>content</name>`` to *parent* and return it."""
    node = etree.SubElement(parent, name)
    node.text = content
    return node


def qualify_attribute(name: str) -> str:
    """Map ``xml:foo`` to lxml's ``{XML_NS}foo`` spelling."""
    if name.startswith(_XML_PREFIX):
        return f"{{{XML_NS}}}{name[len(_XML_PREFIX):]}"
    return name


def unqualify_attribute(name: str) -> str:
    """Inverse of :func:`qualify_attribute`."""
    prefix = f"{{{XML_NS}}}"
    if name.startswith(prefix):
        return _XML_PREFIX + name[len(prefix):]
    return name


def adopt_namespace(root: etree._Element, namespace: str) -> None:
    """Move every un-namespaced element below *root* into *namespace*."""
    for element in root.iter(etree.Element):
        if not element.tag.startswith("{"):
            element.tag = f"{{{namespace}}}{element.tag}"


def serialize(element: etree._Element, indent: str) -> str:
    """Indent *element* in place and return its text form."""
    if not isinstance(indent, str) or indent.strip():
        raise ValueError(f"indent must be whitespace, got {indent!r}")
    etree.indent(element, space=indent)
    return etree.tostring(element, encoding="unicode")
