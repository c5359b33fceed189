"""Data models for XLIFF 1.2 documents.

A :class:`Bundle` holds :class:`File` objects; each file holds
:class:`Header` and :class:`Entry` objects.  Every model knows how to
build its own lxml element (``to_xml``) and how to decode itself from
one (``from_node``).  Decoding never recovers partially: the first
malformed node aborts the whole call with a
:class:`~xliffkit.errors.MalformedInputError`.
"""

from __future__ import annotations

import logging
import posixpath
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from lxml import etree

from xliffkit.errors import (
    InvalidAttributeError,
    InvalidNodeTypeError,
    MissingAttributeError,
    MissingChildError,
    MissingInputError,
    WrongRootElementError,
)
from xliffkit.nodes import (
    DEFAULT_INDENT,
    XLIFF_NS,
    XML_NS,
    XSI_NS,
    add_leaf_node,
    adopt_namespace,
    element_children,
    element_name,
    find_child,
    local_name,
    node_kind,
    qualify_attribute,
    serialize,
    text_content,
    unqualify_attribute,
)

logger = logging.getLogger(__name__)

XLIFF_VERSION = "1.2"
XLIFF_SCHEMA_LOCATION = (
    "urn:oasis:names:tc:xliff:document:1.2 "
    "http://docs.oasis-open.org/xliff/v1.2/os/xliff-core-1.2-strict.xsd"
)
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

DEFAULT_DATATYPE = "plaintext"
XML_SPACE_VALUES = ("default", "preserve")

_XML_SPACE = f"{{{XML_NS}}}space"


def _check_element(node: Any, context: str, missing: str) -> None:
    if node is None:
        raise MissingInputError(missing)
    kind = node_kind(node)
    if kind != "element":
        raise InvalidNodeTypeError(context, kind)


def _require_fields(obj: Any, *names: str) -> None:
    for name in names:
        value = getattr(obj, name)
        if value is None:
            raise TypeError(f"{type(obj).__name__}.{name} is required")
        setattr(obj, name, str(value))


def _required_attribute(node: etree._Element, name: str, context: str) -> str:
    value = node.get(qualify_attribute(name))
    if value is None:
        raise MissingAttributeError(context, name)
    return value


# ── Header ──────────────────────────────────────────────────────


@dataclass
class Header:
    """One child of a file's ``<header>`` block.

    Headers are heterogeneous: *element* names the tag (``tool``,
    ``phase-group``, ...) and *attributes* holds its attributes in
    document order.  Values are stored as strings.
    """

    element: str
    attributes: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.attributes = {str(k): str(v) for k, v in self.attributes.items()}

    def to_xml(self) -> etree._Element:
        node = etree.Element(self.element)
        for key, value in self.attributes.items():
            node.set(qualify_attribute(key), value)
        return node

    def to_text(self, *, indent: str = DEFAULT_INDENT) -> str:
        return serialize(self.to_xml(), indent).strip()

    @classmethod
    def from_node(cls, node: Any) -> Header:
        """Decode any element into a Header.

        Raises:
            MissingInputError: *node* is None.
            InvalidNodeTypeError: *node* is a comment, text, etc.
        """
        _check_element(node, "Header", "Header XML is nil")
        return cls(
            element=element_name(node),
            attributes={unqualify_attribute(k): v for k, v in node.attrib.items()},
        )


# ── Entry ───────────────────────────────────────────────────────


@dataclass
class Entry:
    """One ``<trans-unit>``: a source string and its translation.

    *note* is tri-state: None means no ``<note>`` element, ``""`` means an
    empty one.
    """

    id: str
    source: str
    target: str
    note: str | None = None
    xml_space: str = "default"

    def __post_init__(self) -> None:
        _require_fields(self, "id", "source", "target")
        if self.note is not None:
            self.note = str(self.note)
        if self.xml_space not in XML_SPACE_VALUES:
            raise ValueError(
                f"xml_space must be one of {XML_SPACE_VALUES}, got {self.xml_space!r}"
            )

    def to_xml(self) -> etree._Element:
        node = etree.Element("trans-unit")
        node.set("id", self.id)
        node.set(_XML_SPACE, self.xml_space)

        add_leaf_node(node, "source", self.source)
        add_leaf_node(node, "target", self.target)
        if self.note is not None:
            add_leaf_node(node, "note", self.note)

        return node

    def to_text(self, *, indent: str = DEFAULT_INDENT) -> str:
        return serialize(self.to_xml(), indent).strip()

    @classmethod
    def from_node(cls, node: Any) -> Entry:
        """Decode a ``<trans-unit>`` element.

        A present ``<note>`` always decodes to a string, even when empty.
        A missing ``xml:space`` decodes as ``"default"``.
        """
        cls.validate_node(node)

        source = find_child(node, "source")
        if source is None:
            raise MissingChildError("Entry", "source")
        target = find_child(node, "target")
        if target is None:
            raise MissingChildError("Entry", "target")
        note = find_child(node, "note")

        xml_space = node.get(_XML_SPACE, "default")
        if xml_space not in XML_SPACE_VALUES:
            raise InvalidAttributeError("Entry", "xml:space", xml_space)

        return cls(
            id=_required_attribute(node, "id", "Entry"),
            source=text_content(source),
            target=text_content(target),
            note=text_content(note) if note is not None else None,
            xml_space=xml_space,
        )

    @staticmethod
    def validate_node(node: Any) -> None:
        _check_element(node, "Entry", "Entry XML is nil")
        if local_name(node) != "trans-unit":
            raise WrongRootElementError("Entry XML", "trans-unit", local_name(node))


# ── File ────────────────────────────────────────────────────────


@dataclass
class File:
    """One ``<file>``: a translatable source file and its strings.

    *original* is an opaque identifier (a path or a URL-like string).
    """

    original: str
    source_language: str
    target_language: str
    datatype: str = DEFAULT_DATATYPE
    headers: list[Header] = field(default_factory=list)
    entries: list[Entry] = field(default_factory=list)

    def __post_init__(self) -> None:
        _require_fields(self, "original", "source_language", "target_language", "datatype")

    def add_header(self, header: Header) -> None:
        if not isinstance(header, Header):
            raise TypeError(f"Expected Header, got {type(header).__name__}")
        self.headers.append(header)

    def add_entry(self, entry: Entry) -> None:
        if not isinstance(entry, Entry):
            raise TypeError(f"Expected Entry, got {type(entry).__name__}")
        self.entries.append(entry)

    def to_xml(self) -> etree._Element:
        """Build the ``<file>`` element.

        ``<header>`` and ``<body>`` are only emitted when they have
        children; the header block always comes first.
        """
        node = etree.Element("file")
        node.set("original", self.original)
        node.set("source-language", self.source_language)
        node.set("target-language", self.target_language)
        node.set("datatype", self.datatype)

        if self.headers:
            header_block = etree.SubElement(node, "header")
            for header in self.headers:
                header_block.append(header.to_xml())

        if self.entries:
            body = etree.SubElement(node, "body")
            for entry in self.entries:
                body.append(entry.to_xml())

        return node

    def to_text(self, *, indent: str = DEFAULT_INDENT) -> str:
        return serialize(self.to_xml(), indent).strip()

    @classmethod
    def from_node(cls, node: Any) -> File:
        """Decode a ``<file>`` element with its headers and entries."""
        cls.validate_node(node)

        file = cls(
            original=_required_attribute(node, "original", "File"),
            source_language=_required_attribute(node, "source-language", "File"),
            target_language=_required_attribute(node, "target-language", "File"),
            datatype=node.get("datatype", DEFAULT_DATATYPE),
        )

        header_block = find_child(node, "header")
        if header_block is not None:
            for child in element_children(header_block):
                file.add_header(Header.from_node(child))

        body = find_child(node, "body")
        if body is not None:
            for child in element_children(body):
                file.add_entry(Entry.from_node(child))

        return file

    @staticmethod
    def validate_node(node: Any) -> None:
        _check_element(node, "File", "File XML is nil")
        if local_name(node) != "file":
            raise WrongRootElementError("File XML", "file", local_name(node))


# ── Bundle ──────────────────────────────────────────────────────


@dataclass
class Bundle:
    """A whole XLIFF document.

    *origin* records where the bundle was read from (or should be written
    to).  It is never part of the XML payload.
    """

    files: list[File] = field(default_factory=list)
    origin: str | None = None

    def add_file(self, file: File) -> None:
        if not isinstance(file, File):
            raise TypeError(f"Expected File, got {type(file).__name__}")
        self.files.append(file)

    def file_named(self, name: str) -> list[File]:
        """Return every file whose ``original`` ends in the segment *name*.

        Several files may share a basename, so the result is a list and
        may be empty.
        """
        return [f for f in self.files if posixpath.basename(f.original) == name]

    def to_xml(self) -> etree._ElementTree:
        """Build the document tree.

        The XLIFF 1.2 namespace, version and schema location are always
        set here, whatever the bundle was built from.
        """
        root = etree.Element(
            f"{{{XLIFF_NS}}}xliff",
            nsmap={None: XLIFF_NS, "xsi": XSI_NS},
        )
        root.set("version", XLIFF_VERSION)
        root.set(f"{{{XSI_NS}}}schemaLocation", XLIFF_SCHEMA_LOCATION)

        for file in self.files:
            root.append(file.to_xml())
        adopt_namespace(root, XLIFF_NS)

        logger.debug("Encoded bundle with %d file(s)", len(self.files))
        return etree.ElementTree(root)

    def to_text(self, *, indent: str = DEFAULT_INDENT) -> str:
        root = self.to_xml().getroot()
        body = serialize(root, indent)
        return f"{XML_DECLARATION}\n{body}".strip()

    @classmethod
    def from_document(cls, doc: Any) -> Bundle:
        """Decode a parsed document (an ElementTree or any element in it).

        Root children other than ``<file>`` are skipped.
        """
        if doc is None:
            raise MissingInputError("Bundle XML is nil")
        if isinstance(doc, etree._ElementTree):
            root = doc.getroot()
        elif isinstance(doc, etree._Element):
            root = doc.getroottree().getroot()
        else:
            raise InvalidNodeTypeError("Bundle", node_kind(doc))

        if root is None or local_name(root) != "xliff":
            raise WrongRootElementError(
                "XLIFF file", "xliff", local_name(root) if root is not None else None
            )

        bundle = cls()
        for child in element_children(root):
            if local_name(child) == "file":
                bundle.add_file(File.from_node(child))

        logger.debug("Decoded bundle with %d file(s)", len(bundle.files))
        return bundle

    @classmethod
    def from_string(cls, text: str | bytes) -> Bundle:
        from xliffkit.xliff_io import parse_document_string

        return cls.from_document(parse_document_string(text))

    @classmethod
    def from_path(cls, path: str | Path) -> Bundle:
        from xliffkit.xliff_io import parse_document

        bundle = cls.from_document(parse_document(path))
        bundle.origin = str(path)
        return bundle
