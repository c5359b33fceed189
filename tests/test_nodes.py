"""Tests for the lxml node helpers."""

from __future__ import annotations

import pytest
from lxml import etree

from xliffkit.nodes import (
    XML_NS,
    element_children,
    find_child,
    local_name,
    node_kind,
    qualify_attribute,
    unqualify_attribute,
)


class TestNodeKind:
    @pytest.mark.parametrize(
        ("node", "kind"),
        [
            (etree.Element("file"), "element"),
            (etree.Comment("c"), "comment"),
            (etree.ProcessingInstruction("pi", "x"), "processing instruction"),
            (etree.Entity("amp"), "entity"),
            ("text", "text"),
            (3.5, "float"),
        ],
    )
    def test_kinds(self, node, kind: str):
        assert node_kind(node) == kind


class TestTreeHelpers:
    def test_children_skip_comments(self):
        root = etree.fromstring("<body><!-- c --><trans-unit/><?pi x?><group/></body>")
        assert [local_name(c) for c in element_children(root)] == ["trans-unit", "group"]

    def test_find_child_ignores_namespace(self):
        root = etree.fromstring('<file xmlns="urn:oasis:names:tc:xliff:document:1.2"><body/></file>')
        assert local_name(find_child(root, "body")) == "body"
        assert find_child(root, "header") is None

    def test_attribute_qualification(self):
        assert qualify_attribute("xml:space") == f"{{{XML_NS}}}space"
        assert qualify_attribute("id") == "id"
        assert unqualify_attribute(f"{{{XML_NS}}}space") == "xml:space"
        assert unqualify_attribute("{urn:other}x") == "{urn:other}x"
