"""Exceptions raised while decoding XLIFF documents.

Every decoder failure derives from :class:`MalformedInputError`, which in
turn is a ``ValueError`` so existing ``except ValueError`` call sites keep
catching structural problems.  XML syntax errors are not wrapped: lxml's
``etree.XMLSyntaxError`` propagates as-is.
"""

from __future__ import annotations


class XliffError(ValueError):
    """Base class for all xliffkit errors."""


class MalformedInputError(XliffError):
    """The input does not have the shape of an XLIFF 1.2 document."""


class MissingInputError(MalformedInputError):
    """The document or node handed to a decoder is ``None``."""


class InvalidNodeTypeError(MalformedInputError):
    """A decoder received something other than an XML element."""

    def __init__(self, context: str, actual: str) -> None:
        super().__init__(f"Invalid {context} XML - must be an element, got `{actual}`")
        self.context = context
        self.actual = actual


class WrongRootElementError(MalformedInputError):
    """A decoder received an element with an unexpected tag name."""

    def __init__(self, context: str, expected: str, actual: str | None = None) -> None:
        super().__init__(f"Invalid {context} - the root node must be <{expected}>")
        self.context = context
        self.expected = expected
        self.actual = actual


class MissingChildError(MalformedInputError):
    """A required child element is absent."""

    def __init__(self, context: str, name: str) -> None:
        super().__init__(f"Invalid {context} XML - missing required <{name}> element")
        self.context = context
        self.name = name


class MissingAttributeError(MalformedInputError):
    """A required attribute is absent."""

    def __init__(self, context: str, name: str) -> None:
        super().__init__(f"Invalid {context} XML - missing required `{name}` attribute")
        self.context = context
        self.name = name


class InvalidAttributeError(MalformedInputError):
    """An attribute carries a value outside its allowed set."""

    def __init__(self, context: str, name: str, value: str) -> None:
        super().__init__(f"Invalid {context} XML - unsupported `{name}` value {value!r}")
        self.context = context
        self.name = name
        self.value = value
