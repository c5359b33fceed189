"""Read and write XLIFF 1.2 translation bundles."""

from xliffkit.errors import (
    InvalidAttributeError,
    InvalidNodeTypeError,
    MalformedInputError,
    MissingAttributeError,
    MissingChildError,
    MissingInputError,
    WrongRootElementError,
    XliffError,
)
from xliffkit.models import Bundle, Entry, File, Header
from xliffkit.xliff_io import read_xliff, write_xliff

__version__ = "0.1.0"

__all__ = [
    "Bundle",
    "Entry",
    "File",
    "Header",
    "InvalidAttributeError",
    "InvalidNodeTypeError",
    "MalformedInputError",
    "MissingAttributeError",
    "MissingChildError",
    "MissingInputError",
    "WrongRootElementError",
    "XliffError",
    "read_xliff",
    "write_xliff",
]
