"""XLIFF 1.2 file reading and writing.

Uses lxml for the XML tree.  Parsing never resolves entities or touches
the network.  Writes are atomic: the document goes to a temp file next
to the target and is then swapped in.
"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path

from lxml import etree

from xliffkit.models import Bundle
from xliffkit.nodes import DEFAULT_INDENT

logger = logging.getLogger(__name__)

PARSER_OPTIONS = {
    "resolve_entities": False,
    "no_network": True,
    "huge_tree": False,
}

# ── Parsing ─────────────────────────────────────────────────────


def make_parser() -> etree.XMLParser:
    """Build a fresh hardened XMLParser."""
    return etree.XMLParser(**PARSER_OPTIONS)


def parse_document(path: str | Path) -> etree._ElementTree:
    """Parse the XML file at *path*.

    Raises:
        OSError: The file cannot be read.
        etree.XMLSyntaxError: On malformed XML.
    """
    path = Path(path)
    logger.debug("Parsing %s", path)
    return etree.parse(str(path), make_parser())


def parse_document_string(text: str | bytes) -> etree._ElementTree:
    """Parse XML held in memory.

    ``str`` input is encoded as UTF-8 first, since lxml refuses unicode
    strings that carry an encoding declaration.
    """
    data = text.encode("utf-8") if isinstance(text, str) else text
    return etree.fromstring(data, make_parser()).getroottree()


def read_xliff(path: str | Path) -> Bundle:
    """Parse an XLIFF file into a Bundle whose ``origin`` is *path*."""
    return Bundle.from_path(path)


# ── Writing ─────────────────────────────────────────────────────


def _replace_file(path: Path, data: bytes, backup: bool) -> None:
    """Swap *data* into *path* via a sibling temp file.

    With *backup*, an existing *path* is first copied to ``<path>.bak``.
    The temp file never outlives a failed write.
    """
    fd, tmp_name = tempfile.mkstemp(dir=str(path.parent), suffix=".xliff.tmp")
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        if backup and path.exists():
            shutil.copy2(path, path.with_suffix(path.suffix + ".bak"))
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


def write_xliff(
    bundle: Bundle,
    path: str | Path | None = None,
    *,
    backup: bool = True,
    indent: str = DEFAULT_INDENT,
) -> Path:
    """Write *bundle* to an XLIFF file atomically and return the path.

    *path* defaults to ``bundle.origin``.  When *backup* is true and the
    target exists, a ``.bak`` copy is kept.  The bundle is not modified.
    """
    if path is None:
        if bundle.origin is None:
            raise ValueError("No path given and the bundle has no origin")
        path = bundle.origin

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    _replace_file(path, (bundle.to_text(indent=indent) + "\n").encode("utf-8"), backup)

    logger.info("Wrote %d file(s) to %s", len(bundle.files), path)
    return path
