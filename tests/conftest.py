"""Shared pytest fixtures for xliffkit tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from lxml import etree

from xliffkit.models import Bundle, Entry, File, Header

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def fixture_text(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


def fixture_element(name: str) -> etree._Element:
    """Parse a fixture and return its root element."""
    return etree.fromstring(fixture_text(name).encode("utf-8"))


@pytest.fixture
def infoplist_path() -> Path:
    return FIXTURES_DIR / "infoplist-strings.xliff"


@pytest.fixture
def third_party_path() -> Path:
    return FIXTURES_DIR / "third-party.xliff"


@pytest.fixture
def malformed_path() -> Path:
    return FIXTURES_DIR / "malformed.xliff"


@pytest.fixture
def infoplist_bundle(infoplist_path: Path) -> Bundle:
    return Bundle.from_path(infoplist_path)


@pytest.fixture
def sample_bundle() -> Bundle:
    """A small hand-built bundle (no file I/O)."""
    strings = File(
        original="Resources/en.lproj/InfoPlist.strings",
        source_language="en",
        target_language="fr",
    )
    strings.add_header(Header("tool", {"tool-id": "com.apple.dt.xcode", "tool-name": "Xcode"}))
    strings.add_entry(Entry(id="CFBundleDisplayName", source="Woo", target="Woof", note="Bundle display name"))
    strings.add_entry(Entry(id="CFBundleName", source="Woo", target="Woof", xml_space="preserve"))

    web = File(original="example.com/foo/bar/baz", source_language="en", target_language="fr")
    web.add_entry(Entry(id="title", source="Welcome", target="Bienvenue"))

    bundle = Bundle()
    bundle.add_file(strings)
    bundle.add_file(web)
    return bundle
