"""Builders of contents and stores used across tests."""

from datetime import UTC, datetime
from pathlib import Path

import pytest

from bad_contents_lister.models import Content, DecoratedContent, Parent, Store, Stores

STORE_ID = "2800000180000100"
STORE_NAME = "filestore_01"


def make_content(**overrides: object) -> Content:
    """Build a content with sensible defaults."""
    values: dict[str, object] = {
        "store": STORE_ID,
        "ticket": 0x00017A2B,
        "parent": "0900000180001234",
        "rendition": False,
        "format": "pdf",
        "page": 0,
        "extension": None,
        "size": 10,
        "modified": datetime(2024, 3, 1, 12, 30, 45, 123000, tzinfo=UTC),
    }
    values.update(overrides)
    return Content(**values)  # type: ignore[arg-type]


def decorate(content: Content, **overrides: object) -> DecoratedContent:
    """Join a content with its parent."""
    values: dict[str, object] = {
        "id": content.parent,
        "name": "report.pdf",
        "type": "dm_document",
        "current": True,
    }
    values.update(overrides)
    return DecoratedContent(content=content, parent=Parent(**values))  # type: ignore[arg-type]


@pytest.fixture
def store_dir(tmp_path: Path) -> Path:
    """Create the base directory of the test store's location."""
    base = tmp_path / STORE_NAME
    base.mkdir()
    return base


@pytest.fixture
def stores(store_dir: Path) -> Stores:
    """Get a registry holding a single store without extensions."""
    return Stores([Store.create(STORE_ID, STORE_NAME, store_dir, False)])
