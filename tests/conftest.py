"""Pytest configuration and fixtures."""

import copy
import json
from pathlib import Path
from typing import Any

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def metadata_path() -> Path:
    """Return path to a saved `cargo metadata` document.

    The root crate ``demo`` depends on anyhow and serde (normal), cc (build)
    and pretty_assertions (dev). Transitively it pulls in itoa twice
    (0.4.8 and 1.0.9), serde_derive (no license), libc and diff.
    windows-sys is present but unreachable.
    """
    return FIXTURES_DIR / "metadata.json"


@pytest.fixture(scope="session")
def _metadata_document(metadata_path: Path) -> dict[str, Any]:
    with open(metadata_path, "r", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def metadata(_metadata_document: dict[str, Any]) -> dict[str, Any]:
    """Return a fresh copy of the saved metadata document."""
    return copy.deepcopy(_metadata_document)
