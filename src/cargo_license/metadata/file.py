"""Metadata provider for saved ``cargo metadata`` output.

Lets a report be produced from a document captured earlier with
``cargo metadata --format-version 1 > metadata.json``, without a Rust
toolchain at hand.
"""

import json
from pathlib import Path
from typing import Any

from cargo_license.metadata.base import BaseMetadataProvider, MetadataError


class JsonFileMetadataProvider(BaseMetadataProvider):
    """Provider that reads a metadata document from a JSON file.

    Attributes:
        source_path: Path to the saved metadata document.
    """

    def __init__(self, source_path: Path) -> None:
        self.source_path = source_path

    @property
    def source_name(self) -> str:
        return str(self.source_path)

    def fetch(self) -> dict[str, Any]:
        """Read and decode the metadata file.

        Raises:
            MetadataError: If the file is missing, unreadable or is not a
                JSON object.
        """
        if not self.source_path.exists():
            raise MetadataError(f"Metadata file not found: {self.source_path}")

        try:
            with open(self.source_path, "r", encoding="utf-8") as f:
                metadata = json.load(f)
        except json.JSONDecodeError as e:
            raise MetadataError(f"Invalid JSON in {self.source_path}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise MetadataError(f"Could not read {self.source_path}") from e

        if not isinstance(metadata, dict):
            raise MetadataError(f"Expected a JSON object in {self.source_path}")

        return metadata
