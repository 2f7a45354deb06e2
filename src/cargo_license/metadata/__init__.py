"""Dependency metadata providers.

This module provides the sources of the ``cargo metadata`` document the
report is built from.
"""

from pathlib import Path
from typing import Optional

from cargo_license.metadata.base import BaseMetadataProvider, MetadataError
from cargo_license.metadata.cargo import CargoMetadataProvider
from cargo_license.metadata.file import JsonFileMetadataProvider

__all__ = [
    "BaseMetadataProvider",
    "CargoMetadataProvider",
    "JsonFileMetadataProvider",
    "MetadataError",
    "get_provider",
]


def get_provider(
    metadata_file: Optional[Path] = None,
    **cargo_options,
) -> BaseMetadataProvider:
    """Get the metadata provider for the given options.

    Args:
        metadata_file: Optional saved metadata document. When given, cargo
            is not invoked and ``cargo_options`` are ignored.
        **cargo_options: Keyword arguments for CargoMetadataProvider.

    Returns:
        Provider instance ready to fetch.
    """
    if metadata_file is not None:
        return JsonFileMetadataProvider(metadata_file)
    return CargoMetadataProvider(**cargo_options)
