"""Base interface for dependency metadata providers.

Providers return the raw ``cargo metadata`` JSON document (format version 1)
describing the packages of a workspace and its resolved dependency graph.
"""

from abc import ABC, abstractmethod
from typing import Any


class MetadataError(Exception):
    """Raised when the dependency metadata cannot be obtained.

    Covers a bad manifest path, a missing or failing ``cargo`` executable,
    unreadable files and malformed metadata documents. The underlying
    exception, if any, is chained as ``__cause__``.
    """


class BaseMetadataProvider(ABC):
    """Abstract base class for metadata providers."""

    @abstractmethod
    def fetch(self) -> dict[str, Any]:
        """Obtain the metadata document.

        Returns:
            The decoded ``cargo metadata`` JSON object.

        Raises:
            MetadataError: If the metadata cannot be obtained or decoded.
        """
        ...

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Return a human-readable description of where metadata comes from."""
        ...
