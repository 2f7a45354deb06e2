"""Core data models for cargo_license.

This module defines the data structures passed through the report pipeline:
the per-package record built from ``cargo metadata`` output, the merged
per-package entry used by the text reports, and license groups.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

NOT_AVAILABLE = "N/A"


def normalize_license(license_string: Optional[str]) -> Optional[str]:
    """Normalize a license string as reported by a package manifest.

    Legacy ``/`` separators and ``OR`` are both treated as alternatives.
    The alternatives are trimmed, de-duplicated, sorted and joined with
    ``" OR "``, so "MIT/Apache-2.0" becomes "Apache-2.0 OR MIT".
    Expressions using parentheses or ``AND`` are returned trimmed but
    otherwise untouched.

    Args:
        license_string: License field from the manifest, or None.

    Returns:
        Normalized license string, or None if absent or blank.
    """
    if license_string is None:
        return None

    license_string = license_string.strip()
    if not license_string:
        return None

    if "(" in license_string or " AND " in license_string:
        return license_string

    alternatives = {
        part.strip()
        for chunk in license_string.split("/")
        for part in chunk.split(" OR ")
        if part.strip()
    }
    return " OR ".join(sorted(alternatives))


@dataclass(frozen=True)
class DependencyDetails:
    """Immutable license-relevant metadata for one resolved package.

    Frozen for hashability so duplicate records can be dropped.

    Attributes:
        name: Package name (e.g., "serde").
        version: Exact version string (e.g., "1.0.190").
        authors: Authors in manifest order, possibly empty.
        repository: Optional source repository URL.
        license: Optional normalized license expression.
        license_file: Optional path of a non-standard license file.
        description: Optional package description.
    """

    name: str
    version: str
    authors: tuple[str, ...] = ()
    repository: Optional[str] = None
    license: Optional[str] = None
    license_file: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_package(cls, package: dict[str, Any]) -> "DependencyDetails":
        """Build a record from a package object of ``cargo metadata``."""
        return cls(
            name=package["name"],
            version=package["version"],
            authors=tuple(package.get("authors") or ()),
            repository=package.get("repository"),
            license=normalize_license(package.get("license")),
            license_file=package.get("license_file"),
            description=package.get("description"),
        )

    @property
    def license_label(self) -> str:
        """Return the license, or "N/A" when the manifest declares none."""
        return self.license or NOT_AVAILABLE

    @property
    def joined_authors(self) -> Optional[str]:
        """Return authors joined with ``|``, or None if there are none."""
        return "|".join(self.authors) if self.authors else None

    def to_dict(self) -> dict[str, Optional[str]]:
        """Return the record as a dict with a stable key order."""
        return {
            "name": self.name,
            "version": self.version,
            "authors": self.joined_authors,
            "repository": self.repository,
            "license": self.license,
            "license_file": self.license_file,
            "description": self.description,
        }


@dataclass
class PackageEntry:
    """All resolved versions of one package that share a license.

    Attributes:
        name: Package name.
        versions: Versions in ascending precedence order.
        license: Optional license shared by every merged version.
        authors: Union of the authors of every merged version, in order seen.
        repository: First repository URL seen among the merged versions.
        description: First description seen among the merged versions.
        license_file: First license file seen among the merged versions.
    """

    name: str
    versions: list[str] = field(default_factory=list)
    license: Optional[str] = None
    authors: list[str] = field(default_factory=list)
    repository: Optional[str] = None
    description: Optional[str] = None
    license_file: Optional[str] = None

    @property
    def license_label(self) -> str:
        return self.license or NOT_AVAILABLE

    @property
    def version_list(self) -> str:
        return ", ".join(self.versions)

    @property
    def authors_label(self) -> str:
        return "|".join(self.authors) if self.authors else NOT_AVAILABLE


@dataclass
class LicenseGroup:
    """Package entries sharing an identical license string.

    Attributes:
        license: License string, or "N/A" for packages without one.
        packages: Entries sorted by package name.
    """

    license: str
    packages: list[PackageEntry] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.packages)

    @property
    def names(self) -> list[str]:
        return [entry.name for entry in self.packages]

    @property
    def authors(self) -> list[str]:
        """Return the sorted, distinct author labels of the group."""
        return sorted({entry.authors_label for entry in self.packages})


@dataclass(frozen=True)
class GetDependenciesOpt:
    """Flags controlling which part of the dependency graph is reported.

    Attributes:
        root_only: Report only the root package(s).
        direct_deps_only: Report the root package(s) and their direct dependencies.
        avoid_dev_deps: Do not follow development dependency edges.
        avoid_build_deps: Do not follow build dependency edges.
    """

    root_only: bool = False
    direct_deps_only: bool = False
    avoid_dev_deps: bool = False
    avoid_build_deps: bool = False
