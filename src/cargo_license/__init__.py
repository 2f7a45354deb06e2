"""Cargo License - License report for the dependencies of a Rust crate.

This package reads the dependency graph reported by ``cargo metadata`` and
summarizes the license of each dependency as text, a table, JSON or TSV.
"""

__version__ = "0.1.0"
__author__ = "cargo-license contributors"

from cargo_license.models import (
    DependencyDetails,
    GetDependenciesOpt,
    LicenseGroup,
    PackageEntry,
)

__all__ = [
    "__version__",
    "DependencyDetails",
    "GetDependenciesOpt",
    "LicenseGroup",
    "PackageEntry",
]
