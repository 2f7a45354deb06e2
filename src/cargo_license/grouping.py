"""Grouping of dependency records for the text reports.

Records sharing a package name and license are merged into a single
PackageEntry listing every resolved version; entries are then grouped by
license for the bundled report.
"""

from cargo_license.models import (
    NOT_AVAILABLE,
    DependencyDetails,
    LicenseGroup,
    PackageEntry,
)
from cargo_license.versions import sort_versions


def group_by_package(dependencies: list[DependencyDetails]) -> list[PackageEntry]:
    """Merge records with the same name and license into package entries.

    Args:
        dependencies: Filtered dependency records.

    Returns:
        Entries sorted by package name, then license. Each entry lists its
        versions in ascending precedence order.
    """
    entries: dict[tuple[str, str], PackageEntry] = {}

    for dependency in dependencies:
        key = (dependency.name, dependency.license_label)
        entry = entries.get(key)
        if entry is None:
            entry = PackageEntry(name=dependency.name, license=dependency.license)
            entries[key] = entry

        entry.versions.append(dependency.version)
        for author in dependency.authors:
            if author not in entry.authors:
                entry.authors.append(author)
        if entry.repository is None:
            entry.repository = dependency.repository
        if entry.description is None:
            entry.description = dependency.description
        if entry.license_file is None:
            entry.license_file = dependency.license_file

    for entry in entries.values():
        entry.versions = sort_versions(entry.versions)

    return sorted(
        entries.values(),
        key=lambda e: (e.name.lower(), e.name, e.license_label),
    )


def group_by_license(dependencies: list[DependencyDetails]) -> list[LicenseGroup]:
    """Group package entries by their license string.

    Packages without a license land in the "N/A" group.

    Args:
        dependencies: Filtered dependency records.

    Returns:
        Groups sorted by license string, each with entries sorted by name.
    """
    groups: dict[str, LicenseGroup] = {}

    for entry in group_by_package(dependencies):
        license_label = entry.license or NOT_AVAILABLE
        group = groups.setdefault(license_label, LicenseGroup(license=license_label))
        group.packages.append(entry)

    return [groups[license_label] for license_label in sorted(groups)]
