"""Tests for package and license grouping."""

from collections import Counter

import pytest

from cargo_license.filters import get_dependencies
from cargo_license.grouping import group_by_license, group_by_package
from cargo_license.models import DependencyDetails, GetDependenciesOpt


@pytest.fixture
def dependencies(metadata) -> list[DependencyDetails]:
    """Return the full filtered dependency list of the fixture crate."""
    return get_dependencies(metadata, GetDependenciesOpt())


class TestGroupByPackage:
    """Test suite for group_by_package."""

    def test_versions_with_same_license_are_merged(self, dependencies) -> None:
        """Test that two versions of itoa collapse into one entry."""
        entries = [e for e in group_by_package(dependencies) if e.name == "itoa"]

        assert len(entries) == 1
        assert entries[0].versions == ["0.4.8", "1.0.9"]
        assert entries[0].version_list == "0.4.8, 1.0.9"

    def test_versions_with_different_licenses_stay_separate(self) -> None:
        """Test that a license change between versions yields two entries."""
        entries = group_by_package(
            [
                DependencyDetails(name="foo", version="2.0.0", license="MIT"),
                DependencyDetails(name="foo", version="1.0.0", license="GPL-3.0-only"),
            ]
        )

        assert [(e.name, e.license, e.versions) for e in entries] == [
            ("foo", "GPL-3.0-only", ["1.0.0"]),
            ("foo", "MIT", ["2.0.0"]),
        ]

    def test_versions_sorted_by_precedence(self) -> None:
        """Test that merged versions follow semver precedence, not string order."""
        entries = group_by_package(
            [
                DependencyDetails(name="foo", version="0.10.0", license="MIT"),
                DependencyDetails(name="foo", version="0.9.0", license="MIT"),
                DependencyDetails(name="foo", version="0.10.0-rc.1", license="MIT"),
            ]
        )

        assert entries[0].versions == ["0.9.0", "0.10.0-rc.1", "0.10.0"]

    def test_authors_are_merged_in_order(self) -> None:
        """Test that authors of merged versions are combined without repeats."""
        entries = group_by_package(
            [
                DependencyDetails(name="foo", version="1.0.0", authors=("A", "B")),
                DependencyDetails(name="foo", version="2.0.0", authors=("B", "C")),
            ]
        )

        assert entries[0].authors == ["A", "B", "C"]

    def test_description_and_license_file_kept(self, dependencies) -> None:
        """Test that merged entries carry the description and license file."""
        entries = {e.name: e for e in group_by_package(dependencies)}

        assert entries["serde_derive"].license_file == "LICENSE-CUSTOM"
        assert entries["serde_derive"].description is None
        assert entries["itoa"].description == "Fast integer primitive to string conversion"
        assert entries["itoa"].license_file is None

    def test_first_non_empty_description_wins(self) -> None:
        """Test that a missing description is filled from a later version."""
        entries = group_by_package(
            [
                DependencyDetails(name="foo", version="1.0.0"),
                DependencyDetails(
                    name="foo",
                    version="2.0.0",
                    description="Foo v2",
                    license_file="LICENSE-FOO",
                ),
                DependencyDetails(name="foo", version="3.0.0", description="Foo v3"),
            ]
        )

        assert entries[0].description == "Foo v2"
        assert entries[0].license_file == "LICENSE-FOO"

    def test_one_entry_per_name_and_license(self, dependencies) -> None:
        """Test that entries are sorted by name and unique per package."""
        names = [e.name for e in group_by_package(dependencies)]
        assert names == sorted(set(names))


class TestGroupByLicense:
    """Test suite for group_by_license."""

    def test_groups_sorted_by_license(self, dependencies) -> None:
        """Test the license groups of the fixture crate."""
        groups = group_by_license(dependencies)

        assert [(g.license, g.names) for g in groups] == [
            (
                "Apache-2.0 OR MIT",
                ["anyhow", "cc", "diff", "itoa", "libc", "pretty_assertions", "serde"],
            ),
            ("MIT", ["demo"]),
            ("N/A", ["serde_derive"]),
        ]

    def test_every_record_in_exactly_one_group(self, dependencies) -> None:
        """Test that grouping neither drops nor duplicates records."""
        grouped = Counter(
            (entry.name, version)
            for group in group_by_license(dependencies)
            for entry in group.packages
            for version in entry.versions
        )

        assert grouped == Counter((d.name, d.version) for d in dependencies)

    def test_missing_license_goes_to_na_group(self) -> None:
        """Test that unlicensed packages are reported, not dropped."""
        groups = group_by_license([DependencyDetails(name="foo", version="1.0.0")])

        assert len(groups) == 1
        assert groups[0].license == "N/A"
        assert groups[0].names == ["foo"]

    def test_empty_input(self) -> None:
        """Test that no records produce no groups."""
        assert group_by_license([]) == []
