import pytest

from cargo_license.models import (
    DependencyDetails,
    LicenseGroup,
    PackageEntry,
    normalize_license,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("MIT", "MIT"),
        ("MIT OR Apache-2.0", "Apache-2.0 OR MIT"),
        ("MIT/Apache-2.0", "Apache-2.0 OR MIT"),
        (" Apache-2.0 / MIT ", "Apache-2.0 OR MIT"),
        ("MIT OR MIT/Apache-2.0", "Apache-2.0 OR MIT"),
        ("(MIT OR Apache-2.0) AND Unicode-DFS-2016", "(MIT OR Apache-2.0) AND Unicode-DFS-2016"),
        ("MIT AND BSD-3-Clause", "MIT AND BSD-3-Clause"),
        ("", None),
        ("   ", None),
        (None, None),
    ],
)
def test_normalize_license(raw, expected):
    """Test license alternatives are split, sorted and re-joined."""
    assert normalize_license(raw) == expected


def test_dependency_details_from_package():
    """Test that a cargo package object maps onto a record."""
    details = DependencyDetails.from_package(
        {
            "name": "cc",
            "version": "1.0.83",
            "id": "registry+https://github.com/rust-lang/crates.io-index#cc@1.0.83",
            "license": "MIT/Apache-2.0",
            "license_file": None,
            "authors": ["Alex Crichton <alex@alexcrichton.com>", "Someone Else"],
            "repository": "https://github.com/rust-lang/cc-rs",
            "description": "A build-time dependency",
        }
    )

    assert details.name == "cc"
    assert details.version == "1.0.83"
    assert details.license == "Apache-2.0 OR MIT"
    assert details.authors == ("Alex Crichton <alex@alexcrichton.com>", "Someone Else")
    assert details.joined_authors == "Alex Crichton <alex@alexcrichton.com>|Someone Else"


def test_dependency_details_without_license_or_authors():
    """Test that absent fields stay None and the label falls back to N/A."""
    details = DependencyDetails.from_package({"name": "x", "version": "0.1.0"})

    assert details.license is None
    assert details.license_label == "N/A"
    assert details.joined_authors is None
    assert details.to_dict()["license"] is None


def test_to_dict_key_order():
    """Test that serialized records always use the same key order."""
    details = DependencyDetails(name="a", version="1.0.0", license="MIT")
    assert list(details.to_dict()) == [
        "name",
        "version",
        "authors",
        "repository",
        "license",
        "license_file",
        "description",
    ]


def test_package_entry_labels():
    """Test the display helpers of a merged package entry."""
    entry = PackageEntry(name="itoa", versions=["0.4.8", "1.0.9"])

    assert entry.version_list == "0.4.8, 1.0.9"
    assert entry.license_label == "N/A"
    assert entry.authors_label == "N/A"


def test_license_group_authors_are_distinct_and_sorted():
    """Test that a group reports each author label once."""
    group = LicenseGroup(
        license="MIT",
        packages=[
            PackageEntry(name="b", authors=["Zed"]),
            PackageEntry(name="a", authors=["Amy", "Bob"]),
            PackageEntry(name="c", authors=["Zed"]),
            PackageEntry(name="d"),
        ],
    )

    assert group.count == 4
    assert group.authors == ["Amy|Bob", "N/A", "Zed"]
