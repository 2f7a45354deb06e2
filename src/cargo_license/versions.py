"""Version precedence ordering for package versions.

Cargo versions follow Semantic Versioning 2.0. Strings that do not parse as
semver still need a place in the ordering, so they sort after every valid
version, lexicographically among themselves.
"""

import re
from typing import Any

SEMVER_PATTERN = re.compile(
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-([0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?$"
)


def _prerelease_key(prerelease: str) -> tuple[Any, ...]:
    # Numeric identifiers compare numerically and sort before alphanumeric ones.
    return tuple(
        (0, int(identifier), "") if identifier.isdigit() else (1, 0, identifier)
        for identifier in prerelease.split(".")
    )


def version_key(version: str) -> tuple[Any, ...]:
    """Return a sort key implementing semver precedence.

    A pre-release sorts before the corresponding release, and a shorter
    pre-release sorts before a longer one with the same prefix. Build
    metadata does not affect precedence; the raw string is the final
    tie-break so the order is total.

    Args:
        version: Version string such as "1.0.0-rc.1".

    Returns:
        A tuple usable as a ``sorted`` key.
    """
    match = SEMVER_PATTERN.match(version)
    if not match:
        return (1, version)

    major, minor, patch, prerelease = match.groups()
    if prerelease is None:
        release_key: tuple[Any, ...] = (1,)
    else:
        release_key = (0, _prerelease_key(prerelease))

    return (0, int(major), int(minor), int(patch), release_key, version)


def sort_versions(versions: list[str]) -> list[str]:
    """Return distinct versions in ascending precedence order."""
    return sorted(set(versions), key=version_key)
