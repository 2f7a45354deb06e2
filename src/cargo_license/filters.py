"""Dependency graph filtering.

Selects the packages to report from a ``cargo metadata`` document by
walking the resolve graph from the root package, following only the
dependency kinds the options allow.
"""

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any, Optional

from cargo_license.metadata import BaseMetadataProvider, MetadataError
from cargo_license.models import DependencyDetails, GetDependenciesOpt
from cargo_license.versions import version_key

logger = logging.getLogger(__name__)

# ``kind`` values of a resolve edge; normal dependencies are reported as null.
NORMAL = None
DEVELOPMENT = "dev"
BUILD = "build"


def root_package(metadata: dict[str, Any]) -> Optional[dict[str, Any]]:
    """Return the root package of the workspace, if there is one.

    The resolve root is used when the graph was resolved. Otherwise the root
    is the package whose manifest sits directly in the workspace root; a
    virtual workspace has none.
    """
    packages = metadata.get("packages") or []
    resolve = metadata.get("resolve") or {}

    root_id = resolve.get("root")
    if root_id is not None:
        for package in packages:
            if package["id"] == root_id:
                return package
        return None

    workspace_root = metadata.get("workspace_root")
    if workspace_root is None:
        return None
    root_manifest = Path(workspace_root) / "Cargo.toml"
    for package in packages:
        if Path(package.get("manifest_path", "")) == root_manifest:
            return package
    return None


def _root_ids(metadata: dict[str, Any]) -> list[str]:
    root = root_package(metadata)
    if root is not None:
        return [root["id"]]
    return list(metadata.get("workspace_members") or [])


def _edge_allowed(dep: dict[str, Any], opt: GetDependenciesOpt) -> bool:
    dep_kinds = dep.get("dep_kinds")
    if not dep_kinds:
        return True

    for dep_kind in dep_kinds:
        kind = dep_kind.get("kind")
        if kind == NORMAL:
            return True
        if kind == DEVELOPMENT and not opt.avoid_dev_deps:
            return True
        if kind == BUILD and not opt.avoid_build_deps:
            return True
    return False


def _warn_missing_dep_kinds(nodes: dict[str, Any], opt: GetDependenciesOpt) -> None:
    missing = any(
        "deps" not in node or any(not dep.get("dep_kinds") for dep in node["deps"])
        for node in nodes.values()
    )
    if not missing:
        return
    if opt.avoid_dev_deps:
        logger.warning("Cargo 1.41+ is required for `--avoid-dev-deps`")
    if opt.avoid_build_deps:
        logger.warning("Cargo 1.41+ is required for `--avoid-build-deps`")


def _neighbors(
    node: dict[str, Any], opt: GetDependenciesOpt
) -> Iterator[str]:
    if "deps" not in node:
        # Cargo before 1.41 only lists dependency ids, without kinds.
        yield from node.get("dependencies", [])
        return

    for dep in node["deps"]:
        if _edge_allowed(dep, opt):
            yield dep["pkg"]


def connected_package_ids(
    metadata: dict[str, Any], opt: GetDependenciesOpt
) -> set[str]:
    """Return the ids of all packages selected by the options.

    Args:
        metadata: Decoded ``cargo metadata`` document.
        opt: Graph selection flags.

    Returns:
        Set of package ids to report.

    Raises:
        MetadataError: If the document has no resolve graph and
            ``root_only`` is not set.
    """
    roots = _root_ids(metadata)
    if opt.root_only:
        return set(roots)

    resolve = metadata.get("resolve")
    if not resolve or "nodes" not in resolve:
        raise MetadataError(
            "Metadata has no resolved dependency graph; "
            "it was probably generated with --no-deps"
        )

    nodes = {node["id"]: node for node in resolve["nodes"]}
    _warn_missing_dep_kinds(nodes, opt)

    if opt.direct_deps_only:
        direct = set(roots)
        for package_id in roots:
            if package_id in nodes:
                direct.update(_neighbors(nodes[package_id], opt))
        return direct

    connected: set[str] = set()
    stack = list(roots)
    while stack:
        package_id = stack.pop()
        if package_id in connected:
            continue
        connected.add(package_id)
        if package_id in nodes:
            stack.extend(_neighbors(nodes[package_id], opt))
    return connected


def _sort_key(details: DependencyDetails) -> tuple[Any, ...]:
    return (details.name.lower(), details.name, version_key(details.version))


def get_dependencies(
    metadata: dict[str, Any], opt: GetDependenciesOpt
) -> list[DependencyDetails]:
    """Build the filtered, sorted and de-duplicated dependency list.

    Args:
        metadata: Decoded ``cargo metadata`` document.
        opt: Graph selection flags.

    Returns:
        One DependencyDetails per selected package, sorted by name and version.

    Raises:
        MetadataError: If the document is malformed.
    """
    if "packages" not in metadata:
        raise MetadataError("Metadata has no `packages` list")

    try:
        connected = connected_package_ids(metadata, opt)
    except (KeyError, TypeError, AttributeError) as e:
        raise MetadataError("Malformed resolve graph in metadata") from e

    try:
        details = [
            DependencyDetails.from_package(package)
            for package in metadata["packages"]
            if package["id"] in connected
        ]
    except (KeyError, TypeError, AttributeError) as e:
        raise MetadataError("Malformed package entry in metadata") from e

    details.sort(key=_sort_key)
    return list(dict.fromkeys(details))


def get_dependencies_from_provider(
    provider: BaseMetadataProvider, opt: GetDependenciesOpt
) -> list[DependencyDetails]:
    """Fetch metadata from a provider and return the filtered dependencies."""
    metadata = provider.fetch()
    dependencies = get_dependencies(metadata, opt)
    logger.debug(
        f"Selected {len(dependencies)} of {len(metadata['packages'])} packages "
        f"from {provider.source_name}"
    )
    return dependencies
