"""Metadata provider that runs ``cargo metadata``.

The command is built from the manifest, feature and platform options, run
once as a subprocess, and its JSON output decoded.
"""

import json
import logging
import subprocess
from pathlib import Path
from typing import Any, Optional

from cargo_license.metadata.base import BaseMetadataProvider, MetadataError

logger = logging.getLogger(__name__)


class CargoMetadataProvider(BaseMetadataProvider):
    """Provider that queries cargo for the workspace metadata.

    Attributes:
        cargo: Path or name of the cargo executable.
        manifest_path: Optional path to ``Cargo.toml``.
        current_dir: Optional working directory for the cargo process.
        features: Features to activate.
        all_features: Activate all available features.
        no_default_features: Deactivate the default feature set.
        filter_platform: Optional target triple to filter the resolve graph by.
        no_deps: Skip dependency resolution and report workspace members only.
    """

    def __init__(
        self,
        cargo: str = "cargo",
        manifest_path: Optional[Path] = None,
        current_dir: Optional[Path] = None,
        features: Optional[list[str]] = None,
        all_features: bool = False,
        no_default_features: bool = False,
        filter_platform: Optional[str] = None,
        no_deps: bool = False,
    ) -> None:
        self.cargo = cargo
        self.manifest_path = manifest_path
        self.current_dir = current_dir
        self.features = features or []
        self.all_features = all_features
        self.no_default_features = no_default_features
        self.filter_platform = filter_platform
        self.no_deps = no_deps

    @property
    def source_name(self) -> str:
        return "cargo metadata"

    def command(self) -> list[str]:
        """Return the cargo command line to execute."""
        cmd = [self.cargo, "metadata", "--format-version", "1"]
        if self.manifest_path is not None:
            cmd += ["--manifest-path", str(self.manifest_path)]
        if self.all_features:
            cmd.append("--all-features")
        if self.no_default_features:
            cmd.append("--no-default-features")
        if self.features:
            cmd += ["--features", ",".join(self.features)]
        if self.filter_platform:
            cmd += ["--filter-platform", self.filter_platform]
        if self.no_deps:
            cmd.append("--no-deps")
        return cmd

    def resolved_manifest_path(self) -> Optional[Path]:
        """Return the manifest path as cargo will see it.

        Cargo resolves a relative manifest path against its own working
        directory, which is ``current_dir`` when one is given.
        """
        if self.manifest_path is None:
            return None
        if self.current_dir is not None and not self.manifest_path.is_absolute():
            return self.current_dir / self.manifest_path
        return self.manifest_path

    def fetch(self) -> dict[str, Any]:
        """Run ``cargo metadata`` and decode its output.

        Returns:
            The decoded metadata document.

        Raises:
            MetadataError: If the manifest does not exist, cargo cannot be
                started, exits with an error, or prints invalid JSON.
        """
        manifest = self.resolved_manifest_path()
        if manifest is not None and not manifest.is_file():
            raise MetadataError(f"Manifest not found: {manifest}")

        cmd = self.command()
        logger.debug(f"Running: {' '.join(cmd)}")

        try:
            result = subprocess.run(
                cmd,
                cwd=self.current_dir,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            raise MetadataError(f"Could not run `{self.cargo} metadata`") from e
        except UnicodeDecodeError as e:
            raise MetadataError(f"Could not decode output of `{self.cargo} metadata`") from e

        if result.returncode != 0:
            raise MetadataError(
                f"`{self.cargo} metadata` exited with status {result.returncode}: "
                f"{result.stderr.strip()}"
            )

        try:
            metadata = json.loads(result.stdout)
        except json.JSONDecodeError as e:
            raise MetadataError(f"Invalid JSON from `{self.cargo} metadata`") from e

        if not isinstance(metadata, dict):
            raise MetadataError(f"Unexpected output from `{self.cargo} metadata`")

        return metadata
