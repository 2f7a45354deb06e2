"""Command-line interface for cargo_license.

Provides the ``cargo-license`` entry point, which also works as the cargo
subcommand ``cargo license``.
"""

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from cargo_license import __version__
from cargo_license.filters import get_dependencies_from_provider
from cargo_license.metadata import MetadataError, get_provider
from cargo_license.models import GetDependenciesOpt
from cargo_license.reporters import get_reporter

app = typer.Typer(
    name="cargo-license",
    help="Cargo subcommand to see licenses of dependencies.",
    add_completion=False,
)

err_console = Console(stderr=True, highlight=False)

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s: %(message)s",
)
logger = logging.getLogger("cargo_license")


class ColorChoice(str, Enum):
    auto = "auto"
    always = "always"
    never = "never"


def _setup_logging(verbose: bool) -> None:
    """Configure logging level based on verbosity flag."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.getLogger("cargo_license").setLevel(level)


def _make_console(color: ColorChoice) -> Console:
    """Create the stdout console for the requested colour mode."""
    if color is ColorChoice.always:
        return Console(force_terminal=True, highlight=False)
    if color is ColorChoice.never:
        return Console(color_system=None, highlight=False)
    return Console(highlight=False)


def _split_features(features: Optional[list[str]]) -> list[str]:
    """Flatten repeated ``--features`` values separated by commas or spaces."""
    if not features:
        return []
    return [
        feature
        for value in features
        for feature in value.replace(",", " ").split()
    ]


def _print_error(error: BaseException) -> None:
    """Print an error and its chain of causes to stderr."""
    err_console.print(f"[red]Error:[/red] {escape(str(error))}", soft_wrap=True)
    cause = error.__cause__
    while cause is not None:
        err_console.print(f"  caused by: {escape(str(cause))}", soft_wrap=True)
        cause = cause.__cause__


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"cargo-license {__version__}")
        raise typer.Exit()


@app.command()
def report(
    authors: Annotated[
        bool,
        typer.Option("--authors", "-a", help="Display crate authors"),
    ] = False,
    do_not_bundle: Annotated[
        bool,
        typer.Option("--do-not-bundle", "-d", help="Output one license per line."),
    ] = False,
    tsv: Annotated[
        bool,
        typer.Option("--tsv", "-t", help="Detailed output as tab-separated-values."),
    ] = False,
    json_output: Annotated[
        bool,
        typer.Option("--json", "-j", help="Detailed output as JSON."),
    ] = False,
    no_deps: Annotated[
        bool,
        typer.Option(
            "--no-deps",
            "--root-only",
            help="Output information only about the root package and don't fetch dependencies.",
        ),
    ] = False,
    direct_deps_only: Annotated[
        bool,
        typer.Option(
            "--direct-deps-only",
            help="Output information only about the root package and its direct dependencies.",
        ),
    ] = False,
    avoid_dev_deps: Annotated[
        bool,
        typer.Option("--avoid-dev-deps", help="Exclude development dependencies"),
    ] = False,
    avoid_build_deps: Annotated[
        bool,
        typer.Option("--avoid-build-deps", help="Exclude build dependencies"),
    ] = False,
    features: Annotated[
        Optional[list[str]],
        typer.Option(
            "--features",
            metavar="FEATURES",
            help="Comma or space separated list of features to activate.",
        ),
    ] = None,
    all_features: Annotated[
        bool,
        typer.Option("--all-features", help="Activate all available features."),
    ] = False,
    no_default_features: Annotated[
        bool,
        typer.Option("--no-default-features", help="Deactivate default features"),
    ] = False,
    manifest_path: Annotated[
        Optional[Path],
        typer.Option("--manifest-path", metavar="PATH", help="Path to Cargo.toml."),
    ] = None,
    current_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--current-dir",
            metavar="CURRENT_DIR",
            help="Current directory of the cargo metadata process.",
            exists=True,
            file_okay=False,
        ),
    ] = None,
    filter_platform: Annotated[
        Optional[str],
        typer.Option(
            "--filter-platform",
            metavar="TRIPLE",
            help="Only include resolve dependencies matching the given target-triple.",
        ),
    ] = None,
    color: Annotated[
        ColorChoice,
        typer.Option("--color", help="Coloring", case_sensitive=False),
    ] = ColorChoice.auto,
    metadata_file: Annotated[
        Optional[Path],
        typer.Option(
            "--metadata-file",
            metavar="PATH",
            help="Read saved `cargo metadata --format-version 1` output instead of running cargo.",
        ),
    ] = None,
    cargo: Annotated[
        str,
        typer.Option("--cargo", envvar="CARGO", help="Path to the cargo executable."),
    ] = "cargo",
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output"),
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = None,
) -> None:
    """Report the licenses of a crate's dependencies.

    Exit codes:
        0 - Report written
        1 - Metadata could not be obtained or options conflict
    """
    _setup_logging(verbose)

    try:
        reporter = get_reporter(
            json=json_output,
            tsv=tsv,
            do_not_bundle=do_not_bundle,
            display_authors=authors,
        )
    except ValueError as e:
        _print_error(e)
        raise typer.Exit(code=1)

    provider = get_provider(
        metadata_file=metadata_file,
        cargo=cargo,
        manifest_path=manifest_path,
        current_dir=current_dir,
        features=_split_features(features),
        all_features=all_features,
        no_default_features=no_default_features,
        filter_platform=filter_platform,
        no_deps=no_deps,
    )
    opt = GetDependenciesOpt(
        root_only=no_deps,
        direct_deps_only=direct_deps_only,
        avoid_dev_deps=avoid_dev_deps,
        avoid_build_deps=avoid_build_deps,
    )

    try:
        dependencies = get_dependencies_from_provider(provider, opt)
    except MetadataError as e:
        _print_error(e)
        raise typer.Exit(code=1)

    logger.debug(f"Writing {len(dependencies)} packages as {reporter.format_name}")
    reporter.write(dependencies, _make_console(color))


def run() -> None:
    """Console script entry point.

    Drops the extra ``license`` argument cargo passes when the tool is
    invoked as ``cargo license``.
    """
    args = sys.argv[1:]
    if args[:1] == ["license"]:
        args = args[1:]
    app(args=args, prog_name="cargo license")


if __name__ == "__main__":
    run()
