"""Output reporters for dependency license reports.

This module provides reporters for rendering dependency records as bundled
text, an aligned table, JSON or TSV.
"""

from cargo_license.reporters.base import BaseReporter, PlainReporter
from cargo_license.reporters.bundle import LicenseBundleReporter
from cargo_license.reporters.json import JsonReporter
from cargo_license.reporters.table import PackageTableReporter
from cargo_license.reporters.tsv import TsvReporter

__all__ = [
    "BaseReporter",
    "JsonReporter",
    "LicenseBundleReporter",
    "PackageTableReporter",
    "PlainReporter",
    "TsvReporter",
    "get_reporter",
]


def get_reporter(
    json: bool = False,
    tsv: bool = False,
    do_not_bundle: bool = False,
    display_authors: bool = False,
) -> BaseReporter:
    """Get the reporter for the selected output flags.

    Args:
        json: Select JSON output.
        tsv: Select TSV output.
        do_not_bundle: Select the one-row-per-package table.
        display_authors: Include authors in the text formats.

    Returns:
        Reporter instance.

    Raises:
        ValueError: If both JSON and TSV output are requested.
    """
    if json and tsv:
        raise ValueError("Cannot specify both --json and --tsv")
    if tsv:
        return TsvReporter(display_authors=display_authors)
    if json:
        return JsonReporter(display_authors=display_authors)
    if do_not_bundle:
        return PackageTableReporter(display_authors=display_authors)
    return LicenseBundleReporter(display_authors=display_authors)
