"""Reporter printing one aligned row per package.

Used with ``--do-not-bundle``. Versions of a package that share a license
are merged into a single row.
"""

from rich.console import Console
from rich.measure import Measurement
from rich.segment import Segment, SegmentLines
from rich.table import Table
from rich.text import Text

from cargo_license.grouping import group_by_package
from cargo_license.models import DependencyDetails
from cargo_license.reporters.base import BaseReporter

NAME_STYLE = "bold green"
MAX_TABLE_WIDTH = 100_000


def _rstrip_line(line: list[Segment]) -> list[Segment]:
    """Drop the padding rich adds after the last column."""
    while line and not line[-1].text.strip():
        line = line[:-1]
    if line:
        last = line[-1]
        line = line[:-1] + [Segment(last.text.rstrip(), last.style, last.control)]
    return line


class PackageTableReporter(BaseReporter):
    """Reporter that prints name, versions, license and optionally authors."""

    def render(self, dependencies: list[DependencyDetails]) -> Table:
        table = Table(
            box=None,
            show_header=False,
            pad_edge=False,
            padding=(0, 2, 0, 0),
        )
        table.add_column("name", style=NAME_STYLE, no_wrap=True)
        table.add_column("version", no_wrap=True)
        table.add_column("license", no_wrap=True)
        if self.display_authors:
            table.add_column("authors", no_wrap=True)

        for entry in group_by_package(dependencies):
            row = [entry.name, entry.version_list, entry.license_label]
            if self.display_authors:
                row.append(entry.authors_label)
            table.add_row(*(Text(cell) for cell in row))
        return table

    def write(self, dependencies: list[DependencyDetails], console: Console) -> None:
        """Print the table at its natural width, regardless of the terminal width."""
        table = self.render(dependencies)
        if not table.row_count:
            return

        width = Measurement.get(
            console, console.options.update_width(MAX_TABLE_WIDTH), table
        ).maximum
        lines = console.render_lines(table, console.options.update_width(width), pad=False)
        console.print(
            SegmentLines([_rstrip_line(line) for line in lines], new_lines=True),
            soft_wrap=True,
            end="",
        )

    @property
    def format_name(self) -> str:
        return "table"
