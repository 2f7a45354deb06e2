"""Tab-separated values reporter.

Writes a header row followed by one row per dependency record. Absent
values are written as empty fields.
"""

import csv
import io

from cargo_license.models import DependencyDetails
from cargo_license.reporters.base import PlainReporter

FIELDS = [
    "name",
    "version",
    "authors",
    "repository",
    "license",
    "license_file",
    "description",
]


class TsvReporter(PlainReporter):
    """Reporter producing tab-separated rows with a header."""

    def render(self, dependencies: list[DependencyDetails]) -> str:
        buffer = io.StringIO()
        writer = csv.DictWriter(
            buffer,
            fieldnames=FIELDS,
            delimiter="\t",
            lineterminator="\n",
        )
        writer.writeheader()
        for dependency in dependencies:
            record = dependency.to_dict()
            writer.writerow({key: value or "" for key, value in record.items()})
        return buffer.getvalue()

    @property
    def format_name(self) -> str:
        return "tsv"
